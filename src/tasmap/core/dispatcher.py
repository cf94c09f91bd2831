"""
Map dispatch.

Selects one of four rendering strategies from the coordinate format and the
requested map type. Only grid maps distinguish vouchered records; plain and
web maps draw every record the same way.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple, Union

from ..engine import RecordList, RenderOptions, exact_map, grid_map, voucher_map, web_map
from ..utils.logging import get_logger
from .domain import CoordinateFormat, MapType

logger = get_logger(__name__)


class RenderStrategy(str, Enum):
    VOUCHER_GRID = "voucher_grid"
    GRID = "grid"
    EXACT = "exact"
    WEB = "web"


DISPATCH_TABLE: Dict[Tuple[CoordinateFormat, MapType], RenderStrategy] = {
    (CoordinateFormat.VOUCHER, MapType.GRID): RenderStrategy.VOUCHER_GRID,
    (CoordinateFormat.NO_VOUCHER, MapType.GRID): RenderStrategy.GRID,
    (CoordinateFormat.VOUCHER, MapType.PLAIN): RenderStrategy.EXACT,
    (CoordinateFormat.NO_VOUCHER, MapType.PLAIN): RenderStrategy.EXACT,
    (CoordinateFormat.VOUCHER, MapType.WEB): RenderStrategy.WEB,
    (CoordinateFormat.NO_VOUCHER, MapType.WEB): RenderStrategy.WEB,
}

StrategyFunction = Callable[[RecordList, Optional[RenderOptions]], str]

STRATEGY_FUNCTIONS: Dict[RenderStrategy, StrategyFunction] = {
    RenderStrategy.VOUCHER_GRID: voucher_map,
    RenderStrategy.GRID: grid_map,
    RenderStrategy.EXACT: exact_map,
    RenderStrategy.WEB: web_map,
}


def select_strategy(
    coordinate_format: CoordinateFormat, map_type: Union[MapType, str]
) -> Optional[RenderStrategy]:
    """Look up the strategy for a format and map type; None when there is none."""
    if not isinstance(map_type, MapType):
        map_type = MapType.parse(map_type)
        if not isinstance(map_type, MapType):
            return None
    return DISPATCH_TABLE.get((coordinate_format, map_type))


class MapDispatcher:
    """Render a record list with the strategy chosen from the dispatch table."""

    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()

    def render(
        self,
        record_list: RecordList,
        coordinate_format: CoordinateFormat,
        map_type: Union[MapType, str],
    ) -> str:
        strategy = select_strategy(coordinate_format, map_type)
        if strategy is None:
            logger.info(
                "No rendering strategy for map type",
                map_type=getattr(map_type, "value", map_type),
                coordinate_format=coordinate_format.value,
            )
            return ""

        logger.debug(
            "Rendering map",
            strategy=strategy.value,
            records=len(record_list),
        )
        return STRATEGY_FUNCTIONS[strategy](record_list, self.options)
