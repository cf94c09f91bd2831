"""HTML page rendering with Jinja2 templates."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from ..core.domain import MapType, RenderedMap
from ..utils.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_TEXT = (
    "Please enter array of coordinates, in comma-delimited format, in decimal degrees"
)

EXAMPLE_COORDINATES = """-42.12344,147.43321
-41.34221,145.43442
-43.22134,146.35521
-43.22133,146.35522"""

MAP_TYPE_LABELS = {
    MapType.GRID: "Grid map",
    MapType.PLAIN: "Exact locations",
    MapType.WEB: "Web map",
}


class PageRenderer:
    """Builds the data-entry and map pages from the template directory."""

    def __init__(self, template_dir: Path):
        self.template_dir = Path(template_dir)
        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.template_dir)), autoescape=True
        )
        logger.debug("Page renderer initialized", template_dir=str(self.template_dir))

    def data_entry_page(self) -> str:
        template = self.jinja_env.get_template("data_entry.html")
        return template.render(
            title="Data entry form",
            taxon=None,
            placeholder_text=PLACEHOLDER_TEXT,
            example=EXAMPLE_COORDINATES,
            map_types=[(t.value, label) for t, label in MAP_TYPE_LABELS.items()],
        )

    def map_page(
        self,
        taxon: str,
        rendered: Optional[RenderedMap] = None,
        message: Optional[str] = None,
    ) -> str:
        """Render the result page: the inline map, or the message explaining its absence."""
        template = self.jinja_env.get_template("map.html")
        return template.render(
            title=f"Preview map for {taxon}",
            taxon=taxon,
            svg_map=rendered.svg_body if rendered else None,
            file_name=rendered.file_name if rendered else None,
            message=message,
        )

    def stylesheet(self) -> str:
        return (self.template_dir / "style.css").read_text(encoding="utf-8")
