"""
HTTP endpoints for the tasmap service.

Serves three pages: "/" for data entry, "/map" for the generated map shown
inline, and "/mapfile" for the same map as a downloadable SVG file.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Form
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from .. import __version__
from ..core.cache import RenderCache
from ..core.domain import CoordinateInput
from ..core.generator import MapGenerator
from ..errors import MapNotAvailableError, TasmapError
from ..utils.logging import get_logger
from ..utils.request_context import bind_map_request
from .dependencies import get_map_generator, get_page_renderer, get_render_cache
from .pages import PageRenderer

logger = get_logger(__name__)

router = APIRouter(tags=["maps"])

SVG_MEDIA_TYPE = "image/svg+xml"


def attachment_disposition(file_name: str) -> str:
    """Build a Content-Disposition value that survives any taxon name.

    Header values must be latin-1, so names outside plain ASCII get an ASCII
    ``filename`` fallback and the full name as an RFC 5987 ``filename*``.
    Control characters never reach the header.
    """
    file_name = "".join(ch for ch in file_name if ch.isprintable())
    quoted = quote(file_name, safe="")
    if quoted == file_name:
        return f"attachment; filename={file_name}"

    fallback = file_name.encode("ascii", "replace").decode("ascii")
    fallback = fallback.replace("?", "_").replace('"', "").replace("\\", "")
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quoted}"


@router.get("/", response_class=HTMLResponse)
def data_entry(pages: PageRenderer = Depends(get_page_renderer)) -> HTMLResponse:
    """Present the form for data entry."""
    return HTMLResponse(pages.data_entry_page())


@router.post("/map", response_class=HTMLResponse)
def map_display(
    taxon: str = Form(""),
    maptype: str = Form(""),
    coordinates: str = Form(""),
    generator: MapGenerator = Depends(get_map_generator),
    pages: PageRenderer = Depends(get_page_renderer),
) -> HTMLResponse:
    """Generate a map from the submitted form and show it inline."""
    coordinate_input = CoordinateInput.from_form(taxon, maptype, coordinates)
    bind_map_request(coordinate_input.taxon, coordinate_input.map_type_name)

    try:
        rendered = generator.generate(coordinate_input)
    except TasmapError as exc:
        logger.info("Map request rejected", error_code=exc.error_code)
        return HTMLResponse(
            pages.map_page(coordinate_input.taxon, message=exc.message),
            status_code=exc.http_status,
        )

    return HTMLResponse(pages.map_page(rendered.taxon_name, rendered=rendered))


@router.get("/map")
def map_redirect() -> RedirectResponse:
    """The map page only answers form submissions; send browsers to the form."""
    return RedirectResponse(url="/", status_code=301)


@router.get("/mapfile")
def map_file(cache: RenderCache = Depends(get_render_cache)) -> Response:
    """Serve the map in memory as an SVG attachment."""
    rendered = cache.load()
    if rendered is None:
        logger.warning("Attempt to access map from memory before a map is generated")
        error = MapNotAvailableError()
        return PlainTextResponse(error.message, status_code=error.http_status)

    return Response(
        content=rendered.svg_body,
        media_type=SVG_MEDIA_TYPE,
        headers={"Content-Disposition": attachment_disposition(rendered.file_name)},
    )


@router.get("/style.css")
def stylesheet(pages: PageRenderer = Depends(get_page_renderer)) -> Response:
    return Response(content=pages.stylesheet(), media_type="text/css")


@router.get("/health")
def health(cache: RenderCache = Depends(get_render_cache)):
    return {
        "status": "healthy",
        "version": __version__,
        "map_in_memory": cache.is_present,
    }
