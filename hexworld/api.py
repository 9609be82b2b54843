"""HTTP interface: batch location lookup and the static UI page."""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, PlainTextResponse

from hexworld import config
from hexworld.schemas import HexCoord, Location
from hexworld.storage import HexMap

logger = logging.getLogger(__name__)

UI_ENDPOINT = "/"
LOCATION_ENDPOINT = "/locations"

INTERNAL_ERROR_BODY = "500 - Internal error"


def _internal_error() -> PlainTextResponse:
    return PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)


def create_app(hex_map: HexMap, ui_path: Optional[Path] = None) -> FastAPI:
    """Build the app around an explicitly constructed map.

    Args:
        hex_map: Map every request resolves against
        ui_path: HTML file served at ``/`` (defaults to the bundled UI)

    Returns:
        FastAPI application with the map on ``app.state.hex_map``
    """
    app = FastAPI(title="hexworld", docs_url=None, redoc_url=None)
    app.state.hex_map = hex_map
    app.state.ui_path = Path(ui_path or config.UI_PATH)

    @app.exception_handler(RequestValidationError)
    async def malformed_request_handler(request: Request, exc: RequestValidationError):
        logger.error(f"Malformed request to {request.url.path}: {exc.errors()}")
        return _internal_error()

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
        return _internal_error()

    @app.get(UI_ENDPOINT, include_in_schema=False)
    def serve_ui(request: Request) -> FileResponse:
        ui_file = request.app.state.ui_path
        if not ui_file.is_file():
            logger.warning(f"UI file not found: {ui_file}")
            raise HTTPException(status_code=404, detail="Not Found")
        return FileResponse(ui_file, media_type="text/html")

    @app.post(LOCATION_ENDPOINT, response_model=list[Location])
    def serve_locations(coords: list[HexCoord], request: Request) -> list[Location]:
        locations = request.app.state.hex_map.get_many(coords)
        logger.info(f"Resolved {len(locations)} locations")
        return locations

    return app
