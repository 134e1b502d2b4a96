# notas/http.py
import logging
from typing import Optional

from fastapi import HTTPException, Request
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from notas.config import NotasConfig
from notas.library import ListingError, list_files, open_document

logger = logging.getLogger(__name__)


def get_config(request: Request) -> NotasConfig:
    return request.app.state.config


def listing_response(config: NotasConfig) -> JSONResponse:
    try:
        files = list_files(config)
    except ListingError as e:
        logger.error("Listing failed: %s", e)
        return JSONResponse({"error": str(e)}, status_code=500)
    return JSONResponse([f.to_dict() for f in files])


def document_response(config: NotasConfig, name: Optional[str]):
    # no name: behave like an unmatched route
    if not name:
        raise HTTPException(status_code=404, detail="Not Found")
    doc = open_document(config, name)
    if doc is None:
        return PlainTextResponse("Not found", status_code=404)
    return FileResponse(
        path=str(doc.path),
        media_type=doc.media_type,
        filename=doc.name,
        stat_result=doc.stat,
        content_disposition_type="inline",
    )
