# file_server.py
"""
Development API for the viewer front-end.
- GET /api/list            -> [{"name", "path"}] with /api/file?name=... locators
- GET /api/file?name=...   -> the PDF itself, or 404
The notas folder is created on first listing; read errors come back as 500.
"""

from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI

from notas.config import QUERY, NotasConfig, configure_logging, load_config
from notas.http import document_response, get_config, listing_response


def create_app(config: Optional[NotasConfig] = None) -> FastAPI:
    if config is None:
        config = load_config(locator=QUERY, create_missing=True, strict=True)

    app = FastAPI(title="notas dev server")
    app.state.config = config

    @app.get("/api/list")
    def list_notas(cfg: NotasConfig = Depends(get_config)):
        return listing_response(cfg)

    @app.get(config.file_endpoint)
    def get_file(name: Optional[str] = None, cfg: NotasConfig = Depends(get_config)):
        return document_response(cfg, name)

    return app


app = create_app()


if __name__ == "__main__":
    configure_logging()
    uvicorn.run("file_server:app", host="127.0.0.1", port=8502, reload=True)
