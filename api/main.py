# api/main.py
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notas.config import STATIC, NotasConfig, configure_logging, load_config
from notas.http import document_response, get_config, listing_response


def create_app(config: Optional[NotasConfig] = None) -> FastAPI:
    """Hosted listing: static locators, missing folder lists as empty."""
    if config is None:
        config = load_config(locator=STATIC, create_missing=False, strict=False)

    app = FastAPI(title="notas API")
    app.state.config = config
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.get("/list-files")
    def list_notas(cfg: NotasConfig = Depends(get_config)):
        return listing_response(cfg)

    @app.get(config.static_prefix.rstrip("/") + "/{name}")
    def get_nota(name: str, cfg: NotasConfig = Depends(get_config)):
        return document_response(cfg, name)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    configure_logging()
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000)
