"""Application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI

from invoicedash.api import get_api_router
from invoicedash.core.config import get_config
from invoicedash.core.startup import bootstrap
from invoicedash.web.cache import PageCache


def create_app() -> FastAPI:
    cfg = get_config()
    app = FastAPI(title=cfg.APP_NAME, version=cfg.APP_VERSION)
    app.state.page_cache = PageCache()
    app.include_router(get_api_router())
    return app


# Expose ASGI app for `uvicorn invoicedash.main:app`.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    bootstrap()
    cfg = get_config()
    uvicorn.run(app, host=cfg.API_HOST, port=cfg.API_PORT)
