import logging

from fastapi import FastAPI
from app.geo_routes import router as geo_router
from app.config import build_options_from_env
from app.logging_setup import configure_logging, describe_options, request_id_middleware


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="geo-uri-codec")
    app.middleware("http")(request_id_middleware)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(geo_router)

    app.state.geo_options = build_options_from_env()
    logging.getLogger(__name__).info(
        "geo uri service ready", extra={"options": describe_options(app.state.geo_options)}
    )
    return app

app = create_app()
