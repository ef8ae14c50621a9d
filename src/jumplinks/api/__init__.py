import os

from fastapi import APIRouter, FastAPI

from .routes import settings


def create_app(config_obj=None, config_path: str | None = None) -> FastAPI:
    from ..config import Config
    from ..consts import CONFIG_FILE_DEFAULT
    from ..i18n import initialize

    if config_path is None:
        config_path = os.environ.get("CONFIG_FILE", CONFIG_FILE_DEFAULT)
    if config_obj is None:
        config_obj = Config.load_from_file(config_path)

    initialize(ui_language=config_obj.language)

    app = FastAPI(title="Jumplinks Settings API")

    app.state.config = config_obj
    app.state.config_path = config_path

    api_router = APIRouter(prefix="/api/v1")
    api_router.include_router(settings.router)
    app.include_router(api_router)

    return app
