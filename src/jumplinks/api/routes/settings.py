import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...config import Config, save_settings
from ...errors import ConfigException
from ...host import RenderContext
from ...settings import get_defaults, merge_settings
from ...tree import create_composer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


class SettingsResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]


class FieldsResponse(BaseModel):
    success: bool = True
    fields: dict[str, Any]
    scripts: list[str]
    styles: list[str]
    js_config: dict[str, Any]


class SettingsRequest(BaseModel):
    settings: dict[str, Any]


class SettingsSaveResponse(BaseModel):
    success: bool
    message: str | None = None
    data: dict[str, Any] | None = None
    error: str | None = None


def _config(request: Request) -> Config:
    return request.app.state.config


@router.get("/defaults", response_model=SettingsResponse)
def get_default_settings():
    return SettingsResponse(data=get_defaults())


@router.get("", response_model=SettingsResponse)
def get_settings(request: Request):
    try:
        return SettingsResponse(data=_config(request).settings().to_persisted())
    except ConfigException as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/fields", response_model=FieldsResponse)
def get_fields(request: Request):
    context = RenderContext()
    composer = create_composer(_config(request).host)
    root = composer.get_input_fields(context)

    return FieldsResponse(
        fields=root.model_dump(mode="json"),
        scripts=context.scripts,
        styles=context.styles,
        js_config=context.js_config,
    )


@router.post("/validate", response_model=SettingsSaveResponse)
def validate_settings(body: SettingsRequest):
    try:
        merged = merge_settings(body.settings)
        return SettingsSaveResponse(
            success=True,
            message="Settings are valid",
            data=merged.to_persisted(),
        )
    except ConfigException as e:
        return SettingsSaveResponse(success=False, error=str(e))


@router.post("", response_model=SettingsSaveResponse)
def save(request: Request, body: SettingsRequest):
    config = _config(request)

    try:
        update = merge_settings(body.settings)
        merged = config.settings().model_copy(update=update.model_dump(exclude_unset=True))
        save_settings(request.app.state.config_path, merged)
    except ConfigException as e:
        logger.warning(f"Rejected settings update: {e}")
        return JSONResponse(
            status_code=400,
            content=SettingsSaveResponse(success=False, error=str(e)).model_dump(),
        )

    config.jumplinks = merged.to_persisted()
    return SettingsSaveResponse(
        success=True,
        message="Settings saved successfully",
        data=config.jumplinks,
    )
