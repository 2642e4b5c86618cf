"""HTTP API for interacting with contrast-tools functionality."""

from __future__ import annotations

from typing import Dict, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from .commands import (
    CommandError,
    ContrastParams,
    CorrectParams,
    LuminanceParams,
    compare_colors,
    correct_color,
    measure_luminance,
)
from .runtime import ConfigurationError, application_services


class CorrectRequest(BaseModel):
    color: str
    background: Optional[str] = None
    contrast: Optional[float] = Field(default=None, ge=1.0, allow_inf_nan=False)


class CorrectResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    color: str
    corrected: str
    changed: bool
    background: str
    desired_contrast: float
    target_luminance: float
    luminance: float
    contrast: float


class LuminanceResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    color: str
    normalized: str
    luminance: float


class ContrastResponseModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    foreground: str
    background: str
    ratio: float
    levels: Dict[str, bool]


def get_services():
    try:
        with application_services(console=None) as services:
            yield services
    except ConfigurationError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def create_app() -> FastAPI:
    app = FastAPI(title="Contrast Tools API")

    @app.post("/correct", response_model=CorrectResponseModel)
    def run_correct(
        request: CorrectRequest, services=Depends(get_services)
    ) -> CorrectResponseModel:
        try:
            result = correct_color(
                services,
                CorrectParams(
                    color=request.color,
                    background=request.background,
                    contrast=request.contrast,
                ),
            )
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return CorrectResponseModel.model_validate(result)

    @app.get("/luminance", response_model=LuminanceResponseModel)
    def run_luminance(
        color: str = Query(..., description="Hex color to measure"),
        services=Depends(get_services),
    ) -> LuminanceResponseModel:
        try:
            result = measure_luminance(services, LuminanceParams(color=color))
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return LuminanceResponseModel.model_validate(result)

    @app.get("/contrast", response_model=ContrastResponseModel)
    def run_contrast(
        foreground: str = Query(..., description="Foreground hex color"),
        background: Optional[str] = Query(None, description="Background hex color"),
        services=Depends(get_services),
    ) -> ContrastResponseModel:
        try:
            result = compare_colors(
                services, ContrastParams(foreground=foreground, background=background)
            )
        except CommandError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ContrastResponseModel.model_validate(result)

    return app


app = create_app()


if __name__ == "__main__":  # pragma: no cover - manual execution helper
    import uvicorn

    uvicorn.run("contrast_tools.api:app", host="0.0.0.0", port=8000, reload=False)
