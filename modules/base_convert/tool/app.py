from __future__ import annotations

from pathlib import Path

import structlog
from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from modules.base_convert.core.base import (
    LABELS,
    Base,
    convert_payload,
    detect_payload,
)
from workbench.errors import DomainError, install_error_handlers
from workbench.registry import load_manifest
from workbench.settings import get_settings

BASE_DIR = Path(__file__).parent
MODULE_DIR = BASE_DIR.parent

manifest = load_manifest(MODULE_DIR) or {}
settings = get_settings()
logger = structlog.get_logger(__name__)

app = FastAPI(title=manifest.get("title", "Base Converter"))
install_error_handlers(app)

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

BASE_OPTIONS = [(base.value, LABELS[base.value]) for base in Base]


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.scope.get("root_path", "").rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": manifest.get("title", "Base Converter"),
            "description": manifest.get("description", ""),
            "bases": BASE_OPTIONS,
            "default_base": settings.default_base,
            "max_length": settings.max_input_length,
            "base_path": base_path,
        },
    )


@app.post("/convert")
def convert(
    value: str | None = Form(None),
    base: str | None = Form(None),
):
    result, error = convert_payload(
        value,
        base or settings.default_base,
        max_length=settings.max_input_length,
    )
    if error or result is None:
        logger.info(
            "conversion_failed",
            base=base or settings.default_base,
            length=len((value or "").strip()),
            error=error,
        )
        raise DomainError(error or "")
    logger.debug(
        "conversion_ok",
        base=result["base"],
        detected=result["detected"],
        length=len(result["input"]),
    )
    return result


@app.get("/detect")
def detect(value: str):
    return detect_payload(value)
