from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import Any, Dict

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from workbench.errors import install_error_handlers
from workbench.registry import MODULES_PATH, load_modules

logger = structlog.get_logger(__name__)


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def build_categories(modules: Dict[str, Dict[str, Any]]) -> list[dict[str, Any]]:
    grouped: dict[str, list[dict[str, Any]]] = {}
    for module in modules.values():
        if not module.get("public", True):
            continue
        category = str(module.get("category") or "Other")
        grouped.setdefault(category, []).append(module)

    categories: list[dict[str, Any]] = []
    for category, items in sorted(grouped.items(), key=lambda item: item[0].lower()):
        items.sort(key=lambda item: item.get("title") or item.get("name", ""))
        categories.append({"name": category, "modules": items})
    return categories


def build_app(modules_path: Path = MODULES_PATH) -> FastAPI:
    app = FastAPI(title="Workbench")
    install_error_handlers(app)

    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    modules = load_modules(modules_path)

    @app.get("/", response_class=HTMLResponse)
    def workbench_index(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "index.html",
            {"categories": build_categories(modules), "base_path": base_path},
        )

    for meta in modules.values():
        entrypoints = meta.get("entrypoints") or {}
        api_entry = entrypoints.get("api") if isinstance(entrypoints, dict) else None
        if not api_entry:
            continue

        try:
            subapp = import_attr(api_entry)
        except Exception:
            logger.exception("module_mount_failed", module=meta["name"], entrypoint=api_entry)
            continue

        app.mount(meta["mount"], subapp)
        logger.debug("module_mounted", module=meta["name"], mount=meta["mount"])

    return app
