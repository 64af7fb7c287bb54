from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

MODULES_PATH = Path(__file__).parent.parent / "modules"


def normalize_module(
    data: Dict[str, Any],
    *,
    path: Path | None = None,
) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or name.replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    if mount != "/" and mount.endswith("/"):
        mount = mount.rstrip("/")
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": name,
            "slug": slug,
            "mount": mount,
            "public": bool(public),
        }
    )
    if path is not None:
        normalized["path"] = path
    return normalized


def load_manifest(module_dir: Path) -> Dict[str, Any] | None:
    manifest = module_dir / "module.yaml"
    if not manifest.exists():
        return None
    with open(manifest, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        return None
    return normalize_module(data, path=module_dir)


def load_modules(modules_path: Path = MODULES_PATH) -> Dict[str, Dict[str, Any]]:
    modules: Dict[str, Dict[str, Any]] = {}
    if not modules_path.exists():
        return modules

    for module_dir in sorted(modules_path.iterdir()):
        if not module_dir.is_dir():
            continue
        normalized = load_manifest(module_dir)
        if normalized:
            modules[normalized["name"]] = normalized
    return modules
