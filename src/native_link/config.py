"""Project and dependency configuration read from package.json files."""

import json
from pathlib import Path
from typing import Any

from .constants import (
    CONFIG_KEY,
    IGNORED_DEPENDENCIES,
    NODE_MODULES,
    PACKAGE_JSON,
    UNKNOWN_DEPENDENCY_MESSAGE,
)
from .errors import DependencyNotFoundError, ProjectNotFoundError
from .models import Context, DependencyConfig, Hook, ProjectConfig
from .platforms.base import Platform


def _load_package_json(path: Path) -> dict[str, Any]:
    with open(path) as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


def _read_app_package(root: Path) -> dict[str, Any]:
    path = Path(root) / PACKAGE_JSON
    try:
        return _load_package_json(path)
    except (OSError, ValueError) as e:
        raise ProjectNotFoundError(f"Cannot read {path}: {e}") from e


def get_params(package: dict[str, Any]) -> dict[str, Any]:
    """Link configuration section of a package.json."""
    params = package.get(CONFIG_KEY)
    return params if isinstance(params, dict) else {}


def collect_assets(folder: Path, asset_dirs: list[str] | None) -> list[Path]:
    """All files under the asset directories declared by a package."""
    files = []
    for asset_dir in asset_dirs or []:
        base = Path(folder) / asset_dir
        if base.is_file():
            files.append(base)
        elif base.is_dir():
            files.extend(sorted(p for p in base.rglob("*") if p.is_file()))
    return files


def get_project_config(ctx: Context, platforms: dict[str, Platform]) -> ProjectConfig:
    """
    Describe the app's native projects.

    Args:
        ctx: Invocation context
        platforms: Platforms to look for

    Returns:
        Mapping of platform name to descriptor for every configured platform

    Raises:
        ProjectNotFoundError: If the app's package.json is missing or invalid
    """
    params = get_params(_read_app_package(ctx.root))
    project: ProjectConfig = {}
    for key, platform in platforms.items():
        config = platform.project_config(ctx.root, params.get(key) or {})
        if config is not None:
            project[key] = config
    return project


def get_dependency_config(ctx: Context, platforms: dict[str, Platform], name: str) -> DependencyConfig:
    """
    Describe an installed dependency.

    Raises:
        DependencyNotFoundError: If the package is not installed
    """
    folder = ctx.root / NODE_MODULES / name
    try:
        package = _load_package_json(folder / PACKAGE_JSON)
    except (OSError, ValueError) as e:
        raise DependencyNotFoundError(UNKNOWN_DEPENDENCY_MESSAGE) from e

    params = get_params(package)
    platform_configs = {}
    for key, platform in platforms.items():
        config = platform.dependency_config(folder, params.get(key) or {})
        if config is not None:
            platform_configs[key] = config

    commands = params.get("commands") or {}
    return DependencyConfig(
        name=name,
        path=folder,
        platforms=platform_configs,
        assets=collect_assets(folder, params.get("assets")),
        prelink=Hook(commands.get("prelink")),
        postlink=Hook(commands.get("postlink")),
    )


def get_project_dependencies(root: Path) -> list[str]:
    """Names of the app's runtime dependencies that may need linking."""
    package = _read_app_package(root)
    dependencies = package.get("dependencies") or {}
    return [name for name in dependencies if name not in IGNORED_DEPENDENCIES]


def get_project_assets(root: Path) -> list[Path]:
    """Asset files declared by the app itself."""
    params = get_params(_read_app_package(root))
    return collect_assets(root, params.get("assets"))
