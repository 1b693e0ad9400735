"""Android platform linker."""

from pathlib import Path
from typing import Any

from ...models import AndroidDependencyConfig, AndroidProjectConfig
from ..base import Platform
from .assets import copy_assets
from .project import dependency_config, project_config
from .register import is_installed, register_native_module

__all__ = ["AndroidPlatform"]


class AndroidPlatform(Platform):
    """Links dependencies into a Gradle project."""

    name = "android"

    def project_config(self, folder: Path, params: dict[str, Any]) -> AndroidProjectConfig | None:
        return project_config(folder, params)

    def dependency_config(self, folder: Path, params: dict[str, Any]) -> AndroidDependencyConfig | None:
        return dependency_config(folder, params)

    def is_installed(self, project: AndroidProjectConfig, name: str, dependency: AndroidDependencyConfig) -> bool:
        return is_installed(project, name)

    def register(self, name: str, dependency: AndroidDependencyConfig, project: AndroidProjectConfig) -> None:
        register_native_module(name, dependency, project)

    def copy_assets(self, files: list[Path], project: AndroidProjectConfig) -> None:
        copy_assets(files, project)
