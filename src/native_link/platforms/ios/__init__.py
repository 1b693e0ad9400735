"""iOS platform linker."""

from pathlib import Path
from typing import Any

from ...models import IOSDependencyConfig, IOSProjectConfig
from ..base import Platform
from .assets import copy_assets
from .build_property import get_build_property
from .project import dependency_config, project_config
from .register import is_installed, register_native_module

__all__ = ["IOSPlatform", "get_build_property"]


class IOSPlatform(Platform):
    """Links dependencies into an Xcode project."""

    name = "ios"

    def project_config(self, folder: Path, params: dict[str, Any]) -> IOSProjectConfig | None:
        return project_config(folder, params)

    def dependency_config(self, folder: Path, params: dict[str, Any]) -> IOSDependencyConfig | None:
        return dependency_config(folder, params)

    def is_installed(self, project: IOSProjectConfig, name: str, dependency: IOSDependencyConfig) -> bool:
        return is_installed(project, dependency)

    def register(self, name: str, dependency: IOSDependencyConfig, project: IOSProjectConfig) -> None:
        register_native_module(dependency, project)

    def copy_assets(self, files: list[Path], project: IOSProjectConfig) -> None:
        copy_assets(files, project)
