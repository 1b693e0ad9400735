"""Abstract base class for platform linkers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class Platform(ABC):
    """Reads and edits one platform's native project files."""

    name: str = ""

    @abstractmethod
    def project_config(self, folder: Path, params: dict[str, Any]) -> Any | None:
        """
        Describe the app's native project for this platform.

        Args:
            folder: App root directory
            params: Platform section of the app's link configuration

        Returns:
            A platform descriptor, or None if the app has no such project
        """
        pass

    @abstractmethod
    def dependency_config(self, folder: Path, params: dict[str, Any]) -> Any | None:
        """
        Describe a dependency's native library for this platform.

        Args:
            folder: Dependency package directory
            params: Platform section of the dependency's link configuration

        Returns:
            A platform descriptor, or None if the dependency ships no native code
        """
        pass

    @abstractmethod
    def is_installed(self, project: Any, name: str, dependency: Any) -> bool:
        """Whether the dependency is already linked into the project."""
        pass

    @abstractmethod
    def register(self, name: str, dependency: Any, project: Any) -> None:
        """Link the dependency into the project's native files."""
        pass

    @abstractmethod
    def copy_assets(self, files: list[Path], project: Any) -> None:
        """Add asset files (fonts, images) to the project."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
