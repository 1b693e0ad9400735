"""Platform linkers for the native projects of an app."""

from pathlib import Path

from ..errors import ProjectNotFoundError
from .android import AndroidPlatform
from .assets import group_files_by_type
from .base import Platform
from .ios import IOSPlatform

__all__ = [
    "AndroidPlatform",
    "IOSPlatform",
    "Platform",
    "get_platforms",
    "group_files_by_type",
]


def get_platforms(root: Path) -> dict[str, Platform]:
    """
    Detect the platforms that can be linked for a project.

    Args:
        root: App root directory

    Returns:
        Mapping of platform name to its linker
    """
    root = Path(root)
    if not root.is_dir():
        raise ProjectNotFoundError(f"Invalid project root: {root}")

    return {
        "ios": IOSPlatform(),
        "android": AndroidPlatform(),
    }
