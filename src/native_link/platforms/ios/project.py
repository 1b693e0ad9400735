"""Xcode project discovery."""

import os
import re
from pathlib import Path
from typing import Any

from ...constants import IOS_IGNORED_DIRS, IOS_LIBRARY_FOLDER
from ...models import IOSDependencyConfig, IOSProjectConfig

IOS_BASE = "ios"

# Sample and test projects bundled with libraries
_TEST_PROJECT_RE = re.compile(r"test|example|sample", re.IGNORECASE)


def find_project(folder: Path) -> Path | None:
    """
    Find the Xcode project of an app or library.

    Projects directly inside ``ios/`` win over any other match. Projects
    whose path looks like a test or sample app are ignored elsewhere.

    Args:
        folder: Directory to search

    Returns:
        Path to the ``.xcodeproj`` relative to ``folder``, or None
    """
    folder = Path(folder)
    projects = []
    for dirpath, dirnames, _ in os.walk(folder):
        rel_dir = Path(dirpath).relative_to(folder)
        keep = []
        for d in sorted(dirnames):
            if d.endswith(".xcodeproj"):
                projects.append(rel_dir / d)
            elif d not in IOS_IGNORED_DIRS and not d.startswith("."):
                keep.append(d)
        dirnames[:] = keep

    projects = [
        p for p in projects
        if str(p.parent) == IOS_BASE or not _TEST_PROJECT_RE.search(str(p))
    ]
    projects.sort(key=lambda p: 0 if str(p.parent) == IOS_BASE else 1)
    return projects[0] if projects else None


def _locate(folder: Path, params: dict[str, Any]) -> Path | None:
    project = params.get("project")
    if project:
        return Path(folder) / project
    source_dir = Path(folder) / params["sourceDir"] if params.get("sourceDir") else Path(folder)
    found = find_project(source_dir)
    if found is None:
        return None
    return source_dir / found


def _has_headers(source_dir: Path) -> bool:
    for dirpath, dirnames, filenames in os.walk(source_dir):
        dirnames[:] = [d for d in dirnames if d not in IOS_IGNORED_DIRS]
        if any(name.endswith(".h") for name in filenames):
            return True
    return False


def project_config(folder: Path, params: dict[str, Any]) -> IOSProjectConfig | None:
    project_path = _locate(folder, params)
    if project_path is None:
        return None
    return IOSProjectConfig(
        source_dir=project_path.parent,
        project_path=project_path,
        pbxproj_path=project_path / "project.pbxproj",
        project_name=project_path.name,
        library_folder=params.get("libraryFolder", IOS_LIBRARY_FOLDER),
    )


def dependency_config(folder: Path, params: dict[str, Any]) -> IOSDependencyConfig | None:
    project_path = _locate(folder, params)
    if project_path is None:
        return None
    source_dir = project_path.parent
    return IOSDependencyConfig(
        source_dir=source_dir,
        project_path=project_path,
        pbxproj_path=project_path / "project.pbxproj",
        project_name=project_path.name,
        has_headers=_has_headers(source_dir),
    )
