"""Copy fonts and images into the app's Xcode project."""

import os
import plistlib
from pathlib import Path

from pbxproj import XcodeProject

from ...constants import IOS_RESOURCES_FOLDER
from ...models import IOSProjectConfig
from ..assets import group_files_by_type
from .build_property import get_build_property


def get_plist_path(project: XcodeProject, source_dir: Path) -> Path | None:
    plist_file = get_build_property(project, "INFOPLIST_FILE")
    if not plist_file:
        return None
    plist_file = str(plist_file).replace('"', "").replace("$(SRCROOT)", "").lstrip("/")
    return Path(source_dir) / plist_file


def copy_assets(files: list[Path], project: IOSProjectConfig) -> None:
    xcode_project = XcodeProject.load(str(project.pbxproj_path))
    assets = group_files_by_type(files)
    plist_path = get_plist_path(xcode_project, project.source_dir)

    resources = xcode_project.get_or_create_group(IOS_RESOURCES_FOLDER)
    for asset in assets["image"] + assets["font"]:
        rel = os.path.relpath(asset, project.source_dir)
        xcode_project.add_file(rel, parent=resources, force=False)
    xcode_project.save()

    fonts = [f.name for f in assets["font"]]
    if not fonts or plist_path is None or not plist_path.exists():
        return

    with open(plist_path, "rb") as f:
        plist = plistlib.load(f)
    # Keep existing order, append new fonts once
    plist["UIAppFonts"] = list(dict.fromkeys(plist.get("UIAppFonts", []) + fonts))
    with open(plist_path, "wb") as f:
        plistlib.dump(plist, f)
