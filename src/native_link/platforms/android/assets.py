"""Copy fonts into the app's Android assets."""

import shutil
from pathlib import Path

from ...models import AndroidProjectConfig
from ..assets import group_files_by_type


def copy_assets(files: list[Path], project: AndroidProjectConfig) -> None:
    fonts_dir = project.assets_path / "fonts"
    for font in group_files_by_type(files)["font"]:
        fonts_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(font, fonts_dir / font.name)
