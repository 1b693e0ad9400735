"""Asset file grouping shared by the platform linkers."""

from pathlib import Path

from ..constants import FONT_EXTENSIONS, IMAGE_EXTENSIONS


def group_files_by_type(files: list[Path]) -> dict[str, list[Path]]:
    """Bucket asset files into fonts, images and everything else."""
    groups: dict[str, list[Path]] = {"font": [], "image": [], "other": []}
    for f in files:
        f = Path(f)
        suffix = f.suffix.lower()
        if suffix in FONT_EXTENSIONS:
            groups["font"].append(f)
        elif suffix in IMAGE_EXTENSIONS:
            groups["image"].append(f)
        else:
            groups["other"].append(f)
    return groups
