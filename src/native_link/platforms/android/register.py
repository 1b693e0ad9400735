"""Patch Gradle and Java sources to include a dependency."""

import os
import re
from dataclasses import dataclass
from pathlib import Path

from ...models import AndroidDependencyConfig, AndroidProjectConfig


@dataclass
class Patch:
    """Text inserted right after the first match of ``pattern``.

    A patch without a pattern is appended to the end of the file.
    """

    pattern: re.Pattern | None
    patch: str


def normalize_project_name(name: str) -> str:
    """Gradle project name for a package, e.g. ``@scope/pkg`` -> ``@scope_pkg``."""
    return name.replace("/", "_")


def apply_patch(file_path: Path, patch: Patch) -> None:
    content = file_path.read_text()
    if patch.pattern is None:
        if content and not content.endswith("\n"):
            content += "\n"
        content += patch.patch
    else:
        content = patch.pattern.sub(lambda m: m.group(0) + patch.patch, content, count=1)
    file_path.write_text(content)


def make_settings_patch(name: str, dependency: AndroidDependencyConfig, project: AndroidProjectConfig) -> Patch:
    project_name = normalize_project_name(name)
    rel = os.path.relpath(dependency.source_dir, project.settings_gradle_path.parent)
    rel = rel.replace(os.sep, "/")
    return Patch(
        pattern=None,
        patch=(
            f"include ':{project_name}'\n"
            f"project(':{project_name}').projectDir = new File(rootProject.projectDir, '{rel}')\n"
        ),
    )


def make_build_patch(name: str) -> Patch:
    project_name = normalize_project_name(name)
    return Patch(
        pattern=re.compile(r"^dependencies\s*\{\r?\n", re.MULTILINE),
        patch=f"    implementation project(':{project_name}')\n",
    )


def make_import_patch(package_import_path: str) -> Patch:
    return Patch(
        pattern=re.compile(r"^package\s+[\w.]+;?[ \t]*$", re.MULTILINE),
        patch=f"\n\n{package_import_path}",
    )


def make_package_patch(package_instance: str) -> Patch:
    return Patch(
        pattern=re.compile(r"new MainReactPackage\(\)"),
        patch=f",\n            {package_instance}",
    )


def is_installed(project: AndroidProjectConfig, name: str) -> bool:
    if not project.build_gradle_path.exists():
        return False
    project_name = re.escape(normalize_project_name(name))
    pattern = re.compile(
        rf"(compile|api|implementation)\s*\(?project\(['\"]:{project_name}['\"]\)"
    )
    return bool(pattern.search(project.build_gradle_path.read_text()))


def register_native_module(name: str, dependency: AndroidDependencyConfig, project: AndroidProjectConfig) -> None:
    """Add the dependency to settings.gradle, app/build.gradle and MainApplication."""
    apply_patch(project.settings_gradle_path, make_settings_patch(name, dependency, project))
    apply_patch(project.build_gradle_path, make_build_patch(name))
    apply_patch(project.main_file_path, make_import_patch(dependency.package_import_path))
    apply_patch(project.main_file_path, make_package_patch(dependency.package_instance))
