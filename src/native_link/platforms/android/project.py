"""Gradle project discovery."""

import os
import re
from pathlib import Path
from typing import Any

from ...models import AndroidDependencyConfig, AndroidProjectConfig

_PACKAGE_RE = re.compile(r'package\s*=\s*"([^"]+)"')
_NAMESPACE_RE = re.compile(r'namespace\s*=?\s*["\']([^"\']+)["\']')
_JAVA_PACKAGE_CLASS_RE = re.compile(r"class\s+(\w+[^(\s]*)[\s\w():]*(?:extends|implements)\s+[\w\s,]*ReactPackage")
_KOTLIN_PACKAGE_CLASS_RE = re.compile(r"class\s+(\w+)[^{]*:\s*[\w\s,()]*ReactPackage")


def find_manifest(folder: Path) -> Path | None:
    """Find the main AndroidManifest.xml, ignoring build outputs and debug variants."""
    candidates = []
    for dirpath, dirnames, filenames in os.walk(folder):
        dirnames[:] = sorted(d for d in dirnames if d not in ("build", "debug", "node_modules"))
        if "AndroidManifest.xml" in filenames:
            candidates.append(Path(dirpath) / "AndroidManifest.xml")
    # Prefer the canonical src/main location
    candidates.sort(key=lambda p: 0 if p.parent.name == "main" else 1)
    return candidates[0] if candidates else None


def read_package_name(manifest_path: Path, build_gradle_path: Path | None = None) -> str | None:
    """Package name from the manifest, or the Gradle namespace when the manifest has none."""
    match = _PACKAGE_RE.search(manifest_path.read_text())
    if match:
        return match.group(1)
    if build_gradle_path is not None and build_gradle_path.exists():
        match = _NAMESPACE_RE.search(build_gradle_path.read_text())
        if match:
            return match.group(1)
    return None


def find_package_class_name(folder: Path) -> str | None:
    """Name of the class implementing ReactPackage in a library's sources."""
    for dirpath, dirnames, filenames in os.walk(folder):
        dirnames[:] = sorted(d for d in dirnames if d != "build")
        for name in sorted(filenames):
            if name.endswith(".java"):
                pattern = _JAVA_PACKAGE_CLASS_RE
            elif name.endswith(".kt"):
                pattern = _KOTLIN_PACKAGE_CLASS_RE
            else:
                continue
            try:
                content = (Path(dirpath) / name).read_text()
            except (OSError, UnicodeDecodeError):
                continue
            match = pattern.search(content)
            if match:
                return match.group(1)
    return None


def _source_dir(folder: Path, params: dict[str, Any]) -> Path | None:
    source_dir = Path(folder) / params.get("sourceDir", "android")
    return source_dir if source_dir.is_dir() else None


def project_config(folder: Path, params: dict[str, Any]) -> AndroidProjectConfig | None:
    source_dir = _source_dir(folder, params)
    if source_dir is None:
        return None

    # Flat layouts keep the app module directly in the source dir
    app_dir = source_dir / params.get("appFolder", "app")
    if not app_dir.is_dir():
        app_dir = source_dir

    manifest_path = find_manifest(app_dir)
    if manifest_path is None:
        return None

    build_gradle_path = app_dir / "build.gradle"
    package_name = params.get("packageName") or read_package_name(manifest_path, build_gradle_path)
    if not package_name:
        return None

    package_folder = Path(*package_name.split("."))
    main_file_path = Path(folder) / params["mainFilePath"] if params.get("mainFilePath") else (
        app_dir / "src" / "main" / "java" / package_folder / "MainApplication.java"
    )

    return AndroidProjectConfig(
        source_dir=source_dir,
        app_dir=app_dir,
        manifest_path=manifest_path,
        package_name=package_name,
        main_file_path=main_file_path,
        settings_gradle_path=source_dir / "settings.gradle",
        build_gradle_path=build_gradle_path,
        assets_path=app_dir / "src" / "main" / "assets",
    )


def dependency_config(folder: Path, params: dict[str, Any]) -> AndroidDependencyConfig | None:
    source_dir = _source_dir(folder, params)
    if source_dir is None:
        return None

    manifest_path = find_manifest(source_dir)
    if manifest_path is None:
        return None

    package_name = params.get("packageName") or read_package_name(manifest_path, source_dir / "build.gradle")
    package_class_name = find_package_class_name(source_dir)
    if not package_name or not package_class_name:
        return None

    return AndroidDependencyConfig(
        source_dir=source_dir,
        manifest_path=manifest_path,
        package_name=package_name,
        package_class_name=package_class_name,
        package_import_path=params.get(
            "packageImportPath", f"import {package_name}.{package_class_name};"
        ),
        package_instance=params.get("packageInstance", f"new {package_class_name}()"),
    )
