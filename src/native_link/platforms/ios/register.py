"""Add a dependency's Xcode project to the app's Xcode project."""

import os

from pbxproj import XcodeProject

from ... import logger
from ...models import IOSDependencyConfig, IOSProjectConfig


def get_header_search_path(project: IOSProjectConfig, dependency: IOSDependencyConfig) -> str:
    """Header search path of a dependency, relative to the app's sources."""
    rel = os.path.relpath(dependency.source_dir, project.source_dir)
    return f"$(SRCROOT)/{rel.replace(os.sep, '/')}"


def _static_library_products(dependency_project: XcodeProject) -> list[str]:
    """Static library names built by the dependency, skipping tvOS targets."""
    products = []
    root = dependency_project.objects[dependency_project.rootObject]
    for target_id in root.targets or []:
        target = dependency_project.objects[target_id]
        if target is None or target.isa != "PBXNativeTarget":
            continue
        if str(target.name).endswith("-tvOS"):
            continue
        product = dependency_project.objects[target.productReference]
        path = getattr(product, "path", None) if product is not None else None
        if path and str(path).endswith(".a"):
            products.append(str(path))
    return products


def is_installed(project: IOSProjectConfig, dependency: IOSDependencyConfig) -> bool:
    xcode_project = XcodeProject.load(str(project.pbxproj_path))
    groups = xcode_project.get_groups_by_name(project.library_folder)
    if not groups:
        return False
    return bool(xcode_project.get_files_by_name(dependency.project_name, parent=groups[0]))


def register_native_module(dependency: IOSDependencyConfig, project: IOSProjectConfig) -> None:
    """
    Link a dependency into the app's Xcode project.

    The dependency's ``.xcodeproj`` goes into the libraries group, its static
    library products into the app's frameworks phase, and its sources into
    the header search paths.
    """
    xcode_project = XcodeProject.load(str(project.pbxproj_path))
    dependency_project = XcodeProject.load(str(dependency.pbxproj_path))

    libraries = xcode_project.get_or_create_group(project.library_folder)
    rel_project = os.path.relpath(dependency.project_path, project.source_dir)
    xcode_project.add_file(rel_project, parent=libraries, force=False)

    for product in _static_library_products(dependency_project):
        logger.debug(f"Adding static library {product}")
        xcode_project.add_file(product, parent=libraries, tree="BUILT_PRODUCTS_DIR", force=False)

    if dependency.has_headers:
        xcode_project.add_header_search_paths(
            get_header_search_path(project, dependency), recursive=True
        )

    xcode_project.save()
