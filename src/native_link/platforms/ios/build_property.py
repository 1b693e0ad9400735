"""Build setting lookup on a parsed Xcode project."""

from typing import Any

from pbxproj import XcodeProject

from ...errors import MalformedProjectError


def _first_native_target(project: XcodeProject):
    root = project.objects[project.rootObject]
    for target_id in root.targets or []:
        target = project.objects[target_id]
        if target is not None and target.isa == "PBXNativeTarget":
            return target
    raise MalformedProjectError("Xcode project has no native target")


def get_build_property(project: XcodeProject, key: str) -> Any:
    """
    Read a build setting of the project's main target.

    The main target is the first native target listed by the project; its
    first build configuration is the one consulted.

    Args:
        project: A loaded Xcode project
        key: Build setting name, e.g. ``INFOPLIST_FILE``

    Returns:
        The setting value, or None if the configuration does not define it

    Raises:
        MalformedProjectError: If there is no native target or the target
            has no build configuration
    """
    target = _first_native_target(project)
    config_list = project.objects[target.buildConfigurationList]
    configurations = list(config_list.buildConfigurations or []) if config_list is not None else []
    if not configurations:
        raise MalformedProjectError(
            f"Target {target.name} has no build configuration"
        )
    configuration = project.objects[configurations[0]]
    settings = getattr(configuration, "buildSettings", None)
    if settings is None or key not in settings:
        return None
    return settings[key]
