"""The ``link`` command: hook, link and copy assets for native dependencies."""

import re
from pathlib import Path
from typing import Any, Awaitable

from . import logger
from .config import (
    get_dependency_config,
    get_project_assets,
    get_project_config,
    get_project_dependencies,
)
from .constants import ISSUES_URL, MANAGED_PROJECT_MESSAGE, MANAGED_SCRIPTS, PROJECT_NOT_FOUND_MESSAGE
from .errors import DependencyNotFoundError, UnsupportedManagedProjectError
from .models import Context, DependencyConfig, LinkOptions, ProjectConfig, Task
from .platforms import Platform, get_platforms

# Version or tag suffix of a package name, e.g. "package@latest"
_VERSION_SUFFIX_RE = re.compile(r"^(.+?)(@.+?)$")


def strip_version(raw_package_name: str) -> str:
    """Drop a trailing ``@version`` from a package name; scoped names keep their leading ``@``."""
    return _VERSION_SUFFIX_RE.sub(r"\1", raw_package_name)


def pick_platforms(platforms: dict[str, Platform], names: list[str]) -> dict[str, Platform]:
    wanted = [name.lower() for name in names]
    return {name: platforms[name] for name in wanted if name in platforms}


def has_project_config(platforms: dict[str, Platform], project: ProjectConfig) -> bool:
    """Whether any of the platforms is configured in the app."""
    return any(key in project for key in platforms)


def find_managed_scripts(root: Path | None = None) -> Path | None:
    """Path of the managed-app toolchain script, if the app still uses it."""
    script = Path(root or Path.cwd()).joinpath(*MANAGED_SCRIPTS)
    return script if script.exists() else None


async def waterfall(tasks: list[Task]) -> list[Any]:
    """Run tasks one after another; each starts once the previous one finished."""
    results = []
    for task in tasks:
        results.append(await task())
    return results


async def link_dependency(platforms: dict[str, Platform], project: ProjectConfig, dependency: DependencyConfig) -> None:
    for key, platform in platforms.items():
        project_config = project.get(key)
        dependency_config = dependency.platforms.get(key)
        if project_config is None or dependency_config is None:
            continue

        logger.info(f'Linking "{dependency.name}" {key} dependency')
        if platform.is_installed(project_config, dependency.name, dependency_config):
            logger.info(f'{key} module "{dependency.name}" is already linked')
            continue
        platform.register(dependency.name, dependency_config, project_config)
        logger.info(f'{key} module "{dependency.name}" has been successfully linked')


async def link_assets(platforms: dict[str, Platform], project: ProjectConfig, assets: list[Path]) -> None:
    if not assets:
        return

    for key, platform in platforms.items():
        project_config = project.get(key)
        if project_config is None:
            continue
        logger.info(f"Linking assets to {key} project")
        platform.copy_assets(assets, project_config)

    logger.success("Assets have been successfully linked to your project")


def _dependency_tasks(ctx: Context, platforms: dict[str, Platform], project: ProjectConfig,
                      dependency: DependencyConfig) -> list[Task]:
    return [
        lambda: dependency.prelink.run(ctx.root),
        lambda: link_dependency(platforms, project, dependency),
        lambda: dependency.postlink.run(ctx.root),
    ]


async def _run_pipeline(tasks: list[Task]) -> list[Any]:
    try:
        return await waterfall(tasks)
    except Exception as e:
        logger.error(
            f"Something went wrong while linking. Error: {e} \n"
            f"Please file an issue here: {ISSUES_URL}"
        )
        raise


async def _reject(error: Exception) -> None:
    raise error


def _unique_by_basename(files: list[Path]) -> list[Path]:
    seen = {}
    for f in files:
        seen.setdefault(Path(f).name, Path(f))
    return list(seen.values())


async def link_all(ctx: Context, platforms: dict[str, Platform], project: ProjectConfig) -> list[Any]:
    """Link every dependency of the app, then copy all assets once."""
    dependencies = []
    for name in get_project_dependencies(ctx.root):
        try:
            dependencies.append(get_dependency_config(ctx, platforms, name))
        except DependencyNotFoundError as e:
            logger.warn(f'Skipping "{name}": {e}')

    assets = _unique_by_basename(
        get_project_assets(ctx.root) + [a for d in dependencies for a in d.assets]
    )

    tasks: list[Task] = []
    for dependency in dependencies:
        tasks.extend(_dependency_tasks(ctx, platforms, project, dependency))
    tasks.append(lambda: link_assets(platforms, project, assets))
    return await _run_pipeline(tasks)


def link(args: list[str], ctx: Context, options: LinkOptions) -> Awaitable[Any]:
    """
    Update the app's native projects with its native dependencies.

    Project lookup happens right away. A managed app is refused by raising
    immediately; every other failure surfaces when the returned awaitable
    is awaited.

    Args:
        args: Optional package name, possibly suffixed with ``@version``.
            Without it every dependency of the app is linked.
        ctx: Invocation context
        options: Command flags

    Returns:
        Awaitable that completes once linking is done

    Raises:
        UnsupportedManagedProjectError: If no platform is configured and the
            app is a managed app
        DependencyNotFoundError: If the named package is not installed
    """
    raw_package_name = args[0] if args else None

    try:
        platforms = get_platforms(ctx.root)
        if options.platforms:
            platforms = pick_platforms(platforms, options.platforms)
        project = get_project_config(ctx, platforms)
    except Exception as e:
        logger.error(PROJECT_NOT_FOUND_MESSAGE)
        return _reject(e)

    if not has_project_config(platforms, project) and find_managed_scripts(ctx.root):
        raise UnsupportedManagedProjectError(MANAGED_PROJECT_MESSAGE)

    if raw_package_name is None:
        return link_all(ctx, platforms, project)

    package_name = strip_version(raw_package_name)
    dependency = get_dependency_config(ctx, platforms, package_name)

    tasks = _dependency_tasks(ctx, platforms, project, dependency)
    tasks.append(lambda: link_assets(platforms, project, dependency.assets))
    return _run_pipeline(tasks)
