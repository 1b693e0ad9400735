"""Data models for project and dependency configuration."""

import asyncio
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Awaitable, Callable

from . import logger
from .errors import HookFailedError

# Platform name -> platform descriptor; only configured platforms are present.
ProjectConfig = dict[str, Any]

# A deferred pipeline step.
Task = Callable[[], Awaitable[Any]]


@dataclass
class Context:
    """Invocation context shared by every command."""

    root: Path

    def __post_init__(self):
        self.root = Path(self.root)


@dataclass(frozen=True)
class Hook:
    """A command declared by a dependency to run around the link step.

    A hook without a command is the no-op variant: running it resolves
    immediately without spawning anything.
    """

    command: str | None = None

    @classmethod
    def noop(cls) -> "Hook":
        return cls(None)

    @property
    def is_noop(self) -> bool:
        return not self.command

    async def run(self, cwd: Path | None = None) -> None:
        if self.is_noop:
            return
        argv = shlex.split(self.command)
        logger.debug(f"Running hook: {self.command}")
        process = await asyncio.create_subprocess_exec(*argv, cwd=cwd)
        returncode = await process.wait()
        if returncode != 0:
            raise HookFailedError(self.command, returncode)


@dataclass
class DependencyConfig:
    """Everything needed to link one native dependency."""

    name: str
    path: Path
    platforms: dict[str, Any] = field(default_factory=dict)
    assets: list[Path] = field(default_factory=list)
    prelink: Hook = field(default_factory=Hook.noop)
    postlink: Hook = field(default_factory=Hook.noop)


@dataclass
class IOSProjectConfig:
    """Paths of the app's Xcode project."""

    source_dir: Path
    project_path: Path
    pbxproj_path: Path
    project_name: str
    library_folder: str = "Libraries"


@dataclass
class IOSDependencyConfig:
    """Paths of a dependency's Xcode project."""

    source_dir: Path
    project_path: Path
    pbxproj_path: Path
    project_name: str
    has_headers: bool = False


@dataclass
class AndroidProjectConfig:
    """Paths and identifiers of the app's Gradle project."""

    source_dir: Path
    app_dir: Path
    manifest_path: Path
    package_name: str
    main_file_path: Path
    settings_gradle_path: Path
    build_gradle_path: Path
    assets_path: Path


@dataclass
class AndroidDependencyConfig:
    """Paths and identifiers of a dependency's Android library."""

    source_dir: Path
    manifest_path: Path
    package_name: str
    package_class_name: str
    package_import_path: str
    package_instance: str


@dataclass
class LinkOptions:
    """Flags of the ``link`` command."""

    platforms: list[str] | None = None
