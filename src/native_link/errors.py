"""Exceptions raised while linking native dependencies."""


class LinkError(Exception):
    """Base class for all link failures reported to the user."""


class ProjectNotFoundError(LinkError):
    """The context root does not hold a usable app project."""


class UnsupportedManagedProjectError(LinkError):
    """Linking was requested inside a managed (non-ejected) app."""


class DependencyNotFoundError(LinkError):
    """The requested package is not installed in node_modules."""


class PipelineStepError(LinkError):
    """A hook, platform link or asset step failed."""


class HookFailedError(PipelineStepError):
    """A prelink/postlink command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int):
        super().__init__(f'Error occurred during executing "{command}" command')
        self.command = command
        self.returncode = returncode


class MalformedProjectError(LinkError):
    """An Xcode project has no native target or no build configuration."""
