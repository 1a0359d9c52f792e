"""Exception hierarchy for crxgen.

All crxgen exceptions inherit from :class:`CrxGenError`. Pre-flight
validation failures derive from :class:`ProjectValidationError` and are
fatal for the CLI; everything else is raised inside the generation and
install workflows and recovered at their boundary.
"""

from __future__ import annotations


class CrxGenError(Exception):
    """Base exception for all crxgen errors."""


class ProjectValidationError(CrxGenError):
    """Pre-flight validation failure."""


class InvalidNameError(ProjectValidationError):
    """Project name does not match the allowed pattern."""

    def __init__(self, name: str, pattern: str) -> None:
        super().__init__(f"Invalid project name '{name}', must match: {pattern}")
        self.name = name
        self.pattern = pattern


class AlreadyExistsError(ProjectValidationError):
    """A directory for the project already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Project '{name}' already exists")
        self.name = name


class InvalidFeatureError(ProjectValidationError):
    """A requested feature is not one of the known features."""


class NoFeaturesSelectedError(ProjectValidationError):
    """The feature selection is empty."""

    def __init__(self) -> None:
        super().__init__("You must select at least 1 feature")


class CloneError(CrxGenError):
    """Cloning the template repository failed."""


class CleanupError(CrxGenError):
    """Removing template-only files failed."""


class ManifestError(CrxGenError):
    """Base failure for JSON manifest handling."""


class ManifestReadError(ManifestError):
    """A manifest file could not be read."""


class ManifestParseError(ManifestError):
    """A manifest file is not a JSON object."""


class ManifestWriteError(ManifestError):
    """A manifest file could not be written."""


class CommandError(CrxGenError):
    """A child process failed to spawn or exited non-zero."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class InstallError(CrxGenError):
    """Installing the generated project's dependencies failed."""
