"""Errors raised while installing a file into the local repository."""

from __future__ import annotations

from typing import Iterable


class InstallFileError(RuntimeError):
    """Base class for every failure of the install-file operation."""


class PreconditionError(InstallFileError):
    """The file to install does not exist."""


class ConfigurationError(InstallFileError):
    """Required artifact coordinates are missing."""


class DescriptorBuildError(InstallFileError):
    """The synthesized project descriptor could not be built."""


class InstallError(InstallFileError):
    """The installer failed to write the project into the local repository."""


class ProjectBuildingError(InstallFileError):
    """Raised by project builders when a descriptor cannot be produced."""


class ModelBuildingError(ProjectBuildingError):
    """The model source is unparseable or carries invalid values."""

    def __init__(self, problems: Iterable[str]) -> None:
        self.problems = list(problems)
        super().__init__("\n".join(f"  - {problem}" for problem in self.problems))


class ArtifactResolutionError(InstallFileError):
    """Remote resolution of an artifact failed."""


class ArtifactNotFoundError(ArtifactResolutionError):
    """No remote repository holds the requested artifact."""
