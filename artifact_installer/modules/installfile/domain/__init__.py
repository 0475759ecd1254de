from .artifact import Artifact, ArtifactCoordinates, ProjectDescriptor
from .exceptions import (
    ArtifactNotFoundError,
    ArtifactResolutionError,
    ConfigurationError,
    DescriptorBuildError,
    InstallError,
    InstallFileError,
    ModelBuildingError,
    PreconditionError,
    ProjectBuildingError,
)
from .models import InstallDecision, InstallFileRequest, InstallFileResult, InstallOutcome

__all__ = [
    "Artifact",
    "ArtifactCoordinates",
    "ProjectDescriptor",
    "InstallFileRequest",
    "InstallFileResult",
    "InstallDecision",
    "InstallOutcome",
    "InstallFileError",
    "PreconditionError",
    "ConfigurationError",
    "DescriptorBuildError",
    "InstallError",
    "ProjectBuildingError",
    "ModelBuildingError",
    "ArtifactResolutionError",
    "ArtifactNotFoundError",
]
