from .installer import ProjectInstaller
from .manager import ConditionalInstallService, OperationResult, file_extension
from .project_builder import ModelProjectBuilder
from .protocols import Installer, LocalPathResolver, ProjectBuilder, RemoteResolver

__all__ = [
    "ConditionalInstallService",
    "OperationResult",
    "file_extension",
    "ModelProjectBuilder",
    "ProjectInstaller",
    "Installer",
    "LocalPathResolver",
    "ProjectBuilder",
    "RemoteResolver",
]
