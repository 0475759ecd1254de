"""Wire the install-file collaborators from shared settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from artifact_installer.modules.installfile import ConditionalInstallService
from artifact_installer.modules.installfile.fileget import RemoteArtifactResolver
from artifact_installer.modules.installfile.repository import LocalRepositoryManager
from artifact_installer.modules.installfile.service import ModelProjectBuilder, ProjectInstaller

from .settings import Settings

log = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Container that wires plain-Python services with shared settings."""

    settings: Settings
    local_repository: LocalRepositoryManager = field(init=False)
    remote_resolver: RemoteArtifactResolver = field(init=False)
    installer: ProjectInstaller = field(init=False)
    project_builder: ModelProjectBuilder = field(init=False)
    install_service: ConditionalInstallService = field(init=False)

    def __post_init__(self) -> None:
        self.local_repository = LocalRepositoryManager(self.settings)
        self.remote_resolver = RemoteArtifactResolver(self.settings, self.local_repository)
        self.installer = ProjectInstaller(self.local_repository)
        self.project_builder = ModelProjectBuilder()
        self.install_service = ConditionalInstallService(
            self.settings,
            local_repository=self.local_repository,
            remote_resolver=self.remote_resolver,
            installer=self.installer,
            project_builder=self.project_builder,
        )
        log.info(
            "Local repository=%s remotes=%s offline=%s",
            self.local_repository.basedir,
            ", ".join(self.remote_resolver.repositories) or "-",
            self.settings.offline,
        )

    def close(self) -> None:
        self.remote_resolver.close()
