"""Conditional install of a file into the local repository."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional
from xml.sax.saxutils import escape

from artifact_installer.modules.installfile.domain import (
    Artifact,
    ArtifactNotFoundError,
    ArtifactResolutionError,
    ConfigurationError,
    DescriptorBuildError,
    InstallDecision,
    InstallError,
    InstallFileRequest,
    InstallFileResult,
    InstallOutcome,
    ModelBuildingError,
    PreconditionError,
    ProjectBuildingError,
    ProjectDescriptor,
)
from artifact_installer.modules.installfile.domain.constants import (
    MODEL_VERSION,
    POM_PACKAGING,
    handler_extension,
)
from artifact_installer.modules.installfile.fileget import RemoteArtifactResolver
from artifact_installer.modules.installfile.repository import LocalRepositoryManager
from artifact_installer.modules.installfile.service.installer import ProjectInstaller
from artifact_installer.modules.installfile.service.project_builder import ModelProjectBuilder
from artifact_installer.modules.installfile.service.protocols import (
    Installer,
    LocalPathResolver,
    ProjectBuilder,
    RemoteResolver,
)
from artifact_installer.settings import Settings

log = logging.getLogger(__name__)


def file_extension(path: Path) -> str:
    """Text after the last dot of the file name, empty when there is none."""
    name = path.name
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


@dataclass
class OperationResult:
    ok: bool
    message: str
    data: Any = None

    def as_dict(self) -> Dict[str, Any]:
        payload = {"status": "true" if self.ok else "false", "msg": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class ConditionalInstallService:
    """Installs a file in the local repository if it is found neither locally nor remotely."""

    def __init__(
        self,
        settings: Settings,
        local_repository: Optional[LocalPathResolver] = None,
        remote_resolver: Optional[RemoteResolver] = None,
        installer: Optional[Installer] = None,
        project_builder: Optional[ProjectBuilder] = None,
    ) -> None:
        self.settings = settings
        self.local_repository = local_repository or LocalRepositoryManager(settings)
        self.remote_resolver = remote_resolver or RemoteArtifactResolver(settings, self.local_repository)
        self.installer = installer or ProjectInstaller(self.local_repository)
        self.project_builder = project_builder or ModelProjectBuilder()
        self.log = logging.getLogger(self.__class__.__name__)

    def run(self, request: InstallFileRequest) -> InstallFileResult:
        source = request.file
        if not source.exists():
            message = f"The specified file '{source}' does not exists"
            self.log.error(message)
            raise PreconditionError(message)

        packaging = request.packaging or file_extension(source)
        project = self.create_project(request, packaging)
        artifact = self._bind_artifact(project, request, packaging)

        local_path = self.local_repository.local_file(artifact)
        decision = self.artifact_exists(artifact, local_path)
        if decision.exists:
            self.log.info("The artifact %s already exists. No need to install it.", artifact.coordinates)
            return InstallFileResult(
                outcome=InstallOutcome.SKIPPED,
                artifact=artifact,
                decision=decision,
                local_path=local_path,
            )

        self.log.info("Artifact %s not found. Installing it.", artifact.coordinates)
        try:
            installed = self.installer.install(project)
        except Exception as exc:  # noqa: BLE001
            raise InstallError(str(exc)) from exc

        return InstallFileResult(
            outcome=InstallOutcome.INSTALLED,
            artifact=artifact,
            decision=decision,
            local_path=local_path,
            installed_files=list(installed or []),
        )

    def install_file(self, **params: Any) -> OperationResult:
        """Dict-friendly wrapper used by the HTTP layer."""
        result = self.run(InstallFileRequest(**params))
        if result.skipped:
            message = f"{result.artifact.coordinates} already exists, install skipped"
        else:
            message = f"{result.artifact.coordinates} installed to {result.local_path}"
        return OperationResult(True, message, result.as_dict())

    def create_project(self, request: InstallFileRequest, packaging: str) -> ProjectDescriptor:
        """Build the in-memory project the artifacts get attached to.

        When a classifier is supplied the project packaging is ``pom`` since the
        project only carries attachments.
        """
        if not (request.groupid and request.artifactid and request.version and packaging):
            raise ConfigurationError(
                "The artifact information is incomplete: 'groupId', 'artifactId', "
                "'version' and 'packaging' are required."
            )

        model_packaging = POM_PACKAGING if request.classifier else packaging
        model_source = (
            f"<project><modelVersion>{MODEL_VERSION}</modelVersion>"
            f"<groupId>{escape(request.groupid)}</groupId>"
            f"<artifactId>{escape(request.artifactid)}</artifactId>"
            f"<version>{escape(request.version)}</version>"
            f"<packaging>{escape(model_packaging)}</packaging></project>"
        )
        try:
            return self.project_builder.build(model_source)
        except ModelBuildingError as exc:
            raise DescriptorBuildError(f"The artifact information is not valid:\n{exc}") from exc
        except ProjectBuildingError as exc:
            raise DescriptorBuildError("Unable to create the project.") from exc

    def _bind_artifact(self, project: ProjectDescriptor, request: InstallFileRequest, packaging: str) -> Artifact:
        main = project.artifact
        extension = file_extension(request.file) or handler_extension(packaging)
        main.coordinates = replace(main.coordinates, extension=extension)

        if request.classifier is None:
            main.file = request.file
            if packaging == POM_PACKAGING:
                project.file = request.file
            return main

        return project.attach_artifact(
            packaging,
            request.classifier,
            request.file,
            handler_extension(packaging),
        )

    def artifact_exists(self, artifact: Artifact, local_path: Path) -> InstallDecision:
        """Check the local repository, then the remote ones.

        Remote failures of any kind count as "not found" and never fail the run.
        """
        self.log.info("Checking if %s exists in the repositories.", artifact.coordinates)
        if local_path.is_file():
            self.log.info("%s found in the local repository at %s", artifact.coordinates, local_path)
            return InstallDecision(exists_locally=True)
        self.log.info("%s is not in the local repository", artifact.coordinates)

        if self.settings.offline:
            self.log.info("Offline mode, remote repositories are not consulted.")
            return InstallDecision()

        found = False
        try:
            self.remote_resolver.resolve(artifact)
            self.log.info("%s found in a remote repository", artifact.coordinates)
            found = True
        except ArtifactNotFoundError as exc:
            self.log.info("The artifact could not be found in the remote. %s", exc)
        except ArtifactResolutionError as exc:
            self.log.warning("The artifact could not be resolved from the remote. %s", exc)
        except Exception:  # noqa: BLE001
            self.log.warning("Remote lookup of %s failed", artifact.coordinates, exc_info=True)
        return InstallDecision(exists_remotely=found)
