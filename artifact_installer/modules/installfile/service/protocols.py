"""Collaborator interfaces consumed by the conditional installer."""

from __future__ import annotations

from pathlib import Path
from typing import List, Protocol

from artifact_installer.modules.installfile.domain import Artifact, ArtifactCoordinates, ProjectDescriptor


class LocalPathResolver(Protocol):
    def path_for_local_artifact(self, artifact: Artifact) -> str:
        ...

    def local_file(self, artifact: Artifact) -> Path:
        ...

    def pom_file(self, coordinates: ArtifactCoordinates) -> Path:
        ...

    def metadata_file(self, groupid: str, artifactid: str) -> Path:
        ...


class RemoteResolver(Protocol):
    def resolve(self, artifact: Artifact) -> Path:
        ...


class Installer(Protocol):
    def install(self, project: ProjectDescriptor) -> List[Path]:
        ...


class ProjectBuilder(Protocol):
    def build(self, model_source: str) -> ProjectDescriptor:
        ...
