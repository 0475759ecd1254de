"""Path computation inside a Maven default-layout local repository."""

from __future__ import annotations

from pathlib import Path

from artifact_installer.modules.installfile.domain import Artifact, ArtifactCoordinates
from artifact_installer.modules.installfile.domain.constants import METADATA_FILENAME
from artifact_installer.settings import Settings


class LocalRepositoryManager:
    """Maps artifacts to files under the local repository base directory.

    Paths are computed only; nothing here touches the filesystem.
    """

    def __init__(self, settings: Settings) -> None:
        self.basedir = Path(settings.local_repository).expanduser()

    def path_for_local_artifact(self, artifact: Artifact) -> str:
        return "/".join(artifact.coordinates.path_segments)

    def local_file(self, artifact: Artifact) -> Path:
        return self.basedir.joinpath(*artifact.coordinates.path_segments)

    def pom_file(self, coords: ArtifactCoordinates) -> Path:
        pom_coords = ArtifactCoordinates(
            groupid=coords.groupid,
            artifactid=coords.artifactid,
            version=coords.version,
            extension="pom",
        )
        return self.basedir.joinpath(*pom_coords.path_segments)

    def metadata_file(self, groupid: str, artifactid: str) -> Path:
        return self.basedir.joinpath(groupid.replace(".", "/"), artifactid, METADATA_FILENAME)
