"""Domain objects for artifact coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class ArtifactCoordinates:
    """Represents a Maven artifact coordinate."""

    groupid: str
    artifactid: str
    version: str
    extension: str = "jar"
    classifier: Optional[str] = None

    @property
    def filename(self) -> str:
        suffix = f"-{self.classifier}" if self.classifier else ""
        return f"{self.artifactid}-{self.version}{suffix}.{self.extension}"

    @property
    def path_segments(self) -> List[str]:
        group_path = self.groupid.replace(".", "/")
        return [group_path, self.artifactid, self.version, self.filename]

    def with_classifier(self, classifier: Optional[str], extension: Optional[str] = None) -> "ArtifactCoordinates":
        return replace(self, classifier=classifier, extension=extension or self.extension)

    def __str__(self) -> str:
        parts = [self.groupid, self.artifactid, self.extension]
        if self.classifier:
            parts.append(self.classifier)
        parts.append(self.version)
        return ":".join(parts)


@dataclass
class Artifact:
    """An artifact of a project, optionally bound to a file on disk."""

    coordinates: ArtifactCoordinates
    type: str
    file: Optional[Path] = None

    @property
    def classifier(self) -> Optional[str]:
        return self.coordinates.classifier

    @property
    def has_classifier(self) -> bool:
        return bool(self.coordinates.classifier)


@dataclass
class ProjectDescriptor:
    """Minimal in-memory project carrying what the installer needs."""

    groupid: str
    artifactid: str
    version: str
    packaging: str
    model_source: str
    artifact: Artifact
    file: Optional[Path] = None
    attached_artifacts: List[Artifact] = field(default_factory=list)

    @property
    def is_pom(self) -> bool:
        return self.packaging == "pom"

    def attach_artifact(self, artifact_type: str, classifier: str, file: Path, extension: str) -> Artifact:
        """Attach a secondary artifact sharing the project's base coordinate."""
        coords = self.artifact.coordinates.with_classifier(classifier, extension)
        attached = Artifact(coordinates=coords, type=artifact_type, file=file)
        self.attached_artifacts.append(attached)
        return attached
