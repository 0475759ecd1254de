"""Dataclasses describing an install-file request and its outcome."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from .artifact import Artifact


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass
class InstallFileRequest:
    groupid: Optional[str]
    artifactid: Optional[str]
    version: Optional[str]
    file: Path
    packaging: Optional[str] = None
    classifier: Optional[str] = None

    def __post_init__(self) -> None:
        self.file = Path(self.file)
        self.groupid = _blank_to_none(self.groupid)
        self.artifactid = _blank_to_none(self.artifactid)
        self.version = _blank_to_none(self.version)
        self.packaging = _blank_to_none(self.packaging)
        self.classifier = _blank_to_none(self.classifier)


class InstallOutcome(str, Enum):
    SKIPPED = "skipped"
    INSTALLED = "installed"


@dataclass(frozen=True)
class InstallDecision:
    exists_locally: bool = False
    exists_remotely: bool = False

    @property
    def exists(self) -> bool:
        return self.exists_locally or self.exists_remotely


@dataclass
class InstallFileResult:
    outcome: InstallOutcome
    artifact: Artifact
    decision: InstallDecision
    local_path: Path
    installed_files: List[Path] = field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return self.outcome is InstallOutcome.SKIPPED

    def as_dict(self) -> Dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "artifact": str(self.artifact.coordinates),
            "existsLocally": self.decision.exists_locally,
            "existsRemotely": self.decision.exists_remotely,
            "localPath": str(self.local_path),
            "installedFiles": [str(path) for path in self.installed_files],
        }
