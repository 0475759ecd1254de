"""Build a project descriptor from a POM model source."""

from __future__ import annotations

import logging
import re
from typing import List, Optional
from xml.etree import ElementTree

from artifact_installer.modules.installfile.domain import (
    Artifact,
    ArtifactCoordinates,
    ModelBuildingError,
    ProjectBuildingError,
    ProjectDescriptor,
)
from artifact_installer.modules.installfile.domain.constants import MODEL_VERSION, handler_extension

log = logging.getLogger(__name__)

ID_PATTERN = re.compile(r"[A-Za-z0-9_\-.]+")
VERSION_FORBIDDEN = re.compile(r"[\s/\\:]")


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _child_text(root: ElementTree.Element, name: str) -> Optional[str]:
    for child in root:
        if _local_name(child.tag) == name:
            return (child.text or "").strip()
    return None


class ModelProjectBuilder:
    """Parses and validates a minimal POM into a :class:`ProjectDescriptor`."""

    def build(self, model_source: str) -> ProjectDescriptor:
        if not isinstance(model_source, str) or not model_source.strip():
            raise ProjectBuildingError("Model source is empty")

        try:
            root = ElementTree.fromstring(model_source)
        except ElementTree.ParseError as exc:
            raise ModelBuildingError([f"Non-parseable POM: {exc}"]) from exc

        if _local_name(root.tag) != "project":
            raise ModelBuildingError([f"Unrecognised root element '{_local_name(root.tag)}', expected 'project'"])

        problems: List[str] = []
        model_version = _child_text(root, "modelVersion")
        if model_version != MODEL_VERSION:
            problems.append(f"'modelVersion' must be one of [{MODEL_VERSION}] but is '{model_version}'.")

        groupid = _child_text(root, "groupId")
        artifactid = _child_text(root, "artifactId")
        version = _child_text(root, "version")
        packaging = _child_text(root, "packaging") or "jar"

        for field_name, value in (("groupId", groupid), ("artifactId", artifactid)):
            if not value:
                problems.append(f"'{field_name}' is missing.")
            elif not ID_PATTERN.fullmatch(value):
                problems.append(f"'{field_name}' with value '{value}' does not match a valid id pattern.")
        if not version:
            problems.append("'version' is missing.")
        elif VERSION_FORBIDDEN.search(version):
            problems.append(f"'version' with value '{version}' contains invalid characters.")
        if not ID_PATTERN.fullmatch(packaging):
            problems.append(f"'packaging' with value '{packaging}' is not a valid packaging type.")

        if problems:
            raise ModelBuildingError(problems)

        coords = ArtifactCoordinates(
            groupid=groupid,
            artifactid=artifactid,
            version=version,
            extension=handler_extension(packaging),
        )
        log.debug("Built project %s from model source", coords)
        return ProjectDescriptor(
            groupid=groupid,
            artifactid=artifactid,
            version=version,
            packaging=packaging,
            model_source=model_source,
            artifact=Artifact(coordinates=coords, type=packaging),
        )
