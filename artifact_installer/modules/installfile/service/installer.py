"""Install a project's artifacts into the local repository."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Tuple
from xml.etree import ElementTree

from artifact_installer.modules.installfile.domain import InstallError, ProjectDescriptor
from artifact_installer.modules.installfile.domain.constants import SNAPSHOT_SUFFIX
from artifact_installer.modules.installfile.service.protocols import LocalPathResolver

# Serialises read-merge-write of maven-metadata-local.xml within the process.
_metadata_lock = threading.Lock()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _replace_atomically(target: Path, write: Callable[[Path], object]) -> None:
    """Write through a private temp file in the target directory, then rename."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
    os.close(fd)
    tmp = Path(tmp_name)
    try:
        write(tmp)
        os.replace(tmp, target)
    finally:
        tmp.unlink(missing_ok=True)


class ProjectInstaller:
    """Copies the project's files into the local repository and updates its metadata."""

    def __init__(
        self,
        local_repository: LocalPathResolver,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.local_repository = local_repository
        self.clock = clock or _utcnow
        self.log = logging.getLogger(self.__class__.__name__)

    def install(self, project: ProjectDescriptor) -> List[Path]:
        installed: List[Path] = []
        main = project.artifact

        if project.is_pom:
            if project.file is not None:
                pom_target = self.local_repository.pom_file(main.coordinates)
                installed.append(self._install_file(project.file, pom_target))
            else:
                installed.extend(self._write_generated_pom(project))
        elif main.file is not None:
            installed.append(self._install_file(main.file, self.local_repository.local_file(main)))
            installed.extend(self._write_generated_pom(project))
        elif not project.attached_artifacts:
            raise InstallError("The packaging for this project did not assign a file to the build artifact")

        for attached in project.attached_artifacts:
            if attached.file is None:
                continue
            installed.append(self._install_file(attached.file, self.local_repository.local_file(attached)))

        installed.append(self._update_metadata(project))
        return installed

    def _install_file(self, source: Path, target: Path) -> Path:
        if target.exists() and source.resolve() == target.resolve():
            self.log.info("Skip installing %s onto itself", target)
            return target
        self.log.info("Installing %s to %s", source, target)
        _replace_atomically(target, lambda tmp: shutil.copy2(source, tmp))
        return target

    def _write_generated_pom(self, project: ProjectDescriptor) -> List[Path]:
        target = self.local_repository.pom_file(project.artifact.coordinates)
        if target.exists():
            return []
        self.log.info("Writing generated POM to %s", target)
        _replace_atomically(target, lambda tmp: tmp.write_text(project.model_source, encoding="utf-8"))
        return [target]

    def _update_metadata(self, project: ProjectDescriptor) -> Path:
        path = self.local_repository.metadata_file(project.groupid, project.artifactid)
        with _metadata_lock:
            versions, release = self._read_metadata(path)
            if project.version not in versions:
                versions.append(project.version)
            if not project.version.endswith(SNAPSHOT_SUFFIX):
                release = project.version

            root = ElementTree.Element("metadata", modelVersion="1.1.0")
            ElementTree.SubElement(root, "groupId").text = project.groupid
            ElementTree.SubElement(root, "artifactId").text = project.artifactid
            versioning = ElementTree.SubElement(root, "versioning")
            if release:
                ElementTree.SubElement(versioning, "release").text = release
            versions_node = ElementTree.SubElement(versioning, "versions")
            for version in versions:
                ElementTree.SubElement(versions_node, "version").text = version
            ElementTree.SubElement(versioning, "lastUpdated").text = self.clock().strftime("%Y%m%d%H%M%S")
            ElementTree.indent(root)

            _replace_atomically(
                path,
                lambda tmp: ElementTree.ElementTree(root).write(tmp, encoding="UTF-8", xml_declaration=True),
            )
        self.log.info("Updated metadata %s versions=%s", path, versions)
        return path

    def _read_metadata(self, path: Path) -> Tuple[List[str], Optional[str]]:
        if not path.is_file():
            return [], None
        try:
            existing = ElementTree.parse(path).getroot()
        except ElementTree.ParseError as exc:
            self.log.warning("Rewriting unreadable metadata %s: %s", path, exc)
            return [], None
        versions = [
            (node.text or "").strip()
            for node in existing.findall("versioning/versions/version")
            if (node.text or "").strip()
        ]
        return versions, existing.findtext("versioning/release")
