"""HTTP client resolving artifacts from remote Maven repositories."""

from __future__ import annotations

import logging
import os
import tempfile
import time
from pathlib import Path
from typing import List, Optional, Sequence

import httpx

from artifact_installer.modules.installfile.domain import (
    Artifact,
    ArtifactNotFoundError,
    ArtifactResolutionError,
)
from artifact_installer.modules.installfile.repository import LocalRepositoryManager
from artifact_installer.settings import Settings


class RemoteArtifactResolver:
    """Resolve an artifact from the configured remote repositories.

    A resolved artifact is downloaded into the local repository, the same way a
    build tool's resolver populates its cache.
    """

    def __init__(
        self,
        settings: Settings,
        local_repository: LocalRepositoryManager,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.settings = settings
        self.local_repository = local_repository
        self.repositories: Sequence[str] = [url.rstrip("/") for url in settings.remote_repositories if url]
        self.log = logging.getLogger(self.__class__.__name__)
        auth = None
        if settings.remote_username and settings.remote_password:
            auth = (settings.remote_username, settings.remote_password)
        self._auth = auth
        self._client = client or httpx.Client(timeout=settings.remote_timeout, verify=True, follow_redirects=True)

    def _build_artifact_url(self, base_url: str, artifact: Artifact) -> str:
        return f"{base_url}/{self.local_repository.path_for_local_artifact(artifact)}"

    def resolve(self, artifact: Artifact) -> Path:
        if not self.repositories:
            raise ArtifactNotFoundError(f"No remote repositories configured to resolve {artifact.coordinates}")

        failures: List[str] = []
        for base_url in self.repositories:
            url = self._build_artifact_url(base_url, artifact)
            try:
                target = self._download(url, artifact)
            except httpx.HTTPStatusError as exc:
                status = exc.response.status_code
                if status == httpx.codes.NOT_FOUND:
                    self.log.debug("Artifact %s not present in %s", artifact.coordinates, base_url)
                    continue
                failures.append(f"{url} returned HTTP {status}")
            except httpx.HTTPError as exc:
                failures.append(f"{url} failed: {exc}")
            else:
                return target

        if failures:
            raise ArtifactResolutionError(
                f"Could not resolve {artifact.coordinates}: " + "; ".join(failures)
            )
        raise ArtifactNotFoundError(
            f"Could not find artifact {artifact.coordinates} in {', '.join(self.repositories)}"
        )

    def _download(self, url: str, artifact: Artifact) -> Path:
        target = self.local_repository.local_file(artifact)
        self.log.info("Downloading artifact %s url=%s", artifact.coordinates, url)
        start_time = time.time()
        downloaded = 0
        with self._client.stream("GET", url, auth=self._auth, follow_redirects=True) as response:
            response.raise_for_status()
            target.parent.mkdir(parents=True, exist_ok=True)
            fd, partial_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".part")
            partial = Path(partial_name)
            try:
                with os.fdopen(fd, "wb") as fh:
                    for chunk in response.iter_bytes(65536):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        downloaded += len(chunk)
                os.replace(partial, target)
            finally:
                partial.unlink(missing_ok=True)
        elapsed = max(time.time() - start_time, 1e-3)
        self.log.info(
            "Downloaded artifact %s -> %s (%d bytes, %.2fs)",
            artifact.coordinates,
            target,
            downloaded,
            elapsed,
        )
        return target

    def close(self) -> None:
        self._client.close()
