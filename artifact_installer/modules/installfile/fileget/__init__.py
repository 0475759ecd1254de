from .remote_resolver import RemoteArtifactResolver

__all__ = ["RemoteArtifactResolver"]
