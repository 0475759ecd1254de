from .local import LocalRepositoryManager

__all__ = ["LocalRepositoryManager"]
