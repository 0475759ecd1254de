"""Install-file module exports."""

from .service.manager import ConditionalInstallService
from .controller import router as installfile_router

__all__ = ["ConditionalInstallService", "installfile_router"]
