"""FastAPI routes exposing the conditional install."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from artifact_installer.modules.installfile.domain import InstallError, InstallFileError
from artifact_installer.modules.installfile.service.manager import ConditionalInstallService

router = APIRouter(prefix="/installfile", tags=["install-file"])


class InstallFilePayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    groupid: Optional[str] = Field(None, alias="groupId")
    artifactid: Optional[str] = Field(None, alias="artifactId")
    version: Optional[str] = None
    file: str
    packaging: Optional[str] = None
    classifier: Optional[str] = None


def get_service(request: Request) -> ConditionalInstallService:
    container = getattr(request.app.state, "container", None)
    if not container or not getattr(container, "install_service", None):
        raise HTTPException(status_code=500, detail="Install service not initialized.")
    return container.install_service


@router.post("/install-if-not-exist")
def install_if_not_exist(
    payload: InstallFilePayload,
    svc: ConditionalInstallService = Depends(get_service),
):
    try:
        result = svc.install_file(**payload.model_dump())
    except InstallError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except InstallFileError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return result.as_dict()
