"""Dialog inspection routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import Application


class VersionResponse(BaseModel):
    """Response model for the root dialog fingerprint."""

    dialog_id: str
    version: str
    registry_version: str


def create_dialogs_router(app: Application) -> APIRouter:
    """Create dialogs router."""
    router = APIRouter(prefix="/api/dialogs", tags=["dialogs"])

    @router.get("/version", response_model=VersionResponse)
    async def get_version() -> dict:
        """Fingerprint of the root dialog structure."""
        try:
            manager = app.dialog_manager
            root = manager.root_dialog
            return {
                "dialog_id": root.id,
                "version": root.get_version(),
                "registry_version": manager.dialogs.get_version(),
            }
        except RuntimeError as e:
            raise HTTPException(status_code=503, detail=str(e))

    return router
