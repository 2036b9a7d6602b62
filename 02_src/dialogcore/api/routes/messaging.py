"""Messaging API routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException

from ...app import IApplication
from ...errors import InvalidArgumentError


class MessageRequest(BaseModel):
    """Request model for sending a message."""

    conversation_id: str
    text: str
    locale: str | None = None


class ReplyResponse(BaseModel):
    """One outbound activity."""

    text: str | None
    input_hint: str | None = None


class MessageResponse(BaseModel):
    """Response model for a processed turn."""

    status: str
    replies: list[ReplyResponse]


def create_messaging_router(app: IApplication) -> APIRouter:
    """Create messaging router."""
    router = APIRouter(prefix="/api", tags=["messaging"])

    @router.post("/messages", response_model=MessageResponse)
    async def send_message(request: MessageRequest) -> dict:
        """Run one turn of the conversation and return its replies."""
        if not request.conversation_id.strip():
            raise HTTPException(status_code=400, detail="conversation_id is required")
        try:
            result = await app.handle_message(
                conversation_id=request.conversation_id,
                text=request.text,
                locale=request.locale,
            )
            return {
                "status": result.status.value,
                "replies": [
                    {
                        "text": reply.text,
                        "input_hint": reply.input_hint.value if reply.input_hint else None,
                    }
                    for reply in result.replies
                ],
            }
        except InvalidArgumentError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    return router
