from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator

from cropgpt.models.chat_session import ChatTurn
from cropgpt.services.chat import ChatSessionManager, get_chat_session_manager

router = APIRouter(prefix="/chat", tags=["Chat"])


class SendMessageRequest(BaseModel):
    text: str = Field(..., min_length=1)

    @field_validator("text")
    @classmethod
    def _reject_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message text must not be blank")
        return value


class SendMessageResponse(BaseModel):
    reply: str
    turns: List[ChatTurn]


@router.post("/messages", response_model=SendMessageResponse, status_code=status.HTTP_200_OK)
async def send_chat_message(
    request: SendMessageRequest,
    manager: ChatSessionManager = Depends(get_chat_session_manager),
):
    """
    Sends a message to CropGPT and returns its reply with the full transcript.
    """
    reply = await manager.send(request.text)
    return SendMessageResponse(reply=reply, turns=manager.transcript)


@router.get("/messages", response_model=List[ChatTurn])
async def get_chat_messages(
    manager: ChatSessionManager = Depends(get_chat_session_manager),
):
    """
    Get the conversation transcript in the order messages were sent.
    """
    return manager.transcript
