from __future__ import annotations

import base64
from typing import Any, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from pydantic import BaseModel, Field

from cropgpt.models.chat_session import ChatTurn, Role


class InlineAttachment(BaseModel):
    """Binary payload sent inline next to a prompt, e.g. a crop photo."""

    data: bytes
    mime_type: str = Field(default="image/jpeg")


def attachment_to_langchain_block(attachment: InlineAttachment) -> dict[str, Any]:
    encoded = base64.b64encode(attachment.data).decode("ascii")
    return {
        "type": "image_url",
        "image_url": f"data:{attachment.mime_type};base64,{encoded}",
    }


def prompt_to_langchain_message(
    prompt: str, attachment: Optional[InlineAttachment] = None
) -> HumanMessage:
    if attachment is None:
        return HumanMessage(content=prompt)

    return HumanMessage(
        content=[
            {"type": "text", "text": prompt},
            attachment_to_langchain_block(attachment),
        ]
    )


def system_instruction_to_langchain(system_instruction: str) -> SystemMessage:
    return SystemMessage(content=system_instruction)


def chat_turn_to_langchain_message(turn: ChatTurn) -> BaseMessage:
    if turn.role == Role.ASSISTANT:
        return AIMessage(content=turn.text)
    return HumanMessage(content=turn.text)


def langchain_message_text(message: Any) -> str:
    """Plain text of a model reply.

    Gemini may answer with a list of content blocks instead of a string; only
    the text blocks are kept, in order.
    """
    content = getattr(message, "content", message)

    if isinstance(content, str):
        return content

    if not isinstance(content, list):
        raise TypeError(f"Unsupported model reply content: {type(content).__name__}")

    text_items: list[str] = []
    for block in content:
        if isinstance(block, str):
            text_items.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            text_items.append(block.get("text") or "")

    return "".join(text_items)
