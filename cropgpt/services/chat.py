import asyncio
import logging
from typing import Optional

from cropgpt.core.genai_client import (
    GenAIProvider,
    ModelConversation,
    get_genai_provider,
)
from cropgpt.models.chat_session import ChatSession, ChatTurn, Role
from cropgpt.prompts.chat_system_prompt import CHAT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

CHAT_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."

_chat_session_manager: "ChatSessionManager | None" = None


class ChatSessionManager:
    """Owns the single CropGPT conversation.

    The session is created on the first send and lives until the process
    exits. Sends are serialized by a FIFO lock, so the transcript always
    reads in the order the calls were issued. Callers must not pass empty
    text.
    """

    def __init__(
        self,
        provider: Optional[GenAIProvider] = None,
        system_instruction: str = CHAT_SYSTEM_PROMPT,
    ) -> None:
        self._provider = provider
        self._system_instruction = system_instruction
        self._session: Optional[ChatSession] = None
        self._conversation: Optional[ModelConversation] = None
        self._lock = asyncio.Lock()

    @property
    def session(self) -> Optional[ChatSession]:
        return self._session

    @property
    def transcript(self) -> list[ChatTurn]:
        if self._session is None:
            return []
        return [turn.model_copy() for turn in self._session.turns]

    def _ensure_session(self) -> ChatSession:
        if self._session is None:
            self._session = ChatSession(system_instruction=self._system_instruction)
            logger.info("Chat session created")
        return self._session

    def _ensure_conversation(self) -> ModelConversation:
        if self._conversation is None:
            provider = self._provider or get_genai_provider()
            self._conversation = provider.create_conversation(
                self._system_instruction
            )
        return self._conversation

    async def send(self, text: str) -> str:
        async with self._lock:
            session = self._ensure_session()
            session.turns.append(ChatTurn(role=Role.USER, text=text))

            try:
                reply = await self._ensure_conversation().send(text)
            except Exception:
                logger.exception("Error in chat")
                reply = CHAT_ERROR_MESSAGE

            session.turns.append(ChatTurn(role=Role.ASSISTANT, text=reply))
            return reply


def get_chat_session_manager() -> ChatSessionManager:
    global _chat_session_manager
    if _chat_session_manager is None:
        _chat_session_manager = ChatSessionManager()
    return _chat_session_manager
