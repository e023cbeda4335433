import logging
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from cropgpt.models.chat_session import ChatTurn, Role

from .config import settings
from .langchain_message_adapter import (
    InlineAttachment,
    chat_turn_to_langchain_message,
    langchain_message_text,
    prompt_to_langchain_message,
    system_instruction_to_langchain,
)

logger = logging.getLogger(__name__)

_genai_provider: "GenAIProvider | None" = None

DEFAULT_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
}


def get_chat_model(model: str, **kwargs) -> ChatGoogleGenerativeAI:
    if "google_api_key" not in kwargs and "api_key" not in kwargs:
        kwargs["google_api_key"] = settings.GEMINI_API_KEY
    if "safety_settings" not in kwargs:
        kwargs["safety_settings"] = DEFAULT_SAFETY_SETTINGS
    if "temperature" not in kwargs and settings.GEMINI_TEMPERATURE is not None:
        kwargs["temperature"] = settings.GEMINI_TEMPERATURE
    return ChatGoogleGenerativeAI(model=model, **kwargs)


class ModelConversation:
    """Multi-turn conversation handle that keeps its own context.

    Only exchanges that completed are remembered: if the model call fails,
    the user message is not added to the context sent on the next turn.
    """

    def __init__(self, model: BaseChatModel, system_instruction: str) -> None:
        self._model = model
        self.system_instruction = system_instruction
        self._history: list[ChatTurn] = []

    @property
    def history(self) -> list[ChatTurn]:
        return list(self._history)

    def _build_messages(self, text: str) -> list[BaseMessage]:
        return (
            [system_instruction_to_langchain(self.system_instruction)]
            + [chat_turn_to_langchain_message(turn) for turn in self._history]
            + [prompt_to_langchain_message(text)]
        )

    async def send(self, text: str) -> str:
        response = await self._model.ainvoke(self._build_messages(text))
        reply = langchain_message_text(response)
        self._history.append(ChatTurn(role=Role.USER, text=text))
        self._history.append(ChatTurn(role=Role.ASSISTANT, text=reply))
        return reply


class GenAIProvider:
    """The two capabilities the query layer needs from a language model:
    one-shot generation and conversations.
    """

    def __init__(
        self, model: Optional[BaseChatModel] = None, model_name: Optional[str] = None
    ) -> None:
        self._model = model
        self.model_name = model_name or settings.GEMINI_MODEL

    @property
    def model(self) -> BaseChatModel:
        if self._model is None:
            logger.info("Creating chat model %s", self.model_name)
            self._model = get_chat_model(model=self.model_name)
        return self._model

    async def generate(
        self, prompt: str, attachment: Optional[InlineAttachment] = None
    ) -> str:
        response = await self.model.ainvoke(
            [prompt_to_langchain_message(prompt, attachment)]
        )
        return langchain_message_text(response)

    def create_conversation(self, system_instruction: str) -> ModelConversation:
        return ModelConversation(model=self.model, system_instruction=system_instruction)


def get_genai_provider() -> GenAIProvider:
    global _genai_provider
    if _genai_provider is None:
        _genai_provider = GenAIProvider()
    return _genai_provider
