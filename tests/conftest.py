import asyncio
from typing import Optional

import pytest
from langchain_core.messages import AIMessage

from cropgpt.core.langchain_message_adapter import InlineAttachment


class FakeProvider:
    """Stands in for GenAIProvider; replies are consumed in order.

    A reply that is an Exception instance is raised instead of returned.
    """

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.prompts: list[str] = []
        self.attachments: list[Optional[InlineAttachment]] = []
        self.conversations: list["FakeConversation"] = []
        self.conversation_replies: list = []

    async def generate(self, prompt, attachment=None):
        self.prompts.append(prompt)
        self.attachments.append(attachment)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def create_conversation(self, system_instruction):
        conversation = FakeConversation(system_instruction, self.conversation_replies)
        self.conversations.append(conversation)
        return conversation


class FakeConversation:
    """Scripted conversation. Each reply is a string, an Exception, or a
    (delay_seconds, reply) tuple to simulate provider latency.
    """

    def __init__(self, system_instruction, replies):
        self.system_instruction = system_instruction
        self.replies = replies
        self.received: list[str] = []

    async def send(self, text):
        self.received.append(text)
        reply = self.replies.pop(0)
        if isinstance(reply, tuple):
            delay, reply = reply
            await asyncio.sleep(delay)
        if isinstance(reply, Exception):
            raise reply
        return reply


class RecordingChatModel:
    """Minimal chat model double exposing ``ainvoke`` like a langchain model."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls: list[list] = []

    async def ainvoke(self, messages):
        self.calls.append(list(messages))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return AIMessage(content=reply)


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def make_provider():
    def _make(*replies):
        return FakeProvider(replies)

    return _make
