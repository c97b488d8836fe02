"""
Chat completion request descriptor and response shapes.

Endpoint: ``POST {base_url}/chat/completions`` with a JSON body.

Messages are validated per role at construction time:
    - ``system`` and ``user`` need non-empty ``content``.
    - ``assistant`` needs ``content`` or ``tool_calls``.
    - ``tool`` needs ``content`` and the ``tool_call_id`` it answers.

Tool parameters are plain JSON-schema mappings; generating them from Python
types is left to callers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, List, Literal, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...config.defaults import CHAT_DEFAULT_MODEL
from ..request import BodyKind, RequestModel, ResponseModel

Role = Literal["system", "user", "assistant", "tool"]


class FunctionCall(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    # JSON-encoded arguments as produced by the model; may be invalid JSON.
    arguments: str


class ToolCall(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    type: Literal["function"] = "function"
    function: FunctionCall


class ChatMessage(RequestModel):
    """One message of a conversation."""

    role: Role
    content: Optional[str] = None
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None

    @model_validator(mode="after")
    def _validate_role_fields(self) -> "ChatMessage":
        has_content = bool(self.content and self.content.strip())
        if self.role in ("system", "user") and not has_content:
            raise ValueError(f"{self.role} message must have non-empty content")
        if self.role == "assistant" and not (has_content or self.tool_calls):
            raise ValueError("assistant message needs content or tool_calls")
        if self.role == "tool":
            if not self.tool_call_id:
                raise ValueError("tool message needs tool_call_id")
            if self.content is None:
                raise ValueError("tool message needs content")
        if self.role != "tool" and self.tool_call_id is not None:
            raise ValueError("tool_call_id is only valid on tool messages")
        if self.role != "assistant" and self.tool_calls:
            raise ValueError("tool_calls are only valid on assistant messages")
        return self

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str, name: Optional[str] = None) -> "ChatMessage":
        return cls(role="user", content=content, name=name)

    @classmethod
    def assistant(cls, content: Optional[str] = None, tool_calls: Optional[List[ToolCall]] = None) -> "ChatMessage":
        return cls(role="assistant", content=content, tool_calls=tool_calls)

    @classmethod
    def tool(cls, content: str, tool_call_id: str) -> "ChatMessage":
        return cls(role="tool", content=content, tool_call_id=tool_call_id)


class FunctionSpec(RequestModel):
    name: str = Field(..., min_length=1, max_length=64, pattern=r"^[a-zA-Z0-9_-]+$")
    description: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None


class ToolSpec(RequestModel):
    type: Literal["function"] = "function"
    function: FunctionSpec


class ChatResponseFormatType(str, Enum):
    TEXT = "text"
    JSON_OBJECT = "json_object"


class ChatResponseFormat(RequestModel):
    type: ChatResponseFormatType = ChatResponseFormatType.TEXT


class ChatCompletionRequest(RequestModel):
    """Chat completion request.

    Parameters:
        messages: Non-empty conversation.
        model: Chat model identifier.
        temperature: Sampling temperature in [0, 2].
        top_p: Nucleus sampling mass in [0, 1].
        n: Number of choices (>= 1).
        stop: Up to four stop sequences.
        max_tokens: Completion token cap (> 0).
        presence_penalty / frequency_penalty: In [-2, 2].
        seed: Best-effort deterministic sampling.
        response_format: ``text`` or ``json_object``.
        tools: Functions the model may call.
        tool_choice: ``none``, ``auto``, ``required`` or a specific function selector.
        user: End-user identifier for upstream abuse monitoring.

    Raises:
        ValidationError: On empty messages, out-of-range values, or a
            ``tool_choice`` without ``tools``.
    """

    PATH: ClassVar[str] = "chat/completions"
    BODY_KIND: ClassVar[BodyKind] = BodyKind.JSON

    messages: List[ChatMessage] = Field(..., min_length=1)
    model: str = Field(default=CHAT_DEFAULT_MODEL, min_length=1)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    n: Optional[int] = Field(default=None, ge=1)
    stop: Optional[Union[str, List[str]]] = None
    max_tokens: Optional[int] = Field(default=None, gt=0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    seed: Optional[int] = None
    response_format: Optional[ChatResponseFormat] = None
    tools: Optional[List[ToolSpec]] = None
    tool_choice: Optional[Union[Literal["none", "auto", "required"], Dict[str, Any]]] = None
    user: Optional[str] = None

    @model_validator(mode="after")
    def _validate_options(self) -> "ChatCompletionRequest":
        if isinstance(self.stop, list) and len(self.stop) > 4:
            raise ValueError("at most 4 stop sequences are allowed")
        if self.tool_choice is not None and self.tool_choice != "none" and not self.tools:
            raise ValueError("tool_choice requires tools")
        return self

    @classmethod
    def new(cls, messages: Sequence[ChatMessage], model: str = CHAT_DEFAULT_MODEL) -> "ChatCompletionRequest":
        return cls(messages=list(messages), model=model)


class AssistantMessage(ResponseModel):
    role: str = "assistant"
    content: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    refusal: Optional[str] = None


class ChatChoice(ResponseModel):
    index: int
    message: AssistantMessage
    finish_reason: Optional[str] = None


class ChatUsage(ResponseModel):
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class ChatCompletionResponse(ResponseModel):
    id: str
    object: str = "chat.completion"
    created: int
    model: str
    system_fingerprint: Optional[str] = None
    choices: List[ChatChoice]
    usage: Optional[ChatUsage] = None


__all__ = [
    "Role",
    "FunctionCall",
    "ToolCall",
    "ChatMessage",
    "FunctionSpec",
    "ToolSpec",
    "ChatResponseFormatType",
    "ChatResponseFormat",
    "ChatCompletionRequest",
    "AssistantMessage",
    "ChatChoice",
    "ChatUsage",
    "ChatCompletionResponse",
]
