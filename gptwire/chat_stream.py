"""Chunks of a streamed chat completion and their JSON wire format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gptwire.chat import (
    ContentFilterResults,
    FunctionCall,
    PromptFilterResult,
    ToolCall,
    Usage,
    _field,
    _list_of,
    _loads,
    _mapping,
    _optional,
    _wire,
)


def _int_list(data: Any, key: str) -> list[int] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(
        isinstance(item, int) and not isinstance(item, bool) for item in value
    ):
        raise ValueError(f"field {key!r}: expected a list of integers")
    return list(value)


@dataclass
class ChatCompletionStreamChoiceDelta:
    """The part of a message carried by one stream chunk."""

    content: str = ""
    role: str = ""
    function_call: FunctionCall | None = None
    tool_calls: list[ToolCall] = field(default_factory=list)
    refusal: str = ""
    reasoning_content: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionStreamChoiceDelta:
        data = _mapping(data, "stream delta")
        return cls(
            content=_field(data, "content", str, ""),
            role=_field(data, "role", str, ""),
            function_call=_optional(data, "function_call", FunctionCall.from_dict),
            tool_calls=_list_of(data, "tool_calls", ToolCall.from_dict) or [],
            refusal=_field(data, "refusal", str, ""),
            reasoning_content=_field(data, "reasoning_content", str, ""),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.content:
            out["content"] = self.content
        if self.role:
            out["role"] = _wire(self.role)
        if self.function_call is not None:
            out["function_call"] = self.function_call.to_dict()
        if self.tool_calls:
            out["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        if self.refusal:
            out["refusal"] = self.refusal
        if self.reasoning_content:
            out["reasoning_content"] = self.reasoning_content
        return out


@dataclass
class ChatCompletionTokenLogprobTopLogprob:
    token: str = ""
    bytes: list[int] | None = None
    logprob: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionTokenLogprobTopLogprob:
        data = _mapping(data, "top logprob")
        return cls(
            token=_field(data, "token", str, ""),
            bytes=_int_list(data, "bytes"),
            logprob=_field(data, "logprob", float, 0.0),
        )


@dataclass
class ChatCompletionTokenLogprob:
    token: str = ""
    bytes: list[int] | None = None
    logprob: float = 0.0
    top_logprobs: list[ChatCompletionTokenLogprobTopLogprob] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionTokenLogprob:
        data = _mapping(data, "token logprob")
        return cls(
            token=_field(data, "token", str, ""),
            bytes=_int_list(data, "bytes"),
            logprob=_field(data, "logprob", float, 0.0),
            top_logprobs=_list_of(
                data, "top_logprobs", ChatCompletionTokenLogprobTopLogprob.from_dict
            ),
        )


@dataclass
class ChatCompletionStreamChoiceLogprobs:
    content: list[ChatCompletionTokenLogprob] | None = None
    refusal: list[ChatCompletionTokenLogprob] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionStreamChoiceLogprobs:
        data = _mapping(data, "stream logprobs")
        return cls(
            content=_list_of(data, "content", ChatCompletionTokenLogprob.from_dict),
            refusal=_list_of(data, "refusal", ChatCompletionTokenLogprob.from_dict),
        )


@dataclass
class ChatCompletionStreamChoice:
    index: int = 0
    delta: ChatCompletionStreamChoiceDelta = field(
        default_factory=ChatCompletionStreamChoiceDelta
    )
    logprobs: ChatCompletionStreamChoiceLogprobs | None = None
    finish_reason: str = ""
    content_filter_results: ContentFilterResults = field(default_factory=ContentFilterResults)

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionStreamChoice:
        data = _mapping(data, "stream choice")
        return cls(
            index=_field(data, "index", int, 0),
            delta=_optional(data, "delta", ChatCompletionStreamChoiceDelta.from_dict)
            or ChatCompletionStreamChoiceDelta(),
            logprobs=_optional(data, "logprobs", ChatCompletionStreamChoiceLogprobs.from_dict),
            finish_reason=_field(data, "finish_reason", str, ""),
            content_filter_results=_optional(
                data, "content_filter_results", ContentFilterResults.from_dict
            )
            or ContentFilterResults(),
        )


@dataclass
class _PromptAnnotation:
    prompt_index: int = 0
    content_filter_results: ContentFilterResults = field(default_factory=ContentFilterResults)

    @classmethod
    def from_dict(cls, data: Any) -> _PromptAnnotation:
        data = _mapping(data, "prompt annotation")
        return cls(
            prompt_index=_field(data, "prompt_index", int, 0),
            content_filter_results=_optional(
                data, "content_filter_results", ContentFilterResults.from_dict
            )
            or ContentFilterResults(),
        )


@dataclass
class ChatCompletionStreamResponse:
    """One chunk of a streamed chat completion."""

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[ChatCompletionStreamChoice] = field(default_factory=list)
    system_fingerprint: str = ""
    prompt_annotations: list[_PromptAnnotation] = field(default_factory=list)
    prompt_filter_results: list[PromptFilterResult] = field(default_factory=list)
    usage: Usage | None = None

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionStreamResponse:
        data = _mapping(data, "stream response")
        return cls(
            id=_field(data, "id", str, ""),
            object=_field(data, "object", str, ""),
            created=_field(data, "created", int, 0),
            model=_field(data, "model", str, ""),
            choices=_list_of(data, "choices", ChatCompletionStreamChoice.from_dict) or [],
            system_fingerprint=_field(data, "system_fingerprint", str, ""),
            prompt_annotations=_list_of(data, "prompt_annotations", _PromptAnnotation.from_dict)
            or [],
            prompt_filter_results=_list_of(
                data, "prompt_filter_results", PromptFilterResult.from_dict
            )
            or [],
            usage=_optional(data, "usage", Usage.from_dict),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> ChatCompletionStreamResponse:
        return cls.from_dict(_loads(text))