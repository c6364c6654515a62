"""Chat completion request and response models with their JSON wire format."""

from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class ContentFieldsMisusedError(ValueError):
    """Raised when a message sets both ``content`` and ``multi_content``."""

    def __init__(
        self,
        message: str = "can't use both Content and MultiContent properties simultaneously",
    ) -> None:
        super().__init__(message)


class ChatMessageRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"
    TOOL = "tool"
    DEVELOPER = "developer"


class ImageURLDetail(str, Enum):
    HIGH = "high"
    LOW = "low"
    AUTO = "auto"


class ChatMessagePartType(str, Enum):
    TEXT = "text"
    IMAGE_URL = "image_url"


class ChatCompletionResponseFormatType(str, Enum):
    JSON_OBJECT = "json_object"
    JSON_SCHEMA = "json_schema"
    TEXT = "text"


class ToolType(str, Enum):
    FUNCTION = "function"


class FinishReason(str, Enum):
    STOP = "stop"
    LENGTH = "length"
    FUNCTION_CALL = "function_call"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    NULL = "null"


class ServiceTier(str, Enum):
    AUTO = "auto"
    DEFAULT = "default"
    FLEX = "flex"
    PRIORITY = "priority"


# ---------------------------------------------------------------- helpers


def _wire(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _number(value: Any) -> Any:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _jsonable(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return _wire(value)


def _dumps(obj: Any) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def _loads(text: str | bytes) -> Any:
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("utf-8")
    return json.loads(text)


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _field(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = data.get(key)
    if value is None:
        return default
    if kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        if ok:
            value = float(value)
    elif kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise ValueError(
            f"field {key!r}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _list_of(
    data: Mapping[str, Any], key: str, parse: Callable[[Any], T]
) -> list[T] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected a list, got {type(value).__name__}")
    return [parse(item) for item in value]


def _optional(data: Mapping[str, Any], key: str, parse: Callable[[Any], T]) -> T | None:
    value = data.get(key)
    return None if value is None else parse(value)


def _decode_bytes(data: Mapping[str, Any], key: str) -> bytes:
    value = data.get(key)
    if value is None:
        return b""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected base64 text")
    return base64.b64decode(value, validate=True)


def finish_reason_to_json(reason: Any) -> str | None:
    """Return the JSON value for a finish reason: ``None`` for null or empty."""
    reason = _wire(reason)
    if reason in ("", FinishReason.NULL.value, None):
        return None
    return str(reason)


# ---------------------------------------------------------------- messages


@dataclass
class ChatMessageImageURL:
    url: str = ""
    detail: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.url:
            out["url"] = self.url
        if self.detail:
            out["detail"] = _wire(self.detail)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ChatMessageImageURL:
        data = _mapping(data, "image url")
        return cls(url=_field(data, "url", str, ""), detail=_field(data, "detail", str, ""))


@dataclass
class ChatMessagePart:
    type: str = ""
    text: str = ""
    image_url: ChatMessageImageURL | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.type:
            out["type"] = _wire(self.type)
        if self.text:
            out["text"] = self.text
        if self.image_url is not None:
            out["image_url"] = self.image_url.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ChatMessagePart:
        data = _mapping(data, "message part")
        return cls(
            type=_field(data, "type", str, ""),
            text=_field(data, "text", str, ""),
            image_url=_optional(data, "image_url", ChatMessageImageURL.from_dict),
        )


@dataclass
class FunctionCall:
    name: str = ""
    arguments: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.arguments:
            out["arguments"] = self.arguments
        return out

    @classmethod
    def from_dict(cls, data: Any) -> FunctionCall:
        data = _mapping(data, "function call")
        return cls(
            name=_field(data, "name", str, ""),
            arguments=_field(data, "arguments", str, ""),
        )


@dataclass
class ToolCall:
    index: int | None = None
    id: str = ""
    type: str = ""
    function: FunctionCall = field(default_factory=FunctionCall)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.index is not None:
            out["index"] = self.index
        if self.id:
            out["id"] = self.id
        out["type"] = _wire(self.type)
        out["function"] = self.function.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ToolCall:
        data = _mapping(data, "tool call")
        return cls(
            index=_field(data, "index", int, None),
            id=_field(data, "id", str, ""),
            type=_field(data, "type", str, ""),
            function=_optional(data, "function", FunctionCall.from_dict) or FunctionCall(),
        )


@dataclass
class ChatCompletionMessage:
    """One chat message; text goes in ``content``, mixed parts in ``multi_content``."""

    role: str = ""
    content: str = ""
    refusal: str = ""
    multi_content: list[ChatMessagePart] | None = None
    name: str = ""
    reasoning_content: str = ""
    function_call: FunctionCall | None = None
    tool_calls: list[ToolCall] = field(default_factory=list)
    tool_call_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        if self.content and self.multi_content is not None:
            raise ContentFieldsMisusedError()
        out: dict[str, Any] = {"role": _wire(self.role)}
        if self.multi_content:
            if self.refusal:
                out["refusal"] = self.refusal
            out["content"] = [part.to_dict() for part in self.multi_content]
        else:
            if self.content:
                out["content"] = self.content
            if self.refusal:
                out["refusal"] = self.refusal
        if self.name:
            out["name"] = self.name
        if self.reasoning_content:
            out["reasoning_content"] = self.reasoning_content
        if self.function_call is not None:
            out["function_call"] = self.function_call.to_dict()
        if self.tool_calls:
            out["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        if self.tool_call_id:
            out["tool_call_id"] = self.tool_call_id
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> ChatMessageMessageT:
        data = _mapping(data, "chat message")
        content = data.get("content")
        multi: list[ChatMessagePart] | None = None
        text = ""
        if isinstance(content, list):
            multi = [ChatMessagePart.from_dict(part) for part in content]
        elif content is None or isinstance(content, str):
            text = content or ""
        else:
            raise ValueError(
                f"field 'content': expected text or a list of parts, got {type(content).__name__}"
            )
        return cls(
            role=_field(data, "role", str, ""),
            content=text,
            refusal=_field(data, "refusal", str, ""),
            multi_content=multi,
            name=_field(data, "name", str, ""),
            reasoning_content=_field(data, "reasoning_content", str, ""),
            function_call=_optional(data, "function_call", FunctionCall.from_dict),
            tool_calls=_list_of(data, "tool_calls", ToolCall.from_dict) or [],
            tool_call_id=_field(data, "tool_call_id", str, ""),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> ChatCompletionMessage:
        return cls.from_dict(_loads(text))


ChatMessageMessageT = ChatCompletionMessage


# ---------------------------------------------------------------- tools


@dataclass
class FunctionDefinition:
    name: str = ""
    description: str = ""
    strict: bool = False
    parameters: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.description:
            out["description"] = self.description
        if self.strict:
            out["strict"] = True
        out["parameters"] = _jsonable(self.parameters)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> FunctionDefinition:
        data = _mapping(data, "function definition")
        return cls(
            name=_field(data, "name", str, ""),
            description=_field(data, "description", str, ""),
            strict=_field(data, "strict", bool, False),
            parameters=data.get("parameters"),
        )


@dataclass
class Tool:
    type: str = ToolType.FUNCTION.value
    function: FunctionDefinition | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": _wire(self.type)}
        if self.function is not None:
            out["function"] = self.function.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Tool:
        data = _mapping(data, "tool")
        return cls(
            type=_field(data, "type", str, ""),
            function=_optional(data, "function", FunctionDefinition.from_dict),
        )


@dataclass
class ToolFunction:
    name: str = ""


@dataclass
class ToolChoice:
    type: str = ToolType.FUNCTION.value
    function: ToolFunction = field(default_factory=ToolFunction)

    def to_dict(self) -> dict[str, Any]:
        return {"type": _wire(self.type), "function": {"name": self.function.name}}


@dataclass
class StreamOptions:
    include_usage: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"include_usage": True} if self.include_usage else {}


@dataclass
class Prediction:
    content: str = ""
    type: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"content": self.content, "type": self.type}


# ---------------------------------------------------------------- response format


@dataclass
class ChatCompletionResponseFormatJSONSchema:
    name: str = ""
    description: str = ""
    schema: Any = None
    strict: bool = False

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.description:
            out["description"] = self.description
        out["schema"] = _jsonable(self.schema)
        out["strict"] = self.strict
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionResponseFormatJSONSchema:
        data = _mapping(data, "json schema")
        schema = data.get("schema")
        if schema is not None:
            schema = dict(_mapping(schema, "field 'schema'"))
        return cls(
            name=_field(data, "name", str, ""),
            description=_field(data, "description", str, ""),
            schema=schema,
            strict=_field(data, "strict", bool, False),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> ChatCompletionResponseFormatJSONSchema:
        return cls.from_dict(_loads(text))


@dataclass
class ChatCompletionResponseFormat:
    type: str = ""
    json_schema: ChatCompletionResponseFormatJSONSchema | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.type:
            out["type"] = _wire(self.type)
        if self.json_schema is not None:
            out["json_schema"] = self.json_schema.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionResponseFormat:
        data = _mapping(data, "response format")
        return cls(
            type=_field(data, "type", str, ""),
            json_schema=_optional(
                data, "json_schema", ChatCompletionResponseFormatJSONSchema.from_dict
            ),
        )


# ---------------------------------------------------------------- request


@dataclass
class ChatCompletionRequest:
    """Parameters of a chat completion call; empty values are left out of the JSON."""

    model: str = ""
    messages: list[ChatCompletionMessage] | None = None
    max_tokens: int = 0
    max_completion_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    n: int = 0
    stream: bool = False
    stop: list[str] = field(default_factory=list)
    presence_penalty: float = 0.0
    response_format: ChatCompletionResponseFormat | None = None
    seed: int | None = None
    frequency_penalty: float = 0.0
    logit_bias: dict[str, int] = field(default_factory=dict)
    logprobs: bool = False
    top_logprobs: int = 0
    user: str = ""
    functions: list[FunctionDefinition] = field(default_factory=list)
    function_call: Any = None
    tools: list[Tool] = field(default_factory=list)
    tool_choice: Any = None
    stream_options: StreamOptions | None = None
    parallel_tool_calls: Any = None
    store: bool = False
    reasoning_effort: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    prediction: Prediction | None = None
    chat_template_kwargs: dict[str, Any] = field(default_factory=dict)
    service_tier: str = ""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "model": self.model,
            "messages": None
            if self.messages is None
            else [message.to_dict() for message in self.messages],
        }
        if self.max_tokens:
            out["max_tokens"] = self.max_tokens
        if self.max_completion_tokens:
            out["max_completion_tokens"] = self.max_completion_tokens
        if self.temperature:
            out["temperature"] = _number(self.temperature)
        if self.top_p:
            out["top_p"] = _number(self.top_p)
        if self.n:
            out["n"] = self.n
        if self.stream:
            out["stream"] = True
        if self.stop:
            out["stop"] = list(self.stop)
        if self.presence_penalty:
            out["presence_penalty"] = _number(self.presence_penalty)
        if self.response_format is not None:
            out["response_format"] = self.response_format.to_dict()
        if self.seed is not None:
            out["seed"] = self.seed
        if self.frequency_penalty:
            out["frequency_penalty"] = _number(self.frequency_penalty)
        if self.logit_bias:
            out["logit_bias"] = dict(self.logit_bias)
        if self.logprobs:
            out["logprobs"] = True
        if self.top_logprobs:
            out["top_logprobs"] = self.top_logprobs
        if self.user:
            out["user"] = self.user
        if self.functions:
            out["functions"] = [function.to_dict() for function in self.functions]
        if self.function_call is not None:
            out["function_call"] = _jsonable(self.function_call)
        if self.tools:
            out["tools"] = [tool.to_dict() for tool in self.tools]
        if self.tool_choice is not None:
            out["tool_choice"] = _jsonable(self.tool_choice)
        if self.stream_options is not None:
            out["stream_options"] = self.stream_options.to_dict()
        if self.parallel_tool_calls is not None:
            out["parallel_tool_calls"] = self.parallel_tool_calls
        if self.store:
            out["store"] = True
        if self.reasoning_effort:
            out["reasoning_effort"] = self.reasoning_effort
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        if self.prediction is not None:
            out["prediction"] = self.prediction.to_dict()
        if self.chat_template_kwargs:
            out["chat_template_kwargs"] = dict(self.chat_template_kwargs)
        if self.service_tier:
            out["service_tier"] = _wire(self.service_tier)
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionRequest:
        data = _mapping(data, "chat completion request")
        stream_options = _optional(
            data,
            "stream_options",
            lambda d: StreamOptions(
                include_usage=_field(_mapping(d, "stream options"), "include_usage", bool, False)
            ),
        )
        prediction = _optional(
            data,
            "prediction",
            lambda d: Prediction(
                content=_field(_mapping(d, "prediction"), "content", str, ""),
                type=_field(d, "type", str, ""),
            ),
        )
        return cls(
            model=_field(data, "model", str, ""),
            messages=_list_of(data, "messages", ChatCompletionMessage.from_dict),
            max_tokens=_field(data, "max_tokens", int, 0),
            max_completion_tokens=_field(data, "max_completion_tokens", int, 0),
            temperature=_field(data, "temperature", float, 0.0),
            top_p=_field(data, "top_p", float, 0.0),
            n=_field(data, "n", int, 0),
            stream=_field(data, "stream", bool, False),
            stop=list(_field(data, "stop", list, [])),
            presence_penalty=_field(data, "presence_penalty", float, 0.0),
            response_format=_optional(
                data, "response_format", ChatCompletionResponseFormat.from_dict
            ),
            seed=_field(data, "seed", int, None),
            frequency_penalty=_field(data, "frequency_penalty", float, 0.0),
            logit_bias=dict(_field(data, "logit_bias", dict, {})),
            logprobs=_field(data, "logprobs", bool, False),
            top_logprobs=_field(data, "top_logprobs", int, 0),
            user=_field(data, "user", str, ""),
            functions=_list_of(data, "functions", FunctionDefinition.from_dict) or [],
            function_call=data.get("function_call"),
            tools=_list_of(data, "tools", Tool.from_dict) or [],
            tool_choice=data.get("tool_choice"),
            stream_options=stream_options,
            parallel_tool_calls=data.get("parallel_tool_calls"),
            store=_field(data, "store", bool, False),
            reasoning_effort=_field(data, "reasoning_effort", str, ""),
            metadata=dict(_field(data, "metadata", dict, {})),
            prediction=prediction,
            chat_template_kwargs=dict(_field(data, "chat_template_kwargs", dict, {})),
            service_tier=_field(data, "service_tier", str, ""),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> ChatCompletionRequest:
        return cls.from_dict(_loads(text))


# ---------------------------------------------------------------- response


@dataclass
class _SeverityFilter:
    filtered: bool = False
    severity: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> _SeverityFilter:
        data = _mapping(data, "content filter")
        return cls(
            filtered=_field(data, "filtered", bool, False),
            severity=_field(data, "severity", str, ""),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"filtered": self.filtered}
        if self.severity:
            out["severity"] = self.severity
        return out


@dataclass
class _DetectionFilter:
    filtered: bool = False
    detected: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> _DetectionFilter:
        data = _mapping(data, "content filter")
        return cls(
            filtered=_field(data, "filtered", bool, False),
            detected=_field(data, "detected", bool, False),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"filtered": self.filtered, "detected": self.detected}


@dataclass
class ContentFilterResults:
    hate: _SeverityFilter = field(default_factory=_SeverityFilter)
    self_harm: _SeverityFilter = field(default_factory=_SeverityFilter)
    sexual: _SeverityFilter = field(default_factory=_SeverityFilter)
    violence: _SeverityFilter = field(default_factory=_SeverityFilter)
    jailbreak: _DetectionFilter = field(default_factory=_DetectionFilter)
    profanity: _DetectionFilter = field(default_factory=_DetectionFilter)

    @classmethod
    def from_dict(cls, data: Any) -> ContentFilterResults:
        data = _mapping(data, "content filter results")
        return cls(
            hate=_optional(data, "hate", _SeverityFilter.from_dict) or _SeverityFilter(),
            self_harm=_optional(data, "self_harm", _SeverityFilter.from_dict) or _SeverityFilter(),
            sexual=_optional(data, "sexual", _SeverityFilter.from_dict) or _SeverityFilter(),
            violence=_optional(data, "violence", _SeverityFilter.from_dict) or _SeverityFilter(),
            jailbreak=_optional(data, "jailbreak", _DetectionFilter.from_dict)
            or _DetectionFilter(),
            profanity=_optional(data, "profanity", _DetectionFilter.from_dict)
            or _DetectionFilter(),
        )


def _content_filter_to_dict(results: ContentFilterResults) -> dict[str, Any]:
    return {
        "hate": results.hate.to_dict(),
        "self_harm": results.self_harm.to_dict(),
        "sexual": results.sexual.to_dict(),
        "violence": results.violence.to_dict(),
        "jailbreak": results.jailbreak.to_dict(),
        "profanity": results.profanity.to_dict(),
    }


@dataclass
class PromptFilterResult:
    index: int = 0
    content_filter_results: ContentFilterResults = field(default_factory=ContentFilterResults)

    @classmethod
    def from_dict(cls, data: Any) -> PromptFilterResult:
        data = _mapping(data, "prompt filter result")
        return cls(
            index=_field(data, "index", int, 0),
            content_filter_results=_optional(
                data, "content_filter_results", ContentFilterResults.from_dict
            )
            or ContentFilterResults(),
        )


@dataclass
class TopLogProbs:
    token: str = ""
    logprob: float = 0.0
    bytes: bytes = b""

    @classmethod
    def from_dict(cls, data: Any) -> TopLogProbs:
        data = _mapping(data, "top logprob")
        return cls(
            token=_field(data, "token", str, ""),
            logprob=_field(data, "logprob", float, 0.0),
            bytes=_decode_bytes(data, "bytes"),
        )


@dataclass
class LogProb:
    token: str = ""
    logprob: float = 0.0
    bytes: bytes = b""
    top_logprobs: list[TopLogProbs] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> LogProb:
        data = _mapping(data, "logprob")
        return cls(
            token=_field(data, "token", str, ""),
            logprob=_field(data, "logprob", float, 0.0),
            bytes=_decode_bytes(data, "bytes"),
            top_logprobs=_list_of(data, "top_logprobs", TopLogProbs.from_dict),
        )


@dataclass
class LogProbs:
    content: list[LogProb] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> LogProbs:
        data = _mapping(data, "logprobs")
        return cls(content=_list_of(data, "content", LogProb.from_dict))


def _token_to_dict(token: str, logprob: float, raw: bytes) -> dict[str, Any]:
    out: dict[str, Any] = {"token": token, "logprob": _number(logprob)}
    if raw:
        out["bytes"] = base64.b64encode(raw).decode("ascii")
    return out


def _logprobs_to_dict(logprobs: LogProbs) -> dict[str, Any]:
    if logprobs.content is None:
        return {"content": None}
    content = []
    for item in logprobs.content:
        entry = _token_to_dict(item.token, item.logprob, item.bytes)
        entry["top_logprobs"] = (
            None
            if item.top_logprobs is None
            else [_token_to_dict(t.token, t.logprob, t.bytes) for t in item.top_logprobs]
        )
        content.append(entry)
    return {"content": content}


@dataclass
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> Usage:
        data = _mapping(data, "usage")
        return cls(
            prompt_tokens=_field(data, "prompt_tokens", int, 0),
            completion_tokens=_field(data, "completion_tokens", int, 0),
            total_tokens=_field(data, "total_tokens", int, 0),
        )


@dataclass
class ChatCompletionChoice:
    index: int = 0
    message: ChatCompletionMessage = field(default_factory=ChatCompletionMessage)
    finish_reason: str = ""
    logprobs: LogProbs | None = None
    content_filter_results: ContentFilterResults = field(default_factory=ContentFilterResults)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "index": self.index,
            "message": self.message.to_dict(),
            "finish_reason": finish_reason_to_json(self.finish_reason),
        }
        if self.logprobs is not None:
            out["logprobs"] = _logprobs_to_dict(self.logprobs)
        out["content_filter_results"] = _content_filter_to_dict(self.content_filter_results)
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionChoice:
        data = _mapping(data, "chat completion choice")
        return cls(
            index=_field(data, "index", int, 0),
            message=_optional(data, "message", ChatCompletionMessage.from_dict)
            or ChatCompletionMessage(),
            finish_reason=_field(data, "finish_reason", str, ""),
            logprobs=_optional(data, "logprobs", LogProbs.from_dict),
            content_filter_results=_optional(
                data, "content_filter_results", ContentFilterResults.from_dict
            )
            or ContentFilterResults(),
        )


@dataclass
class ChatCompletionResponse:
    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: list[ChatCompletionChoice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)
    system_fingerprint: str = ""
    prompt_filter_results: list[PromptFilterResult] = field(default_factory=list)
    service_tier: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ChatCompletionResponse:
        data = _mapping(data, "chat completion response")
        return cls(
            id=_field(data, "id", str, ""),
            object=_field(data, "object", str, ""),
            created=_field(data, "created", int, 0),
            model=_field(data, "model", str, ""),
            choices=_list_of(data, "choices", ChatCompletionChoice.from_dict) or [],
            usage=_optional(data, "usage", Usage.from_dict) or Usage(),
            system_fingerprint=_field(data, "system_fingerprint", str, ""),
            prompt_filter_results=_list_of(
                data, "prompt_filter_results", PromptFilterResult.from_dict
            )
            or [],
            service_tier=_field(data, "service_tier", str, ""),
        )