"""Assistant resources, their requests and their URL paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote_plus

from gptwire.chat import (
    FunctionDefinition,
    _dumps,
    _field,
    _jsonable,
    _list_of,
    _mapping,
    _number,
    _optional,
    _wire,
)

ASSISTANTS_SUFFIX = "/assistants"
ASSISTANTS_FILES_SUFFIX = "/files"


class AssistantToolType(str, Enum):
    CODE_INTERPRETER = "code_interpreter"
    RETRIEVAL = "retrieval"
    FUNCTION = "function"
    FILE_SEARCH = "file_search"


def list_query(
    limit: int | None = None,
    order: str | None = None,
    after: str | None = None,
    before: str | None = None,
) -> str:
    """Return the query string for a list call: empty, or ``?`` and sorted pairs."""
    values = {
        "limit": None if limit is None else str(limit),
        "order": order,
        "after": after,
        "before": before,
    }
    pairs = sorted((k, v) for k, v in values.items() if v is not None)
    if not pairs:
        return ""
    return "?" + "&".join(f"{quote_plus(k)}={quote_plus(v)}" for k, v in pairs)


def assistant_path(assistant_id: str | None = None) -> str:
    """Return the path of the assistants collection or of one assistant."""
    if assistant_id is None:
        return ASSISTANTS_SUFFIX
    return f"{ASSISTANTS_SUFFIX}/{assistant_id}"


def assistant_file_path(assistant_id: str, file_id: str | None = None) -> str:
    """Return the path of an assistant's files, or of one of them."""
    base = f"{ASSISTANTS_SUFFIX}/{assistant_id}{ASSISTANTS_FILES_SUFFIX}"
    return base if file_id is None else f"{base}/{file_id}"


def _str_list(data: Any, key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"field {key!r}: expected a list of strings")
    return list(value)


@dataclass
class AssistantTool:
    type: str = ""
    function: FunctionDefinition | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": _wire(self.type)}
        if self.function is not None:
            out["function"] = self.function.to_dict()
        return out

    @classmethod
    def from_dict(cls, data: Any) -> AssistantTool:
        data = _mapping(data, "assistant tool")
        return cls(
            type=_field(data, "type", str, ""),
            function=_optional(data, "function", FunctionDefinition.from_dict),
        )


@dataclass
class AssistantToolFileSearch:
    vector_store_ids: list[str] = field(default_factory=list)


@dataclass
class AssistantToolCodeInterpreter:
    file_ids: list[str] = field(default_factory=list)


@dataclass
class AssistantToolResource:
    file_search: AssistantToolFileSearch | None = None
    code_interpreter: AssistantToolCodeInterpreter | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.file_search is not None:
            out["file_search"] = {"vector_store_ids": list(self.file_search.vector_store_ids)}
        if self.code_interpreter is not None:
            out["code_interpreter"] = {"file_ids": list(self.code_interpreter.file_ids)}
        return out

    @classmethod
    def from_dict(cls, data: Any) -> AssistantToolResource:
        data = _mapping(data, "tool resources")
        return cls(
            file_search=_optional(
                data,
                "file_search",
                lambda d: AssistantToolFileSearch(
                    vector_store_ids=_str_list(_mapping(d, "file search"), "vector_store_ids")
                ),
            ),
            code_interpreter=_optional(
                data,
                "code_interpreter",
                lambda d: AssistantToolCodeInterpreter(
                    file_ids=_str_list(_mapping(d, "code interpreter"), "file_ids")
                ),
            ),
        )


@dataclass
class Assistant:
    id: str = ""
    object: str = ""
    created_at: int = 0
    name: str | None = None
    description: str | None = None
    model: str = ""
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    tool_resources: AssistantToolResource | None = None
    file_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    temperature: float | None = None
    top_p: float | None = None
    response_format: Any = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "object": self.object,
            "created_at": self.created_at,
        }
        if self.name is not None:
            out["name"] = self.name
        if self.description is not None:
            out["description"] = self.description
        out["model"] = self.model
        if self.instructions is not None:
            out["instructions"] = self.instructions
        out["tools"] = None if self.tools is None else [t.to_dict() for t in self.tools]
        if self.tool_resources is not None:
            out["tool_resources"] = self.tool_resources.to_dict()
        if self.file_ids:
            out["file_ids"] = list(self.file_ids)
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        if self.temperature is not None:
            out["temperature"] = _number(self.temperature)
        if self.top_p is not None:
            out["top_p"] = _number(self.top_p)
        if self.response_format is not None:
            out["response_format"] = _jsonable(self.response_format)
        return out

    @classmethod
    def from_dict(cls, data: Any) -> Assistant:
        data = _mapping(data, "assistant")
        return cls(
            id=_field(data, "id", str, ""),
            object=_field(data, "object", str, ""),
            created_at=_field(data, "created_at", int, 0),
            name=_field(data, "name", str, None),
            description=_field(data, "description", str, None),
            model=_field(data, "model", str, ""),
            instructions=_field(data, "instructions", str, None),
            tools=_list_of(data, "tools", AssistantTool.from_dict),
            tool_resources=_optional(data, "tool_resources", AssistantToolResource.from_dict),
            file_ids=_str_list(data, "file_ids"),
            metadata=dict(_field(data, "metadata", dict, {})),
            temperature=_field(data, "temperature", float, None),
            top_p=_field(data, "top_p", float, None),
            response_format=data.get("response_format"),
        )


@dataclass
class AssistantRequest:
    """Assistant create or modify parameters.

    ``tools=None`` leaves the tools alone, ``[]`` removes them all and a
    populated list replaces them.
    """

    model: str = ""
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    file_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    tool_resources: AssistantToolResource | None = None
    response_format: Any = None
    temperature: float | None = None
    top_p: float | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.tools is not None:
            out["tools"] = [tool.to_dict() for tool in self.tools]
        out["model"] = self.model
        if self.name is not None:
            out["name"] = self.name
        if self.description is not None:
            out["description"] = self.description
        if self.instructions is not None:
            out["instructions"] = self.instructions
        if self.file_ids:
            out["file_ids"] = list(self.file_ids)
        if self.metadata:
            out["metadata"] = dict(self.metadata)
        if self.tool_resources is not None:
            out["tool_resources"] = self.tool_resources.to_dict()
        if self.response_format is not None:
            out["response_format"] = _jsonable(self.response_format)
        if self.temperature is not None:
            out["temperature"] = _number(self.temperature)
        if self.top_p is not None:
            out["top_p"] = _number(self.top_p)
        return out

    def to_json(self) -> str:
        return _dumps(self.to_dict())


@dataclass
class AssistantsList:
    assistants: list[Assistant] = field(default_factory=list)
    last_id: str | None = None
    first_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> AssistantsList:
        data = _mapping(data, "assistants list")
        return cls(
            assistants=_list_of(data, "data", Assistant.from_dict) or [],
            last_id=_field(data, "last_id", str, None),
            first_id=_field(data, "first_id", str, None),
            has_more=_field(data, "has_more", bool, False),
        )


@dataclass
class AssistantDeleteResponse:
    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> AssistantDeleteResponse:
        data = _mapping(data, "assistant delete response")
        return cls(
            id=_field(data, "id", str, ""),
            object=_field(data, "object", str, ""),
            deleted=_field(data, "deleted", bool, False),
        )


@dataclass
class AssistantFile:
    id: str = ""
    object: str = ""
    created_at: int = 0
    assistant_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "object": self.object,
            "created_at": self.created_at,
            "assistant_id": self.assistant_id,
        }

    @classmethod
    def from_dict(cls, data: Any) -> AssistantFile:
        data = _mapping(data, "assistant file")
        return cls(
            id=_field(data, "id", str, ""),
            object=_field(data, "object", str, ""),
            created_at=_field(data, "created_at", int, 0),
            assistant_id=_field(data, "assistant_id", str, ""),
        )


@dataclass
class AssistantFileRequest:
    file_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id}


@dataclass
class AssistantFilesList:
    assistant_files: list[AssistantFile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> AssistantFilesList:
        data = _mapping(data, "assistant files list")
        return cls(assistant_files=_list_of(data, "data", AssistantFile.from_dict) or [])