"""Batch jobs: line items for the JSONL input file and batch resources."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote_plus

from gptwire.chat import (
    _dumps,
    _field,
    _jsonable,
    _list_of,
    _loads,
    _mapping,
    _optional,
    _wire,
)

BATCHES_SUFFIX = "/batches"
DEFAULT_COMPLETION_WINDOW = "24h"
DEFAULT_BATCH_FILE_NAME = "@batchinput.jsonl"


class BatchEndpoint(str, Enum):
    CHAT_COMPLETIONS = "/v1/chat/completions"
    COMPLETIONS = "/v1/completions"
    EMBEDDINGS = "/v1/embeddings"


def list_batch_query(after: str | None = None, limit: int | None = None) -> str:
    """Return the query string for listing batches: empty, or ``?`` and sorted pairs."""
    values = {"after": after, "limit": None if limit is None else str(limit)}
    pairs = sorted((k, v) for k, v in values.items() if v is not None)
    if not pairs:
        return ""
    return "?" + "&".join(f"{quote_plus(k)}={quote_plus(v)}" for k, v in pairs)


def _body_to_dict(body: Any) -> Any:
    if isinstance(body, Mapping):
        return dict(body)
    return _jsonable(body)


@dataclass
class BatchLineItem:
    """One request of a batch input file."""

    custom_id: str = ""
    body: Any = None
    method: str = "POST"
    url: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "custom_id": self.custom_id,
            "body": _body_to_dict(self.body),
            "method": self.method,
            "url": _wire(self.url),
        }

    def marshal(self) -> bytes:
        return _dumps(self.to_dict()).encode("utf-8")


@dataclass
class BatchRequestCounts:
    total: int = 0
    completed: int = 0
    failed: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> BatchRequestCounts:
        data = _mapping(data, "request counts")
        return cls(
            total=_field(data, "total", int, 0),
            completed=_field(data, "completed", int, 0),
            failed=_field(data, "failed", int, 0),
        )


@dataclass
class BatchError:
    code: str = ""
    message: str = ""
    param: str | None = None
    line: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> BatchError:
        data = _mapping(data, "batch error")
        return cls(
            code=_field(data, "code", str, ""),
            message=_field(data, "message", str, ""),
            param=_field(data, "param", str, None),
            line=_field(data, "line", int, None),
        )


@dataclass
class Batch:
    id: str = ""
    object: str = ""
    endpoint: str = ""
    errors: list[BatchError] | None = None
    errors_object: str = ""
    input_file_id: str = ""
    completion_window: str = ""
    status: str = ""
    output_file_id: str | None = None
    error_file_id: str | None = None
    created_at: int = 0
    in_progress_at: int | None = None
    expires_at: int | None = None
    finalizing_at: int | None = None
    completed_at: int | None = None
    failed_at: int | None = None
    expired_at: int | None = None
    cancelling_at: int | None = None
    cancelled_at: int | None = None
    request_counts: BatchRequestCounts = field(default_factory=BatchRequestCounts)
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Batch:
        data = _mapping(data, "batch")
        errors: list[BatchError] | None = None
        errors_object = ""
        raw_errors = data.get("errors")
        if raw_errors is not None:
            raw_errors = _mapping(raw_errors, "field 'errors'")
            errors_object = _field(raw_errors, "object", str, "")
            errors = _list_of(raw_errors, "data", BatchError.from_dict) or []
        metadata = _field(data, "metadata", dict, None)
        return cls(
            id=_field(data, "id", str, ""),
            object=_field(data, "object", str, ""),
            endpoint=_field(data, "endpoint", str, ""),
            errors=errors,
            errors_object=errors_object,
            input_file_id=_field(data, "input_file_id", str, ""),
            completion_window=_field(data, "completion_window", str, ""),
            status=_field(data, "status", str, ""),
            output_file_id=_field(data, "output_file_id", str, None),
            error_file_id=_field(data, "error_file_id", str, None),
            created_at=_field(data, "created_at", int, 0),
            in_progress_at=_field(data, "in_progress_at", int, None),
            expires_at=_field(data, "expires_at", int, None),
            finalizing_at=_field(data, "finalizing_at", int, None),
            completed_at=_field(data, "completed_at", int, None),
            failed_at=_field(data, "failed_at", int, None),
            expired_at=_field(data, "expired_at", int, None),
            cancelling_at=_field(data, "cancelling_at", int, None),
            cancelled_at=_field(data, "cancelled_at", int, None),
            request_counts=_optional(data, "request_counts", BatchRequestCounts.from_dict)
            or BatchRequestCounts(),
            metadata=None if metadata is None else dict(metadata),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> Batch:
        return cls.from_dict(_loads(text))


@dataclass
class CreateBatchRequest:
    """Parameters for creating a batch; an empty window means 24 hours."""

    input_file_id: str = ""
    endpoint: str = ""
    completion_window: str = ""
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "input_file_id": self.input_file_id,
            "endpoint": _wire(self.endpoint),
            "completion_window": self.completion_window or DEFAULT_COMPLETION_WINDOW,
            "metadata": None if self.metadata is None else dict(self.metadata),
        }


@dataclass
class UploadBatchFileRequest:
    """The contents of a batch input file, built up one request at a time."""

    file_name: str = DEFAULT_BATCH_FILE_NAME
    lines: list[BatchLineItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.file_name:
            self.file_name = DEFAULT_BATCH_FILE_NAME

    def _add(self, custom_id: str, body: Any, endpoint: BatchEndpoint) -> None:
        self.lines.append(
            BatchLineItem(custom_id=custom_id, body=body, method="POST", url=endpoint.value)
        )

    def add_chat_completion(self, custom_id: str, body: Any) -> None:
        """Append a chat completion request (an object with ``to_dict`` or a mapping)."""
        self._add(custom_id, body, BatchEndpoint.CHAT_COMPLETIONS)

    def add_completion(self, custom_id: str, body: Any) -> None:
        """Append a completion request (an object with ``to_dict`` or a mapping)."""
        self._add(custom_id, body, BatchEndpoint.COMPLETIONS)

    def add_embedding(self, custom_id: str, body: Any) -> None:
        """Append an embedding request (an object with ``to_dict`` or a mapping)."""
        self._add(custom_id, body, BatchEndpoint.EMBEDDINGS)

    def marshal_jsonl(self) -> bytes:
        return b"\n".join(line.marshal() for line in self.lines)


@dataclass
class ListBatchResponse:
    object: str = ""
    data: list[Batch] = field(default_factory=list)
    first_id: str = ""
    last_id: str = ""
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> ListBatchResponse:
        data = _mapping(data, "batch list")
        return cls(
            object=_field(data, "object", str, ""),
            data=_list_of(data, "data", Batch.from_dict) or [],
            first_id=_field(data, "first_id", str, ""),
            last_id=_field(data, "last_id", str, ""),
            has_more=_field(data, "has_more", bool, False),
        )

    @classmethod
    def from_json(cls, text: str | bytes) -> ListBatchResponse:
        return cls.from_dict(_loads(text))