"""Audio transcription and translation requests, multipart forms and responses."""

from __future__ import annotations

import io
import os
import secrets
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, BinaryIO

from gptwire.chat import _field, _list_of, _mapping, _wire

WHISPER_1 = "whisper-1"


class AudioResponseFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"


class TranscriptionTimestampGranularity(str, Enum):
    WORD = "word"
    SEGMENT = "segment"


class AudioFormError(Exception):
    """Raised when the multipart form for an audio request cannot be built."""


def _escape_quotes(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _as_bytes(chunk: Any) -> bytes:
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    return bytes(chunk)


class FormBuilder:
    """Builds a multipart/form-data body in memory."""

    def __init__(self, boundary: str | None = None) -> None:
        self.boundary = boundary or secrets.token_hex(30)
        self._buffer = io.BytesIO()
        self._has_parts = False
        self._closed = False

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"

    @property
    def body(self) -> bytes:
        return self._buffer.getvalue()

    def _start_part(self, headers: list[tuple[str, str]]) -> None:
        if self._closed:
            raise ValueError("form is already closed")
        prefix = "\r\n" if self._has_parts else ""
        self._has_parts = True
        lines = [f"{prefix}--{self.boundary}"]
        lines.extend(f"{key}: {value}" for key, value in headers)
        self._buffer.write(("\r\n".join(lines) + "\r\n\r\n").encode("utf-8"))

    def create_form_file(self, fieldname: str, file: BinaryIO) -> None:
        """Add a file part named after the base name of ``file``."""
        filename = os.path.basename(getattr(file, "name", "") or "")
        self.create_form_file_reader(fieldname, file, filename)

    def create_form_file_reader(self, fieldname: str, reader: Any, filename: str) -> None:
        """Add a file part whose contents are read from ``reader``."""
        self._start_part(
            [
                (
                    "Content-Disposition",
                    f'form-data; name="{_escape_quotes(fieldname)}"; '
                    f'filename="{_escape_quotes(os.path.basename(filename))}"',
                ),
                ("Content-Type", "application/octet-stream"),
            ]
        )
        self._buffer.write(_as_bytes(reader.read()))

    def write_field(self, fieldname: str, value: str) -> None:
        self._start_part(
            [("Content-Disposition", f'form-data; name="{_escape_quotes(fieldname)}"')]
        )
        self._buffer.write(value.encode("utf-8"))

    def close(self) -> None:
        if self._closed:
            return
        prefix = "\r\n" if self._has_parts else ""
        self._buffer.write(f"{prefix}--{self.boundary}--\r\n".encode("utf-8"))
        self._closed = True


@dataclass
class AudioRequest:
    """An audio upload; ``reader`` replaces the file at ``file_path`` when given."""

    model: str = ""
    file_path: str = ""
    reader: Any = None
    prompt: str = ""
    temperature: float = 0.0
    language: str = ""
    format: str = ""
    timestamp_granularities: list[str] = field(default_factory=list)

    def has_json_response(self) -> bool:
        return _wire(self.format) in (
            "",
            AudioResponseFormat.JSON.value,
            AudioResponseFormat.VERBOSE_JSON.value,
        )


def create_file_field(request: AudioRequest, builder: FormBuilder) -> None:
    """Add the ``file`` part from the request's reader or from its file path."""
    if request.reader is not None:
        try:
            builder.create_form_file_reader("file", request.reader, request.file_path)
        except Exception as exc:
            raise AudioFormError("creating form using reader") from exc
        return
    try:
        handle = open(request.file_path, "rb")
    except OSError as exc:
        raise AudioFormError("opening audio file") from exc
    with handle:
        try:
            builder.create_form_file("file", handle)
        except Exception as exc:
            raise AudioFormError("creating form file") from exc


def _write(builder: FormBuilder, fieldname: str, value: str, what: str) -> None:
    try:
        builder.write_field(fieldname, value)
    except Exception as exc:
        raise AudioFormError(f"writing {what}") from exc


def audio_multipart_form(request: AudioRequest, builder: FormBuilder) -> None:
    """Fill ``builder`` with the file, the model and the optional settings, then close it."""
    create_file_field(request, builder)
    _write(builder, "model", request.model, "model name")
    if request.prompt:
        _write(builder, "prompt", request.prompt, "prompt")
    if request.format:
        _write(builder, "response_format", _wire(request.format), "format")
    if request.temperature:
        _write(builder, "temperature", f"{request.temperature:.2f}", "temperature")
    if request.language:
        _write(builder, "language", request.language, "language")
    for granularity in request.timestamp_granularities:
        _write(
            builder,
            "timestamp_granularities[]",
            _wire(granularity),
            "timestamp_granularities[]",
        )
    builder.close()


def audio_endpoint_path(endpoint: str) -> str:
    """Return the path of an audio endpoint such as ``transcriptions``."""
    return f"/audio/{endpoint}"


def _int_list(data: Any, key: str) -> list[int]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        raise ValueError(f"field {key!r}: expected a list of integers")
    return list(value)


@dataclass
class AudioSegment:
    id: int = 0
    seek: int = 0
    start: float = 0.0
    end: float = 0.0
    text: str = ""
    tokens: list[int] = field(default_factory=list)
    temperature: float = 0.0
    avg_logprob: float = 0.0
    compression_ratio: float = 0.0
    no_speech_prob: float = 0.0
    transient: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> AudioSegment:
        data = _mapping(data, "audio segment")
        return cls(
            id=_field(data, "id", int, 0),
            seek=_field(data, "seek", int, 0),
            start=_field(data, "start", float, 0.0),
            end=_field(data, "end", float, 0.0),
            text=_field(data, "text", str, ""),
            tokens=_int_list(data, "tokens"),
            temperature=_field(data, "temperature", float, 0.0),
            avg_logprob=_field(data, "avg_logprob", float, 0.0),
            compression_ratio=_field(data, "compression_ratio", float, 0.0),
            no_speech_prob=_field(data, "no_speech_prob", float, 0.0),
            transient=_field(data, "transient", bool, False),
        )


@dataclass
class AudioWord:
    word: str = ""
    start: float = 0.0
    end: float = 0.0

    @classmethod
    def from_dict(cls, data: Any) -> AudioWord:
        data = _mapping(data, "audio word")
        return cls(
            word=_field(data, "word", str, ""),
            start=_field(data, "start", float, 0.0),
            end=_field(data, "end", float, 0.0),
        )


@dataclass
class AudioResponse:
    task: str = ""
    language: str = ""
    duration: float = 0.0
    segments: list[AudioSegment] = field(default_factory=list)
    words: list[AudioWord] = field(default_factory=list)
    text: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> AudioResponse:
        data = _mapping(data, "audio response")
        return cls(
            task=_field(data, "task", str, ""),
            language=_field(data, "language", str, ""),
            duration=_field(data, "duration", float, 0.0),
            segments=_list_of(data, "segments", AudioSegment.from_dict) or [],
            words=_list_of(data, "words", AudioWord.from_dict) or [],
            text=_field(data, "text", str, ""),
        )

    @classmethod
    def from_text(cls, text: str) -> AudioResponse:
        """Wrap a plain-text (text, srt or vtt) response."""
        return cls(text=text)