import json

import pytest

from gptwire.batch import (
    Batch,
    BatchEndpoint,
    BatchLineItem,
    BatchRequestCounts,
    CreateBatchRequest,
    ListBatchResponse,
    UploadBatchFileRequest,
    list_batch_query,
)
from gptwire.chat import ChatCompletionMessage, ChatCompletionRequest

_TIMESTAMP_FIELDS = (
    "failed_at",
    "expired_at",
    "cancelling_at",
    "cancelled_at",
)


def _batch_payload(**overrides):
    payload = dict(
        id="batch_abc123",
        object="batch",
        endpoint="/v1/completions",
        errors=None,
        input_file_id="file-abc123",
        completion_window="24h",
        status="completed",
        output_file_id="file-cvaTdG",
        error_file_id="file-HOWS94",
        created_at=1711471533,
        in_progress_at=1711471538,
        expires_at=1711557933,
        finalizing_at=1711493133,
        completed_at=1711493163,
        request_counts=dict(total=100, completed=95, failed=5),
        metadata=dict(
            customer_id="user_123456789",
            batch_description="Nightly eval job",
        ),
    )
    payload.update({name: None for name in _TIMESTAMP_FIELDS})
    payload.update(overrides)
    return payload


def _cancelled_payload():
    return _batch_payload(
        endpoint="/v1/chat/completions",
        status="cancelling",
        output_file_id=None,
        error_file_id=None,
        finalizing_at=None,
        completed_at=None,
        cancelling_at=1711475133,
        request_counts=dict(total=100, completed=23, failed=1),
    )


def _chat_body():
    return ChatCompletionRequest(
        model="gpt-3.5-turbo",
        max_tokens=5,
        messages=[ChatCompletionMessage(role="user", content="Hello!")],
    )


def _chat_line(custom_id):
    return (
        b'{"custom_id":"' + custom_id + b'","body":{"model":"gpt-3.5-turbo",'
        b'"messages":[{"role":"user","content":"Hello!"}],"max_tokens":5},'
        b'"method":"POST","url":"/v1/chat/completions"}'
    )


def test_add_chat_completion_jsonl():
    request = UploadBatchFileRequest()
    for custom_id in ("req-1", "req-2"):
        request.add_chat_completion(custom_id, _chat_body())
    assert request.marshal_jsonl() == _chat_line(b"req-1") + b"\n" + _chat_line(b"req-2")


def test_add_completion_jsonl():
    request = UploadBatchFileRequest()
    for custom_id in ("req-1", "req-2"):
        request.add_completion(custom_id, {"model": "gpt-3.5-turbo", "user": "Hello"})
    lines = request.marshal_jsonl().split(b"\n")
    assert lines == [
        b'{"custom_id":"req-1","body":{"model":"gpt-3.5-turbo","user":"Hello"},'
        b'"method":"POST","url":"/v1/completions"}',
        b'{"custom_id":"req-2","body":{"model":"gpt-3.5-turbo","user":"Hello"},'
        b'"method":"POST","url":"/v1/completions"}',
    ]


def test_add_embedding_jsonl():
    request = UploadBatchFileRequest()
    words = ["Hello", "World"]
    request.add_embedding("req-1", {"input": words, "model": "gpt-3.5-turbo"})
    request.add_embedding("req-2", {"input": words, "model": "text-embedding-ada-002"})
    lines = request.marshal_jsonl().split(b"\n")
    assert lines == [
        b'{"custom_id":"req-1","body":{"input":["Hello","World"],'
        b'"model":"gpt-3.5-turbo"},"method":"POST","url":"/v1/embeddings"}',
        b'{"custom_id":"req-2","body":{"input":["Hello","World"],'
        b'"model":"text-embedding-ada-002"},"method":"POST","url":"/v1/embeddings"}',
    ]


def test_empty_jsonl_is_empty():
    assert UploadBatchFileRequest().marshal_jsonl() == b""


def test_upload_file_name_default():
    assert UploadBatchFileRequest().file_name == "@batchinput.jsonl"
    assert UploadBatchFileRequest(file_name="").file_name == "@batchinput.jsonl"
    assert UploadBatchFileRequest(file_name="mine.jsonl").file_name == "mine.jsonl"


def test_line_item_marshal():
    item = BatchLineItem(custom_id="a", body={"k": 1}, url=BatchEndpoint.EMBEDDINGS)
    assert json.loads(item.marshal()) == {
        "custom_id": "a",
        "body": {"k": 1},
        "method": "POST",
        "url": "/v1/embeddings",
    }


def test_create_batch_request_defaults_window():
    request = CreateBatchRequest(
        input_file_id="file-abc", endpoint=BatchEndpoint.CHAT_COMPLETIONS
    )
    assert request.to_dict() == {
        "input_file_id": "file-abc",
        "endpoint": "/v1/chat/completions",
        "completion_window": "24h",
        "metadata": None,
    }


def test_create_batch_request_keeps_window():
    request = CreateBatchRequest(input_file_id="f", completion_window="48h", metadata={"a": 1})
    assert request.to_dict()["completion_window"] == "48h"
    assert request.to_dict()["metadata"] == {"a": 1}


def test_list_batch_query():
    assert list_batch_query("batch_abc123", 10) == "?after=batch_abc123&limit=10"
    assert list_batch_query(None, None) == ""
    assert list_batch_query(limit=3) == "?limit=3"


def test_retrieve_batch_parse():
    batch = Batch.from_json(json.dumps(_batch_payload()))
    assert batch.id == "batch_abc123"
    assert batch.endpoint == "/v1/completions"
    assert batch.errors is None
    assert batch.output_file_id == "file-cvaTdG"
    assert batch.in_progress_at == 1711471538
    assert batch.failed_at is None
    assert batch.request_counts == BatchRequestCounts(total=100, completed=95, failed=5)
    assert batch.metadata["batch_description"] == "Nightly eval job"


def test_cancel_batch_parse():
    batch = Batch.from_json(json.dumps(_cancelled_payload()))
    assert batch.status == "cancelling"
    assert batch.output_file_id is None
    assert batch.cancelling_at == 1711475133
    assert batch.request_counts.completed == 23


def test_batch_errors_parse():
    batch = Batch.from_dict(
        {
            "id": "b",
            "errors": {
                "object": "list",
                "data": [{"code": "bad", "message": "broken", "line": 3}],
            },
        }
    )
    assert batch.errors_object == "list"
    assert batch.errors[0].code == "bad"
    assert batch.errors[0].line == 3
    assert batch.errors[0].param is None


def test_list_batch_parse():
    listed = _batch_payload(
        endpoint="/v1/chat/completions",
        metadata={"customer_id": "user_123456789", "batch_description": "Nightly job"},
    )
    text = json.dumps(
        {
            "object": "list",
            "data": [listed],
            "first_id": "batch_abc123",
            "last_id": "batch_abc456",
            "has_more": True,
        }
    )
    listing = ListBatchResponse.from_json(text)
    assert listing.object == "list"
    assert len(listing.data) == 1
    assert listing.data[0].status == "completed"
    assert listing.data[0].metadata["batch_description"] == "Nightly job"
    assert listing.last_id == "batch_abc456"
    assert listing.has_more is True


def test_batch_rejects_wrong_type():
    with pytest.raises(ValueError):
        Batch.from_dict({"created_at": "soon"})