import json

import pytest

from gptwire.assistant import (
    Assistant,
    AssistantDeleteResponse,
    AssistantFile,
    AssistantFileRequest,
    AssistantFilesList,
    AssistantRequest,
    AssistantsList,
    AssistantTool,
    AssistantToolCodeInterpreter,
    AssistantToolFileSearch,
    AssistantToolResource,
    AssistantToolType,
    assistant_file_path,
    assistant_path,
    list_query,
)
from gptwire.chat import FunctionDefinition

ASSISTANT_ID = "asst_abc123"
NAME = "Ambrogio"
DESCRIPTION = "Ambrogio is a friendly assistant."
INSTRUCTIONS = (
    "You are a personal math tutor. \n"
    "When asked a question, write and run Python code to answer the question."
)
FILE_ID = "file-wB6RM6wHdA49HfS2DJ9fEyrH"
MODEL = "gpt-4-turbo-preview"


def _echo_modify(request: AssistantRequest) -> Assistant:
    """Mimic the server: decode the request body as an assistant and echo it."""
    sent = Assistant.from_dict(json.loads(request.to_json()))
    reply = Assistant(
        id=ASSISTANT_ID,
        object="assistant",
        created_at=1234567890,
        name=sent.name,
        model=sent.model,
        description=sent.description,
        instructions=sent.instructions,
        tools=sent.tools,
    )
    return Assistant.from_dict(json.loads(json.dumps(reply.to_dict())))


def _request(**kwargs) -> AssistantRequest:
    return AssistantRequest(
        name=NAME, description=DESCRIPTION, model=MODEL, instructions=INSTRUCTIONS, **kwargs
    )


def test_modify_assistant_no_tools():
    assert "tools" not in _request().to_dict()
    assert _echo_modify(_request()).tools is None


def test_modify_assistant_with_tools():
    assistant = _echo_modify(_request(tools=[AssistantTool(type=AssistantToolType.FUNCTION)]))
    assert assistant.tools == [AssistantTool(type="function")]


def test_modify_assistant_empty_tools():
    assert _request(tools=[]).to_dict()["tools"] == []
    assert _echo_modify(_request(tools=[])).tools == []


def test_request_json_order_and_fields():
    req = AssistantRequest(model=MODEL, name=NAME, tools=[], temperature=0.5)
    assert req.to_json() == (
        '{"tools":[],"model":"gpt-4-turbo-preview","name":"Ambrogio","temperature":0.5}'
    )


def test_assistant_round_trip():
    assistant = Assistant(
        id=ASSISTANT_ID,
        object="assistant",
        created_at=1234567890,
        name=NAME,
        description=DESCRIPTION,
        model=MODEL,
        instructions=INSTRUCTIONS,
        tools=[AssistantTool(type="function", function=FunctionDefinition(name="f"))],
        tool_resources=AssistantToolResource(
            file_search=AssistantToolFileSearch(vector_store_ids=["vs_1"]),
            code_interpreter=AssistantToolCodeInterpreter(file_ids=[FILE_ID]),
        ),
        metadata={"k": "v"},
        temperature=1.0,
        top_p=0.25,
    )
    data = assistant.to_dict()
    assert data["temperature"] == 1
    assert Assistant.from_dict(data) == assistant


def test_assistant_nil_tools_serialized_as_null():
    data = Assistant(id=ASSISTANT_ID, model=MODEL).to_dict()
    assert data["tools"] is None
    assert "name" not in data and "metadata" not in data


def test_assistants_list():
    data = {
        "data": [
            Assistant(
                id=ASSISTANT_ID,
                object="assistant",
                created_at=1234567890,
                name=NAME,
                model=MODEL,
                description=DESCRIPTION,
                instructions=INSTRUCTIONS,
            ).to_dict()
        ],
        "last_id": ASSISTANT_ID,
        "first_id": ASSISTANT_ID,
        "has_more": False,
    }
    listing = AssistantsList.from_dict(data)
    assert listing.first_id == ASSISTANT_ID
    assert listing.last_id == ASSISTANT_ID
    assert [a.name for a in listing.assistants] == [NAME]
    assert listing.has_more is False


def test_delete_response():
    resp = AssistantDeleteResponse.from_dict(
        json.loads('{"id": "asst_abc123", "object": "assistant.deleted", "deleted": true}')
    )
    assert resp == AssistantDeleteResponse(
        id="asst_abc123", object="assistant.deleted", deleted=True
    )


def test_assistant_file_echo():
    sent = json.loads(json.dumps(AssistantFileRequest(file_id=FILE_ID).to_dict()))
    file = AssistantFile(
        id=sent["file_id"], object="assistant.file", created_at=1234567890, assistant_id=ASSISTANT_ID
    )
    assert AssistantFile.from_dict(file.to_dict()) == file
    assert file.id == FILE_ID


def test_assistant_files_list():
    listing = AssistantFilesList.from_dict(
        {
            "data": [
                {
                    "id": FILE_ID,
                    "object": "assistant.file",
                    "created_at": 1234567890,
                    "assistant_id": ASSISTANT_ID,
                }
            ]
        }
    )
    assert [f.id for f in listing.assistant_files] == [FILE_ID]
    assert listing.assistant_files[0].assistant_id == ASSISTANT_ID


def test_list_query():
    assert list_query(20, "desc", "asst_abc122", "asst_abc124") == (
        "?after=asst_abc122&before=asst_abc124&limit=20&order=desc"
    )
    assert list_query(None, None, None, None) == ""
    assert list_query(limit=5) == "?limit=5"


def test_paths():
    assert assistant_path() == "/assistants"
    assert assistant_path(ASSISTANT_ID) == "/assistants/asst_abc123"
    assert assistant_file_path(ASSISTANT_ID) == "/assistants/asst_abc123/files"
    assert (
        assistant_file_path(ASSISTANT_ID, FILE_ID)
        == "/assistants/asst_abc123/files/file-wB6RM6wHdA49HfS2DJ9fEyrH"
    )


def test_bad_assistant_rejected():
    with pytest.raises(ValueError):
        Assistant.from_dict(["not-an-assistant"])
    with pytest.raises(ValueError):
        AssistantToolResource.from_dict({"file_search": {"vector_store_ids": [1]}})