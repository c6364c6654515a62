# gptwire

Plain Python models for the request and response bodies of OpenAI-style
HTTP APIs: chat completions (including the chunks of a streamed reply),
assistants, batches and audio transcription/translation forms.

Every model is a dataclass. Requests turn into the JSON the API expects
(`to_dict`, and `to_json` where it is offered); responses are built back
from decoded JSON (`from_dict`, and `from_json` where it is offered).
Fields left at their empty value are left out of request bodies. Malformed
input (a field of the wrong JSON type, a list where an object belongs)
raises `ValueError`. The package has no runtime dependencies.

## Install

```
pip install gptwire
```

## Chat — `gptwire.chat`

```python
from gptwire.chat import ChatCompletionMessage, ChatCompletionRequest, ChatMessageRole

request = ChatCompletionRequest(
    model="gpt-3.5-turbo",
    messages=[ChatCompletionMessage(role=ChatMessageRole.USER, content="Hello!")],
    max_tokens=5,
)
print(request.to_json())
# {"model":"gpt-3.5-turbo","messages":[{"role":"user","content":"Hello!"}],"max_tokens":5}
```

- `model` and `messages` are always written; `messages` is `null` when it
  is `None`. Everything else is written only when set.
- A `ChatCompletionMessage` has either text `content` or a list of
  `multi_content` parts (`ChatMessagePart`, holding text or a
  `ChatMessageImageURL`), never both: serialising a message with both raises
  `ContentFieldsMisusedError`. When decoding, a string `content` fills
  `content` and a list fills `multi_content`.
- `FunctionDefinition.parameters`, `ChatCompletionResponseFormatJSONSchema.schema`,
  `function_call` and `tool_choice` accept plain JSON values or any object
  with a `to_dict` method (such as `ToolChoice`).
- `ChatCompletionResponseFormatJSONSchema.from_dict` / `from_json` keep the
  schema as a dict and reject a schema that is not a JSON object.
- `finish_reason_to_json` gives `None` (JSON `null`) for an empty or
  `"null"` finish reason and the reason's text otherwise;
  `ChatCompletionChoice.to_json` uses it.
- `ChatCompletionResponse.from_dict` decodes a full reply, with its
  `ChatCompletionChoice`s, `Usage`, `LogProbs`, `ContentFilterResults` and
  `PromptFilterResult`s.

Enumerations of the fixed wire values: `ChatMessageRole`, `ImageURLDetail`,
`ChatMessagePartType`, `ChatCompletionResponseFormatType`, `ToolType`,
`FinishReason` and `ServiceTier`.

## Stream chunks — `gptwire.chat_stream`

`ChatCompletionStreamResponse.from_json` decodes the JSON payload of one
`data:` event of a streamed chat completion into its
`ChatCompletionStreamChoice`s (each with a `ChatCompletionStreamChoiceDelta`
and optional `ChatCompletionStreamChoiceLogprobs`) and, on the final chunk
of a request made with `StreamOptions(include_usage=True)`, its `usage`.

## Assistants — `gptwire.assistant`

- `AssistantRequest.to_json` leaves `tools` out when it is `None`, sends
  `[]` when it is an empty list (removing the assistant's tools) and sends
  the list otherwise.
- `Assistant`, `AssistantsList`, `AssistantDeleteResponse`,
  `AssistantFile` and `AssistantFilesList` decode replies with `from_dict`.
- `assistant_path()` gives `/assistants`, `assistant_path("asst_1")` gives
  `/assistants/asst_1`; `assistant_file_path(assistant_id, file_id=None)`
  gives the files collection or one file under it.
- `list_query(limit, order, after, before)` gives `""` when every argument
  is `None`, otherwise `?` followed by the set parameters, URL-encoded and
  sorted by name.

## Batches — `gptwire.batch`

```python
from gptwire.batch import UploadBatchFileRequest

upload = UploadBatchFileRequest()
upload.add_chat_completion("req-1", request)
jsonl = upload.marshal_jsonl()  # bytes, one JSON request per line
```

- `add_chat_completion`, `add_completion` and `add_embedding` append a
  `BatchLineItem` with method `POST` and the matching `BatchEndpoint`;
  the body may be a mapping or any object with a `to_dict` method.
- `UploadBatchFileRequest.file_name` defaults to `@batchinput.jsonl`.
- `CreateBatchRequest.to_dict` writes a completion window of `24h` when
  none is set.
- `Batch.from_json` and `ListBatchResponse.from_json` decode batch replies,
  including `BatchRequestCounts` and any `BatchError`s.
- `list_batch_query(after, limit)` builds the list query string the same
  way as `list_query`.

## Audio — `gptwire.audio`

```python
from gptwire.audio import AudioRequest, FormBuilder, audio_multipart_form

builder = FormBuilder()
audio_multipart_form(AudioRequest(model="whisper-1", file_path="recording.mp3"), builder)
body, content_type = builder.body, builder.content_type
```

- `audio_multipart_form` adds the `file` part (from `reader` if given,
  named after `file_path`; otherwise read from `file_path`), the `model`,
  and, when set, `prompt`, `response_format`, `temperature` (two decimals),
  `language` and each `timestamp_granularities[]`, then closes the form.
  Any failure is raised as `AudioFormError`, with the cause chained.
- `AudioRequest.has_json_response` is true for an empty format, `json` and
  `verbose_json`: decode those replies with `AudioResponse.from_dict`
  (with `AudioSegment`s and `AudioWord`s) and wrap the others (text, srt,
  vtt) with `AudioResponse.from_text`.
- `audio_endpoint_path("transcriptions")` gives `/audio/transcriptions`.

## What this package does not do

It builds and reads request and response bodies only. It has no HTTP
client: it does not send requests, add authentication headers, choose a
base URL, retry, or read rate-limit headers. It does not read a
server-sent event stream either — splitting the events, stripping `data: `
and stopping at `[DONE]` is left to the caller. It does not upload batch
input files, and it does not check which models an endpoint accepts.

## Tests

```
pip install -e .[test]
pytest
```