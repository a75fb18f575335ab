import threading

import httpx
import pytest

from itorigin.client import (
    ChatClient,
    ChatClientError,
    ChatBusyError,
    ChatRequestError,
    ChatStreamError,
)
from itorigin.models import ChatConversation, ChatMessage


@pytest.fixture
def chat(app, fake_llm):
    http = httpx.Client(transport=httpx.WSGITransport(app=app), base_url="http://testserver")
    client = ChatClient(http_client=http)
    yield client
    http.close()


def test_start_does_not_create_a_conversation(chat):
    chat.start("Dana", "dana@example.com")

    assert chat.conversation_id is None
    assert ChatConversation.query.count() == 0


def test_send_requires_visitor_details_first(chat):
    with pytest.raises(ChatClientError):
        chat.send("Hello")

    assert ChatConversation.query.count() == 0


def test_id_is_captured_before_the_first_token(chat):
    seen = []

    chat.start("Dana", "dana@example.com")
    reply = chat.send("What SOC services do you offer?", on_token=lambda t: seen.append((t, chat.conversation_id)))

    assert reply == "We offer 24/7 SOC monitoring."
    assert seen[0][1] is not None
    assert {conversation_id for _, conversation_id in seen} == {chat.conversation_id}


def test_all_turns_of_a_session_share_one_conversation(chat, fake_llm):
    chat.start("Dana", "dana@example.com")
    chat.send("What SOC services do you offer?")
    first_id = chat.conversation_id

    fake_llm.chunks = ["Email ", "sales."]
    chat.send("How do I get a quote?")

    assert chat.conversation_id == first_id
    assert ChatConversation.query.count() == 1
    assert ChatMessage.query.filter_by(conversation_id=first_id).count() == 4
    assert [t["role"] for t in chat.turns] == ["user", "assistant", "user", "assistant"]

    # the server saw the whole transcript on the second turn
    assert [m["role"] for m in fake_llm.calls[-1][1:]] == ["user", "assistant", "user"]


def test_reset_starts_a_new_conversation(chat):
    chat.start("Dana", "dana@example.com")
    chat.send("Hello")
    first_id = chat.conversation_id

    chat.reset()
    assert chat.conversation_id is None
    assert chat.turns == []

    chat.start("Dana", "dana@example.com")
    chat.send("Hello again")

    assert chat.conversation_id != first_id
    assert ChatConversation.query.count() == 2


def test_one_request_at_a_time(chat):
    errors = []

    def on_token(_):
        try:
            chat.send("second message")
        except ChatBusyError as error:
            errors.append(error)

    chat.start("Dana", "dana@example.com")
    chat.send("Hello", on_token=on_token)

    assert len(errors) == 3
    assert chat.is_streaming is False
    assert ChatMessage.query.filter_by(role="user").count() == 1


def test_stream_error_drops_the_failed_turn(chat, fake_llm):
    fake_llm.error = RuntimeError("provider down")
    chat.start("Dana", "dana@example.com")

    with pytest.raises(ChatStreamError) as error:
        chat.send("Hello")

    assert error.value.error_code == "COMPLETION_FAILED"
    assert chat.turns == []
    assert chat.is_streaming is False
    # the header arrived before the failure
    assert chat.conversation_id is not None


def test_server_rejection_raises_request_error(chat):
    chat.conversation_id = "gone"

    with pytest.raises(ChatRequestError) as error:
        chat.send("Hello")

    assert error.value.status_code == 404
    assert error.value.error_code == "CONVERSATION_NOT_FOUND"
    assert chat.turns == []
    assert chat.is_streaming is False


def test_history_restores_server_transcript(chat):
    assert chat.history() == []

    chat.start("Dana", "dana@example.com")
    chat.send("Hello")

    history = chat.history()

    assert [(m["role"], m["content"]) for m in history] == [
        ("user", "Hello"),
        ("assistant", "We offer 24/7 SOC monitoring."),
    ]


def test_client_needs_a_target():
    with pytest.raises(ValueError):
        ChatClient()


def _mock_chat(handler):
    http = httpx.Client(transport=httpx.MockTransport(handler), base_url="http://testserver")
    chat = ChatClient(http_client=http)
    chat.start("Dana", "dana@example.com")
    return chat


class _BrokenStream(httpx.SyncByteStream):
    """ One token, then the connection drops. """

    def __iter__(self):
        yield b'data: {"type": "token", "content": "We "}\n\n'
        raise httpx.ReadError("connection reset")


class _HeldStream(httpx.SyncByteStream):
    """ Holds the reply open until the test releases it. """

    def __init__(self, started, release):
        self.started = started
        self.release = release

    def __iter__(self):
        self.started.set()
        self.release.wait(5)
        yield b'data: {"type": "token", "content": "ok"}\n\n'
        yield b'data: {"type": "done", "conversationId": "abc", "messageId": 2}\n\n'


def test_unreachable_server_raises_request_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    chat = _mock_chat(handler)

    with pytest.raises(ChatRequestError) as error:
        chat.send("Hello")

    assert error.value.status_code is None
    assert error.value.error_code == "CONNECTION_FAILED"
    assert chat.turns == []
    assert chat.is_streaming is False


def test_malformed_frame_raises_stream_error():
    def handler(request):
        return httpx.Response(200, headers={"X-Conversation-Id": "abc"}, content=b"data: not-json\n\n")

    chat = _mock_chat(handler)

    with pytest.raises(ChatStreamError) as error:
        chat.send("Hello")

    assert error.value.error_code == "INVALID_FRAME"
    assert chat.conversation_id == "abc"
    assert chat.turns == []


def test_connection_dropped_mid_reply_raises_stream_error():
    def handler(request):
        return httpx.Response(200, headers={"X-Conversation-Id": "abc"}, stream=_BrokenStream())

    chat = _mock_chat(handler)
    tokens = []

    with pytest.raises(ChatStreamError) as error:
        chat.send("Hello", on_token=tokens.append)

    assert error.value.error_code == "STREAM_INTERRUPTED"
    assert tokens == ["We "]
    assert chat.turns == []
    assert chat.is_streaming is False


def test_stream_without_done_frame_raises_stream_error():
    def handler(request):
        return httpx.Response(200, content=b'data: {"type": "token", "content": "We "}\n\n')

    chat = _mock_chat(handler)

    with pytest.raises(ChatClientError) as error:
        chat.send("Hello")

    assert error.value.error_code == "STREAM_INCOMPLETE"


def test_second_thread_is_refused_while_a_reply_streams():
    started, release = threading.Event(), threading.Event()

    def handler(request):
        return httpx.Response(200, headers={"X-Conversation-Id": "abc"}, stream=_HeldStream(started, release))

    chat = _mock_chat(handler)
    replies = []
    worker = threading.Thread(target=lambda: replies.append(chat.send("first")))
    worker.start()

    try:
        assert started.wait(5)
        assert chat.is_streaming is True

        with pytest.raises(ChatBusyError):
            chat.send("second")
    finally:
        release.set()
        worker.join(5)

    assert replies == ["ok"]
    assert [t["content"] for t in chat.turns] == ["first", "ok"]
    assert chat.is_streaming is False
