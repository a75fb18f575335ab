from itorigin.config.database import db
from itorigin.models import ChatConversation, ChatMessage
from itorigin.chat.services.conversation_service import ConversationService
from itorigin.chat.services.reply_stream_service import ReplyStreamService


def _messages(conversation_id):
    return (
        ChatMessage.query
        .filter_by(conversation_id=conversation_id)
        .order_by(ChatMessage.message_id)
        .all()
    )


def test_first_turn_creates_conversation_and_streams_reply(first_turn):
    response, frames = first_turn()

    assert response.status_code == 200
    assert response.mimetype == "text/event-stream"

    conversation_id = response.headers["X-Conversation-Id"]
    assert conversation_id

    assert [f["content"] for f in frames if f["type"] == "token"] == ["We offer ", "24/7 SOC ", "monitoring."]
    assert frames[-1]["type"] == "done"
    assert frames[-1]["conversationId"] == conversation_id

    conversation = db.session.get(ChatConversation, conversation_id)
    assert conversation.status == "active"
    assert conversation.visitor_name == "Dana"
    assert conversation.visitor_email == "dana@example.com"

    stored = _messages(conversation_id)
    assert [(m.role, m.content) for m in stored] == [
        ("user", "What SOC services do you offer?"),
        ("agent", "We offer 24/7 SOC monitoring."),
    ]
    assert frames[-1]["messageId"] == stored[-1].message_id
    assert conversation.last_message_at == stored[-1].created_at


def test_visitor_email_is_normalised(first_turn):
    response, _ = first_turn(email="  Dana@Example.COM ")

    conversation = db.session.get(ChatConversation, response.headers["X-Conversation-Id"])
    assert conversation.visitor_email == "dana@example.com"


def test_follow_up_turn_keeps_the_same_conversation(client, first_turn, fake_llm, read_frames):
    response, _ = first_turn()
    conversation_id = response.headers["X-Conversation-Id"]

    fake_llm.chunks = ["Yes, ", "we do."]
    follow_up = client.post("/api/chat", json={
        "conversationId": conversation_id,
        "messages": [
            {"role": "user", "content": "What SOC services do you offer?"},
            {"role": "assistant", "content": "We offer 24/7 SOC monitoring."},
            {"role": "user", "content": "Do you do pentests?"},
        ],
    })
    frames = read_frames(follow_up)

    assert follow_up.status_code == 200
    assert follow_up.headers["X-Conversation-Id"] == conversation_id
    assert frames[-1]["type"] == "done"
    assert ChatConversation.query.count() == 1
    assert len(_messages(conversation_id)) == 4


def test_model_receives_system_prompt_and_history(first_turn, fake_llm):
    first_turn()

    sent = fake_llm.calls[-1]
    assert sent[0]["role"] == "system"
    assert "IT Origin" in sent[0]["content"]
    assert sent[-1] == {"role": "user", "content": "What SOC services do you offer?"}


def test_short_message_form_is_accepted(client, fake_llm, read_frames):
    response = client.post("/api/chat", json={
        "message": "Hello",
        "visitorName": "Sam",
        "visitorEmail": "sam@example.com",
    })

    assert response.status_code == 200
    assert read_frames(response)[-1]["type"] == "done"


def test_unknown_conversation_id_is_rejected_and_nothing_is_written(client, fake_llm):
    response = client.post("/api/chat", json={
        "conversationId": "does-not-exist",
        "messages": [{"role": "user", "content": "Hello?"}],
    })

    assert response.status_code == 404
    assert response.get_json()["error_code"] == "CONVERSATION_NOT_FOUND"
    assert ChatConversation.query.count() == 0
    assert ChatMessage.query.count() == 0
    assert fake_llm.calls == []


def test_missing_body_is_rejected(client):
    response = client.post("/api/chat", data="not json", content_type="text/plain")

    assert response.status_code == 400
    assert response.get_json()["error_code"] == "INVALID_REQUEST"


def test_first_turn_requires_visitor_details(client, fake_llm):
    short_name = client.post("/api/chat", json={
        "messages": [{"role": "user", "content": "Hi"}],
        "visitorName": "D",
        "visitorEmail": "dana@example.com",
    })
    bad_email = client.post("/api/chat", json={
        "messages": [{"role": "user", "content": "Hi"}],
        "visitorName": "Dana",
        "visitorEmail": "not-an-email",
    })

    assert short_name.status_code == 400
    assert short_name.get_json()["error_code"] == "INVALID_VISITOR_NAME"
    assert bad_email.status_code == 400
    assert bad_email.get_json()["error_code"] == "INVALID_VISITOR_EMAIL"
    assert ChatConversation.query.count() == 0
    assert fake_llm.calls == []


def test_message_list_validation(client):
    def post(messages):
        return client.post("/api/chat", json={
            "messages": messages,
            "visitorName": "Dana",
            "visitorEmail": "dana@example.com",
        }).get_json()["error_code"]

    assert post([]) == "MISSING_MESSAGES"
    assert post("hello") == "INVALID_MESSAGES"
    assert post([{"role": "system", "content": "x"}]) == "INVALID_MESSAGE_ROLE"
    assert post([{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}]) == "LAST_MESSAGE_NOT_USER"
    assert post([{"role": "user", "content": "   "}]) == "EMPTY_MESSAGE"
    assert post([{"role": "user", "content": "x" * 8001}]) == "MESSAGE_TOO_LONG"
    assert ChatMessage.query.count() == 0


def test_store_failure_returns_500_and_skips_the_model(client, fake_llm, monkeypatch):
    def broken_append(self, conversation, role, content):
        raise RuntimeError("disk full")

    monkeypatch.setattr(ConversationService, "_append", broken_append)

    response = client.post("/api/chat", json={
        "messages": [{"role": "user", "content": "Hello"}],
        "visitorName": "Dana",
        "visitorEmail": "dana@example.com",
    })

    assert response.status_code == 500
    assert response.get_json()["error_code"] == "MESSAGE_PERSIST_FAILED"
    assert fake_llm.calls == []
    assert ChatConversation.query.count() == 0


def test_completion_failure_keeps_user_message_only(first_turn, fake_llm):
    fake_llm.error = RuntimeError("provider timeout")

    response, frames = first_turn()

    assert response.status_code == 200
    assert frames[-1]["type"] == "error"
    assert frames[-1]["error_code"] == "COMPLETION_FAILED"
    assert "provider timeout" not in frames[-1]["message"]

    stored = _messages(response.headers["X-Conversation-Id"])
    assert [m.role for m in stored] == ["user"]


def test_empty_completion_is_not_persisted(first_turn, fake_llm):
    fake_llm.chunks = ["", "  "]

    response, frames = first_turn()

    assert frames[-1]["error_code"] == "EMPTY_COMPLETION"
    assert [m.role for m in _messages(response.headers["X-Conversation-Id"])] == ["user"]


def test_disconnect_mid_stream_drops_partial_reply(app, fake_llm):
    conversation, _ = ConversationService().record_user_message(
        content="Hello",
        visitor_name="Dana",
        visitor_email="dana@example.com",
    )

    stream = ReplyStreamService().stream_reply(
        conversation.conversation_id,
        [{"role": "user", "content": "Hello"}],
    )
    next(stream)
    stream.close()

    assert [m.role for m in _messages(conversation.conversation_id)] == ["user"]


def test_history_endpoint_maps_agent_to_assistant(client, first_turn):
    response, _ = first_turn()
    conversation_id = response.headers["X-Conversation-Id"]

    history = client.get(f"/api/chat/{conversation_id}")
    body = history.get_json()

    assert history.status_code == 200
    assert body["status"] == "success"
    assert body["data"]["conversation"]["id"] == conversation_id
    assert [m["role"] for m in body["data"]["messages"]] == ["user", "assistant"]


def test_history_endpoint_unknown_id(client):
    response = client.get("/api/chat/missing")

    assert response.status_code == 404
    assert response.get_json()["error_code"] == "CONVERSATION_NOT_FOUND"


def test_scenario_two_turns_visible_to_operator(client, first_turn, fake_llm, read_frames, admin_headers):
    response, _ = first_turn(name="Dana", email="dana@example.com")
    conversation_id = response.headers["X-Conversation-Id"]

    read_frames(client.post("/api/chat", json={
        "conversationId": conversation_id,
        "messages": [
            {"role": "user", "content": "What SOC services do you offer?"},
            {"role": "assistant", "content": "We offer 24/7 SOC monitoring."},
            {"role": "user", "content": "How do I get a quote?"},
        ],
    }))

    listing = client.get("/api/admin/chat?search=dana", headers=admin_headers).get_json()["data"]
    assert listing["pagination"]["total"] == 1
    assert listing["conversations"][0]["id"] == conversation_id
    assert listing["conversations"][0]["messageCount"] == 4

    detail = client.get(f"/api/admin/chat/{conversation_id}", headers=admin_headers).get_json()["data"]
    assert [m["role"] for m in detail["messages"]] == ["user", "agent", "user", "agent"]
    assert detail["messages"][2]["content"] == "How do I get a quote?"


def test_empty_conversation_id_opens_a_new_conversation(client, fake_llm, read_frames):
    response = client.post("/api/chat", json={
        "conversationId": "",
        "messages": [{"role": "user", "content": "Hello"}],
        "visitorName": "Dana",
        "visitorEmail": "dana@example.com",
    })

    assert response.status_code == 200
    assert read_frames(response)[-1]["type"] == "done"
    assert response.headers["X-Conversation-Id"]
    assert ChatConversation.query.count() == 1


def test_blank_conversation_id_is_rejected(client, fake_llm):
    response = client.post("/api/chat", json={
        "conversationId": "   ",
        "messages": [{"role": "user", "content": "Hello"}],
    })

    assert response.status_code == 400
    assert response.get_json()["error_code"] == "INVALID_CONVERSATION_ID"
    assert fake_llm.calls == []
