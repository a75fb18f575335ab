import json
import os

import pytest

# decouple reads the environment at import time
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("ADMIN_API_TOKEN", "test-admin-token")
os.environ.setdefault("AI_PROVIDER", "openai")

from itorigin.app import create_app
from itorigin.config.database import db
import itorigin.chat.services.reply_stream_service as reply_stream_module


ADMIN_TOKEN = os.environ["ADMIN_API_TOKEN"]


class FakeChatService:
    """ Streams canned chunks, optionally failing after them. """

    def __init__(self):
        self.chunks = ["We offer ", "24/7 SOC ", "monitoring."]
        self.error = None
        self.calls = []

    def stream_response(self, messages, model=None, temperature=0.7, max_tokens=1000):
        self.calls.append(messages)
        for chunk in self.chunks:
            yield chunk
        if self.error is not None:
            raise self.error


#scope : function < class < module < package < session
@pytest.fixture(scope="session")
def app():
    return create_app({
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "TESTING": True,
    })


@pytest.fixture(autouse=True)
def database(app):
    with app.app_context():
        db.create_all()
        yield db
        db.session.remove()
        db.drop_all()


@pytest.fixture(scope="function")
def client(app):
    return app.test_client()


@pytest.fixture(scope="function")
def fake_llm(monkeypatch):
    llm = FakeChatService()
    monkeypatch.setattr(reply_stream_module, "ChatService", lambda: llm)
    return llm


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def read_frames():
    def _read(response):
        frames = []
        for line in response.get_data(as_text=True).splitlines():
            if line.startswith("data:"):
                frames.append(json.loads(line[len("data:"):].strip()))
        return frames
    return _read


@pytest.fixture
def first_turn(client, fake_llm, read_frames):
    """ Opens a conversation through the endpoint; returns (response, frames). """
    def _first_turn(text="What SOC services do you offer?", name="Dana", email="dana@example.com"):
        response = client.post("/api/chat", json={
            "messages": [{"role": "user", "content": text}],
            "visitorName": name,
            "visitorEmail": email,
        })
        return response, read_frames(response)
    return _first_turn
