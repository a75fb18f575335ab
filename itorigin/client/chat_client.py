"""
ChatClient
==========
Drives the chat ingress endpoint the way the website widget does.

One ChatClient is one widget session:
  - start(name, email) only records the visitor; nothing is created server-side
    until the first send().
  - The first send() goes out without a conversation id. The id the server
    assigns is read from the X-Conversation-Id response header as soon as the
    headers arrive, before any of the body is consumed, and is then sent with
    every later turn.
  - One request at a time: send() raises ChatBusyError while a reply is
    still streaming.
  - reset() forgets everything, so the next send() opens a new conversation.
"""

# Python Packages
import json
import logging
import threading
from typing import Callable, Dict, List, Optional

import httpx

# Config
from ..chat.config import chat_config


logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"





class ChatClientError(Exception):
    """ Base error for ChatClient... """


class ChatBusyError(ChatClientError):
    """ A reply is still streaming for this widget session... """


class ChatRequestError(ChatClientError):
    """ The server rejected the turn before streaming began... """

    def __init__(self, status_code: Optional[int], error_code: str = None, message: str = None):
        self.status_code = status_code
        self.error_code  = error_code
        self.message     = message or f"Chat request failed with status {status_code}"
        super().__init__(self.message)


class ChatStreamError(ChatClientError):
    """ The reply stream ended with an error frame or was cut short... """

    def __init__(self, error_code: str = None, message: str = None):
        self.error_code = error_code
        self.message    = message or "The reply stream ended unexpectedly."
        super().__init__(self.message)





class ChatClient:

    def __init__(
        self,
        base_url: str = None,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 60.0
    ):
        """
        Args:
            base_url: Service root, e.g. "https://itorigin.com".
            http_client: Pre-built httpx.Client (tests pass one with a WSGI transport).
                         When given, base_url is ignored and the caller owns closing it.
            timeout: Read timeout for streamed replies, seconds.
        """

        if http_client is None and not base_url:
            raise ValueError("ChatClient needs a base_url or an http_client")

        self._owns_http = http_client is None
        self._http      = http_client or httpx.Client(base_url = base_url, timeout = timeout)

        self.visitor_name: Optional[str]    = None
        self.visitor_email: Optional[str]   = None
        self.conversation_id: Optional[str] = None
        self.turns: List[Dict[str, str]]    = []

        self._send_lock = threading.Lock()


    @property
    def is_streaming(self) -> bool:
        return self._send_lock.locked()



    # ── Session ────────────────────────────────────────────────────────────────

    def start(self, name: str, email: str) -> None:
        """ Record visitor details; no request is made... """

        self.visitor_name  = name
        self.visitor_email = email


    def reset(self) -> None:
        """
        Start over: the next send() creates a brand-new conversation.
        """

        self.visitor_name    = None
        self.visitor_email   = None
        self.conversation_id = None
        self.turns           = []



    # ── Turns ──────────────────────────────────────────────────────────────────

    def send(self, text: str, on_token: Callable[[str], None] = None) -> str:
        """
        Send one visitor message and consume the streamed reply.

        Args:
            text: The visitor's message.
            on_token: Called with each reply fragment as it arrives.

        Returns:
            The full assistant reply.

        Raises:
            ChatBusyError:    a previous reply is still streaming.
            ChatClientError:  no visitor details before the first turn.
            ChatRequestError: the server refused the turn, or could not be reached.
            ChatStreamError:  the reply failed or was cut off mid-stream.
        """

        if not self._send_lock.acquire(blocking = False):
            raise ChatBusyError("Wait for the current reply to finish.")

        try:
            reply = self._send(text, on_token)
        finally:
            self._send_lock.release()

        self.turns.append({"role": "user", "content": text})
        self.turns.append({"role": "assistant", "content": reply})

        return reply


    def _send(self, text: str, on_token) -> str:
        if self.conversation_id is None and not (self.visitor_name and self.visitor_email):
            raise ChatClientError("Call start(name, email) before the first message.")

        payload = {"messages": self.turns + [{"role": "user", "content": text}]}

        if self.conversation_id:
            payload["conversationId"] = self.conversation_id
        else:
            payload["visitorName"]  = self.visitor_name
            payload["visitorEmail"] = self.visitor_email

        streaming = False
        try:
            with self._http.stream("POST", CHAT_PATH, json = payload) as response:
                if response.status_code != 200:
                    response.read()
                    raise self._request_error(response)

                # Headers are available before the body; capture right away
                self._capture_conversation_id(
                    response.headers.get(chat_config.CONVERSATION_ID_HEADER)
                )

                streaming = True
                return self._consume_stream(response, on_token)

        except httpx.HTTPError as error:
            if streaming:
                raise ChatStreamError("STREAM_INTERRUPTED", str(error)) from error

            raise ChatRequestError(None, "CONNECTION_FAILED", str(error)) from error


    def history(self) -> List[Dict]:
        """
        Server-side history of the current conversation, oldest first.
        """

        if not self.conversation_id:
            return []

        try:
            response = self._http.get(f"{CHAT_PATH}/{self.conversation_id}")
        except httpx.HTTPError as error:
            raise ChatRequestError(None, "CONNECTION_FAILED", str(error)) from error

        if response.status_code != 200:
            raise self._request_error(response)

        return response.json()["data"]["messages"]



    # ── Lifecycle ──────────────────────────────────────────────────────────────

    def close(self) -> None:
        if self._owns_http:
            self._http.close()


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        self.close()



    # ── Private ────────────────────────────────────────────────────────────────

    def _capture_conversation_id(self, value: Optional[str]) -> None:
        """ First id wins; the client never mints or replaces one... """

        if self.conversation_id is None and value:
            self.conversation_id = value
            logger.debug("Conversation id captured: %s", value)


    def _consume_stream(self, response: httpx.Response, on_token) -> str:
        parts = []

        for line in response.iter_lines():
            if not line.startswith("data:"):
                continue

            try:
                frame = json.loads(line[len("data:"):].strip())
            except ValueError:
                frame = None

            if not isinstance(frame, dict):
                raise ChatStreamError("INVALID_FRAME", f"Unreadable stream frame: {line[:200]}")

            kind = frame.get("type")

            if kind == "token":
                chunk = frame.get("content") or ""
                parts.append(chunk)
                if on_token:
                    on_token(chunk)

            elif kind == "done":
                return "".join(parts)

            elif kind == "error":
                raise ChatStreamError(frame.get("error_code"), frame.get("message"))

        raise ChatStreamError("STREAM_INCOMPLETE")


    def _request_error(self, response: httpx.Response) -> ChatRequestError:
        try:
            body = response.json()
        except ValueError:
            body = {}

        if not isinstance(body, dict):
            body = {}

        return ChatRequestError(
            status_code = response.status_code,
            error_code  = body.get("error_code"),
            message     = body.get("message")
        )
