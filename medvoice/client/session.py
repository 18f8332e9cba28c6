"""
Client session: submits turns to the chat endpoint and plays replies back.

Speech recognition, speech synthesis and user alerts are supplied by the host
as plain callables.
"""
import logging
from pathlib import Path
from typing import Callable, Optional, Union

import httpx

from medvoice.client.store import ConversationStore
from medvoice.models.conversation import ClientRole, to_wire_turns
from medvoice.utilities.image_utils import file_to_data_uri

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"
IMAGE_ONLY_PLACEHOLDER = "Sent an image"


class ChatClientError(Exception):
    """The chat endpoint did not return a successful response."""


class ClientBusyError(Exception):
    """A request is already in flight."""


def load_image(path: Union[str, Path]) -> str:
    """Read an image file as a data URI, rejecting non-image files."""
    return file_to_data_uri(path)


def _log_alert(message: str) -> None:
    logger.error(f"Alert: {message}")


class ChatSession:
    """One user's conversation with the endpoint."""

    def __init__(
        self,
        store: ConversationStore,
        http_client: httpx.Client,
        speaker: Optional[Callable[[str], None]] = None,
        transcriber: Optional[Callable[[], str]] = None,
        alert: Callable[[str], None] = _log_alert,
    ):
        self.store = store
        self.http_client = http_client
        self.speaker = speaker
        self.transcriber = transcriber
        self.alert = alert
        self.is_loading = False

    def submit(
        self,
        query: str = "",
        image: Optional[str] = None,
        use_tavily: bool = False
    ) -> Optional[str]:
        """
        Send one turn and return the reply, or None if nothing was sent or it failed.

        The user's turn is appended before the request is made and stays in
        the transcript even when the request fails.
        """
        if not query and not image:
            return None
        if self.is_loading:
            raise ClientBusyError("A request is already in progress")

        history = to_wire_turns(self.store.snapshot())
        self.store.append(ClientRole.USER, query or IMAGE_ONLY_PLACEHOLDER)
        self.is_loading = True

        try:
            response = self.http_client.post(CHAT_PATH, json={
                "query": query,
                "image": image,
                "chatHistory": [t.model_dump(mode="json") for t in history],
                "useTavily": use_tavily
            })
            if not response.is_success:
                try:
                    error = response.json().get("error")
                except ValueError:
                    error = response.text
                logger.error(f"Fetch error: {error}")
                raise ChatClientError("Failed to get AI response")

            reply = response.json()["reply"]
            self.store.append(ClientRole.AI, reply)
            self.speak_message(reply)
            return reply
        except Exception as e:
            logger.error(f"Handle submit error: {e}")
            self.alert(str(e))
            return None
        finally:
            self.is_loading = False

    def submit_spoken(self, image: Optional[str] = None, use_tavily: bool = False) -> Optional[str]:
        """Capture a query from the transcriber and submit it."""
        if self.transcriber is None:
            self.alert("Speech recognition is not supported.")
            return None
        return self.submit(self.transcriber(), image=image, use_tavily=use_tavily)

    def speak_message(self, text: str) -> None:
        if self.speaker is None:
            return
        self.speaker(text)

    def clear_history(self) -> None:
        self.store.reset()
