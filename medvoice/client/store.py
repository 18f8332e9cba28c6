"""
Client-side conversation transcript with local persistence.
"""
import json
import logging
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from medvoice.client.storage import LocalStorage
from medvoice.models.conversation import ClientRole, ClientTurn, Turn, to_wire_turns

logger = logging.getLogger(__name__)

STORAGE_KEY = "conversationHistory"
GREETING = "Hello, I'm your medical assistant. How can I help you today?"

_turns_adapter = TypeAdapter(List[ClientTurn])


class ConversationStore:
    """
    Ordered transcript of user and AI turns.

    The full transcript is written to storage after every change and reloaded
    on construction; trimming only happens on the server side.
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage
        self.turns: List[ClientTurn] = self._restore() or self._greeting()

    @staticmethod
    def _greeting() -> List[ClientTurn]:
        return [ClientTurn(type=ClientRole.AI, content=GREETING)]

    def _restore(self) -> Optional[List[ClientTurn]]:
        stored = self.storage.get_item(STORAGE_KEY)
        if not stored:
            return None
        try:
            return _turns_adapter.validate_json(stored)
        except ValidationError as e:
            logger.warning(f"Discarding invalid stored conversation: {e}")
            return None

    def _persist(self) -> None:
        self.storage.set_item(
            STORAGE_KEY,
            json.dumps([t.model_dump(mode="json") for t in self.turns])
        )

    def append(self, role: ClientRole, content: str) -> ClientTurn:
        turn = ClientTurn(type=role, content=content)
        self.turns.append(turn)
        self._persist()
        return turn

    def snapshot(self) -> List[ClientTurn]:
        return list(self.turns)

    def to_chat_history(self) -> List[Turn]:
        """The transcript translated to wire roles."""
        return to_wire_turns(self.turns)

    def reset(self) -> None:
        """Back to the greeting; the persisted copy is removed."""
        self.turns = self._greeting()
        self.storage.remove_item(STORAGE_KEY)

    def __len__(self) -> int:
        return len(self.turns)
