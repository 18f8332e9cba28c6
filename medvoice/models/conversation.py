"""
Conversation models shared by the endpoint and the client.

The endpoint speaks in ``MessageRole`` (system/user/assistant) while the
client transcript uses ``ClientRole`` (user/ai). The mapping between the two
lives here so both sides translate the same way.
"""
from typing import Dict, List, Sequence
from enum import Enum

from pydantic import BaseModel


class MessageRole(str, Enum):
    """Enum for message roles on the wire."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"

    @classmethod
    def from_str(cls, value: str) -> 'MessageRole':
        """Create MessageRole from string, with proper error handling."""
        try:
            return cls(value.lower())
        except (ValueError, AttributeError):
            raise ValueError(f"Invalid message role: {value}")


class ClientRole(str, Enum):
    """Enum for message types in the client transcript."""
    USER = "user"
    AI = "ai"


SPEAKER_LABELS: Dict[MessageRole, str] = {
    MessageRole.SYSTEM: "System",
    MessageRole.USER: "User",
    MessageRole.ASSISTANT: "Assistant",
}

_CLIENT_TO_WIRE: Dict[ClientRole, MessageRole] = {
    ClientRole.USER: MessageRole.USER,
    ClientRole.AI: MessageRole.ASSISTANT,
}
_WIRE_TO_CLIENT: Dict[MessageRole, ClientRole] = {
    wire: client for client, wire in _CLIENT_TO_WIRE.items()
}


class Turn(BaseModel):
    """A single message in the endpoint's chat history."""
    role: MessageRole
    content: str

    class Config:
        frozen = True


class ClientTurn(BaseModel):
    """A single message in the client transcript."""
    type: ClientRole
    content: str

    class Config:
        frozen = True


def to_wire_role(role: ClientRole) -> MessageRole:
    """Map a client role onto its wire role."""
    return _CLIENT_TO_WIRE[ClientRole(role)]


def to_client_role(role: MessageRole) -> ClientRole:
    """Map a wire role onto its client role.

    Raises:
        ValueError: for ``system``, which the client never displays.
    """
    role = MessageRole(role)
    if role not in _WIRE_TO_CLIENT:
        raise ValueError(f"Role '{role.value}' has no client counterpart")
    return _WIRE_TO_CLIENT[role]


def to_wire_turns(conversation: Sequence[ClientTurn]) -> List[Turn]:
    """Translate a client transcript into chat history turns."""
    return [Turn(role=to_wire_role(t.type), content=t.content) for t in conversation]


def to_client_turns(history: Sequence[Turn]) -> List[ClientTurn]:
    """Translate chat history into client turns, skipping system turns."""
    return [
        ClientTurn(type=to_client_role(t.role), content=t.content)
        for t in history
        if t.role is not MessageRole.SYSTEM
    ]


def seed_history(persona: str) -> List[Turn]:
    """Start a history with the system persona."""
    return [Turn(role=MessageRole.SYSTEM, content=persona)]


def render_transcript(history: Sequence[Turn]) -> str:
    """Flatten history into ``Speaker: content`` lines."""
    return "\n".join(
        f"{SPEAKER_LABELS[turn.role]}: {turn.content}" for turn in history
    )


def trim_history(history: Sequence[Turn], limit: int) -> List[Turn]:
    """Keep only the newest ``limit`` turns."""
    if limit <= 0:
        return []
    return list(history[-limit:])
