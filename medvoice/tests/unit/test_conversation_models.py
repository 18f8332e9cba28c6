"""
Unit tests for conversation turns and role translation.
"""
import pytest
from pydantic import ValidationError
from medvoice.models.conversation import (
    ClientRole,
    ClientTurn,
    MessageRole,
    Turn,
    render_transcript,
    seed_history,
    to_client_role,
    to_client_turns,
    to_wire_role,
    to_wire_turns,
    trim_history,
)


def test_client_roles_map_to_wire_roles():
    assert to_wire_role(ClientRole.USER) is MessageRole.USER
    assert to_wire_role(ClientRole.AI) is MessageRole.ASSISTANT


@pytest.mark.parametrize("role", list(ClientRole))
def test_role_mapping_is_lossless(role):
    assert to_client_role(to_wire_role(role)) is role


def test_system_role_has_no_client_counterpart():
    with pytest.raises(ValueError):
        to_client_role(MessageRole.SYSTEM)


def test_message_role_from_str():
    assert MessageRole.from_str("Assistant") is MessageRole.ASSISTANT
    with pytest.raises(ValueError):
        MessageRole.from_str("model")


def test_turn_is_immutable():
    turn = Turn(role="user", content="hi")
    with pytest.raises(ValidationError):
        turn.content = "changed"


def test_transcript_uses_speaker_labels():
    history = seed_history("Be helpful.") + [
        Turn(role=MessageRole.USER, content="Hello"),
        Turn(role=MessageRole.ASSISTANT, content="Hi there"),
    ]
    assert render_transcript(history) == (
        "System: Be helpful.\nUser: Hello\nAssistant: Hi there"
    )


def test_trim_keeps_newest_turns():
    history = [Turn(role=MessageRole.USER, content=str(i)) for i in range(12)]
    trimmed = trim_history(history, 10)
    assert [t.content for t in trimmed] == [str(i) for i in range(2, 12)]
    assert trim_history(history[:3], 10) == history[:3]


def test_client_transcript_translation_skips_system_turns():
    conversation = [
        ClientTurn(type=ClientRole.AI, content="Hello"),
        ClientTurn(type=ClientRole.USER, content="I have a cough"),
    ]
    wire = to_wire_turns(conversation)
    assert [t.role for t in wire] == [MessageRole.ASSISTANT, MessageRole.USER]
    assert to_client_turns(seed_history("persona") + wire) == conversation
