"""
Test suite for the stored history codec.

System role: Verification of history decoding, encoding and windowing
"""

import json

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from askpdf.core.exceptions import StorageCorruptionError, UnknownRoleError
from askpdf.core.session import decode_history, encode_history, recent_window, to_messages
from askpdf.models.chat import ChatTurn


def _turns(n: int) -> list[ChatTurn]:
    return [ChatTurn(type="human" if i % 2 == 0 else "ai", content=f"m{i}") for i in range(n)]


class TestDecodeHistory:
    """Test suite for decode_history."""

    def test_missing_value_is_empty_history(self) -> None:
        assert decode_history(None) == []

    def test_decodes_turns_in_order(self) -> None:
        raw = json.dumps([
            {"type": "human", "content": "What is this?"},
            {"type": "ai", "content": "A document.", "timestamp": "2024-01-01T00:00:00Z"},
        ])

        turns = decode_history(raw)

        assert [t.type for t in turns] == ["human", "ai"]
        assert turns[1].content == "A document."
        assert turns[1].timestamp is not None

    def test_unknown_role_raises(self) -> None:
        raw = json.dumps([{"type": "system", "content": "x"}])

        with pytest.raises(UnknownRoleError, match="Unknown message type: system") as exc_info:
            decode_history(raw, session_id="s1")

        assert exc_info.value.details == {"role": "system", "session_id": "s1"}

    @pytest.mark.parametrize(
        "raw",
        [
            "not json",
            json.dumps({"type": "human"}),
            json.dumps(["plain string"]),
            json.dumps([{"type": "human", "content": 42}]),
            json.dumps([{"type": "ai", "content": "x", "timestamp": "yesterday-ish"}]),
        ],
    )
    def test_malformed_values_raise_storage_corruption(self, raw: str) -> None:
        with pytest.raises(StorageCorruptionError):
            decode_history(raw)


class TestEncodeHistory:
    """Test suite for encode_history."""

    def test_stored_shape_uses_type_and_content(self) -> None:
        raw = encode_history([ChatTurn(type="human", content="hi")])

        assert json.loads(raw) == [{"type": "human", "content": "hi", "timestamp": None}]

    def test_decode_reads_back_encoded_history(self) -> None:
        turns = _turns(4)

        assert decode_history(encode_history(turns)) == turns


class TestWindowAndMessages:
    """Test suite for recent_window and to_messages."""

    def test_window_keeps_most_recent_turns_oldest_first(self) -> None:
        window = recent_window(_turns(10), 6)

        assert [t.content for t in window] == ["m4", "m5", "m6", "m7", "m8", "m9"]

    def test_window_shorter_history_is_returned_whole(self) -> None:
        assert len(recent_window(_turns(3), 6)) == 3

    def test_zero_window_is_empty(self) -> None:
        assert recent_window(_turns(3), 0) == []

    def test_to_messages_maps_roles(self) -> None:
        messages = to_messages(_turns(2))

        assert isinstance(messages[0], HumanMessage)
        assert isinstance(messages[1], AIMessage)
        assert messages[1].content == "m1"
