from __future__ import annotations

from gemini_provider.base.models import ContentPart, Message
from gemini_provider.base.utils.messages import (
    extract_system_text,
    system_instruction_payload,
    to_gemini_contents,
)


def test_extract_system_text_joins_in_order():
    msgs = [
        Message(role="system", content="one"),
        Message(role="user", content="q"),
        Message(role="system", content="   "),
        Message(role="system", content="two"),
    ]
    assert extract_system_text(msgs) == "one\n\ntwo"
    assert extract_system_text([Message(role="user", content="q")]) is None


def test_to_gemini_contents_maps_roles_and_skips_empty():
    msgs = [
        Message(role="system", content="s"),
        Message(role="user", content="hi"),
        Message(role="assistant", content=""),
        Message(role="assistant", content=[ContentPart(type="text", text="a"), ContentPart(type="tool_call")]),
    ]
    assert to_gemini_contents(msgs) == [
        {"role": "user", "parts": [{"text": "hi"}]},
        {"role": "model", "parts": [{"text": "a\n[tool_call]"}]},
    ]


def test_system_instruction_payload_shape():
    assert system_instruction_payload("x") == {"parts": [{"text": "x"}]}
