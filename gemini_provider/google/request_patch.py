"""Rewrite ``systemInstruction`` to ``system_instruction`` in request bodies.

Gemini 2.x endpoints expect the snake_case field; request builders that
follow the proto3 JSON mapping emit camelCase. Model handles route every
request through :func:`system_instruction_transport` so the body is fixed
just before it goes on the wire.
"""
from __future__ import annotations

import json
import math
from typing import Any, Optional

import httpx

from ..base.http import BodyPatchTransport

CAMEL_FIELD = "systemInstruction"
SNAKE_FIELD = "system_instruction"
_MARKER = b'"' + CAMEL_FIELD.encode() + b'"'


def _is_js_falsy(value: Any) -> bool:
    """True for the JSON values a JavaScript truthiness check rejects.

    Empty objects and arrays are truthy there, so they are still renamed.
    """
    if value is None or value is False:
        return True
    if isinstance(value, float):
        return value == 0 or math.isnan(value)
    return isinstance(value, (str, int)) and not value


def patch_system_instruction(body: bytes) -> bytes:
    """Return ``body`` with a truthy ``systemInstruction`` moved to ``system_instruction``.

    Bodies that do not mention the field, whose top level is not a JSON
    object, or whose value is null, false, 0 or an empty string are returned
    unchanged (the same object). Empty objects and arrays are renamed.

    Raises
    ------
    ValueError
        If the body mentions the field but is not valid JSON. The transport
        logs this and sends the original body.
    """
    if _MARKER not in body:
        return body
    parsed = json.loads(body)
    if not isinstance(parsed, dict) or _is_js_falsy(parsed.get(CAMEL_FIELD)):
        return body
    parsed[SNAKE_FIELD] = parsed[CAMEL_FIELD]
    del parsed[CAMEL_FIELD]
    return json.dumps(parsed, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def system_instruction_transport(inner: Optional[httpx.BaseTransport] = None) -> BodyPatchTransport:
    """Wrap ``inner`` (default: a plain ``HTTPTransport``) with the patch."""
    return BodyPatchTransport(patch_system_instruction, inner, name="google.fetch_patch")


__all__ = [
    "CAMEL_FIELD",
    "SNAKE_FIELD",
    "patch_system_instruction",
    "system_instruction_transport",
]
