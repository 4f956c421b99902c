"""Shared helpers for the gemini_provider tests: fake transports, payloads, log decoding."""

from __future__ import annotations

import copy
import json
import logging
from typing import Any, Callable, Dict, List

import httpx


def events(records: List[logging.LogRecord]) -> List[Dict[str, Any]]:
    """Decode the JSON payloads of captured structured log records.

    Each decoded event carries its record level under ``_level``.
    """
    out = []
    for rec in records:
        try:
            payload = json.loads(rec.getMessage())
        except ValueError:
            continue
        if isinstance(payload, dict):
            payload["_level"] = rec.levelno
            out.append(payload)
    return out


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


_LISTING_PAYLOAD: Dict[str, Any] = {
    "models": [
        {
            "name": "models/gemini-2.5-pro",
            "displayName": "Gemini 2.5 Pro",
            "inputTokenLimit": 1048576,
            "outputTokenLimit": 65536,
            "supportedGenerationMethods": ["generateContent", "countTokens"],
        },
        {
            "name": "models/gemini-1.5-pro-002",
            "displayName": "Gemini 1.5 Pro 002",
            "inputTokenLimit": 128000,
            "outputTokenLimit": 8192,
        },
        {
            "name": "models/gemini-2.0-flash-exp",
            "displayName": "Gemini 2.0 Flash Experimental",
            "inputTokenLimit": 1048576,
            "outputTokenLimit": 8192,
        },
        {
            "name": "models/gemini-exp-1206",
            "displayName": "Gemini Experimental 1206",
            "inputTokenLimit": 2097152,
            "outputTokenLimit": 8192,
        },
        {
            "name": "models/text-embedding-004",
            "displayName": "Text Embedding 004",
            "inputTokenLimit": 2048,
            "outputTokenLimit": 1,
        },
    ]
}


def listing_payload() -> Dict[str, Any]:
    """A realistic ``models.list`` body (deep copy, safe to mutate)."""
    return copy.deepcopy(_LISTING_PAYLOAD)


def generate_payload(text: str = "ok", finish_reason: str = "STOP") -> Dict[str, Any]:
    """A minimal ``generateContent`` response body."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": finish_reason,
            }
        ],
        "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 1, "totalTokenCount": 4},
    }


def sse_body(chunks: List[Dict[str, Any]]) -> bytes:
    """Encode chunks the way ``streamGenerateContent?alt=sse`` frames them."""
    return "".join(f"data: {json.dumps(c)}\r\n\r\n" for c in chunks).encode("utf-8")


__all__ = ["events", "RecordingTransport", "listing_payload", "generate_payload", "sse_body"]
