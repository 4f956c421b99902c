"""
Message DTO used in chat requests.

``content`` is either plain text or a list of :class:`ContentPart`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Union

from .content_part import ContentPart

Role = Literal["system", "user", "assistant"]


@dataclass
class Message:
    """A chat message."""

    role: Role
    content: Union[str, List[ContentPart]]

    def text_or_joined(self) -> str:
        """Return the content flattened to text.

        Text parts are joined with newlines; non-text parts become a
        bracketed type token such as ``[tool_call]``.
        """
        if isinstance(self.content, str):
            return self.content
        return "\n".join(p.text if p.text else f"[{p.type}]" for p in self.content)


__all__ = ["Message", "Role"]
