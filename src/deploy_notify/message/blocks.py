"""Slack Block Kit building blocks for deployment messages."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence

SECTION = "section"
MRKDWN = "mrkdwn"


@dataclass(frozen=True)
class TextEntry:
    """A single mrkdwn text object."""

    text: str

    def to_dict(self) -> dict[str, str]:
        return {"type": MRKDWN, "text": self.text}


@dataclass(frozen=True)
class Block:
    """A section block holding either one text entry or a row of fields.

    Use Block.section() or Block.with_fields() rather than the constructor,
    so that exactly one of ``text`` and ``fields`` is set.
    """

    text: Optional[TextEntry] = None
    fields: Optional[tuple[TextEntry, ...]] = None

    def __post_init__(self) -> None:
        if (self.text is None) == (self.fields is None):
            raise ValueError("Block needs exactly one of text or fields")

    @classmethod
    def section(cls, text: str) -> "Block":
        """Create a block with a single mrkdwn text entry."""
        return cls(text=TextEntry(text))

    @classmethod
    def with_fields(cls, fields: Sequence[str]) -> "Block":
        """Create a block rendering the given texts side by side."""
        return cls(fields=tuple(TextEntry(value) for value in fields))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to Block Kit JSON, omitting whichever of text/fields is unset."""
        data: dict[str, Any] = {"type": SECTION}
        if self.text is not None:
            data["text"] = self.text.to_dict()
        if self.fields is not None:
            data["fields"] = [entry.to_dict() for entry in self.fields]
        return data


@dataclass(frozen=True)
class Notification:
    """Complete message posted to the webhook."""

    username: str
    channel: str
    blocks: tuple[Block, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "username": self.username,
            "channel": self.channel,
            "blocks": [block.to_dict() for block in self.blocks],
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)


__all__ = ["SECTION", "MRKDWN", "TextEntry", "Block", "Notification"]
