"""Data models for the replay scraping pipeline."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import List


@dataclass
class UpstreamDocument:
    """The decoded upstream replay page for a single request."""

    url: str
    html: str
    status_code: int


@dataclass
class ReplayList:
    """Fully-qualified replay links, in the order they appear on the page."""

    replays: List[str] = field(default_factory=list)

    def to_json(self) -> str:
        """Serialise as compact ``{"replays": [...]}`` JSON."""
        return json.dumps(
            {"replays": self.replays}, separators=(",", ":"), ensure_ascii=False
        )
