"""JSON-lines messages exchanged with the practice UI."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class Request:
    """One grading request: ``{"id": 1, "method": "validate", "params": {...}}``."""
    id: int
    method: str
    params: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> Request:
        return cls(
            id=data.get("id", 0),
            method=data.get("method", ""),
            params=data.get("params") or {},
        )

    @classmethod
    def from_line(cls, line: str) -> Request:
        """Parse one protocol line; raises ``ValueError`` on malformed JSON."""
        data = json.loads(line)
        if not isinstance(data, dict):
            raise ValueError("Request must be a JSON object")
        return cls.from_dict(data)

    def require(self, name: str) -> Any:
        if name not in self.params or self.params[name] is None:
            raise ValueError(f"Missing param: {name}")
        return self.params[name]

    def require_str(self, name: str) -> str:
        value = self.require(name)
        if not isinstance(value, str):
            raise ValueError(f"Param {name} must be a string")
        return value


@dataclass
class Response:
    """Reply to a request; carries either ``result`` or ``error``."""
    id: int
    result: Optional[dict] = None
    error: Optional[str] = None

    def to_json_line(self) -> str:
        d: dict = {"id": self.id}
        if self.error is not None:
            d["error"] = self.error
        else:
            d["result"] = self.result
        # Answers are mostly non-ASCII text
        return json.dumps(d, ensure_ascii=False) + "\n"
