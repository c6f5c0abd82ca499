"""The configuration profile model and its on-disk mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _as_text(value: Any) -> str:
    """Turn a YAML scalar into text, treating a missing or null value as empty."""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Profile:
    """A named pair of user and project settings."""

    name: str = ""
    user: str = ""
    project: str = ""

    def to_dict(self) -> dict[str, str]:
        """Return the fields stored in a profile file; the name is the file name."""
        return {"user": self.user, "project": self.project}

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Any]) -> Profile:
        """Build a profile from its name and the mapping read from its file."""
        return cls(
            name=name,
            user=_as_text(data.get("user")),
            project=_as_text(data.get("project")),
        )