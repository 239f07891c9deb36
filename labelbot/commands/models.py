"""Data models for label commands."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from labelbot.events.models import Label


class DeltaKind(Enum):
    """Whether a delta adds or removes its label."""

    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class LabelDelta:
    """One atomic add-or-remove operation on a named label."""

    kind: DeltaKind
    label: Label

    @classmethod
    def add(cls, name: str) -> "LabelDelta":
        return cls(kind=DeltaKind.ADD, label=Label(name=name))

    @classmethod
    def remove(cls, name: str) -> "LabelDelta":
        return cls(kind=DeltaKind.REMOVE, label=Label(name=name))

    def __str__(self) -> str:
        sign = "+" if self.kind is DeltaKind.ADD else "-"
        return f"{sign}{self.label.name}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"kind": self.kind.value, "label": self.label.name}


@dataclass
class LabelCommand:
    """An ordered sequence of label deltas parsed from one comment.

    Order matters: later deltas on the same label override earlier ones.
    """

    deltas: list[LabelDelta] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"deltas": [d.to_dict() for d in self.deltas]}
