"""Constraint entry model."""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping


@dataclass(frozen=True)
class ConstraintEntry:
    """A single "does this version satisfy this range" question."""

    name: str
    range: str
    version: str
    dialect: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Constraint name must be non-empty")
        if not self.range:
            raise ValueError(f"Constraint '{self.name}' must have a non-empty range")
        if not self.version:
            raise ValueError(f"Constraint '{self.name}' must have a non-empty version")
        if self.dialect is not None and not self.dialect:
            raise ValueError(f"Constraint '{self.name}' has an empty dialect")

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "name": self.name,
            "range": self.range,
            "version": self.version,
        }
        if self.dialect is not None:
            data["dialect"] = self.dialect
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> ConstraintEntry:
        dialect = data.get("dialect")
        return cls(
            name=str(data.get("name", "")),
            range=str(data.get("range", "")),
            version=str(data.get("version", "")),
            dialect=None if dialect is None else str(dialect),
        )
