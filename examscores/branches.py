"""Branch classification from campus identifiers."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .models import Branch


@dataclass(frozen=True)
class BranchClassifier:
    """
    Map a campus ID to a known branch.

    The classification key is ``raw_id[key_start:key_end]``. IDs shorter than
    ``min_length`` and keys missing from ``labels`` are not classified.
    """

    labels: Mapping[str, str] = field(default_factory=dict)
    key_start: int = 4
    key_end: int = 6
    min_length: int = 6

    def __post_init__(self):
        # Freeze the table so a shared classifier cannot be edited in place.
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "BranchClassifier":
        branches = config["branches"]
        return cls(
            labels=branches["labels"],
            key_start=branches["key_start"],
            key_end=branches["key_end"],
            min_length=branches["min_length"],
        )

    def key_for(self, raw_id: str) -> str | None:
        """Return the classification key of ``raw_id``, or None if it is too short."""
        if raw_id is None or len(raw_id) < self.min_length:
            return None
        return raw_id[self.key_start:self.key_end]

    def classify(self, raw_id: str) -> Branch | None:
        key = self.key_for(raw_id)
        if key is None or key not in self.labels:
            return None
        return Branch(key, self.labels[key])

    def label_for(self, code: str) -> str:
        """Display name for a branch code; the code itself if unknown."""
        return self.labels.get(code, code)
