"""Read-only view of a document at evaluation time."""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Iterable, Mapping, Optional

from .rules import normalize_tag


@dataclass(frozen=True)
class DocumentSnapshot:
    """Metadata of one document, captured fresh for each evaluation.
    
    Attributes:
        path: Vault-relative path of the document
        fields: Front matter fields as parsed (strings, numbers, booleans, lists, ...)
        tags: Inline tags found in the body, already normalized
    """
    path: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    tags: FrozenSet[str] = frozenset()
    
    @classmethod
    def build(cls, path: str, fields: Optional[Mapping[str, Any]] = None,
              tags: Optional[Iterable[str]] = None) -> "DocumentSnapshot":
        """Create a snapshot, normalizing and deduplicating inline tags."""
        normalized = frozenset(
            t for t in (normalize_tag(raw) for raw in (tags or []) if isinstance(raw, str)) if t
        )
        return cls(path=path, fields=dict(fields or {}), tags=normalized)
