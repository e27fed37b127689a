"""Archive rule configuration."""

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Optional, Tuple

from .paths import normalize

DEFAULT_ARCHIVE_ROOT = "Archive"
DEFAULT_PROPERTY_NAMES = ("Archived",)
DEFAULT_EXTRA_TRUTHY_VALUES = ("yes", "y", "archived", "done")
DEFAULT_TAGS = ("archived",)

TAG_MARKER = "#"


def fold(value: str) -> str:
    """Case-fold a configured name or value for comparison."""
    return value.strip().casefold()


def normalize_tag(tag: str) -> str:
    """Normalize a tag: trim, drop a leading '#', case-fold.
    
    '#Archived', 'archived' and ' Archived ' all become 'archived'.
    """
    tag = tag.strip()
    if tag.startswith(TAG_MARKER):
        tag = tag[1:]
    return fold(tag)


def _clean(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        values = values.split(",")
    return tuple(v.strip() for v in values if isinstance(v, str) and v.strip())


@dataclass(frozen=True)
class RuleConfig:
    """Rules deciding which documents belong in the archive.
    
    Instances are immutable. The archive root and excluded roots are always
    path-normalized, and an empty root falls back to the default. Use
    RuleConfig.create() to build one from raw user input; it also trims
    names and drops empty entries.
    
    Attributes:
        property_names: Front matter fields to check (case-insensitive)
        extra_truthy_values: Strings counted as true besides "true" and "1"
        tags: Tags that trigger archiving (stored without '#')
        archive_root: Folder receiving archived documents
        excluded_roots: Folder prefixes that are never touched
        dry_run: Report moves without performing them
        show_notice: Report every archive/unarchive in the moves log
        unarchive_on_missing_all: Move documents back out of the archive
            when no rule matches any more
    """
    property_names: Tuple[str, ...] = DEFAULT_PROPERTY_NAMES
    extra_truthy_values: Tuple[str, ...] = DEFAULT_EXTRA_TRUTHY_VALUES
    tags: Tuple[str, ...] = DEFAULT_TAGS
    archive_root: str = DEFAULT_ARCHIVE_ROOT
    excluded_roots: Tuple[str, ...] = ()
    dry_run: bool = False
    show_notice: bool = True
    unarchive_on_missing_all: bool = True
    
    # Derived lookup sets, filled in __post_init__
    _property_keys: FrozenSet[str] = field(default=frozenset(), init=False, repr=False, compare=False)
    _truthy_keys: FrozenSet[str] = field(default=frozenset(), init=False, repr=False, compare=False)
    _tag_keys: FrozenSet[str] = field(default=frozenset(), init=False, repr=False, compare=False)
    
    def __post_init__(self) -> None:
        # An empty root would mirror every document onto itself
        root = normalize((self.archive_root or "").strip()) or DEFAULT_ARCHIVE_ROOT
        object.__setattr__(self, "archive_root", root)
        object.__setattr__(self, "excluded_roots",
                           tuple(p for p in (normalize(x) for x in self.excluded_roots) if p))
        object.__setattr__(self, "_property_keys",
                           frozenset(fold(n) for n in self.property_names))
        object.__setattr__(self, "_truthy_keys",
                           frozenset(fold(v) for v in self.extra_truthy_values))
        object.__setattr__(self, "_tag_keys",
                           frozenset(normalize_tag(t) for t in self.tags if normalize_tag(t)))
    
    @classmethod
    def create(cls,
               property_names: Optional[Iterable[str]] = None,
               extra_truthy_values: Optional[Iterable[str]] = None,
               tags: Optional[Iterable[str]] = None,
               archive_root: Optional[str] = None,
               excluded_roots: Optional[Iterable[str]] = None,
               dry_run: bool = False,
               show_notice: bool = True,
               unarchive_on_missing_all: bool = True) -> "RuleConfig":
        """Build a RuleConfig from loosely formatted input.
        
        None means "use the default". List arguments may also be given as a
        comma-separated string.
        """
        if tags is not None:
            tags = tuple(t.lstrip(TAG_MARKER).strip() for t in _clean(tags))
            tags = tuple(t for t in tags if t)
        return cls(
            property_names=DEFAULT_PROPERTY_NAMES if property_names is None else _clean(property_names),
            extra_truthy_values=(DEFAULT_EXTRA_TRUTHY_VALUES if extra_truthy_values is None
                                 else _clean(extra_truthy_values)),
            tags=DEFAULT_TAGS if tags is None else tags,
            archive_root=archive_root or "",
            excluded_roots=_clean(excluded_roots),
            dry_run=bool(dry_run),
            show_notice=bool(show_notice),
            unarchive_on_missing_all=bool(unarchive_on_missing_all),
        )
    
    @property
    def property_keys(self) -> FrozenSet[str]:
        """Case-folded field names."""
        return self._property_keys
    
    @property
    def truthy_keys(self) -> FrozenSet[str]:
        """Case-folded extra truthy strings."""
        return self._truthy_keys
    
    @property
    def tag_keys(self) -> FrozenSet[str]:
        """Normalized trigger tags."""
        return self._tag_keys
    
    def with_dry_run(self, dry_run: bool = True) -> "RuleConfig":
        return replace(self, dry_run=dry_run)
