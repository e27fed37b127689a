"""Compute where a document goes when it crosses the archive boundary."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .paths import is_under_root, join, normalize, split_dir_and_name, strip_root_prefix


class Direction(Enum):
    ARCHIVE = "archive"
    UNARCHIVE = "unarchive"


@dataclass(frozen=True)
class TargetDecision:
    """Destination of a transition.
    
    Attributes:
        direction: ARCHIVE or UNARCHIVE
        dir: Destination folder ('' for the vault root)
        full_path: Destination path including filename
    """
    direction: Direction
    dir: str
    full_path: str


def resolve_archive_target(path: str, root: str) -> TargetDecision:
    """Mirror an active document's position under the archive root.
    
    'Task/TASK-1.md' with root 'Archive' -> 'Archive/Task/TASK-1.md'.
    """
    root = normalize(root)
    rel_dir, name = split_dir_and_name(normalize(path))
    target_dir = join(root, rel_dir)
    return TargetDecision(Direction.ARCHIVE, target_dir, join(target_dir, name))


def resolve_unarchive_target(path: str, root: str) -> Optional[TargetDecision]:
    """Restore an archived document to the position it mirrors.
    
    Returns None when the path is not under the root or is the root itself.
    """
    path = normalize(path)
    root = normalize(root)
    if not is_under_root(path, root) or path == root:
        return None
    
    remainder = strip_root_prefix(path, root)
    rel_dir, _ = split_dir_and_name(remainder)
    return TargetDecision(Direction.UNARCHIVE, rel_dir, remainder)
