"""Archive classification and path mirroring.

Pure logic with no store access:
- rules: RuleConfig and normalization helpers
- classifier: should_archive()
- targets: archive/unarchive destinations
- collisions: collision-free destination names
"""

from .paths import normalize, is_under_root, is_excluded, strip_root_prefix, split_dir_and_name
from .rules import RuleConfig, normalize_tag, DEFAULT_ARCHIVE_ROOT
from .snapshot import DocumentSnapshot
from .classifier import should_archive, is_truthy, collect_tags
from .targets import Direction, TargetDecision, resolve_archive_target, resolve_unarchive_target
from .collisions import resolve_collision


__all__ = [
    # Paths
    'normalize',
    'is_under_root',
    'is_excluded',
    'strip_root_prefix',
    'split_dir_and_name',
    
    # Rules
    'RuleConfig',
    'normalize_tag',
    'DEFAULT_ARCHIVE_ROOT',
    'DocumentSnapshot',
    
    # Classification
    'should_archive',
    'is_truthy',
    'collect_tags',
    
    # Targets
    'Direction',
    'TargetDecision',
    'resolve_archive_target',
    'resolve_unarchive_target',
    'resolve_collision',
]
