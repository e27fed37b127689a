"""Path helpers for vault-relative paths.

All paths handled by the archiver are relative to the vault root and use
forward slashes. An empty string denotes the vault root itself.
"""

import re
import unicodedata
from typing import Iterable, Optional, Tuple

SEPARATOR = "/"


def normalize(path: Optional[str]) -> str:
    """Return a canonical form of a vault-relative path.
    
    Backslashes become forward slashes, repeated separators collapse and
    leading/trailing separators are removed. Never raises.
    """
    if not path:
        return ""
    path = unicodedata.normalize("NFC", str(path))
    path = path.replace("\\", SEPARATOR).replace("\u00a0", " ")
    path = re.sub(r"/+", SEPARATOR, path)
    return path.strip(SEPARATOR)


def is_under_root(path: str, root: str) -> bool:
    """True if path equals root or lies below it."""
    path = normalize(path)
    root = normalize(root)
    return path == root or path.startswith(root + SEPARATOR)


def is_excluded(path: str, prefixes: Iterable[str]) -> bool:
    """True if path lies under any of the given prefixes."""
    return any(is_under_root(path, prefix) for prefix in prefixes if normalize(prefix))


def strip_root_prefix(path: str, root: str) -> str:
    """Return path relative to root.
    
    Caller must make sure the path is under root and not the root itself.
    """
    path = normalize(path)
    root = normalize(root)
    return path[len(root) + 1:]


def split_dir_and_name(path: str) -> Tuple[str, str]:
    """Split path into (directory, filename). Directory is '' at the root."""
    i = path.rfind(SEPARATOR)
    if i == -1:
        return ("", path)
    return (path[:i], path[i + 1:])


def join(*parts: str) -> str:
    """Join path segments, skipping empty ones."""
    return normalize(SEPARATOR.join(p for p in parts if p))
