"""Pick a free destination name when the desired one is taken."""

from typing import Callable

from .paths import SEPARATOR, normalize


def split_extension(path: str):
    """Split path into (base, ext) at the last dot of the final segment.
    
    A path ending in a separator has no extension.
    """
    dot = path.rfind(".")
    if dot == -1 or dot < path.rfind(SEPARATOR) or path.endswith(SEPARATOR):
        return (path, "")
    return (path[:dot], path[dot:])


def resolve_collision(desired: str, exists: Callable[[str], bool]) -> str:
    """Return desired, or the first 'base (n).ext' for which exists() is false.
    
    Only queries exists(); nothing is created.
    """
    desired = normalize(desired)
    if not exists(desired):
        return desired
    
    base, ext = split_extension(desired)
    i = 1
    while exists(normalize(f"{base} ({i}){ext}")):
        i += 1
    return normalize(f"{base} ({i}){ext}")
