"""Extract front matter fields and inline tags from Markdown documents."""

import re
from typing import Any, Dict, List, Optional, Tuple

import yaml

_DELIMITERS = ("---",)
_CLOSING_DELIMITERS = ("---", "...")

_FENCE = re.compile(r"^\s*(```|~~~)")
_INLINE_CODE = re.compile(r"`[^`\n]*`")
_INLINE_TAG = re.compile(r"(?<!\S)#([\w/-]+)")


def split_front_matter(text: str) -> Tuple[Optional[str], str]:
    """Split a document into (front matter block, body).
    
    The block is None when the document doesn't start with '---' or the
    block is never closed.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() not in _DELIMITERS:
        return (None, text)
    
    for i in range(1, len(lines)):
        if lines[i].rstrip() in _CLOSING_DELIMITERS:
            return ("".join(lines[1:i]), "".join(lines[i + 1:]))
    return (None, text)


def parse_front_matter(block: Optional[str]) -> Dict[str, Any]:
    """Parse a front matter block. Malformed or non-mapping YAML gives {}."""
    if not block or not block.strip():
        return {}
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError:
        return {}
    if not isinstance(data, dict):
        return {}
    return {str(k): v for k, v in data.items()}


def find_inline_tags(body: str) -> List[str]:
    """Return '#tag' tokens in the body, skipping code.
    
    Purely numeric tokens ('#123') are not tags.
    """
    tags = []
    in_fence = False
    for line in body.splitlines():
        if _FENCE.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        line = _INLINE_CODE.sub("", line)
        for match in _INLINE_TAG.finditer(line):
            tag = match.group(1).rstrip("/")
            if tag and not tag.isdigit():
                tags.append(tag)
    return tags


def parse_document(text: str) -> Tuple[Dict[str, Any], List[str]]:
    """Parse a Markdown document into (front matter fields, inline tags)."""
    block, body = split_front_matter(text)
    return (parse_front_matter(block), find_inline_tags(body))
