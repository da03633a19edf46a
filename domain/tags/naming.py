"""Tag name grammar: segment and full-path validation."""

import re

# Segment name of the internal sentinel that anchors top-level tags.
ROOT_SEGMENT = "Root"
SEPARATOR = "."

_SEGMENT_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


def is_valid_segment(segment: object) -> bool:
    """Return True if `segment` is a single identifier (letter first, then letters/digits/underscores)."""
    if not isinstance(segment, str) or not segment.strip():
        return False
    return _SEGMENT_RE.match(segment) is not None


def is_valid_name(name: object, full_path: bool = False) -> bool:
    """
    Validate a tag segment or a full dotted tag path.

    Rules for a full path:
    - no leading or trailing dot
    - no consecutive dots (empty segments)
    - every segment is a valid segment

    The sentinel segment `Root` is reserved and never accepted.

    Examples:
        >>> is_valid_name("Ability")
        True
        >>> is_valid_name("Ability.Fire", full_path=True)
        True
        >>> is_valid_name("Ability.Fire")
        False
        >>> is_valid_name("123Ability")
        False

    Args:
        name: Candidate name (non-str values are rejected)
        full_path: Validate as a dotted path instead of a single segment

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(name, str) or not name.strip():
        return False

    if full_path:
        if name.startswith(SEPARATOR) or name.endswith(SEPARATOR):
            return False
        if SEPARATOR * 2 in name:
            return False
        segments = name.split(SEPARATOR)
    else:
        if SEPARATOR in name:
            return False
        segments = [name]

    return all(is_valid_segment(s) and s != ROOT_SEGMENT for s in segments)
