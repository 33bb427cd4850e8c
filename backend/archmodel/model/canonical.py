CANONICAL_NAME_SEPARATOR = "/"

# "%" is encoded first so the mapping stays reversible.
_ESCAPES = (
    ("%", "%25"),
    (CANONICAL_NAME_SEPARATOR, "%2F"),
)


def format_for_canonical_name(name: str) -> str:
    """Escape a name so it can never collide with the separator."""
    if name is None:
        return ""
    for raw, encoded in _ESCAPES:
        name = name.replace(raw, encoded)
    return name


def parse_canonical_segment(segment: str) -> str:
    for raw, encoded in reversed(_ESCAPES):
        segment = segment.replace(encoded, raw)
    return segment


def split_canonical_name(canonical_name: str) -> list[str]:
    """Split a canonical name back into the unescaped names along its chain."""
    if not canonical_name:
        return []
    parts = canonical_name.split(CANONICAL_NAME_SEPARATOR)
    # leading separator yields an empty first part
    return [parse_canonical_segment(p) for p in parts[1:]]
