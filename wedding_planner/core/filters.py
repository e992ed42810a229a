from fastapi import HTTPException

# Characters with meaning inside a PostgREST logic filter such as or=(a.eq.1,b.eq.2)
RESERVED_FILTER_CHARS = frozenset(',.():"\\')


def ensure_filter_id(value: str, field: str = "id") -> str:
    """Reject identifiers that would change the shape of a logic filter they are interpolated into"""
    if not value or any(char in RESERVED_FILTER_CHARS for char in value):
        raise HTTPException(status_code=400, detail=f"Invalid {field}")
    return value


def quote_filter_value(value: str) -> str:
    """Double-quote a free-text value for use inside a logic filter"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
