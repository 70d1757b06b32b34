from typing import Any, Mapping


def read_field(source: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an object attribute, ``None`` if absent."""
    if isinstance(source, Mapping):
        return source.get(key)
    return getattr(source, key, None)
