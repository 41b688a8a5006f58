"""Locators used to address TeamCity resources inside request URLs."""

from urllib.parse import quote

# Characters left unescaped in a single URL path segment, besides the
# always-safe unreserved characters.
_PATH_SEGMENT_SAFE = "$&+:=@"


def _query_escape(text: str) -> str:
    return quote(text, safe="")


def _path_escape(text: str) -> str:
    return quote(text, safe=_PATH_SEGMENT_SAFE)


def locator_id(id: str) -> str:
    """Locator for a project or build type by its string id."""
    return _query_escape("id:") + id


def locator_id_int(id: int) -> str:
    """Locator for a resource whose id is an integer."""
    return _query_escape("id:") + str(int(id))


def locator_name(name: str) -> str:
    """Locator for a project or build type by its name."""
    return _query_escape("name:") + _path_escape(name)


def locator_key(key: str) -> str:
    """Locator for a group by its key."""
    return _query_escape("key:") + _path_escape(key)


def locator_type(id: str) -> str:
    """Locator for a project feature by its type."""
    return _query_escape("type:") + id