"""Parsers for the line-oriented text that `svn info` and `svn ls` print.

Pure functions over strings, shared by the sync and aio accessors.
"""

from typing import Dict, List


# `svn info` key -> SvnNode field
INFO_FIELDS = {
    "Path": "name",
    "URL": "url",
    "Revision": "revision",
    "Node Kind": "kind",
    "Last Changed Author": "last_changed_author",
    "Last Changed Rev": "last_changed_revision",
    "Last Changed Date": "last_changed_date",
    "Repository Root": "repository_root",
    "Repository UUID": "repository_uuid",
}

# svn's "access forbidden" error code
ACCESS_FORBIDDEN_CODE = "E175013"


def parse_info(text: str) -> Dict[str, str]:
    """Parse `svn info` output into a key/value dict.

    Each line looks like "Key: value". The value may itself contain ": ",
    so only the first separator splits. Lines without one are ignored.
    """
    fields = {}
    for line in text.splitlines():
        if not line:
            continue
        key, sep, value = line.partition(": ")
        if not sep:
            continue
        fields[key.strip()] = value.strip()
    return fields


def node_fields_from_info(fields: Dict[str, str]) -> Dict[str, str]:
    """Map parsed `svn info` keys onto SvnNode keyword arguments."""
    return {
        attr: fields[key]
        for key, attr in INFO_FIELDS.items()
        if key in fields
    }


def parse_ls(text: str) -> List[str]:
    """Parse `svn ls` output into child names.

    Directories are printed with a trailing slash; it is trimmed. Order is
    kept exactly as svn printed it.
    """
    names = []
    for line in text.splitlines():
        name = line.strip("/")
        if name:
            names.append(name)
    return names


def is_access_forbidden(stderr: str) -> bool:
    """Check whether svn's stderr reports a forbidden URL."""
    return ACCESS_FORBIDDEN_CODE in (stderr or "")
