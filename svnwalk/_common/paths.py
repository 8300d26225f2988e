"""Path helpers for svn URLs.

svn URLs always use forward slashes, so these are plain string transforms
rather than os.path / pathlib operations.
"""

SEPARATOR = "/"


def join(*elements: str) -> str:
    """Join path elements with a single forward slash.

    Empty elements are ignored and a trailing separator on an element is
    dropped, so neither introduces a doubled separator. A lone "/" is kept
    as the root. Separators inside an element ("https://") are untouched.

    Examples:
        >>> join("a/b", "c")
        'a/b/c'
        >>> join("a", "", "c")
        'a/c'
        >>> join("https://h/repo/trunk/", "x")
        'https://h/repo/trunk/x'
        >>> join("/", "a")
        '/a'
    """
    path = ""
    for element in elements:
        if not element:
            continue
        if element != SEPARATOR:
            element = element.rstrip(SEPARATOR)
        if path and not path.endswith(SEPARATOR):
            path += SEPARATOR
        path += element
    return path


def clean(path: str) -> str:
    """Normalize backslash separators to forward slashes."""
    return path.replace("\\", SEPARATOR)
