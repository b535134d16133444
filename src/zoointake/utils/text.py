"""Line and field helpers shared by the records file parsers."""

import string

BLANK_CHARACTERS = " \t"

# Records files are read as UTF-8, with undecodable bytes carried through unchanged
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(value: str) -> str:
    """Lowercase ASCII letters only, leaving every other character as is.

    Example:
        >>> ascii_lower("Grizzly BEAR")
        'grizzly bear'
    """
    return value.translate(_ASCII_LOWER)


def printable(value: str) -> str:
    """Replace bytes that were not valid UTF-8 so the text can be shown on a console."""
    return value.encode(FILE_ENCODING, FILE_ERRORS).decode(FILE_ENCODING, "replace")


def trim(value: str) -> str:
    """Strip leading and trailing spaces and tabs.

    Only space and horizontal tab count as blank; other whitespace such as a
    carriage return is left in place.

    Example:
        >>> trim("  Hyena Names:\\t")
        'Hyena Names:'
        >>> trim(" \\t ")
        ''
    """
    return value.strip(BLANK_CHARACTERS)


def split_fields(line: str) -> list[str]:
    """Split a line on commas and trim every field.

    A line ending in a comma does not produce a trailing empty field, while
    empty fields between two commas are kept.

    Example:
        >>> split_fields("Spot, Scar,")
        ['Spot', 'Scar']
        >>> split_fields("a,,b")
        ['a', '', 'b']
    """
    if not line:
        return []
    fields = line.split(",")
    if line.endswith(","):
        fields.pop()
    return [trim(field) for field in fields]


def split_leading_token(field: str) -> tuple[str, str]:
    """Split a field into its first whitespace-delimited token and the trimmed rest."""
    parts = field.split(None, 1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], trim(parts[1])
