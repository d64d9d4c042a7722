"""Text normalization helpers shared by labels, values and identifiers."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")
_FILENAME_UNSAFE = re.compile(r"[/\\:*?\"<>|#%{}^~\[\]`]")


def to_common(text: str) -> str:
    """Reduce *text* to its common form: lowercase, alphanumerics only.

    Deterministic and idempotent.

    Examples:
        >>> to_common("Date Added")
        'dateadded'
        >>> to_common("Work-Title!")
        'worktitle'
    """
    return "".join(c for c in text.lower() if c.isalnum())


def is_digits(text: str) -> bool:
    """Whether *text* is non-empty and made only of ASCII ``0``-``9``.

    Examples:
        >>> is_digits("42")
        True
        >>> is_digits("²")
        False
    """
    return text.isascii() and text.isdigit()


def clean_and_trim(text: str) -> str:
    """Strip surrounding whitespace and collapse internal runs to one space."""
    return _WHITESPACE.sub(" ", text).strip()


def to_readable_filename(text: str) -> str:
    """Turn *text* into a file name that still reads like the original.

    Characters that are unsafe in file names are dropped, whitespace is
    collapsed and leading dots are removed.
    """
    cleaned = _FILENAME_UNSAFE.sub("", text)
    cleaned = clean_and_trim(cleaned)
    return cleaned.lstrip(".").strip()


def to_common_file_name(text: str) -> str:
    """Lowercase, hyphen-separated file name built from the words of *text*.

    Examples:
        >>> to_common_file_name("The Art of War, 2nd Ed.")
        'the-art-of-war-2nd-ed'
    """
    words: list[str] = []
    current: list[str] = []
    for c in text.lower():
        if c.isalnum():
            current.append(c)
        elif current:
            words.append("".join(current))
            current = []
    if current:
        words.append("".join(current))
    return "-".join(words)


def split_list(text: str, delimiters: str = ",;") -> list[str]:
    """Split *text* on any of *delimiters*, trimming and dropping empty items."""
    items: list[str] = []
    current: list[str] = []
    for c in text:
        if c in delimiters:
            item = clean_and_trim("".join(current))
            if item:
                items.append(item)
            current = []
        else:
            current.append(c)
    item = clean_and_trim("".join(current))
    if item:
        items.append(item)
    return items


def pad_left(text: str, width: int, pad_char: str = " ") -> str:
    """Right-justify *text* in *width* characters, never truncating."""
    if len(text) >= width:
        return text
    return pad_char * (width - len(text)) + text
