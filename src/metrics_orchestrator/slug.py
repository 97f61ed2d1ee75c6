"""Slug derivation for branch names and artifact paths."""

from typing import Optional


def derive_slug(text: str) -> Optional[str]:
    """
    Build a slug of lowercase ASCII letters, digits and single hyphens.
    Separators and any other character (non-ASCII included) become one hyphen;
    leading and trailing hyphens are dropped. Returns None when nothing is left.

    >>> derive_slug(" Docs/Overview  ")
    'docs-overview'
    """
    trimmed = text.strip()
    if not trimmed:
        return None

    chars: list[str] = []
    previous_hyphen = False
    for ch in trimmed:
        if "A" <= ch <= "Z":
            chars.append(ch.lower())
            previous_hyphen = False
        elif "a" <= ch <= "z" or "0" <= ch <= "9":
            chars.append(ch)
            previous_hyphen = False
        else:
            # separators and anything non-alphanumeric collapse to one hyphen
            if chars and not previous_hyphen:
                chars.append("-")
                previous_hyphen = True

    while chars and chars[-1] == "-":
        chars.pop()

    return "".join(chars) or None
