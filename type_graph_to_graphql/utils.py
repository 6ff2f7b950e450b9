"""
Utility functions for the type graph to GraphQL generator.
"""

import re

# Anything that is not an ASCII word character is unsafe in an SDL name
_NON_WORD_PATTERN = re.compile(r"\W", re.ASCII)


def sanitize_identifier(text: str) -> str:
    """Replace every non-word character with an underscore.

    Examples:
        "Post" -> "Post"
        "Foo.Bar" -> "Foo_Bar"
        "Map<string>" -> "Map_string_"
    """
    return _NON_WORD_PATTERN.sub("_", text)


def upper_first(text: str) -> str:
    """Uppercase the first character only: "post" -> "Post", "aB" -> "AB"."""
    return text[:1].upper() + text[1:]


def lower_first(text: str) -> str:
    """Lowercase the first character only: "BlogPost" -> "blogPost"."""
    return text[:1].lower() + text[1:]


def unique(values):
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(values))
