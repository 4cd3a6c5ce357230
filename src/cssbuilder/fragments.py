"""
Selector Fragments

Every piece of a compound selector is represented as a tagged Fragment,
never as a bare string whose category must be guessed later.

This ensures:
    - Order validation works on explicit categories
    - Attribute values containing '.', '#' or ':' are never misread
    - The rendered text is derived in exactly one place

ARCHITECTURAL RULE:
    The category of a fragment is fixed when it is created.
    Rendering is a pure function of (kind, value).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class FragmentKind(Enum):
    """
    The six categories of compound selector parts.

    Enum values are the human-readable names used in error messages
    and on the command line.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in CATEGORY_ORDER."""
        return CATEGORY_ORDER.index(self)

    @property
    def repeatable(self) -> bool:
        return self in (FragmentKind.CLASS, FragmentKind.ATTRIBUTE, FragmentKind.PSEUDO_CLASS)

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


# Mandatory order of first occurrences inside one compound selector
CATEGORY_ORDER: Tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

_AFFIXES = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


def classify_token(token: str) -> FragmentKind:
    """
    Classify a rendered fragment by its leading symbol.

    Args:
        token: Rendered fragment text, e.g. "#main" or "::before"

    Returns:
        The FragmentKind the surface syntax denotes

    Raises:
        ValueError: If the token is empty
    """
    if not token:
        raise ValueError("Cannot classify an empty selector token")
    if token.startswith("::"):
        return FragmentKind.PSEUDO_ELEMENT
    if token.startswith(":"):
        return FragmentKind.PSEUDO_CLASS
    if token.startswith("#"):
        return FragmentKind.ID
    if token.startswith("."):
        return FragmentKind.CLASS
    if token.startswith("["):
        return FragmentKind.ATTRIBUTE
    return FragmentKind.ELEMENT


@dataclass(frozen=True)
class Fragment:
    """
    One atomic part of a compound selector.

    Properties:
        kind: FragmentKind tag, fixed at construction
        value: Raw value without prefix symbols
            Examples: "main" for #main, 'href$=".png"' for [href$=".png"]

    IMPORTANT:
        This object is immutable (frozen=True).
        The value is not validated as a CSS identifier.
    """

    kind: FragmentKind
    value: str

    @property
    def text(self) -> str:
        """Surface form of the fragment, e.g. '#main'."""
        return self.kind.render(self.value)

    @classmethod
    def from_text(cls, token: str) -> "Fragment":
        """Build a Fragment from its rendered form."""
        kind = classify_token(token)
        prefix, suffix = _AFFIXES[kind]
        value = token[len(prefix):]
        if suffix and value.endswith(suffix):
            value = value[:-len(suffix)]
        return cls(kind=kind, value=value)


class Combinator(Enum):
    """The four CSS combinators."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


LEGAL_COMBINATORS = frozenset(c.value for c in Combinator)
