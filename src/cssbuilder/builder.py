"""
Selector Builder

Accumulates tagged fragments for one compound selector, validating
cardinality and category order on every append, and renders either the
compound selector or a combination of two already-built selectors.

Example:
    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        => 'a[href$=".png"]:focus'

ARCHITECTURAL RULE:
    A builder is owned by exactly one call chain.
    stringify() consumes the fragment chain; a builder that raised
    must not be reused.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple, Union

from cssbuilder.fragments import (
    CATEGORY_ORDER,
    LEGAL_COMBINATORS,
    Combinator,
    Fragment,
    FragmentKind,
)

logger = logging.getLogger(__name__)

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    + ", ".join(kind.value for kind in CATEGORY_ORDER)
)
DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)


class SelectorError(Exception):
    """Base class for selector construction failures."""
    pass


class DuplicateOrMisplacedError(SelectorError):
    """Raised when element, id or pseudo-element would occur twice."""

    def __init__(self, message: str = DUPLICATE_MESSAGE):
        super().__init__(message)


class OrderError(SelectorError):
    """Raised when fragment categories are out of the mandatory order."""

    def __init__(self, message: str = ORDER_MESSAGE):
        super().__init__(message)


def check_order(fragments: Sequence[Fragment]) -> None:
    """
    Validate category order across a whole fragment chain.

    Only the first occurrence of each category is compared. Categories
    absent from the chain take no part in the comparison.

    Raises:
        OrderError: If two present categories appear in inverted order
    """
    first_seen: Dict[FragmentKind, int] = {}
    for index, fragment in enumerate(fragments):
        first_seen.setdefault(fragment.kind, index)

    present = sorted(first_seen, key=first_seen.__getitem__)
    ranks = [kind.rank for kind in present]
    if ranks != sorted(ranks):
        raise OrderError()


class SelectorBuilder:
    """
    Fluent builder for a single compound selector or a combination.

    Every fragment method returns the builder itself so calls chain:

        SelectorBuilder().id("main").class_("container").class_("editable")

    Properties:
        fragments: Snapshot of the fragment chain appended so far
    """

    def __init__(self) -> None:
        self._chain: List[Fragment] = []
        self._combined: List[str] = []

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        return tuple(self._chain)

    def _has(self, *kinds: FragmentKind) -> bool:
        return any(fragment.kind in kinds for fragment in self._chain)

    def _append(self, kind: FragmentKind, value: str) -> "SelectorBuilder":
        if not kind.repeatable:
            self._reject_duplicate(kind, value)
        fragment = Fragment(kind=kind, value=value)
        self._chain.append(fragment)
        try:
            check_order(self._chain)
        except OrderError:
            logger.debug("Out of order fragment %r in %r", fragment.text, self._render_chain())
            raise
        logger.debug("Appended %s fragment %r", kind.value, fragment.text)
        return self

    def _reject_duplicate(self, kind: FragmentKind, value: str) -> None:
        # An element must also come before every other single-occurrence kind
        if kind is FragmentKind.ELEMENT:
            conflicts = [k for k in CATEGORY_ORDER if not k.repeatable]
        else:
            conflicts = [kind]
        if self._has(*conflicts):
            logger.debug("Rejected %r: chain already holds one of %s",
                         value, [k.value for k in conflicts])
            raise DuplicateOrMisplacedError()

    def _render_chain(self) -> str:
        return "".join(fragment.text for fragment in self._chain)

    def append(self, fragment: Fragment) -> "SelectorBuilder":
        """Append an already tagged fragment, with the same checks as the named methods."""
        return self._append(fragment.kind, fragment.value)

    def element(self, value: str) -> "SelectorBuilder":
        """Append the type selector, e.g. 'div'."""
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        """Append an id fragment rendered as '#value'."""
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        """Append a class fragment rendered as '.value'."""
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> "SelectorBuilder":
        """Append an attribute fragment; value is the raw match expression."""
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        """Append a pseudo-class fragment rendered as ':value'."""
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        """Append a pseudo-element fragment rendered as '::value'."""
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    def combine(
        self,
        left: "SelectorBuilder",
        combinator: Union[Combinator, str],
        right: "SelectorBuilder",
    ) -> "SelectorBuilder":
        """
        Join two built selectors with a combinator.

        Both operands are rendered (and therefore consumed) immediately.
        The combinator is not validated: any symbol is passed through
        verbatim. Symbols outside LEGAL_COMBINATORS are noted at DEBUG level.

        Args:
            left: Selector rendered before the combinator
            combinator: Combinator member or raw symbol
            right: Selector rendered after the combinator

        Returns:
            This builder, holding the combined output
        """
        symbol = combinator.value if isinstance(combinator, Combinator) else combinator
        if symbol not in LEGAL_COMBINATORS:
            logger.debug("Unknown combinator %r passed through unchanged", symbol)

        left_text = left.stringify()
        right_text = right.stringify()
        self._combined = [left_text, symbol, right_text]
        logger.debug("Combined %r %r %r", left_text, symbol, right_text)
        return self

    def stringify(self) -> str:
        """
        Render the selector.

        Combined output is returned joined by single spaces and kept, so
        repeated calls agree. A plain fragment chain is concatenated and
        then cleared.
        """
        if self._combined:
            return " ".join(self._combined)
        result = self._render_chain()
        self._chain = []
        return result
