"""
Command line entry point.

    cssbuilder element=div id=main + element=table id=data
        => div#main + table#data

    cssbuilder div '#main' .container '::before'
        => div#main.container::before

Parts are `kind=value` pairs, rendered fragments (`div`, `#main`,
`.x`, `[href]`, `:hover`, `::before`) or combinator tokens (`>`, `+`,
`~`, `descendant`). Compound selectors between combinators are combined
right-associatively.
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from cssbuilder.builder import SelectorBuilder, SelectorError
from cssbuilder.facade import css_selector_builder
from cssbuilder.fragments import Combinator, Fragment, FragmentKind

logger = logging.getLogger(__name__)

PART_KINDS = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}

COMBINATOR_TOKENS = {
    ">": Combinator.CHILD,
    "+": Combinator.NEXT_SIBLING,
    "~": Combinator.SUBSEQUENT_SIBLING,
    "descendant": Combinator.DESCENDANT,
}

RENDERED_PREFIXES = ("#", ".", "[", ":")


def parse_part(token: str) -> Fragment:
    """
    Turn one command line token into a Fragment.

    Tokens starting with a selector symbol, or bare names without '=',
    are read as rendered fragments. Anything else must be KIND=VALUE.

    Raises:
        ValueError: On an unknown kind
    """
    if token.startswith(RENDERED_PREFIXES) or "=" not in token:
        return Fragment.from_text(token)
    kind, _, value = token.partition("=")
    if kind not in PART_KINDS:
        known = ", ".join(PART_KINDS)
        raise ValueError(f"Invalid part {token!r}: expected KIND=VALUE with KIND in {known}")
    return Fragment(kind=PART_KINDS[kind], value=value)


def split_parts(tokens: List[str]) -> Tuple[List[List[Fragment]], List[Combinator]]:
    """
    Group command line tokens into compound selectors and combinators.

    Raises:
        ValueError: On malformed parts, unknown kinds or dangling combinators
    """
    groups: List[List[Fragment]] = [[]]
    combinators: List[Combinator] = []
    for token in tokens:
        if token in COMBINATOR_TOKENS:
            if not groups[-1]:
                raise ValueError(f"Combinator {token!r} needs a selector on each side")
            combinators.append(COMBINATOR_TOKENS[token])
            groups.append([])
            continue
        groups[-1].append(parse_part(token))
    if not groups[-1]:
        raise ValueError("Selector cannot end with a combinator")
    return groups, combinators


def build_compound(parts: List[Fragment]) -> SelectorBuilder:
    builder = SelectorBuilder()
    for fragment in parts:
        builder.append(fragment)
    return builder


def build_selector(tokens: List[str]) -> str:
    groups, combinators = split_parts(tokens)
    selector = build_compound(groups[-1])
    for parts, combinator in reversed(list(zip(groups[:-1], combinators))):
        selector = css_selector_builder.combine(build_compound(parts), combinator, selector)
    return selector.stringify()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cssbuilder",
        description="Build a CSS selector from its parts",
        epilog="Part kinds: " + ", ".join(PART_KINDS),
    )
    parser.add_argument("parts", nargs="+", metavar="PART",
                        help="KIND=VALUE, a rendered fragment such as #main, or one of: " + " ".join(COMBINATOR_TOKENS))
    parser.add_argument("-v", "--verbose", action="store_true", help="Log builder steps")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        selector = build_selector(args.parts)
    except ValueError as e:
        parser.error(str(e))
    except SelectorError as e:
        logger.debug("Selector construction failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(selector)
    return 0


if __name__ == "__main__":
    sys.exit(main())
