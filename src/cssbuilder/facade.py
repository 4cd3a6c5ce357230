"""
Stateless facade over SelectorBuilder.

Each fragment entry point starts a brand new builder, so every call chain
owns its own state:

    css_selector_builder.id("main").class_("container").stringify()
        => '#main.container'
"""

from typing import Union

from cssbuilder.builder import SelectorBuilder
from cssbuilder.fragments import Combinator


class BuilderFacade:
    """Dispatcher whose methods each return a freshly constructed builder."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self,
        selector1: SelectorBuilder,
        combinator: Union[Combinator, str],
        selector2: SelectorBuilder,
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(selector1, combinator, selector2)

    def stringify(self) -> str:
        # Always empty; present so the facade mirrors the builder surface
        return SelectorBuilder().stringify()


css_selector_builder = BuilderFacade()
