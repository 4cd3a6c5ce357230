"""
Example selectors built through the facade.

Covers every fragment kind and nested combinations, including the
descendant combinator whose space symbol is itself surrounded by the
joining spaces.
"""
from typing import Dict

from cssbuilder.facade import css_selector_builder
from cssbuilder.fragments import Combinator


def build_example_selectors() -> Dict[str, str]:
    builder = css_selector_builder
    examples = {}

    examples["every_kind"] = (
        builder.element("a").id("main").class_("x").attr("href")
        .pseudo_class("focus").pseudo_element("before").stringify()
    )
    examples["id_and_classes"] = builder.id("main").class_("container").class_("editable").stringify()
    examples["png_link_focus"] = builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    examples["next_sibling"] = builder.combine(
        builder.element("div").id("main"),
        Combinator.NEXT_SIBLING,
        builder.element("table").id("data"),
    ).stringify()

    # div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)
    examples["nested"] = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    ).stringify()

    return examples
