#!/usr/bin/env python3
"""
Demo: Build CSS selectors with the fluent facade.

Prints each example selector, then shows the two construction errors.
"""

from cssbuilder.builder import SelectorError
from cssbuilder.examples import build_example_selectors
from cssbuilder.facade import css_selector_builder


def main():
    print("=" * 80)
    print("CSS SELECTOR BUILDER DEMO")
    print("=" * 80)

    for name, selector in build_example_selectors().items():
        print(f"{name:>16}: {selector}")

    print("\nERRORS:")
    print("-" * 80)
    attempts = {
        "second id": lambda: css_selector_builder.id("a").id("b"),
        "class before element": lambda: css_selector_builder.class_("x").element("a"),
    }
    for label, attempt in attempts.items():
        try:
            attempt()
        except SelectorError as e:
            print(f"{label:>20}: {type(e).__name__}: {e}")

    print("=" * 80)


if __name__ == "__main__":
    main()
