"""
CSS Selector Builder Package

Builds CSS selector strings from discrete parts and combinators.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Parsing existing selector strings
    - Specificity computation
    - Matching selectors against a document

This package defines SELECTOR CONSTRUCTION only.

The fluent entry point is `cssbuilder.facade.css_selector_builder`.
"""

__version__ = "0.1.0"
