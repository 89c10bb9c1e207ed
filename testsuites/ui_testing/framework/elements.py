"""
Typed page elements.

Each class is a PageElement with names that read better in page objects and
step definitions. No behavior is added.
"""

from __future__ import annotations

from .page_element import PageElement


class Button(PageElement):
    """A clickable button."""


class Link(PageElement):
    """An anchor element."""


class Checkbox(PageElement):
    """Check box implementation of a PageElement."""

    def check(self) -> PageElement:
        """Check the box. Alias for click()."""
        return self.click()

    def uncheck(self) -> PageElement:
        """Un-check the box. Alias for clear()."""
        return self.clear()


class Radiobutton(PageElement):
    """Radio button implementation of a PageElement."""

    def select(self) -> PageElement:
        """Select the option. Alias for click()."""
        return self.click()


class Textbox(PageElement):
    """Text input implementation of a PageElement."""

    def type(self, text: str) -> PageElement:
        """Replace the contents with ``text``. Alias for send_keys()."""
        return self.send_keys(text)


__all__ = [
    "Button",
    "Checkbox",
    "Link",
    "Radiobutton",
    "Textbox",
]
