"""Element capability the compiler reads territory descriptions through.

Any document representation can be compiled as long as it offers the three
lookups below. ``mp_phonemeta.adapters.etree`` ships one for ElementTree.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class Element(Protocol):
    """A named node with string attributes and text content."""

    def elements_by_tag(self, tag: str) -> Sequence["Element"]:
        """Return every descendant element named *tag*, in document order."""
        ...

    def attribute(self, name: str) -> str | None:
        """Return the attribute value, or ``None`` when it is absent."""
        ...

    def text(self) -> str:
        """Return the text content of the element (``""`` when empty)."""
        ...


def bool_attribute(element: Element, name: str, default: bool = False) -> bool:
    """Read ``"true"``/``"false"`` (case-insensitive); anything else is false."""
    value = element.attribute(name)
    if value is None:
        return default
    return value.strip().lower() == "true"


def first_text(element: Element, tag: str) -> str | None:
    """Text of the first descendant named *tag*, or ``None`` when there is none."""
    found = element.elements_by_tag(tag)
    if not found:
        return None
    return found[0].text()


__all__ = ["Element", "bool_attribute", "first_text"]
