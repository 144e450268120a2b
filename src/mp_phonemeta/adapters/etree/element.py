"""ElementTree adapter – EtreeElement and document parsing helpers."""
from __future__ import annotations

import os
from typing import Sequence
from xml.etree.ElementTree import Element as XmlElement
from xml.etree.ElementTree import ParseError

import defusedxml.ElementTree as DefusedET
from defusedxml import DefusedXmlException

from mp_phonemeta.kernel.errors import SerializationError


class EtreeElement:
    """:class:`~mp_phonemeta.metadata.element.Element` over an ElementTree node."""

    __slots__ = ("_node",)

    def __init__(self, node: XmlElement) -> None:
        self._node = node

    @property
    def node(self) -> XmlElement:
        return self._node

    @property
    def tag(self) -> str:
        return self._node.tag

    def elements_by_tag(self, tag: str) -> Sequence["EtreeElement"]:
        # iter() yields the node itself first when its tag matches; descendants only.
        return [EtreeElement(node) for node in self._node.iter(tag) if node is not self._node]

    def attribute(self, name: str) -> str | None:
        return self._node.get(name)

    def text(self) -> str:
        return "".join(self._node.itertext())

    def __repr__(self) -> str:
        return f"EtreeElement({self._node.tag!r})"


def parse_xml_string(source: str | bytes) -> EtreeElement:
    """Parse a territory document held in memory; returns its root element."""
    try:
        return EtreeElement(DefusedET.fromstring(source))
    except (ParseError, DefusedXmlException) as exc:
        raise SerializationError(
            f"Could not parse metadata document: {exc}",
            payload_type="xml",
            cause=exc,
        ) from exc


def parse_xml_file(path: str | os.PathLike[str]) -> EtreeElement:
    """Parse the territory document at *path*; returns its root element."""
    try:
        return EtreeElement(DefusedET.parse(os.fspath(path)).getroot())
    except (ParseError, DefusedXmlException) as exc:
        raise SerializationError(
            f"Could not parse metadata document {os.fspath(path)}: {exc}",
            payload_type="xml",
            cause=exc,
        ) from exc


__all__ = ["EtreeElement", "parse_xml_file", "parse_xml_string"]
