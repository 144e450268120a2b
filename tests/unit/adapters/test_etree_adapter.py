"""Unit tests for the ElementTree adapter."""

from __future__ import annotations

from pathlib import Path

import pytest

from mp_phonemeta.adapters.etree import EtreeElement, parse_xml_file, parse_xml_string
from mp_phonemeta.kernel.errors import SerializationError
from mp_phonemeta.metadata import Element, compile_territory


class TestEtreeElement:
    def test_satisfies_element_protocol(self) -> None:
        assert isinstance(parse_xml_string("<territory/>"), Element)

    def test_descendants_in_document_order(self) -> None:
        root = parse_xml_string(
            "<territory><a><format>1</format></a><format>2</format></territory>"
        )
        assert [e.text() for e in root.elements_by_tag("format")] == ["1", "2"]

    def test_excludes_self(self) -> None:
        root = parse_xml_string("<format><format>inner</format></format>")
        assert [e.text() for e in root.elements_by_tag("format")] == ["inner"]

    def test_attribute(self) -> None:
        root = parse_xml_string("<territory countryCode='33'/>")
        assert root.attribute("countryCode") == "33"
        assert root.attribute("nationalPrefix") is None

    def test_text_empty_element(self) -> None:
        assert parse_xml_string("<format/>").text() == ""

    def test_tag(self) -> None:
        assert parse_xml_string("<territory/>").tag == "territory"
        assert repr(parse_xml_string("<territory/>")) == "EtreeElement('territory')"


class TestParsing:
    def test_malformed_document(self) -> None:
        with pytest.raises(SerializationError) as exc_info:
            parse_xml_string("<territory>")
        assert exc_info.value.payload_type == "xml"

    def test_rejects_entity_declarations(self) -> None:
        document = (
            '<?xml version="1.0"?>'
            '<!DOCTYPE t [<!ENTITY x "boom">]>'
            "<territory>&x;</territory>"
        )
        with pytest.raises(SerializationError):
            parse_xml_string(document)

    def test_parse_file(self, tmp_path: Path) -> None:
        path = tmp_path / "FR.xml"
        path.write_text(
            '<territory countryCode="33"><fixedLine><possibleLengths national="9"/></fixedLine></territory>',
            encoding="utf-8",
        )
        root = parse_xml_file(path)
        assert isinstance(root, EtreeElement)
        assert compile_territory("FR", root).general_desc.possible_length == (9,)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            parse_xml_file(tmp_path / "missing.xml")
