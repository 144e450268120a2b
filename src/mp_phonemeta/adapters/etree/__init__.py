"""ElementTree adapter – read territory documents with defusedxml."""
from mp_phonemeta.adapters.etree.element import (
    EtreeElement,
    parse_xml_file,
    parse_xml_string,
)

__all__ = ["EtreeElement", "parse_xml_file", "parse_xml_string"]
