"""Metadata compiler – territory descriptions in, PhoneMetadata records out.

Modules:
  element.py    – Element capability the compiler reads through
  model.py      – NumberFormat, PhoneNumberDesc, PhoneMetadata, PhoneMetadataBuilder
  errors.py     – MetadataError hierarchy
  regex.py      – validate_pattern
  templates.py  – $NP / $FG / $CC expansion
  lengths.py    – possible-length parsing and aggregation
  descs.py      – per-type descriptions
  formats.py    – national and international formatting rules
  assembler.py  – MetadataAssembler, compile_territory
  collection.py – whole-document compilation
"""

from mp_phonemeta.metadata.assembler import MetadataAssembler, compile_territory
from mp_phonemeta.metadata.collection import (
    MetadataCollection,
    build_metadata_collection,
    country_code_to_region_codes,
)
from mp_phonemeta.metadata.element import Element
from mp_phonemeta.metadata.errors import MetadataError
from mp_phonemeta.metadata.model import (
    NumberFormat,
    PhoneMetadata,
    PhoneMetadataBuilder,
    PhoneNumberDesc,
)

__all__ = [
    "Element",
    "MetadataAssembler",
    "MetadataCollection",
    "MetadataError",
    "NumberFormat",
    "PhoneMetadata",
    "PhoneMetadataBuilder",
    "PhoneNumberDesc",
    "build_metadata_collection",
    "compile_territory",
    "country_code_to_region_codes",
]
