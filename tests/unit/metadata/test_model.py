"""Unit tests for compiled metadata records and the builder."""

from __future__ import annotations

import dataclasses

import pytest

from mp_phonemeta.kernel.errors import InvariantViolationError
from mp_phonemeta.metadata.model import (
    FULL_METADATA_TYPES,
    NumberFormat,
    PhoneMetadata,
    PhoneMetadataBuilder,
    PhoneNumberDesc,
    number_type_names,
)


class TestPhoneNumberDesc:
    def test_defaults(self) -> None:
        desc = PhoneNumberDesc()
        assert desc.national_number_pattern == "NA"
        assert desc.possible_number_pattern == "NA"
        assert desc.example_number == ""
        assert desc.possible_length == ()

    def test_lengths_normalised_to_tuples(self) -> None:
        desc = PhoneNumberDesc(possible_length=[4, 13])  # type: ignore[arg-type]
        assert desc.possible_length == (4, 13)

    def test_rejects_unsorted_lengths(self) -> None:
        with pytest.raises(InvariantViolationError):
            PhoneNumberDesc(possible_length=(13, 4))

    def test_rejects_non_positive_lengths(self) -> None:
        with pytest.raises(InvariantViolationError):
            PhoneNumberDesc(possible_length=(0, 4))

    def test_rejects_local_overlap(self) -> None:
        with pytest.raises(InvariantViolationError):
            PhoneNumberDesc(possible_length=(6, 9), possible_length_local_only=(6,))

    def test_copy_with(self) -> None:
        desc = PhoneNumberDesc(national_number_pattern=r"\d{9}")
        copy = desc.copy_with(example_number="123456789")
        assert copy.national_number_pattern == r"\d{9}"
        assert desc.example_number == ""


class TestPhoneMetadata:
    def test_desc_by_element_name(self) -> None:
        mobile = PhoneNumberDesc(national_number_pattern=r"6\d{8}")
        metadata = PhoneMetadata(id="FR", mobile=mobile)
        assert metadata.desc("mobile") is mobile
        assert metadata.desc("fixedLine") is None

    def test_type_descs_excludes_general(self) -> None:
        metadata = PhoneMetadata(
            id="FR", general_desc=PhoneNumberDesc(), voicemail=PhoneNumberDesc()
        )
        assert list(metadata.type_descs()) == ["voicemail"]

    def test_number_types(self) -> None:
        assert number_type_names() == FULL_METADATA_TYPES
        assert "shortCode" in number_type_names(short_number=True)
        assert "noInternationalDialling" not in number_type_names(short_number=True)


class TestPhoneMetadataBuilder:
    def test_build(self) -> None:
        builder = PhoneMetadataBuilder("FR").set(country_code=33, national_prefix="0")
        builder.add_number_format(NumberFormat(format="$1"))
        metadata = builder.build()
        assert metadata.id == "FR"
        assert metadata.country_code == 33
        assert metadata.number_format == (NumberFormat(format="$1"),)

    def test_unknown_field(self) -> None:
        with pytest.raises(AttributeError):
            PhoneMetadataBuilder("FR").set(colour="blue")

    def test_has_and_get(self) -> None:
        builder = PhoneMetadataBuilder("FR")
        assert not builder.has("national_prefix")
        builder.set(national_prefix="0")
        assert builder.has("national_prefix")
        assert builder.get("national_prefix") == "0"

    def test_clear_intl_number_format(self) -> None:
        builder = PhoneMetadataBuilder()
        builder.add_intl_number_format(NumberFormat(format="$1"))
        builder.clear_intl_number_format()
        assert builder.build().intl_number_format == ()

    def test_built_record_is_detached(self) -> None:
        builder = PhoneMetadataBuilder("FR")
        builder.add_number_format(NumberFormat(format="$1"))
        metadata = builder.build()
        builder.add_number_format(NumberFormat(format="$2"))
        assert len(metadata.number_format) == 1
        with pytest.raises(dataclasses.FrozenInstanceError):
            metadata.national_prefix = "1"  # type: ignore[misc]
