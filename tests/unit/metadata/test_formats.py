"""Unit tests for national and international formatting rules."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from mp_phonemeta.adapters.etree import parse_xml_string
from mp_phonemeta.metadata.errors import (
    MissingFormatError,
    MultipleFormatsError,
    MultipleIntlFormatsError,
)
from mp_phonemeta.metadata.formats import (
    build_available_formats,
    build_international_format,
    build_national_format,
    build_number_format,
    leading_digits_patterns,
)
from mp_phonemeta.metadata.model import NumberFormat, PhoneMetadataBuilder


# ---------------------------------------------------------------------------
# International format
# ---------------------------------------------------------------------------


class TestBuildInternationalFormat:
    def test_explicit_format(self) -> None:
        builder = PhoneMetadataBuilder()
        element = parse_xml_string("<numberFormat><intlFormat>$1 $2</intlFormat></numberFormat>")
        added, explicit = build_international_format(builder, element, NumberFormat())
        assert explicit
        assert builder.intl_number_format[0].format == "$1 $2"
        assert added == builder.intl_number_format[0]

    def test_explicit_format_wins_over_national(self) -> None:
        builder = PhoneMetadataBuilder()
        element = parse_xml_string("<numberFormat><intlFormat>$1 $2</intlFormat></numberFormat>")
        _, explicit = build_international_format(builder, element, NumberFormat(format="$1"))
        assert explicit
        assert builder.intl_number_format[0].format == "$1 $2"

    def test_expects_only_one_intl_format(self) -> None:
        element = parse_xml_string("<numberFormat><intlFormat/><intlFormat/></numberFormat>")
        with pytest.raises(MultipleIntlFormatsError):
            build_international_format(PhoneMetadataBuilder("FR"), element, NumberFormat())

    def test_uses_national_format_by_default(self) -> None:
        builder = PhoneMetadataBuilder()
        _, explicit = build_international_format(
            builder, parse_xml_string("<numberFormat/>"), NumberFormat(format="$1 $2 $3")
        )
        assert not explicit
        assert builder.intl_number_format[0].format == "$1 $2 $3"

    def test_copies_national_format_data(self) -> None:
        builder = PhoneMetadataBuilder()
        national = NumberFormat(format="$1-$2", national_prefix_optional_when_formatting=True)
        _, explicit = build_international_format(builder, parse_xml_string("<numberFormat/>"), national)
        assert not explicit
        assert builder.intl_number_format[0] == national
        assert builder.intl_number_format[0].national_prefix_optional_when_formatting

    def test_na_adds_nothing(self) -> None:
        builder = PhoneMetadataBuilder()
        element = parse_xml_string("<numberFormat><intlFormat>NA</intlFormat></numberFormat>")
        added, explicit = build_international_format(builder, element, NumberFormat(format="$1 $2"))
        assert added is None
        assert explicit
        assert builder.intl_number_format == ()


# ---------------------------------------------------------------------------
# National format
# ---------------------------------------------------------------------------


class TestBuildNationalFormat:
    def test_reads_format(self) -> None:
        element = parse_xml_string("<numberFormat><format>$1 $2</format></numberFormat>")
        assert build_national_format(element) == "$1 $2"

    def test_requires_format(self) -> None:
        with capture_logs() as logs:
            with pytest.raises(MissingFormatError) as exc_info:
                build_national_format(parse_xml_string("<numberFormat/>"), "FR")
        assert str(exc_info.value) == "Invalid number of format patterns (0) for country: FR"
        assert logs[0]["event"] == "invalid_format_count"
        assert logs[0]["log_level"] == "error"

    def test_expects_exactly_one_format(self) -> None:
        element = parse_xml_string("<numberFormat><format/><format/></numberFormat>")
        with pytest.raises(MultipleFormatsError) as exc_info:
            build_national_format(element, "FR")
        assert exc_info.value.count == 2


class TestLeadingDigitsPatterns:
    def test_document_order(self) -> None:
        element = parse_xml_string(
            "<numberFormat><leadingDigits>1</leadingDigits><leadingDigits>2</leadingDigits></numberFormat>"
        )
        assert leading_digits_patterns(element) == ("1", "2")

    def test_whitespace_is_stripped(self) -> None:
        element = parse_xml_string(
            "<numberFormat><leadingDigits>\n  1 |\n  2\n</leadingDigits></numberFormat>"
        )
        assert leading_digits_patterns(element) == ("1|2",)


class TestBuildNumberFormat:
    def test_local_rules_win_over_defaults(self) -> None:
        element = parse_xml_string(
            '<numberFormat pattern="(\\d{2})(\\d{4})" nationalPrefixFormattingRule="$NP $FG"'
            ' nationalPrefixOptionalWhenFormatting="true"><format>$1 $2</format></numberFormat>'
        )
        number_format = build_number_format(element, "8", "($1)", "", False)
        assert number_format.pattern == r"(\d{2})(\d{4})"
        assert number_format.national_prefix_formatting_rule == "8 $1"
        assert number_format.national_prefix_optional_when_formatting

    def test_falls_back_to_defaults(self) -> None:
        element = parse_xml_string("<numberFormat><format>$1</format></numberFormat>")
        number_format = build_number_format(element, "0", "0$1", "0 $CC $1", True)
        assert number_format.national_prefix_formatting_rule == "0$1"
        assert number_format.domestic_carrier_code_formatting_rule == "0 $CC $1"
        assert number_format.national_prefix_optional_when_formatting


# ---------------------------------------------------------------------------
# Available formats
# ---------------------------------------------------------------------------


class TestBuildAvailableFormats:
    def test_loads_formats(self) -> None:
        territory = parse_xml_string(
            "<territory><availableFormats>"
            "<numberFormat nationalPrefixFormattingRule='($FG)' carrierCodeFormattingRule='$NP $CC ($FG)'>"
            "<format>$1 $2 $3</format>"
            "</numberFormat>"
            "</availableFormats></territory>"
        )
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, territory, "0", "", False)
        number_format = builder.number_format[0]
        assert number_format.national_prefix_formatting_rule == "($1)"
        assert number_format.domestic_carrier_code_formatting_rule == "0 $CC ($1)"
        assert number_format.format == "$1 $2 $3"

    def test_propagates_carrier_code_formatting_rule(self) -> None:
        territory = parse_xml_string(
            "<territory carrierCodeFormattingRule='$NP $CC ($FG)'><availableFormats>"
            "<numberFormat nationalPrefixFormattingRule='($FG)'><format>$1 $2 $3</format></numberFormat>"
            "</availableFormats></territory>"
        )
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, territory, "0", "", False)
        assert builder.number_format[0].national_prefix_formatting_rule == "($1)"
        assert builder.number_format[0].domestic_carrier_code_formatting_rule == "0 $CC ($1)"

    def test_sets_provided_national_prefix_formatting_rule(self) -> None:
        territory = parse_xml_string(
            "<territory><availableFormats>"
            "<numberFormat><format>$1 $2 $3</format></numberFormat>"
            "</availableFormats></territory>"
        )
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, territory, "", "($1)", False)
        assert builder.number_format[0].national_prefix_formatting_rule == "($1)"

    def test_clears_intl_format_when_none_explicit(self) -> None:
        territory = parse_xml_string(
            "<territory><availableFormats>"
            "<numberFormat><format>$1 $2 $3</format></numberFormat>"
            "</availableFormats></territory>"
        )
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, territory, "0", "($1)", False)
        assert builder.intl_number_format == ()

    def test_handles_multiple_number_formats(self) -> None:
        territory = parse_xml_string(
            "<territory><availableFormats>"
            "<numberFormat><format>$1 $2 $3</format></numberFormat>"
            "<numberFormat><format>$1-$2</format></numberFormat>"
            "</availableFormats></territory>"
        )
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, territory, "0", "($1)", False)
        assert [f.format for f in builder.number_format] == ["$1 $2 $3", "$1-$2"]

    def test_leading_digits_not_added_twice(self) -> None:
        element = parse_xml_string(
            "<availableFormats>"
            '<numberFormat pattern="(1)(\\d{3})"><leadingDigits>1</leadingDigits><format>$1</format></numberFormat>'
            '<numberFormat pattern="(2)(\\d{3})"><leadingDigits>2</leadingDigits><format>$1</format>'
            "<intlFormat>9-$1</intlFormat></numberFormat>"
            "</availableFormats>"
        )
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, element, "0", "", False)
        assert [f.leading_digits_pattern for f in builder.number_format] == [("1",), ("2",)]
        assert [f.leading_digits_pattern for f in builder.intl_number_format] == [("1",), ("2",)]
        assert [f.format for f in builder.intl_number_format] == ["$1", "9-$1"]

    def test_na_keeps_other_intl_formats(self) -> None:
        territory = parse_xml_string(
            "<territory><availableFormats>"
            "<numberFormat><format>$1 $2</format><intlFormat>NA</intlFormat></numberFormat>"
            "<numberFormat><format>$1-$2</format></numberFormat>"
            "</availableFormats></territory>"
        )
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, territory, "0", "", False)
        assert len(builder.number_format) == 2
        assert [f.format for f in builder.intl_number_format] == ["$1-$2"]

    def test_no_formats(self) -> None:
        builder = PhoneMetadataBuilder()
        build_available_formats(builder, parse_xml_string("<territory/>"), "0")
        assert builder.number_format == ()
