"""National and international formatting rules.

Every ``numberFormat`` yields one national rule. Its international rule is
either declared by an ``intlFormat`` child, suppressed by ``intlFormat`` text
``NA``, or a copy of the national rule. Most territories never declare one,
and then the international list would only repeat the national list, so it is
dropped entirely unless at least one rule was declared explicitly.
"""

from __future__ import annotations

import dataclasses

from mp_phonemeta.metadata.element import Element, bool_attribute
from mp_phonemeta.metadata.errors import (
    MissingFormatError,
    MultipleFormatsError,
    MultipleIntlFormatsError,
)
from mp_phonemeta.metadata.model import NumberFormat, PhoneMetadataBuilder
from mp_phonemeta.metadata.regex import validate_pattern
from mp_phonemeta.metadata.templates import (
    expand_carrier_code_rule,
    expand_national_prefix_rule,
)
from mp_phonemeta.observability.logging import get_logger

NUMBER_FORMAT = "numberFormat"
PATTERN = "pattern"
FORMAT = "format"
INTL_FORMAT = "intlFormat"
LEADING_DIGITS = "leadingDigits"
NATIONAL_PREFIX_FORMATTING_RULE = "nationalPrefixFormattingRule"
CARRIER_CODE_FORMATTING_RULE = "carrierCodeFormattingRule"
NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING = "nationalPrefixOptionalWhenFormatting"
NO_INTL_FORMAT = "NA"

logger = get_logger(__name__)


def _territory_label(builder: PhoneMetadataBuilder) -> str:
    if builder.id:
        return builder.id
    country_code = builder.get("country_code")
    return "" if country_code is None else str(country_code)


def leading_digits_patterns(element: Element) -> tuple[str, ...]:
    """Validated ``leadingDigits`` patterns in document order."""
    return tuple(
        validate_pattern(node.text(), strip_whitespace=True)
        for node in element.elements_by_tag(LEADING_DIGITS)
    )


def build_national_format(element: Element, territory_id: str = "") -> str:
    """The text of the single ``format`` child of a ``numberFormat`` element."""
    formats = element.elements_by_tag(FORMAT)
    if len(formats) != 1:
        logger.error(
            "invalid_format_count",
            territory=territory_id,
            count=len(formats),
        )
        if not formats:
            raise MissingFormatError(territory_id)
        raise MultipleFormatsError(territory_id, len(formats))
    return formats[0].text()


def build_international_format(
    builder: PhoneMetadataBuilder,
    element: Element,
    national_format: NumberFormat,
) -> tuple[NumberFormat | None, bool]:
    """Add the international counterpart of *national_format* to *builder*.

    Returns the rule that was added (``None`` when none was) and whether the
    element declared an ``intlFormat`` explicitly.
    """
    declared = element.elements_by_tag(INTL_FORMAT)
    if len(declared) > 1:
        territory = _territory_label(builder)
        logger.error("invalid_intl_format_count", territory=territory, count=len(declared))
        raise MultipleIntlFormatsError(territory)

    if not declared:
        intl_format = dataclasses.replace(national_format)
        explicit = False
    else:
        explicit = True
        text = declared[0].text()
        if text == NO_INTL_FORMAT:
            return None, explicit
        intl_format = NumberFormat(
            pattern=validate_pattern(element.attribute(PATTERN) or ""),
            format=text,
            leading_digits_pattern=(
                leading_digits_patterns(element) or national_format.leading_digits_pattern
            ),
        )

    if not intl_format.format:
        return None, explicit
    builder.add_intl_number_format(intl_format)
    return intl_format, explicit


def build_number_format(
    element: Element,
    national_prefix: str,
    national_prefix_formatting_rule: str = "",
    carrier_code_formatting_rule: str = "",
    national_prefix_optional_when_formatting: bool = False,
    territory_id: str = "",
) -> NumberFormat:
    """The national rule declared by one ``numberFormat`` element.

    Formatting rules declared on the element win over the territory defaults
    passed in, which are expected to be expanded already.
    """
    np_rule = expand_national_prefix_rule(
        element.attribute(NATIONAL_PREFIX_FORMATTING_RULE), national_prefix
    )
    carrier_rule = expand_carrier_code_rule(
        element.attribute(CARRIER_CODE_FORMATTING_RULE), national_prefix
    )
    return NumberFormat(
        pattern=validate_pattern(element.attribute(PATTERN) or ""),
        leading_digits_pattern=leading_digits_patterns(element),
        national_prefix_formatting_rule=(
            national_prefix_formatting_rule if np_rule is None else np_rule
        ),
        domestic_carrier_code_formatting_rule=(
            carrier_code_formatting_rule if carrier_rule is None else validate_pattern(carrier_rule)
        ),
        national_prefix_optional_when_formatting=bool_attribute(
            element,
            NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING,
            default=national_prefix_optional_when_formatting,
        ),
        format=build_national_format(element, territory_id),
    )


def build_available_formats(
    builder: PhoneMetadataBuilder,
    territory: Element,
    national_prefix: str,
    national_prefix_formatting_rule: str = "",
    national_prefix_optional_when_formatting: bool = False,
) -> None:
    """Add every ``numberFormat`` of *territory* to *builder*, in document order."""
    carrier_code_formatting_rule = ""
    carrier_template = territory.attribute(CARRIER_CODE_FORMATTING_RULE)
    if carrier_template is not None:
        carrier_code_formatting_rule = validate_pattern(
            expand_carrier_code_rule(carrier_template, national_prefix) or ""
        )

    elements = territory.elements_by_tag(NUMBER_FORMAT)
    if not elements:
        return

    any_explicit = False
    for element in elements:
        national_format = build_number_format(
            element,
            national_prefix,
            national_prefix_formatting_rule,
            carrier_code_formatting_rule,
            national_prefix_optional_when_formatting,
            territory_id=_territory_label(builder),
        )
        builder.add_number_format(national_format)
        _, explicit = build_international_format(builder, element, national_format)
        any_explicit = any_explicit or explicit

    if not any_explicit:
        builder.clear_intl_number_format()


__all__ = [
    "CARRIER_CODE_FORMATTING_RULE",
    "FORMAT",
    "INTL_FORMAT",
    "LEADING_DIGITS",
    "NATIONAL_PREFIX_FORMATTING_RULE",
    "NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING",
    "NUMBER_FORMAT",
    "PATTERN",
    "build_available_formats",
    "build_international_format",
    "build_national_format",
    "build_number_format",
    "leading_digits_patterns",
]
