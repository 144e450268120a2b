"""Territory compilation: from a territory element to a PhoneMetadata record."""

from __future__ import annotations

from mp_phonemeta.config import CompilerSettings
from mp_phonemeta.kernel.ddd import ensure
from mp_phonemeta.metadata.descs import set_relevant_desc_patterns
from mp_phonemeta.metadata.element import Element, bool_attribute
from mp_phonemeta.metadata.errors import InvalidAttributeError
from mp_phonemeta.metadata.formats import (
    CARRIER_CODE_FORMATTING_RULE,
    NATIONAL_PREFIX_FORMATTING_RULE,
    NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING,
    build_available_formats,
)
from mp_phonemeta.metadata.lengths import aggregate_general_lengths
from mp_phonemeta.metadata.model import PhoneMetadata, PhoneMetadataBuilder
from mp_phonemeta.metadata.regex import validate_pattern
from mp_phonemeta.metadata.templates import (
    expand_carrier_code_rule,
    expand_national_prefix_rule,
)
from mp_phonemeta.observability.logging import get_logger

COUNTRY_CODE = "countryCode"
LEADING_DIGITS = "leadingDigits"
INTERNATIONAL_PREFIX = "internationalPrefix"
PREFERRED_INTERNATIONAL_PREFIX = "preferredInternationalPrefix"
NATIONAL_PREFIX = "nationalPrefix"
NATIONAL_PREFIX_FOR_PARSING = "nationalPrefixForParsing"
NATIONAL_PREFIX_TRANSFORM_RULE = "nationalPrefixTransformRule"
PREFERRED_EXTN_PREFIX = "preferredExtnPrefix"
MAIN_COUNTRY_FOR_CODE = "mainCountryForCode"
LEADING_ZERO_POSSIBLE = "leadingZeroPossible"
MOBILE_NUMBER_PORTABLE_REGION = "mobileNumberPortableRegion"

logger = get_logger(__name__)


def national_prefix_of(territory: Element) -> str:
    return territory.attribute(NATIONAL_PREFIX) or ""


def load_territory_tag_metadata(
    territory_id: str,
    territory: Element,
    national_prefix: str,
) -> PhoneMetadataBuilder:
    """Read the territory element's own attributes into a fresh builder."""
    builder = PhoneMetadataBuilder(territory_id)

    country_code = territory.attribute(COUNTRY_CODE)
    if country_code is not None:
        if not (country_code.isascii() and country_code.isdigit()):
            raise InvalidAttributeError(
                COUNTRY_CODE, country_code, "expected a decimal country calling code"
            )
        builder.set(country_code=int(country_code))

    if (leading_digits := territory.attribute(LEADING_DIGITS)) is not None:
        builder.set(leading_digits=validate_pattern(leading_digits))
    if (international_prefix := territory.attribute(INTERNATIONAL_PREFIX)) is not None:
        builder.set(international_prefix=validate_pattern(international_prefix))
    if (preferred := territory.attribute(PREFERRED_INTERNATIONAL_PREFIX)) is not None:
        builder.set(preferred_international_prefix=preferred)

    if (for_parsing := territory.attribute(NATIONAL_PREFIX_FOR_PARSING)) is not None:
        builder.set(national_prefix_for_parsing=validate_pattern(for_parsing, strip_whitespace=True))
        if (transform := territory.attribute(NATIONAL_PREFIX_TRANSFORM_RULE)) is not None:
            builder.set(national_prefix_transform_rule=validate_pattern(transform))

    if national_prefix:
        builder.set(national_prefix=national_prefix)
        if not builder.has("national_prefix_for_parsing"):
            builder.set(national_prefix_for_parsing=national_prefix)

    if (extn_prefix := territory.attribute(PREFERRED_EXTN_PREFIX)) is not None:
        builder.set(preferred_extn_prefix=extn_prefix)

    builder.set(
        main_country_for_code=bool_attribute(territory, MAIN_COUNTRY_FOR_CODE),
        leading_zero_possible=bool_attribute(territory, LEADING_ZERO_POSSIBLE),
        mobile_number_portable_region=bool_attribute(territory, MOBILE_NUMBER_PORTABLE_REGION),
    )
    return builder


def check_metadata_invariants(
    metadata: PhoneMetadata,
    *,
    short_number: bool = False,
    alternate_formats: bool = False,
) -> None:
    """Whole-record checks run on every compiled territory."""
    if alternate_formats:
        ensure(
            metadata.general_desc is None and not metadata.type_descs(),
            f"Alternate-formats metadata for {metadata.id} must not carry number descriptions",
        )
    general = metadata.general_desc
    if general is not None and not short_number:
        allowed = set(general.possible_length)
        for type_name, desc in metadata.type_descs().items():
            ensure(
                set(desc.possible_length) <= allowed,
                f"{type_name} lengths {list(desc.possible_length)} of {metadata.id} "
                f"exceed general lengths {sorted(allowed)}",
            )
    for intl_format in metadata.intl_number_format:
        ensure(
            bool(intl_format.format),
            f"International format for pattern {intl_format.pattern!r} of {metadata.id} is empty",
        )


class MetadataAssembler:
    """Compile territory elements into :class:`PhoneMetadata` records.

    One assembler may compile any number of territories; it keeps no state
    between calls.

    Example::

        assembler = MetadataAssembler(CompilerSettings(lite_build=True))
        metadata = assembler.compile("FR", territory)
    """

    def __init__(self, settings: CompilerSettings | None = None) -> None:
        self._settings = settings or CompilerSettings()

    @property
    def settings(self) -> CompilerSettings:
        return self._settings

    def compile(
        self,
        territory_id: str,
        territory: Element,
        national_prefix: str | None = None,
    ) -> PhoneMetadata:
        """Compile *territory*; *national_prefix* overrides its ``nationalPrefix``."""
        settings = self._settings
        short_number = settings.short_number_metadata
        alternate_formats = settings.alternate_formats_metadata
        if national_prefix is None:
            national_prefix = national_prefix_of(territory)

        builder = load_territory_tag_metadata(territory_id, territory, national_prefix)
        general_lengths = aggregate_general_lengths(territory, territory_id, short_number)

        np_rule = expand_national_prefix_rule(
            territory.attribute(NATIONAL_PREFIX_FORMATTING_RULE), national_prefix
        ) or ""
        builder.set(national_prefix_formatting_rule=np_rule)
        carrier_rule = expand_carrier_code_rule(
            territory.attribute(CARRIER_CODE_FORMATTING_RULE), national_prefix
        )
        if carrier_rule is not None:
            builder.set(domestic_carrier_code_formatting_rule=validate_pattern(carrier_rule))

        if not alternate_formats:
            set_relevant_desc_patterns(
                builder,
                territory,
                settings.lite_build,
                short_number,
                general_lengths=general_lengths,
            )

        build_available_formats(
            builder,
            territory,
            national_prefix,
            np_rule,
            bool_attribute(territory, NATIONAL_PREFIX_OPTIONAL_WHEN_FORMATTING),
        )

        metadata = builder.build()
        check_metadata_invariants(
            metadata, short_number=short_number, alternate_formats=alternate_formats
        )
        logger.debug(
            "territory_compiled",
            territory=territory_id,
            types=sorted(metadata.type_descs()),
            number_formats=len(metadata.number_format),
            intl_number_formats=len(metadata.intl_number_format),
        )
        return metadata


def compile_territory(
    territory_id: str,
    territory: Element,
    national_prefix: str | None = None,
    *,
    lite_build: bool = False,
    short_number: bool = False,
    alternate_formats: bool = False,
) -> PhoneMetadata:
    """Compile one territory with the given flags.

    Raises :class:`~mp_phonemeta.config.InvalidSettingValueError` when
    *short_number* and *alternate_formats* are both set.
    """
    settings = CompilerSettings(
        lite_build=lite_build,
        short_number_metadata=short_number,
        alternate_formats_metadata=alternate_formats,
    )
    return MetadataAssembler(settings).compile(territory_id, territory, national_prefix)


__all__ = [
    "MetadataAssembler",
    "check_metadata_invariants",
    "compile_territory",
    "load_territory_tag_metadata",
    "national_prefix_of",
]
