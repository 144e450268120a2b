"""Compiled metadata records: NumberFormat, PhoneNumberDesc, PhoneMetadata.

Records are frozen once built. ``PhoneMetadataBuilder`` is the mutable working
state of a single territory's compile pass.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Iterable

from mp_phonemeta.kernel.errors import InvariantViolationError
from mp_phonemeta.kernel.types import NOT_APPLICABLE

# Number-type element names, as they appear in territory descriptions.
GENERAL_DESC = "generalDesc"
FIXED_LINE = "fixedLine"
MOBILE = "mobile"
PAGER = "pager"
TOLL_FREE = "tollFree"
PREMIUM_RATE = "premiumRate"
SHARED_COST = "sharedCost"
PERSONAL_NUMBER = "personalNumber"
VOIP = "voip"
UAN = "uan"
VOICEMAIL = "voicemail"
NO_INTERNATIONAL_DIALLING = "noInternationalDialling"
STANDARD_RATE = "standardRate"
SHORT_CODE = "shortCode"
CARRIER_SPECIFIC = "carrierSpecific"
EMERGENCY = "emergency"

# Element name -> PhoneMetadata field name.
DESC_FIELDS: dict[str, str] = {
    GENERAL_DESC: "general_desc",
    FIXED_LINE: "fixed_line",
    MOBILE: "mobile",
    PAGER: "pager",
    TOLL_FREE: "toll_free",
    PREMIUM_RATE: "premium_rate",
    SHARED_COST: "shared_cost",
    PERSONAL_NUMBER: "personal_number",
    VOIP: "voip",
    UAN: "uan",
    VOICEMAIL: "voicemail",
    NO_INTERNATIONAL_DIALLING: "no_international_dialling",
    STANDARD_RATE: "standard_rate",
    SHORT_CODE: "short_code",
    CARRIER_SPECIFIC: "carrier_specific",
    EMERGENCY: "emergency",
}

# Types compiled for regular (full) metadata, in the order they are assigned.
FULL_METADATA_TYPES: tuple[str, ...] = (
    FIXED_LINE,
    MOBILE,
    PAGER,
    TOLL_FREE,
    PREMIUM_RATE,
    SHARED_COST,
    PERSONAL_NUMBER,
    VOIP,
    UAN,
    VOICEMAIL,
    NO_INTERNATIONAL_DIALLING,
)
SHORT_NUMBER_TYPES: tuple[str, ...] = (
    TOLL_FREE,
    STANDARD_RATE,
    PREMIUM_RATE,
    SHORT_CODE,
    CARRIER_SPECIFIC,
    EMERGENCY,
)
# Types whose lengths make up the general description. noInternationalDialling
# is a dialling property several types can share, not a category of its own.
CONTRIBUTING_TYPES: tuple[str, ...] = tuple(
    t for t in FULL_METADATA_TYPES if t != NO_INTERNATIONAL_DIALLING
)
# shortCode is the most detailed short-number pattern; the others are checked
# against it.
SHORT_NUMBER_CONTRIBUTING_TYPES: tuple[str, ...] = (SHORT_CODE,)
KNOWN_TYPES = frozenset(FULL_METADATA_TYPES + SHORT_NUMBER_TYPES)


def number_type_names(short_number: bool = False) -> tuple[str, ...]:
    """Types that apply to regular or short-number metadata."""
    return SHORT_NUMBER_TYPES if short_number else FULL_METADATA_TYPES


def _as_lengths(name: str, values: Iterable[int]) -> tuple[int, ...]:
    lengths = tuple(values)
    for value in lengths:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvariantViolationError(f"{name} must hold positive integers, got {value!r}")
    if any(a >= b for a, b in zip(lengths, lengths[1:])):
        raise InvariantViolationError(f"{name} must be ascending and distinct, got {list(lengths)}")
    return lengths


@dataclasses.dataclass(frozen=True)
class NumberFormat:
    """One formatting rule: a match pattern and the template applied to it."""

    pattern: str = ""
    format: str = ""
    leading_digits_pattern: tuple[str, ...] = ()
    national_prefix_formatting_rule: str = ""
    domestic_carrier_code_formatting_rule: str = ""
    national_prefix_optional_when_formatting: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "leading_digits_pattern", tuple(self.leading_digits_pattern))


@dataclasses.dataclass(frozen=True)
class PhoneNumberDesc:
    """Description of one number type within a territory.

    ``possible_length_local_only`` never shares a value with ``possible_length``.
    """

    national_number_pattern: str = NOT_APPLICABLE
    possible_number_pattern: str = NOT_APPLICABLE
    example_number: str = ""
    possible_length: tuple[int, ...] = ()
    possible_length_local_only: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        normal = _as_lengths("possible_length", self.possible_length)
        local = _as_lengths("possible_length_local_only", self.possible_length_local_only)
        overlap = sorted(set(normal) & set(local))
        if overlap:
            raise InvariantViolationError(
                f"possible_length_local_only overlaps possible_length: {overlap}"
            )
        object.__setattr__(self, "possible_length", normal)
        object.__setattr__(self, "possible_length_local_only", local)

    def copy_with(self, **changes: Any) -> "PhoneNumberDesc":
        """Return a new instance with given fields replaced."""
        return dataclasses.replace(self, **changes)


@dataclasses.dataclass(frozen=True)
class PhoneMetadata:
    """Compiled record for one territory."""

    id: str
    country_code: int | None = None
    leading_digits: str = ""
    international_prefix: str = ""
    preferred_international_prefix: str = ""
    national_prefix: str = ""
    national_prefix_for_parsing: str = ""
    national_prefix_transform_rule: str = ""
    preferred_extn_prefix: str = ""
    national_prefix_formatting_rule: str = ""
    domestic_carrier_code_formatting_rule: str = ""
    main_country_for_code: bool = False
    leading_zero_possible: bool = False
    mobile_number_portable_region: bool = False
    same_mobile_and_fixed_line_pattern: bool = False
    general_desc: PhoneNumberDesc | None = None
    fixed_line: PhoneNumberDesc | None = None
    mobile: PhoneNumberDesc | None = None
    pager: PhoneNumberDesc | None = None
    toll_free: PhoneNumberDesc | None = None
    premium_rate: PhoneNumberDesc | None = None
    shared_cost: PhoneNumberDesc | None = None
    personal_number: PhoneNumberDesc | None = None
    voip: PhoneNumberDesc | None = None
    uan: PhoneNumberDesc | None = None
    voicemail: PhoneNumberDesc | None = None
    no_international_dialling: PhoneNumberDesc | None = None
    standard_rate: PhoneNumberDesc | None = None
    short_code: PhoneNumberDesc | None = None
    carrier_specific: PhoneNumberDesc | None = None
    emergency: PhoneNumberDesc | None = None
    number_format: tuple[NumberFormat, ...] = ()
    intl_number_format: tuple[NumberFormat, ...] = ()

    def desc(self, type_name: str) -> PhoneNumberDesc | None:
        """Return the description stored for element name *type_name*."""
        return getattr(self, DESC_FIELDS[type_name])

    def type_descs(self) -> dict[str, PhoneNumberDesc]:
        """Every per-type description that is set, keyed by element name."""
        return {
            name: desc
            for name, field in DESC_FIELDS.items()
            if name != GENERAL_DESC and (desc := getattr(self, field)) is not None
        }


_METADATA_FIELDS = frozenset(f.name for f in dataclasses.fields(PhoneMetadata)) - {
    "number_format",
    "intl_number_format",
}


class PhoneMetadataBuilder:
    """Mutable working state for one territory's compile pass.

    Scalar fields and descriptions go through :meth:`set`; the two format
    sequences have dedicated append/clear operations. :meth:`build` freezes
    the current state into a :class:`PhoneMetadata`.
    """

    def __init__(self, id: str = "") -> None:  # noqa: A002
        self._attrs: dict[str, Any] = {"id": id}
        self._number_format: list[NumberFormat] = []
        self._intl_number_format: list[NumberFormat] = []

    @property
    def id(self) -> str:
        return self._attrs["id"]

    def set(self, **fields: Any) -> "PhoneMetadataBuilder":
        unknown = set(fields) - _METADATA_FIELDS
        if unknown:
            raise AttributeError(f"PhoneMetadata has no field(s) {sorted(unknown)}")
        self._attrs.update(fields)
        return self

    def has(self, name: str) -> bool:
        return self._attrs.get(name) is not None

    def get(self, name: str, default: Any = None) -> Any:
        return self._attrs.get(name, default)

    @property
    def number_format(self) -> tuple[NumberFormat, ...]:
        return tuple(self._number_format)

    @property
    def intl_number_format(self) -> tuple[NumberFormat, ...]:
        return tuple(self._intl_number_format)

    def add_number_format(self, number_format: NumberFormat) -> None:
        self._number_format.append(number_format)

    def add_intl_number_format(self, number_format: NumberFormat) -> None:
        self._intl_number_format.append(number_format)

    def clear_intl_number_format(self) -> None:
        self._intl_number_format.clear()

    def build(self) -> PhoneMetadata:
        return PhoneMetadata(
            **self._attrs,
            number_format=tuple(self._number_format),
            intl_number_format=tuple(self._intl_number_format),
        )


__all__ = [
    "CARRIER_SPECIFIC",
    "CONTRIBUTING_TYPES",
    "DESC_FIELDS",
    "EMERGENCY",
    "FIXED_LINE",
    "FULL_METADATA_TYPES",
    "GENERAL_DESC",
    "KNOWN_TYPES",
    "MOBILE",
    "NO_INTERNATIONAL_DIALLING",
    "NumberFormat",
    "PAGER",
    "PERSONAL_NUMBER",
    "PREMIUM_RATE",
    "PhoneMetadata",
    "PhoneMetadataBuilder",
    "PhoneNumberDesc",
    "SHARED_COST",
    "SHORT_CODE",
    "SHORT_NUMBER_CONTRIBUTING_TYPES",
    "SHORT_NUMBER_TYPES",
    "STANDARD_RATE",
    "TOLL_FREE",
    "UAN",
    "VOICEMAIL",
    "VOIP",
    "number_type_names",
]
