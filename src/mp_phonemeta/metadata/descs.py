"""Per-type phone-number descriptions.

Patterns and lengths inherit from the general description in opposite
directions. A type copies the general description's patterns and overrides
the ones it declares. Lengths flow upwards: the general description is the
union of the types' lengths and every type must stay inside it. For a type
that is unknown, or not declared by the territory, the general description
is not a fallback: both patterns are ``"NA"``.
"""

from __future__ import annotations

from mp_phonemeta.kernel.types import (
    NOT_APPLICABLE,
    FieldState,
    Inherited,
    NotApplicable,
    Overridden,
)
from mp_phonemeta.metadata.element import Element, first_text
from mp_phonemeta.metadata.errors import DuplicateTypeElementError
from mp_phonemeta.metadata.lengths import (
    Lengths,
    aggregate_general_lengths,
    resolve_type_lengths,
)
from mp_phonemeta.metadata.model import (
    DESC_FIELDS,
    FIXED_LINE,
    GENERAL_DESC,
    KNOWN_TYPES,
    MOBILE,
    PhoneMetadataBuilder,
    PhoneNumberDesc,
    number_type_names,
)
from mp_phonemeta.metadata.regex import validate_pattern

NATIONAL_NUMBER_PATTERN = "nationalNumberPattern"
POSSIBLE_NUMBER_PATTERN = "possibleNumberPattern"
EXAMPLE_NUMBER = "exampleNumber"

_PATTERN_FIELDS = ("national_number_pattern", "possible_number_pattern")
_LENGTH_FIELDS = ("possible_length", "possible_length_local_only")


def single_type_element(territory: Element, type_name: str) -> Element | None:
    """The territory's element for *type_name*; declaring a type twice is an error."""
    found = territory.elements_by_tag(type_name)
    if len(found) > 1:
        raise DuplicateTypeElementError(type_name)
    return found[0] if found else None


def _pattern_state(element: Element | None, tag: str) -> FieldState[str]:
    if element is None:
        return NotApplicable()
    text = first_text(element, tag)
    if text is None:
        return Inherited()
    return Overridden(validate_pattern(text, strip_whitespace=True))


def _example_number(element: Element | None, lite_build: bool) -> str:
    if element is None or lite_build:
        return ""
    return first_text(element, EXAMPLE_NUMBER) or ""


def _desc_from_element(
    general_desc: PhoneNumberDesc,
    element: Element | None,
    lite_build: bool,
    short_number: bool,
) -> PhoneNumberDesc:
    national = _pattern_state(element, NATIONAL_NUMBER_PATTERN)
    possible = _pattern_state(element, POSSIBLE_NUMBER_PATTERN)
    lengths: tuple[Lengths, Lengths] = ((), ())
    if element is not None:
        lengths = resolve_type_lengths(element, general_desc, short_number)
    return PhoneNumberDesc(
        national_number_pattern=national.resolve(general_desc.national_number_pattern),
        possible_number_pattern=possible.resolve(general_desc.possible_number_pattern),
        example_number=_example_number(element, lite_build),
        possible_length=lengths[0],
        possible_length_local_only=lengths[1],
    )


def build_general_desc(
    territory: Element,
    territory_id: str = "",
    lite_build: bool = False,
    short_number: bool = False,
    lengths: tuple[Lengths, Lengths] | None = None,
) -> PhoneNumberDesc:
    """The general description: its own patterns, lengths aggregated from the types."""
    general = single_type_element(territory, GENERAL_DESC)
    if lengths is None:
        lengths = aggregate_general_lengths(territory, territory_id, short_number)
    return PhoneNumberDesc(
        national_number_pattern=_pattern_state(general, NATIONAL_NUMBER_PATTERN).resolve(
            NOT_APPLICABLE
        ),
        possible_number_pattern=_pattern_state(general, POSSIBLE_NUMBER_PATTERN).resolve(
            NOT_APPLICABLE
        ),
        example_number=_example_number(general, lite_build),
        possible_length=lengths[0],
        possible_length_local_only=lengths[1],
    )


def build_type_desc(
    general_desc: PhoneNumberDesc,
    territory: Element,
    type_name: str,
    lite_build: bool = False,
    short_number: bool = False,
) -> PhoneNumberDesc:
    """Merge the territory's *type_name* element onto *general_desc*.

    Declared patterns are whitespace-stripped and validated. Lite builds
    never carry example numbers.
    """
    element = single_type_element(territory, type_name) if type_name in KNOWN_TYPES else None
    return _desc_from_element(general_desc, element, lite_build, short_number)


def set_relevant_desc_patterns(
    builder: PhoneMetadataBuilder,
    territory: Element,
    lite_build: bool = False,
    short_number: bool = False,
    *,
    general_lengths: tuple[Lengths, Lengths] | None = None,
) -> None:
    """Set the general description and every type the territory declares.

    Types the territory does not declare stay unset on *builder*.
    """
    general_desc = build_general_desc(
        territory, builder.id, lite_build, short_number, general_lengths
    )
    builder.set(general_desc=general_desc)

    for type_name in number_type_names(short_number):
        element = single_type_element(territory, type_name)
        if element is None:
            continue
        builder.set(
            **{DESC_FIELDS[type_name]: _desc_from_element(
                general_desc, element, lite_build, short_number
            )}
        )

    fixed_line = builder.get(DESC_FIELDS[FIXED_LINE])
    mobile = builder.get(DESC_FIELDS[MOBILE])
    if fixed_line is not None and mobile is not None:
        pattern = fixed_line.national_number_pattern
        if pattern not in ("", NOT_APPLICABLE) and pattern == mobile.national_number_pattern:
            builder.set(same_mobile_and_fixed_line_pattern=True)


def field_states(desc: PhoneNumberDesc, parent: PhoneNumberDesc) -> dict[str, FieldState]:
    """How each field of a per-type *desc* relates to its *parent*.

    Equal patterns and example numbers are inherited, ``"NA"`` patterns are
    not applicable, and empty length sets mean the parent's lengths apply.
    """
    states: dict[str, FieldState] = {}
    for name in _PATTERN_FIELDS:
        value = getattr(desc, name)
        if value == NOT_APPLICABLE:
            states[name] = NotApplicable()
        elif value == getattr(parent, name):
            states[name] = Inherited()
        else:
            states[name] = Overridden(value)
    example = desc.example_number
    if example in ("", parent.example_number):
        states["example_number"] = Inherited()
    else:
        states["example_number"] = Overridden(example)
    for name in _LENGTH_FIELDS:
        value = getattr(desc, name)
        states[name] = Overridden(value) if value else Inherited()
    return states


__all__ = [
    "EXAMPLE_NUMBER",
    "NATIONAL_NUMBER_PATTERN",
    "POSSIBLE_NUMBER_PATTERN",
    "build_general_desc",
    "build_type_desc",
    "field_states",
    "set_relevant_desc_patterns",
    "single_type_element",
]
