"""Possible-length declarations: parsing, cross-checks and aggregation.

A type element declares its lengths as::

    <possibleLengths national="[8-10],12" localOnly="6"/>

``national`` is a comma-separated list of lengths and ranges. A range
``[a-b]`` stands for the lengths one or more digits longer than ``a`` up to
and including ``b``, so ``[8-10]`` is ``9,10``. ``localOnly`` lists lengths
that are only diallable without the area code.

The general description never declares lengths itself: its sets are the
union over the contributing types, and every type must then stay within
that union.
"""

from __future__ import annotations

from typing import Iterable

from mp_phonemeta.metadata.element import Element
from mp_phonemeta.metadata.errors import (
    DegenerateRangeError,
    DuplicateLengthError,
    EmptyLengthSpecError,
    EmptyLengthTokenError,
    GeneralDescHasExplicitLengthsError,
    LocalOnlyForbiddenInShortNumbersError,
    MalformedRangeError,
    NonNumericLengthError,
    NormalAndLocalOverlapError,
    OutOfRangeLengthError,
)
from mp_phonemeta.metadata.model import (
    CONTRIBUTING_TYPES,
    GENERAL_DESC,
    SHORT_NUMBER_CONTRIBUTING_TYPES,
    PhoneNumberDesc,
)

POSSIBLE_LENGTHS = "possibleLengths"
NATIONAL = "national"
LOCAL_ONLY = "localOnly"

type Lengths = tuple[int, ...]


def _parse_integer(token: str, spec: str) -> int:
    if not (token.isascii() and token.isdigit()):
        raise NonNumericLengthError(token, spec)
    return int(token)


def _expand_range(token: str, spec: str) -> range:
    if len(token) < 2 or not token.endswith("]"):
        raise MalformedRangeError(spec, missing_end=True)
    bounds = token[1:-1].split("-")
    if len(bounds) != 2:
        raise MalformedRangeError(spec, missing_end=False)
    low, high = (_parse_integer(bound, spec) for bound in bounds)
    # [6-7] is better written as 6,7: the dash has to stand for at least one length.
    if high - low < 2:
        raise DegenerateRangeError(spec)
    return range(low + 1, high + 1)


def parse_length_spec(spec: str) -> Lengths:
    """Parse a ``national``/``localOnly`` attribute into sorted distinct lengths."""
    if not spec:
        raise EmptyLengthSpecError()
    lengths: set[int] = set()
    for token in spec.split(","):
        if not token:
            raise EmptyLengthTokenError(spec)
        if token.startswith("["):
            candidates: Iterable[int] = _expand_range(token, spec)
        else:
            length = _parse_integer(token, spec)
            if length == 0:
                raise NonNumericLengthError(token, spec)
            candidates = (length,)
        for length in candidates:
            if length in lengths:
                raise DuplicateLengthError(length, spec)
            lengths.add(length)
    return tuple(sorted(lengths))


def read_length_sets(element: Element) -> tuple[set[int], set[int]]:
    """Collect the normal and local-only lengths declared under *element*.

    Several ``possibleLengths`` children are unioned; within one child a length
    may not be both normal and local-only.
    """
    normal: set[int] = set()
    local_only: set[int] = set()
    for declaration in element.elements_by_tag(POSSIBLE_LENGTHS):
        this_normal = set(parse_length_spec(declaration.attribute(NATIONAL) or ""))
        local_spec = declaration.attribute(LOCAL_ONLY)
        if local_spec is not None:
            this_local = set(parse_length_spec(local_spec))
            overlap = this_normal & this_local
            if overlap:
                raise NormalAndLocalOverlapError(overlap)
            local_only |= this_local
        normal |= this_normal
    return normal, local_only


def resolve_type_lengths(
    element: Element,
    general_desc: PhoneNumberDesc,
    short_number: bool = False,
) -> tuple[Lengths, Lengths]:
    """Possible lengths for a per-type description.

    Returns ``(possible_length, possible_length_local_only)``. Lengths equal to
    the general description's are left empty (inherited). Local-only lengths
    are validated but only ever carried by the general description, so the
    second item is always empty.
    """
    normal, local_only = read_length_sets(element)
    if short_number and local_only:
        raise LocalOnlyForbiddenInShortNumbersError()
    parent = general_desc.possible_length
    if normal == set(parent):
        return (), ()
    if not short_number:
        for length in sorted(normal):
            if length not in parent:
                raise OutOfRangeLengthError(length, parent)
    return tuple(sorted(normal)), ()


def aggregate_general_lengths(
    territory: Element,
    territory_id: str = "",
    short_number: bool = False,
) -> tuple[Lengths, Lengths]:
    """Union the lengths of the contributing types into the general description's sets.

    A length that is normal for one type and local-only for another counts as
    normal.
    """
    for general in territory.elements_by_tag(GENERAL_DESC):
        if general.elements_by_tag(POSSIBLE_LENGTHS):
            raise GeneralDescHasExplicitLengthsError(territory_id)

    contributing = SHORT_NUMBER_CONTRIBUTING_TYPES if short_number else CONTRIBUTING_TYPES
    normal: set[int] = set()
    local_only: set[int] = set()
    for type_name in contributing:
        for type_element in territory.elements_by_tag(type_name):
            this_normal, this_local = read_length_sets(type_element)
            normal |= this_normal
            local_only |= this_local
    if short_number and local_only:
        raise LocalOnlyForbiddenInShortNumbersError()
    return tuple(sorted(normal)), tuple(sorted(local_only - normal))


__all__ = [
    "LOCAL_ONLY",
    "NATIONAL",
    "POSSIBLE_LENGTHS",
    "Lengths",
    "aggregate_general_lengths",
    "parse_length_spec",
    "read_length_sets",
    "resolve_type_lengths",
]
