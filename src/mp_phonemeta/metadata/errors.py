"""Compiler errors.

Every failure is fatal to the territory being compiled::

    MetadataError
    ├── StructuralError          wrong cardinality / malformed attribute
    ├── PatternSyntaxError       invalid regular expression (also an ``re.error``)
    └── LengthSpecError          possible-length declarations
"""
from __future__ import annotations

import re
from typing import Any, Iterable

from mp_phonemeta.kernel.errors import DomainError


def _bracketed(values: Iterable[int]) -> str:
    return "[" + ", ".join(str(v) for v in sorted(values)) + "]"


class MetadataError(DomainError):
    """Territory description cannot be compiled."""

    default_code = "metadata_error"


# ---------------------------------------------------------------------------
# Structural
# ---------------------------------------------------------------------------


class StructuralError(MetadataError):
    """A required child element is missing, duplicated or malformed."""

    default_code = "structural_error"


class DuplicateTypeElementError(StructuralError):
    default_code = "duplicate_type_element"

    def __init__(self, type_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Multiple elements with type {type_name} found.",
            detail={"type": type_name},
            **kwargs,
        )
        self.type_name = type_name


class MissingFormatError(StructuralError):
    default_code = "missing_format"

    def __init__(self, territory_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid number of format patterns (0) for country: {territory_id}",
            detail={"territory": territory_id, "count": 0},
            **kwargs,
        )
        self.territory_id = territory_id


class MultipleFormatsError(StructuralError):
    default_code = "multiple_formats"

    def __init__(self, territory_id: str, count: int, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid number of format patterns ({count}) for country: {territory_id}",
            detail={"territory": territory_id, "count": count},
            **kwargs,
        )
        self.territory_id = territory_id
        self.count = count


class MultipleIntlFormatsError(StructuralError):
    default_code = "multiple_intl_formats"

    def __init__(self, territory_id: str, **kwargs: Any) -> None:
        super().__init__(
            f"Invalid number of intlFormat patterns for country: {territory_id}",
            detail={"territory": territory_id},
            **kwargs,
        )
        self.territory_id = territory_id


class InvalidAttributeError(StructuralError):
    default_code = "invalid_attribute"

    def __init__(self, name: str, value: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Attribute {name}={value!r} is invalid: {reason}",
            detail={"attribute": name, "value": value},
            **kwargs,
        )
        self.name = name
        self.value = value


# ---------------------------------------------------------------------------
# Syntax
# ---------------------------------------------------------------------------


class PatternSyntaxError(MetadataError, re.error):
    """A pattern was rejected, either by the regex engine or by the pipe rule.

    Engine rejections keep the engine's ``msg`` and ``pos``.
    """

    default_code = "pattern_syntax"

    def __init__(
        self,
        reason: str,
        pattern: str,
        pos: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"{reason} in pattern {pattern!r}",
            detail={"pattern": pattern, "pos": pos},
            **kwargs,
        )
        self.msg = reason
        self.pattern = pattern
        self.pos = pos


# ---------------------------------------------------------------------------
# Possible lengths
# ---------------------------------------------------------------------------


class LengthSpecError(MetadataError):
    """A possible-length declaration is malformed or inconsistent."""

    default_code = "length_spec_error"


class EmptyLengthSpecError(LengthSpecError):
    default_code = "empty_length_spec"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__("Empty possibleLength string found.", **kwargs)


class EmptyLengthTokenError(LengthSpecError):
    default_code = "empty_length_token"

    def __init__(self, spec: str, **kwargs: Any) -> None:
        super().__init__(
            f"Leading, trailing or adjacent commas in possible length string {spec}, "
            "these should only separate numbers or ranges.",
            detail={"spec": spec},
            **kwargs,
        )
        self.spec = spec


class MalformedRangeError(LengthSpecError):
    default_code = "malformed_range"

    def __init__(self, spec: str, *, missing_end: bool, **kwargs: Any) -> None:
        if missing_end:
            message = f"Missing end of range character in possible length string {spec}."
        else:
            message = f"Ranges must have exactly one - character: missing for {spec}."
        super().__init__(message, detail={"spec": spec}, **kwargs)
        self.spec = spec
        self.missing_end = missing_end


class DegenerateRangeError(LengthSpecError):
    default_code = "degenerate_range"

    def __init__(self, spec: str, **kwargs: Any) -> None:
        super().__init__(
            "The first number in a range should be two or more digits lower than the second. "
            f"Culprit possibleLength string: {spec}",
            detail={"spec": spec},
            **kwargs,
        )
        self.spec = spec


class DuplicateLengthError(LengthSpecError):
    default_code = "duplicate_length"

    def __init__(self, length: int, spec: str, **kwargs: Any) -> None:
        super().__init__(
            f"Duplicate length element found ({length}) in possibleLength string {spec}",
            detail={"length": length, "spec": spec},
            **kwargs,
        )
        self.length = length
        self.spec = spec


class NonNumericLengthError(LengthSpecError):
    default_code = "non_numeric_length"

    def __init__(self, token: str, spec: str, **kwargs: Any) -> None:
        super().__init__(
            f"Possible length {token!r} is not a positive integer in possibleLength string {spec}",
            detail={"token": token, "spec": spec},
            **kwargs,
        )
        self.token = token
        self.spec = spec


class NormalAndLocalOverlapError(LengthSpecError):
    default_code = "normal_and_local_overlap"

    def __init__(self, lengths: Iterable[int], **kwargs: Any) -> None:
        self.lengths = tuple(sorted(lengths))
        super().__init__(
            "Possible length(s) found specified as a normal and local-only length: "
            f"{_bracketed(self.lengths)}",
            detail={"lengths": list(self.lengths)},
            **kwargs,
        )


class OutOfRangeLengthError(LengthSpecError):
    default_code = "out_of_range_length"

    def __init__(self, length: int, parent_lengths: Iterable[int], **kwargs: Any) -> None:
        self.length = length
        self.parent_lengths = tuple(parent_lengths)
        super().__init__(
            f"Out-of-range possible length found ({length}), "
            f"parent lengths {_bracketed(self.parent_lengths)}.",
            detail={"length": length, "parent_lengths": list(self.parent_lengths)},
            **kwargs,
        )


class LocalOnlyForbiddenInShortNumbersError(LengthSpecError):
    default_code = "local_only_in_short_numbers"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__("Found local-only lengths in short-number metadata", **kwargs)


class GeneralDescHasExplicitLengthsError(LengthSpecError):
    default_code = "general_desc_explicit_lengths"

    def __init__(self, territory_id: str, **kwargs: Any) -> None:
        super().__init__(
            "Found possible lengths specified at general desc: this should be derived "
            f"from child elements. Affected country: {territory_id}",
            detail={"territory": territory_id},
            **kwargs,
        )
        self.territory_id = territory_id


__all__ = [
    "DegenerateRangeError",
    "DuplicateLengthError",
    "DuplicateTypeElementError",
    "EmptyLengthSpecError",
    "EmptyLengthTokenError",
    "GeneralDescHasExplicitLengthsError",
    "InvalidAttributeError",
    "LengthSpecError",
    "LocalOnlyForbiddenInShortNumbersError",
    "MalformedRangeError",
    "MetadataError",
    "MissingFormatError",
    "MultipleFormatsError",
    "MultipleIntlFormatsError",
    "NonNumericLengthError",
    "NormalAndLocalOverlapError",
    "OutOfRangeLengthError",
    "PatternSyntaxError",
    "StructuralError",
]
