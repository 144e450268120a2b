"""Pattern normalisation and syntax checking."""

from __future__ import annotations

import re
from typing import Final

from mp_phonemeta.metadata.errors import PatternSyntaxError

_WHITESPACE: Final = re.compile(r"\s")
# A trailing alternative before ")" matches the empty string; this is
# almost always a line deleted from a multi-line pattern.
_PIPE_BEFORE_CLOSE: Final = re.compile(r"\|\s*\)")


def validate_pattern(pattern: str, strip_whitespace: bool = False) -> str:
    """Return *pattern* (whitespace removed if requested) once it is known to compile.

    Raises :class:`PatternSyntaxError` for anything the ``re`` engine rejects
    and for ``|`` followed by ``)``, with or without whitespace in between.
    """
    if strip_whitespace:
        pattern = _WHITESPACE.sub("", pattern)
    try:
        re.compile(pattern)
    except re.error as exc:
        raise PatternSyntaxError(exc.msg, pattern, exc.pos, cause=exc) from exc
    match = _PIPE_BEFORE_CLOSE.search(pattern)
    if match is not None:
        raise PatternSyntaxError("| followed by )", pattern, match.start())
    return pattern


__all__ = ["validate_pattern"]
