"""Expansion of ``$NP`` / ``$FG`` / ``$CC`` placeholders in formatting-rule templates.

``$NP`` is the territory's national prefix and ``$FG`` the first group of the
formatted number, written as ``$1``. ``$CC`` (carrier code) stays as a literal
token for the formatter to fill in. Only the first occurrence of each
placeholder is substituted.
"""

from __future__ import annotations

NATIONAL_PREFIX = "$NP"
FIRST_GROUP = "$FG"
CARRIER_CODE = "$CC"
FIRST_GROUP_REFERENCE = "$1"


def expand_national_prefix_rule(template: str | None, national_prefix: str) -> str | None:
    if template is None:
        return None
    return template.replace(NATIONAL_PREFIX, national_prefix, 1).replace(
        FIRST_GROUP, FIRST_GROUP_REFERENCE, 1
    )


def expand_carrier_code_rule(template: str | None, national_prefix: str) -> str | None:
    if template is None:
        return None
    return template.replace(FIRST_GROUP, FIRST_GROUP_REFERENCE, 1).replace(
        NATIONAL_PREFIX, national_prefix, 1
    )


__all__ = [
    "CARRIER_CODE",
    "FIRST_GROUP",
    "FIRST_GROUP_REFERENCE",
    "NATIONAL_PREFIX",
    "expand_carrier_code_rule",
    "expand_national_prefix_rule",
]
