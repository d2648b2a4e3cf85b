"""Ordered rewrite rules for workout notation.

Rules run top to bottom; each one rewrites every match in the string before
the next rule starts. Zone annotations and units therefore already read as
display text by the time interval groups wrap them.

A rule's ``build`` returns None when a match should not be rewritten; the
decoder then keeps the matched text verbatim.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from likes_planner.i18n import REST_LITERALS
from likes_planner.notation.tokens import (
    IntervalGroup,
    RestDay,
    UnitKind,
    UnitSuffix,
    WorkoutToken,
    ZoneAnnotation,
    ZoneKind,
)


@dataclass(frozen=True)
class RewriteRule:
    """A notation pattern and the token it decodes to.

    Attributes:
        name: Rule name (for logging)
        pattern: Compiled pattern
        build: Turns a match into a token, or None to keep the match verbatim
        whole_field: Match the entire string only; a hit ends decoding
    """

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], WorkoutToken | None]
    whole_field: bool = False


def _build_rest_day(match: re.Match[str]) -> WorkoutToken | None:
    return RestDay()


def _build_zone(match: re.Match[str]) -> WorkoutToken | None:
    try:
        kind = ZoneKind(match.group("kind"))
    except ValueError:
        return None
    return ZoneAnnotation(kind=kind, lo=match.group("lo"), hi=match.group("hi"))


def _build_rest_marker(match: re.Match[str]) -> WorkoutToken | None:
    return RestDay(inline=True)


def _build_unit(match: re.Match[str]) -> WorkoutToken | None:
    return UnitSuffix(kind=UnitKind(match.group("unit")))


def _build_interval(match: re.Match[str]) -> WorkoutToken | None:
    return IntervalGroup(body=match.group("body"), repeats=int(match.group("repeats")))


REWRITE_RULES: tuple[RewriteRule, ...] = (
    RewriteRule(
        name="rest_day",
        pattern=re.compile("|".join(re.escape(literal) for literal in sorted(REST_LITERALS))),
        build=_build_rest_day,
        whole_field=True,
    ),
    # 400m@ ; before a zone the @ is left for the zone rule to consume
    RewriteRule(
        name="unit",
        pattern=re.compile(r"(?<=\d)(?P<unit>min|km|m|s)(?:@(?!\()|(?=@\())"),
        build=_build_unit,
    ),
    # @(HRR+0.6~0.7); threshold is also written t/LO~HI
    RewriteRule(
        name="zone",
        pattern=re.compile(r"@\((?P<kind>[A-Za-z]+)[+/](?P<lo>[\d.']+)~(?P<hi>[\d.']+)\)"),
        build=_build_zone,
    ),
    RewriteRule(
        name="rest_marker",
        pattern=re.compile(r"@\(rest\)"),
        build=_build_rest_marker,
    ),
    RewriteRule(
        name="interval",
        pattern=re.compile(r"\{(?P<body>[^{}]+)\}x(?P<repeats>\d+)"),
        build=_build_interval,
    ),
)
