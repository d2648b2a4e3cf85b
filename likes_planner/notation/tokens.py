"""Decoded fragments of workout notation.

Plan names use a compact notation, e.g. ``{400m@(PACE+4'00~4'10)}x8``.
Each rewrite rule turns one matched fragment into one of these tokens, and
each token renders itself into localized display text.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from likes_planner.i18n import NOTATION_TEXT, UNIT_WORDS, ZONE_LABELS, resolve_locale, translate


class ZoneKind(StrEnum):
    """Intensity range kinds, spelled as in the notation."""

    HRR = "HRR"
    VDOT = "VDOT"
    PACE = "PACE"
    THRESHOLD = "t"
    EFFORT = "EFFORT"


class UnitKind(StrEnum):
    MINUTES = "min"
    KILOMETERS = "km"
    METERS = "m"
    SECONDS = "s"


@dataclass(frozen=True)
class RestDay:
    """A rest day, or the inline ``@(rest)`` recovery marker when ``inline``."""

    inline: bool = False


@dataclass(frozen=True)
class ZoneAnnotation:
    kind: ZoneKind
    lo: str
    hi: str


@dataclass(frozen=True)
class UnitSuffix:
    kind: UnitKind


@dataclass(frozen=True)
class IntervalGroup:
    """A segment repeated ``repeats`` times; ``body`` is already-rendered text."""

    body: str
    repeats: int


@dataclass(frozen=True)
class LiteralText:
    """Text kept verbatim."""

    text: str


WorkoutToken = RestDay | ZoneAnnotation | UnitSuffix | IntervalGroup | LiteralText


def render_token(token: WorkoutToken, locale: str | None = None) -> str:
    """Render a token as display text.

    Args:
        token: Decoded token
        locale: Display locale

    Returns:
        Localized text for the token
    """
    locale = resolve_locale(locale)
    if isinstance(token, RestDay):
        return NOTATION_TEXT["rest_marker" if token.inline else "rest_day"][locale]
    if isinstance(token, ZoneAnnotation):
        label = translate(ZONE_LABELS, token.kind.value, locale)
        return NOTATION_TEXT["zone"][locale].format(label=label, lo=token.lo, hi=token.hi)
    if isinstance(token, UnitSuffix):
        return UNIT_WORDS[token.kind.value][locale]
    if isinstance(token, IntervalGroup):
        return NOTATION_TEXT["interval"][locale].format(body=token.body, repeats=token.repeats)
    return token.text
