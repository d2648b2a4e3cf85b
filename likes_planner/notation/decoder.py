"""Workout notation decoder.

Turns a plan's compact ``name`` field into readable text. This is cosmetic
rendering, not validation: text no rule understands is passed through
unchanged and decoding never raises.

Examples (zh):
    "休息"                          -> "休息日"
    "20min@(HRR+0.6~0.7)"           -> "20分钟(心率区间 0.6-0.7)"
    "{400m@(PACE+4'00~4'10)}x8"     -> "【400米(配速 4'00-4'10)】×8组"
"""

from __future__ import annotations

import re

from loguru import logger

from likes_planner.notation.rules import REWRITE_RULES, RewriteRule
from likes_planner.notation.tokens import LiteralText, render_token


def _rewrite(rule: RewriteRule, match: re.Match[str], locale: str | None) -> str:
    token = rule.build(match)
    if token is None:
        logger.debug(f"Notation rule '{rule.name}' left '{match.group(0)}' as is")
        token = LiteralText(match.group(0))
    return render_token(token, locale)


def decode_workout_name(name: str, locale: str | None = None) -> str:
    """Decode workout notation into display text.

    Args:
        name: Plan name field in compact notation
        locale: Display locale ("zh" or "en")

    Returns:
        Readable text; unrecognized fragments are kept verbatim
    """
    text = name
    for rule in REWRITE_RULES:
        if rule.whole_field:
            match = rule.pattern.fullmatch(text)
            if match is not None:
                return _rewrite(rule, match, locale)
            continue
        text = rule.pattern.sub(lambda match, rule=rule: _rewrite(rule, match, locale), text)
    return text
