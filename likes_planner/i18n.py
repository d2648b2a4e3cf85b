"""Display vocabulary for the training planner.

Every user-facing string the core produces (characteristic labels, advice,
decoded workout notation, plan preview labels) is looked up here. Internal
logic works with stable keys; this layer turns keys into text.

Tables are shaped ``table[key][locale]``. Chinese is the default locale since
the plan notation and the coaching platform are Chinese-first.
"""

from typing import Literal

Locale = Literal["zh", "en"]

SUPPORTED_LOCALES: tuple[str, ...] = ("zh", "en")
DEFAULT_LOCALE: Locale = "zh"

# Whole-field plan names that mean "rest day", in any locale
REST_LITERALS = frozenset({"休息", "rest"})

# Joins the three characteristic labels
LABEL_SEPARATOR: dict[Locale, str] = {
    "zh": "、",
    "en": ", ",
}

CHARACTERISTIC_LABELS: dict[str, dict[Locale, str]] = {
    "high_frequency": {"zh": "高频次", "en": "high-frequency"},
    "moderate_frequency": {"zh": "中等频次", "en": "moderate-frequency"},
    "low_frequency": {"zh": "低频次", "en": "low-frequency"},
    "short_distance": {"zh": "短距离", "en": "short-distance"},
    "moderate_distance": {"zh": "中等距离", "en": "moderate-distance"},
    "long_distance": {"zh": "长距离", "en": "long-distance"},
    "recovery_aerobic": {"zh": "恢复性有氧", "en": "recovery aerobic"},
    "aerobic_base": {"zh": "有氧基础", "en": "aerobic base"},
    "tempo": {"zh": "tempo 节奏", "en": "tempo"},
    "speed_work": {"zh": "速度训练", "en": "speed work"},
}

RECOMMENDATION_TEXT: dict[str, dict[Locale, str]] = {
    "keep_high_frequency": {
        "zh": "保持当前高频次，适合健康维持",
        "en": "Keep up the current high frequency; it suits general health maintenance",
    },
    "increase_frequency": {
        "zh": "建议增加运动频率，每周至少3-4次",
        "en": "Run more often: aim for at least 3-4 sessions per week",
    },
    "increase_distance": {
        "zh": "可以适当增加单次距离，提升耐力",
        "en": "Gradually increase single-session distance to build endurance",
    },
    "slow_pace_fat_loss": {
        "zh": "当前配速偏慢，适合减脂和恢复",
        "en": "Current pace is on the slow side, which suits fat loss and recovery",
    },
}

# Zone annotation kinds as written in plan notation
ZONE_LABELS: dict[str, dict[Locale, str]] = {
    "HRR": {"zh": "心率区间", "en": "HRR"},
    "VDOT": {"zh": "VDOT", "en": "VDOT"},
    "PACE": {"zh": "配速", "en": "pace"},
    "t": {"zh": "阈值", "en": "threshold"},
    "EFFORT": {"zh": "尽力程度", "en": "effort"},
}

# Unit words are appended directly to the magnitude
UNIT_WORDS: dict[str, dict[Locale, str]] = {
    "min": {"zh": "分钟", "en": " minutes"},
    "km": {"zh": "公里", "en": " kilometers"},
    "m": {"zh": "米", "en": " meters"},
    "s": {"zh": "秒", "en": " seconds"},
}

NOTATION_TEXT: dict[str, dict[Locale, str]] = {
    "rest_day": {"zh": "休息日", "en": "rest day"},
    "rest_marker": {"zh": "(休息)", "en": "(rest)"},
    "zone": {"zh": "({label} {lo}-{hi})", "en": "({label} {lo}-{hi})"},
    "interval": {"zh": "【{body}】×{repeats}组", "en": "【{body}】×{repeats} sets"},
}

PLAN_TYPE_LABELS: dict[str, dict[Locale, str]] = {
    "qingsong": {"zh": "轻松跑", "en": "Easy run"},
    "xiuxi": {"zh": "休息日", "en": "Rest day"},
    "e": {"zh": "有氧训练", "en": "Aerobic run"},
    "lsd": {"zh": "长距离慢跑", "en": "Long slow distance"},
    "m": {"zh": "马拉松配速", "en": "Marathon pace"},
    "t": {"zh": "阈值训练", "en": "Threshold"},
    "i": {"zh": "间歇训练", "en": "Intervals"},
    "r": {"zh": "速度训练", "en": "Repetitions"},
    "ft": {"zh": "法特莱克", "en": "Fartlek"},
    "com": {"zh": "组合训练", "en": "Combination"},
    "ch": {"zh": "变速训练", "en": "Change of pace"},
    "jili": {"zh": "肌力训练", "en": "Strength"},
    "max": {"zh": "最大心率测试", "en": "Max heart-rate test"},
    "drift": {"zh": "有氧稳定测试", "en": "Aerobic drift test"},
    "other": {"zh": "其他", "en": "Other"},
}

INTENSITY_LABELS: dict[str, dict[Locale, str]] = {
    "q1": {"zh": "高强度", "en": "High intensity"},
    "q2": {"zh": "中强度", "en": "Medium intensity"},
    "q3": {"zh": "低强度", "en": "Low intensity"},
    "xuanxiu": {"zh": "恢复/选修", "en": "Recovery/optional"},
}

# Monday first, matching date.weekday()
WEEKDAY_LABELS: dict[Locale, tuple[str, ...]] = {
    "zh": ("周一", "周二", "周三", "周四", "周五", "周六", "周日"),
    "en": ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"),
}

PREVIEW_TEXT: dict[str, dict[Locale, str]] = {
    "title": {"zh": "训练计划预览", "en": "Training plan preview"},
    "week": {"zh": "第 {week} 周", "en": "Week {week}"},
    "type": {"zh": "类型", "en": "Type"},
    "intensity": {"zh": "强度", "en": "Intensity"},
    "summary": {"zh": "计划摘要", "en": "Plan summary"},
    "total_days": {"zh": "总训练日: {count} 天", "en": "Training days: {count}"},
    "by_type": {"zh": "按类型:", "en": "By type:"},
    "by_intensity": {"zh": "按强度:", "en": "By intensity:"},
    "times": {"zh": "{count} 次", "en": "{count}x"},
}


def resolve_locale(locale: str | None) -> Locale:
    """Normalize a locale name, falling back to the default.

    Args:
        locale: Locale name (case-insensitive) or None

    Returns:
        A supported locale
    """
    if locale and locale.lower() == "en":
        return "en"
    return DEFAULT_LOCALE


def translate(table: dict[str, dict[Locale, str]], key: str, locale: str | None = None) -> str:
    """Look up a display string, passing unknown keys through verbatim.

    Args:
        table: One of the vocabulary tables in this module
        key: Internal key (e.g., "lsd", "q1", "HRR")
        locale: Target locale

    Returns:
        Localized text, or the key itself when the table has no entry
    """
    entry = table.get(key)
    if entry is None:
        return key
    return entry[resolve_locale(locale)]
