#!/usr/bin/env python3
"""
天气分类器

从 METAR 解码结果推导风险信号，并给出各阶段优先抽取的题目
"""
import re
from typing import List, Sequence

from data.weather_bias import (
    WEATHER_BIAS,
    CEILING_THRESHOLD_FT,
    VISIBILITY_THRESHOLD_SM,
    GUST_THRESHOLD_KT,
)
from .models import MetarDecoded
from .utils import dedupe

GOOD_VFR = "good_vfr"

# METAR 天气现象代码中的雷暴标记：TS / -TSRA / +TSGR / VCTS
_TS_CODE = re.compile(r"(^|\s)[-+]?(VC)?TS")


def _has_thunderstorm(decoded: MetarDecoded) -> bool:
    if "thunderstorm" in (decoded.phenomena or "").lower():
        return True
    return bool(_TS_CODE.search((decoded.wx_code or "").upper()))


def detect_weather_conditions(decoded: MetarDecoded) -> List[str]:
    """
    天气风险信号

    Args:
        decoded: METAR 解码结果

    Returns:
        List[str]: 按 thunderstorm, low_ceiling, low_vis, gusty 顺序的信号；
                   都不满足时返回 ["good_vfr"]
    """
    conditions = []

    if _has_thunderstorm(decoded):
        conditions.append("thunderstorm")
    if decoded.ceiling_ft is not None and decoded.ceiling_ft <= CEILING_THRESHOLD_FT:
        conditions.append("low_ceiling")
    if decoded.vis_sm is not None and decoded.vis_sm <= VISIBILITY_THRESHOLD_SM:
        conditions.append("low_vis")
    if decoded.gust_speed is not None and decoded.gust_speed >= GUST_THRESHOLD_KT:
        conditions.append("gusty")

    return conditions or [GOOD_VFR]


def risk_signal_count(conditions: Sequence[str]) -> int:
    """非 good_vfr 信号的数量"""
    return len([c for c in conditions if c != GOOD_VFR])


def get_weather_preferred_ids(phase: str, conditions: Sequence[str]) -> List[str]:
    """
    某阶段在当前天气下优先抽取的题目 ID

    多个信号取并集，按信号顺序和表内顺序去重

    Args:
        phase: 飞行阶段
        conditions: detect_weather_conditions 的输出

    Returns:
        List[str]: 题目 ID 列表（可能为空）
    """
    ids = []
    for condition in conditions:
        ids.extend(WEATHER_BIAS.get(condition, {}).get(phase, []))
    return dedupe(ids)
