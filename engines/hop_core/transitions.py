#!/usr/bin/env python3
"""
过渡叙事选择器
"""
from typing import Optional, Sequence

from data.flight_transitions import TRANSITIONS
from .models import ESCALATION_THRESHOLD
from .rng import choice


def pick_transition(phase: str, was_correct: bool, risk: int, rng) -> str:
    """
    卡片之间的过渡文本

    风险达到 ESCALATION_THRESHOLD 且答错时使用高风险文本

    Args:
        phase: 刚完成的题目所在阶段
        was_correct: 是否答对
        risk: 作答后的风险
        rng: 随机源

    Returns:
        str: 过渡文本
    """
    texts = TRANSITIONS[phase]
    if risk >= ESCALATION_THRESHOLD and not was_correct:
        return choice(rng, texts["high_risk"])
    return choice(rng, texts["correct"] if was_correct else texts["wrong"])


def phase_bridge(from_phase: str) -> str:
    """离开某阶段时的衔接句"""
    return TRANSITIONS[from_phase]["bridge"]


def emergency_transition(texts: Sequence[str], rng) -> Optional[str]:
    """应急处置期间的过渡文本（事件没有配置时返回 None）"""
    if not texts:
        return None
    return choice(rng, list(texts))
