#!/usr/bin/env python3
"""
航段引擎 - 简报 → 规划 → 会话状态机

提供统一的航段规划与会话推进接口（纯函数，随机源和题库都由调用方注入）
"""

# 数据结构
from .models import (
    PHASES,
    MAX_RISK,
    HOP_TIMEOUT_SECONDS,
    HopEngineError,
    SessionClosedError,
    InvalidTransitionError,
    QuestionRecord,
    BonusCard,
    Reference,
    QuestionItem,
    RadioItem,
    EmergencyItem,
    EmergencyEvent,
    FlightBrief,
    HopPlan,
    Response,
    SessionState,
)

# 各层组件
from .rng import SeededRng
from .briefs import generate_flight_brief
from .weather import detect_weather_conditions, get_weather_preferred_ids
from .planner import (
    plan_sequence,
    resolve_mission,
    resolve_aircraft,
    distribute_cards,
    rebalance_counts,
    select_emergency,
)
from .session import (
    apply_answer,
    create_briefing,
    start_session,
    resolve_go_no_go,
    submit_answer,
    card_expired,
    expire_card,
    acknowledge_emergency,
    advance,
    tick,
    pause_session,
    resume_session,
    current_item,
    debrief_summary,
)
from .transitions import pick_transition, phase_bridge, emergency_transition

__all__ = [
    # 数据结构
    'PHASES',
    'MAX_RISK',
    'HOP_TIMEOUT_SECONDS',
    'HopEngineError',
    'SessionClosedError',
    'InvalidTransitionError',
    'QuestionRecord',
    'BonusCard',
    'Reference',
    'QuestionItem',
    'RadioItem',
    'EmergencyItem',
    'EmergencyEvent',
    'FlightBrief',
    'HopPlan',
    'Response',
    'SessionState',

    # 简报与规划
    'SeededRng',
    'generate_flight_brief',
    'detect_weather_conditions',
    'get_weather_preferred_ids',
    'plan_sequence',
    'resolve_mission',
    'resolve_aircraft',
    'distribute_cards',
    'rebalance_counts',
    'select_emergency',

    # 会话状态机
    'apply_answer',
    'create_briefing',
    'start_session',
    'resolve_go_no_go',
    'submit_answer',
    'card_expired',
    'expire_card',
    'acknowledge_emergency',
    'advance',
    'tick',
    'pause_session',
    'resume_session',
    'current_item',
    'debrief_summary',

    # 过渡叙事
    'pick_transition',
    'phase_bridge',
    'emergency_transition',
]
