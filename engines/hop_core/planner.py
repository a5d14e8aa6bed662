#!/usr/bin/env python3
"""
航段规划器

根据任务剖面、机型、天气信号和应急事件表，从题库中规划一条按阶段排列的卡片序列：
1. 抽取题目总数目标
2. 预留 bonus 卡和应急题名额（下限不足时按 应急 → bonus 的顺序释放）
3. 普通题按优先级分配到各阶段，再按任务剖面做再平衡
4. 每个阶段：开场通话 → 普通题（中间随机插入通话）→ 应急子序列 → bonus 卡

所有随机性都来自注入的 rng，题库只通过 catalog 的查询接口访问
"""
import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Any

from data.mission_profiles import MISSION_PROFILES, AIRCRAFT_TYPES, DEFAULT_MISSION, DEFAULT_AIRCRAFT
from data.emergency_events import EMERGENCY_EVENTS
from data.roc_a_cards import ROC_A_CARDS
from data.radio_exchanges import RADIO_EXCHANGES
from data.pstar_scenarios import SCENARIO_OVERLAYS
from .models import (
    PHASES,
    MAX_RISK,
    MAX_EMERGENCY_QUESTIONS,
    BONUS_CARD_PROBABILITY,
    MID_PHASE_RADIO_PROBABILITY,
    EMERGENCY_BASE_PROBABILITY,
    EMERGENCY_RISK_BONUS,
    QuestionRecord,
    BonusCard,
    EmergencyEvent,
    QuestionItem,
    RadioItem,
    EmergencyItem,
    SequenceItem,
    HopPlan,
    clamp_risk_points,
)
from .rng import rand_int, chance, choice, shuffle
from .utils import inject_tokens, inject_radio_lines, id_sort_key
from .weather import get_weather_preferred_ids, risk_signal_count

log = logging.getLogger("hop.planner")

# 普通题分配的优先顺序
DISTRIBUTION_PRIORITY = ("enroute", "taxi_depart", "arrival", "preflight")
MAX_DISTRIBUTION_ITERATIONS = 50


# ==========================================
# 剖面解析
# ==========================================

def resolve_mission(mission: Optional[str]) -> Tuple[str, Dict[str, Any]]:
    """未知剖面回退到最小剖面"""
    name = (mission or "").strip().lower()
    if name not in MISSION_PROFILES:
        name = DEFAULT_MISSION
    return name, MISSION_PROFILES[name]


def resolve_aircraft(aircraft: Optional[str]) -> Tuple[str, Dict[str, Any]]:
    """未知机型回退到 C172"""
    code = (aircraft or "").strip().upper()
    if code not in AIRCRAFT_TYPES:
        code = DEFAULT_AIRCRAFT
    return code, AIRCRAFT_TYPES[code]


def phase_floor(profile: Mapping[str, Any]) -> int:
    """各阶段下限之和"""
    return sum(profile["bounds"][phase][0] for phase in PHASES)


def load_emergency_events() -> List[EmergencyEvent]:
    return [EmergencyEvent.from_dict(e) for e in EMERGENCY_EVENTS]


def load_bonus_cards() -> List[BonusCard]:
    return [BonusCard.from_dict(c) for c in ROC_A_CARDS]


# ==========================================
# 数量分配
# ==========================================

def distribute_cards(target: int, profile: Mapping[str, Any]) -> Dict[str, int]:
    """
    把普通题目标数分配到各阶段

    每个阶段从下限开始，按 DISTRIBUTION_PRIORITY 轮流 +1，
    直到达到目标或所有阶段都到上限；迭代次数有上限，边界不一致时也能结束

    Args:
        target: 普通题目标数
        profile: 任务剖面

    Returns:
        Dict[str, int]: 各阶段题目数
    """
    bounds = profile["bounds"]
    counts = {phase: bounds[phase][0] for phase in PHASES}
    remaining = target - sum(counts.values())

    iterations = 0
    while remaining > 0 and iterations < MAX_DISTRIBUTION_ITERATIONS:
        iterations += 1
        assigned = False
        for phase in DISTRIBUTION_PRIORITY:
            if remaining <= 0:
                break
            if counts[phase] < bounds[phase][1]:
                counts[phase] += 1
                remaining -= 1
                assigned = True
        if not assigned:
            break

    return counts


def rebalance_counts(counts: Mapping[str, int], profile: Mapping[str, Any]) -> Dict[str, int]:
    """
    任务剖面再平衡：从 reduce 阶段一次挪 1 题到 boost 阶段

    不超过上限、不低于下限，没有富余的供给阶段时跳过

    Args:
        counts: distribute_cards 的结果
        profile: 任务剖面

    Returns:
        Dict[str, int]: 再平衡后的各阶段题目数（总数不变）
    """
    result = dict(counts)
    bounds = profile["bounds"]

    for _ in range(profile.get("rebalance_shifts", 0)):
        for target in profile.get("boost", []):
            if result[target] >= bounds[target][1]:
                continue
            donor = next(
                (p for p in profile.get("reduce", []) if p != target and result[p] > bounds[p][0]),
                None
            )
            if donor is None:
                continue
            result[donor] -= 1
            result[target] += 1

    return result


# ==========================================
# 应急事件
# ==========================================

def combined_risk_score(weather_signals: Sequence[str], aircraft_profile: Mapping[str, Any]) -> int:
    """天气信号数 + 机型常数，封顶 MAX_RISK"""
    return min(risk_signal_count(weather_signals) + aircraft_profile.get("risk", 0), MAX_RISK)


def emergency_probability(risk_score: int) -> float:
    """单次判定的应急概率"""
    return EMERGENCY_BASE_PROBABILITY + EMERGENCY_RISK_BONUS * risk_score


def select_emergency(events: Sequence[EmergencyEvent],
                     mission_profile: Mapping[str, Any],
                     risk_score: int,
                     rng) -> Optional[Tuple[str, EmergencyEvent]]:
    """
    逐阶段判定是否触发应急，命中的阶段中随机选一个

    每个阶段独立尝试 emergency_attempts 次，任意一次命中即算命中，
    并从该阶段可触发的事件中随机挑一个作为候选

    Args:
        events: 应急事件表
        mission_profile: 任务剖面
        risk_score: combined_risk_score 的结果
        rng: 随机源

    Returns:
        Optional[Tuple[str, EmergencyEvent]]: (阶段, 事件)，未命中为 None
    """
    probability = emergency_probability(risk_score)
    attempts = max(1, mission_profile.get("emergency_attempts", 1))

    candidates = []
    for phase in PHASES:
        hit = False
        for _ in range(attempts):
            if chance(rng, probability):
                hit = True
                break
        if not hit:
            continue
        eligible = [e for e in events if phase in e.trigger_phases]
        if eligible:
            candidates.append((phase, choice(rng, eligible)))

    if not candidates:
        return None
    return choice(rng, candidates)


def _load_emergency_candidates(event: EmergencyEvent, catalog, bonus_cards: Sequence[BonusCard], rng) -> list:
    """事件题池：题库题 + ROC-A 卡，洗牌后返回"""
    records = []
    if event.question_pool:
        records = sorted(catalog.get_questions_by_ids(list(event.question_pool)), key=lambda r: id_sort_key(r.id))
    cards = [c for c in bonus_cards if c.id in event.bonus_pool]
    return shuffle(rng, records + cards)


# ==========================================
# 卡片构造
# ==========================================

def _with_emergency_prefix(context: str, emergency_name: Optional[str]) -> str:
    if emergency_name:
        return f"[{emergency_name.upper()}] {context}"
    return context


def _question_item(record: QuestionRecord, phase: str, tokens: Mapping[str, str],
                   overlays: Mapping[str, Any], emergency_name: Optional[str] = None) -> QuestionItem:
    overlay = overlays.get(record.id)
    stem = inject_tokens(record.stem, tokens)
    options = tuple(inject_tokens(o, tokens) for o in record.options)
    if overlay:
        stem = inject_tokens(overlay["stem"], tokens)
        options = tuple(inject_tokens(o, tokens) for o in overlay["options"])

    return QuestionItem(
        id=record.id,
        phase=phase,
        stem=stem,
        options=options,
        correct_option=record.correct_option,
        risk_points=clamp_risk_points(record.risk_points, emergency_boost=bool(emergency_name)),
        is_critical=record.is_critical,
        flight_context=_with_emergency_prefix(inject_tokens(record.flight_context, tokens), emergency_name),
        explanation=inject_tokens(record.explanation, tokens),
        section_name=record.section_name,
        has_scenario=overlay is not None,
        is_emergency=bool(emergency_name),
    )


def _bonus_item(card: BonusCard, phase: str, tokens: Mapping[str, str],
                emergency_name: Optional[str] = None) -> QuestionItem:
    return QuestionItem(
        id=card.id,
        phase=phase,
        stem=inject_tokens(card.stem, tokens),
        options=tuple(inject_tokens(o, tokens) for o in card.options),
        correct_option=card.correct_option,
        risk_points=clamp_risk_points(card.risk_points, emergency_boost=bool(emergency_name)),
        is_critical=card.is_critical,
        flight_context=_with_emergency_prefix(inject_tokens(card.flight_context, tokens), emergency_name),
        explanation=inject_tokens(card.explanation, tokens),
        section_name=card.section_name,
        has_scenario=True,
        is_emergency=bool(emergency_name),
        is_bonus=True,
    )


def _candidate_item(candidate, phase: str, tokens: Mapping[str, str],
                    overlays: Mapping[str, Any], emergency_name: Optional[str] = None) -> QuestionItem:
    if isinstance(candidate, BonusCard):
        return _bonus_item(candidate, phase, tokens, emergency_name)
    return _question_item(candidate, phase, tokens, overlays, emergency_name)


def _pick_radio(phase: str, templates: Sequence[Mapping[str, Any]], rng) -> Optional[Mapping[str, Any]]:
    pool = [t for t in templates if t["phase"] == phase]
    if not pool:
        return None
    return choice(rng, pool)


def _radio_item(template: Mapping[str, Any], tokens: Mapping[str, str], item_id: Optional[str] = None) -> RadioItem:
    return RadioItem(
        id=item_id or template["id"],
        phase=template["phase"],
        context=inject_tokens(template["context"], tokens),
        lines=inject_radio_lines(template["lines"], tokens),
    )


def _emergency_items(event: EmergencyEvent, phase: str, tokens: Mapping[str, str]) -> Tuple[EmergencyItem, Optional[RadioItem]]:
    radio_lines = inject_radio_lines(event.radio_lines, tokens)
    announcement = EmergencyItem(
        id=event.id,
        name=event.name,
        phase=phase,
        announcement=inject_tokens(event.announcement, tokens),
        panel_label=event.panel_label,
        panel_sub=event.panel_sub,
        timer_penalty=event.timer_penalty,
        immediate_risk=event.immediate_risk,
        resolution=inject_tokens(event.resolution, tokens),
        radio_lines=radio_lines,
        transition_texts=tuple(inject_tokens(t, tokens) for t in event.transition_texts),
    )
    radio = None
    if radio_lines:
        radio = RadioItem(
            id=f"emergency-radio-{event.id}",
            phase=phase,
            context=f"Emergency communications - {event.name}",
            lines=radio_lines,
        )
    return announcement, radio


# ==========================================
# 规划入口
# ==========================================

def plan_sequence(mission: Optional[str],
                  aircraft: Optional[str],
                  weather_signals: Sequence[str],
                  emergency_events: Optional[Sequence[EmergencyEvent]],
                  catalog,
                  rng,
                  tokens: Optional[Mapping[str, str]] = None,
                  bonus_cards: Optional[Sequence[BonusCard]] = None,
                  radio_templates: Optional[Sequence[Mapping[str, Any]]] = None,
                  overlays: Optional[Mapping[str, Any]] = None) -> HopPlan:
    """
    规划一条航段序列

    Args:
        mission: 任务剖面名（未知时回退到 local）
        aircraft: 机型代码（未知时回退到 C172）
        weather_signals: 天气分类器输出
        emergency_events: 应急事件表（None 使用内置表，空表表示不注入应急）
        catalog: 题库，需提供 get_questions_by_phase / get_questions_by_ids
        rng: 随机源
        tokens: 简报 token（callsign / runway / icao）
        bonus_cards: ROC-A 卡池（None 使用内置卡池）
        radio_templates: 通话模板（None 使用内置模板）
        overlays: 情景改写（None 使用内置改写）

    Returns:
        HopPlan: 规划结果
    """
    mission_name, profile = resolve_mission(mission)
    aircraft_code, aircraft_profile = resolve_aircraft(aircraft)
    tokens = dict(tokens or {})
    events = load_emergency_events() if emergency_events is None else list(emergency_events)
    bonus_pool = load_bonus_cards() if bonus_cards is None else list(bonus_cards)
    templates = RADIO_EXCHANGES if radio_templates is None else radio_templates
    overlays = SCENARIO_OVERLAYS if overlays is None else overlays
    floor = phase_floor(profile)

    # 1. 目标总数
    total_min, total_max = profile["total"]
    target_total = rand_int(rng, total_min, total_max)

    # 2. bonus 卡预留
    planned_bonus = None
    if bonus_pool and chance(rng, BONUS_CARD_PROBABILITY):
        planned_bonus = choice(rng, bonus_pool)

    # 3. 应急事件选择
    risk_score = combined_risk_score(weather_signals, aircraft_profile)
    selected = select_emergency(events, profile, risk_score, rng)
    candidates = []
    if selected:
        candidates = _load_emergency_candidates(selected[1], catalog, bonus_pool, rng)

    # 4. 释放预留直到下限可满足：先应急，再 bonus
    emergency_budget = min(MAX_EMERGENCY_QUESTIONS, len(candidates))
    while target_total - ((1 if planned_bonus else 0) + emergency_budget) < floor:
        if emergency_budget > 0:
            emergency_budget -= 1
        elif planned_bonus:
            planned_bonus = None
        else:
            break

    reserved_ids = set()
    if planned_bonus:
        reserved_ids.add(planned_bonus.id)

    emergency_cards = []
    for candidate in candidates:
        if len(emergency_cards) >= emergency_budget:
            break
        if candidate.id in reserved_ids:
            continue
        emergency_cards.append(candidate)
        reserved_ids.add(candidate.id)

    emergency_phase, emergency_event = (selected if selected and emergency_cards else (None, None))

    reserved = (1 if planned_bonus else 0) + len(emergency_cards)
    phase_counts = rebalance_counts(distribute_cards(target_total - reserved, profile), profile)

    # 5. 逐阶段组装
    items: List[SequenceItem] = []
    used_ids = set()
    bonus_id = planned_bonus.id if planned_bonus else None

    for phase in PHASES:
        preferred = set(get_weather_preferred_ids(phase, weather_signals))

        opening = _pick_radio(phase, templates, rng)
        if opening:
            items.append(_radio_item(opening, tokens))

        pool = shuffle(rng, sorted(catalog.get_questions_by_phase(phase), key=lambda r: id_sort_key(r.id)))
        prioritized = [r for r in pool if r.id in preferred] + [r for r in pool if r.id not in preferred]

        selected_records = []
        for record in prioritized:
            if len(selected_records) >= phase_counts[phase]:
                break
            if record.id in reserved_ids or record.id in used_ids:
                continue
            selected_records.append(record)
            used_ids.add(record.id)

        for i, record in enumerate(selected_records):
            items.append(_question_item(record, phase, tokens, overlays))
            if i < len(selected_records) - 1 and chance(rng, MID_PHASE_RADIO_PROBABILITY):
                mid = _pick_radio(phase, templates, rng)
                if mid:
                    items.append(_radio_item(mid, tokens, f"{mid['id']}-mid-{len(items)}"))

        if emergency_event and phase == emergency_phase:
            announcement, radio = _emergency_items(emergency_event, phase, tokens)
            items.append(announcement)
            if radio:
                items.append(radio)
            for candidate in emergency_cards:
                if candidate.id in used_ids:
                    continue
                items.append(_candidate_item(candidate, phase, tokens, overlays, emergency_event.name))
                used_ids.add(candidate.id)
            items.append(RadioItem(
                id=f"emergency-resolve-{emergency_event.id}",
                phase=phase,
                context=announcement.resolution,
                lines=(),
            ))

        if planned_bonus and phase == planned_bonus.phase:
            if planned_bonus.id not in used_ids:
                items.append(_bonus_item(planned_bonus, phase, tokens))
                used_ids.add(planned_bonus.id)
            planned_bonus = None

    log.debug(
        "[Planner] mission=%s aircraft=%s target=%d counts=%s reserved=%d emergency=%s",
        mission_name, aircraft_code, target_total, phase_counts, reserved,
        emergency_event.id if emergency_event else None
    )

    return HopPlan(
        items=tuple(items),
        mission=mission_name,
        aircraft=aircraft_code,
        target_total=target_total,
        phase_counts=phase_counts,
        reserved=reserved,
        emergency_id=emergency_event.id if emergency_event else None,
        emergency_phase=emergency_phase,
        bonus_id=bonus_id,
    )
