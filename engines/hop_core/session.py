#!/usr/bin/env python3
"""
航段会话状态机

风险 / bust 规则、会话时钟、SVFR 单卡倒计时、应急确认和起飞决策
所有函数都是纯函数：接收 SessionState，返回新的 SessionState，不做任何 I/O
"""
from dataclasses import replace
from typing import Dict, Any, Optional, Sequence, Tuple

from .models import (
    PHASES,
    MAX_RISK,
    HOP_TIMEOUT_SECONDS,
    SVFR_CARD_TIMER_SECONDS,
    MIN_CLOCK_AFTER_PENALTY,
    STATUS_BRIEFING,
    STATUS_PLAYING,
    STATUS_BUSTED,
    STATUS_DEBRIEF,
    SessionClosedError,
    InvalidTransitionError,
    AnswerOutcome,
    Response,
    SessionState,
    SequenceItem,
    QuestionItem,
    RadioItem,
    EmergencyItem,
    FlightBrief,
)

# 起飞决策选项（与简报决策题的选项顺序一致）
GO_NO_GO_OPTIONS = {"go": 1, "cancel": 2, "svfr": 3, "fly": 4}
VFR_CATEGORIES = ("VFR", "MVFR")

WX_DECODE_ID = "wx-decode"
GO_NO_GO_ID = "go-nogo"


# ==========================================
# 风险规则
# ==========================================

def apply_answer(state: SessionState, is_correct: bool, is_critical: bool, risk_weight: int) -> AnswerOutcome:
    """
    一次作答对风险的影响

    答对不变；答错关键题直接到 MAX_RISK 并 bust；
    答错普通题 +1（与 risk_weight 无关），达到 MAX_RISK 时 bust

    Args:
        state: 当前会话状态
        is_correct: 是否答对
        is_critical: 是否关键题
        risk_weight: 题目风险权重（只用于展示）

    Returns:
        AnswerOutcome: (new_risk, busted)
    """
    if is_correct:
        return AnswerOutcome(new_risk=state.risk, busted=False)
    if is_critical:
        return AnswerOutcome(new_risk=MAX_RISK, busted=True)
    new_risk = min(state.risk + 1, MAX_RISK)
    return AnswerOutcome(new_risk=new_risk, busted=new_risk >= MAX_RISK)


# ==========================================
# 会话创建与推进
# ==========================================

def create_briefing(sequence: Sequence[SequenceItem]) -> SessionState:
    """简报阶段的初始状态（时钟未启动）"""
    return SessionState(sequence=tuple(sequence), status=STATUS_BRIEFING)


def _enter_index(state: SessionState, index: int) -> SessionState:
    """移动到指定卡片；越过末尾进入 debrief"""
    if index >= len(state.sequence):
        return replace(state, index=len(state.sequence), status=STATUS_DEBRIEF,
                       end_reason="completed", card_remaining=None)
    item = state.sequence[index]
    card_remaining = None
    if state.svfr and isinstance(item, QuestionItem):
        card_remaining = SVFR_CARD_TIMER_SECONDS
    return replace(state, index=index, card_remaining=card_remaining)


def start_session(sequence: Sequence[SequenceItem], starting_risk: int = 0, svfr: bool = False) -> SessionState:
    """
    开始飞行

    Args:
        sequence: 规划好的卡片序列
        starting_risk: 起飞决策带来的初始风险
        svfr: 是否 Special-VFR 模式（每道题单独倒计时）

    Returns:
        SessionState: playing 状态
    """
    state = SessionState(
        sequence=tuple(sequence),
        risk=min(max(starting_risk, 0), MAX_RISK),
        clock_remaining=HOP_TIMEOUT_SECONDS,
        svfr=svfr,
        status=STATUS_PLAYING,
    )
    return _enter_index(state, 0)


def current_item(state: SessionState) -> Optional[SequenceItem]:
    if 0 <= state.index < len(state.sequence):
        return state.sequence[state.index]
    return None


def _require_active(state: SessionState):
    if state.is_terminal:
        raise SessionClosedError(f"session already ended ({state.status})")
    if state.status != STATUS_PLAYING:
        raise InvalidTransitionError(f"session not in flight ({state.status})")


def submit_answer(state: SessionState, option: int) -> Tuple[SessionState, Response]:
    """
    对当前题目卡作答

    Args:
        state: 当前会话状态
        option: 选项 1-4

    Returns:
        Tuple[SessionState, Response]: 新状态和作答记录

    Raises:
        SessionClosedError: 会话已结束
        InvalidTransitionError: 暂停中、当前不是题目卡或选项越界
    """
    _require_active(state)
    if state.paused:
        raise InvalidTransitionError("session is paused")

    item = current_item(state)
    if not isinstance(item, QuestionItem):
        raise InvalidTransitionError(f"current item is not a question ({getattr(item, 'kind', None)})")
    if option not in (1, 2, 3, 4):
        raise InvalidTransitionError(f"option out of range: {option}")

    is_correct = option == item.correct_option
    outcome = apply_answer(state, is_correct, item.is_critical, item.risk_points)
    response = Response(
        question_id=item.id,
        selected_option=option,
        is_correct=is_correct,
        risk_before=state.risk,
        risk_after=outcome.new_risk,
        was_bust=outcome.busted,
        phase=item.phase,
    )
    state = replace(state, risk=outcome.new_risk, responses=state.responses + (response,))

    if outcome.busted:
        reason = "critical" if item.is_critical else "risk"
        return replace(state, status=STATUS_BUSTED, end_reason=reason, card_remaining=None), response

    return _enter_index(state, state.index + 1), response


def card_expired(state: SessionState) -> bool:
    """SVFR 单卡倒计时是否已到"""
    return (state.status == STATUS_PLAYING and state.card_remaining is not None
            and state.card_remaining <= 0)


def expire_card(state: SessionState) -> Tuple[SessionState, Response]:
    """
    单卡倒计时到期：按一个必错选项作答

    与主动答错的后果完全相同（关键题同样直接 bust）
    """
    item = current_item(state)
    if not isinstance(item, QuestionItem):
        raise InvalidTransitionError("no question card to expire")
    wrong_option = 2 if item.correct_option == 1 else 1
    return submit_answer(state, wrong_option)


def acknowledge_emergency(state: SessionState) -> SessionState:
    """
    确认应急公告卡

    时钟扣减 timer_penalty，但不会低于 60 秒（已低于 60 秒时保持不变）；
    风险增加 immediate_risk 并封顶，应急本身不会导致 bust；每个事件只生效一次
    """
    _require_active(state)
    item = current_item(state)
    if not isinstance(item, EmergencyItem):
        raise InvalidTransitionError("current item is not an emergency")

    clock = state.clock_remaining
    risk = state.risk
    if item.id not in state.acknowledged:
        clock = max(clock - item.timer_penalty, min(clock, MIN_CLOCK_AFTER_PENALTY))
        risk = min(risk + item.immediate_risk, MAX_RISK)

    state = replace(
        state,
        clock_remaining=clock,
        risk=risk,
        active_emergency=item.id,
        acknowledged=state.acknowledged | {item.id},
    )
    return _enter_index(state, state.index + 1)


def advance(state: SessionState) -> SessionState:
    """通话卡 / 叙事卡继续；离开应急处置卡时清除 active_emergency"""
    _require_active(state)
    item = current_item(state)
    if not isinstance(item, RadioItem):
        raise InvalidTransitionError("only radio items can be advanced")
    if item.id.startswith("emergency-resolve-"):
        state = replace(state, active_emergency=None)
    return _enter_index(state, state.index + 1)


def tick(state: SessionState, seconds: int = 1) -> SessionState:
    """
    时钟推进

    只在飞行中且未暂停时计时；总时钟到 0 立即进入 debrief
    """
    if state.status != STATUS_PLAYING or state.paused:
        return state

    clock = max(state.clock_remaining - seconds, 0)
    card_remaining = state.card_remaining
    if card_remaining is not None:
        card_remaining = max(card_remaining - seconds, 0)

    state = replace(state, clock_remaining=clock, card_remaining=card_remaining)
    if clock <= 0:
        return replace(state, status=STATUS_DEBRIEF, end_reason="clock", card_remaining=None)
    return state


def pause_session(state: SessionState) -> SessionState:
    if state.status != STATUS_PLAYING:
        return state
    return replace(state, paused=True)


def resume_session(state: SessionState) -> SessionState:
    if state.status != STATUS_PLAYING:
        return state
    return replace(state, paused=False)


# ==========================================
# 起飞决策
# ==========================================

def resolve_go_no_go(state: SessionState, brief: FlightBrief, wx_option: int, decision: str) -> SessionState:
    """
    METAR 解码题 + 起飞决策

    VFR / MVFR：直接起飞，解码答错时初始风险 1
    IFR / LIFR：
        cancel -> debrief（go-nogo 记为正确）
        svfr   -> 有塔台时以 SVFR 模式起飞，风险 2（解码错误为 3）；无塔台视同 fly
        fly    -> bust，风险 3（go-nogo 记为错误）

    Args:
        state: 简报阶段状态
        brief: 本次简报
        wx_option: 解码题选项 1-4
        decision: go / cancel / svfr / fly

    Returns:
        SessionState: 新状态
    """
    if state.is_terminal:
        raise SessionClosedError("session already ended")
    if state.status != STATUS_BRIEFING:
        raise InvalidTransitionError("go/no-go already resolved")

    decision = (decision or "").strip().lower()
    if decision not in GO_NO_GO_OPTIONS:
        raise InvalidTransitionError(f"unknown decision: {decision}")

    wx_question = brief.metar.wx_question
    wx_correct = wx_option == wx_question.correct_option
    wx_response = Response(
        question_id=WX_DECODE_ID,
        selected_option=wx_option,
        is_correct=wx_correct,
        risk_before=0,
        risk_after=0 if wx_correct else 1,
        was_bust=False,
        phase="preflight",
    )
    responses = (wx_response,)
    category = brief.metar.decoded.flight_category.upper()

    if category in VFR_CATEGORIES:
        started = start_session(state.sequence, starting_risk=0 if wx_correct else 1)
        return replace(started, responses=responses + started.responses)

    if decision == "svfr" and not brief.airport.has_atc:
        decision = "fly"

    if decision == "cancel":
        go_response = Response(GO_NO_GO_ID, GO_NO_GO_OPTIONS["cancel"], True, 0, 0, False, "preflight")
        return replace(state, responses=responses + (go_response,), status=STATUS_DEBRIEF,
                       end_reason="cancelled")

    if decision == "svfr":
        starting = 2 if wx_correct else 3
        started = start_session(state.sequence, starting_risk=starting, svfr=True)
        # SVFR 起飞风险记在解码作答上，风险轨迹从这里连续
        return replace(started, responses=(replace(wx_response, risk_after=starting),))

    # 低于 VFR 标准仍按目视起飞
    go_response = Response(GO_NO_GO_ID, GO_NO_GO_OPTIONS[decision], False, 0, MAX_RISK, True, "preflight")
    return replace(state, risk=MAX_RISK, responses=responses + (go_response,), status=STATUS_BUSTED,
                   end_reason="go_nogo")


# ==========================================
# 讲评
# ==========================================

def debrief_summary(state: SessionState) -> Dict[str, Any]:
    """
    讲评汇总

    Returns:
        dict: total / correct / score / byPhase / bustPhase / endReason / elapsedSeconds
    """
    answered = [r for r in state.responses if r.question_id not in (WX_DECODE_ID, GO_NO_GO_ID)]
    correct = sum(1 for r in answered if r.is_correct)

    by_phase = {}
    for phase in PHASES:
        phase_responses = [r for r in answered if r.phase == phase]
        by_phase[phase] = {
            "total": len(phase_responses),
            "correct": sum(1 for r in phase_responses if r.is_correct),
        }

    bust_phase = None
    if state.is_busted:
        busted = [r for r in state.responses if r.was_bust]
        bust_phase = busted[-1].phase if busted else None

    reason = state.end_reason if state.end_reason in ("critical", "risk", "clock", "go_nogo") else None
    questions_total = len([item for item in state.sequence if isinstance(item, QuestionItem)])

    return {
        "total": len(answered),
        "questionsPlanned": questions_total,
        "correct": correct,
        "score": round(correct / len(answered) * 100) if answered else 0,
        "finalRisk": state.risk,
        "busted": state.is_busted,
        "bustPhase": bust_phase,
        "endReason": reason,
        "byPhase": by_phase,
        "elapsedSeconds": HOP_TIMEOUT_SECONDS - state.clock_remaining,
        "wxDecodeCorrect": next((r.is_correct for r in state.responses if r.question_id == WX_DECODE_ID), None),
    }
