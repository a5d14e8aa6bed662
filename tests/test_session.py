import pytest

from engines.hop_core.models import (
    MAX_RISK,
    HOP_TIMEOUT_SECONDS,
    SVFR_CARD_TIMER_SECONDS,
    STATUS_BRIEFING,
    STATUS_PLAYING,
    STATUS_BUSTED,
    STATUS_DEBRIEF,
    SessionClosedError,
    InvalidTransitionError,
    QuestionItem,
    RadioItem,
    EmergencyItem,
    RadioLine,
    SessionState,
)
from engines.hop_core.session import (
    apply_answer,
    create_briefing,
    start_session,
    submit_answer,
    card_expired,
    expire_card,
    acknowledge_emergency,
    advance,
    tick,
    pause_session,
    resume_session,
    current_item,
    resolve_go_no_go,
    debrief_summary,
)


def question(qid, phase="enroute", correct=2, critical=False, risk=1, **kwargs):
    return QuestionItem(
        id=qid, phase=phase, stem=f"stem {qid}", options=("a", "b", "c", "d"),
        correct_option=correct, risk_points=risk, is_critical=critical, **kwargs
    )


def radio(rid, phase="enroute", lines=(RadioLine("atc", "hello"),)):
    return RadioItem(id=rid, phase=phase, context="context", lines=lines)


def emergency(eid="engine-rough", penalty=120, immediate=1, phase="enroute"):
    return EmergencyItem(
        id=eid, name="Rough Running Engine", phase=phase, announcement="rough", panel_label="EMERGENCY",
        panel_sub="act", timer_penalty=penalty, immediate_risk=immediate, resolution="smooth again",
        transition_texts=("keep flying",),
    )


def wrong_trace(start_risk, answers):
    state = SessionState(sequence=(), risk=start_risk, status=STATUS_PLAYING)
    trace = []
    for is_correct in answers:
        outcome = apply_answer(state, is_correct, False, 1)
        trace.append((outcome.new_risk, outcome.busted))
        state = SessionState(sequence=(), risk=outcome.new_risk, status=STATUS_PLAYING)
    return trace


# ==========================================
# 风险规则
# ==========================================

def test_three_wrong_answers_bust_on_the_third():
    assert wrong_trace(0, [False, False, False]) == [(1, False), (2, False), (3, True)]


def test_two_wrong_then_correct_does_not_bust():
    assert wrong_trace(0, [False, False, True]) == [(1, False), (2, False), (2, False)]


@pytest.mark.parametrize("prior", [0, 1, 2])
def test_critical_wrong_answer_busts_regardless_of_prior_risk(prior):
    state = SessionState(sequence=(), risk=prior, status=STATUS_PLAYING)
    outcome = apply_answer(state, False, True, 1)
    assert outcome.busted
    assert outcome.new_risk == MAX_RISK


def test_risk_weight_does_not_scale_increment():
    state = SessionState(sequence=(), risk=0, status=STATUS_PLAYING)
    assert apply_answer(state, False, False, 3).new_risk == 1


def test_correct_answer_never_busts():
    state = SessionState(sequence=(), risk=2, status=STATUS_PLAYING)
    outcome = apply_answer(state, True, True, 3)
    assert outcome.new_risk == 2
    assert not outcome.busted


# ==========================================
# 作答 / 推进
# ==========================================

def test_answers_walk_the_sequence_to_debrief():
    state = start_session([radio("r1"), question("q1"), question("q2", correct=3)])
    assert state.status == STATUS_PLAYING
    assert isinstance(current_item(state), RadioItem)

    state = advance(state)
    state, first = submit_answer(state, 2)
    assert first.is_correct
    assert first.risk_before == first.risk_after == 0

    state, second = submit_answer(state, 1)
    assert not second.is_correct
    assert second.risk_after == 1
    assert state.status == STATUS_DEBRIEF
    assert state.end_reason == "completed"
    assert current_item(state) is None


def test_answering_a_radio_item_is_rejected():
    state = start_session([radio("r1"), question("q1")])
    with pytest.raises(InvalidTransitionError):
        submit_answer(state, 1)


def test_advancing_a_question_is_rejected():
    state = start_session([question("q1")])
    with pytest.raises(InvalidTransitionError):
        advance(state)


def test_option_out_of_range_is_rejected():
    state = start_session([question("q1")])
    with pytest.raises(InvalidTransitionError):
        submit_answer(state, 5)


def test_bust_is_terminal():
    state = start_session([question("q1", critical=True), question("q2")])
    state, response = submit_answer(state, 1)
    assert response.was_bust
    assert state.status == STATUS_BUSTED
    assert state.end_reason == "critical"
    assert state.risk == MAX_RISK
    with pytest.raises(SessionClosedError):
        submit_answer(state, 2)
    with pytest.raises(SessionClosedError):
        advance(state)


def test_accumulated_risk_bust_reason():
    state = start_session([question("q1"), question("q2"), question("q3"), question("q4")], starting_risk=1)
    state, _ = submit_answer(state, 1)
    state, response = submit_answer(state, 1)
    assert response.was_bust
    assert state.end_reason == "risk"


def test_risk_never_decreases_across_a_session():
    seq = [question(f"q{i}", correct=(i % 4) + 1) for i in range(8)]
    state = start_session(seq)
    risks = [state.risk]
    for i in range(8):
        if state.is_terminal:
            break
        state, _ = submit_answer(state, 1)
        risks.append(state.risk)
    assert risks == sorted(risks)


def test_answers_are_rejected_while_paused():
    state = pause_session(start_session([question("q1")]))
    with pytest.raises(InvalidTransitionError):
        submit_answer(state, 2)
    state = resume_session(state)
    state, response = submit_answer(state, 2)
    assert response.is_correct


# ==========================================
# 时钟
# ==========================================

def test_tick_counts_down_only_while_flying():
    briefing = create_briefing([question("q1")])
    assert tick(briefing).clock_remaining == HOP_TIMEOUT_SECONDS

    state = start_session([question("q1")])
    state = tick(state, 5)
    assert state.clock_remaining == HOP_TIMEOUT_SECONDS - 5

    paused = pause_session(state)
    assert tick(paused, 30).clock_remaining == state.clock_remaining


def test_clock_out_forces_debrief_with_items_remaining():
    state = start_session([question("q1"), question("q2")])
    state = tick(state, HOP_TIMEOUT_SECONDS - 1)
    assert state.status == STATUS_PLAYING
    state = tick(state)
    assert state.clock_remaining == 0
    assert state.status == STATUS_DEBRIEF
    assert state.end_reason == "clock"
    assert state.index == 0


# ==========================================
# 应急
# ==========================================

def test_acknowledge_emergency_applies_penalty_and_risk_once():
    seq = [emergency(), radio("emergency-radio-engine-rough"), question("q1"),
           radio("emergency-resolve-engine-rough", lines=()), question("q2")]
    state = start_session(seq)
    state = acknowledge_emergency(state)

    assert state.clock_remaining == HOP_TIMEOUT_SECONDS - 120
    assert state.risk == 1
    assert state.active_emergency == "engine-rough"
    assert state.index == 1

    state = advance(state)
    state, _ = submit_answer(state, 2)
    assert state.active_emergency == "engine-rough"
    state = advance(state)
    assert state.active_emergency is None
    assert isinstance(current_item(state), QuestionItem)


def test_emergency_penalty_is_floored_at_sixty_seconds():
    state = start_session([emergency(penalty=150), question("q1")])
    state = tick(state, HOP_TIMEOUT_SECONDS - 100)
    state = acknowledge_emergency(state)
    assert state.clock_remaining == 60


def test_emergency_penalty_never_adds_time():
    state = start_session([emergency(penalty=150), question("q1")])
    state = tick(state, HOP_TIMEOUT_SECONDS - 45)
    state = acknowledge_emergency(state)
    assert state.clock_remaining == 45


def test_emergency_risk_is_clamped_without_bust():
    state = start_session([emergency(immediate=2), question("q1")], starting_risk=2)
    state = acknowledge_emergency(state)
    assert state.risk == MAX_RISK
    assert state.status == STATUS_PLAYING


def test_acknowledge_requires_an_emergency_item():
    state = start_session([question("q1")])
    with pytest.raises(InvalidTransitionError):
        acknowledge_emergency(state)


# ==========================================
# SVFR 单卡倒计时
# ==========================================

def test_svfr_card_countdown_expires_as_wrong_answer():
    state = start_session([question("q1", correct=1), question("q2")], svfr=True)
    assert state.card_remaining == SVFR_CARD_TIMER_SECONDS

    state = tick(state, SVFR_CARD_TIMER_SECONDS - 1)
    assert not card_expired(state)
    state = tick(state)
    assert card_expired(state)

    state, response = expire_card(state)
    assert not response.is_correct
    assert response.selected_option == 2
    assert state.risk == 1
    assert state.card_remaining == SVFR_CARD_TIMER_SECONDS


def test_svfr_expiry_on_critical_card_busts():
    state = start_session([question("q1", critical=True)], svfr=True)
    state = tick(state, SVFR_CARD_TIMER_SECONDS)
    state, response = expire_card(state)
    assert response.was_bust
    assert state.status == STATUS_BUSTED


def test_radio_cards_have_no_countdown():
    state = start_session([radio("r1"), question("q1")], svfr=True)
    assert state.card_remaining is None
    state = advance(state)
    assert state.card_remaining == SVFR_CARD_TIMER_SECONDS


# ==========================================
# 起飞决策
# ==========================================

def test_vfr_go_starts_flight(brief_factory):
    briefing = create_briefing([question("q1")])
    state = resolve_go_no_go(briefing, brief_factory("VFR"), 2, "go")
    assert state.status == STATUS_PLAYING
    assert state.risk == 0
    assert state.responses[0].question_id == "wx-decode"
    assert state.responses[0].is_correct


def test_vfr_wrong_decode_starts_with_risk(brief_factory):
    state = resolve_go_no_go(create_briefing([question("q1")]), brief_factory("MVFR"), 1, "go")
    assert state.status == STATUS_PLAYING
    assert state.risk == 1


def test_ifr_cancel_goes_to_debrief(brief_factory):
    state = resolve_go_no_go(create_briefing([question("q1")]), brief_factory("IFR"), 2, "cancel")
    assert state.status == STATUS_DEBRIEF
    assert state.end_reason == "cancelled"
    go = [r for r in state.responses if r.question_id == "go-nogo"]
    assert go and go[0].is_correct


def test_ifr_svfr_with_tower_flies_special_vfr(brief_factory):
    state = resolve_go_no_go(create_briefing([question("q1")]), brief_factory("IFR", has_atc=True), 2, "svfr")
    assert state.status == STATUS_PLAYING
    assert state.svfr
    assert state.risk == 2
    assert state.card_remaining == SVFR_CARD_TIMER_SECONDS
    assert state.responses[0].risk_after == 2


def test_ifr_svfr_with_wrong_decode_starts_at_max_risk(brief_factory):
    state = resolve_go_no_go(create_briefing([question("q1")]), brief_factory("LIFR", has_atc=True), 1, "svfr")
    assert state.status == STATUS_PLAYING
    assert state.risk == 3
    decode = state.responses[0]
    assert (decode.risk_before, decode.risk_after) == (0, 3)
    assert not decode.was_bust


def test_ifr_svfr_without_tower_is_treated_as_fly(brief_factory):
    state = resolve_go_no_go(create_briefing([question("q1")]), brief_factory("IFR", has_atc=False), 2, "svfr")
    assert state.status == STATUS_BUSTED
    assert state.end_reason == "go_nogo"


def test_ifr_fly_busts(brief_factory):
    state = resolve_go_no_go(create_briefing([question("q1")]), brief_factory("LIFR"), 2, "fly")
    assert state.status == STATUS_BUSTED
    assert state.risk == MAX_RISK
    go = [r for r in state.responses if r.question_id == "go-nogo"]
    assert go and not go[0].is_correct


def test_go_no_go_only_once(brief_factory):
    state = resolve_go_no_go(create_briefing([question("q1")]), brief_factory("VFR"), 2, "go")
    with pytest.raises(InvalidTransitionError):
        resolve_go_no_go(state, brief_factory("VFR"), 2, "go")


def test_unknown_decision_rejected(brief_factory):
    with pytest.raises(InvalidTransitionError):
        resolve_go_no_go(create_briefing([question("q1")]), brief_factory("VFR"), 2, "maybe")


# ==========================================
# 讲评
# ==========================================

def test_debrief_summary_breaks_down_by_phase():
    seq = [question("q1", phase="preflight"), question("q2", phase="enroute"), question("q3", phase="enroute")]
    state = start_session(seq)
    state, _ = submit_answer(state, 2)
    state, _ = submit_answer(state, 1)
    state = tick(state, 30)
    state, _ = submit_answer(state, 2)

    summary = debrief_summary(state)
    assert summary["total"] == 3
    assert summary["correct"] == 2
    assert summary["score"] == 67
    assert summary["byPhase"]["preflight"] == {"total": 1, "correct": 1}
    assert summary["byPhase"]["enroute"] == {"total": 2, "correct": 1}
    assert summary["endReason"] is None
    assert summary["elapsedSeconds"] == 30
    assert not summary["busted"]


def test_debrief_summary_reports_bust_phase():
    state = start_session([question("q1", phase="taxi_depart", critical=True)])
    state, _ = submit_answer(state, 1)
    summary = debrief_summary(state)
    assert summary["busted"]
    assert summary["bustPhase"] == "taxi_depart"
    assert summary["endReason"] == "critical"
