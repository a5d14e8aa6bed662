import threading
from dataclasses import replace

from engines.hop_core.models import (
    QuestionItem,
    RadioItem,
    EmergencyItem,
    RadioLine,
    STATUS_PLAYING,
)
from engines.hop_core.rng import SeededRng
from engines.hop_core.session import start_session, create_briefing, submit_answer
from engines.hop_core.transitions import phase_bridge
from engines.mastery import InMemoryMasteryStore


def _question(qid, phase="enroute", correct=2, critical=False, **kwargs):
    return QuestionItem(id=qid, phase=phase, stem="stem", options=("a", "b", "c", "d"),
                        correct_option=correct, risk_points=1, is_critical=critical, **kwargs)


def _install(logic, session_id, state, brief=None):
    logic.sessions[session_id] = {
        "state": state,
        "brief": brief,
        "plan": None,
        "wx_conditions": ["good_vfr"],
        "mode": {},
        "rng": SeededRng(1),
        "sid": "sid-1",
        "log_file": None,
        "session_start_time": None,
        "clock_running": False,
    }


def test_create_hop_emits_ready_payload(logic, fake_socketio, action_log):
    assert logic.create_hop("s1", "cross-country", "pa28", sid="sid-1")

    ready = fake_socketio.events("hop_ready")
    assert len(ready) == 1
    payload = ready[0]
    assert set(payload) == {"sequence", "brief", "wxConditions", "mode", "state"}
    assert payload["mode"]["mission"] == "cross-country"
    assert payload["mode"]["aircraft"] == "PA28"
    assert payload["mode"]["aircraftLabel"] == "Piper Cherokee"
    assert payload["state"]["status"] == "briefing"
    assert fake_socketio.emitted[0][2] == "sid-1"

    actions = [entry["action"] for entry in action_log]
    assert actions[:2] == ["hop_created", "brief_issued"]


def test_go_no_go_starts_clock_for_vfr(logic, fake_socketio, brief_factory):
    _install(logic, "s1", create_briefing([_question("q1")]), brief=brief_factory("VFR"))
    assert logic.go_no_go("s1", 2, "go")

    assert logic.sessions["s1"]["state"].status == STATUS_PLAYING
    assert fake_socketio.events("hop_state")
    assert len(fake_socketio.background_tasks) == 1

    # 第二次不会重复启动时钟
    logic.start_clock("s1")
    assert len(fake_socketio.background_tasks) == 1


def test_go_no_go_fly_into_ifr_busts(logic, fake_socketio, brief_factory):
    _install(logic, "s1", create_briefing([_question("q1")]), brief=brief_factory("IFR"))
    assert logic.go_no_go("s1", 2, "fly")
    bust = fake_socketio.events("hop_bust")
    assert bust and bust[0]["reason"] == "go_nogo"
    assert fake_socketio.background_tasks == []


def test_answer_result_with_phase_bridge_and_mastery(logic, fake_socketio):
    seq = [_question("1.01", phase="preflight"), _question("2.02", phase="taxi_depart")]
    _install(logic, "s1", start_session(seq))

    assert logic.submit_answer("s1", 2)
    result = fake_socketio.events("answer_result")[0]
    assert result["response"]["isCorrect"] is True
    assert result["transition"]
    assert result["phaseBridge"] == phase_bridge("preflight")
    assert logic.mastery.stats()["1.01"] == {"attempts": 1, "correct": 1}


def test_rejected_answer_returns_false(logic, fake_socketio):
    seq = [RadioItem(id="r1", phase="enroute", context="c", lines=(RadioLine("atc", "x"),)), _question("q1")]
    _install(logic, "s1", start_session(seq))
    assert not logic.submit_answer("s1", 1)
    assert not logic.submit_answer("missing", 1)
    assert fake_socketio.events("answer_result") == []


def test_critical_answer_emits_bust_once(logic, fake_socketio, action_log):
    _install(logic, "s1", start_session([_question("q1", critical=True), _question("q2")]))
    assert logic.submit_answer("s1", 1)
    assert not logic.submit_answer("s1", 2)

    bust = fake_socketio.events("hop_bust")
    assert len(bust) == 1
    assert bust[0]["reason"] == "critical"
    assert bust[0]["debrief"]["busted"]
    assert "bust" in [entry["action"] for entry in action_log]


def test_emergency_answer_uses_event_transition(logic, fake_socketio):
    event = EmergencyItem(id="engine-rough", name="Rough Running Engine", phase="enroute", announcement="a",
                          panel_label="p", panel_sub="s", timer_penalty=120, immediate_risk=1, resolution="r",
                          transition_texts=("Carb heat on.",))
    seq = [event, _question("11.01", is_emergency=True), _question("11.03")]
    _install(logic, "s1", start_session(seq))

    assert logic.acknowledge_emergency("s1")
    assert logic.sessions["s1"]["state"].clock_remaining == 480
    assert logic.submit_answer("s1", 2)
    assert fake_socketio.events("answer_result")[0]["transition"] == "Carb heat on."


def test_tick_expires_svfr_card(logic, fake_socketio):
    _install(logic, "s1", start_session([_question("q1"), _question("q2")], svfr=True))
    for _ in range(9):
        assert logic.tick("s1")
    assert fake_socketio.events("card_expired") == []

    assert logic.tick("s1")
    expired = fake_socketio.events("card_expired")
    assert expired and expired[0]["questionId"] == "q1"
    result = fake_socketio.events("answer_result")[0]
    assert result["response"]["isCorrect"] is False


def test_tick_clock_out_emits_debrief(logic, fake_socketio, action_log):
    state = start_session([_question("q1")])
    state = replace(state, clock_remaining=1)
    _install(logic, "s1", state)

    assert logic.tick("s1") is False
    debrief = fake_socketio.events("hop_debrief")
    assert debrief and debrief[0]["debrief"]["endReason"] == "clock"
    assert "clock_out" in [entry["action"] for entry in action_log]


def test_clock_loop_stops_when_session_removed(logic):
    _install(logic, "s1", start_session([_question("q1")]))
    assert logic.remove_session("s1")
    logic.run_clock_loop("s1")
    assert "s1" not in logic.sessions


def test_pause_and_resume(logic, fake_socketio):
    _install(logic, "s1", start_session([_question("q1")]))
    assert logic.pause("s1")
    assert logic.get_state("s1")["paused"] is True
    assert logic.tick("s1")
    assert logic.get_state("s1")["clockRemaining"] == 600
    assert logic.resume("s1")
    assert logic.get_state("s1")["paused"] is False


def _fly_new_hop(logic, brief):
    assert logic.create_hop("s1", "local", "C172", sid="sid-1")
    logic.sessions["s1"]["brief"] = brief
    assert logic.go_no_go("s1", 2, "go")
    return logic.sessions["s1"]


def test_replaced_hop_retires_previous_clock_loop(logic, fake_socketio, brief_factory):
    first = _fly_new_hop(logic, brief_factory("VFR"))
    second = _fly_new_hop(logic, brief_factory("VFR"))
    assert second is not first
    assert len(fake_socketio.background_tasks) == 2

    # 旧循环醒来后发现航段已被替换，不再推进新航段的时钟
    target, args = fake_socketio.background_tasks[0]
    target(*args)
    assert second["state"].clock_remaining == 600
    assert first["clock_running"] is False
    assert second["clock_running"] is True


def test_clock_loop_runs_its_hop_to_clock_out(logic, fake_socketio, brief_factory):
    hop = _fly_new_hop(logic, brief_factory("VFR"))
    target, args = fake_socketio.background_tasks[0]
    target(*args)

    assert hop["state"].clock_remaining == 0
    assert len(fake_socketio.events("hop_debrief")) == 1
    assert hop["clock_running"] is False


def test_concurrent_finish_emits_once(logic, fake_socketio):
    state = start_session([_question("q1", critical=True)])
    _install(logic, "s1", state)
    logic.sessions["s1"]["state"], _ = submit_answer(state, 1)

    threads = [threading.Thread(target=logic._finish, args=("s1",)) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(fake_socketio.events("hop_bust")) == 1


class _DisconnectingMastery(InMemoryMasteryStore):
    """记录作答时模拟连接断开"""

    def __init__(self, logic):
        super().__init__()
        self.logic = logic

    def record(self, question_id, correct):
        super().record(question_id, correct)
        self.logic.remove_session("s1")


def test_disconnect_during_answer_is_quiet(logic, fake_socketio):
    logic.mastery = _DisconnectingMastery(logic)
    _install(logic, "s1", start_session([_question("q1", critical=True)]))

    assert logic.submit_answer("s1", 1)
    assert logic.mastery.stats()["q1"] == {"attempts": 1, "correct": 0}
    assert fake_socketio.events("answer_result") == []
    assert fake_socketio.events("hop_bust") == []
