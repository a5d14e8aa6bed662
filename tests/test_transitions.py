from data.flight_transitions import TRANSITIONS
from engines.hop_core.models import PHASES
from engines.hop_core.rng import SeededRng
from engines.hop_core.transitions import pick_transition, phase_bridge, emergency_transition


def test_correct_answer_uses_correct_pool():
    rng = SeededRng(1)
    for _ in range(10):
        assert pick_transition("enroute", True, 2, rng) in TRANSITIONS["enroute"]["correct"]


def test_wrong_answer_below_threshold_uses_wrong_pool():
    assert pick_transition("arrival", False, 1, SeededRng(2)) in TRANSITIONS["arrival"]["wrong"]


def test_wrong_answer_at_high_risk_escalates():
    assert pick_transition("taxi_depart", False, 2, SeededRng(3)) in TRANSITIONS["taxi_depart"]["high_risk"]


def test_every_phase_has_a_bridge():
    for phase in PHASES:
        assert phase_bridge(phase)


def test_emergency_transition_texts(fixed_rng):
    assert emergency_transition(("one", "two"), fixed_rng(0.0)) == "one"
    assert emergency_transition((), fixed_rng(0.0)) is None
