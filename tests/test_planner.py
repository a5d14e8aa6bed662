import json

import pytest

from data.catalog import CatalogSnapshot
from data.mission_profiles import MISSION_PROFILES, AIRCRAFT_TYPES
from engines.hop_core.models import PHASES, QuestionItem, RadioItem, EmergencyItem
from engines.hop_core.planner import (
    distribute_cards,
    rebalance_counts,
    resolve_mission,
    resolve_aircraft,
    combined_risk_score,
    emergency_probability,
    select_emergency,
    load_emergency_events,
    plan_sequence,
    phase_floor,
)
from engines.hop_core.rng import SeededRng

TOKENS = {"callsign": "C-GABC", "runway": "30", "icao": "CYOO"}


class ScriptedRng:
    """按顺序返回给定的值，用完即报错"""

    def __init__(self, values):
        self.values = list(values)

    def next(self) -> float:
        return self.values.pop(0)


# ==========================================
# 数量分配
# ==========================================

@pytest.mark.parametrize("mission", sorted(MISSION_PROFILES))
def test_distribute_cards_fills_target_within_bounds(mission):
    profile = MISSION_PROFILES[mission]
    total_min, total_max = profile["total"]
    for target in range(phase_floor(profile), total_max + 1):
        counts = distribute_cards(target, profile)
        assert sum(counts.values()) == target
        for phase in PHASES:
            low, high = profile["bounds"][phase]
            assert low <= counts[phase] <= high


def test_distribute_cards_prefers_enroute_first():
    counts = distribute_cards(7, MISSION_PROFILES["local"])
    assert counts == {"preflight": 1, "taxi_depart": 2, "enroute": 2, "arrival": 2}


def test_distribute_cards_terminates_on_saturated_bounds():
    profile = {"bounds": {phase: (1, 1) for phase in PHASES}}
    assert distribute_cards(100, profile) == {phase: 1 for phase in PHASES}


def test_rebalance_local_shifts_toward_circuit_phases():
    counts = {"preflight": 2, "taxi_depart": 2, "enroute": 2, "arrival": 2}
    result = rebalance_counts(counts, MISSION_PROFILES["local"])
    assert result == {"preflight": 1, "taxi_depart": 3, "enroute": 1, "arrival": 3}
    assert sum(result.values()) == sum(counts.values())


def test_rebalance_skips_without_donor_slack():
    counts = {"preflight": 1, "taxi_depart": 2, "enroute": 1, "arrival": 2}
    assert rebalance_counts(counts, MISSION_PROFILES["local"]) == counts


def test_rebalance_no_shifts_for_short_hop():
    counts = {"preflight": 2, "taxi_depart": 3, "enroute": 3, "arrival": 2}
    assert rebalance_counts(counts, MISSION_PROFILES["short-hop"]) == counts


# ==========================================
# 剖面 / 机型 / 应急概率
# ==========================================

def test_resolve_mission_falls_back_to_local():
    assert resolve_mission("moon-shot")[0] == "local"
    assert resolve_mission(None)[0] == "local"
    assert resolve_mission("Cross-Country")[0] == "cross-country"


def test_resolve_aircraft_is_case_insensitive_with_fallback():
    assert resolve_aircraft("pa28")[0] == "PA28"
    assert resolve_aircraft("B737")[0] == "C172"
    assert resolve_aircraft("")[0] == "C172"


def test_combined_risk_score_is_capped():
    signals = ["thunderstorm", "low_ceiling", "low_vis", "gusty"]
    assert combined_risk_score(signals, AIRCRAFT_TYPES["C150"]) == 3
    assert combined_risk_score(["good_vfr"], AIRCRAFT_TYPES["C172"]) == 0
    assert combined_risk_score(["good_vfr"], AIRCRAFT_TYPES["C150"]) == 1


def test_emergency_probability_grows_with_score():
    assert emergency_probability(0) == pytest.approx(0.08)
    assert emergency_probability(3) == pytest.approx(0.14)


def test_select_emergency_retries_each_phase_for_cross_country():
    # 每个阶段第一次落空；taxi_depart 第二次命中，再挑 door-open，最后在唯一候选中选
    rng = ScriptedRng([0.9, 0.9, 0.9, 0.05, 0.0, 0.9, 0.9, 0.9, 0.9, 0.0])
    picked = select_emergency(load_emergency_events(), MISSION_PROFILES["cross-country"], 0, rng)

    assert picked is not None
    phase, event = picked
    assert phase == "taxi_depart"
    assert event.id == "door-open"
    assert rng.values == []


def test_select_emergency_single_attempt_for_local():
    rng = ScriptedRng([0.9, 0.9, 0.9, 0.9])
    assert select_emergency(load_emergency_events(), MISSION_PROFILES["local"], 0, rng) is None
    assert rng.values == []


@pytest.mark.parametrize("final_roll, expected", [
    (0.0, ("taxi_depart", "door-open")),
    (0.5, ("enroute", "engine-rough")),
    (0.99, ("arrival", "comm-failure")),
])
def test_select_emergency_picks_one_of_several_hit_phases(final_roll, expected):
    # preflight 两次落空；其余三个阶段首次命中并各挑第一个可触发事件
    rng = ScriptedRng([0.9, 0.9, 0.05, 0.0, 0.05, 0.0, 0.05, 0.0, final_roll])
    phase, event = select_emergency(load_emergency_events(), MISSION_PROFILES["cross-country"], 0, rng)
    assert (phase, event.id) == expected
    assert rng.values == []


# ==========================================
# 规划结果
# ==========================================

def test_plan_is_deterministic_for_fixed_seed(snapshot):
    first = plan_sequence("local", "C172", ["good_vfr"], None, snapshot, SeededRng(42), tokens=TOKENS)
    second = plan_sequence("local", "C172", ["good_vfr"], None, snapshot, SeededRng(42), tokens=TOKENS)
    assert first.items == second.items
    assert first.phase_counts == second.phase_counts


@pytest.mark.parametrize("mission", sorted(MISSION_PROFILES))
def test_plan_invariants_across_seeds(mission, snapshot):
    profile = MISSION_PROFILES[mission]
    for seed in range(40):
        plan = plan_sequence(mission, "C150", ["low_ceiling", "gusty"], None, snapshot, SeededRng(seed), tokens=TOKENS)

        ids = plan.question_ids()
        assert len(ids) == len(set(ids))

        assert sum(plan.phase_counts.values()) == plan.target_total - plan.reserved
        for phase in PHASES:
            low, high = profile["bounds"][phase]
            assert low <= plan.phase_counts[phase] <= high

        # 静态题库足够大，不会出现供给不足
        assert len(ids) == plan.target_total

        order = [PHASES.index(item.phase) for item in plan.items]
        assert order == sorted(order)


def test_each_phase_opens_with_radio(snapshot):
    plan = plan_sequence("practice", "C172", ["good_vfr"], None, snapshot, SeededRng(3), tokens=TOKENS)
    seen = set()
    for item in plan.items:
        if item.phase not in seen:
            seen.add(item.phase)
            assert isinstance(item, RadioItem)
    assert seen == set(PHASES)


def test_tokens_are_substituted_everywhere(snapshot):
    for seed in range(20):
        plan = plan_sequence("cross-country", "C172", ["thunderstorm"], None, snapshot, SeededRng(seed), tokens=TOKENS)
        text = json.dumps([item.to_dict() for item in plan.items])
        assert "{callsign}" not in text
        assert "{runway}" not in text
        assert "{icao}" not in text


def test_no_optional_content_when_every_roll_misses(snapshot, fixed_rng):
    plan = plan_sequence("local", "C172", ["good_vfr"], None, snapshot, fixed_rng(0.999), tokens=TOKENS)

    assert plan.target_total == MISSION_PROFILES["local"]["total"][1]
    assert plan.reserved == 0
    assert plan.emergency_id is None
    assert plan.bonus_id is None
    assert not any(isinstance(item, EmergencyItem) for item in plan.items)
    # 没有中途通话：每个阶段只有开场的一条
    assert len([item for item in plan.items if isinstance(item, RadioItem)]) == len(PHASES)


def test_weather_preferred_questions_come_first(snapshot, fixed_rng):
    plan = plan_sequence("local", "C172", ["low_ceiling"], None, snapshot, fixed_rng(0.999), tokens=TOKENS)
    preferred = {"6.08", "6.09", "6.10", "13.06", "13.07", "13.08"}
    arrival = [item.id for item in plan.items if isinstance(item, QuestionItem) and item.phase == "arrival"]
    assert arrival
    assert set(arrival) <= preferred


def test_reservations_released_when_floor_is_tight(snapshot, fixed_rng):
    # local 的总数下限等于各阶段下限之和，预留全部释放
    plan = plan_sequence("local", "C172", ["good_vfr"], None, snapshot, fixed_rng(0.0), tokens=TOKENS)
    assert plan.target_total == 6
    assert plan.reserved == 0
    assert plan.emergency_id is None
    assert plan.bonus_id is None


def test_emergency_block_and_bonus_placement(snapshot, fixed_rng):
    plan = plan_sequence("cross-country", "C172", ["good_vfr"], None, snapshot, fixed_rng(0.0), tokens=TOKENS)

    assert plan.target_total == 12
    assert plan.emergency_id == "door-open"
    assert plan.emergency_phase == "taxi_depart"
    assert plan.bonus_id == "roc-mayday-message-order"
    assert plan.reserved == 2
    assert sum(plan.phase_counts.values()) == 10

    items = list(plan.items)
    start = next(i for i, item in enumerate(items) if isinstance(item, EmergencyItem))
    announcement = items[start]
    assert announcement.phase == "taxi_depart"
    assert announcement.timer_penalty == 60

    radio = items[start + 1]
    assert isinstance(radio, RadioItem)
    assert radio.id == "emergency-radio-door-open"
    assert radio.context == "Emergency communications - Door Open on Take-off"
    assert "CYOO" in radio.lines[0].text

    card = items[start + 2]
    assert isinstance(card, QuestionItem)
    assert card.is_emergency
    assert card.flight_context.startswith("[DOOR OPEN ON TAKE-OFF] ")
    source = snapshot.get_questions_by_ids([card.id])[0]
    assert card.risk_points == min(source.risk_points + 1, 3)

    resolve = items[start + 3]
    assert isinstance(resolve, RadioItem)
    assert resolve.id == "emergency-resolve-door-open"
    assert resolve.lines == ()

    # 应急块之后就是下一个阶段
    assert items[start + 4].phase == "enroute"

    bonus = [item for item in items if isinstance(item, QuestionItem) and item.is_bonus]
    assert len(bonus) == 1
    assert bonus[0].id == "roc-mayday-message-order"
    assert bonus[0].phase == "enroute"
    # bonus 卡在所属阶段的最后
    last_enroute = [item for item in items if item.phase == "enroute"][-1]
    assert last_enroute is bonus[0]


def test_empty_emergency_table_disables_emergencies(snapshot, fixed_rng):
    plan = plan_sequence("cross-country", "C172", ["good_vfr"], [], snapshot, fixed_rng(0.0), tokens=TOKENS)
    assert plan.emergency_id is None
    assert not any(isinstance(item, EmergencyItem) for item in plan.items)


def test_under_supplied_catalog_is_not_an_error(snapshot):
    tiny = CatalogSnapshot(snapshot.get_questions_by_ids(["1.01", "1.02", "6.08"]))
    plan = plan_sequence("cross-country", "C172", ["good_vfr"], [], tiny, SeededRng(5), tokens=TOKENS,
                         bonus_cards=[])
    ids = plan.question_ids()
    assert set(ids) <= {"1.01", "1.02", "6.08"}
    assert len(ids) == len(set(ids))


def test_scenario_overlay_keeps_correct_option(snapshot):
    overlays = {"5.01": {"stem": "{callsign} document check", "options": ["w", "x", "y", "z"]}}
    records = snapshot.get_questions_by_ids(["5.01"])
    tiny = CatalogSnapshot(records)
    plan = plan_sequence("local", "C172", ["good_vfr"], [], tiny, SeededRng(1), tokens=TOKENS,
                         bonus_cards=[], overlays=overlays)
    card = next(item for item in plan.items if isinstance(item, QuestionItem))
    assert card.has_scenario
    assert card.stem == "C-GABC document check"
    assert card.options == ("w", "x", "y", "z")
    assert card.correct_option == records[0].correct_option
