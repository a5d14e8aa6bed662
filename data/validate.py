#!/usr/bin/env python3
"""
题库完整性检查

服务启动前对整个题库和所有静态表做一次检查：
缺答案、重复 ID、悬空引用都属于数据缺陷，发现即拒绝启动

单独运行：python -m data.validate
"""
from collections import Counter
from typing import List, Optional

from engines.hop_core.models import PHASES
from data.pstar_questions import QUESTIONS, ANSWER_KEY
from data.pstar_scenarios import SCENARIO_OVERLAYS
from data.roc_a_cards import ROC_A_CARDS
from data.radio_exchanges import RADIO_EXCHANGES
from data.emergency_events import EMERGENCY_EVENTS
from data.weather_bias import WEATHER_BIAS
from data.mission_profiles import MISSION_PROFILES


class CatalogIntegrityError(Exception):
    """题库数据缺陷（携带全部错误）"""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} catalog defect(s): " + "; ".join(self.errors[:5]))


def _duplicates(ids) -> List[str]:
    return sorted(i for i, n in Counter(ids).items() if n > 1)


def _check_questions(catalog, errors: List[str]):
    static_ids = [q["id"] for q in QUESTIONS]
    for qid in _duplicates(static_ids):
        errors.append(f"duplicate question id {qid}")
    for qid in static_ids:
        if qid not in ANSWER_KEY:
            errors.append(f"question {qid} has no answer key entry")
    for qid in sorted(set(ANSWER_KEY) - set(static_ids)):
        errors.append(f"answer key entry {qid} has no question")

    for q in catalog.all_questions():
        if q.correct_option not in (1, 2, 3, 4):
            errors.append(f"question {q.id} has invalid correct option {q.correct_option}")
        if q.phase not in PHASES:
            errors.append(f"question {q.id} has invalid phase {q.phase}")
        if not 1 <= q.risk_points <= 3:
            errors.append(f"question {q.id} has invalid risk points {q.risk_points}")
        if len(q.options) != 4 or not all(q.options):
            errors.append(f"question {q.id} must have four non-empty options")


def _check_references(catalog, question_ids: set, errors: List[str]):
    documents = catalog.documents()
    if not documents:
        errors.append("no document metadata")
    for doc_id, meta in documents.items():
        if not meta.get("title"):
            errors.append(f"document {doc_id} has no title")

    referenced = set()
    for ref in catalog.all_references():
        referenced.add(ref.question_id)
        if ref.question_id not in question_ids:
            errors.append(f"reference {ref.doc_id} {ref.locator} points to unknown question {ref.question_id}")
        if ref.doc_id not in documents:
            errors.append(f"reference for {ref.question_id} cites unknown document {ref.doc_id}")
    for qid in sorted(question_ids - referenced):
        errors.append(f"question {qid} has no reference")


def _check_static_tables(question_ids: set, errors: List[str]):
    bonus_ids = [c["id"] for c in ROC_A_CARDS]
    for cid in _duplicates(bonus_ids):
        errors.append(f"duplicate bonus card id {cid}")
    for card in ROC_A_CARDS:
        if card["id"] in question_ids:
            errors.append(f"bonus card id {card['id']} collides with a catalog question")
        if card["phase"] not in PHASES:
            errors.append(f"bonus card {card['id']} has invalid phase {card['phase']}")
        if card.get("correct") not in (1, 2, 3, 4):
            errors.append(f"bonus card {card['id']} has invalid correct option")

    for signal, phases in WEATHER_BIAS.items():
        for phase, ids in phases.items():
            if phase not in PHASES:
                errors.append(f"weather bias {signal} uses invalid phase {phase}")
            for qid in ids:
                if qid not in question_ids:
                    errors.append(f"weather bias {signal}/{phase} references unknown question {qid}")

    for qid, overlay in SCENARIO_OVERLAYS.items():
        if qid not in question_ids:
            errors.append(f"scenario overlay references unknown question {qid}")
        if len(overlay.get("options", [])) != 4:
            errors.append(f"scenario overlay {qid} must have four options")

    for eid in _duplicates(e["id"] for e in EMERGENCY_EVENTS):
        errors.append(f"duplicate emergency id {eid}")
    for event in EMERGENCY_EVENTS:
        for phase in event["trigger_phases"]:
            if phase not in PHASES:
                errors.append(f"emergency {event['id']} has invalid trigger phase {phase}")
        for qid in event.get("question_pool", []):
            if qid not in question_ids:
                errors.append(f"emergency {event['id']} references unknown question {qid}")
        for cid in event.get("bonus_pool", []):
            if cid not in bonus_ids:
                errors.append(f"emergency {event['id']} references unknown bonus card {cid}")

    for tid in _duplicates(t["id"] for t in RADIO_EXCHANGES):
        errors.append(f"duplicate radio template id {tid}")
    for template in RADIO_EXCHANGES:
        if template["phase"] not in PHASES:
            errors.append(f"radio template {template['id']} has invalid phase {template['phase']}")

    for name, profile in MISSION_PROFILES.items():
        bounds = profile["bounds"]
        low = sum(bounds[p][0] for p in PHASES)
        high = sum(bounds[p][1] for p in PHASES)
        total_min, total_max = profile["total"]
        if low > total_min or total_max > high:
            errors.append(f"mission profile {name} total range {total_min}-{total_max} "
                          f"is inconsistent with phase bounds {low}-{high}")


def validate_catalog(catalog=None) -> List[str]:
    """
    完整性检查

    Args:
        catalog: CatalogStore 或 CatalogSnapshot（默认使用静态表快照）

    Returns:
        List[str]: 错误列表，空列表表示通过
    """
    if catalog is None:
        from data.catalog import CatalogSnapshot
        catalog = CatalogSnapshot.from_static()

    errors: List[str] = []
    question_ids = {q.id for q in catalog.all_questions()}
    if not question_ids:
        errors.append("catalog is empty")

    _check_questions(catalog, errors)
    _check_references(catalog, question_ids, errors)
    _check_static_tables(question_ids, errors)
    return errors


def assert_catalog_valid(catalog=None):
    """有缺陷时抛出 CatalogIntegrityError"""
    errors = validate_catalog(catalog)
    if errors:
        raise CatalogIntegrityError(errors)


def main(url: Optional[str] = None) -> int:
    from config import CATALOG_DATABASE_URL
    from data.catalog import CatalogStore

    store = CatalogStore(url or CATALOG_DATABASE_URL)
    errors = validate_catalog(store)
    if errors:
        print(f"[Validate] 发现 {len(errors)} 个问题:")
        for error in errors:
            print(f"  - {error}")
        return 1
    print(f"[Validate] 题库检查通过 ({store.question_count()} 道题目)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
