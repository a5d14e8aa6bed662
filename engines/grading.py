#!/usr/bin/env python3
"""
模拟考试判分

纯查表：答案键之外的题目判为错误，correctOption 记为 0
"""
from typing import Dict, Any, Iterable, Mapping, List

PASS_MARK = 90


def _as_option(value) -> int:
    """选项转整数，无法转换时返回 0（必错）"""
    if isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def grade_answer(question_id: str, selected_option, answer_key: Mapping[str, int]) -> Dict[str, Any]:
    """
    判一道题

    Args:
        question_id: 题目 ID
        selected_option: 选项（非整数判错）
        answer_key: 题目 ID -> 正确选项

    Returns:
        dict: {questionId, selectedOption, isCorrect, correctOption}
    """
    correct_option = answer_key.get(question_id, 0)
    selected = _as_option(selected_option)
    return {
        "questionId": question_id,
        "selectedOption": selected,
        "isCorrect": correct_option != 0 and selected == correct_option,
        "correctOption": correct_option,
    }


def grade_responses(responses: Iterable[Mapping[str, Any]], answer_key: Mapping[str, int]) -> Dict[str, Any]:
    """
    判一组作答

    Args:
        responses: [{questionId, selectedOption}, ...]，格式不对的条目跳过
        answer_key: 题目 ID -> 正确选项

    Returns:
        dict: {score, correct, total, passed, results}
    """
    results: List[Dict[str, Any]] = []
    for entry in responses or []:
        if not isinstance(entry, Mapping):
            continue
        question_id = str(entry.get("questionId", ""))
        results.append(grade_answer(question_id, entry.get("selectedOption"), answer_key))

    total = len(results)
    correct = sum(1 for r in results if r["isCorrect"])
    score = round(correct / total * 100) if total else 0

    return {
        "score": score,
        "correct": correct,
        "total": total,
        "passed": score >= PASS_MARK,
        "results": results,
    }
