from engines.grading import grade_answer, grade_responses

ANSWER_KEY = {"1.01": 1, "3.18": 1, "5.01": 4}


def test_known_and_unknown_questions():
    result = grade_responses([
        {"questionId": "1.01", "selectedOption": 1},
        {"questionId": "99.99", "selectedOption": 2},
    ], ANSWER_KEY)

    assert result["correct"] == 1
    assert result["total"] == 2
    assert result["score"] == 50
    assert not result["passed"]

    unknown = result["results"][1]
    assert unknown["isCorrect"] is False
    assert unknown["correctOption"] == 0


def test_pass_mark_is_ninety():
    responses = [{"questionId": "1.01", "selectedOption": 1}] * 9 + [{"questionId": "5.01", "selectedOption": 1}]
    result = grade_responses(responses, ANSWER_KEY)
    assert result["score"] == 90
    assert result["passed"]


def test_empty_and_malformed_responses():
    assert grade_responses([], ANSWER_KEY) == {"score": 0, "correct": 0, "total": 0, "passed": False, "results": []}
    result = grade_responses(["junk", {"questionId": "3.18", "selectedOption": "1"}], ANSWER_KEY)
    assert result["total"] == 1
    assert result["correct"] == 1


def test_non_integer_option_grades_incorrect():
    assert grade_answer("1.01", "first", ANSWER_KEY)["isCorrect"] is False
    assert grade_answer("1.01", None, ANSWER_KEY)["selectedOption"] == 0
    assert grade_answer("1.01", True, ANSWER_KEY)["isCorrect"] is False
