from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Tuple

from ocr_math import MathProblem

ANSWER_REQUIRED_MSG = "Answer required."


def normalize_response(raw: Optional[str]) -> str:
    if raw is None:
        return ""
    return raw.strip()


def mark_response(problem: MathProblem, response: Optional[str]) -> Dict[str, Any]:
    """
    Mark one flashcard response. Only an exact match of the computed answer
    string counts ("3.33" for 10 ÷ 3, "-5" for 5 - 10).
    """
    given = normalize_response(response)
    expected = problem.answer

    if not given:
        feedback = ANSWER_REQUIRED_MSG
        correct = False
    else:
        correct = given == expected
        feedback = "" if correct else f"Expected {expected}."

    return {
        "question": problem.question,
        "expected": expected,
        "response": given,
        "correct": correct,
        "score": 1 if correct else 0,
        "feedback": feedback,
    }


def mark_responses(
    problems: Sequence[MathProblem], responses: Sequence[Optional[str]]
) -> Tuple[List[Dict[str, Any]], int]:
    # pair by position; unanswered problems are marked as empty responses
    results: List[Dict[str, Any]] = []
    correct_count = 0
    for idx, problem in enumerate(problems):
        response = responses[idx] if idx < len(responses) else None
        res = mark_response(problem, response)
        results.append(res)
        if res["correct"]:
            correct_count += 1
    return results, correct_count
