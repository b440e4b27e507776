from __future__ import annotations

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Tuple

from evaluation_engine import EvaluationResult
from question_bank import Answer, Question


LONG_AVERAGE_TIME_SECONDS = 600


def _summarize_points(points: List[str], max_items: int = 5) -> List[str]:
    unique: List[str] = []
    for p in points:
        if p not in unique and p.strip():
            unique.append(p.strip())
        if len(unique) >= max_items:
            break
    return unique


def generate_personalized_tips(average_score: float, average_time: float) -> List[str]:
    tips: List[str] = []
    if average_score < 70:
        tips.append("Practice structuring your answers with an introduction, body and conclusion")
        tips.append("Always include specific examples from your experience")
    if average_time > LONG_AVERAGE_TIME_SECONDS:
        tips.append("Practice more concise answers - aim for 5-8 minutes per question")
    tips.append("Use the STAR method for behavioral questions")
    tips.append("Research the company and connect your answers to its values")
    return tips


def summarize_progress(
    entries: Iterable[Tuple[Question, Answer, EvaluationResult]],
) -> Dict[str, Any]:
    """
    Build a practice report with average score and time, per-category
    averages, summarized strengths/improvements and personalized tips.
    """
    scores: List[int] = []
    times: List[float] = []
    strengths: List[str] = []
    improvements: List[str] = []
    by_category: Dict[str, List[int]] = defaultdict(list)

    for question, answer, result in entries:
        scores.append(result.score)
        times.append(answer.time_spent)
        strengths.extend(result.strengths)
        improvements.extend(result.improvements)
        by_category[question.category].append(result.score)

    total = len(scores)
    average_score = sum(scores) / total if total else 0.0
    average_time = sum(times) / total if total else 0.0

    return {
        "total_answered": total,
        "average_score": round(average_score, 2),
        "average_time": round(average_time, 2),
        "category_scores": {
            category: round(sum(values) / len(values), 2)
            for category, values in by_category.items()
        },
        "strengths": _summarize_points(strengths),
        "improvements": _summarize_points(improvements),
        "tips": generate_personalized_tips(average_score, average_time) if total else [],
    }
