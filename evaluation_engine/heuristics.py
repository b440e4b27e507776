from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol

from config import evaluation_config
from question_bank import Answer, Question

from .result import EvaluationResult, clamp_score


_LIST_ITEM_PATTERN = re.compile(r"(^|\n)\s*[-*]\s")
_EXAMPLE_MARKERS = ("example", "for instance", "e.g.")
_STAR_MARKERS = ("situation", "task", "action", "result")


class RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class CategoryFeedback:
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)
    detailed_feedback: str = ""


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(m in lowered for m in markers)


def _has_structure(text: str) -> bool:
    return "1." in text or "•" in text or bool(_LIST_ITEM_PATTERN.search(text))


def _band(score: int, excellent: str, good: str, basic: str) -> str:
    if score > 80:
        return excellent
    if score > 60:
        return good
    return basic


def is_short_answer(answer: Answer) -> bool:
    return answer.word_count < evaluation_config.short_answer_words


def score_answer(question: Question, answer: Answer) -> int:
    """
    Rule-based score in [0, 100] from length, structure, examples,
    STAR usage and time efficiency.
    """
    words = answer.word_count
    if words == 0:
        return 0
    if is_short_answer(answer):
        return min(evaluation_config.short_answer_max_score, 5 * words)

    text = answer.text
    score = 60

    if words > 150:
        score += 15
    elif words > 100:
        score += 10
    elif words > 50:
        score += 5

    if _has_structure(text):
        score += 10
    if _contains_any(text, _EXAMPLE_MARKERS):
        score += 10
    if question.category == "behavioral" and _contains_any(text, _STAR_MARKERS):
        score += 15

    if question.time_limit > 0:
        efficiency = min(100.0, answer.time_spent / (question.time_limit * 60) * 100)
        if 50 < efficiency < 90:
            score += 5

    return clamp_score(score)


def category_feedback(question: Question, answer: Answer, score: int) -> CategoryFeedback:
    text = answer.text.lower()
    words = answer.word_count
    fb = CategoryFeedback()

    if question.category == "technical":
        if "example" in text or "code" in text:
            fb.strengths.append("You included practical examples that demonstrate your knowledge")
        if words > 100:
            fb.strengths.append("Detailed answer that covers several aspects of the topic")
        if score < 70:
            fb.improvements.append("Add more specific technical details")
            fb.improvements.append("Include code examples or concrete use cases")
            fb.suggestions.append("Practice explaining technical concepts step by step")
        fb.detailed_feedback = (
            f"Your technical answer shows {_band(score, 'an excellent', 'a good', 'a basic')} "
            "understanding of the topic. "
            + (
                "You demonstrate technical depth and explain it clearly."
                if score > 80
                else "Consider adding more specific examples and implementation details."
            )
        )

    elif question.category == "behavioral":
        has_star = "situation" in text or "task" in text
        if has_star:
            fb.strengths.append("You used the STAR method to structure your answer")
        if "learned" in text or "result" in text:
            fb.strengths.append("You reflected on the experience and what you learned")
        if not has_star:
            fb.improvements.append("Use the STAR method (Situation, Task, Action, Result)")
            fb.suggestions.append("Structure your behavioral answers with STAR")
        if score < 70:
            fb.improvements.append("Be more specific about the actions you took")
            fb.improvements.append("Include metrics or quantifiable results")
        fb.detailed_feedback = (
            f"Your behavioral answer {_band(score, 'demonstrates excellent', 'shows good', 'needs to improve its')} "
            "reflection and storytelling. "
            + (
                "The STAR structure helps communicate your experience clearly."
                if has_star
                else "Consider using the STAR method for more impact."
            )
        )

    elif question.category == "teamwork":
        if "collaborat" in text or "team" in text:
            fb.strengths.append("You show that you understand the value of collaboration")
        if "conflict" in text or "disagree" in text:
            fb.strengths.append("You approach challenging situations with maturity")
        if score < 70:
            fb.improvements.append("Include specific examples of successful collaboration")
            fb.improvements.append("Explain how you contribute to the team's success")
            fb.suggestions.append("Practice describing your role in team dynamics")
        fb.detailed_feedback = (
            f"Your teamwork answer {_band(score, 'reflects excellent', 'shows good', 'needs to develop more')} "
            "interpersonal skills. "
            + (
                "You show emotional maturity and a collaborative mindset."
                if score > 70
                else "Consider adding concrete examples of your contribution to the team."
            )
        )

    elif question.category == "leadership":
        if "lead" in text or "guide" in text:
            fb.strengths.append("You understand leadership beyond formal authority")
        if "influence" in text or "motivat" in text:
            fb.strengths.append("You recognize the importance of influence and motivation")
        if score < 70:
            fb.improvements.append("Describe specific leadership techniques you have used")
            fb.improvements.append("Include tangible results of your leadership")
            fb.suggestions.append("Practice articulating your leadership style")
        fb.detailed_feedback = (
            f"Your leadership answer {_band(score, 'demonstrates strong', 'shows potential for', 'needs to develop more')} "
            "influence and guidance. "
            + (
                "You articulate well how you lead without formal authority."
                if score > 70
                else "Consider including more specific leadership situations."
            )
        )

    else:
        if not is_short_answer(answer):
            fb.strengths.append("Coherent and well-structured answer")
        if score < 70:
            fb.improvements.append("Add more specific details and examples")
            fb.suggestions.append("Practice more detailed answers for this category")
        fb.detailed_feedback = (
            f"Your answer shows {_band(score, 'excellent', 'good', 'basic')} understanding of the topic."
        )

    if score >= 90:
        fb.strengths.append("Exceptional answer that shows expertise and professional maturity")
    elif score >= 80:
        fb.strengths.append("Solid answer with good examples and a clear structure")
    elif score >= 70:
        fb.strengths.append("Adequate answer that covers the main points")

    if is_short_answer(answer):
        fb.improvements.append("Your answer is too short to show your experience")
    if words < 50:
        fb.improvements.append("Develop your answer with additional details")
        fb.suggestions.append("Aim for answers of at least 100-150 words")

    return fb


def criteria_scores(
    question: Question,
    answer: Answer,
    rng: Optional[RandomSource] = None,
) -> Dict[str, int]:
    """
    Per-criterion scores: a jittered base plus a bonus when the criterion's
    first word appears in the answer. Short answers never beat their overall score.
    """
    rng = rng or random
    text = answer.text.lower()
    cap = score_answer(question, answer) if is_short_answer(answer) else 100

    scores: Dict[str, int] = {}
    for criterion in question.evaluation_criteria:
        value = 60 + rng.random() * 30
        words = criterion.lower().split()
        if words and words[0] in text:
            value += 10
        scores[criterion] = min(cap, clamp_score(value))
    return scores


def evaluate_heuristically(
    question: Question,
    answer: Answer,
    rng: Optional[RandomSource] = None,
) -> EvaluationResult:
    score = score_answer(question, answer)
    fb = category_feedback(question, answer, score)
    return EvaluationResult(
        score=score,
        strengths=fb.strengths,
        improvements=fb.improvements,
        suggestions=fb.suggestions,
        detailed_feedback=fb.detailed_feedback,
        criteria_scores=criteria_scores(question, answer, rng),
        source="heuristic",
    )
