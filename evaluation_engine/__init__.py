from .evaluator import AnswerEvaluator, parse_model_evaluation
from .heuristics import category_feedback, criteria_scores, evaluate_heuristically, is_short_answer, score_answer
from .result import EvaluationResult, clamp_score

__all__ = [
    "AnswerEvaluator",
    "EvaluationResult",
    "category_feedback",
    "clamp_score",
    "criteria_scores",
    "evaluate_heuristically",
    "is_short_answer",
    "parse_model_evaluation",
    "score_answer",
]
