from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from loguru import logger

from config import evaluation_config
from knowledge_base import KnowledgeBase, knowledge_base
from llm_client import OllamaClient, OllamaError, extract_json, ollama_client
from prompts import build_evaluation_prompt
from question_bank import Answer, Question

from .heuristics import RandomSource, criteria_scores, evaluate_heuristically, is_short_answer
from .result import EvaluationResult, clamp_score


def _safe_score(value: object) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return clamp_score(number)


def _string_list(value: object) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if str(item).strip()]


def parse_model_evaluation(
    data: Dict[str, Any],
    question: Question,
    fallback_criteria: Dict[str, int],
) -> Optional[EvaluationResult]:
    """
    Normalize the JSON object returned by the model. Returns None when it
    carries no usable overall score.
    """
    score = _safe_score(data.get("score"))
    if score is None:
        return None

    raw_criteria = data.get("criteria_scores")
    raw_criteria = raw_criteria if isinstance(raw_criteria, dict) else {}
    scores: Dict[str, int] = {}
    for criterion in question.evaluation_criteria:
        value = _safe_score(raw_criteria.get(criterion))
        scores[criterion] = value if value is not None else fallback_criteria.get(criterion, score)

    return EvaluationResult(
        score=score,
        strengths=_string_list(data.get("strengths")),
        improvements=_string_list(data.get("improvements")),
        suggestions=_string_list(data.get("suggestions")),
        detailed_feedback=str(data.get("detailed_feedback") or "").strip(),
        criteria_scores=scores,
        source="ollama",
    )


class AnswerEvaluator:
    """
    Evaluates a practice answer with the local Ollama model when it is
    reachable, and with the rule-based heuristics otherwise.
    """

    def __init__(
        self,
        client: Optional[OllamaClient] = None,
        knowledge: Optional[KnowledgeBase] = None,
        use_ollama: Optional[bool] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._client = client or ollama_client
        self._knowledge = knowledge or knowledge_base
        self.use_ollama = evaluation_config.use_ollama if use_ollama is None else use_ollama
        self._rng = rng

    def evaluate_answer(self, question: Question, answer: Answer) -> EvaluationResult:
        result: Optional[EvaluationResult] = None
        if self.use_ollama:
            result = self._evaluate_with_ollama(question, answer)
        if result is None:
            result = self.evaluate_with_heuristics(question, answer)
        return self._apply_short_answer_cap(answer, result)

    def evaluate_with_heuristics(self, question: Question, answer: Answer) -> EvaluationResult:
        return evaluate_heuristically(question, answer, rng=self._rng)

    def _evaluate_with_ollama(self, question: Question, answer: Answer) -> Optional[EvaluationResult]:
        if not self._client.check_connection():
            logger.info("Ollama unavailable; using heuristic evaluation")
            return None

        context = self._knowledge.get_relevant_context(question.category, question.title)
        prompt = build_evaluation_prompt(question, answer, context)
        try:
            response = self._client.generate(prompt)
        except OllamaError as exc:
            logger.warning("Ollama evaluation failed, falling back to heuristics: {}", exc)
            return None

        data = extract_json(response)
        if data is None:
            logger.warning("No JSON object in Ollama response, falling back to heuristics")
            return None

        result = parse_model_evaluation(
            data,
            question,
            fallback_criteria=criteria_scores(question, answer, self._rng),
        )
        if result is None:
            logger.warning("Ollama response has no numeric score, falling back to heuristics")
        return result

    @staticmethod
    def _apply_short_answer_cap(answer: Answer, result: EvaluationResult) -> EvaluationResult:
        if not is_short_answer(answer):
            return result
        cap = evaluation_config.short_answer_max_score
        result.score = min(result.score, cap)
        result.criteria_scores = {k: min(v, cap) for k, v in result.criteria_scores.items()}
        return result
