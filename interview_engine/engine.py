from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from evaluation_engine import EvaluationResult
from question_bank import Answer, Question


@dataclass
class QuestionWithEvaluation:
    question: Question
    answer: Optional[Answer] = None
    result: Optional[EvaluationResult] = None


class PracticeSession:
    """
    Walks a fixed list of practice questions in order and keeps the
    evaluation recorded for each one.
    """

    def __init__(self, questions: List[Question]) -> None:
        if not questions:
            raise ValueError("At least one question is required to start a practice session.")
        self.questions = list(questions)
        self.current_index: int = 0
        self.items: List[QuestionWithEvaluation] = []

    def has_more_questions(self) -> bool:
        return self.current_index < len(self.questions)

    def get_next_question(self) -> Optional[Question]:
        if not self.has_more_questions():
            return None
        question = self.questions[self.current_index]
        self.current_index += 1
        self.items.append(QuestionWithEvaluation(question=question))
        return question

    def record_evaluation(self, question: Question, answer: Answer, result: EvaluationResult) -> None:
        """
        Store the answer and evaluation for an asked question.
        """
        matches = [item for item in reversed(self.items) if item.question.id == question.id]
        if not matches:
            raise ValueError(f"Question {question.id!r} has not been asked in this session.")
        # Most recent unanswered ask wins; otherwise re-record the latest one.
        pending = [item for item in matches if item.result is None]
        item = pending[0] if pending else matches[0]
        item.answer = answer
        item.result = result

    @property
    def entries(self) -> List[tuple[Question, Answer, EvaluationResult]]:
        return [
            (item.question, item.answer, item.result)
            for item in self.items
            if item.answer is not None and item.result is not None
        ]

    def to_serializable(self) -> Dict[str, List[Dict[str, Any]]]:
        data: Dict[str, List[Dict[str, Any]]] = {"questions": []}
        for item in self.items:
            data["questions"].append(
                {
                    "id": item.question.id,
                    "category": item.question.category,
                    "title": item.question.title,
                    "difficulty": item.question.difficulty,
                    "answer_text": item.answer.text if item.answer else None,
                    "time_spent": item.answer.time_spent if item.answer else None,
                    "evaluation": item.result.to_dict() if item.result else None,
                }
            )
        return data
