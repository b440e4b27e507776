from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal


QuestionCategory = Literal["technical", "behavioral", "teamwork", "leadership", "other"]

CATEGORIES: tuple[str, ...] = ("technical", "behavioral", "teamwork", "leadership", "other")


def normalize_category(value: object) -> str:
    category = str(value or "").strip().lower()
    return category if category in CATEGORIES else "other"


@dataclass
class Question:
    id: str
    category: QuestionCategory
    title: str
    description: str = ""
    difficulty: str = "medium"
    # Minutes allowed for the answer.
    time_limit: int = 5
    evaluation_criteria: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.category = normalize_category(self.category)  # type: ignore[assignment]


@dataclass
class Answer:
    text: str
    # Seconds the candidate spent answering.
    time_spent: float = 0.0

    @property
    def word_count(self) -> int:
        return len(self.text.split())
