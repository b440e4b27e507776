from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from .models import Question, normalize_category


def build_sample_questions() -> List[Question]:
    """
    A small curated set of practice questions covering every category.
    This can be extended easily.
    """
    questions: List[Question] = []

    def q(
        qid: str,
        category: str,
        title: str,
        description: str,
        difficulty: str,
        time_limit: int,
        evaluation_criteria: List[str],
    ) -> Question:
        return Question(
            id=qid,
            category=category,
            title=title,
            description=description,
            difficulty=difficulty,
            time_limit=time_limit,
            evaluation_criteria=evaluation_criteria,
        )

    # Technical
    questions.extend(
        [
            q(
                "technical_1",
                "technical",
                "Explain React Hooks and when to use them",
                "Describe what hooks are, the most common built-in hooks and when a custom hook makes sense.",
                "medium",
                5,
                ["Technical accuracy", "Practical examples", "Clarity of explanation"],
            ),
            q(
                "technical_2",
                "technical",
                "Design a RESTful API for a task manager",
                "Walk through resources, HTTP methods, status codes and error handling for a simple task manager.",
                "hard",
                8,
                ["API design", "HTTP semantics", "Error handling", "Clarity of explanation"],
            ),
        ]
    )

    # Behavioral
    questions.extend(
        [
            q(
                "behavioral_1",
                "behavioral",
                "Tell me about a time you made a mistake at work",
                "Describe the mistake, how you handled it and what you learned.",
                "medium",
                5,
                ["Structure", "Self-awareness", "Learning", "Results"],
            ),
            q(
                "behavioral_2",
                "behavioral",
                "Describe a project you are proud of",
                "Explain the context, your role, the actions you took and the measurable outcome.",
                "easy",
                5,
                ["Structure", "Ownership", "Results"],
            ),
        ]
    )

    # Teamwork
    questions.append(
        q(
            "teamwork_1",
            "teamwork",
            "How do you handle conflict within your team?",
            "Share a concrete disagreement with a teammate and how it was resolved.",
            "medium",
            5,
            ["Communication", "Conflict resolution", "Collaboration"],
        )
    )

    # Leadership
    questions.append(
        q(
            "leadership_1",
            "leadership",
            "Tell me about a time you led without formal authority",
            "Describe how you influenced others to reach a shared goal.",
            "hard",
            6,
            ["Influence", "Vision", "Results"],
        )
    )

    # Other
    questions.append(
        q(
            "other_1",
            "other",
            "Why do you want to work at our company?",
            "Connect your motivation and values with the company's mission.",
            "easy",
            3,
            ["Motivation", "Company research", "Authenticity"],
        )
    )

    return questions


@lru_cache(maxsize=1)
def load_questions() -> tuple[Question, ...]:
    return tuple(build_sample_questions())


def get_questions(category: Optional[str] = None) -> List[Question]:
    """
    Return the sample questions, optionally restricted to one category.
    """
    questions = list(load_questions())
    if category is None:
        return questions
    wanted = normalize_category(category)
    return [q for q in questions if q.category == wanted]


def get_question(question_id: str) -> Optional[Question]:
    for q in load_questions():
        if q.id == question_id:
            return q
    return None
