from __future__ import annotations

from knowledge_base import RelevantContext
from question_bank import Answer, Question


ANSWER_EVAL_PROMPT_TEMPLATE = """
You are an expert interview coach evaluating a candidate's practice answer.

QUESTION
- Category: {category}
- Title: {title}
- Description: {description}
- Difficulty: {difficulty}
- Time limit: {time_limit} minutes
- Evaluation criteria: {criteria}

RELEVANT CONTEXT
{context}

CANDIDATE ANSWER ({word_count} words, {time_spent} seconds)
\"\"\"
{answer}
\"\"\"

Evaluate the answer against the criteria. Be specific and constructive.
Behavioral answers should follow the STAR method (Situation, Task, Action, Result).

You MUST respond with a compact JSON object only, with this structure:
{{
  "score": 75,
  "strengths": ["point 1", "point 2"],
  "improvements": ["point 1", "point 2"],
  "suggestions": ["point 1"],
  "detailed_feedback": "Two to four sentences of overall feedback.",
  "criteria_scores": {criteria_example}
}}

The "score" must be an integer from 0 to 100.
Each value in "criteria_scores" must be an integer from 0 to 100, keyed by the criterion names above.
"""


def build_evaluation_prompt(question: Question, answer: Answer, context: RelevantContext) -> str:
    criteria = question.evaluation_criteria
    criteria_example = "{" + ", ".join(f'"{c}": 70' for c in criteria) + "}"
    return ANSWER_EVAL_PROMPT_TEMPLATE.format(
        category=question.category,
        title=question.title,
        description=question.description or "(none)",
        difficulty=question.difficulty,
        time_limit=question.time_limit,
        criteria=", ".join(criteria) if criteria else "(none)",
        context=context.relevant_info or "(none)",
        word_count=answer.word_count,
        time_spent=int(round(answer.time_spent)),
        answer=answer.text.strip(),
        criteria_example=criteria_example,
    ).strip()
