from .evaluation_prompt import ANSWER_EVAL_PROMPT_TEMPLATE, build_evaluation_prompt

__all__ = [
    "ANSWER_EVAL_PROMPT_TEMPLATE",
    "build_evaluation_prompt",
]
