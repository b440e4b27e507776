from .models import CATEGORIES, Answer, Question, QuestionCategory, normalize_category
from .questions import build_sample_questions, get_question, get_questions, load_questions

__all__ = [
    "CATEGORIES",
    "Answer",
    "Question",
    "QuestionCategory",
    "normalize_category",
    "build_sample_questions",
    "get_question",
    "get_questions",
    "load_questions",
]
