from .engine import PracticeSession, QuestionWithEvaluation

__all__ = ["PracticeSession", "QuestionWithEvaluation"]
