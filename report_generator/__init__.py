from .generator import generate_personalized_tips, summarize_progress

__all__ = ["generate_personalized_tips", "summarize_progress"]
