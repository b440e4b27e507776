from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from loguru import logger

from .seed import build_default_knowledge, build_interview_tips


_WORD_PATTERN = re.compile(r"[\w'-]+")
_MIN_KEYWORD_LENGTH = 3

CONTEXT_SOURCES = ["Knowledge Base", "Interview Best Practices"]


@dataclass
class RelevantContext:
    relevant_info: str
    sources: List[str] = field(default_factory=lambda: list(CONTEXT_SOURCES))
    confidence: float = 0.6


def _title_keywords(title: str) -> List[str]:
    return [w for w in _WORD_PATTERN.findall(title.lower()) if len(w) >= _MIN_KEYWORD_LENGTH]


def _dedupe(items: List[str]) -> List[str]:
    unique: List[str] = []
    for item in items:
        if item not in unique:
            unique.append(item)
    return unique


class KnowledgeBase:
    """
    Static lookup table of category snippets and interview tips.
    Context is selected by plain substring matching on the question title;
    there are no embeddings involved.
    """

    def __init__(
        self,
        knowledge: Optional[Dict[str, List[str]]] = None,
        tips: Optional[Dict[str, List[str]]] = None,
    ) -> None:
        source_knowledge = knowledge if knowledge is not None else build_default_knowledge()
        source_tips = tips if tips is not None else build_interview_tips()
        # Each instance owns its own lists.
        self._knowledge: Dict[str, List[str]] = {k: list(v) for k, v in source_knowledge.items()}
        self._tips: Dict[str, List[str]] = {k: list(v) for k, v in source_tips.items()}

    def get_relevant_context(self, category: str, question_title: str) -> RelevantContext:
        category_knowledge = self._knowledge.get(category, [])
        category_tips = self._tips.get(category, [])
        general_tips = self._tips.get("general", [])

        keywords = _title_keywords(question_title)
        relevant = [
            info for info in category_knowledge
            if any(keyword in info.lower() for keyword in keywords)
        ]

        parts = _dedupe(
            relevant[:3]
            + category_knowledge[:2]
            + category_tips[:2]
            + general_tips[:1]
        )
        confidence = 0.8 if relevant else 0.6
        logger.debug(
            "Knowledge context for category={} matched={} parts={}",
            category,
            len(relevant),
            len(parts),
        )
        return RelevantContext(
            relevant_info="\n".join(parts),
            sources=list(CONTEXT_SOURCES),
            confidence=confidence,
        )

    def add_knowledge(self, category: str, information: str) -> None:
        self._knowledge.setdefault(category, []).append(information)

    def knowledge_stats(self) -> Dict[str, int]:
        return {category: len(items) for category, items in self._knowledge.items()}


# Shared default knowledge base
knowledge_base = KnowledgeBase()
