from .store import CONTEXT_SOURCES, KnowledgeBase, RelevantContext, knowledge_base

__all__ = ["CONTEXT_SOURCES", "KnowledgeBase", "RelevantContext", "knowledge_base"]
