from .client import OllamaClient, OllamaError, extract_json, ollama_client

__all__ = ["OllamaClient", "OllamaError", "extract_json", "ollama_client"]
