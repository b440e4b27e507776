import os
from dataclasses import dataclass

from dotenv import load_dotenv


# Load environment variables from .env at import time so that
# OLLAMA_BASE_URL, OLLAMA_MODEL, etc. are available everywhere.
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class OllamaConfig:
    base_url: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    model: str = os.getenv("OLLAMA_MODEL", "llama2:7b-chat")
    # Low temperature keeps evaluations close to deterministic.
    temperature: float = float(os.getenv("OLLAMA_TEMPERATURE", "0.3"))
    top_p: float = float(os.getenv("OLLAMA_TOP_P", "0.9"))
    num_predict: int = int(os.getenv("OLLAMA_NUM_PREDICT", "800"))
    health_timeout: float = float(os.getenv("OLLAMA_HEALTH_TIMEOUT", "5"))
    generate_timeout: float = float(os.getenv("OLLAMA_GENERATE_TIMEOUT", "120"))


@dataclass
class EvaluationConfig:
    use_ollama: bool = _env_flag("USE_OLLAMA", "true")
    short_answer_words: int = int(os.getenv("SHORT_ANSWER_WORDS", "5"))
    short_answer_max_score: int = int(os.getenv("SHORT_ANSWER_MAX_SCORE", "25"))


@dataclass
class LoggingConfig:
    level: str = os.getenv("LOG_LEVEL", "INFO")


ollama_config = OllamaConfig()
evaluation_config = EvaluationConfig()
logging_config = LoggingConfig()
