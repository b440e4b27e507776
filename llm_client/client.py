from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

import requests
from loguru import logger

from config import ollama_config


class OllamaError(RuntimeError):
    """Raised when a generate call to the Ollama server fails."""


def extract_json(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse a JSON object out of model output. Models often wrap the object
    in prose or code fences, so fall back to the outermost {...} span.
    """
    if not text or not text.strip():
        return None
    candidates = [text.strip()]
    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])
    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    return None


class OllamaClient:
    """
    Minimal HTTP client for a local Ollama server: health check,
    model listing and a single non-streaming generate call.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or ollama_config.base_url).rstrip("/")
        self._model = model or ollama_config.model
        self._session = session or requests.Session()
        self._connected = False

    @property
    def model(self) -> str:
        return self._model

    @property
    def is_connected(self) -> bool:
        return self._connected

    def set_model(self, model: str) -> None:
        self._model = model
        logger.info("Ollama model switched to {}", model)

    def check_connection(self) -> bool:
        logger.debug("Checking Ollama connection at {}", self.base_url)
        try:
            resp = self._session.get(
                f"{self.base_url}/api/tags",
                timeout=ollama_config.health_timeout,
            )
        except requests.RequestException as exc:
            logger.info("Ollama is not available: {}", exc)
            self._connected = False
            return False

        self._connected = resp.ok
        if resp.ok:
            logger.info("Ollama connected at {}", self.base_url)
        else:
            logger.warning("Ollama health check returned HTTP {}", resp.status_code)
        return self._connected

    def list_models(self) -> List[str]:
        try:
            resp = self._session.get(
                f"{self.base_url}/api/tags",
                timeout=ollama_config.health_timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Could not list Ollama models: {}", exc)
            return []
        models = data.get("models") if isinstance(data, dict) else None
        if not isinstance(models, list):
            return []
        names = [str(m["name"]) for m in models if isinstance(m, dict) and m.get("name")]
        logger.debug("Available Ollama models: {}", names)
        return names

    def generate(self, prompt: str, model: Optional[str] = None) -> str:
        """
        Send one prompt to /api/generate and return the response text.
        """
        model_to_use = model or self._model
        payload = {
            "model": model_to_use,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": ollama_config.temperature,
                "top_p": ollama_config.top_p,
                "num_predict": ollama_config.num_predict,
            },
        }
        logger.info("Sending prompt to Ollama (model={}, chars={})", model_to_use, len(prompt))
        try:
            resp = self._session.post(
                f"{self.base_url}/api/generate",
                json=payload,
                timeout=ollama_config.generate_timeout,
            )
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException as exc:
            raise OllamaError(f"Ollama request failed: {exc}") from exc
        except ValueError as exc:
            raise OllamaError("Ollama returned a non-JSON body") from exc

        if not isinstance(data, dict) or not isinstance(data.get("response"), str):
            raise OllamaError("Ollama response is missing the 'response' field")
        logger.debug("Ollama response preview: {}", data["response"][:300])
        return data["response"]


# Shared default client
ollama_client = OllamaClient()
