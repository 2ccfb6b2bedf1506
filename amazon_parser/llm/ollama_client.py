"""
Ollama API Client

Minimal client for the Ollama HTTP API (non-streaming generate).
Errors from requests propagate to the caller untouched.
"""

import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)


class OllamaClient:
    """
    Client for an Ollama server.

    Usage:
        with OllamaClient("http://localhost:11434") as client:
            result = client.generate(model="llama3.2", prompt="...")
            text = result["response"]
    """

    DEFAULT_HOST = "http://localhost:11434"

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            host: Ollama base URL
            timeout: Seconds to wait for a response (None waits indefinitely)
            session: Optional shared requests session
        """
        self.host = (host or self.DEFAULT_HOST).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.session.close()

    def close(self):
        self.session.close()

    def generate(
        self,
        model: str,
        prompt: str,
        stream: bool = False,
        options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Run a completion.

        Args:
            model: Model name (e.g., "llama3.2")
            prompt: Prompt text
            stream: Must be False; streaming responses are not supported
            options: Sampling options (temperature, top_p, ...)

        Returns:
            Response JSON, with the completion under "response"

        Raises:
            requests.exceptions.RequestException: On transport or HTTP errors
        """
        payload = {"model": model, "prompt": prompt, "stream": stream}
        if options:
            payload["options"] = options

        logger.debug("POST %s/api/generate (model=%s, %d prompt chars)", self.host, model, len(prompt))
        response = self.session.post(f"{self.host}/api/generate", json=payload, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
