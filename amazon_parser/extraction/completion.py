"""
Completion Invoker

Sends the prompt to the model once and returns the raw completion text.
Transport failures are reported here; parsing the text is the
resolver's job.
"""

import json
import logging
from typing import Any

import requests

from ..common.text_utils import truncate
from ..errors import CompletionError, TransportTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_TEMPERATURE = 0.1
DEFAULT_TOP_P = 0.9


def _field(response: Any, name: str) -> Any:
    """Read a field from a dict-like or attribute-style response object."""
    if isinstance(response, dict):
        return response.get(name)
    return getattr(response, name, None)


def response_text(response: Any) -> str:
    """
    Pull the completion text out of whatever envelope the service returned.

    Handles a plain string, {"response": ...}, {"text": ...} and
    {"message": {"content": ...}}; anything else is serialized as JSON.
    """
    if isinstance(response, str):
        return response

    for name in ('response', 'text'):
        value = _field(response, name)
        if value:
            return str(value)

    message = _field(response, 'message')
    content = _field(message, 'content') if message is not None else None
    if content:
        return str(content)

    return json.dumps(response, default=str)


def invoke_completion(
    client,
    model: str,
    prompt: str,
    temperature: float = DEFAULT_TEMPERATURE,
    top_p: float = DEFAULT_TOP_P,
) -> str:
    """
    Run one non-streaming completion.

    Args:
        client: Object with a generate(model=, prompt=, stream=, options=) method
        model: Model name
        prompt: Prompt text
        temperature: Sampling temperature (low for repeatable output)
        top_p: Nucleus sampling cutoff

    Returns:
        Completion text

    Raises:
        TransportTimeoutError: The model did not answer in time; it may have
            finished anyway, so the caller may retry
        CompletionError: Any other failure talking to the model
    """
    logger.info("Sending prompt to Ollama (model: %s, %d chars)", model, len(prompt))

    try:
        response = client.generate(
            model=model,
            prompt=prompt,
            stream=False,
            options={"temperature": temperature, "top_p": top_p},
        )
    except requests.exceptions.ReadTimeout as e:
        logger.warning("Ollama request timed out waiting for a response; the model may still be processing")
        raise TransportTimeoutError(
            "Ollama request timed out: The model took too long to respond. "
            f"Try again or use a faster model. Original error: {e}"
        ) from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise CompletionError(f"Ollama API error: HTTP {status}: {e}") from e
    except requests.exceptions.RequestException as e:
        raise CompletionError(f"Ollama API error: {e}") from e

    text = response_text(response)
    logger.info("Received response from Ollama (%d characters)", len(text))
    logger.debug("Raw Ollama response: %s", truncate(text, 500))

    return text
