"""Send a single query to OpenAI's chat completions API.

Shapes the request body, POSTs it with ``requests`` and pulls the assistant
text out of ``choices[0].message.content``. Non-200 statuses and unexpected
response bodies are mapped to ``gpt_chat.errors`` exceptions.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import requests

from gpt_chat import config
from gpt_chat.errors import (
    MalformedResponseError,
    QuotaExceededError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

API_URL = "https://api.openai.com/v1/chat/completions"
MODEL = "gpt-3.5-turbo"
DEFAULT_MAX_TOKENS = 50
DEFAULT_TIMEOUT = 30


def build_payload(query: str, max_tokens: int = DEFAULT_MAX_TOKENS) -> Dict[str, Any]:
    """Return the chat completions request body for ``query``."""
    return {
        "model": MODEL,
        "messages": [{"role": "user", "content": query}],
        "max_tokens": max_tokens,
    }


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def extract_answer(body: str) -> str:
    """Return ``choices[0].message.content`` from a JSON ``body``."""

    try:
        data = json.loads(body)
    except ValueError:
        raise MalformedResponseError(body) from None

    choices = data.get("choices") if isinstance(data, dict) else None
    if not isinstance(choices, list) or not choices:
        raise MalformedResponseError(body)

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise MalformedResponseError(body)
    return content


def get_chat_response(
    query: str,
    api_key: Optional[str] = None,
    *,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    timeout: float = DEFAULT_TIMEOUT,
    url: str = API_URL,
) -> str:
    """Ask the chat model ``query`` and return the answer text.

    Args:
        query (str): Question sent verbatim as the user message
        api_key (str, optional): Bearer credential. Defaults to ``OPEN_API_KEY``
        max_tokens (int, optional): Completion length cap. Defaults to 50
        timeout (float, optional): Seconds to wait for the API. Defaults to 30
        url (str, optional): Chat completions endpoint

    Returns:
        str: The assistant message content, unchanged

    Raises:
        MissingCredentialError: If no credential is available; no request is made
        InvalidCredentialError: If the credential is not ASCII; no request is made
        QuotaExceededError: On HTTP 429
        UnexpectedStatusError: On any other non-200 status
        MalformedResponseError: If the body lacks ``choices[0].message.content``
        requests.RequestException: On transport failures
    """
    api_key = config.check_api_key(api_key) if api_key else config.get_api_key()
    logger.debug("Using API Key: %s", config.mask_secret(api_key))

    logger.info("Requesting chat completion from %s", url)
    with requests.post(
        url,
        headers=build_headers(api_key),
        json=build_payload(query, max_tokens),
        timeout=timeout,
    ) as response:
        status = response.status_code
        body = response.text
    logger.debug("Response Body: %s", body)

    if status != 200:
        if status == 429:
            raise QuotaExceededError()
        raise UnexpectedStatusError(status, body)

    answer = extract_answer(body)
    logger.info("Received chat completion (%d chars)", len(answer))
    return answer
