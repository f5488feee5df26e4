"""
Outbound chat-completions call and best-effort JSON extraction.
"""

import re
import logging
from typing import Dict, Any, List, Optional

import requests

from report_relay.config import DEFAULT_AI_API_URL

logger = logging.getLogger(__name__)

# ```json ... ``` anywhere in the reply, inner whitespace trimmed
JSON_FENCE_RE = re.compile(r"```json\s*(.*?)\s*```", re.DOTALL)


class UpstreamError(Exception):
    """Raised when the AI API answers with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"AI API request failed with status {status_code}: {body}")


def build_payload(model: str, messages: List[Dict[str, Any]], max_tokens: int, temperature: float = 0.7) -> Dict[str, Any]:
    """
    Assemble the chat-completions request body. Streaming is never requested.
    """
    return {
        "model": model,
        "temperature": temperature,
        "max_tokens": max_tokens,
        "messages": messages,
        "stream": False,
    }


def call_upstream(
    payload: Dict[str, Any],
    api_key: Optional[str],
    url: str = DEFAULT_AI_API_URL,
    timeout: Optional[float] = None,
) -> str:
    """
    Send one request to the AI API and return the completion text.

    Args:
        payload (dict): Body built by build_payload().
        api_key (str): Value for the Authorization header, sent as-is.
        url (str): Chat-completions endpoint.
        timeout (float, optional): Seconds; None waits on the transport default.

    Returns:
        str: choices[0].message.content of the response.

    Raises:
        UpstreamError: Non-2xx response.
        requests.RequestException: Transport failure.
        KeyError, IndexError, ValueError: Unexpected response shape.
    """
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = api_key
    else:
        logger.warning("AI_API_KEY is not set; calling the AI API without credentials.")

    response = requests.post(url, json=payload, headers=headers, timeout=timeout)

    if not 200 <= response.status_code < 300:
        raise UpstreamError(response.status_code, response.text)

    data = response.json()
    return data["choices"][0]["message"]["content"]


def extract_json_text(content: str) -> str:
    """
    Pull the body out of a ```json fenced block when there is one.

    This is a heuristic, not parsing: if no fence is found (or it is empty)
    the reply is returned unchanged, and malformed JSON passes through.
    """
    match = JSON_FENCE_RE.search(content)
    if match and match.group(1):
        return match.group(1)
    return content
