"""Reply extraction from chat-completion response bodies.

Two shapes, chosen by api_base alone (never by sniffing the body):
  - local (Ollama):  {"message": {"content": ...}}, falling back to the
    standard path and then to a placeholder
  - standard (OpenAI, DeepSeek, ...): choices[0].message.content, no fallback
"""

import json
import logging
import re

from cao.errors import ParseError
from cao.providers.resolver import is_local

log = logging.getLogger(__name__)

LOCAL_PLACEHOLDER = "Unable to parse Ollama API response"

_LEADING_THINK_RE = re.compile(r"^<think>.*?</think>\s*", re.DOTALL)


def strip_thinking(text: str) -> str:
    """Remove one leading <think>...</think> block, then trim.

    Blocks that don't start the text are kept as-is.
    """
    return _LEADING_THINK_RE.sub("", text, count=1).strip()


def _standard_content(body: dict):
    """choices[0].message.content. Raises KeyError/IndexError/TypeError if absent."""
    return body["choices"][0]["message"]["content"]


def _local_content(body: dict, logger: logging.Logger):
    message = body.get("message")
    if isinstance(message, dict) and "content" in message:
        logger.debug("Extracted content from Ollama response")
        return message["content"]

    logger.debug("Falling back to standard shape for Ollama response")
    try:
        content = _standard_content(body)
    except (KeyError, IndexError, TypeError):
        content = None
    return content or LOCAL_PLACEHOLDER


def _decode(raw: str | bytes) -> dict:
    try:
        body = json.loads(raw)
    except ValueError as e:
        raise ParseError(f"invalid JSON: {e}") from e
    if not isinstance(body, dict):
        raise ParseError(f"expected a JSON object, got {type(body).__name__}")
    return body


def normalize(
    api_base: str, raw: str | bytes, logger: logging.Logger | None = None
) -> str:
    """Return display text for a raw response body.

    Raises ParseError when a standard-shape body lacks choices[0].message.content,
    or when the extracted content is not a string.
    """
    logger = logger or log
    body = _decode(raw)

    if is_local(api_base):
        logger.debug("Parsing local Ollama response shape")
        content = _local_content(body, logger)
    else:
        logger.debug("Parsing standard OpenAI response shape")
        try:
            content = _standard_content(body)
        except (KeyError, IndexError, TypeError) as e:
            raise ParseError(f"missing choices[0].message.content ({e!r})") from e

    if not isinstance(content, str):
        raise ParseError(f"content is {type(content).__name__}, expected str")
    return strip_thinking(content)
