"""HTTP POST to an OpenAI-compatible /chat/completions endpoint."""

import json
import logging

import httpx

from cao.errors import HttpError, NetworkError, Timeout
from cao.models import Message
from cao.providers._headers import build_headers, redact_headers

log = logging.getLogger(__name__)

TIMEOUT = 30.0
TEMPERATURE = 0.7


def endpoint(api_base: str) -> str:
    return f"{api_base.strip()}/chat/completions"


def build_payload(model: str, messages: list[Message]) -> dict:
    return {
        "model": model,
        "messages": [m.to_dict() for m in messages],
        "temperature": TEMPERATURE,
    }


async def dispatch(
    api_base: str,
    model: str,
    messages: list[Message],
    api_key: str | None,
    client: httpx.AsyncClient | None = None,
    timeout: float = TIMEOUT,
    logger: logging.Logger | None = None,
) -> httpx.Response:
    """POST the conversation. Returns the 200 response.

    Raises Timeout, NetworkError, or HttpError for any other status. No retries.
    """
    logger = logger or log
    url = endpoint(api_base)
    headers = build_headers(api_key)
    payload = build_payload(model, messages)

    logger.debug("Sending request to %s", url)
    logger.debug("Request headers: %s", json.dumps(redact_headers(headers)))

    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient()
    try:
        response = await client.post(url, json=payload, headers=headers, timeout=timeout)
    except httpx.TimeoutException as e:
        raise Timeout(timeout) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise NetworkError(f"{type(e).__name__}: {e}") from e
    except UnicodeEncodeError as e:
        # non-ASCII API key or URL that cannot go on the wire
        raise NetworkError(f"request cannot be encoded: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    logger.debug("API response status: %d", response.status_code)
    if response.status_code != 200:
        raise HttpError(response.status_code, response.text)
    return response
