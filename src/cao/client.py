"""call_ai_api: send a conversation, get reply text.

Stages run in order, each raising a ChatError on failure:
  resolve_provider -> resolve_credential -> dispatch -> normalize
Errors are converted to Reply(ok=False) here and never escape to the caller.
"""

import asyncio
import logging
from collections.abc import Mapping

import httpx

from cao.errors import ChatError
from cao.models import Message, ModelConfig, Reply
from cao.providers.credentials import resolve_credential
from cao.providers.dispatch import dispatch
from cao.providers.normalize import normalize
from cao.providers.resolver import resolve_provider

log = logging.getLogger(__name__)


def _run_async(coro):
    try:
        return asyncio.run(coro)
    except RuntimeError:
        import nest_asyncio

        nest_asyncio.apply()
        loop = asyncio.get_event_loop()
        return loop.run_until_complete(coro)


async def call_ai_api(
    config: ModelConfig,
    messages: list[Message],
    *,
    environ: Mapping[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
    logger: logging.Logger | None = None,
) -> Reply:
    """Send `messages` to the model described by `config`.

    Args:
        environ: Env lookup for API keys (default os.environ).
        client: Shared httpx client; a fresh one is used per call if omitted.
        logger: Logger for diagnostics (default this module's).
    """
    logger = logger or log
    try:
        provider = resolve_provider(config, logger=logger)
        api_key = resolve_credential(provider, config, environ=environ, logger=logger)
        response = await dispatch(
            config.api_base,
            config.model,
            messages,
            api_key,
            client=client,
            logger=logger,
        )
        logger.debug("API request succeeded, parsing response")
        text = normalize(config.api_base, response.content, logger=logger)
    except ChatError as e:
        logger.error("%s", e)
        return Reply(str(e), ok=False)
    return Reply(text)


def chat(config: ModelConfig, messages: list[Message], **kwargs) -> Reply:
    """Blocking call_ai_api() for callers without an event loop."""
    return _run_async(call_ai_api(config, messages, **kwargs))
