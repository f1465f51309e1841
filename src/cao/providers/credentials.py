"""API key lookup for a resolved provider.

Order: <PROVIDER>_API_KEY env var, inline `api_key`, then the
compatible-mode aliases (DASHSCOPE_API_KEY / BAICHUAN_API_KEY) when the
api_base is an OpenAI-compatible gateway. Loopback endpoints need no key.
"""

import logging
import os
from collections.abc import Mapping

from cao.errors import MissingCredential
from cao.models import ModelConfig
from cao.providers.resolver import is_local

log = logging.getLogger(__name__)

# (api_base substring, env var) checked in order when "compatible-mode" is in api_base
_COMPAT_ALIASES = (
    ("dashscope", "DASHSCOPE_API_KEY"),
    ("baichuan", "BAICHUAN_API_KEY"),
)


def env_var_name(provider: str) -> str:
    """'deepseek' -> 'DEEPSEEK_API_KEY'"""
    return f"{provider.upper()}_API_KEY"


def _compat_alias(api_base: str) -> str | None:
    if "compatible-mode" not in api_base:
        return None
    for marker, env_var in _COMPAT_ALIASES:
        if marker in api_base:
            return env_var
    return None


def resolve_credential(
    provider: str,
    config: ModelConfig,
    environ: Mapping[str, str] | None = None,
    logger: logging.Logger | None = None,
) -> str | None:
    """Returns the API key, or None for local providers.

    Raises MissingCredential naming the provider's env var when nothing is found.
    """
    logger = logger or log
    environ = os.environ if environ is None else environ

    if provider == "ollama" or is_local(config.api_base):
        logger.debug("Local model, no API key required")
        return None

    env_var = env_var_name(provider)
    logger.debug("API provider: %s, looking up %s", provider, env_var)
    api_key = environ.get(env_var)

    if not api_key and config.has_api_key:
        logger.debug("Using API key from model config")
        api_key = config.api_key

    if not api_key:
        alias = _compat_alias(config.api_base)
        if alias:
            logger.debug("Compatible-mode endpoint, looking up %s", alias)
            api_key = environ.get(alias)

    if not api_key:
        raise MissingCredential(env_var)
    return api_key
