"""Provider inference from a model config.

Rules run in order; the first one that yields a non-empty token wins.
  - explicit `provider` field (lowercased)
  - loopback api_base -> "ollama"
  - hostname label, e.g. api.openai.com -> "openai"
  - first path segment, e.g. http://gateway/groq/v1 -> "groq"
  - full hostname with dots replaced, e.g. http://gateway/v1 -> "gateway"
A malformed api_base resolves to "unknown".
"""

import logging
from urllib.parse import SplitResult, urlsplit

from cao.errors import UnresolvableProvider
from cao.models import ModelConfig

log = logging.getLogger(__name__)

_LOCAL_MARKERS = ("localhost", "127.0.0.1")
_GENERIC_LABELS = ("com", "org", "net", "io")
_VERSION_SEGMENTS = ("v1", "v2", "v3", "api")


def is_local(api_base: str) -> bool:
    return any(m in api_base for m in _LOCAL_MARKERS)


def _parse_url(api_base: str) -> SplitResult:
    """urlsplit() that rejects what a WHATWG URL parser would reject."""
    parts = urlsplit(api_base.strip())
    if not parts.scheme:
        raise ValueError(f"Invalid URL (no scheme): {api_base!r}")
    if parts.scheme in ("http", "https") and not parts.hostname:
        raise ValueError(f"Invalid URL (no host): {api_base!r}")
    _ = parts.port  # ValueError on a non-numeric port
    return parts


# --- URL rules ---


def _from_hostname(url: SplitResult) -> str:
    labels = (url.hostname or "").split(".")
    if len(labels) >= 2:
        if labels[-2] not in _GENERIC_LABELS:
            return labels[-2]
        if len(labels) > 2:
            return labels[-3]
    return ""


def _from_path(url: SplitResult) -> str:
    first = url.path.strip("/").split("/")[0]
    if first and first not in _VERSION_SEGMENTS:
        return first
    return ""


def _from_full_hostname(url: SplitResult) -> str:
    return (url.hostname or "").replace(".", "_")


_URL_RULES = (
    ("hostname", _from_hostname),
    ("path", _from_path),
    ("full hostname", _from_full_hostname),
)


# --- Config rules ---


def _from_explicit(config: ModelConfig, logger: logging.Logger) -> str:
    return (config.provider or "").lower()


def _from_loopback(config: ModelConfig, logger: logging.Logger) -> str:
    if is_local(config.api_base):
        logger.debug("Detected local model endpoint: %s", config.api_base)
        return "ollama"
    return ""


def _from_url(config: ModelConfig, logger: logging.Logger) -> str:
    try:
        url = _parse_url(config.api_base)
    except ValueError as e:
        logger.error("Failed to parse API base URL: %s", e)
        return "unknown"
    for name, rule in _URL_RULES:
        token = rule(url)
        if token:
            logger.debug("Provider from %s: %s", name, token)
            return token
    return ""


_RULES = (_from_explicit, _from_loopback, _from_url)


def resolve_provider(config: ModelConfig, logger: logging.Logger | None = None) -> str:
    """Return the lowercase provider token for `config`.

    Raises UnresolvableProvider when every rule comes up empty.
    """
    logger = logger or log
    for rule in _RULES:
        token = rule(config, logger)
        if token:
            return token
    raise UnresolvableProvider()
