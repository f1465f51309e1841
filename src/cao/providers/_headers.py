"""Request header construction and redaction for debug logs."""

_MASK = "****"


def build_headers(api_key: str | None) -> dict:
    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def redact_key(key: str) -> str:
    """'sk-abcdef1234567890' -> 'sk-a****7890'. Keys of 10 chars or fewer are fully masked."""
    if len(key) > 10:
        return key[:4] + _MASK + key[-4:]
    return _MASK


def redact_headers(headers) -> dict:
    """Copy of `headers` with the bearer token masked."""
    out = dict(headers)
    auth = out.get("Authorization")
    if auth and auth.startswith("Bearer "):
        out["Authorization"] = "Bearer " + redact_key(auth[len("Bearer ") :])
    return out
