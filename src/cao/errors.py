"""Error taxonomy. Every failure of a chat call is a ChatError subclass whose
str() is the message shown to the user."""


class ChatError(RuntimeError):
    pass


class UnresolvableProvider(ChatError):
    def __init__(self):
        super().__init__(
            "Error: unable to determine the API provider, set the provider "
            "field in the configuration or use a standard URL format"
        )


class MissingCredential(ChatError):
    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(
            f"Error: {env_var} is not set and no API key was provided in the configuration"
        )


class HttpError(ChatError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API request failed (status code: {status_code}): {body}")


class NetworkError(ChatError):
    def __init__(self, description: str):
        self.description = description
        super().__init__(f"Error calling AI API: {description}")


class Timeout(NetworkError):
    def __init__(self, seconds: float):
        self.seconds = seconds
        super().__init__(f"request timed out after {seconds:g}s")


class ParseError(ChatError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Error parsing AI API response: {detail}")


class ConfigError(ChatError):
    pass
