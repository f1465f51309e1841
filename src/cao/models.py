"""Plain data types passed between the CLI, the session loop and the client."""

from dataclasses import dataclass, field

ROLES = ("system", "user", "assistant")


@dataclass
class ModelConfig:
    api_base: str
    model: str
    provider: str | None = None
    api_key: str | None = None
    # False when the api_key field was absent from the source mapping
    has_api_key: bool = field(default=False, repr=False, compare=False)

    def __post_init__(self):
        if self.api_key is not None:
            self.has_api_key = True

    @classmethod
    def from_dict(cls, data: dict) -> "ModelConfig":
        cfg = cls(
            api_base=data["api_base"],
            model=data["model"],
            provider=data.get("provider"),
            api_key=data.get("api_key"),
        )
        cfg.has_api_key = "api_key" in data
        return cfg

    def to_dict(self) -> dict:
        out = {"api_base": self.api_base, "model": self.model}
        if self.provider:
            out["provider"] = self.provider
        if self.api_key:
            out["api_key"] = self.api_key
        return out


@dataclass(frozen=True)
class Message:
    role: str
    content: str

    def __post_init__(self):
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")

    def to_dict(self) -> dict:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class Reply:
    """Text returned by a chat call. ok=False means text is an error message."""

    text: str
    ok: bool = True
