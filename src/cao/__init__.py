"""Terminal chatbot wrapper for OpenAI-compatible and local (Ollama) chat APIs.

The provider is inferred from the model config, no adapter registry:
  - explicit `provider` field wins
  - localhost / 127.0.0.1 -> ollama (no API key, Ollama response shape)
  - otherwise derived from the api_base host or path (api.deepseek.com -> deepseek)

The API key comes from <PROVIDER>_API_KEY, then the config's api_key, then
DASHSCOPE_API_KEY / BAICHUAN_API_KEY for compatible-mode gateways.

Usage:
    from cao import Message, ModelConfig, chat
    cfg = ModelConfig(api_base="https://api.deepseek.com/v1", model="deepseek-chat")
    reply = chat(cfg, [Message("user", "What is 2+2?")])
    # Reply(text='4', ok=True)

Errors never raise out of chat()/call_ai_api(); they come back as
Reply(text=<message>, ok=False).
"""

from cao.client import call_ai_api, chat
from cao.models import Message, ModelConfig, Reply

__all__ = ["Message", "ModelConfig", "Reply", "call_ai_api", "chat"]
