from pathlib import Path

import tomli
from pydantic import BaseModel

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default.toml"


class LLMLocalConfig(BaseModel):
    base_url: str = "http://localhost:8000/v1"
    model: str = "mistralai/Mistral-Nemo-Instruct-2407"


class LLMApiConfig(BaseModel):
    base_url: str = "https://api.openai.com/v1"
    model: str = "gpt-4"
    api_key_env: str = "OPENAI_API_KEY"


class LLMConfig(BaseModel):
    backend: str = "api"
    local: LLMLocalConfig = LLMLocalConfig()
    api: LLMApiConfig = LLMApiConfig()


class BridgeConfig(BaseModel):
    enabled: bool = True
    host: str = "127.0.0.1"
    send_port: int = 11000
    listen_host: str = "0.0.0.0"
    listen_port: int = 11001


class ConversationConfig(BaseModel):
    system_prompt: str = ""
    prompt: str = "Hello, what's the tempo of my song? Please set it to 120 BPM."


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Config(BaseModel):
    llm: LLMConfig = LLMConfig()
    bridge: BridgeConfig = BridgeConfig()
    conversation: ConversationConfig = ConversationConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: str | Path | None = None) -> Config:
    """Load config from TOML file, validate with Pydantic."""
    with open(path or DEFAULT_CONFIG_PATH, "rb") as f:
        data = tomli.load(f)
    return Config(**data)
