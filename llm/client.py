import json
import logging
import os

from openai import AsyncOpenAI

from core.config import LLMConfig
from core.errors import CredentialError
from core.types import ToolCall

logger = logging.getLogger(__name__)


class LLMClient:
    def __init__(self, config: LLMConfig):
        self.config = config
        self.client: AsyncOpenAI | None = None
        if config.backend == "api":
            self.api_key = os.environ.get(config.api.api_key_env, "")
            # AsyncOpenAI refuses an empty key, chat() reports it instead
            if self.api_key:
                self.client = AsyncOpenAI(
                    base_url=config.api.base_url,
                    api_key=self.api_key,
                )
            self.model = config.api.model
        else:
            self.api_key = "not-needed"
            self.client = AsyncOpenAI(
                base_url=config.local.base_url,
                api_key=self.api_key,
            )
            self.model = config.local.model

    async def chat(self, messages: list[dict], tools: list[dict] | None = None) -> dict:
        """Send messages to LLM, optionally with tool definitions.

        Returns dict with:
          - content: str | None (text response)
          - tool_calls: list[ToolCall] | None (if LLM wants to call tools)
          - raw: the full API response object

        Raises CredentialError on the api backend when no key is set, and
        json.JSONDecodeError when a tool call carries malformed arguments.
        """
        if not self.api_key:
            raise CredentialError(f"{self.config.api.api_key_env} is not set")

        kwargs: dict = {
            "model": self.model,
            "messages": messages,
        }
        if tools:
            kwargs["tools"] = tools
            kwargs["tool_choice"] = "auto"

        logger.debug("Requesting completion from %s with %d messages", self.model, len(messages))
        response = await self.client.chat.completions.create(**kwargs)
        choice = response.choices[0]

        result: dict = {
            "content": choice.message.content,
            "tool_calls": None,
            "raw": response,
        }

        if choice.message.tool_calls:
            result["tool_calls"] = [
                ToolCall(
                    id=tc.id,
                    name=tc.function.name,
                    args=json.loads(tc.function.arguments or "{}"),
                )
                for tc in choice.message.tool_calls
            ]
            logger.info("Model requested tools: %s", ", ".join(tc.name for tc in result["tool_calls"]))

        return result
