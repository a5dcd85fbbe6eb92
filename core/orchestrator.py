import logging
import time

from core.config import Config
from core.context import Transcript
from core.types import Response, ToolCall
from llm.client import LLMClient
from llm.prompts import build_system_prompt
from llm.tools import get_tools
from tools.executor import ToolExecutor

logger = logging.getLogger(__name__)


class Orchestrator:
    def __init__(
        self,
        config: Config,
        llm_client: LLMClient,
        executor: ToolExecutor,
    ):
        self.config = config
        self.llm = llm_client
        self.executor = executor
        self.tools = get_tools(config)

    async def process(self, user_input: str) -> Response:
        """Start a fresh transcript for ``user_input`` and run it."""
        transcript = Transcript()
        transcript.add_system(build_system_prompt(self.config.conversation.system_prompt))
        transcript.add_user(user_input)
        return await self.run(transcript)

    async def run(self, transcript: Transcript) -> Response:
        """Run one tool-calling exchange over ``transcript``.

        The first completion may request tools; each one is executed in order
        and its result appended under the call's id. A single follow-up
        completion, without tools, produces the final answer. Unknown tools
        and bad arguments raise.
        """
        timing: dict[str, float] = {}
        tool_calls_made: list[ToolCall] = []

        t0 = time.time()
        result = await self.llm.chat(transcript.get_messages(), tools=self.tools)
        timing["llm_first"] = (time.time() - t0) * 1000

        if result["tool_calls"]:
            transcript.add_assistant_tool_calls(result["content"], result["tool_calls"])

            t0 = time.time()
            for tc in result["tool_calls"]:
                tool_calls_made.append(tc)
                tool_result = await self.executor.execute(tc)
                transcript.add_tool_result(tc, tool_result)
            timing["tools"] = (time.time() - t0) * 1000

            t0 = time.time()
            result = await self.llm.chat(transcript.get_messages())
            timing["llm_followup"] = (time.time() - t0) * 1000

        final_text = result["content"] or ""
        transcript.add_assistant(final_text)
        logger.info("Conversation finished after %d tool call(s)", len(tool_calls_made))

        return Response(
            text=final_text,
            tool_calls_made=tool_calls_made,
            latency_ms=timing,
        )
