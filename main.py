import asyncio

from dotenv import load_dotenv

from bridge.osc import OSCBridge
from core.config import load_config
from core.logging import setup_logging
from core.orchestrator import Orchestrator
from llm.client import LLMClient
from tools import register_all_tools
from tools.executor import ToolExecutor


async def run() -> None:
    """Send the configured prompt through the model and print its answer."""
    load_dotenv()
    config = load_config()
    setup_logging(config.logging)

    llm_client = LLMClient(config.llm)
    executor = ToolExecutor()

    bridge = OSCBridge(config.bridge) if config.bridge.enabled else None
    if bridge:
        await bridge.open()
    try:
        register_all_tools(executor, config, bridge)
        orchestrator = Orchestrator(config=config, llm_client=llm_client, executor=executor)
        response = await orchestrator.process(config.conversation.prompt)
    finally:
        if bridge:
            bridge.close()

    print(response.text)


if __name__ == "__main__":
    asyncio.run(run())
