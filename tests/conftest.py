import asyncio

import pytest
import pytest_asyncio
from pythonosc.dispatcher import Dispatcher
from pythonosc.osc_server import AsyncIOOSCUDPServer
from pythonosc.udp_client import SimpleUDPClient

from bridge.osc import GET_TEMPO, SET_TEMPO, OSCBridge
from core.config import BridgeConfig, Config, load_config


@pytest.fixture
def config() -> Config:
    """Load default config for tests."""
    return load_config()


@pytest.fixture
def temp_config(tmp_path):
    """Create a temp config TOML for isolated tests."""
    toml_content = """
[llm]
backend = "api"
[llm.api]
base_url = "https://api.openai.com/v1"
model = "gpt-4o-mini"
api_key_env = "TEST_OPENAI_KEY"
[bridge]
enabled = false
send_port = 9000
listen_port = 9001
[conversation]
prompt = "What time is it?"
[logging]
level = "DEBUG"
"""
    config_path = tmp_path / "test.toml"
    config_path.write_text(toml_content)
    return load_config(config_path)


class FakeLive:
    """Minimal AbletonOSC stand-in: answers tempo get/set on the same address."""

    def __init__(self, tempo: float = 98.0):
        self.tempo = tempo
        self.received: list[tuple[str, tuple]] = []
        self.reply_port: int | None = None
        self.dispatcher = Dispatcher()
        self.dispatcher.map(GET_TEMPO, self._get_tempo)
        self.dispatcher.map(SET_TEMPO, self._set_tempo)
        self._transport = None

    async def start(self) -> None:
        server = AsyncIOOSCUDPServer(("127.0.0.1", 0), self.dispatcher, asyncio.get_running_loop())
        self._transport, _ = await server.create_serve_endpoint()

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()

    @property
    def port(self) -> int:
        return self._transport.get_extra_info("sockname")[1]

    def _reply(self, address: str, *args) -> None:
        SimpleUDPClient("127.0.0.1", self.reply_port).send_message(address, list(args))

    def _get_tempo(self, address: str, *args) -> None:
        self.received.append((address, args))
        self._reply(address, self.tempo)

    def _set_tempo(self, address: str, *args) -> None:
        self.received.append((address, args))
        self.tempo = args[0]
        self._reply(address, self.tempo)


@pytest_asyncio.fixture
async def live():
    peer = FakeLive()
    await peer.start()
    yield peer
    peer.close()


@pytest_asyncio.fixture
async def bridge(live):
    bridge_config = BridgeConfig(
        host="127.0.0.1",
        send_port=live.port,
        listen_host="127.0.0.1",
        listen_port=0,
    )
    async with OSCBridge(bridge_config) as b:
        live.reply_port = b.listen_port
        yield b
