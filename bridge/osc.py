import asyncio
import logging
from typing import Any

from pythonosc.dispatcher import Dispatcher
from pythonosc.osc_server import AsyncIOOSCUDPServer
from pythonosc.udp_client import SimpleUDPClient

from core.config import BridgeConfig

logger = logging.getLogger(__name__)

# AbletonOSC addresses
GET_TEMPO = "/live/song/get/tempo"
SET_TEMPO = "/live/song/set/tempo"


class OSCBridge:
    """UDP request/reply channel to AbletonOSC.

    Outbound packets go to ``host:send_port``. Replies come back on
    ``listen_host:listen_port`` and are matched to waiters by address only.
    """

    def __init__(self, config: BridgeConfig):
        self.config = config
        self.dispatcher = Dispatcher()
        self.dispatcher.set_default_handler(self._on_message)
        self.client = SimpleUDPClient(config.host, config.send_port)
        self._transport: asyncio.DatagramTransport | None = None
        self._waiters: dict[str, list[asyncio.Future]] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    async def open(self) -> None:
        server = AsyncIOOSCUDPServer(
            (self.config.listen_host, self.config.listen_port),
            self.dispatcher,
            asyncio.get_running_loop(),
        )
        self._transport, _ = await server.create_serve_endpoint()
        logger.info(
            "OSC bridge listening on %s:%d, sending to %s:%d",
            self.config.listen_host,
            self.listen_port,
            self.config.host,
            self.config.send_port,
        )

    def close(self) -> None:
        if self._transport is not None:
            self._transport.close()
            self._transport = None

    async def __aenter__(self) -> "OSCBridge":
        await self.open()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def listen_port(self) -> int:
        if self._transport is None:
            return self.config.listen_port
        return self._transport.get_extra_info("sockname")[1]

    def send(self, address: str, *args: Any) -> None:
        logger.debug("-> %s %s", address, args)
        self.client.send_message(address, list(args))

    async def wait_for_message(self, address: str) -> tuple:
        """Wait for the next packet on ``address`` and return its arguments.

        There is no timeout: if the peer never answers this never returns.
        """
        future = self._register(address)
        try:
            return await future
        finally:
            self._discard(address, future)

    async def query(self, address: str, *args: Any) -> tuple:
        """Send to ``address`` and wait for the reply on the same address.

        Queries on one address run one at a time so replies can't be handed
        to the wrong caller.
        """
        lock = self._locks.setdefault(address, asyncio.Lock())
        async with lock:
            # listener goes in before the packet leaves
            future = self._register(address)
            try:
                self.send(address, *args)
                return await future
            finally:
                self._discard(address, future)

    async def get_tempo(self) -> float:
        reply = await self.query(GET_TEMPO)
        return float(reply[0])

    async def set_tempo(self, bpm: float) -> tuple:
        return await self.query(SET_TEMPO, float(bpm))

    def _register(self, address: str) -> asyncio.Future:
        future: asyncio.Future = asyncio.get_running_loop().create_future()
        self._waiters.setdefault(address, []).append(future)
        return future

    def _discard(self, address: str, future: asyncio.Future) -> None:
        waiters = self._waiters.get(address, [])
        if future in waiters:
            waiters.remove(future)

    def _on_message(self, address: str, *args: Any) -> None:
        logger.debug("<- %s %s", address, args)
        for future in self._waiters.get(address, []):
            if not future.done():
                future.set_result(args)
                return
        logger.debug("Dropping unclaimed packet on %s", address)
