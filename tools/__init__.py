from bridge.osc import OSCBridge
from core.config import Config
from tools.clock import get_current_time
from tools.executor import ToolExecutor
from tools.live import LiveTools


def register_all_tools(executor: ToolExecutor, config: Config, bridge: OSCBridge | None = None) -> None:
    executor.register("get_current_time", get_current_time)

    if config.bridge.enabled and bridge is not None:
        live = LiveTools(bridge)
        executor.register("get_song_tempo", live.get_song_tempo)
        executor.register("set_song_tempo", live.set_song_tempo)
