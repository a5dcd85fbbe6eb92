from core.config import Config

CORE_TOOLS: list[dict] = [
    {
        "type": "function",
        "function": {
            "name": "get_current_time",
            "description": "Returns the current local time.",
            "parameters": {
                "type": "object",
                "properties": {},
                "required": [],
            },
        },
    },
]

LIVE_TOOLS: list[dict] = [
    {
        "type": "function",
        "function": {
            "name": "get_song_tempo",
            "description": "Get the tempo of the current Ableton Live set, in beats per minute.",
            "parameters": {
                "type": "object",
                "properties": {},
                "required": [],
            },
        },
    },
    {
        "type": "function",
        "function": {
            "name": "set_song_tempo",
            "description": "Set the tempo of the current Ableton Live set.",
            "parameters": {
                "type": "object",
                "properties": {
                    "bpm": {
                        "type": "number",
                        "description": "New tempo in beats per minute (e.g. 120)",
                    },
                },
                "required": ["bpm"],
            },
        },
    },
]


def get_tools(config: Config) -> list[dict]:
    """Return all tool definitions, gating Live tools on config."""
    tools = list(CORE_TOOLS)
    if config.bridge.enabled:
        tools.extend(LIVE_TOOLS)
    return tools
