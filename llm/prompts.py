SYSTEM_PROMPT = """You are a studio assistant connected to a running Ableton Live set.

Rules:
- Use tools to read or change the song. Don't guess the tempo.
- Be concise. Confirm changes with the value Live reported back."""


def build_system_prompt(extra: str = "") -> str:
    """Build the system prompt, appending any configured instructions."""
    if extra:
        return f"{SYSTEM_PROMPT}\n\n{extra}"
    return SYSTEM_PROMPT
