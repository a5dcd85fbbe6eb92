class CredentialError(RuntimeError):
    """The completion backend has no API key to send."""


class UnknownToolError(KeyError):
    """The model asked for a tool nobody registered."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown tool: {self.name}"
