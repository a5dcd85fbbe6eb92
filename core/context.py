import json
from dataclasses import dataclass, field
from typing import Any

from core.types import Role, ToolCall, ToolResult


@dataclass
class MessageRecord:
    role: Role
    content: str | None
    tool_call_id: str | None = None
    name: str | None = None
    tool_calls: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        message: dict[str, Any] = {"role": self.role.value, "content": self.content}
        if self.tool_calls:
            message["tool_calls"] = self.tool_calls
        if self.tool_call_id is not None:
            message["tool_call_id"] = self.tool_call_id
        if self.name is not None:
            message["name"] = self.name
        return message


class Transcript:
    """Ordered conversation records for a single run. Append-only."""

    def __init__(self) -> None:
        self.records: list[MessageRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def add_system(self, content: str) -> None:
        self.records.append(MessageRecord(role=Role.SYSTEM, content=content))

    def add_user(self, content: str) -> None:
        self.records.append(MessageRecord(role=Role.USER, content=content))

    def add_assistant(self, content: str | None) -> None:
        self.records.append(MessageRecord(role=Role.ASSISTANT, content=content))

    def add_assistant_tool_calls(self, content: str | None, tool_calls: list[ToolCall]) -> None:
        self.records.append(
            MessageRecord(
                role=Role.ASSISTANT,
                content=content,
                tool_calls=[
                    {
                        "id": tc.id,
                        "type": "function",
                        "function": {
                            "name": tc.name,
                            "arguments": json.dumps(tc.args),
                        },
                    }
                    for tc in tool_calls
                ],
            )
        )

    def add_tool_result(self, tool_call: ToolCall, result: ToolResult) -> None:
        self.records.append(
            MessageRecord(
                role=Role.TOOL,
                content=result.content,
                tool_call_id=result.tool_call_id,
                name=tool_call.name,
            )
        )

    def get_messages(self) -> list[dict]:
        return [r.to_dict() for r in self.records]
