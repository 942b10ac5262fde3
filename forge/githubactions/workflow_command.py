"""GitHub Actions workflow commands such as ``::set-output name=x::y``."""

from __future__ import annotations

from dataclasses import dataclass, field

from forge.rangemap import ascending

COMMAND_DEBUG = "debug"
COMMAND_GROUP = "group"
COMMAND_END_GROUP = "endgroup"
COMMAND_SAVE_STATE = "save-state"
COMMAND_SET_OUTPUT = "set-output"
COMMAND_NOTICE = "notice"
COMMAND_WARNING = "warning"
COMMAND_ERROR = "error"
COMMAND_ADD_MASK = "add-mask"
COMMAND_ADD_PATH = "add-path"
COMMAND_ECHO = "echo"
COMMAND_STOP_COMMANDS = "stop-commands"


class WorkflowCommandError(ValueError):
    """Raised when text is not a workflow command."""


@dataclass
class WorkflowCommand:
    """A single workflow command with its parameters and value."""

    command: str
    parameters: dict[str, str] = field(default_factory=dict)
    value: str = ""

    def __str__(self) -> str:
        params = ",".join(f"{k}={v}" for k, v in ascending(self.parameters or {}))
        head = f"::{self.command}"
        if params:
            head += " " + params
        return f"{head}::{self.value}"

    def get_name(self) -> str:
        """Return the ``name`` parameter, or an empty string."""
        return (self.parameters or {}).get("name", "")


def parse_workflow_command(text: str | bytes) -> WorkflowCommand:
    """Parse a workflow command such as ``::set-env name=HELLO::there``."""
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    if not text.startswith("::"):
        raise WorkflowCommandError(f"not a workflow command: {text}")

    parts = text.split("::")
    command_and_params = parts[1].split(" ")
    command = command_and_params[0]

    parameters: dict[str, str] = {}
    if len(command_and_params) > 1:
        for param in command_and_params[1].split(","):
            fields = param.split("=")
            if len(fields) > 1:
                parameters[fields[0]] = fields[1]

    value = parts[2] if len(parts) > 2 else ""
    return WorkflowCommand(command=command, parameters=parameters, value=value)