"""A writer that interprets workflow commands in a step's output."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from forge.githubactions.context import GlobalContext, StepContext
from forge.githubactions.workflow_command import (
    COMMAND_ADD_MASK,
    COMMAND_ADD_PATH,
    COMMAND_DEBUG,
    COMMAND_ECHO,
    COMMAND_END_GROUP,
    COMMAND_SAVE_STATE,
    COMMAND_SET_OUTPUT,
    COMMAND_STOP_COMMANDS,
    COMMAND_WARNING,
    WorkflowCommand,
    WorkflowCommandError,
    parse_workflow_command,
)

_DEPRECATION_LINK = (
    "https://github.blog/changelog/"
    "2022-10-11-github-actions-deprecating-save-state-and-set-output-commands/"
)


def _deprecation_warning(command: str) -> str:
    return (
        f"[{COMMAND_WARNING}] The `{command}` command is deprecated and will be disabled soon. "
        f"Please upgrade to using Environment Files. For more information see: {_DEPRECATION_LINK}"
    )


def _scan_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class WorkflowCommandWriter:
    """Holds the state of workflow commands throughout a step's execution."""

    global_context: GlobalContext | None = None
    id: str = ""
    stop_commands_tokens: dict[str, bool] = field(default_factory=dict)
    debug: bool = False
    masks: list[str] = field(default_factory=list)
    out: TextIO | None = None

    def _handle_command(self, command: WorkflowCommand) -> str:
        if command.command in self.stop_commands_tokens:
            self.stop_commands_tokens[command.command] = False
            return ""

        if any(self.stop_commands_tokens.values()):
            return str(command)

        if self.global_context is None:
            self.global_context = GlobalContext()
        ctx = self.global_context

        name = command.command
        if name == COMMAND_SET_OUTPUT:
            step = ctx.steps_context.setdefault(self.id, StepContext())
            step.outputs[command.get_name()] = command.value
            return _deprecation_warning(name)
        if name == COMMAND_STOP_COMMANDS:
            self.stop_commands_tokens[command.value] = True
        elif name == COMMAND_SAVE_STATE:
            ctx.env_context[f"STATE_{command.get_name()}"] = command.value
            return _deprecation_warning(name)
        elif name == COMMAND_ECHO:
            if command.value == "on":
                self.debug = True
            elif command.value == "off":
                self.debug = False
            else:
                self.debug = not self.debug
        elif name == COMMAND_ADD_MASK:
            self.masks.append(command.value)
        elif name == COMMAND_ADD_PATH:
            existing = ctx.env_context.get("PATH", "")
            ctx.env_context["PATH"] = ":".join(p for p in (command.value, existing) if p)
        elif name == COMMAND_END_GROUP:
            return f"[{COMMAND_END_GROUP}]"
        elif name == COMMAND_DEBUG:
            if self.debug:
                return f"[{COMMAND_DEBUG}] {command.value}"
        else:
            return f"[{name}] {command.value}"
        return ""

    def issue_command(self, command: WorkflowCommand) -> int:
        """Write ``command`` as a line, as if printed by the step."""
        return self.write(str(command) + "\n")

    def write(self, data: str | bytes) -> int:
        """Process each line of ``data``, writing what should be shown to ``out``."""
        if not data:
            return 0
        text = data.decode("utf-8") if isinstance(data, bytes) else data
        out = self.out if self.out is not None else sys.stdout

        for line in _scan_lines(text):
            for mask in self.masks:
                line = line.replace(mask, "***")

            result = line
            if line and not line.startswith("##[add-matcher]"):
                try:
                    result = self._handle_command(parse_workflow_command(line))
                except WorkflowCommandError:
                    pass

            if result:
                out.write(result + "\n")

        return len(data)