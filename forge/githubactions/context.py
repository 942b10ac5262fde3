"""Contexts available to GitHub Actions expressions such as ``${{ github.sha }}``."""

from __future__ import annotations

from dataclasses import dataclass, field

ARCH_X86 = "X86"
ARCH_X64 = "X64"
ARCH_ARM = "ARM"
ARCH_ARM64 = "ARM64"

OS_LINUX = "Linux"
OS_WINDOWS = "Windows"
OS_DARWIN = "macOS"

REF_TYPE_TAG = "tag"
REF_TYPE_BRANCH = "branch"

SECRET_ACTIONS_STEP_DEBUG = "ACTIONS_STEP_DEBUG"
SECRET_ACTIONS_RUNNER_DEBUG = "ACTIONS_RUNNER_DEBUG"
SECRET_RUNNER_DEBUG = "RUNNER_DEBUG"

DEFAULT_BRANCH = "main"
DEFAULT_REMOTE = "origin"

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})


@dataclass
class GitHubContext:
    """Values of the ``github`` context."""

    action: str = ""
    action_path: str = ""
    actor: str = ""
    base_ref: str = ""
    event: str = ""
    event_name: str = ""
    event_path: str = ""
    head_ref: str = ""
    job: str = ""
    ref: str = ""
    ref_name: str = ""
    ref_protected: bool = False
    ref_type: str = ""
    repository: str = ""
    repository_owner: str = ""
    run_id: str = ""
    run_number: int = 0
    run_attempt: int = 0
    server_url: str = ""
    sha: str = ""
    token: str = ""
    workflow: str = ""
    workspace: str = ""

    def get_string(self, key: str) -> str:
        """Look up a dotted key such as ``ref`` in this context."""
        first = key.split(".")[0]
        if first == "ref_protected":
            return "true" if self.ref_protected else "false"
        if first in ("run_number", "run_attempt"):
            return str(getattr(self, first))
        if first in _GITHUB_STRING_FIELDS:
            return getattr(self, first)
        return ""


_GITHUB_STRING_FIELDS = frozenset(
    {
        "action",
        "action_path",
        "actor",
        "base_ref",
        "event",
        "event_name",
        "event_path",
        "head_ref",
        "job",
        "ref",
        "ref_name",
        "ref_type",
        "repository",
        "repository_owner",
        "run_id",
        "server_url",
        "sha",
        "token",
        "workflow",
        "workspace",
    }
)


@dataclass
class JobContextContainer:
    """Values of the ``job.container`` context."""

    id: str = ""
    network: str = ""


@dataclass
class JobContextService:
    """Values of a ``job.services.<name>`` context."""

    id: str = ""
    network: str = ""
    ports: dict[str, str] = field(default_factory=dict)


@dataclass
class JobContext:
    """Values of the ``job`` context."""

    container: JobContextContainer | None = None
    services: dict[str, JobContextService] = field(default_factory=dict)
    status: str = ""

    def get_string(self, key: str) -> str:
        """Look up a dotted key such as ``container.id`` in this context."""
        keys = key.split(".")
        head = keys[0]
        if head == "container":
            if len(keys) > 1 and self.container is not None:
                if keys[1] == "id":
                    return self.container.id
                if keys[1] == "network":
                    return self.container.network
        elif head == "services":
            if len(keys) > 2:
                service = self.services.get(keys[1])
                if service is not None:
                    if keys[2] == "id":
                        return service.id
                    if keys[2] == "network":
                        return service.network
                    if keys[2] == "ports" and len(keys) > 4:
                        return service.ports.get(keys[4], "")
        elif head == "status":
            return self.status
        return ""


@dataclass
class StepContext:
    """Values of a ``steps.<id>`` context."""

    outputs: dict[str, str] = field(default_factory=dict)
    conclusion: str = ""
    outcome: str = ""

    def get_string(self, key: str) -> str:
        """Look up a dotted key such as ``outputs.digest`` in this context."""
        keys = key.split(".")
        head = keys[0]
        if head == "outputs":
            if len(keys) > 1:
                return self.outputs.get(keys[1], "")
        elif head == "outcome":
            return self.outcome
        elif head == "conclusion":
            return self.conclusion
        return ""


@dataclass
class RunnerContext:
    """Values of the ``runner`` context."""

    name: str = ""
    os: str = ""
    arch: str = ""
    temp: str = ""
    tool_cache: str = ""

    def get_string(self, key: str) -> str:
        """Look up a key such as ``os`` in this context."""
        head = key.split(".")[0]
        if head in ("name", "os", "arch", "temp", "tool_cache"):
            return getattr(self, head)
        return ""


@dataclass
class NeedContext:
    """Values of a ``needs.<job>`` context."""

    outputs: dict[str, str] = field(default_factory=dict)

    def get_string(self, key: str) -> str:
        """Look up a dotted key such as ``outputs.digest`` in this context."""
        keys = key.split(".")
        if keys[0] == "outputs" and len(keys) > 1:
            return self.outputs.get(keys[1], "")
        return ""


@dataclass
class GlobalContext:
    """All contexts accessible within a GitHub Action."""

    github_context: GitHubContext = field(default_factory=GitHubContext)
    env_context: dict[str, str] = field(default_factory=dict)
    job_context: JobContext = field(default_factory=JobContext)
    steps_context: dict[str, StepContext] = field(default_factory=dict)
    runner_context: RunnerContext = field(default_factory=RunnerContext)
    inputs_context: dict[str, str] = field(default_factory=dict)
    secrets_context: dict[str, str] = field(default_factory=dict)
    needs_context: dict[str, NeedContext] = field(default_factory=dict)

    def get_string(self, key: str) -> str:
        """Look up a dotted key such as ``env.EXAMPLE`` across all contexts."""
        keys = key.split(".")
        head, rest = keys[0], keys[1:]
        if head == "github" and rest:
            return self.github_context.get_string(".".join(rest))
        if head == "env" and rest:
            return self.env_context.get(rest[0], "")
        if head == "job" and rest:
            return self.job_context.get_string(".".join(rest))
        if head == "steps" and len(rest) > 1:
            step = self.steps_context.get(rest[0])
            return step.get_string(".".join(rest[1:])) if step is not None else ""
        if head == "runner" and rest:
            return self.runner_context.get_string(".".join(rest))
        if head == "inputs" and rest:
            return self.inputs_context.get(rest[0], "")
        if head == "secrets" and rest:
            return self.secrets_context.get(rest[0], "")
        if head == "needs" and len(rest) > 1:
            need = self.needs_context.get(rest[0])
            return need.get_string(".".join(rest[1:])) if need is not None else ""
        return ""

    def add_env(self, env: dict[str, str]) -> None:
        """Merge ``env`` into the environment context."""
        self.env_context.update(env)

    def enable_debug(self) -> GlobalContext:
        """Turn on step and runner debug logging through the secrets context."""
        self.secrets_context[SECRET_ACTIONS_STEP_DEBUG] = "true"
        self.secrets_context[SECRET_RUNNER_DEBUG] = "1"
        self.secrets_context[SECRET_ACTIONS_RUNNER_DEBUG] = "true"
        return self

    def debug_enabled(self) -> bool:
        """Return whether step debug logging is turned on."""
        return self.secrets_context.get(SECRET_ACTIONS_STEP_DEBUG, "") in _TRUE_STRINGS