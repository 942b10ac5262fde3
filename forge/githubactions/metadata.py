"""GitHub Action metadata (``action.yml``) and workflow steps."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import IO, Any

import yaml

RUNS_USING_DOCKER_IMAGE_PREFIX = "docker://"
RUNS_USING_DOCKER = "docker"
RUNS_USING_COMPOSITE = "composite"
RUNS_USING_NODE12 = "node12"
RUNS_USING_NODE16 = "node16"
RUNS_USING_NODE20 = "node20"


class MetadataError(ValueError):
    """Raised when action metadata is malformed or inputs do not fit it."""


def _lookup(data: Mapping[Any, Any], key: str) -> Any:
    """Return ``data[key]``, falling back to a case-insensitive match."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for candidate, value in data.items():
        if isinstance(candidate, str) and candidate.lower() == lowered:
            return value
    return None


def _string(value: Any, where: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise MetadataError(f"{where}: expected a string")


def _boolean(value: Any, where: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise MetadataError(f"{where}: expected a boolean")


def _mapping(value: Any, where: str) -> Mapping[Any, Any]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return value
    raise MetadataError(f"{where}: expected a mapping")


def _string_map(value: Any, where: str) -> dict[str, str]:
    return {
        str(key): _string(item, f"{where}.{key}")
        for key, item in _mapping(value, where).items()
    }


def _string_list(value: Any, where: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [_string(item, where) for item in value]
    raise MetadataError(f"{where}: expected a list")


@dataclass
class Step:
    """A step of a GitHub Actions workflow or composite action."""

    shell: str = ""
    if_: str = ""
    name: str = ""
    id: str = ""
    env: dict[str, str] = field(default_factory=dict)
    working_dir: str = ""
    uses: str = ""
    with_: dict[str, str] = field(default_factory=dict)
    run: str = ""


@dataclass
class MetadataInput:
    """An input declared by an action."""

    description: str = ""
    required: bool = False
    default: str = ""
    deprecation_message: str = ""


@dataclass
class MetadataOutput:
    """An output declared by an action."""

    description: str = ""


@dataclass
class MetadataRuns:
    """How an action runs."""

    plugin: str = ""
    using: str = ""
    pre: str = ""
    main: str = ""
    post: str = ""
    image: str = ""
    pre_entrypoint: str = ""
    entrypoint: str = ""
    post_entrypoint: str = ""
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    steps: list[Step] = field(default_factory=list)


def _step_from(value: Any) -> Step:
    data = _mapping(value, "runs.steps")
    return Step(
        shell=_string(_lookup(data, "shell"), "shell"),
        if_=_string(_lookup(data, "if"), "if"),
        name=_string(_lookup(data, "name"), "name"),
        id=_string(_lookup(data, "id"), "id"),
        env=_string_map(_lookup(data, "env"), "env"),
        working_dir=_string(_lookup(data, "working_dir"), "working_dir"),
        uses=_string(_lookup(data, "uses"), "uses"),
        with_=_string_map(_lookup(data, "with"), "with"),
        run=_string(_lookup(data, "run"), "run"),
    )


def _input_from(value: Any, name: str) -> MetadataInput:
    data = _mapping(value, f"inputs.{name}")
    return MetadataInput(
        description=_string(_lookup(data, "description"), "description"),
        required=_boolean(_lookup(data, "required"), "required"),
        default=_string(_lookup(data, "default"), "default"),
        deprecation_message=_string(
            _lookup(data, "deprecation_message"), "deprecation_message"
        ),
    )


def _output_from(value: Any, name: str) -> MetadataOutput:
    data = _mapping(value, f"output.{name}")
    return MetadataOutput(
        description=_string(_lookup(data, "description"), "description")
    )


def _runs_from(value: Any) -> MetadataRuns | None:
    if value is None:
        return None
    data = _mapping(value, "runs")
    steps = _lookup(data, "steps")
    if steps is not None and not isinstance(steps, list):
        raise MetadataError("runs.steps: expected a list")
    return MetadataRuns(
        plugin=_string(_lookup(data, "plugin"), "runs.plugin"),
        using=_string(_lookup(data, "using"), "runs.using"),
        pre=_string(_lookup(data, "pre"), "runs.pre"),
        main=_string(_lookup(data, "main"), "runs.main"),
        post=_string(_lookup(data, "post"), "runs.post"),
        image=_string(_lookup(data, "image"), "runs.image"),
        pre_entrypoint=_string(_lookup(data, "pre_entrypoint"), "runs.pre_entrypoint"),
        entrypoint=_string(_lookup(data, "entrypoint"), "runs.entrypoint"),
        post_entrypoint=_string(_lookup(data, "post_entrypoint"), "runs.post_entrypoint"),
        args=_string_list(_lookup(data, "args"), "runs.args"),
        env=_string_map(_lookup(data, "env"), "runs.env"),
        steps=[_step_from(step) for step in steps or []],
    )


@dataclass
class Metadata:
    """The metadata of a GitHub Action."""

    name: str = ""
    author: str = ""
    description: str = ""
    inputs: dict[str, MetadataInput] = field(default_factory=dict)
    output: dict[str, MetadataOutput] = field(default_factory=dict)
    runs: MetadataRuns | None = None

    @classmethod
    def from_stream(cls, stream: IO[str] | IO[bytes]) -> Metadata:
        """Read action metadata from a YAML stream."""
        try:
            document = yaml.safe_load(stream.read())
        except yaml.YAMLError as err:
            raise MetadataError(f"parse action metadata: {err}") from err
        if document is None:
            return cls()
        if not isinstance(document, Mapping):
            raise MetadataError("parse action metadata: expected a mapping")
        return cls(
            name=_string(_lookup(document, "name"), "name"),
            author=_string(_lookup(document, "author"), "author"),
            description=_string(_lookup(document, "description"), "description"),
            inputs={
                str(key): _input_from(value, str(key))
                for key, value in _mapping(_lookup(document, "inputs"), "inputs").items()
            },
            output={
                str(key): _output_from(value, str(key))
                for key, value in _mapping(_lookup(document, "output"), "output").items()
            },
            runs=_runs_from(_lookup(document, "runs")),
        )

    def inputs_from_with(self, with_: Mapping[str, str] | None) -> dict[str, str]:
        """Resolve the action's inputs from a step's ``with`` and input defaults."""
        given = dict(with_ or {})
        for name in given:
            if name not in self.inputs:
                raise MetadataError(
                    f"unknown input {name} given with action {self.name}"
                )
        inputs: dict[str, str] = {}
        for name, declared in self.inputs.items():
            if name in given:
                inputs[name] = given[name]
            elif declared.default != "":
                inputs[name] = declared.default
            elif declared.required:
                raise MetadataError(f"required input {name} is missing")
        return inputs

    def is_composite(self) -> bool:
        """Return whether the action is a composite action."""
        return self.runs is not None and self.runs.using == RUNS_USING_COMPOSITE

    def is_dockerfile(self) -> bool:
        """Return whether the action runs from a Dockerfile rather than an image."""
        return (
            self.runs is not None
            and self.runs.using == RUNS_USING_DOCKER
            and not self.runs.image.startswith(RUNS_USING_DOCKER_IMAGE_PREFIX)
        )