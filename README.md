# forge

Data structures and parsers for running steps from CI systems, GitHub
Actions in particular, on your own machine inside containers.

## What is in the package

- `forge.core`: the `Mount` value type (`source`, `destination`) and
  `semver(revision, modified)`, which extends the version core with the
  first seven characters of a VCS revision and a trailing `*` for a
  modified tree.
- `forge.rangemap`: `ascending(mapping)` and `descending(mapping)` yield a
  mapping's key-value pairs sorted by key.
- `forge.githubactions.env_file`: `parse_env_file` reads `$GITHUB_ENV`
  files, including the multi-line `KEY<<delimiter` form; malformed input
  raises `EnvFileError`.
- `forge.githubactions.path_file`: `parse_path_file` turns a
  `$GITHUB_PATH` file into a colon-separated `PATH` value.
- `forge.githubactions.workflow_command`: `WorkflowCommand` and
  `parse_workflow_command` for `::command name=value::text` lines; text
  that is not a command raises `WorkflowCommandError`.
- `forge.githubactions.workflow_command_writer`: `WorkflowCommandWriter`
  reads a step's output line by line, acts on its workflow commands
  (`set-output`, `save-state`, `add-mask`, `add-path`, `echo`,
  `stop-commands`, ...), masks registered values with `***` and writes
  what should be shown to `out`.
- `forge.githubactions.context`: `GlobalContext` and the `github`, `job`,
  `steps`, `runner` and `needs` contexts. Values are looked up by dotted
  key with `get_string`, e.g. `ctx.get_string("env.HOME")`.
- `forge.githubactions.expand`: `expand` and `expand_string` replace
  `${{ name }}` expressions through a lookup function.
- `forge.githubactions.urls`: `api_url_from_base_url` and
  `graphql_url_from_base_url`, plus `DEFAULT_URL`, `DEFAULT_API_URL` and
  `DEFAULT_GRAPHQL_URL`.
- `forge.githubactions.uses`: `parse_uses` for `uses:` references such as
  `owner/repo@v1`, `./local/action` or `.`; `open_uses_metadata` and
  `open_directory_metadata` open a local `action.yml`/`action.yaml`.
- `forge.githubactions.metadata`: `Metadata.from_stream` loads action
  metadata from YAML; `inputs_from_with` resolves inputs against a step's
  `with` and the declared defaults.
- `forge.bin`: container paths (`WORKING_DIR`, `FORGE_SOCK`, `SHIM_PATH`,
  `SCRIPT_PATH`), `has_shebang`, and `new_tar_archive` /
  `new_script_tar_archive`, which build a gzipped tar holding one
  executable file.
- `forge.contaminate`: the immutable `Contamination` state (shared mounts
  and stdin) with `with_mounts`, `mounts_from`,
  `override_with_mounts_from`, `with_stdin` and `stdin_from`.
- `forge.hooks`: `Hook`, a thread-safe list of listeners called with
  `dispatch(ctx, value)`.

## Installation

```
pip install .
```

## Examples

Parse an environment file:

```python
import io
from forge.githubactions.env_file import parse_env_file

env = parse_env_file(io.StringIO("HELLO=there\nYOU=\"are a\"\n"))
assert env == {"HELLO": "there", "YOU": "are a"}
```

Parse a workflow command:

```python
from forge.githubactions.workflow_command import parse_workflow_command

command = parse_workflow_command("::save-state name=isPost::true")
assert command.get_name() == "isPost"
assert str(command) == "::save-state name=isPost::true"
```

Handle a step's output:

```python
import io
from forge.githubactions.workflow_command_writer import WorkflowCommandWriter

out = io.StringIO()
writer = WorkflowCommandWriter(out=out)
writer.write("::warning::careful\n")
assert out.getvalue() == "[warning] careful\n"
```

Parse a `uses:` reference:

```python
from forge.githubactions.uses import parse_uses

uses = parse_uses("actions/checkout@v4")
assert uses.owner() == "actions"
assert uses.repository() == "checkout"
assert uses.is_remote()
```

Expand expressions:

```python
from forge.githubactions.expand import expand_string

assert expand_string("hi ${{ name }}", lambda key: "there") == "hi there"
```

API URLs:

```python
from forge.githubactions.urls import api_url_from_base_url

assert api_url_from_base_url("https://github.com/") == "https://api.github.com/"
```

## What the package does not do

- It has no container runtime: it does not talk to Docker or create,
  start or run containers.
- It has no command-line program.
- It does not download actions from GitHub; only local action metadata
  can be opened.
- `GlobalContext` starts from defaults; it is not filled in from
  environment variables or a git repository.
- It does not ship a shim executable; `new_tar_archive` packs whatever
  content you give it.

## Running the tests

```
pip install .[test]
pytest
```