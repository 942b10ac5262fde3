import pytest

from forge.githubactions.context import (
    SECRET_ACTIONS_RUNNER_DEBUG,
    SECRET_ACTIONS_STEP_DEBUG,
    SECRET_RUNNER_DEBUG,
    GitHubContext,
    GlobalContext,
    JobContext,
    JobContextContainer,
    JobContextService,
    NeedContext,
    RunnerContext,
    StepContext,
)


@pytest.fixture
def ctx():
    return GlobalContext(
        github_context=GitHubContext(
            ref="refs/heads/main", sha="abc123", run_number=7, ref_protected=True
        ),
        env_context={"EXAMPLE": "value"},
        job_context=JobContext(
            container=JobContextContainer(id="cid", network="net"),
            services={"db": JobContextService(id="sid", network="snet", ports={"5432": "15432"})},
            status="success",
        ),
        steps_context={"build": StepContext(outputs={"digest": "sha256:x"}, outcome="ok")},
        runner_context=RunnerContext(name="runner", os="Linux", arch="X64"),
        inputs_context={"name": "world"},
        secrets_context={"token": "token"},
        needs_context={"setup": NeedContext(outputs={"version": "1.2"})},
    )


@pytest.mark.parametrize(
    "key, expected",
    [
        ("github.ref", "refs/heads/main"),
        ("github.sha", "abc123"),
        ("github.run_number", "7"),
        ("github.ref_protected", "true"),
        ("env.EXAMPLE", "value"),
        ("job.container.id", "cid"),
        ("job.container.network", "net"),
        ("job.services.db.id", "sid"),
        ("job.services.db.ports.any.5432", "15432"),
        ("job.status", "success"),
        ("steps.build.outputs.digest", "sha256:x"),
        ("steps.build.outcome", "ok"),
        ("runner.os", "Linux"),
        ("runner.arch", "X64"),
        ("inputs.name", "world"),
        ("secrets.token", "token"),
        ("needs.setup.outputs.version", "1.2"),
    ],
)
def test_get_string(ctx, key, expected):
    assert ctx.get_string(key) == expected


@pytest.mark.parametrize(
    "key",
    ["unknown.key", "env", "env.MISSING", "steps.build", "steps.missing.outputs.x", "github.nope", "needs.setup"],
)
def test_get_string_missing_is_empty(ctx, key):
    assert ctx.get_string(key) == ""


def test_job_without_container_is_empty():
    assert JobContext().get_string("container.id") == ""


def test_add_env_merges(ctx):
    ctx.add_env({"OTHER": "x", "EXAMPLE": "new"})
    assert ctx.env_context == {"EXAMPLE": "new", "OTHER": "x"}


def test_add_env_on_empty():
    ctx = GlobalContext()
    ctx.add_env({"A": "b"})
    assert ctx.get_string("env.A") == "b"


def test_enable_debug():
    ctx = GlobalContext()
    assert ctx.debug_enabled() is False
    assert ctx.enable_debug() is ctx
    assert ctx.debug_enabled() is True
    assert ctx.secrets_context[SECRET_ACTIONS_STEP_DEBUG] == "true"
    assert ctx.secrets_context[SECRET_RUNNER_DEBUG] == "1"
    assert ctx.secrets_context[SECRET_ACTIONS_RUNNER_DEBUG] == "true"


@pytest.mark.parametrize("value, expected", [("1", True), ("True", True), ("0", False), ("yes", False)])
def test_debug_enabled_parses_bool(value, expected):
    ctx = GlobalContext(secrets_context={SECRET_ACTIONS_STEP_DEBUG: value})
    assert ctx.debug_enabled() is expected