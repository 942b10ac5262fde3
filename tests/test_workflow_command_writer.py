import io
import uuid

from forge.githubactions.context import GlobalContext
from forge.githubactions.workflow_command import (
    COMMAND_ADD_MASK,
    COMMAND_DEBUG,
    COMMAND_ECHO,
    COMMAND_ERROR,
    COMMAND_NOTICE,
    COMMAND_WARNING,
    WorkflowCommand,
)
from forge.githubactions.workflow_command_writer import WorkflowCommandWriter


def _writer(**kwargs):
    out = io.StringIO()
    return WorkflowCommandWriter(out=out, **kwargs), out


def test_command_debug_off():
    writer, out = _writer()
    writer.issue_command(WorkflowCommand(COMMAND_DEBUG, {}, "hello there"))
    assert out.getvalue() == ""


def test_command_echo():
    writer, out = _writer()
    writer.issue_command(WorkflowCommand(COMMAND_ECHO, {}, "on"))
    assert out.getvalue() == ""
    assert writer.debug is True


def test_command_debug_on():
    writer, out = _writer(debug=True)
    writer.issue_command(WorkflowCommand(COMMAND_DEBUG, {}, "hello there"))
    assert out.getvalue() == "[" + COMMAND_DEBUG + "] hello there\n"


def test_command_notice():
    writer, out = _writer()
    writer.issue_command(WorkflowCommand(COMMAND_NOTICE, {}, "hello there"))
    assert out.getvalue() == "[" + COMMAND_NOTICE + "] hello there\n"


def test_command_warning():
    writer, out = _writer(debug=True)
    writer.issue_command(WorkflowCommand(COMMAND_WARNING, {}, "hello there"))
    assert out.getvalue() == "[" + COMMAND_WARNING + "] hello there\n"


def test_command_error():
    writer, out = _writer(debug=True)
    writer.issue_command(WorkflowCommand(COMMAND_ERROR, {}, "hello there"))
    assert out.getvalue() == "[" + COMMAND_ERROR + "] hello there\n"


def test_mask():
    value = str(uuid.uuid4())
    writer, out = _writer(masks=[value])
    writer.issue_command(WorkflowCommand(COMMAND_WARNING, {}, value))
    assert out.getvalue() == "[" + COMMAND_WARNING + "] ***\n"


def test_add_mask():
    value = str(uuid.uuid4())
    writer, out = _writer()
    writer.issue_command(WorkflowCommand(COMMAND_ADD_MASK, {}, value))
    assert out.getvalue() == ""
    assert writer.masks == [value]


def test_write_returns_length_and_passes_plain_lines():
    writer, out = _writer()
    data = "plain output\n\nmore\n"
    assert writer.write(data) == len(data)
    assert out.getvalue() == "plain output\nmore\n"


def test_write_accepts_bytes():
    writer, out = _writer()
    assert writer.write(b"::notice::hi\n") == len(b"::notice::hi\n")
    assert out.getvalue() == "[notice] hi\n"


def test_add_matcher_passes_through():
    writer, out = _writer()
    writer.write("##[add-matcher]/tmp/matcher.json\n")
    assert out.getvalue() == "##[add-matcher]/tmp/matcher.json\n"


def test_set_output_stores_in_steps_context():
    ctx = GlobalContext()
    writer, out = _writer(global_context=ctx, id="build")
    writer.write("::set-output name=digest::abc\n")
    assert ctx.get_string("steps.build.outputs.digest") == "abc"
    assert out.getvalue().startswith("[warning] The `set-output` command is deprecated")


def test_save_state_stores_in_env_context():
    ctx = GlobalContext()
    writer, out = _writer(global_context=ctx)
    writer.write("::save-state name=isPost::true\n")
    assert ctx.env_context["STATE_isPost"] == "true"
    assert out.getvalue().startswith("[warning] The `save-state` command is deprecated")


def test_stop_commands_and_resume():
    writer, out = _writer()
    writer.write("::stop-commands::tok\n")
    writer.write("::warning::hi\n")
    assert out.getvalue() == "::warning::hi\n"
    writer.write("::tok::\n")
    writer.write("::warning::hi\n")
    assert out.getvalue() == "::warning::hi\n[warning] hi\n"


def test_add_path_prepends():
    ctx = GlobalContext()
    writer, _ = _writer(global_context=ctx)
    writer.write("::add-path::/opt/bin\n")
    assert ctx.env_context["PATH"] == "/opt/bin"
    writer.write("::add-path::/usr/x\n")
    assert ctx.env_context["PATH"] == "/usr/x:/opt/bin"


def test_end_group():
    writer, out = _writer()
    writer.write("::endgroup::\n")
    assert out.getvalue() == "[endgroup]\n"


def test_echo_toggles_and_off():
    writer, _ = _writer()
    writer.write("::echo::maybe\n")
    assert writer.debug is True
    writer.write("::echo::off\n")
    assert writer.debug is False


def test_empty_write():
    writer, out = _writer()
    assert writer.write("") == 0
    assert out.getvalue() == ""