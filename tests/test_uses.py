import pytest

from forge.githubactions.metadata import Metadata
from forge.githubactions.uses import (
    Uses,
    UsesError,
    open_directory_metadata,
    open_uses_metadata,
    parse_uses,
)


@pytest.mark.parametrize(
    "uses, expected_path, expected_version, expected_local",
    [
        ("./frantjc/forge", "./frantjc/forge", "", True),
        (".", ".", "", True),
        ("frantjc/forge@v0", "frantjc/forge", "v0", False),
    ],
)
def test_parse(uses, expected_path, expected_version, expected_local):
    actual = parse_uses(uses)
    assert actual.path == expected_path
    assert actual.version == expected_version
    assert actual.is_local() is expected_local
    assert actual.is_remote() is not expected_local


def test_parse_absolute_path():
    actual = parse_uses("/opt//actions/thing/")
    assert actual.path == "/opt/actions/thing"
    assert actual.is_local()


def test_parse_rejects_unversioned_reference():
    with pytest.raises(UsesError):
        parse_uses("frantjc/forge")
    with pytest.raises(UsesError):
        parse_uses("a/b@c@d")


def test_remote_parts():
    uses = parse_uses("frantjc/forge/sub/dir@v1")
    assert uses.owner() == "frantjc"
    assert uses.repository() == "forge"
    assert uses.action_path() == "sub/dir"


def test_remote_without_action_path():
    uses = parse_uses("frantjc/forge@v0")
    assert uses.action_path() == ""


def test_local_has_no_remote_parts():
    uses = parse_uses("./frantjc/forge")
    assert uses.owner() == ""
    assert uses.repository() == ""
    assert uses.action_path() == ""


def test_str_and_json():
    uses = parse_uses("frantjc/forge@v0")
    assert str(uses) == "frantjc/forge@v0"
    assert uses.to_json() == '"frantjc/forge@v0"'
    assert str(parse_uses(".")) == "."


def test_str_round_trip():
    uses = parse_uses("frantjc/forge/sub@v2")
    assert parse_uses(str(uses)) == uses


def test_open_directory_metadata(tmp_path):
    (tmp_path / "action.yaml").write_text("name: from-yaml\n")
    with open_directory_metadata(tmp_path) as stream:
        assert Metadata.from_stream(stream).name == "from-yaml"


def test_open_directory_metadata_prefers_yml(tmp_path):
    (tmp_path / "action.yaml").write_text("name: from-yaml\n")
    (tmp_path / "action.yml").write_text("name: from-yml\n")
    with open_directory_metadata(tmp_path) as stream:
        assert Metadata.from_stream(stream).name == "from-yml"


def test_open_directory_metadata_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_directory_metadata(tmp_path)


def test_open_uses_metadata_local(tmp_path):
    (tmp_path / "action.yml").write_text("name: local\n")
    with open_uses_metadata(parse_uses(str(tmp_path))) as stream:
        assert Metadata.from_stream(stream).name == "local"


def test_open_uses_metadata_remote():
    with pytest.raises(UsesError):
        open_uses_metadata(Uses(path="frantjc/forge", version="v0"))