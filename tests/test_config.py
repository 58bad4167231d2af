import pytest

from submittest.config import TaskConfig, parse_assignments, resolve_parameters
from submittest.errors import ParameterError, UnknownParameterError
from submittest.model import DEFAULT_BRANCH, DEFAULT_MESSAGE, Parameters


def test_defaults_have_no_quote_characters():
    params = resolve_parameters({}, environ={})
    assert params == Parameters(message="Test: Work in Progress", branch="master")
    assert '"' not in DEFAULT_MESSAGE
    assert '"' not in DEFAULT_BRANCH


def test_overrides_replace_defaults():
    params = resolve_parameters({"MSG": "fix bug", "BRANCH": "main"}, environ={})
    assert params.message == "fix bug"
    assert params.branch == "main"


def test_single_override_keeps_other_default():
    params = resolve_parameters({"BRANCH": "dev"})
    assert params.message == DEFAULT_MESSAGE
    assert params.branch == "dev"


def test_environment_used_when_not_overridden():
    params = resolve_parameters({"MSG": "from cli"}, environ={"MSG": "from env", "BRANCH": "release"})
    assert params.message == "from cli"
    assert params.branch == "release"


def test_unrelated_environment_variables_are_ignored():
    params = resolve_parameters({}, environ={"HOME": "/root", "PATH": "/bin"})
    assert params == Parameters()


def test_unknown_override_is_rejected():
    with pytest.raises(UnknownParameterError) as exc:
        resolve_parameters({"MSG": "x", "TARGET": "y"}, environ={})
    assert "TARGET" in str(exc.value)
    assert "BRANCH" in str(exc.value)


def test_parameter_names_are_case_sensitive():
    with pytest.raises(UnknownParameterError):
        resolve_parameters({"msg": "x"})


def test_parse_assignments():
    assert parse_assignments(["MSG=fix bug", "BRANCH=main"]) == {"MSG": "fix bug", "BRANCH": "main"}
    assert parse_assignments(["MSG=a=b"]) == {"MSG": "a=b"}
    assert parse_assignments(["MSG="]) == {"MSG": ""}
    assert parse_assignments(["BRANCH=a", "BRANCH=b"]) == {"BRANCH": "b"}


@pytest.mark.parametrize("word", ["MSG", "=value", ""])
def test_parse_assignments_rejects_malformed_words(word):
    with pytest.raises(ParameterError):
        parse_assignments([word])


def test_task_config_defaults():
    config = TaskConfig()
    assert config.check_command == ("cargo", "check")
    assert config.commit_message == "submit & test"
    assert config.remote == "origin"
    assert config.timeout is None


def test_task_config_validation():
    with pytest.raises(ValueError):
        TaskConfig(check_command=())
    with pytest.raises(ValueError):
        TaskConfig(timeout=0)


def test_branch_starting_with_dash_is_rejected():
    with pytest.raises(ParameterError) as exc:
        resolve_parameters({"BRANCH": "--force"}, environ={})
    assert "--force" in str(exc.value)


def test_branch_from_environment_starting_with_dash_is_rejected():
    with pytest.raises(ParameterError):
        resolve_parameters({}, environ={"BRANCH": "-f"})


def test_branch_with_inner_dash_is_accepted():
    assert resolve_parameters({"BRANCH": "feature-x"}).branch == "feature-x"


def test_remote_starting_with_dash_is_rejected():
    with pytest.raises(ValueError):
        TaskConfig(remote="--mirror")
