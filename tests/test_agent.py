import subprocess
from unittest import mock

import pytest

from pockit.agent import build_command, main


def test_builder_includes_flags_and_prompt():
    cmd, args = build_command("gpt-5.1-codex-mini", "Hello Codex")
    assert cmd == "codex"
    assert args == ["exec", "--full-auto", "-m", "gpt-5.1-codex-mini", "Hello Codex"]


def test_builder_uses_given_model():
    _, args = build_command("gpt-5.4", "Hi")
    assert args[2:4] == ["-m", "gpt-5.4"]


def _completed(code):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_main_joins_prompt_and_uses_default_model(capsys):
    with mock.patch("subprocess.run", return_value=_completed(0)) as run:
        assert main(["Hello", "Codex"]) == 0
    run.assert_called_once_with(
        ["codex", "exec", "--full-auto", "-m", "gpt-5.1-codex-mini", "Hello Codex"],
        check=False,
    )
    out = capsys.readouterr().out
    assert out == (
        "Running agent command: codex exec --full-auto -m gpt-5.1-codex-mini Hello Codex\n"
    )


def test_main_model_option(capsys):
    with mock.patch("subprocess.run", return_value=_completed(0)) as run:
        assert main(["--model", "other-model", "do it"]) == 0
    assert run.call_args.args[0] == [
        "codex", "exec", "--full-auto", "-m", "other-model", "do it",
    ]
    out = capsys.readouterr().out
    assert out == "Running agent command: codex exec --full-auto -m other-model do it\n"


def test_main_propagates_failure_code():
    with mock.patch("subprocess.run", return_value=_completed(3)):
        assert main(["x"]) == 3


def test_main_signal_exit_maps_to_one():
    with mock.patch("subprocess.run", return_value=_completed(-9)):
        assert main(["x"]) == 1


def test_main_reports_launch_error(capsys):
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("codex not found")):
        assert main(["x"]) == 1
    assert "pockit-agent: codex not found" in capsys.readouterr().err


def test_main_requires_prompt():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2