import json
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

import main as cli

ENV_VARS = ("TAGLIST_DELIMITER", "TAGLIST_GLUE", "TAGLIST_FORCE_LOWERCASE", "TAGLIST_FORCE_PARAMETERIZE")


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    # no configs/tagging.yaml, no .env, no TAGLIST_* leaking in
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield tmp_path
    # main() reconfigures the root logger
    root.handlers[:] = handlers
    root.setLevel(level)


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str]:
    code = cli.main(list(argv))
    return code, capsys.readouterr().out


def test_parse_text_output(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code, out = _run(capsys, "parse", "One , Two,  Three")

    assert code == 0
    assert out == "One\nTwo\nThree\n"


def test_parse_json_output(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code, out = _run(capsys, "--format", "json", "parse", 'a, "b,c"')

    assert code == 0
    assert json.loads(out) == [{"source": "argv[1]", "input": 'a, "b,c"', "tags": ["b,c", "a"], "output": '"b,c", a'}]


def test_format_command(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code, out = _run(capsys, "format", "Round", "Square,Cube")

    assert code == 0
    assert out == 'Round, "Square,Cube"\n'


def test_merge_with_flags(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code, out = _run(capsys, "--lowercase", "--glue", " | ", "merge", "A, b", "B, c")

    assert code == 0
    assert out == "a | b | c\n"


def test_repeated_delimiter_flag(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code, out = _run(capsys, "--delimiter", ",", "--delimiter", ";", "parse", "a,b;c")

    assert code == 0
    assert out == "a\nb\nc\n"


def test_env_override(isolated: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TAGLIST_FORCE_PARAMETERIZE", "true")

    code, out = _run(capsys, "merge", "Crème Brûlée, Hello World")

    assert code == 0
    assert out == "creme-brulee, hello-world\n"


def test_config_file_and_input_file(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = isolated / "custom.yaml"
    config.write_text("tagging:\n  delimiter: ';'\n", encoding="utf-8")
    data = isolated / "tags.txt"
    data.write_text("a; b\n\n  c ;a\n", encoding="utf-8")

    code, out = _run(capsys, "--config", str(config), "parse", "--input", str(data))

    assert code == 0
    assert out == "a\nb\n\nc\na\n"


def test_default_config_file_is_picked_up(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (isolated / "configs").mkdir()
    (isolated / "configs" / "tagging.yaml").write_text("tagging:\n  force_lowercase: true\n", encoding="utf-8")

    code, out = _run(capsys, "merge", "A, a, B")

    assert code == 0
    assert out == "a, b\n"


def test_missing_config_file_is_a_config_error(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--config", "missing.yaml", "parse", "x"])

    assert code == cli.EXIT_CONFIG_ERROR
    assert "configuration error" in capsys.readouterr().err


def test_invalid_config_value_is_a_config_error(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["--glue", "", "parse", "x"])

    assert code == cli.EXIT_CONFIG_ERROR


def test_missing_input_file_is_a_runtime_error(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["parse", "--input", "nope.txt"])

    assert code == cli.EXIT_RUNTIME_ERROR


def test_malformed_config_file_is_a_config_error(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = isolated / "broken.yaml"
    config.write_text("tagging:\n  delimiter: [,\n", encoding="utf-8")

    code = cli.main(["--config", str(config), "parse", "x"])

    assert code == cli.EXIT_CONFIG_ERROR
    assert "Invalid YAML" in capsys.readouterr().err


def test_directory_as_config_is_a_config_error(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (isolated / "confdir").mkdir()

    code = cli.main(["--config", "confdir", "parse", "x"])

    assert code == cli.EXIT_CONFIG_ERROR
    assert "configuration error" in capsys.readouterr().err


def test_directory_as_input_is_a_runtime_error(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (isolated / "datadir").mkdir()

    code = cli.main(["parse", "--input", "datadir"])

    assert code == cli.EXIT_RUNTIME_ERROR


def test_top_level_delimiter_in_config_file(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = isolated / "flat.yaml"
    config.write_text("delimiter: ';'\n", encoding="utf-8")

    code, out = _run(capsys, "--config", str(config), "parse", "a,b; c")

    assert code == 0
    assert out == "a,b\nc\n"


def test_unknown_config_key_is_a_config_error(isolated: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = isolated / "typo.yaml"
    config.write_text("output_fromat: json\n", encoding="utf-8")

    code = cli.main(["--config", str(config), "parse", "x"])

    assert code == cli.EXIT_CONFIG_ERROR
    assert "output_fromat" in capsys.readouterr().err
