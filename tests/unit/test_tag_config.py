import pytest
from pydantic import ValidationError

from domain.tags import TagConfig, configure, get_config, parameterize, parse_tag_config, reset_config


def test_defaults() -> None:
    cfg = TagConfig()

    assert cfg.delimiter == ","
    assert cfg.delimiters == [","]
    assert cfg.effective_glue == ", "
    assert cfg.force_lowercase is False
    assert cfg.force_parameterize is False
    assert cfg.delimiter_is_pattern is False
    assert cfg.parameterizer is parameterize


@pytest.mark.parametrize(
    "delimiter,glue",
    [
        (",", ", "),
        ("; ", "; "),
        ([" ", ","], " "),
        (["|", ","], "| "),
    ],
)
def test_effective_glue_derivation(delimiter: str | list[str], glue: str) -> None:
    assert TagConfig(delimiter=delimiter).effective_glue == glue


def test_explicit_glue_wins() -> None:
    assert TagConfig(delimiter=";", glue=" / ").effective_glue == " / "


def test_delimiter_pattern_escapes_by_default() -> None:
    assert TagConfig(delimiter=["|", "."]).delimiter_pattern == r"\||\."
    assert TagConfig(delimiter=[r"\s+"], delimiter_is_pattern=True).delimiter_pattern == r"\s+"


def test_tuple_delimiter_is_accepted_as_list() -> None:
    assert TagConfig(delimiter=(",", ";")).delimiters == [",", ";"]


@pytest.mark.parametrize("bad", ["", [], [",", ""]])
def test_empty_delimiters_are_rejected(bad: str | list[str]) -> None:
    with pytest.raises(ValidationError):
        TagConfig(delimiter=bad)


def test_empty_glue_is_rejected() -> None:
    with pytest.raises(ValidationError):
        TagConfig(glue="")


def test_assignment_is_validated() -> None:
    cfg = TagConfig()

    with pytest.raises(ValidationError):
        cfg.delimiter = ""
    with pytest.raises(ValidationError):
        cfg.force_lowercase = "definitely"

    assert cfg.delimiter == ","


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValidationError):
        TagConfig(separator=",")


def test_configure_updates_shared_instance() -> None:
    shared = get_config()

    result = configure(delimiter=";", force_lowercase=True)

    assert result is shared
    assert shared.delimiter == ";"
    assert shared.force_lowercase is True


def test_configure_is_all_or_nothing() -> None:
    with pytest.raises(ValidationError):
        configure(delimiter=";", glue="")

    assert get_config().delimiter == ","
    assert get_config().glue is None


def test_configure_rejects_unknown_field() -> None:
    with pytest.raises(ValidationError):
        configure(separator=";")


def test_reset_config_restores_defaults_in_place() -> None:
    shared = get_config()
    configure(delimiter="|", glue=" ", force_parameterize=True)

    assert reset_config() is shared
    assert shared.delimiter == ","
    assert shared.glue is None
    assert shared.force_parameterize is False


def test_parse_tag_config_from_mapping() -> None:
    cfg = parse_tag_config({"delimiter": [",", ";"], "force_lowercase": True, "glue": None})

    assert cfg.delimiters == [",", ";"]
    assert cfg.force_lowercase is True
    assert cfg.glue is None


@pytest.mark.parametrize(
    "data",
    [
        {"separator": ","},
        {"delimiter": 5},
        {"delimiter": [",", 1]},
        {"glue": ["x"]},
    ],
)
def test_parse_tag_config_rejects_bad_shapes(data: dict) -> None:
    with pytest.raises(ValueError):
        parse_tag_config(data)


def test_parse_tag_config_rejects_non_mapping() -> None:
    with pytest.raises(ValueError):
        parse_tag_config([","])  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("Donald E. Knuth", "donald-e-knuth"),
        ("  Crème brûlée ", "creme-brulee"),
        ("snake_case stays", "snake_case-stays"),
        ("--Already--slugged--", "already-slugged"),
        ("日本語", ""),
    ],
)
def test_parameterize(raw: str, expected: str) -> None:
    assert parameterize(raw) == expected
