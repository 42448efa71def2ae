from pathlib import Path

import pytest

from arnkit.merge import build_variables, parse_var_assignments
from arnkit.models import UnboundVariableError
from arnkit.template_engine import expand_arn, load_variables


def test_load_variables_yaml(tmp_path: Path):
    p = tmp_path / "vars.yaml"
    p.write_text(
        """
bucket: data
year: 2024
""",
        encoding="utf-8",
    )

    # números do YAML viram texto
    assert load_variables(p) == {"bucket": "data", "year": "2024"}


def test_load_variables_json(tmp_path: Path):
    p = tmp_path / "vars.json"
    p.write_text('{"user": "alice"}', encoding="utf-8")

    assert load_variables(str(p)) == {"user": "alice"}


def test_load_variables_empty_file(tmp_path: Path):
    p = tmp_path / "vars.yaml"
    p.write_text("", encoding="utf-8")

    assert load_variables(p) == {}


@pytest.mark.parametrize("content", ["- a\n- b\n", "nested:\n  a: 1\n", "empty:\n"])
def test_load_variables_rejects_non_scalar(tmp_path: Path, content):
    p = tmp_path / "vars.yaml"
    p.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError):
        load_variables(p)


def test_expand_arn():
    arn = expand_arn("arn:aws:s3:::${bucket}/${key}", {"bucket": "data", "key": "report.csv"})

    assert str(arn) == "arn:aws:s3:::data/report.csv"


def test_expand_arn_unbound():
    with pytest.raises(UnboundVariableError) as exc:
        expand_arn("arn:aws:s3:::${bucket}/${key}", {"bucket": "data"})

    assert exc.value.names == ["key"]


def test_parse_var_assignments():
    assert parse_var_assignments(["a=1", "b=x=y"]) == {"a": "1", "b": "x=y"}
    assert parse_var_assignments(None) == {}

    with pytest.raises(ValueError):
        parse_var_assignments(["novalue"])

    with pytest.raises(ValueError):
        parse_var_assignments(["=x"])


def test_build_variables_precedence(tmp_path: Path):
    p = tmp_path / "vars.yaml"
    p.write_text("a: file\nb: file\nc: file\n", encoding="utf-8")

    variables = build_variables(
        vars_path=str(p),
        overrides='{"b": "overrides", "c": "overrides"}',
        assignments=["c=var"],
    )

    # arquivo < overrides < --var
    assert variables == {"a": "file", "b": "overrides", "c": "var"}


def test_build_variables_overrides_must_be_object():
    with pytest.raises(ValueError):
        build_variables(overrides='["a"]')
