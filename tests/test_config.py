from pathlib import Path

import pytest

from csvtree.config import AppConfig, InputConfig, load_config


def test_load_config_reads_sections_and_resolves_output(tmp_path):
    config_path = tmp_path / "conf" / "csvtree.yaml"
    config_path.parent.mkdir()
    config_path.write_text(
        "input:\n"
        "  delimiter: ';'\n"
        "  skip_rows: 1\n"
        "  consume: true\n"
        "tree:\n"
        "  strict: true\n"
        "output:\n"
        "  path: out/tree.json\n"
        "  indent: 4\n",
        encoding="utf-8",
    )

    config = load_config(config_path)

    assert config.input.delimiter == ";"
    assert config.input.skip_rows == 1
    assert config.input.consume is True
    assert config.tree.strict is True
    assert config.output.path == (config_path.parent / "out" / "tree.json").resolve()
    assert config.output.indent == 4
    assert config.output.ensure_ascii is False


def test_empty_config_uses_defaults(tmp_path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    config = load_config(config_path)
    assert config == AppConfig()
    assert config.output.path is None


def test_bundled_config_loads(root_dir):
    config = load_config(root_dir / "config" / "config.yaml")
    assert config.output.path == (root_dir / "output" / "conversation.json").resolve()


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize(
    "content",
    [
        "unknown: {}\n",
        "input:\n  colour: red\n",
        "input: [1, 2]\n",
        "input:\n  delimiter: ';;'\n",
        "input:\n  skip_rows: -1\n",
    ],
)
def test_invalid_config_raises_value_error(tmp_path, content):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(config_path)


def test_input_config_validates_delimiter():
    with pytest.raises(ValueError):
        InputConfig(delimiter="")
    assert InputConfig(delimiter="\t").delimiter == "\t"


def test_output_resolved_keeps_absolute_paths(tmp_path):
    config = AppConfig()
    config.output.path = tmp_path / "abs.json"
    resolved = config.resolved(Path("/elsewhere"))
    assert resolved.output.path == tmp_path / "abs.json"
