"""
Tests for the dt2js command line.
"""
import json
import logging
from pathlib import Path
from typing import Iterator

import pytest
from click.testing import CliRunner

from dt2js import __version__
from dt2js.__main__ import cli


@pytest.fixture
def runner(monkeypatch, tmp_path) -> Iterator[CliRunner]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("DT2JS_CONFIG_FILE", raising=False)
    yield CliRunner()
    # The CLI points logging at the runner's stderr, which is closed after invoke.
    logging.getLogger().handlers.clear()


def test_convert_prints_schema(runner: CliRunner, raml_file: Path) -> None:
    result = runner.invoke(cli, ["-l", "ERROR", "convert", str(raml_file), "Cat"])
    assert result.exit_code == 0, result.output
    schema = json.loads(result.stdout)
    assert schema["$schema"] == "http://json-schema.org/draft-04/schema#"
    assert schema["type"] == "object"


def test_convert_writes_output_file(runner: CliRunner, raml_file: Path, tmp_path: Path) -> None:
    output_file = tmp_path / "out" / "dog.json"
    output_file.parent.mkdir()
    result = runner.invoke(cli, ["-l", "ERROR", "convert", str(raml_file), "Dog", "-o", str(output_file)])
    assert result.exit_code == 0, result.output
    schema = json.loads(output_file.read_text(encoding="utf-8"))
    assert schema["required"] == ["barks"]


def test_convert_unknown_type_fails(runner: CliRunner, raml_file: Path) -> None:
    result = runner.invoke(cli, ["-l", "ERROR", "convert", str(raml_file), "InvalidCat"])
    assert result.exit_code == 1
    assert "InvalidCat" in result.stderr


def test_convert_invalid_raml_fails(runner: CliRunner, tmp_path: Path) -> None:
    bad_file = tmp_path / "bad.raml"
    bad_file.write_text("asdasdasdasd")
    result = runner.invoke(cli, ["-l", "ERROR", "convert", str(bad_file), "Cat"])
    assert result.exit_code == 1
    assert "Invalid RAML data" in result.stderr


def test_convert_missing_file_fails(runner: CliRunner, tmp_path: Path) -> None:
    result = runner.invoke(cli, ["-l", "ERROR", "convert", str(tmp_path / "missing.raml"), "Cat"])
    assert result.exit_code == 1
    assert "Error reading RAML file" in result.stderr


def test_convert_uses_output_config(runner: CliRunner, raml_file: Path, tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"output": {"indent": 0, "sort_keys": True}}))
    result = runner.invoke(cli, ["-c", str(config_file), "-l", "ERROR", "convert", str(raml_file), "Dog"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip().startswith('{"$schema": ')
    assert "\n" not in result.stdout.strip()


def test_types_lists_declared_types(runner: CliRunner, raml_file: Path) -> None:
    result = runner.invoke(cli, ["-l", "ERROR", "types", str(raml_file)])
    assert result.exit_code == 0, result.output
    assert result.stdout.split() == ["Animal", "Cat", "Dog", "Person"]


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_config_show(runner: CliRunner) -> None:
    result = runner.invoke(cli, ["-l", "WARNING", "--log-format", "json", "config-show"])
    assert result.exit_code == 0, result.output
    shown = json.loads(result.stdout)
    assert shown["logging"]["level"] == "WARNING"
    assert shown["output"]["indent"] == 2
