# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

import argparse
import importlib
import io
import json
import textwrap

import pytest
import yaml


def _get_subparser_names(parser: argparse.ArgumentParser) -> set[str]:
    subparser_actions = [
        action
        for action in parser._actions
        if isinstance(action, argparse._SubParsersAction)
    ]
    if not subparser_actions:
        raise AssertionError("expected at least one subparser action")
    names: set[str] = set()
    for action in subparser_actions:
        names.update(action.choices.keys())
    return names


@pytest.fixture()
def cli_main():
    return importlib.import_module("deepprune.cli.main")


def test_build_parser_registers_expected_commands(cli_main):
    parser = cli_main.build_parser()
    assert {"prune", "check"} == _get_subparser_names(parser)


def test_parser_defaults_to_stdin_and_auto_format(cli_main):
    args = cli_main.build_parser().parse_args(["prune"])
    assert args.file == "-"
    assert args.format == "auto"
    assert args.output_format is None
    assert args.indent == 2


def test_run_command_invokes_handler(cli_main):
    called = {}

    def fake_handler(args):
        called["args"] = args
        return 0

    namespace = argparse.Namespace(func=fake_handler, value="ok")

    assert cli_main.run_command(namespace) == 0
    assert called["args"].value == "ok"


def test_prune_json_file(cli_main, tmp_path, capsys):
    source = tmp_path / "payload.json"
    source.write_text(json.dumps({"name": "Ada", "email": "", "tags": [None, "x"], "meta": {}}))

    exit_code = cli_main.main(["prune", str(source)])

    assert exit_code == cli_main.EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"name": "Ada", "tags": ["x"]}


def test_prune_reads_stdin(cli_main, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": null, "b": 0}'))

    exit_code = cli_main.main(["prune", "--indent", "0"])

    assert exit_code == cli_main.EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"b": 0}


def test_prune_yaml_keeps_dates(cli_main, tmp_path, capsys):
    source = tmp_path / "release.yaml"
    source.write_text(
        textwrap.dedent(
            """\
            version: 1.2
            released: 2024-05-17
            notes: "  "
            owners:
              - alice
              -
            """
        )
    )

    assert cli_main.main(["prune", str(source)]) == cli_main.EXIT_OK
    out = capsys.readouterr().out
    loaded = yaml.safe_load(out)
    assert loaded["owners"] == ["alice"]
    assert "notes" not in loaded
    assert str(loaded["released"]) == "2024-05-17"


def test_prune_yaml_to_json_serializes_dates_as_iso(cli_main, tmp_path, capsys):
    source = tmp_path / "release.yml"
    source.write_text("released: 2024-05-17\nempty: ~\n")

    assert cli_main.main(["prune", str(source), "--output-format", "json"]) == cli_main.EXIT_OK
    assert json.loads(capsys.readouterr().out) == {"released": "2024-05-17"}


def test_check_lists_prunable_paths(cli_main, tmp_path, capsys):
    source = tmp_path / "payload.json"
    source.write_text(json.dumps({"user": {"email": None}, "id": 1}))

    exit_code = cli_main.main(["check", str(source)])

    assert exit_code == cli_main.EXIT_PRUNED
    assert capsys.readouterr().out.splitlines() == ["$.user.email", "$.user"]


def test_check_clean_document(cli_main, tmp_path, capsys):
    source = tmp_path / "payload.json"
    source.write_text(json.dumps({"id": 1, "active": False}))

    assert cli_main.main(["check", str(source)]) == cli_main.EXIT_OK
    assert capsys.readouterr().out == ""


def test_invalid_json_reports_error(cli_main, tmp_path, capsys):
    source = tmp_path / "broken.json"
    source.write_text("{not json")

    assert cli_main.main(["prune", str(source)]) == cli_main.EXIT_ERROR
    assert capsys.readouterr().err.startswith("deepprune: error:")


def test_missing_file_reports_error(cli_main, tmp_path, capsys):
    assert cli_main.main(["check", str(tmp_path / "missing.json")]) == cli_main.EXIT_ERROR
    assert "deepprune: error:" in capsys.readouterr().err


def test_depth_error_reports_error(cli_main, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("DEEPPRUNE_MAX_DEPTH", "1")
    source = tmp_path / "payload.json"
    source.write_text(json.dumps({"a": {"b": 1}}))

    assert cli_main.main(["prune", str(source)]) == cli_main.EXIT_ERROR
    assert "maximum depth" in capsys.readouterr().err


def test_json_output_with_non_string_keys_reports_error(cli_main, tmp_path, capsys):
    source = tmp_path / "shipments.yaml"
    source.write_text("2024-05-17: shipped\n")

    exit_code = cli_main.main(["prune", str(source), "--output-format", "json"])

    captured = capsys.readouterr()
    assert exit_code == cli_main.EXIT_ERROR
    assert captured.out == ""
    assert captured.err.startswith("deepprune: error:")


def test_yaml_output_keeps_non_string_keys(cli_main, tmp_path, capsys):
    source = tmp_path / "shipments.yaml"
    source.write_text("2024-05-17: shipped\n2024-05-18: ~\n")

    assert cli_main.main(["prune", str(source)]) == cli_main.EXIT_OK
    assert capsys.readouterr().out == "2024-05-17: shipped\n"
