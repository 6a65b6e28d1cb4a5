"""
Tests for the command-line interface.
"""

import io
import json
from unittest.mock import MagicMock

import pytest
import requests

from request_explorer.cli import build_parser, main


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_codegen_from_flags(capsys):
    code = main(
        [
            "codegen",
            "-X",
            "post",
            "--url",
            "https://api.test/x",
            "-H",
            "Content-Type: application/json",
            "-d",
            '{"a":1}',
            "-l",
            "curl",
            "--plain",
        ]
    )

    assert code == 0
    assert capsys.readouterr().out == (
        'curl -X POST "https://api.test/x" \\\n'
        '  -H "Content-Type: application/json" \\\n'
        "  -d '{\"a\":1}'\n"
    )


def test_codegen_from_file(write_json, capsys):
    path = write_json(
        "request.json",
        {"method": "DELETE", "url": "https://api.test/items/1", "headers": {"Accept": "*/*"}},
    )

    assert main(["codegen", str(path), "--language", "py", "--plain"]) == 0
    out = capsys.readouterr().out
    assert 'requests.delete("https://api.test/items/1", headers=headers)' in out


def test_flags_override_file(write_json, capsys):
    path = write_json("request.json", {"method": "GET", "url": "https://old"})

    assert main(["codegen", str(path), "--url", "https://new", "-X", "PUT", "--plain"]) == 0
    assert capsys.readouterr().out == 'curl -X PUT "https://new"\n'


def test_codegen_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"url": "https://x", "method": "GET"}'))

    assert main(["codegen", "--stdin", "-l", "go", "--plain"]) == 0
    assert 'http.NewRequest("GET", "https://x", nil)' in capsys.readouterr().out


def test_codegen_writes_output_file(tmp_path):
    output = tmp_path / "main.go"

    assert main(["codegen", "--url", "https://x", "-l", "golang", "-o", str(output)]) == 0
    assert output.read_text(encoding="utf-8").startswith("package main\n")


def test_codegen_resolves_environment(write_json, capsys):
    env_file = write_json(
        "env.json", {"environments": {"dev": {"BASE_URL": "https://api.test"}}}
    )

    code = main(
        [
            "codegen",
            "--url",
            "{{BASE_URL}}/items",
            "--env-file",
            str(env_file),
            "--env",
            "dev",
            "--plain",
        ]
    )

    assert code == 0
    assert capsys.readouterr().out == 'curl -X GET "https://api.test/items"\n'


def test_codegen_unknown_environment(write_json, capsys):
    env_file = write_json("env.json", {"environments": {}})

    assert main(["codegen", "--url", "https://x", "--env-file", str(env_file), "--env", "qa"]) == 1
    assert "Unknown environment" in capsys.readouterr().err


def test_codegen_unsupported_language(capsys):
    assert main(["codegen", "--url", "https://x", "-l", "cobol", "--plain"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unsupported language" in captured.err


def test_codegen_needs_input(capsys):
    assert main(["codegen", "--plain"]) == 1
    assert "Input required" in capsys.readouterr().err


def test_codegen_missing_file(tmp_path, capsys):
    assert main(["codegen", str(tmp_path / "absent.json"), "--plain"]) == 1
    assert "Failed to load request" in capsys.readouterr().err


def test_default_language_from_config(write_json, capsys):
    config_file = write_json("config.json", {"default_language": "php"})

    assert main(["--config", str(config_file), "codegen", "--url", "https://x", "--plain"]) == 0
    assert capsys.readouterr().out.startswith("<?php\n")


def test_bad_config_file(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "absent.json"), "languages"]) == 1
    assert "Configuration error" in capsys.readouterr().err


def test_languages_lists_every_target(capsys):
    assert main(["languages"]) == 0

    out = capsys.readouterr().out
    for name in ("curl", "python", "php", "csharp", "go"):
        assert name in out


def test_language_info(capsys):
    assert main(["languages", "--info", "golang"]) == 0
    assert "Go (net/http)" in capsys.readouterr().out


def test_language_info_unknown(capsys):
    assert main(["languages", "--info", "cobol"]) == 1
    assert "not supported" in capsys.readouterr().err


def test_invalid_method_is_rejected_by_the_parser():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["codegen", "-X", "FETCH", "--url", "https://x"])


@pytest.fixture
def session(monkeypatch):
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.status_code = 200
    response.reason = "OK"
    response.text = '{"ok": true}'
    response.headers = {"content-type": "application/json"}
    session.request.return_value = response
    monkeypatch.setattr(requests, "Session", lambda: session)
    return session


def test_send_records_history(session, tmp_path, capsys):
    history_file = tmp_path / "history.json"

    code = main(["send", "--url", "https://api.test/ping", "--history-file", str(history_file)])

    assert code == 0
    assert "200 OK" in capsys.readouterr().out
    session.request.assert_called_once()
    saved = json.loads(history_file.read_text(encoding="utf-8"))
    assert [(entry["method"], entry["url"], entry["status"]) for entry in saved] == [
        ("GET", "https://api.test/ping", 200)
    ]


def test_send_failure(session, tmp_path, capsys):
    session.request.side_effect = requests.exceptions.ConnectionError("refused")
    history_file = tmp_path / "history.json"

    assert main(["send", "--url", "https://x", "--history-file", str(history_file)]) == 1
    assert "Connection error" in capsys.readouterr().err

    saved = json.loads(history_file.read_text(encoding="utf-8"))
    assert saved[0]["error"]


def test_send_error_status_exit_code(session):
    session.request.return_value.status_code = 500
    session.request.return_value.reason = "Internal Server Error"

    assert main(["send", "--url", "https://x"]) == 1


def test_history_lists_and_clears(write_json, capsys):
    history_file = write_json(
        "history.json",
        [
            {
                "id": "hist_1",
                "method": "GET",
                "url": "https://a.test/u",
                "timestamp": "2024-01-01T00:00:00+00:00",
                "status": 200,
                "response_time": 12.0,
            }
        ],
    )

    assert main(["history", "--history-file", str(history_file)]) == 0
    assert "https://a.test/u" in capsys.readouterr().out

    assert main(["history", "--history-file", str(history_file), "--clear"]) == 0
    assert json.loads(history_file.read_text(encoding="utf-8")) == []


def test_history_needs_a_file(capsys):
    assert main(["history"]) == 1
    assert "No history file" in capsys.readouterr().err


def test_history_with_malformed_entry(write_json, capsys):
    history_file = write_json("history.json", [{"method": "GET", "url": "https://x"}])

    assert main(["history", "--history-file", str(history_file)]) == 1
    assert "Invalid entry" in capsys.readouterr().err


def test_send_zero_timeout_is_not_replaced_by_default(session, capsys):
    assert main(["send", "--url", "https://x", "--timeout", "0"]) == 1
    assert "Timeout must be a positive" in capsys.readouterr().err
    session.request.assert_not_called()


def test_verbose_metadata_stays_off_stdout(capsys):
    assert main(["codegen", "--url", "https://x", "--plain", "--verbose"]) == 0

    captured = capsys.readouterr()
    assert captured.out == 'curl -X GET "https://x"\n'
    assert "Header Count" in captured.err
