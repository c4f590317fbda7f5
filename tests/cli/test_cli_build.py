"""Tests for `apns-payload build`."""

import json

from apns_payload import __version__
from apns_payload.cli.main import main


def test_version_option(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_build_from_stdin(runner):
    result = runner.invoke(main, ["build"], input='{"alert_text": "Hello"}')
    assert result.exit_code == 0
    assert result.output.strip() == '{"aps":{"alert":"Hello"}}'


def test_build_from_file(runner, tmp_path):
    doc = {
        "alert_body": {"body": "Meeting moved", "title": "Calendar", "loc_args": ["3pm"]},
        "badge": 0,
        "custom_fields": {"event_id": 12},
        "token": "abcd",
    }
    path = tmp_path / "payload.json"
    path.write_text(json.dumps(doc))

    result = runner.invoke(main, ["build", str(path)])

    assert result.exit_code == 0
    assert result.output.strip() == (
        '{"aps":{"alert":{"body":"Meeting moved","loc-args":["3pm"],"title":"Calendar"},'
        '"badge":0},"event_id":12}'
    )


def test_build_truncates_to_max_bytes(runner):
    result = runner.invoke(main, ["build", "--max-bytes", "60"], input=json.dumps({"alert_text": "a" * 50}))
    assert result.exit_code == 0
    body = result.output.strip()
    assert len(body) == 60
    assert json.loads(body)["aps"]["alert"] == "a" * 37 + "..."


def test_build_json_output(runner):
    result = runner.invoke(
        main, ["build", "--max-bytes", "60", "--json"], input=json.dumps({"alert_text": "a" * 50}),
    )
    assert result.exit_code == 0
    report = json.loads(result.output)
    assert report["size"] == 60
    assert report["max_bytes"] == 60
    assert report["truncated"] is True
    assert report["payload"]["aps"]["alert"].endswith("...")


def test_build_json_output_not_truncated(runner):
    result = runner.invoke(main, ["build", "--json"], input='{"alert_text": "Hi"}')
    assert result.exit_code == 0
    report = json.loads(result.output)
    assert report["truncated"] is False
    assert report["max_bytes"] == 2048


def test_build_too_large_exits_with_error(runner):
    result = runner.invoke(main, ["build", "--max-bytes", "10"], input='{"alert_text": "Hi"}')
    assert result.exit_code == 1
    assert "payload_too_large" in result.output


def test_build_reserved_key_exits_with_error(runner):
    doc = {"alert_text": "Hi", "custom_fields": {"aps": 1}}
    result = runner.invoke(main, ["build"], input=json.dumps(doc))
    assert result.exit_code == 1
    assert "reserved_key_collision" in result.output


def test_build_invalid_json(runner):
    result = runner.invoke(main, ["build"], input="{not json")
    assert result.exit_code == 1
    assert "Invalid payload" in result.output


def test_build_uses_saved_max_bytes(runner, config_path):
    config_path.write_text(json.dumps({"max_bytes": 60}))
    result = runner.invoke(main, ["build"], input=json.dumps({"alert_text": "a" * 50}))
    assert result.exit_code == 0
    assert len(result.output.strip()) == 60


def test_verbose_logs_truncation(runner):
    result = runner.invoke(
        main, ["--verbose", "build", "--max-bytes", "60"], input=json.dumps({"alert_text": "a" * 50}),
    )
    assert result.exit_code == 0
    assert "clipping 13 of 50 alert bytes" in result.output


def test_build_rejects_non_integer_saved_max_bytes(runner, config_path):
    config_path.write_text(json.dumps({"max_bytes": "abc"}))
    result = runner.invoke(main, ["build"], input='{"alert_text": "Hi"}')
    assert result.exit_code == 1
    assert "Invalid max_bytes in config" in result.output


def test_build_rejects_zero_saved_max_bytes(runner, config_path):
    config_path.write_text(json.dumps({"max_bytes": 0}))
    result = runner.invoke(main, ["build"], input='{"alert_text": "Hi"}')
    assert result.exit_code == 1
    assert "Invalid max_bytes in config" in result.output
