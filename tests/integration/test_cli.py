"""Integration tests for the dailydo command line."""

import json
from datetime import datetime

import pytest

from dailydo import __version__, cli
from dailydo.clock import to_millis


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    # setup_logging replaces the root handlers; keep pytest's in place
    monkeypatch.setattr(cli, "setup_logging", lambda level=None: None)


def run(capsys, *argv):
    code = cli.main(list(argv))
    output = capsys.readouterr().out
    return code, json.loads(output)


class TestParseCommand:
    def test_parse_with_reference_time(self, capsys):
        code, result = run(capsys, "parse", "Submit report at 3pm", "--now", "2024-01-01T00:00:00")

        assert code == 0
        assert result["data"] == {
            "text": "Submit report",
            "due_time": to_millis(datetime(2024, 1, 1, 15, 0)),
        }

    def test_parse_without_phrase(self, capsys):
        code, result = run(capsys, "parse", "Water the plants", "--now", "2024-01-01T10:00:00")
        assert result["data"] == {"text": "Water the plants"}


class TestTaskCommands:
    def test_add_then_list(self, task_store, capsys):
        code, added = run(capsys, "add", "--user", "alice", "Water the plants")
        assert code == 0
        assert added["data"]["task"]["text"] == "Water the plants"

        code, listed = run(capsys, "list", "--user", "alice", "--filter", "unscheduled")
        assert code == 0
        assert [t["text"] for t in listed["data"]["tasks"]] == ["Water the plants"]

    def test_toggle_and_stats(self, task_store, capsys):
        _, added = run(capsys, "add", "--user", "alice", "Water the plants")
        task_id = added["data"]["task_id"]

        code, toggled = run(capsys, "toggle", "--user", "alice", "--task-id", task_id)
        assert code == 0
        # Wall-clock run: night, early-bird or weekend unlocks may follow
        assert toggled["data"]["newly_unlocked"][0]["id"] == "first_task"

        _, stats = run(capsys, "stats", "--user", "alice")
        assert stats["data"]["total_completed"] == 1

        _, recent = run(capsys, "achievements", "--user", "alice", "--recent")
        assert "first_task" in [a["id"] for a in recent["data"]]

    def test_unknown_task_exits_non_zero(self, task_store, capsys):
        code, result = run(capsys, "delete", "--user", "alice", "--task-id", "missing")
        assert code == 1
        assert result["error"] == "Todo not found"

    def test_sweep(self, task_store, capsys):
        code, result = run(capsys, "sweep")
        assert code == 0
        assert result["data"] == {"notified": [], "skipped": []}


class TestArguments:
    def test_invalid_filter_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["list", "--user", "alice", "--filter", "someday"])
        assert exc.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["--version"])
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert cli.main([]) == 0
        assert "usage" in capsys.readouterr().out
