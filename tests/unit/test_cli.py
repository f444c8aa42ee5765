"""
Unit tests for the task classification CLI.
"""

import json

import pytest

from task_triage.cli import classify as cli


@pytest.fixture(autouse=True)
def keep_test_logging(monkeypatch):
    """Leave logging as configured by the test session."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


@pytest.fixture
def tasks_file(tmp_path):
    path = tmp_path / "tasks.jsonl"
    path.write_text(
        json.dumps({"title": "Fix the bug in the system", "description": "Login page"}) + "\n"
        + "\n"
        + json.dumps({"title": "General task description"}) + "\n",
        encoding="utf-8",
    )
    return path


class TestReadTasks:
    """Test JSON Lines input parsing."""

    def test_reads_pairs_and_skips_blank_lines(self, tasks_file):
        assert cli.read_tasks(tasks_file) == [
            ("Fix the bug in the system", "Login page"),
            ("General task description", ""),
        ]

    def test_invalid_json_line(self, tmp_path):
        path = tmp_path / "bad.jsonl"
        path.write_text("{not json}\n", encoding="utf-8")

        with pytest.raises(ValueError, match="invalid JSON"):
            cli.read_tasks(path)

    def test_non_string_title(self, tmp_path):
        path = tmp_path / "bad.jsonl"
        path.write_text(json.dumps({"title": 3}) + "\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must be strings"):
            cli.read_tasks(path)

    def test_non_object_line(self, tmp_path):
        path = tmp_path / "bad.jsonl"
        path.write_text("[1, 2]\n", encoding="utf-8")

        with pytest.raises(ValueError, match="expected a JSON object"):
            cli.read_tasks(path)


class TestMain:
    """Test CLI entry point."""

    def test_single_title_to_stdout(self, capsys):
        exit_code = cli.main(["Pay the invoice for materials urgently"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert output["category"] == "finance"
        assert output["priority"] == "high"
        assert output["extracted_entities"] == ["invoice", "materials"]

    def test_description_option(self, capsys):
        exit_code = cli.main(["Weekly sync", "--description", "Book meeting with Ravi"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert output["category"] == "scheduling"
        assert "ravi" in output["extracted_entities"]

    def test_batch_to_json_file(self, tasks_file, tmp_path):
        output_path = tmp_path / "out" / "results.json"

        exit_code = cli.main(["--input", str(tasks_file), "--output", str(output_path)])

        assert exit_code == 0
        results = json.loads(output_path.read_text(encoding="utf-8"))
        assert [r["category"] for r in results] == ["technical", "general"]
        assert results[1]["suggested_actions"] == []

    def test_batch_to_jsonl_file(self, tasks_file, tmp_path):
        output_path = tmp_path / "results.jsonl"

        exit_code = cli.main(["-i", str(tasks_file), "-o", str(output_path)])

        assert exit_code == 0
        lines = output_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert json.loads(lines[0])["priority"] == "medium"

    def test_missing_input_file(self, tmp_path, capsys):
        exit_code = cli.main(["--input", str(tmp_path / "missing.jsonl")])

        assert exit_code == 1
        assert "File not found" in capsys.readouterr().err

    def test_title_and_input_conflict(self, tasks_file, capsys):
        exit_code = cli.main(["Some title", "--input", str(tasks_file)])

        assert exit_code == 1
        assert "not both" in capsys.readouterr().err

    def test_nothing_to_classify(self, capsys):
        assert cli.main([]) == 1
        assert "required" in capsys.readouterr().err

    def test_malformed_input_reports_error(self, tmp_path, capsys):
        path = tmp_path / "bad.jsonl"
        path.write_text("oops\n", encoding="utf-8")

        assert cli.main(["--input", str(path)]) == 1
        assert "invalid JSON" in capsys.readouterr().err
