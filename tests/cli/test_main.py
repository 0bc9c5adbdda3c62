"""Tests for the foldertree command-line entry point."""

import json
import os
from unittest.mock import patch

import pytest

from foldertree.cli.main import count_nodes, create_output_strategy, format_counts, main
from foldertree.folder_tree.folder_scanner import FolderScanner
from foldertree.output_strategies.json_strategy import JSONOutputStrategy
from foldertree.output_strategies.markdown_strategy import MarkdownOutputStrategy
from foldertree.output_strategies.text_strategy import TextOutputStrategy


@pytest.fixture
def project(make_tree, monkeypatch):
    root = make_tree(["src/main.py", "src/util.py", "node_modules/x.js", "a.txt", ".env"])
    monkeypatch.chdir(root)
    return root


def run_main(argv):
    """Run main() and return its exit code (0 when it returns normally)."""
    try:
        main(argv)
    except SystemExit as e:
        return e.code
    return 0


def test_create_output_strategy():
    assert isinstance(create_output_strategy("text"), TextOutputStrategy)
    assert isinstance(create_output_strategy("markdown"), MarkdownOutputStrategy)
    assert isinstance(create_output_strategy("json"), JSONOutputStrategy)
    with pytest.raises(ValueError, match="Unsupported output format"):
        create_output_strategy("xml")


def test_count_nodes_and_format(make_tree):
    root = make_tree([f"logs/{i}.log" for i in range(5)] + ["a.txt", "empty/"])
    result = FolderScanner(file_limit=3).scan(root)
    counts = count_nodes(result)
    assert counts == {"folders": 2, "files": 3, "truncated": 1, "nodes": 6}
    assert format_counts(counts) == "Folders: 2\nFiles: 3\nTruncated folders: 1\nNodes: 6"


def test_text_output(project, capsys):
    assert run_main(["."]) == 0
    out = capsys.readouterr().out
    assert out == f"{project.name}/\n├── src/\n│   ├── main.py\n│   └── util.py\n└── a.txt\n"


def test_json_output(project, capsys):
    assert run_main(["-f", "json", "-n", "500"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert document["path"] == str(project)
    assert document["fileLimit"] == 100
    assert document["count"] == 4
    assert [node["name"] for node in document["structure"]] == ["src", "a.txt"]


def test_markdown_output_with_limit(project, capsys):
    assert run_main(["-f", "markdown", "-n", "1", "src"]) == 0
    assert capsys.readouterr().out == "- *... (2 more)*\n"


def test_output_file(project, capsys):
    target = project / "out" / "tree.json"
    target.parent.mkdir()
    assert run_main(["-f", "json", "-o", str(target), "src"]) == 0
    assert capsys.readouterr().out == ""
    assert json.loads(target.read_text(encoding="utf-8"))["count"] == 2


def test_ignore_patterns(project, capsys):
    assert run_main(["-i", "*.py", "-f", "json"]) == 0
    document = json.loads(capsys.readouterr().out)
    assert document["structure"] == [
        {"name": "src", "path": "src", "type": "folder"},
        {"name": "a.txt", "path": "a.txt", "type": "file"},
    ]


def test_summary_to_stderr(project, capsys):
    assert run_main(["-s", "stderr"]) == 0
    captured = capsys.readouterr()
    assert "Folders: 1\nFiles: 3\nTruncated folders: 0\nNodes: 4" in captured.err
    assert "Folders:" not in captured.out


def test_summary_to_stdout(project, capsys):
    assert run_main(["-s", "stdout"]) == 0
    assert capsys.readouterr().out.endswith("\nFolders: 1\nFiles: 3\nTruncated folders: 0\nNodes: 4\n")


def test_not_found(project, capsys):
    assert run_main(["missing"]) == 3
    assert capsys.readouterr().err.startswith("Error: Directory not found: ")


def test_not_a_directory(project, capsys):
    assert run_main(["a.txt"]) == 4
    assert "Path must be a directory" in capsys.readouterr().err


def test_access_denied(project, capsys):
    with patch("foldertree.authorization.path_authorizer.AllowListPolicy.allows", return_value=False):
        assert run_main(["/etc"]) == 126
    assert "Access to this path is not allowed" in capsys.readouterr().err


def test_empty_path(project, capsys):
    assert run_main([""]) == 2
    assert capsys.readouterr().err == "Error: Path is required\n"


def test_invalid_max_depth(project, capsys):
    assert run_main(["-d", "0"]) == 2
    assert "--max-depth must be at least 1" in capsys.readouterr().err


def test_unexpected_error(project, capsys):
    with patch("foldertree.cli.main.scan_folder_structure", side_effect=RuntimeError("boom")):
        assert run_main(["."]) == 1
    assert capsys.readouterr().err == "Error: boom\n"


def test_warn_unreadable(project, capsys):
    real_scandir = os.scandir

    def scandir(path):
        if os.path.basename(path) == "src":
            raise PermissionError(13, "Permission denied", path)
        return real_scandir(path)

    with patch("foldertree.folder_tree.folder_scanner.os.scandir", side_effect=scandir):
        assert run_main(["-W"]) == 0

    captured = capsys.readouterr()
    assert "Warning: Could not read folder 'src'" in captured.err
    assert "main.py" not in captured.out


def test_unreadable_folders_silent_by_default(project, capsys):
    with patch("foldertree.folder_tree.folder_scanner.os.scandir", side_effect=PermissionError("denied")):
        assert run_main(["."]) == 0
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == f"{project.name}/\n"
