"""
CLI tests
"""

import pytest
from typer.testing import CliRunner

from codegraph_mockgen.cli.main import app

runner = CliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Project tree with a mocks directory; gofmt disabled through the environment."""
    monkeypatch.setenv("MOCKGEN_GOFMT_ENABLED", "false")
    monkeypatch.setenv("MOCKGEN_SEARCH_PARENT_FOR_MOCK_DIR", "false")
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "store.go").write_text(
        "package store\n\ntype Store interface {\n\tGet(key string) (string, error)\n}\n",
        encoding="utf-8",
    )
    (tmp_path / "mocks").mkdir()
    return tmp_path


def test_generate_requires_name_or_file():
    result = runner.invoke(app, ["generate"])

    assert result.exit_code == 1
    assert "please provide" in result.output


def test_generate_by_interface_name(project):
    result = runner.invoke(app, ["generate", "-i", "Store", "--root", str(project)])

    assert result.exit_code == 0, result.output
    mock = (project / "mocks" / "store.go").read_text(encoding="utf-8")
    assert "type StoreMock struct {\n\tGetFunc func(key string) (string, error)\n}" in mock


def test_generate_by_file(project):
    result = runner.invoke(app, ["generate", "-f", str(project / "pkg" / "store.go"), "--root", str(project)])

    assert result.exit_code == 0, result.output
    assert (project / "mocks" / "store.go").exists()


def test_generate_unknown_interface(project):
    result = runner.invoke(app, ["generate", "-i", "Missing", "--root", str(project)])

    assert result.exit_code == 1
    assert "no match between interface name" in result.output


def test_generate_reports_failures(project):
    (project / "pkg" / "embedded.go").write_text(
        "package store\n\ntype Embedded interface {\n\tio.Reader\n}\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["generate", "-i", "Embedded", "-i", "Store", "--root", str(project)])

    assert result.exit_code == 1
    assert (project / "mocks" / "store.go").exists()
    assert not (project / "mocks" / "embedded.go").exists()
