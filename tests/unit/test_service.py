"""
MockService tests (batch and single-request modes)
"""

from pathlib import Path

import pytest

from codegraph_mockgen.common.exceptions import (
    AmbiguousInputError,
    InterfaceNotFoundError,
    IOFailure,
    MethodNotFoundError,
    NotFoundError,
    UsageError,
)
from codegraph_mockgen.service import MockService

STORE_SOURCE = """package store

type Reader interface {
	Read(key string) (string, error)
}

type Writer interface {
	Write(key, value string) error
}
"""


@pytest.fixture
def service(settings):
    return MockService(settings=settings)


@pytest.fixture
def project(tmp_path) -> Path:
    """Project tree with one source file and a mocks directory."""
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pkg" / "store.go").write_text(STORE_SOURCE, encoding="utf-8")
    (tmp_path / "mocks").mkdir()
    return tmp_path


class TestBatch:
    def test_search_by_name(self, service, project):
        report = service.process(["Reader", "Writer"], None, root=project)

        assert report.ok
        assert report.written == {
            "Reader": project / "mocks" / "reader.go",
            "Writer": project / "mocks" / "writer.go",
        }
        reader = (project / "mocks" / "reader.go").read_text(encoding="utf-8")
        assert "\t\treturn r.ReadFunc(key)\n\t}\n\treturn \"\", nil\n}\n" in reader

    def test_every_interface_in_file(self, service, project):
        report = service.process(None, project / "pkg" / "store.go", root=project)

        assert sorted(report.written) == ["Reader", "Writer"]
        assert (project / "mocks" / "writer.go").exists()

    def test_file_without_suffix(self, service, project):
        report = service.process(["Writer"], str(project / "pkg" / "store"), root=project)

        assert list(report.written) == ["Writer"]

    def test_search_root_from_settings(self, service, project):
        report = service.process(["Reader"], None)

        assert report.written == {"Reader": project / "mocks" / "reader.go"}

    def test_usage_error(self, service):
        with pytest.raises(UsageError):
            service.process(None, None)

        with pytest.raises(UsageError):
            service.process([], "")

    def test_nothing_found(self, service, project):
        with pytest.raises(NotFoundError) as exc_info:
            service.process(["Missing"], None, root=project)

        assert exc_info.value.message == (
            "no match between interface name and filepath found. Please add one manually"
        )

    def test_file_without_interfaces(self, service, project):
        (project / "pkg" / "types.go").write_text("package store\n\ntype Item struct{}\n")

        with pytest.raises(NotFoundError):
            service.process(None, project / "pkg" / "types.go", root=project)

    def test_unreadable_file_alone(self, service, project):
        with pytest.raises(IOFailure):
            service.process(None, project / "missing.go", root=project)

    def test_failures_are_isolated(self, service, project):
        (project / "pkg" / "mixed.go").write_text(
            "package store\n\n"
            "type Good interface {\n\tClose() error\n}\n\n"
            "type Bad interface {\n\tio.Reader\n}\n",
            encoding="utf-8",
        )

        report = service.process(["Good", "Bad", "Ghost"], project / "pkg" / "mixed.go", root=project)

        assert not report.ok
        assert list(report.written) == ["Good"]
        assert isinstance(report.failed["Bad"], MethodNotFoundError)
        assert isinstance(report.failed["Ghost"], InterfaceNotFoundError)
        assert not (project / "mocks" / "bad.go").exists()

    def test_unreadable_pair_is_isolated(self, service, project):
        report = service.process(["Reader"], project / "missing.go", root=project)

        assert report.written == {}
        assert isinstance(report.failed["Reader"], IOFailure)


class TestSingleRequest:
    def test_one_interface(self, service):
        raw = "package io\n\ntype Reader interface { Read(p []byte) (n int, err error) }\n"

        output = service.process_one(raw)

        assert output.startswith("// Code generated by mockgen. DO NOT EDIT.\n\npackage mocks\n")
        assert (
            "func (r *ReaderMock) Read(p []byte) (int, error) {\n"
            "\tif r.ReadFunc != nil {\n"
            "\t\treturn r.ReadFunc(p)\n"
            "\t}\n"
            "\treturn 1, nil\n"
            "}\n"
        ) in output

    def test_no_interface(self, service):
        with pytest.raises(InterfaceNotFoundError, match="no interface found"):
            service.process_one("package io\n\ntype Item struct{}\n")

    def test_more_than_one_interface(self, service):
        with pytest.raises(AmbiguousInputError) as exc_info:
            service.process_one(STORE_SOURCE)

        assert exc_info.value.details == {"interfaces": ["Reader", "Writer"]}


class TestOutputSafety:
    def test_source_file_is_not_overwritten(self, service, tmp_path):
        source = "package a\n\ntype A interface {\n\tF() int\n}\n\ntype B interface {\n\tG() error\n}\n"
        (tmp_path / "a.go").write_text(source, encoding="utf-8")

        report = service.process(["A", "B"], None, root=tmp_path)

        assert isinstance(report.failed["A"], IOFailure)
        assert "refusing to overwrite source file" in report.failed["A"].message
        assert (tmp_path / "a.go").read_text(encoding="utf-8") == source
        assert report.written == {"B": tmp_path / "b.go"}

    def test_hand_written_file_is_not_overwritten(self, service, project):
        existing = "package mocks\n\n// hand-written reader fake\ntype ReaderMock struct{}\n"
        (project / "mocks" / "reader.go").write_text(existing, encoding="utf-8")

        report = service.process(["Reader", "Writer"], None, root=project)

        assert "refusing to overwrite non-generated file" in report.failed["Reader"].message
        assert (project / "mocks" / "reader.go").read_text(encoding="utf-8") == existing
        assert list(report.written) == ["Writer"]

    def test_generated_mock_is_regenerated(self, service, project):
        service.process(["Reader"], None, root=project)

        report = service.process(["Reader"], None, root=project)

        assert report.ok
        assert report.written == {"Reader": project / "mocks" / "reader.go"}


class _ExplodingMocker:
    """Mocker double failing with a non-mockgen error for one interface."""

    def __init__(self, mocker, broken: str):
        self.mocker = mocker
        self.broken = broken

    def synthesize(self, source: str, interface_name: str) -> str:
        if interface_name == self.broken:
            raise RuntimeError("template engine exploded")
        return self.mocker.synthesize(source, interface_name)


def test_unexpected_worker_error_is_isolated(settings, mocker, project):
    service = MockService(mocker=_ExplodingMocker(mocker, "Reader"), settings=settings)

    report = service.process(["Reader", "Writer"], None, root=project)

    assert list(report.written) == ["Writer"]
    failure = report.failed["Reader"]
    assert isinstance(failure, IOFailure)
    assert failure.details == {"interface": "Reader", "error_type": "RuntimeError"}
