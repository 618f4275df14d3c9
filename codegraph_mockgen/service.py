"""
Mock Service

Batch mode: resolves (interface, file) pairs and synthesizes one mock file
per pair concurrently, isolating failures per interface.

Single-request mode: synthesizes the only interface in submitted text.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from codegraph_mockgen.common.exceptions import (
    AmbiguousInputError,
    InterfaceNotFoundError,
    IOFailure,
    MockgenError,
    NotFoundError,
    UsageError,
)
from codegraph_mockgen.infra.config.settings import MockgenSettings, get_settings
from codegraph_mockgen.infra.observability.logging import get_logger
from codegraph_mockgen.locator import InterfaceLocator, InterfaceTable, find_all_in
from codegraph_mockgen.mocker import Mocker
from codegraph_mockgen.synthesis.formatter import GofmtRunner
from codegraph_mockgen.synthesis.renderer import GENERATED_HEADER

logger = get_logger(__name__)


@dataclass
class BatchReport:
    """Outcome of a batch run: written files and per-interface failures."""

    written: dict[str, Path] = field(default_factory=dict)
    failed: dict[str, MockgenError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class MockService:
    """Orchestrates mock synthesis over files and request bodies."""

    def __init__(
        self,
        mocker: Mocker | None = None,
        settings: MockgenSettings | None = None,
        locator: InterfaceLocator | None = None,
        gofmt: GofmtRunner | None = None,
    ):
        self.settings = settings or get_settings()
        self.mocker = mocker or Mocker(package=self.settings.mock_package)
        self.locator = locator or InterfaceLocator(
            source_suffix=self.settings.source_suffix,
            excluded_dirs=self.settings.excluded_dirs,
            mock_dir_marker=self.settings.mock_dir_marker,
            search_parent_for_mock_dir=self.settings.search_parent_for_mock_dir,
        )
        self.gofmt = gofmt or GofmtRunner(self.settings.gofmt_binary, enabled=self.settings.gofmt_enabled)

    # ============================================================
    # Batch mode
    # ============================================================

    def process(
        self,
        interfaces: list[str] | None,
        file_path: str | Path | None,
        root: str | Path | None = None,
    ) -> BatchReport:
        """
        Generate one mock file per requested interface.

        Args:
            interfaces: Interface names; None or empty mocks every interface in file_path
            file_path: File declaring the interfaces; None or empty searches the tree
            root: Search root and base for the output directory

        Returns:
            BatchReport with written files and isolated failures

        Raises:
            UsageError: Neither interfaces nor file_path given
            NotFoundError: No (interface, file) pair could be resolved
            IOFailure: file_path given alone and unreadable
        """
        if not interfaces and not file_path:
            raise UsageError("please provide at least interface name or file path")

        root_path = Path(root or self.settings.search_root)
        pairs = self._resolve_pairs(interfaces or [], file_path, root_path)
        if not pairs:
            raise NotFoundError(
                "no match between interface name and filepath found. Please add one manually",
                {"interfaces": list(interfaces or []), "file_path": str(file_path or "")},
            )

        mock_dir = self.locator.find_mock_folder(root_path)
        logger.info("batch_started", interfaces=sorted(pairs), mock_dir=str(mock_dir))

        report = BatchReport()
        with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
            futures = {
                executor.submit(self._mock_file, name, path, mock_dir): name for name, path in pairs.items()
            }
            for future in as_completed(futures):
                name = futures[future]
                try:
                    report.written[name] = future.result()
                except MockgenError as e:
                    logger.error("mock_failed", interface=name, error=str(e))
                    report.failed[name] = e
                except Exception as e:
                    logger.exception("mock_crashed", interface=name)
                    report.failed[name] = IOFailure(
                        f"unexpected failure: {e}", {"interface": name, "error_type": type(e).__name__}
                    )

        logger.info("batch_complete", written=len(report.written), failed=len(report.failed))
        return report

    def _resolve_pairs(self, interfaces: list[str], file_path: str | Path | None, root: Path) -> dict[str, Path]:
        if not file_path:
            return self._search_tree(interfaces, root)
        if not interfaces:
            return self.locator.find_all_at(file_path)
        path = self.locator.source_path(file_path)
        return {name: path for name in interfaces}

    def _search_tree(self, interfaces: list[str], root: Path) -> dict[str, Path]:
        table = InterfaceTable()
        with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
            futures = [executor.submit(self.locator.find_interface, name, root, table) for name in interfaces]
            for future in as_completed(futures):
                future.result()
        return table.snapshot()

    def _mock_file(self, name: str, path: Path, mock_dir: Path) -> Path:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f"failed to read {path}", {"interface": name, "file_path": str(path)}) from e

        rendered = self.mocker.synthesize(source, name)

        out_path = self.locator.mock_file_path(mock_dir, name)
        self._check_writable(out_path, path, name)
        try:
            out_path.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise IOFailure(f"failed to create file {out_path}", {"interface": name}) from e

        self.gofmt.format_file(out_path)
        logger.info("mock_written", interface=name, source=str(path), file_path=str(out_path))
        return out_path

    def _check_writable(self, out_path: Path, source_path: Path, name: str) -> None:
        """Refuse to replace the interface source or any file mockgen did not generate."""
        if out_path.resolve() == source_path.resolve():
            raise IOFailure(
                f"refusing to overwrite source file {source_path}", {"interface": name, "file_path": str(out_path)}
            )
        if not out_path.exists():
            return
        try:
            with out_path.open(encoding="utf-8") as f:
                first_line = f.readline().rstrip("\n")
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f"failed to read {out_path}", {"interface": name, "file_path": str(out_path)}) from e
        if first_line != GENERATED_HEADER:
            raise IOFailure(
                f"refusing to overwrite non-generated file {out_path}", {"interface": name, "file_path": str(out_path)}
            )

    # ============================================================
    # Single-request mode
    # ============================================================

    def process_one(self, raw: str) -> str:
        """
        Mock the single interface declared in raw.

        Raises:
            InterfaceNotFoundError: No interface declaration in raw
            AmbiguousInputError: More than one interface declaration in raw
        """
        names = find_all_in(raw)
        if not names:
            raise InterfaceNotFoundError("no interface found in input")
        if len(names) > 1:
            raise AmbiguousInputError(
                "more than one interface found, only one at a time is supported",
                {"interfaces": names},
            )
        logger.info("mocking_interface", interface=names[0])
        return self.mocker.synthesize(raw, names[0])
