"""
Interface Locator

Maps interface names to the source files declaring them and decides where
generated mocks are written.
"""

import os
import re
import threading
from collections.abc import Iterator
from pathlib import Path

from codegraph_mockgen.common.exceptions import IOFailure
from codegraph_mockgen.common.text import lower_first
from codegraph_mockgen.infra.observability.logging import get_logger

logger = get_logger(__name__)

INTERFACE_DECLARATION = re.compile(r"type (\S+) interface")


class InterfaceTable:
    """
    Name -> source path table shared by concurrent searches.

    Check and write happen under one lock; the first writer for a name wins.
    """

    def __init__(self):
        self._pairs: dict[str, Path] = {}
        self._lock = threading.Lock()

    def claim(self, name: str, path: Path) -> bool:
        with self._lock:
            if name in self._pairs:
                return False
            self._pairs[name] = path
            return True

    def snapshot(self) -> dict[str, Path]:
        with self._lock:
            return dict(self._pairs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._pairs)


def find_all_in(raw: str) -> list[str]:
    """Names of every `type <Name> interface` declaration in the text, in order."""
    return [name for name in INTERFACE_DECLARATION.findall(raw) if name]


class InterfaceLocator:
    """Searches a directory tree for interface declarations."""

    def __init__(
        self,
        source_suffix: str = ".go",
        excluded_dirs: list[str] | None = None,
        mock_dir_marker: str = "mock",
        search_parent_for_mock_dir: bool = True,
    ):
        self.source_suffix = source_suffix
        self.excluded_dirs = set(excluded_dirs or [])
        self.mock_dir_marker = mock_dir_marker
        self.search_parent_for_mock_dir = search_parent_for_mock_dir

    def source_path(self, file_path: str | Path) -> Path:
        """Append the source suffix when the path lacks it (`service` -> `service.go`)."""
        path = str(file_path)
        if self.source_suffix not in path:
            path += self.source_suffix
        return Path(path)

    def find_interface(self, name: str, root: Path, table: InterfaceTable) -> Path | None:
        """
        Claim the first source file under root that declares the interface.

        Unreadable files are logged and skipped. The walk stops at the first match.
        """
        needle = f"type {name} interface"
        for path in self._source_files(root):
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("source_read_failed", file_path=str(path), interface=name, error=str(e))
                continue
            if needle in content:
                table.claim(name, path)
                logger.debug("interface_located", interface=name, file_path=str(path))
                return path
        logger.info("interface_not_located", interface=name, root=str(root))
        return None

    def find_all_at(self, file_path: str | Path) -> dict[str, Path]:
        """
        Map every interface declared in one file to that file.

        Raises:
            IOFailure: The file cannot be read
        """
        path = self.source_path(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IOFailure(f"failed to read {path}", {"file_path": str(path)}) from e
        return {name: path for name in find_all_in(content)}

    def find_mock_folder(self, root: Path) -> Path:
        """
        Output directory for generated mocks.

        The first directory under root whose relative path contains the marker,
        then the same search under root's parent, else root itself.
        """
        found = self._find_marked_dir(root)
        if found is None and self.search_parent_for_mock_dir:
            # Path(".").parent is Path(".")
            found = self._find_marked_dir(root.resolve().parent)
        return found or root

    def mock_file_path(self, mock_dir: Path, interface_name: str) -> Path:
        return mock_dir / f"{lower_first(interface_name)}{self.source_suffix}"

    def _find_marked_dir(self, root: Path) -> Path | None:
        for dirpath, dirnames, _ in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in self.excluded_dirs)
            for dirname in dirnames:
                candidate = Path(dirpath) / dirname
                if self.mock_dir_marker in candidate.relative_to(root).as_posix():
                    return candidate
        return None

    def _source_files(self, root: Path) -> Iterator[Path]:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in self.excluded_dirs)
            for filename in sorted(filenames):
                if filename.endswith(self.source_suffix):
                    yield Path(dirpath) / filename
