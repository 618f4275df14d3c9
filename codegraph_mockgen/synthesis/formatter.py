"""
Go source formatting.

GoFormatter canonicalizes the template expansion in-process and rejects it
when the Go grammar does not accept it. GofmtRunner drives the external
`gofmt` binary on files that were already written.
"""

import shutil
import subprocess
from pathlib import Path

from codegraph_mockgen.common.exceptions import FormatterError, RenderError
from codegraph_mockgen.infra.observability.logging import get_logger
from codegraph_mockgen.parsing.parser_registry import ParserRegistry, get_registry

logger = get_logger(__name__)


class GoFormatter:
    """In-process formatter for generated Go source."""

    def __init__(self, registry: ParserRegistry | None = None):
        self.registry = registry or get_registry()

    def format(self, raw: str) -> str:
        """
        Canonicalize and validate generated source.

        Trailing whitespace is stripped, runs of blank lines collapse to one,
        and the text ends with exactly one newline.

        Raises:
            RenderError: The text is not syntactically valid Go
        """
        lines: list[str] = []
        for line in raw.splitlines():
            line = line.rstrip()
            if not line and (not lines or not lines[-1]):
                continue
            lines.append(line)
        while lines and not lines[-1]:
            lines.pop()
        formatted = "\n".join(lines) + "\n"

        tree = self.registry.parse_go(formatted)
        if tree.root_node.has_error:
            logger.error("format_failed", unformatted=raw)
            raise RenderError("failed to format output", unformatted=raw)
        return formatted


class GofmtRunner:
    """External formatter invoked on rendered files."""

    def __init__(self, binary: str = "gofmt", enabled: bool = True, timeout: float = 30.0):
        self.binary = binary
        self.enabled = enabled
        self.timeout = timeout

    @property
    def available(self) -> bool:
        return self.enabled and shutil.which(self.binary) is not None

    def format_file(self, path: Path) -> bool:
        """
        Rewrite a file in place with `gofmt -w`.

        Returns:
            False when the runner is disabled or the binary is not installed

        Raises:
            FormatterError: gofmt could not be run or exited non-zero
        """
        if not self.enabled:
            return False
        if not self.available:
            logger.warning("gofmt_unavailable", binary=self.binary, file_path=str(path))
            return False

        try:
            result = subprocess.run(
                [self.binary, "-w", str(path)],
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            raise FormatterError(f"failed to run {self.binary}", {"file_path": str(path)}) from e

        if result.returncode != 0:
            raise FormatterError(
                "failed to format file",
                {"file_path": str(path), "stderr": result.stderr.strip()},
            )
        logger.debug("gofmt_complete", file_path=str(path))
        return True
