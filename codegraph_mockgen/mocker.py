"""
Mocker

The synthesis entry point: source text plus interface name in, formatted
Go stub out. Stateless across calls; safe to share between threads.
"""

from typing import TextIO

from codegraph_mockgen.common.exceptions import MethodNotFoundError
from codegraph_mockgen.infra.observability.logging import get_logger
from codegraph_mockgen.models import InterfaceDescriptor, MethodDescriptor
from codegraph_mockgen.parsing.interface_extractor import InterfaceExtractor
from codegraph_mockgen.parsing.parser_registry import ParserRegistry, get_registry
from codegraph_mockgen.parsing.signature_parser import parse_method_line
from codegraph_mockgen.synthesis.formatter import GoFormatter
from codegraph_mockgen.synthesis.normalizer import has_named_params, normalize_params, normalize_returns
from codegraph_mockgen.synthesis.renderer import StubRenderer, build_environment

logger = get_logger(__name__)


class Mocker:
    """Synthesizes mock structs for Go interfaces."""

    def __init__(
        self,
        renderer: StubRenderer | None = None,
        registry: ParserRegistry | None = None,
        package: str = "mocks",
    ):
        self.registry = registry or get_registry()
        self.extractor = InterfaceExtractor(self.registry)
        self.renderer = renderer or StubRenderer(
            build_environment(),
            GoFormatter(self.registry),
            package=package,
        )

    def describe(self, source: str, interface_name: str) -> InterfaceDescriptor:
        """
        Build the descriptor of an interface.

        A method that cannot be parsed aborts the whole interface.

        Raises:
            InterfaceNotFoundError: The interface is not declared in source
            MethodNotFoundError: A method line does not match the method grammar
        """
        methods = []
        for line in self.extractor.extract(source, interface_name):
            try:
                raw = parse_method_line(line)
                named = has_named_params(raw.params, raw.returns, self.registry)
                method = MethodDescriptor(
                    name=raw.name,
                    params=normalize_params(raw.params, named),
                    returns=normalize_returns(raw.returns, self.registry),
                )
            except MethodNotFoundError as e:
                logger.warning("method_parse_failed", interface=interface_name, line=line, error=str(e))
                e.details.setdefault("interface", interface_name)
                raise
            logger.debug("method_parsed", name=method.name, params=method.params, returns=method.returns)
            methods.append(method)
        return InterfaceDescriptor.create(interface_name, methods)

    def synthesize(self, source: str, interface_name: str) -> str:
        """
        Render the mock of one interface.

        Raises:
            NotFoundError: The interface or one of its methods could not be matched
            RenderError: The generated source is not valid Go
        """
        return self.renderer.render(self.describe(source, interface_name))

    def mock(self, source: str, out: TextIO, interface_name: str) -> None:
        """Render the mock of one interface into a writable text stream."""
        out.write(self.synthesize(source, interface_name))
