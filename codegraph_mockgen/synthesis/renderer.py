"""
Stub Renderer

Expands the mock template for an InterfaceDescriptor and formats the result.
The Jinja2 environment (template plus filter map) is built once by the
caller and injected, never held as module state.
"""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from codegraph_mockgen.common.exceptions import RenderError
from codegraph_mockgen.infra.observability.logging import get_logger
from codegraph_mockgen.models import InterfaceDescriptor
from codegraph_mockgen.synthesis.formatter import GoFormatter
from codegraph_mockgen.synthesis.normalizer import arg_names
from codegraph_mockgen.synthesis.zero_values import zero_values

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "default_templates"
MOCK_FILE_TEMPLATE = "mock_file.go.j2"
GENERATED_HEADER = "// Code generated by mockgen. DO NOT EDIT."


def build_environment(templates_dir: Path = TEMPLATES_DIR) -> Environment:
    """Create the template environment with the filters the mock template uses."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters["zero_values"] = zero_values
    env.filters["arg_names"] = arg_names
    return env


class StubRenderer:
    """Renders a mock struct implementing an interface's method set."""

    def __init__(
        self,
        environment: Environment,
        formatter: GoFormatter,
        package: str = "mocks",
        template_name: str = MOCK_FILE_TEMPLATE,
    ):
        self.template = environment.get_template(template_name)
        self.formatter = formatter
        self.package = package

    def render(self, descriptor: InterfaceDescriptor) -> str:
        """
        Render and format the stub source.

        Raises:
            RenderError: Template expansion failed or the output is not valid Go;
                `unformatted` holds whatever was expanded
        """
        try:
            raw = self.template.render(interface=descriptor, package=self.package, header=GENERATED_HEADER)
        except TemplateError as e:
            logger.error("template_execution_failed", interface=descriptor.name, error=str(e))
            raise RenderError(f"failed to execute template: {e}", details={"interface": descriptor.name}) from e

        try:
            return self.formatter.format(raw)
        except RenderError as e:
            e.details.setdefault("interface", descriptor.name)
            raise
