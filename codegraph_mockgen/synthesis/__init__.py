from codegraph_mockgen.synthesis.formatter import GofmtRunner, GoFormatter
from codegraph_mockgen.synthesis.normalizer import arg_names, has_named_params, normalize_params, normalize_returns
from codegraph_mockgen.synthesis.renderer import GENERATED_HEADER, StubRenderer, build_environment
from codegraph_mockgen.synthesis.zero_values import zero_value, zero_values

__all__ = [
    "GENERATED_HEADER",
    "GoFormatter",
    "GofmtRunner",
    "StubRenderer",
    "arg_names",
    "build_environment",
    "has_named_params",
    "normalize_params",
    "normalize_returns",
    "zero_value",
    "zero_values",
]
