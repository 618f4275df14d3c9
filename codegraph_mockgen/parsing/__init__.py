from codegraph_mockgen.parsing.function_type import FieldSpec, FunctionType, parse_function_type
from codegraph_mockgen.parsing.interface_extractor import InterfaceExtractor
from codegraph_mockgen.parsing.parser_registry import ParserRegistry, get_registry
from codegraph_mockgen.parsing.signature_parser import parse_method_line

__all__ = [
    "FieldSpec",
    "FunctionType",
    "InterfaceExtractor",
    "ParserRegistry",
    "get_registry",
    "parse_function_type",
    "parse_method_line",
]
