"""
Grammar-aware function type parsing.

Parameter lists can hold type expressions that are ambiguous under token
splitting (`[]string`, `*pkg.Type`, `map[string]int`, `func(a, b int)`), so
the signature is wrapped in a tiny Go file and parsed with tree-sitter.
"""

from dataclasses import dataclass

from tree_sitter import Node

from codegraph_mockgen.common.exceptions import MethodNotFoundError
from codegraph_mockgen.parsing.parser_registry import ParserRegistry, get_registry

_FIELD_NODES = frozenset({"parameter_declaration", "variadic_parameter_declaration"})


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """
    One parameter or result declaration.

    Attributes:
        names: Declared identifiers, empty for unnamed fields
        type_text: Source text of the type (`...T` for variadic fields)
        variadic: Whether the field is variadic
    """

    names: tuple[str, ...]
    type_text: str
    variadic: bool = False


@dataclass(frozen=True, slots=True)
class FunctionType:
    params: tuple[FieldSpec, ...]
    results: tuple[FieldSpec, ...]

    @property
    def has_named_params(self) -> bool:
        return any(field.names for field in self.params)

    def result_types(self) -> list[str]:
        """Result types in order, one entry per declared name (`a, b int` -> int, int)."""
        types: list[str] = []
        for field in self.results:
            types.extend([field.type_text] * max(1, len(field.names)))
        return types


def parse_function_type(params: str, returns: str = "", registry: ParserRegistry | None = None) -> FunctionType:
    """
    Parse `func(<params>) <returns>`.

    Raises:
        MethodNotFoundError: The text is not a valid Go function type
    """
    signature = f"func({params}) {returns}".strip()
    tree = (registry or get_registry()).parse_go(f"package stub\n\ntype signature {signature}\n")
    func_node = _find_function_type(tree.root_node)
    if tree.root_node.has_error or func_node is None:
        raise MethodNotFoundError("could not parse method signature", {"signature": signature})

    result = func_node.child_by_field_name("result")
    if result is None:
        results: tuple[FieldSpec, ...] = ()
    elif result.type == "parameter_list":
        results = _fields(result)
    else:
        results = (FieldSpec(names=(), type_text=_text(result)),)

    return FunctionType(params=_fields(func_node.child_by_field_name("parameters")), results=results)


def _find_function_type(root: Node) -> Node | None:
    for decl in root.named_children:
        if decl.type != "type_declaration":
            continue
        for spec in decl.named_children:
            if spec.type != "type_spec":
                continue
            type_node = spec.child_by_field_name("type")
            if type_node is not None and type_node.type == "function_type":
                return type_node
    return None


def _fields(parameter_list: Node | None) -> tuple[FieldSpec, ...]:
    if parameter_list is None:
        return ()
    fields = []
    for child in parameter_list.named_children:
        if child.type not in _FIELD_NODES:
            continue
        variadic = child.type == "variadic_parameter_declaration"
        type_text = _text(child.child_by_field_name("type"))
        fields.append(
            FieldSpec(
                names=tuple(_text(name) for name in child.children_by_field_name("name")),
                type_text=f"...{type_text}" if variadic else type_text,
                variadic=variadic,
            )
        )
    return tuple(fields)


def _text(node: Node | None) -> str:
    if node is None:
        return ""
    return node.text.decode("utf-8")
