"""
Signature Normalizer

Turns raw parameter and return text into the canonical form the stub
template echoes: every parameter named, returns reduced to bare types.
"""

from codegraph_mockgen.common.text import (
    GO_PREDECLARED_TYPES,
    is_go_identifier,
    lower_first,
    split_top_level,
)
from codegraph_mockgen.parsing.function_type import parse_function_type
from codegraph_mockgen.parsing.parser_registry import ParserRegistry


def has_named_params(raw_params: str, raw_returns: str = "", registry: ParserRegistry | None = None) -> bool:
    """
    Check whether any parameter carries an identifier before its type.

    Raises:
        MethodNotFoundError: `func(<raw_params>) <raw_returns>` is not a valid function type
    """
    signature = parse_function_type(raw_params, raw_returns, registry)
    return signature.has_named_params


def normalize_params(raw_params: str, has_named: bool) -> str:
    """
    Name every parameter of a raw parameter list.

    Named lists are returned unchanged. Unnamed parameters get a name derived
    from their type (`*pkg.Item` -> `item`, `[]string` -> `strings`), or
    `<letter><index>` when the derived name is not usable (`string` -> `s0`).
    """
    if not raw_params:
        return ""
    if has_named:
        return raw_params

    used: set[str] = set()
    args = []
    for i, raw_type in enumerate(split_top_level(raw_params)):
        name = _derive_name(raw_type)
        if not _is_usable(name, raw_type, used):
            name = _fallback_name(raw_type, i, used)
        used.add(name)
        args.append(f"{name} {raw_type}")
    return ", ".join(args)


def normalize_returns(raw_returns: str, registry: ParserRegistry | None = None) -> str:
    """
    Reduce a return clause to its types.

    `(n int, err error)` -> `(int, error)`, `(a, b int)` -> `(int, int)`,
    `(err error)` -> `error`, empty -> empty.

    A single result is returned without parentheses, as gofmt would print
    it, instead of being re-wrapped as `(error)`. Both forms are valid Go.

    Raises:
        MethodNotFoundError: The clause is not a valid result list
    """
    if not raw_returns.strip():
        return ""
    types = parse_function_type("", raw_returns, registry).result_types()
    if not types:
        return ""
    if len(types) == 1:
        return types[0]
    return f"({', '.join(types)})"


def arg_names(params: str) -> str:
    """
    Call arguments forwarding a canonical parameter list.

    `name string, limit int` -> `name, limit`; variadic parameters are
    spread (`ids ...int` -> `ids...`).
    """
    names = []
    for part in split_top_level(params):
        name, _, param_type = part.partition(" ")
        if param_type.strip().startswith("..."):
            name += "..."
        names.append(name)
    return ", ".join(names)


def _derive_name(raw_type: str) -> str:
    variadic = raw_type.startswith("...")
    name = raw_type.removeprefix("...").strip("[]*")
    if "." in name:
        name = name.rsplit(".", 1)[1]
    name = lower_first(name)
    if variadic or "[]" in raw_type:
        name += "s"
    return name


def _is_usable(name: str, raw_type: str, used: set[str]) -> bool:
    return (
        name != raw_type
        and is_go_identifier(name)
        and name not in GO_PREDECLARED_TYPES
        and name not in used
    )


def _fallback_name(raw_type: str, index: int, used: set[str]) -> str:
    letter = next((ch.lower() for ch in raw_type if ch.isascii() and ch.isalpha()), "p")
    name = f"{letter}{index}"
    suffix = 1
    while name in used:
        name = f"{letter}{index}_{suffix}"
        suffix += 1
    return name
