"""
Zero-Value Synthesizer

Maps a return type to the literal a stub returns for it. Pure and
deterministic: identical type text always yields identical literal text.
"""

from codegraph_mockgen.common.text import abbreviate, split_top_level, unwrap_parens

_INTEGER_TYPES = (
    "int",
    "int8",
    "int16",
    "int32",
    "int64",
    "uint",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "uintptr",
    "byte",
    "rune",
    "complex64",
    "complex128",
)

BUILTIN_ZERO_VALUES: dict[str, str] = {
    "error": "nil",
    "bool": "false",
    "float32": "1.1",
    "float64": "1.1",
    "string": '""',
    "interface{}": '""',
    "interface {}": '""',
    "any": '""',
    **{name: "1" for name in _INTEGER_TYPES},
}

_NIL_PREFIXES = ("func(", "func (", "chan ", "chan<-", "<-chan")


def zero_value(return_type: str) -> str:
    """
    Literal expression returned for one type.

    Builtins come from BUILTIN_ZERO_VALUES. Otherwise, in order:
    function and channel types -> nil, maps -> `T{}`, slices -> `T{}`,
    pointers -> `&T` plus `{}` when the pointee looks user-defined,
    anything else -> `T{}`.
    """
    return_type = return_type.strip()
    if return_type in BUILTIN_ZERO_VALUES:
        return BUILTIN_ZERO_VALUES[return_type]
    if return_type.startswith(_NIL_PREFIXES):
        return "nil"
    if return_type.startswith("map["):
        return f"{return_type}{{}}"
    if "[]" in return_type:
        return f"{return_type}{{}}"
    if "*" in return_type:
        value = return_type.replace("*", "&", 1)
        if abbreviate(value):
            value += "{}"
        return value
    return f"{return_type}{{}}"


def zero_values(returns: str) -> str:
    """Comma-joined literals for a canonical return list (`(int, error)` -> `1, nil`)."""
    return ", ".join(zero_value(entry) for entry in split_top_level(unwrap_parens(returns)))
