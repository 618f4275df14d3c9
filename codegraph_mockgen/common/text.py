"""
Text helpers shared by the parser and the synthesizer.
"""

import re

GO_KEYWORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

GO_PREDECLARED_TYPES = frozenset(
    {
        "any",
        "bool",
        "byte",
        "comparable",
        "complex64",
        "complex128",
        "error",
        "float32",
        "float64",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "rune",
        "string",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "uintptr",
    }
)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_OPENERS = "([{"
_CLOSERS = ")]}"


def abbreviate(name: str) -> str:
    """Concatenate the upper-case letters of name, lower-cased ("PredNamed" -> "pn")."""
    return "".join(ch.lower() for ch in name if ch.isupper())


def lower_first(text: str) -> str:
    if not text:
        return ""
    return text[0].lower() + text[1:]


def is_go_identifier(text: str) -> bool:
    return bool(_IDENTIFIER.match(text)) and text not in GO_KEYWORDS


def split_top_level(text: str, sep: str = ",") -> list[str]:
    """
    Split on sep, ignoring separators nested in brackets.

    `map[string]int, func(a, b int) error` splits into two parts.
    Empty parts are dropped and every part is stripped.
    """
    parts: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(text):
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == sep and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return [part.strip() for part in parts if part.strip()]


def unwrap_parens(text: str) -> str:
    """Remove one pair of parentheses when they enclose the whole text."""
    text = text.strip()
    if not (text.startswith("(") and text.endswith(")")):
        return text
    depth = 0
    for i, ch in enumerate(text):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            # closing paren of the opener found before the end: "(a) (b)"
            if depth == 0 and i != len(text) - 1:
                return text
    return text[1:-1].strip()


def collapse_whitespace(text: str) -> str:
    """Join a multi-line element into one line, dropping trailing commas before `)`."""
    if "\n" not in text:
        return text.strip()
    line = " ".join(text.split())
    line = re.sub(r"\(\s+", "(", line)
    line = re.sub(r",?\s*\)", ")", line)
    return line
