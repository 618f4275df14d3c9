"""
Method-Signature Parser

Splits one method line such as `Do(ctx Context, id int) (Result, error)`
into its name, raw parameter text and raw return clause.
"""

import re

from codegraph_mockgen.common.exceptions import MethodNotFoundError
from codegraph_mockgen.models import RawSignature

_METHOD_HEAD = re.compile(r"^(\w+)\s*\(")


def parse_method_line(line: str) -> RawSignature:
    """
    Parse one raw method line.

    The parameter list runs from the first `(` to its matching `)`; the rest
    of the line is the return clause (empty, a bare type or a parenthesized list).

    Raises:
        MethodNotFoundError: The line is not `<identifier>(<args>) <rest>`
    """
    line = line.strip()
    match = _METHOD_HEAD.match(line)
    if match is None:
        raise MethodNotFoundError("couldn't find interface method", {"line": line})

    open_idx = match.end() - 1
    close_idx = _matching_paren(line, open_idx)
    if close_idx is None:
        raise MethodNotFoundError("unbalanced parameter list", {"line": line})

    return RawSignature(
        name=match.group(1),
        params=line[open_idx + 1 : close_idx].strip(),
        returns=line[close_idx + 1 :].strip(),
    )


def _matching_paren(text: str, open_idx: int) -> int | None:
    depth = 0
    for i in range(open_idx, len(text)):
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return None
