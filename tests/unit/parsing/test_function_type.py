"""
Function type parsing with tree-sitter
"""

import pytest

from codegraph_mockgen.common.exceptions import MethodNotFoundError
from codegraph_mockgen.parsing.function_type import FieldSpec, parse_function_type


def test_named_params_grouped_by_type(registry):
    signature = parse_function_type("a, b int, name string", registry=registry)

    assert signature.has_named_params
    assert signature.params == (
        FieldSpec(names=("a", "b"), type_text="int"),
        FieldSpec(names=("name",), type_text="string"),
    )


def test_unnamed_params(registry):
    signature = parse_function_type("context.Context, []string, *Item", registry=registry)

    assert not signature.has_named_params
    assert [field.type_text for field in signature.params] == ["context.Context", "[]string", "*Item"]


def test_variadic_param(registry):
    signature = parse_function_type("[]*Record, ...string", registry=registry)

    last = signature.params[-1]
    assert last.variadic
    assert last.type_text == "...string"


def test_no_params(registry):
    signature = parse_function_type("", registry=registry)

    assert signature.params == ()
    assert not signature.has_named_params


class TestResultTypes:
    @pytest.mark.parametrize(
        "returns,expected",
        [
            ("", []),
            ("error", ["error"]),
            ("(int, error)", ["int", "error"]),
            ("(n int, err error)", ["int", "error"]),
            ("(a, b int)", ["int", "int"]),
            ("func(int) error", ["func(int) error"]),
            ("(map[string]int, func(a, b int) error)", ["map[string]int", "func(a, b int) error"]),
        ],
    )
    def test_result_types(self, registry, returns, expected):
        assert parse_function_type("", returns, registry).result_types() == expected


def test_invalid_signature_raises(registry):
    with pytest.raises(MethodNotFoundError) as exc_info:
        parse_function_type("a int,, b", registry=registry)

    assert "signature" in exc_info.value.details
