"""
Conformance: Expressions - unary minus
A single leading '-' is allowed at the start of an additive expression only.
"""
import pytest


# Each test case is a tuple: (description, minipas_source, expected_outcome)
# expected_outcome is either "valid" or "error: <description>"

CASES = [
    ("negate_identifier", "program p; x = -a;", "valid"),
    ("negate_literal", "program p; x = -1;", "valid"),
    ("negate_float", "program p; x = -2.5e-3;", "valid"),
    ("negate_product", "program p; x = -a * b;", "valid"),
    ("negate_then_add", "program p; x = -a + b - c;", "valid"),
    ("negate_in_parens", "program p; x = a * (-b);", "valid"),
    ("negate_parens", "program p; x = -(a + b);", "valid"),
    ("negate_condition", "program p; while -i < 0 { i = i + 1; }", "valid"),
    ("negate_argument", "program p; f(-a, -1);", "valid"),
    ("minus_after_plus", "program p; x = a + -b;", "error: expected expression, found '-'"),
    ("minus_after_minus", "program p; x = a - -b;", "error: expected expression, found '-'"),
    ("minus_after_star", "program p; x = a * -b;", "error: error[UnexpectedToken]"),
    ("minus_after_comparison", "program p; x = a < -b;", "error: found '-'"),
    ("double_negation", "program p; x = --a;", "error: expected expression, found '-'"),
    ("unary_plus", "program p; x = +a;", "error: expected expression, found '+'"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_expr_unary(runner, description, source, expected):
    """Unary minus placement."""
    result = runner.validate(source)
    if expected == "valid":
        assert result.valid, f"Expected valid but got errors: {result.diagnostics}"
    else:
        assert not result.valid, f"Expected error but got valid"
        error_text = expected.removeprefix("error: ")
        assert any(error_text.lower() in d.lower() for d in result.diagnostics), \
            f"Expected '{error_text}' in diagnostics: {result.diagnostics}"
