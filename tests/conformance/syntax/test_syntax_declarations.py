"""
Conformance: Program Structure - variable declarations
Grammar: decl ::= 'let' IDENT ':' type ';' ; type ::= 'int' | 'bool' | 'float' | 'str'
"""
import pytest


# Each test case is a tuple: (description, minipas_source, expected_outcome)
# expected_outcome is either "valid" or "error: <description>"

CASES = [
    ("decl_int", "program p; let x : int; x = 1;", "valid"),
    ("decl_bool", "program p; let b : bool; b = 0;", "valid"),
    ("decl_float", "program p; let f : float; f = 1.5;", "valid"),
    ("decl_str", 'program p; let s : str; s = "s";', "valid"),
    ("many_decls", "program p; let a : int; let b : int; let c : str; a = b;", "valid"),
    ("duplicate_name_is_syntax_ok", "program p; let a : int; let a : int; a = 1;", "valid"),
    ("missing_colon", "program demo; let x int; x = 1;", "error: <test>:1:21: error[ExpectedToken]"),
    ("missing_colon_message", "program demo; let x int; x = 1;", "error: expected ':' after variable name, found 'int'"),
    ("missing_type", "program p; let x : ; x = 1;", "error: expected type name"),
    ("unknown_type", "program p; let x : integer; x = 1;", "error: found 'integer'"),
    ("missing_name", "program p; let : int; x = 1;", "error: expected identifier after 'let'"),
    ("missing_semicolon", "program p; let x : int x = 1;", "error: expected ';' after variable type, found 'x'"),
    ("decl_after_statement", "program p; x = 1; let y : int; y = 2;", "error: declarations must come before the first statement"),
    ("decl_inside_block", "program p; { let y : int; y = 2; }", "error: error[UnexpectedToken]"),
    ("decls_without_statements", "program p; let x : int;", "error: error[UnexpectedEndOfInput]"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_syntax_declarations(runner, description, source, expected):
    """Variable declaration syntax."""
    result = runner.validate(source)
    if expected == "valid":
        assert result.valid, f"Expected valid but got errors: {result.diagnostics}"
    else:
        assert not result.valid, f"Expected error but got valid"
        error_text = expected.removeprefix("error: ")
        assert any(error_text.lower() in d.lower() for d in result.diagnostics), \
            f"Expected '{error_text}' in diagnostics: {result.diagnostics}"
