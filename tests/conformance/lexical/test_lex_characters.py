"""
Conformance: Lexical Structure - identifiers, operators, whitespace
"""
import pytest


# Each test case is a tuple: (description, minipas_source, expected_outcome)
# expected_outcome is either "valid" or "error: <description>"

CASES = [
    ("underscore_identifier", "program p; let _tmp1 : int; _tmp1 = 0;", "valid"),
    ("keyword_prefix_identifier", "program p; whilex = iffy;", "valid"),
    ("no_spaces", "program p;x=a<=b;", "valid"),
    ("tabs_and_crlf", "program p;\r\n\tx = 1;\r\n", "valid"),
    ("not_equal_operator", "program p; x = a != b;", "valid"),
    ("lone_bang", "program p; x = a ! b;", "error: unexpected character: '!'"),
    ("tilde", "program p; x = 1 ~ 2;", "error: unexpected character: '~'"),
    ("hash_comment", "program p;\n# note\nx = 1;", "error: <test>:2:1: error[UnexpectedCharacter]"),
    ("double_ampersand", "program p; x = a && b;", "error: unexpected character: '&'"),
    ("non_ascii_identifier", "program p; let café : int; café = 1;", "error: error[UnexpectedCharacter]"),
    ("brackets", "program p; x = a[1];", "error: unexpected character: '['"),
]


@pytest.mark.parametrize("description,source,expected", CASES, ids=[c[0] for c in CASES])
def test_lex_characters(runner, description, source, expected):
    """Identifier, operator and whitespace lexing."""
    result = runner.validate(source)
    if expected == "valid":
        assert result.valid, f"Expected valid but got errors: {result.diagnostics}"
    else:
        assert not result.valid, f"Expected error but got valid"
        error_text = expected.removeprefix("error: ")
        assert any(error_text.lower() in d.lower() for d in result.diagnostics), \
            f"Expected '{error_text}' in diagnostics: {result.diagnostics}"
