import pytest
from chromavalue.errors import ColorSyntaxError
from chromavalue.parser import ColorFunctionToken, TokenKind, parse_color_function, get_color_function_parser

def _kinds(token):
    return [child.kind for child in token.children]

def test_parser_is_built_once():
    assert get_color_function_parser() is get_color_function_parser()

def test_comma_separated():
    token = parse_color_function("rgb(1,2,3)")
    assert token.kind is TokenKind.FUNCTION
    assert token.text == "rgb(1,2,3)"
    assert _kinds(token) == [
        TokenKind.FUNCTION_NAME,
        TokenKind.PARENTHESIS_OPEN_SYMBOL,
        TokenKind.NUMBER,
        TokenKind.SEPARATOR_SYMBOL,
        TokenKind.NUMBER,
        TokenKind.SEPARATOR_SYMBOL,
        TokenKind.NUMBER,
        TokenKind.PARENTHESIS_CLOSE_SYMBOL,
    ]
    assert [child.value for child in token.children if child.kind is TokenKind.NUMBER] == [1.0, 2.0, 3.0]

def test_text_is_kept_exactly():
    for text in (
        "rgba( 0% ,1%,100%, 50% )",
        "rgba( 0 1 2 / 3 )",
        "hsl(359deg,100%,50%)",
        "hsla(359 25% 50% / 75%)",
        "HSL(1.5e1, .5, 0.5)",
    ):
        token = parse_color_function(text)
        assert token.text == text
        assert "".join(child.text for child in token.children) == text

def test_percentage_and_degrees_tokens():
    token = parse_color_function("hsl(359deg,100%,50%)")
    values = [child for child in token.children if not child.is_symbol]
    assert values[0] == ColorFunctionToken.leaf(TokenKind.FUNCTION_NAME, "hsl", "hsl")
    assert values[1] == ColorFunctionToken.leaf(TokenKind.NUMBER, 359.0, "359")
    assert values[2] == ColorFunctionToken.leaf(TokenKind.PERCENTAGE, 100.0, "100%")
    assert values[3] == ColorFunctionToken.leaf(TokenKind.PERCENTAGE, 50.0, "50%")
    assert TokenKind.DEGREES_UNIT_SYMBOL in _kinds(token)

def test_whitespace_tokens():
    token = parse_color_function("rgba( 0 1 2 / 3 )")
    assert _kinds(token).count(TokenKind.WHITESPACE) == 6
    assert _kinds(token).count(TokenKind.SEPARATOR_SYMBOL) == 1

def test_function_token_needs_children():
    with pytest.raises(ValueError):
        ColorFunctionToken(TokenKind.FUNCTION, None, "", ())

@pytest.mark.parametrize("text", ["rgb(1", "rgb(1,2,3", "rgb(1,2", "rgb("])
def test_incomplete_input_fails_at_end(text):
    with pytest.raises(ColorSyntaxError) as info:
        parse_color_function(text)
    assert info.value.position == len(text)
    assert info.value.text == text

@pytest.mark.parametrize("text, position", [
    ("rgb(1,x,3)", 6),
    ("rgb(1,2,3))", 10),
    ("rgb(1;2;3)", 5),
])
def test_bad_character_position(text, position):
    with pytest.raises(ColorSyntaxError) as info:
        parse_color_function(text)
    assert info.value.position == position
