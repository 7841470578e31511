import pytest

from minilang.tokenizer import Token, TokenizerError, TokenType, tokenize, untokenize


def types(code: str) -> list[TokenType]:
    return [t.type for t in tokenize(code)]


def test_empty_input() -> None:
    assert tokenize("") == []
    assert tokenize("   \n\t") == []


def test_statement_tokens() -> None:
    assert tokenize("x = 1.5 * y;") == [
        Token(TokenType.IDENTIFIER, "x"),
        Token(TokenType.EQUAL, "="),
        Token(TokenType.NUMBER, "1.5"),
        Token(TokenType.STAR, "*"),
        Token(TokenType.IDENTIFIER, "y"),
        Token(TokenType.SEMICOLON, ";"),
    ]


@pytest.mark.parametrize(
    "code, expected_types",
    [
        pytest.param("Read x", [TokenType.READ, TokenType.IDENTIFIER]),
        pytest.param("Display x", [TokenType.DISPLAY, TokenType.IDENTIFIER]),
        pytest.param("Print x", [TokenType.PRINT, TokenType.IDENTIFIER]),
        pytest.param("read x", [TokenType.IDENTIFIER, TokenType.IDENTIFIER], id="keywords-are-case-sensitive"),
        pytest.param("Reading = 5 ;", [TokenType.IDENTIFIER, TokenType.EQUAL, TokenType.NUMBER, TokenType.SEMICOLON]),
        pytest.param("ReadX", [TokenType.IDENTIFIER]),
        pytest.param("_Read", [TokenType.IDENTIFIER]),
        pytest.param("Display2", [TokenType.IDENTIFIER]),
        pytest.param("2Read", [TokenType.NUMBER, TokenType.IDENTIFIER], id="keyword-after-digit"),
        pytest.param("1.5Print x", [TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.IDENTIFIER]),
        pytest.param("2 Read", [TokenType.NUMBER, TokenType.READ]),
        pytest.param("( ) + - / ", [
            TokenType.BRACKET_OPEN,
            TokenType.BRACKET_CLOSE,
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.SLASH,
        ]),
    ],
)
def test_token_types(code: str, expected_types: list[TokenType]) -> None:
    assert types(code) == expected_types


def test_keyword_is_not_matched_inside_identifier() -> None:
    tokens = tokenize("Reading = 5 ;")
    assert tokens[0] == Token(TokenType.IDENTIFIER, "Reading")


@pytest.mark.parametrize(
    "code, expected_lexemes",
    [
        pytest.param("42", ["42"]),
        pytest.param("3.25", ["3.25"]),
        pytest.param("1.2.3", ["1.2", "3"], id="single-fractional-part"),
        pytest.param("5.", ["5"], id="dangling-dot-skipped"),
        pytest.param("x1_y2", ["x1_y2"]),
        pytest.param("2x", ["2", "x"]),
    ],
)
def test_lexemes(code: str, expected_lexemes: list[str]) -> None:
    assert [t.lexeme for t in tokenize(code)] == expected_lexemes


def test_unrecognized_characters_are_skipped() -> None:
    assert tokenize("x = 1 $ @ 2 #") == tokenize("x = 1 2")


def test_strict_mode_rejects_unrecognized_characters() -> None:
    with pytest.raises(TokenizerError) as exc_info:
        tokenize("x = 1 $ 2", strict=True)
    assert exc_info.value.error_char_idx == 6
    assert "Unexpected character: '$'" in str(exc_info.value)


def test_number_value() -> None:
    assert tokenize("2.5")[0].value == 2.5
    with pytest.raises(ValueError):
        tokenize("x")[0].value


def test_untokenize() -> None:
    assert untokenize(tokenize("x=(1+2)*y ;")) == "x = (1 + 2) * y;"
