import enum
import logging
import re
from dataclasses import dataclass
from typing import Sequence

from minilang.utils import PrintableEnum

logger = logging.getLogger(__name__)


@dataclass
class TokenizerError(Exception):
    """Raised for unknown characters, only when tokenizing in strict mode"""

    errmsg: str
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class TokenType(PrintableEnum):
    IDENTIFIER = enum.auto()
    NUMBER = enum.auto()
    READ = enum.auto()
    DISPLAY = enum.auto()
    PRINT = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    EQUAL = enum.auto()
    SEMICOLON = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str

    @property
    def value(self) -> float:
        if self.type is not TokenType.NUMBER:
            raise ValueError(f"{self.type} token has no numeric value")
        return float(self.lexeme)

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


KEYWORDS = {
    "Read": TokenType.READ,
    "Display": TokenType.DISPLAY,
    "Print": TokenType.PRINT,
}

OPERATOR_TOKENS = frozenset([TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH])

SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
    ";": TokenType.SEMICOLON,
    "=": TokenType.EQUAL,
}


def _is_identifier_start(s: str) -> bool:
    return s.isascii() and (s.isalpha() or s == "_")


def _is_valid_in_identifier(s: str) -> bool:
    return s.isascii() and (s.isalnum() or s == "_")


def _is_digit(s: str) -> bool:
    return s.isascii() and s.isdigit()


def tokenize(code: str, strict: bool = False) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        if _is_identifier_start(code[i]):
            word_end_idx = i + 1
            while word_end_idx < len(code) and _is_valid_in_identifier(code[word_end_idx]):
                word_end_idx += 1
            word = code[i:word_end_idx]
            # keywords are only recognized as whole words: "Reading" and "2Read" stay identifiers
            follows_word_char = i > 0 and _is_valid_in_identifier(code[i - 1])
            token_type = TokenType.IDENTIFIER if follows_word_char else KEYWORDS.get(word, TokenType.IDENTIFIER)
            tokens.append(Token(type=token_type, lexeme=word))
            i = word_end_idx
        elif _is_digit(code[i]):
            number_end_idx = i + 1
            while number_end_idx < len(code) and _is_digit(code[number_end_idx]):
                number_end_idx += 1
            if (
                number_end_idx + 1 < len(code)
                and code[number_end_idx] == "."
                and _is_digit(code[number_end_idx + 1])
            ):
                number_end_idx += 1
                while number_end_idx < len(code) and _is_digit(code[number_end_idx]):
                    number_end_idx += 1
            tokens.append(Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx]))
            i = number_end_idx
        elif code[i] in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[code[i]], lexeme=code[i]))
            i += 1
        elif code[i].isspace():
            i += 1
        else:
            if strict:
                raise TokenizerError(f"Unexpected character: {code[i]!r}", code=code, error_char_idx=i)
            logger.debug("Skipping unrecognized character %r at index %d", code[i], i)
            i += 1

    return tokens


def untokenize(tokens: Sequence[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    result = re.sub(r"\s+;", ";", result)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
