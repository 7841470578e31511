import itertools
import logging
from dataclasses import dataclass

from minilang.tokenizer import Token, TokenType, untokenize

logger = logging.getLogger(__name__)


@dataclass
class ParseError(Exception):
    errmsg: str
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        caret_line = " " * self._caret_column() + "^"
        return "\n".join([f"Parser error: {self.errmsg}", untokenize(self.tokens), caret_line])

    def _caret_column(self) -> int:
        if self.error_token_idx >= len(self.tokens):
            rendered = untokenize(self.tokens)
            return len(rendered) + 1 if rendered else 0
        # render up to and including the failing token so spacing rules match the full line
        failing_token = self.tokens[self.error_token_idx]
        return len(untokenize(self.tokens[: self.error_token_idx + 1])) - len(failing_token.lexeme)


@dataclass(frozen=True)
class Assignment:
    variable: str
    expression: tuple[Token, ...]

    def __str__(self) -> str:
        return f"{self.variable} = {untokenize(self.expression)}"


@dataclass(frozen=True)
class Read:
    variable: str

    def __str__(self) -> str:
        return f"Read {self.variable}"


@dataclass(frozen=True)
class Display:
    variable: str
    keyword: str = "Display"

    def __str__(self) -> str:
        return f"{self.keyword} {self.variable}"


Statement = Assignment | Read | Display

DISPLAY_KEYWORDS = frozenset([TokenType.DISPLAY, TokenType.PRINT])


def parse(tokens: list[Token]) -> list[Statement] | ParseError:
    """Parses the whole token list into statements.

    A malformed statement rejects the whole program: the ParseError is returned
    instead of the statement list, it is up to the caller to report it.
    """
    result: list[Statement] = []
    i = 0
    try:
        while i < len(tokens):
            statement, i = _consume_statement(tokens, i)
            result.append(statement)
    except ParseError as e:
        logger.debug("Rejecting program: %s at token %d", e.errmsg, e.error_token_idx)
        return e
    logger.debug("Parsed %d statement(s) from %d token(s)", len(result), len(tokens))
    return result


def _consume_statement(tokens: list[Token], i: int) -> tuple[Statement, int]:
    first = tokens[i]
    if first.type is TokenType.READ:
        variable, i = _consume_identifier(tokens, i + 1)
        return Read(variable), _skip_terminator(tokens, i)
    elif first.type in DISPLAY_KEYWORDS:
        variable, i = _consume_identifier(tokens, i + 1)
        return Display(variable, keyword=first.lexeme), _skip_terminator(tokens, i)
    else:
        return _consume_assignment(tokens, i)


def _consume_assignment(tokens: list[Token], i: int) -> tuple[Assignment, int]:
    variable, i = _consume_identifier(tokens, i)
    if i >= len(tokens) or tokens[i].type is not TokenType.EQUAL:
        raise ParseError(f"Expected {TokenType.EQUAL} after {variable!r}", tokens=tokens, error_token_idx=i)
    i += 1  # skipping "="
    expression_start = i
    while i < len(tokens) and tokens[i].type is not TokenType.SEMICOLON:
        i += 1
    if i == expression_start:
        raise ParseError(
            f"Expected expression in assignment to {variable!r}", tokens=tokens, error_token_idx=i
        )
    expression = tuple(itertools.islice(tokens, expression_start, i))
    return Assignment(variable, expression), _skip_terminator(tokens, i)


def _consume_identifier(tokens: list[Token], i: int) -> tuple[str, int]:
    if i >= len(tokens):
        raise ParseError(f"Expected {TokenType.IDENTIFIER}, found end of input", tokens=tokens, error_token_idx=i)
    token = tokens[i]
    if token.type is not TokenType.IDENTIFIER:
        raise ParseError(f"Expected {TokenType.IDENTIFIER}, found {token.type}", tokens=tokens, error_token_idx=i)
    return token.lexeme, i + 1


def _skip_terminator(tokens: list[Token], i: int) -> int:
    """Semicolon after a statement is optional"""
    if i < len(tokens) and tokens[i].type is TokenType.SEMICOLON:
        return i + 1
    return i
