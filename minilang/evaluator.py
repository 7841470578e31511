import logging
import operator
from dataclasses import dataclass
from typing import Callable, Sequence

from minilang.tokenizer import OPERATOR_TOKENS, Token, TokenType, untokenize

logger = logging.getLogger(__name__)


@dataclass
class EvalError(Exception):
    pass


@dataclass
class UndefinedVariable(EvalError):
    name: str

    def __str__(self) -> str:
        return f"Undefined variable {self.name}"


@dataclass
class DivisionByZero(EvalError):
    def __str__(self) -> str:
        return "Division by zero"


@dataclass
class MalformedExpression(EvalError):
    reason: str

    def __str__(self) -> str:
        return f"Malformed expression: {self.reason}"


def _divide(a: float, b: float) -> float:
    if b == 0:
        raise DivisionByZero()
    return a / b


OperationImpl = Callable[[float, float], float]

OPERATION_IMPLS: dict[TokenType, OperationImpl] = {
    TokenType.PLUS: operator.add,
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: _divide,
}


def get_op_precedence(op: TokenType) -> int:
    return {
        TokenType.PLUS: 0,
        TokenType.MINUS: 0,
        TokenType.STAR: 1,
        TokenType.SLASH: 1,
    }[op]


def evaluate(expression: Sequence[Token], variables: dict[str, float]) -> float | EvalError:
    """Evaluates infix expression tokens with an operand and an operator stack.

    Only binary + - * / are supported. Operators of equal precedence are applied
    left to right. Errors are returned rather than raised, the store is never
    modified here.
    """
    try:
        return _evaluate(expression, variables)
    except EvalError as e:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Failed to evaluate %r: %s", untokenize(expression), e)
        return e


def _evaluate(expression: Sequence[Token], variables: dict[str, float]) -> float:
    operands: list[float] = []
    operators: list[Token] = []
    for token in expression:
        if token.type is TokenType.NUMBER:
            operands.append(token.value)
        elif token.type is TokenType.IDENTIFIER:
            if token.lexeme not in variables:
                raise UndefinedVariable(token.lexeme)
            operands.append(variables[token.lexeme])
        elif token.type in OPERATOR_TOKENS:
            incoming_precedence = get_op_precedence(token.type)
            while operators and get_op_precedence(operators[-1].type) >= incoming_precedence:
                _reduce(operands, operators)
            operators.append(token)
        elif token.type in (TokenType.BRACKET_OPEN, TokenType.BRACKET_CLOSE):
            raise MalformedExpression("parentheses are not supported")
        else:
            raise MalformedExpression(f"unexpected {token.type} {token.lexeme!r}")

    while operators:
        _reduce(operands, operators)

    if len(operands) != 1:
        raise MalformedExpression(f"expected a single value, got {len(operands)}")
    return operands[0]


def _reduce(operands: list[float], operators: list[Token]) -> None:
    op = operators.pop()
    if len(operands) < 2:
        raise MalformedExpression(f"missing operand for {op.lexeme!r}")
    right = operands.pop()
    left = operands.pop()
    operands.append(OPERATION_IMPLS[op.type](left, right))
