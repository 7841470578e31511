import logging

from minilang.evaluator import EvalError, UndefinedVariable, evaluate
from minilang.parser import Assignment, Display, Read, Statement
from minilang.utils import format_binding, format_error

logger = logging.getLogger(__name__)


def execute(statements: list[Statement], variables: dict[str, float]) -> list[str]:
    """Runs statements in order against the variable store and returns the output lines.

    Errors in a single statement are reported as an output line and never stop
    the run; a failed assignment leaves the store untouched.
    """
    output: list[str] = []
    for statement in statements:
        logger.debug("Executing %s", statement)
        line = execute_statement(statement, variables)
        if line is not None:
            output.append(line)
    return output


def execute_statement(statement: Statement, variables: dict[str, float]) -> str | None:
    if isinstance(statement, Read):
        variables[statement.variable] = 0.0
        return None
    elif isinstance(statement, Assignment):
        result = evaluate(statement.expression, variables)
        if isinstance(result, EvalError):
            return format_error(str(result))
        variables[statement.variable] = result
        return None
    elif isinstance(statement, Display):
        if statement.variable in variables:
            return format_binding(statement.variable, variables[statement.variable])
        else:
            return format_error(str(UndefinedVariable(statement.variable)))
    else:
        raise RuntimeError(f"Unexpected statement type: {statement}")
