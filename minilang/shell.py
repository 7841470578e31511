import logging
from pathlib import Path
from typing import Callable, Optional

from minilang.config import ShellConfig
from minilang.parser import ParseError, parse
from minilang.runtime import execute
from minilang.tokenizer import TokenizerError, tokenize

logger = logging.getLogger(__name__)


def run_source(code: str, variables: dict[str, float], config: ShellConfig = ShellConfig()) -> list[str]:
    """Runs one submission through the whole pipeline.

    Tokenizer and parser errors reject the submission as a whole and are
    reported as a single (possibly multi-line) output entry.
    """
    try:
        tokens = tokenize(code, strict=config.strict_tokens)
    except TokenizerError as e:
        return [str(e)]

    statements = parse(tokens)
    if isinstance(statements, ParseError):
        return [str(statements)]

    return execute(statements, variables)


def run_file(path: Path, config: ShellConfig = ShellConfig()) -> list[str]:
    variables: dict[str, float] = dict()
    return run_source(path.read_text(encoding="utf-8"), variables, config)


def run_repl(
    config: ShellConfig = ShellConfig(),
    input_fn: Callable[[], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    session_variables: Optional[dict[str, float]] = dict() if config.keep_variables else None

    while True:
        output_fn(config.prompt)
        try:
            code = input_fn()
        except EOFError:
            break

        if code.strip().lower() == config.exit_command.lower():
            break

        variables = session_variables if session_variables is not None else dict()
        for line in run_source(code, variables, config):
            output_fn(line)
        logger.debug("Variables after submission: %s", variables)

    output_fn(config.farewell)
