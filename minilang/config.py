from dataclasses import dataclass

DEFAULT_PROMPT = "\nEnter an expression (or 'exit' to quit):"


@dataclass(frozen=True)
class ShellConfig:
    prompt: str = DEFAULT_PROMPT
    exit_command: str = "exit"
    farewell: str = "Interpreter closed."
    # the store is re-created for every submitted line unless this is set
    keep_variables: bool = False
    strict_tokens: bool = False
