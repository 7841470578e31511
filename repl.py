import argparse
import logging
from pathlib import Path

from minilang.config import DEFAULT_PROMPT, ShellConfig
from minilang.shell import run_file, run_repl


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description="Run minilang programs")
    arg_parser.add_argument("file", nargs="?", type=Path, help="program to run, starts a REPL if omitted")
    arg_parser.add_argument("--strict", action="store_true", help="fail on unrecognized characters")
    arg_parser.add_argument("--keep-variables", action="store_true", help="share variables between REPL lines")
    arg_parser.add_argument("--prompt", default=DEFAULT_PROMPT)
    arg_parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = arg_parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = ShellConfig(prompt=args.prompt, keep_variables=args.keep_variables, strict_tokens=args.strict)

    if args.file is not None:
        for line in run_file(args.file, config):
            print(line)
    else:
        run_repl(config)
