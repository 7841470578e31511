"""Compares the evaluator with Python's own arithmetic on random + - * / expressions"""
import math
import random
from typing import Optional

from minilang.evaluator import EvalError, evaluate
from minilang.tokenizer import tokenize

OPERATORS = "+-*/"


def generate(rng: random.Random, operand_count: int) -> str:
    parts = [_generate_number(rng)]
    for _ in range(operand_count - 1):
        parts.extend([rng.choice(OPERATORS), _generate_number(rng)])
    return " ".join(parts)


def _generate_number(rng: random.Random) -> str:
    # no leading zeros, python rejects them
    if rng.random() < 0.3:
        return f"{rng.randint(0, 99)}.{rng.randint(0, 99)}"
    return str(rng.randint(0, 99))


def eval_py(code: str) -> Optional[float]:
    try:
        return float(eval(code))
    except ZeroDivisionError:
        return None


def eval_my(code: str) -> Optional[float]:
    result = evaluate(tokenize(code), variables={})
    if isinstance(result, EvalError):
        return None
    return result


def results_differ(code: str) -> bool:
    res_py = eval_py(code)
    res_my = eval_my(code)
    if res_py is None or res_my is None:
        return res_py is not res_my
    return not math.isclose(res_py, res_my, abs_tol=1e-9)


if __name__ == "__main__":
    rng = random.Random()
    while True:
        code = generate(rng, operand_count=rng.randint(1, 8))
        if results_differ(code):
            print(f"{code!r}\npy: {eval_py(code)}\nmy: {eval_my(code)}\n\n")
