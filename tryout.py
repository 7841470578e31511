from minilang.parser import ParseError, parse
from minilang.runtime import execute
from minilang.tokenizer import tokenize

for code in [
    "Read x; Display x",
    "x = 5",
    "x = 2 + 3 * 4; Print x",
    "a = 10 / 5 / 2; b = a - 1 - 1; Display b",
    "Reading = 5; Display Reading",
    "x = 5 / 0; Display x",
    "y = z + 1; Display y",
    "x = -1",
    "x = (1 + 2)",
    "x = 1 $ 2",
    "Read",
    "x 5",
    "Display z",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    tokens = tokenize(code)
    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    statements = parse(tokens)
    if isinstance(statements, ParseError):
        print(statements)
        continue
    statements_str = "\n".join(f" {i + 1:> 2}: {stmt}" for i, stmt in enumerate(statements))
    print(f"ast:\n{statements_str}")

    variables: dict[str, float] = dict()
    output = execute(statements, variables)
    output_str = "\n".join(f" {line}" for line in output)
    print(f"output:\n{output_str}")
    print(f"variables: {variables}")
