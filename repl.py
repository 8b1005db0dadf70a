import argparse

from calcengine.engine import CalculationError, evaluate, is_valid_expression
from calcengine.formatting import DEFAULT_MAX_DECIMALS, format_number
from calcengine.tokenizer import TokenizerError, tokenize, untokenize


def respond(code: str, max_decimals: int = DEFAULT_MAX_DECIMALS, show_tokens: bool = False) -> str:
    lines: list[str] = []
    if show_tokens:
        try:
            lines.append(f"tokens: {untokenize(tokenize(code))}")
        except TokenizerError:
            pass

    if not is_valid_expression(code):
        lines.append("Invalid expression")
        # the stage error's caret display says where
        try:
            evaluate(code)
        except CalculationError as e:
            if e.__cause__ is not None:
                lines.append(str(e.__cause__))
        return "\n".join(lines)

    try:
        result = evaluate(code)
    except CalculationError as e:
        lines.append(str(e))
    else:
        lines.append(format_number(result, max_decimals))
    return "\n".join(lines)


if __name__ == "__main__":
    argparser = argparse.ArgumentParser(description="Evaluate arithmetic expressions interactively")
    argparser.add_argument("--max-decimals", type=int, default=DEFAULT_MAX_DECIMALS)
    argparser.add_argument("--tokens", action="store_true", help="echo the tokenized input")
    ns = argparser.parse_args()

    while True:
        try:
            code = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        print(respond(code, max_decimals=ns.max_decimals, show_tokens=ns.tokens))
