"""
Command line entry point.

Three modes:
- ``advanced-calculator "2 + 3"`` evaluates one expression
- ``advanced-calculator --file ops.7z`` evaluates every line of a file or archive
- ``advanced-calculator`` with no argument reads expressions from stdin until EOF or ``q``
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional, TextIO

from pydantic import BaseModel, FilePath, ValidationError, model_validator

from advanced_calculator.batch.runner import BatchRunner, build_output_path
from advanced_calculator.common.evaluator import evaluate_operation
from advanced_calculator.common.logger import logger
from advanced_calculator.common.models import OperationResult

QUIT_COMMANDS = frozenset({"q", "quit", "exit"})


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str, optional
        Single expression to evaluate.
    file_path : FilePath, optional
        Path to the file containing arithmetic operations.
    """

    expression: Optional[str] = None
    file_path: Optional[FilePath] = None

    @model_validator(mode="after")
    def one_source_at_most(self) -> "CliArgs":
        """Reject an expression and a file given together."""
        if self.expression is not None and self.file_path is not None:
            raise ValueError("Give either an expression or --file, not both")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, ``sys.argv[1:]`` when None
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="advanced-calculator",
        description="Evaluate single-operator expressions: + - * / % ^ $ (root) ! (factorial)",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate, e.g. '2 ^ 10'. Put -- before an expression starting with a minus sign",
    )
    parser.add_argument("-f", "--file", dest="file_path", help="Text file or archive with one expression per line")

    args = parser.parse_args(argv)

    try:
        return CliArgs(expression=args.expression, file_path=args.file_path)
    except ValidationError as exc:
        parser.error(str(exc))


def format_result(result: OperationResult) -> str:
    """Render a result for the terminal."""
    if result.ok:
        return f"{result.value}"
    return f"Error: {result.message}"


def repl(stdin: TextIO, stdout: TextIO) -> None:
    """
    Evaluate one expression per input line until EOF or a quit command.

    :param stdin: Stream to read expressions from
    :param stdout: Stream to print results to
    """
    for line in stdin:
        expr = line.strip()
        if not expr:
            continue
        if expr.lower() in QUIT_COMMANDS:
            break
        print(format_result(evaluate_operation(expr)), file=stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the calculator and return the process exit status.
    """
    cli_args = parse_args(argv)

    if cli_args.file_path is not None:
        input_path: Path = Path(cli_args.file_path)
        output_path: Path = build_output_path(input_path)
        try:
            BatchRunner(input_file=input_path, output_file=output_path).run()
        except ValueError as exc:
            logger.error(f"📄❌ Cannot read {input_path}: {exc}")
            return 1
        print(output_path)
        return 0

    if cli_args.expression is not None:
        result = evaluate_operation(cli_args.expression)
        print(format_result(result))
        return 0 if result.ok else 1

    repl(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
