"""Evaluate every expression of a file and write the results next to it."""
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, FilePath

from advanced_calculator.batch.reader import load_expressions
from advanced_calculator.common.evaluator import evaluate_operation
from advanced_calculator.common.logger import logger
from advanced_calculator.common.models import OperationResult


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path for an input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations.7z
    output: resources/operations_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    # Path.stem only drops the last suffix, so strip all of them
    base = input_path.name[: -len("".join(input_path.suffixes))] if input_path.suffixes else input_path.name
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{base}{suffix_safe}_results.txt")


class BatchRunner(BaseModel):
    """
    Evaluate a file of expressions, one per line.

    Each result is written to the output file as soon as it is computed:
        - ``<expression> = <value>`` on success
        - ``<expression> -> ERROR: <message>`` otherwise
    """

    # Paths must not change while a batch is running
    model_config = ConfigDict(frozen=True)

    input_file: FilePath = Field(..., description="Text file or archive holding expressions")
    output_file: Path = Field(..., description="Path to write computation results")

    def run(self) -> List[OperationResult]:
        """
        Evaluate every expression and write the results file.

        :return: Results in input order
        :rtype: List[OperationResult]
        :raises ValueError: If the input archive is unsupported or holds no .txt file
        """
        expressions: List[str] = load_expressions(self.input_file)
        results: List[OperationResult] = []

        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expr in enumerate(expressions, start=1):
                result = evaluate_operation(expr)
                results.append(result)
                if not result.ok:
                    logger.warning(f"🧮❌ Line {line_number}: {result.message} ({expr!r})")
                f_out.write(result.to_line() + "\n")
                f_out.flush()

        failed = sum(1 for result in results if not result.ok)
        logger.info(f"✅ {len(results)} expressions evaluated, {failed} rejected, results in {self.output_file}")
        return results
