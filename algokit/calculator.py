"""Four-function calculator on two operands."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable, Sequence

ERROR_MESSAGE = "Error! operator is not correct"


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def calculate(op: str, a: float, b: float) -> float:
    """Apply ``op`` (one of + - * /) to ``a`` and ``b``.

    Division by zero follows floating-point rules and gives inf or nan.
    """
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError(ERROR_MESSAGE) from None
    return operation(float(a), float(b))


def _format(value: float) -> str:
    return f"{value:g}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the calculator; take ``op a b`` as arguments or prompt for them."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 3:
        op, first, second = args
    else:
        op = input("Enter operator: +, -, *, /: ").strip()
        operands = input("Enter two operands: ").split()
        if len(operands) != 2:
            print("Expected two operands", file=sys.stderr)
            return 1
        first, second = operands
    try:
        a, b = float(first), float(second)
    except ValueError:
        print("Operands must be numbers", file=sys.stderr)
        return 1
    try:
        result = calculate(op, a, b)
    except ValueError as error:
        print(error)
        return 0
    print(f"{_format(a)} {op} {_format(b)} = {_format(result)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())