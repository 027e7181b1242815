"""Small stateless tools served next to the plan tools."""

import getpass
import operator
import os
import platform
from collections.abc import Callable
from datetime import datetime

from src.domain.services.plan_markdown_codec import DATE_FORMAT

_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "add": operator.add,
    "subtract": operator.sub,
    "multiply": operator.mul,
    "divide": operator.truediv,
    "power": operator.pow,
}

_SYMBOLS = {"add": "+", "subtract": "-", "multiply": "*", "divide": "/", "power": "^"}


def hello(text: str = "") -> str:
    greeting = "Hello World from the plan tool server!"
    return f"{greeting} {text.upper()}" if text else greeting


def echo(text: str) -> str:
    return text


def current_time(now: datetime | None = None) -> str:
    return f"Current time: {(now or datetime.now()).strftime(DATE_FORMAT)}"


def calculate(a: float, b: float, operation: str) -> float:
    """Apply a binary arithmetic operation.

    Raises:
        ValueError: unknown operation, division by zero, or a result that
            cannot be represented (``0 ** -1``, overflow, complex roots).
    """
    op = operation.strip().lower()
    if op not in _OPERATIONS:
        raise ValueError(f"Unknown operation '{operation}' (expected one of: {', '.join(_OPERATIONS)})")
    if op == "divide" and b == 0:
        raise ValueError("Division by zero")
    try:
        result = _OPERATIONS[op](a, b)
    except ZeroDivisionError as e:
        raise ValueError("Division by zero") from e
    except ArithmeticError as e:
        raise ValueError(f"Result out of range: {e}") from e
    if isinstance(result, complex):
        raise ValueError(f"Result of {a:g} {_SYMBOLS[op]} {b:g} is not a real number")
    return result


def format_calculation(a: float, b: float, operation: str) -> str:
    result = calculate(a, b, operation)
    return f"{a:g} {_SYMBOLS[operation.strip().lower()]} {b:g} = {result:g}"


def system_info() -> str:
    lines = [
        "System Information:",
        f"- OS: {platform.system()}",
        f"- OS Version: {platform.release()}",
        f"- Architecture: {platform.machine()}",
        f"- Python Version: {platform.python_version()}",
        f"- User: {getpass.getuser()}",
        f"- Working Directory: {os.getcwd()}",
    ]
    return "\n".join(lines)
