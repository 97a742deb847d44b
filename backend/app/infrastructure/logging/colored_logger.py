"""Colored transaction logger: ANSI-colored console output for units of work.

Color scheme:
    Blue: transaction begin
    Green: commit
    Yellow: rollback after a business-rule failure
    Red: rollback after a database failure
    Gray: timing / statement details
"""

import logging
from typing import Any

from app.domain.exceptions import DomainError


class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    GRAY = "\033[90m"


class TransactionLogger:
    """Color-coded lifecycle logger for one kind of unit of work.

    Usage:
        log = TransactionLogger("UnitOfWork")
        log.begin(txn_id)
        log.committed(txn_id, elapsed)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def begin(self, txn_id: int, **kwargs: Any) -> None:
        formatted = f"{_Colors.BLUE}{_Colors.BOLD}[TXN {txn_id}]{_Colors.RESET} {_Colors.BLUE}begin{_Colors.RESET}"
        self._logger.debug(formatted + self._details(kwargs))

    def committed(self, txn_id: int, elapsed: float) -> None:
        self._logger.info(
            f"{_Colors.GREEN}[TXN {txn_id}] ✓ commit{_Colors.RESET} "
            f"{_Colors.GRAY}({elapsed * 1000:.1f} ms){_Colors.RESET}"
        )

    def rolled_back(self, txn_id: int, elapsed: float, error: BaseException) -> None:
        """Business-rule failures log a warning, anything else an error."""
        expected = isinstance(error, DomainError)
        color = _Colors.YELLOW if expected else _Colors.RED
        formatted = (
            f"{color}{_Colors.BOLD}[TXN {txn_id}] ↺ rollback{_Colors.RESET} "
            f"{color}{type(error).__name__}: {error}{_Colors.RESET} "
            f"{_Colors.GRAY}({elapsed * 1000:.1f} ms){_Colors.RESET}"
        )
        if expected:
            self._logger.warning(formatted)
        else:
            self._logger.error(formatted)

    @staticmethod
    def _details(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"
