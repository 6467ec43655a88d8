# bootstrap/errors.py
# -*- coding: utf-8 -*-
"""
Error taxonomy for the bootstrap sequence.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Categories of fatal bootstrap failures."""

    MISSING_PREREQUISITE = "MISSING_PREREQUISITE"
    PROCESS_FAILURE = "PROCESS_FAILURE"
    FILESYSTEM = "FILESYSTEM"
    CONFIGURATION = "CONFIGURATION"


class BootstrapError(Exception):
    """Fatal error raised by a bootstrap step or the configuration layer."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        step: Optional[str] = None,
    ):
        self.kind = kind
        self.message = message
        self.step = step
        super().__init__(message)

    def for_step(self, step: str) -> "BootstrapError":
        """Return a copy tagged with the step it originated from."""
        if self.step == step:
            return self
        tagged = BootstrapError(self.kind, self.message, step=step)
        tagged.__cause__ = self.__cause__
        return tagged

    def __str__(self) -> str:
        location = f" in step '{self.step}'" if self.step else ""
        return f"[{self.kind.value}]{location}: {self.message}"
