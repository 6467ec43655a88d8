# common/orchestrator.py
# -*- coding: utf-8 -*-
"""
Centralized orchestrator for managing and executing sequences of tasks.
"""

import logging
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from bootstrap.errors import BootstrapError, ErrorKind


class StepStatus(str, Enum):
    """Outcome of a single task."""

    COMPLETED = "COMPLETED"
    SKIPPED = "SKIPPED"
    WARNED = "WARNED"
    FAILED = "FAILED"


@dataclass
class StepOutcome:
    name: str
    status: StepStatus
    error: Optional[BootstrapError] = None


@dataclass
class RunReport:
    """Ordered outcomes of an orchestration run."""

    outcomes: List[StepOutcome] = field(default_factory=list)
    error: Optional[BootstrapError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def status_of(self, name: str) -> Optional[StepStatus]:
        for outcome in self.outcomes:
            if outcome.name == name:
                return outcome.status
        return None


def _to_bootstrap_error(exc: Exception, step: str) -> BootstrapError:
    if isinstance(exc, BootstrapError):
        return exc.for_step(step)
    if isinstance(exc, subprocess.CalledProcessError):
        cmd = (
            subprocess.list2cmdline(exc.cmd)
            if isinstance(exc.cmd, (list, tuple))
            else str(exc.cmd)
        )
        error = BootstrapError(
            ErrorKind.PROCESS_FAILURE,
            f"Command `{cmd}` exited with status {exc.returncode}",
            step=step,
        )
    elif isinstance(exc, FileNotFoundError):
        error = BootstrapError(
            ErrorKind.MISSING_PREREQUISITE,
            f"Not found: {exc.filename or exc}",
            step=step,
        )
    else:
        error = BootstrapError(ErrorKind.FILESYSTEM, str(exc), step=step)
    error.__cause__ = exc
    return error


class Orchestrator:
    """
    Runs a series of tasks in order and stops at the first failure.

    Each task is called as ``func(context)`` and returns a StepStatus
    (None counts as COMPLETED). A raised BootstrapError, CalledProcessError
    or OSError ends the run; the report carries the structured error.
    """

    def __init__(
        self,
        context: Any,
        orchestrator_logger: Optional[logging.Logger] = None,
        symbols: Optional[Dict[str, str]] = None,
    ):
        """
        Initializes the Orchestrator.

        Args:
            context: State object handed to every task.
            orchestrator_logger: An optional logger instance.
            symbols: Symbol table for log messages.
        """
        self.context = context
        self.logger = orchestrator_logger or logging.getLogger(__name__)
        self.symbols = symbols or {}
        self.tasks: List[Dict[str, Any]] = []

    def add_task(self, name: str, func: Callable[[Any], Any]) -> None:
        """
        Adds a task to the execution list.

        Args:
            name: A human-readable name for the task.
            func: The function to execute for this task.
        """
        self.tasks.append({"name": name, "func": func})
        self.logger.debug(f"Task '{name}' added to the queue.")

    def run(self) -> RunReport:
        """
        Executes all added tasks in sequence.

        Returns:
            A RunReport; ``succeeded`` is False if a task failed.
        """
        report = RunReport()
        self.logger.debug("Orchestration started.")
        for i, task in enumerate(self.tasks):
            task_name = task["name"]
            self.logger.info(
                f"--- {self.symbols.get('step', '➡️')} Stage {i + 1}: {task_name} ---"
            )

            try:
                status = task["func"](self.context)
            except (BootstrapError, subprocess.CalledProcessError, OSError) as e:
                error = _to_bootstrap_error(e, task_name)
                report.outcomes.append(
                    StepOutcome(task_name, StepStatus.FAILED, error)
                )
                report.error = error
                self.logger.error(
                    f"{self.symbols.get('error', '❌')} An error occurred at step '{task_name}', exiting... {error}"
                )
                return report

            status = status or StepStatus.COMPLETED
            report.outcomes.append(StepOutcome(task_name, status))
            if status is StepStatus.COMPLETED:
                self.logger.info(
                    f"{self.symbols.get('success', '✅')} Task '{task_name}' completed successfully."
                )
            else:
                self.logger.info(
                    f"Task '{task_name}' finished with status {status.value}."
                )

        self.logger.debug("Orchestration finished successfully.")
        return report
