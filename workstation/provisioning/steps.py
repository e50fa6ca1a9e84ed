"""
Sequential step runner

Provisioning and package installation are expressed as ordered lists of
Step objects. The runner executes them one at a time and stops at the first
failure; completed steps are never rolled back.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, UTC
from enum import Enum

logger = logging.getLogger(__name__)


class StepStatus(str, Enum):
    """Status of individual step execution"""

    COMPLETED = "completed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass
class Step:
    """
    A single provisioning step

    Attributes:
        name: Short identifier, used in logs
        description: Human-readable summary shown while running
        action: Callable doing the work; raises on failure
        precondition: Optional check; the step is skipped when it returns False
    """

    name: str
    description: str
    action: Callable[[], None]
    precondition: Callable[[], bool] | None = None


@dataclass
class StepResult:
    """Result of step execution"""

    step_name: str
    status: StepStatus
    started_at: datetime
    completed_at: datetime | None = None
    error: str | None = None


@dataclass
class StepRunner:
    """
    Runs steps in order, aborting on the first exception.

    The exception from a failing step propagates unchanged to the caller.
    `results` holds one entry per step that was reached.
    """

    title: str
    results: list[StepResult] = field(default_factory=list)

    def run(self, steps: Iterable[Step]) -> list[StepResult]:
        steps = list(steps)
        total = len(steps)
        logger.info(f"[{self.title}] Running {total} steps")

        for index, step in enumerate(steps, start=1):
            started = datetime.now(UTC)

            if step.precondition is not None and not step.precondition():
                logger.info(f"[{self.title}] STEP {index}/{total}: {step.name} skipped")
                self.results.append(
                    StepResult(step.name, StepStatus.SKIPPED, started, datetime.now(UTC))
                )
                continue

            logger.info(f"[{self.title}] STEP {index}/{total}: {step.description}")

            try:
                step.action()
            except Exception as e:
                logger.error(f"[{self.title}] STEP {index}/{total} failed: {step.name}")
                self.results.append(
                    StepResult(step.name, StepStatus.FAILED, started, datetime.now(UTC), error=str(e))
                )
                raise

            self.results.append(
                StepResult(step.name, StepStatus.COMPLETED, started, datetime.now(UTC))
            )

        logger.info(f"[{self.title}] All steps complete")
        return self.results
