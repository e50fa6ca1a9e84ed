"""
Tests for the sequential step runner
"""

import pytest

from workstation.provisioning.steps import Step, StepRunner, StepStatus


class TestStepRunner:
    """Ordering, skipping and abort-on-failure"""

    def test_runs_steps_in_order(self):
        seen = []
        steps = [Step(name, name, lambda name=name: seen.append(name)) for name in "abc"]

        results = StepRunner("Test").run(steps)

        assert seen == ["a", "b", "c"]
        assert [r.status for r in results] == [StepStatus.COMPLETED] * 3

    def test_precondition_false_skips_step(self):
        seen = []
        steps = [
            Step("a", "a", lambda: seen.append("a")),
            Step("b", "b", lambda: seen.append("b"), precondition=lambda: False),
            Step("c", "c", lambda: seen.append("c"), precondition=lambda: True),
        ]

        results = StepRunner("Test").run(steps)

        assert seen == ["a", "c"]
        assert results[1].status == StepStatus.SKIPPED

    def test_first_failure_aborts_remaining_steps(self):
        seen = []

        def fail():
            raise RuntimeError("boom")

        steps = [
            Step("a", "a", lambda: seen.append("a")),
            Step("b", "b", fail),
            Step("c", "c", lambda: seen.append("c")),
        ]
        runner = StepRunner("Test")

        with pytest.raises(RuntimeError, match="boom"):
            runner.run(steps)

        assert seen == ["a"]
        assert [r.step_name for r in runner.results] == ["a", "b"]
        assert runner.results[-1].status == StepStatus.FAILED
        assert runner.results[-1].error == "boom"
