"""Tests for CompositeEvaluationObserver."""

from digit_recognizer.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from tests.evaluation.fake_observer import FakeEvaluationObserver


def _make_composite(
    *observers: FakeEvaluationObserver,
) -> CompositeEvaluationObserver:
    return CompositeEvaluationObserver(observers=list(observers))


class TestCompositeEvaluationObserverFanOut:
    """Every event is forwarded to all observers in order."""

    def test_run_started_forwarded_to_all(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()
        composite = _make_composite(obs_a, obs_b)

        composite.run_started(
            run_id="run-1",
            training_size=10,
            validation_size=5,
            metric_names=["manhattan"],
            n_jobs=2,
        )

        assert obs_a.started[0].run_id == "run-1"
        assert obs_b.started[0].run_id == "run-1"

    def test_run_started_preserves_all_fields(self) -> None:
        obs = FakeEvaluationObserver()

        _make_composite(obs).run_started(
            run_id="run-abc",
            training_size=10,
            validation_size=5,
            metric_names=["manhattan", "euclidean"],
            n_jobs=4,
        )

        event = obs.started[0]
        assert event.training_size == 10
        assert event.validation_size == 5
        assert event.metric_names == ["manhattan", "euclidean"]
        assert event.n_jobs == 4

    def test_run_completed_forwarded_to_all(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()

        _make_composite(obs_a, obs_b).run_completed(
            run_id="run-1", total_metrics=2, elapsed_seconds=1.5
        )

        assert obs_a.completed[0].elapsed_seconds == 1.5
        assert obs_b.completed[0].total_metrics == 2

    def test_metric_started_forwarded_to_all(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()

        _make_composite(obs_a, obs_b).metric_started(
            run_id="run-1", metric="euclidean", total_observations=7
        )

        assert obs_a.m_started[0].total_observations == 7
        assert obs_b.m_started[0].metric == "euclidean"

    def test_metric_completed_forwarded_to_all(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()

        _make_composite(obs_a, obs_b).metric_completed(
            run_id="run-1", metric="manhattan", accuracy=0.5, elapsed_seconds=0.2
        )

        assert obs_a.m_completed[0].accuracy == 0.5
        assert obs_b.m_completed[0].accuracy == 0.5

    def test_metric_failed_forwarded_to_all(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()

        _make_composite(obs_a, obs_b).metric_failed(
            run_id="run-1", metric="manhattan", reason="boom"
        )

        assert obs_a.m_failed[0].reason == "boom"
        assert obs_b.m_failed[0].reason == "boom"

    def test_observation_scored_forwarded_to_all(self) -> None:
        obs_a = FakeEvaluationObserver()
        obs_b = FakeEvaluationObserver()

        _make_composite(obs_a, obs_b).observation_scored(
            label="3", prediction="8", matched=False
        )

        assert obs_a.scored[0].prediction == "8"
        assert obs_b.scored[0].matched is False

    def test_empty_composite_is_a_no_op(self) -> None:
        _make_composite().observation_scored(label="3", prediction="3", matched=True)
