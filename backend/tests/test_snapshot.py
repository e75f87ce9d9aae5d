"""Tests for building session logs out of planned sessions."""
import uuid
from datetime import datetime, timezone

import pytest

from app.errors import InvalidOperationError
from app.models import Exercise, ExerciseExecution, Plan, TrainingSession, User
from app.schemas.enums import LogStatus
from app.services.snapshot import NO_PLAN_NAME, build_session_log, snapshot_execution

STARTED = datetime(2026, 3, 1, 17, 0, tzinfo=timezone.utc)


@pytest.fixture
def owner() -> User:
    return User(id=uuid.uuid4(), username="alice", password_hash="x")


@pytest.fixture
def bench() -> Exercise:
    return Exercise(
        id=uuid.uuid4(),
        name="Bench Press",
        category="FreeWeight",
        muscle_groups=["Chest", "Triceps"],
        description="Barbell bench press",
    )


def make_session(plan: Plan | None = None) -> TrainingSession:
    return TrainingSession(id=uuid.uuid4(), name="Day A", order_id=1, plan=plan)


class TestSnapshotExecution:
    def test_copies_planned_and_exercise_fields(self, bench: Exercise):
        execution = ExerciseExecution(
            exercise=bench, planned_sets=3, planned_reps=10, planned_weight=50, order_id=2
        )
        log = snapshot_execution(execution)

        assert log.exercise_execution_id == 2
        assert (log.planned_sets, log.planned_reps, log.planned_weight) == (3, 10, 50)
        assert (log.actual_sets, log.actual_reps, log.actual_weight) == (3, 10, 50)
        assert log.exercise_id == bench.id
        assert log.exercise_name == "Bench Press"
        assert log.exercise_category == "FreeWeight"
        assert log.exercise_muscle_group == ["Chest", "Triceps"]
        assert log.completed is False
        assert log.notes is None

    def test_muscle_groups_are_copied_not_shared(self, bench: Exercise):
        execution = ExerciseExecution(
            exercise=bench, planned_sets=1, planned_reps=1, planned_weight=0, order_id=1
        )
        log = snapshot_execution(execution)
        bench.muscle_groups = ["Shoulders"]
        assert log.exercise_muscle_group == ["Chest", "Triceps"]


class TestBuildSessionLog:
    def test_builds_in_progress_log(self, owner: User, bench: Exercise):
        plan = Plan(id=uuid.uuid4(), name="Strength", description="Block one")
        session = make_session(plan)
        executions = [
            ExerciseExecution(exercise=bench, planned_sets=3, planned_reps=10, planned_weight=50, order_id=1),
            ExerciseExecution(exercise=bench, planned_sets=4, planned_reps=8, planned_weight=80, order_id=2),
        ]

        log = build_session_log(session, executions, owner, STARTED)

        assert log.owner_id == owner.id
        assert log.original_session_id == session.id
        assert log.session_name == "Day A"
        assert log.plan_name == "Strength"
        assert log.plan_description == "Block one"
        assert log.status == LogStatus.IN_PROGRESS.value
        assert log.started_at == STARTED
        assert log.completed_at is None
        assert [e.exercise_execution_id for e in log.execution_logs] == [1, 2]

    def test_session_without_plan(self, owner: User, bench: Exercise):
        execution = ExerciseExecution(
            exercise=bench, planned_sets=1, planned_reps=1, planned_weight=0, order_id=1
        )
        log = build_session_log(make_session(), [execution], owner, STARTED)
        assert log.plan_name == NO_PLAN_NAME
        assert log.plan_description == ""

    def test_plan_without_description(self, owner: User, bench: Exercise):
        execution = ExerciseExecution(
            exercise=bench, planned_sets=1, planned_reps=1, planned_weight=0, order_id=1
        )
        plan = Plan(id=uuid.uuid4(), name="Strength", description=None)
        log = build_session_log(make_session(plan), [execution], owner, STARTED)
        assert log.plan_description == ""

    def test_empty_session_rejected(self, owner: User):
        with pytest.raises(InvalidOperationError, match="at least one exercise"):
            build_session_log(make_session(), [], owner, STARTED)


class TestOwnerImmutability:
    def test_owner_cannot_be_reassigned(self, owner: User, bench: Exercise):
        execution = ExerciseExecution(
            exercise=bench, planned_sets=1, planned_reps=1, planned_weight=0, order_id=1
        )
        log = build_session_log(make_session(), [execution], owner, STARTED)
        with pytest.raises(ValueError):
            log.owner_id = uuid.uuid4()
