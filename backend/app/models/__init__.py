# SQLAlchemy Models
from app.models.user import User
from app.models.exercise import Exercise, ExerciseMuscleGroup
from app.models.plan import Plan
from app.models.training_session import TrainingSession
from app.models.exercise_execution import ExerciseExecution
from app.models.session_log import SessionLog
from app.models.execution_log import ExecutionLog, ExecutionLogMuscleGroup

__all__ = [
    "User",
    "Exercise",
    "ExerciseMuscleGroup",
    "Plan",
    "TrainingSession",
    "ExerciseExecution",
    "SessionLog",
    "ExecutionLog",
    "ExecutionLogMuscleGroup",
]
