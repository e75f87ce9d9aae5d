from fastapi import APIRouter

from app.api.v1 import (
    users,
    exercises,
    plans,
    sessions,
    exercise_executions,
    session_logs,
    execution_logs,
)

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(plans.router, prefix="/plans", tags=["plans"])
api_router.include_router(sessions.router, prefix="/sessions", tags=["sessions"])
api_router.include_router(
    exercise_executions.router, prefix="/exercise-executions", tags=["exercise-executions"]
)
api_router.include_router(session_logs.router, prefix="/session-logs", tags=["session-logs"])
api_router.include_router(execution_logs.router, prefix="/execution-logs", tags=["execution-logs"])
