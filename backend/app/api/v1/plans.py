import logging
from uuid import UUID

from fastapi import APIRouter, status
from sqlalchemy import select

from app.api.deps import CurrentUser, DbSession
from app.errors import ConflictError
from app.models import Plan
from app.schemas.plan import PlanCreate, PlanResponse, PlanSessionSummary, PlanUpdate
from app.services.catalog import find_plan_by_name, get_plan, get_session
from app.services.session_placement import ensure_session_set

logger = logging.getLogger(__name__)

router = APIRouter()

DUPLICATE_NAME_MESSAGE = "Plan with this name already exists"


def to_plan_response(plan: Plan) -> PlanResponse:
    return PlanResponse(
        id=plan.id,
        name=plan.name,
        description=plan.description,
        sessions=[
            PlanSessionSummary(id=session.id, name=session.name, order_id=session.order_id)
            for session in sorted(plan.sessions, key=lambda s: s.order_id)
        ],
    )


async def _ensure_name_available(db: DbSession, name: str, exclude_id: UUID | None = None) -> None:
    duplicate = await find_plan_by_name(db, name)
    if duplicate is not None and duplicate.id != exclude_id:
        raise ConflictError(DUPLICATE_NAME_MESSAGE)


@router.get("", response_model=list[PlanResponse])
async def list_plans(db: DbSession) -> list[PlanResponse]:
    result = await db.execute(select(Plan).order_by(Plan.name.asc()))
    return [to_plan_response(plan) for plan in result.scalars().all()]


@router.get("/{plan_id}", response_model=PlanResponse)
async def get_plan_by_id(plan_id: UUID, db: DbSession) -> PlanResponse:
    return to_plan_response(await get_plan(db, plan_id))


@router.post("", response_model=PlanResponse, status_code=status.HTTP_201_CREATED)
async def create_plan(
    plan_in: PlanCreate,
    current_user: CurrentUser,
    db: DbSession,
) -> PlanResponse:
    await _ensure_name_available(db, plan_in.name)

    plan = Plan(name=plan_in.name, description=plan_in.description, sessions=[])
    db.add(plan)
    await db.commit()
    return to_plan_response(plan)


@router.put("/{plan_id}", response_model=PlanResponse)
async def update_plan(
    plan_id: UUID,
    plan_update: PlanUpdate,
    current_user: CurrentUser,
    db: DbSession,
) -> PlanResponse:
    """Rename a plan and, when ``sessions`` is given, replace its session set.

    Sessions dropped from the set are orphaned, not deleted.
    """
    plan = await get_plan(db, plan_id)
    await _ensure_name_available(db, plan_update.name, exclude_id=plan.id)

    if plan_update.sessions is not None:
        session_ids = dict.fromkeys(plan_update.sessions)
        sessions = [await get_session(db, session_id) for session_id in session_ids]
        ensure_session_set(sessions)
        plan.sessions = sessions

    plan.name = plan_update.name
    plan.description = plan_update.description

    await db.commit()
    return to_plan_response(plan)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_plan(
    plan_id: UUID,
    current_user: CurrentUser,
    db: DbSession,
) -> None:
    """Delete a plan. Its sessions survive without a plan."""
    plan = await get_plan(db, plan_id)
    await db.delete(plan)
    await db.commit()
    logger.info("Plan deleted", extra={"plan_id": str(plan_id)})
