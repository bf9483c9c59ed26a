"""PUT /v1/goal, GET /v1/goal/progress - the "Reto 0 a 10,000" goal"""

from datetime import date
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from socia_finance.api.v1.schemas import GoalRequest, GoalResponse, GoalProgressResponse, ProjectionSchema
from socia_finance.api.dependencies import get_current_user, get_request_id
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.session import get_db
from socia_finance.infrastructure.database.repositories import GoalRepository, FinanceRepository
from socia_finance.infrastructure.observability.logging import log_goal_saved
from socia_finance.infrastructure.observability.metrics import goal_upsert_counter
from socia_finance.domain.goals import compute_progress, project_goal
from socia_finance.domain.policy import DEFAULT_TARGET_AMOUNT

router = APIRouter()


@router.put("/goal", response_model=GoalResponse)
def save_goal(
    request_body: GoalRequest,
    request: Request,
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create the challenge goal or replace the current one"""
    goal, created = GoalRepository(db).upsert_goal(
        user_id=user.user_id,
        target_amount=request_body.target_amount,
        deadline=request_body.deadline,
        target_name=request_body.target_name,
    )
    db.commit()

    goal_upsert_counter.labels(action="created" if created else "updated").inc()
    log_goal_saved(get_request_id(request), user.user_id, request_body.target_amount, created)

    return GoalResponse(
        goal_id=str(goal.id),
        target_amount=goal.target_amount,
        deadline=goal.deadline,
        target_name=goal.target_name,
    )


@router.get("/goal/progress", response_model=GoalProgressResponse)
def get_goal_progress(
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Progress toward the challenge goal from accumulated weekly sales.

    Without a configured goal the default 10,000 target is reported with
    has_goal=false and no projection.
    """
    goal = GoalRepository(db).get_latest(user.user_id)
    weeks = FinanceRepository(db).list_all(user.user_id)
    weekly_totals = [float(w.total_sales) for w in weeks]
    current = sum(weekly_totals)
    today = date.today()

    target = float(goal.target_amount) if goal else DEFAULT_TARGET_AMOUNT
    deadline = goal.deadline if goal else None

    progress = compute_progress(current, target, deadline, today)

    projection = None
    if goal:
        p = project_goal(current, target, weekly_totals, deadline, today)
        projection = ProjectionSchema(**vars(p))

    return GoalProgressResponse(
        has_goal=goal is not None,
        current_amount=current,
        target_amount=target,
        deadline=deadline,
        percentage=progress.percentage,
        days_remaining=progress.days_remaining,
        amount_remaining=progress.amount_remaining,
        pace_per_day=progress.pace_per_day,
        pace_per_week=progress.pace_per_week,
        pace_per_month=progress.pace_per_month,
        status=progress.status,
        projection=projection,
    )
