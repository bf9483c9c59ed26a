"""/v1/reto - four-week challenge guide progress"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from socia_finance.api.v1.schemas import RetoProgressResponse, TaskToggleResponse, WeekStatusSchema
from socia_finance.api.dependencies import get_current_user
from socia_finance.infrastructure.clients.auth import AuthUser
from socia_finance.infrastructure.database.session import get_db
from socia_finance.infrastructure.database.repositories import RetoRepository
from socia_finance.domain.challenge import score_challenge

router = APIRouter()


@router.get("/reto/progress", response_model=RetoProgressResponse)
def get_reto_progress(
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    score = score_challenge(RetoRepository(db).completed_tasks(user.user_id))
    return RetoProgressResponse(
        total_points=score.total_points,
        weeks=[WeekStatusSchema(**vars(w)) for w in score.weeks],
    )


@router.post("/reto/tasks/{week}/{day}/toggle", response_model=TaskToggleResponse)
def toggle_task(
    week: int = Path(..., ge=1, le=4),
    day: int = Path(..., ge=1, le=7),
    user: AuthUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Mark a guide task done, or undo it if it already was"""
    repo = RetoRepository(db)
    completed = repo.toggle_task(user.user_id, week, day)
    db.commit()

    score = score_challenge(repo.completed_tasks(user.user_id))
    return TaskToggleResponse(week=week, day=day, completed=completed, total_points=score.total_points)
