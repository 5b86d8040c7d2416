from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.logs import GetUserGoalsUseCase, SaveUserGoalsUseCase
from ..models.goals import UserGoals
from ..models.responses import OperationStatus
from ..platform.wiring import get_save_user_goals_use_case, get_user_goals_use_case

router: APIRouter = APIRouter()


@router.get("/goals", response_model=UserGoals)
async def get_goals(
    use_case: GetUserGoalsUseCase = Depends(get_user_goals_use_case),
) -> UserGoals:
    return await use_case()


@router.put("/goals", response_model=OperationStatus)
async def save_goals(
    goals: UserGoals,
    use_case: SaveUserGoalsUseCase = Depends(get_save_user_goals_use_case),
) -> OperationStatus:
    return await use_case(goals)
