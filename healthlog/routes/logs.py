from __future__ import annotations

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from ..application.logs import (
    ClearDailyRecordsUseCase,
    GetDailyRecordUseCase,
    InvalidDateRange,
    ListDailyRecordsUseCase,
    LogExerciseActivityUseCase,
    LogSocialActivityUseCase,
    SaveDailyRecordUseCase,
)
from ..models.activities import ExerciseActivity, SocialActivity
from ..models.daily_log import DailyRecord, date_key
from ..models.responses import OperationStatus
from ..platform.wiring import (
    get_clear_daily_records_use_case,
    get_daily_record_use_case,
    get_list_daily_records_use_case,
    get_log_exercise_activity_use_case,
    get_log_social_activity_use_case,
    get_save_daily_record_use_case,
)

router: APIRouter = APIRouter()


@router.put("/daily-logs/{day}", response_model=OperationStatus)
async def save_daily_log(
    record: DailyRecord,
    day: date = Path(..., description="Day in YYYY-MM-DD format; must match the body."),
    use_case: SaveDailyRecordUseCase = Depends(get_save_daily_record_use_case),
) -> OperationStatus:
    if record.date != date_key(day):
        raise HTTPException(
            status_code=400,
            detail=f"Body date {record.date} does not match path date {date_key(day)}",
        )
    return await use_case(record)


@router.get("/daily-logs/{day}", response_model=DailyRecord)
async def get_daily_log(
    day: date = Path(..., description="Day in YYYY-MM-DD format."),
    use_case: GetDailyRecordUseCase = Depends(get_daily_record_use_case),
) -> DailyRecord:
    return await use_case(day)


@router.get("/daily-logs", response_model=List[DailyRecord])
async def list_daily_logs(
    start_date: date = Query(..., description="Start date (inclusive) in YYYY-MM-DD format."),
    end_date: date = Query(..., description="End date (inclusive) in YYYY-MM-DD format."),
    use_case: ListDailyRecordsUseCase = Depends(get_list_daily_records_use_case),
) -> List[DailyRecord]:
    try:
        return await use_case(start_date, end_date)
    except InvalidDateRange as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.delete("/daily-logs", response_model=OperationStatus)
async def clear_daily_logs(
    use_case: ClearDailyRecordsUseCase = Depends(get_clear_daily_records_use_case),
) -> OperationStatus:
    return await use_case()


@router.post("/exercise-activities", status_code=201, response_model=OperationStatus)
async def log_exercise_activity(
    activity: ExerciseActivity,
    use_case: LogExerciseActivityUseCase = Depends(get_log_exercise_activity_use_case),
) -> OperationStatus:
    return await use_case(activity)


@router.post("/social-activities", status_code=201, response_model=OperationStatus)
async def log_social_activity(
    activity: SocialActivity,
    use_case: LogSocialActivityUseCase = Depends(get_log_social_activity_use_case),
) -> OperationStatus:
    return await use_case(activity)
