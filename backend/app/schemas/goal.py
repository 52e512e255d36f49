from pydantic import BaseModel


class MonthlyGoalRead(BaseModel):
    goal_km: float
    month_distance_km: float
    progress: float


class MonthlyGoalUpsert(BaseModel):
    goal_km: float
