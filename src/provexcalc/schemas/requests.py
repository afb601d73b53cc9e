from pydantic import BaseModel


class EstimateRequest(BaseModel):
    usd: str | float | None = None
    rate: str | float | None = None
    bonus: str | float | None = None
    sacrifice_date: str | None = None
    previous_rate: float | None = None
