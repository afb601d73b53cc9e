from fastapi import APIRouter

from provexcalc.schemas.requests import EstimateRequest
from provexcalc.schemas.responses import EstimateResponse, RateQuoteResponse, ScheduleResponse
from provexcalc.services.estimator import EstimateOrchestrator

router = APIRouter(tags=["estimate"])
orchestrator = EstimateOrchestrator()


@router.get("/schedule", response_model=ScheduleResponse)
def schedule() -> ScheduleResponse:
    return orchestrator.schedule_summary()


@router.get("/rate", response_model=RateQuoteResponse)
def rate(date: str | None = None) -> RateQuoteResponse:
    if date is None:
        return orchestrator.quote_today()
    return orchestrator.quote_rate(date)


@router.post("/estimate", response_model=EstimateResponse)
def estimate(request: EstimateRequest) -> EstimateResponse:
    return orchestrator.estimate(request)
