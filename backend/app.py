from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

import config
from compliance import (
    ComplianceAnalyzer,
    InvalidArgumentError,
    load_limits,
    summarize_time_entries,
)
from schemas import (
    AnalyzeRequest,
    RegulatoryLimitsSchema,
    TimeStatsRequest,
    TimeStatsSchema,
    WTDAnalysisSchema,
)
from utils import setup_logging

limits = load_limits()
analyzer = ComplianceAnalyzer(limits=limits, timezone=config.WTD_TIMEZONE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    yield


app = FastAPI(title="wtdCompliance", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/compliance/wtd/limits", response_model=RegulatoryLimitsSchema)
async def get_wtd_limits():
    """Get the regulatory limits the analysis runs against."""
    return analyzer.limits.to_dict()


@app.post("/compliance/wtd/analyze", response_model=WTDAnalysisSchema)
async def analyze_wtd(request: AnalyzeRequest):
    """Analyze one driver's time entries for the reference day and its week."""
    entries = [e.model_dump() for e in request.time_entries]
    try:
        result = analyzer.analyze(entries, request.reference_date)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return result.to_dict()


@app.post("/time-entries/stats", response_model=TimeStatsSchema)
async def time_entry_stats(request: TimeStatsRequest):
    """Totals and per-day average over the posted entries."""
    entries = [e.model_dump() for e in request.time_entries]
    try:
        stats = summarize_time_entries(entries)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return stats.to_dict()
