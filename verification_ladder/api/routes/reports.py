"""
Report API routes - module analysis and coverage reports.
"""

import logging

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...reports.analyzer import LOCAL_SESSION_ID, analyze_modules
from ...reports.coverage import generate_coverage_report
from ...reports.schemas import ModuleSource, VerificationAnalysis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


class AnalyzeModulesRequest(BaseModel):
    """Modules to analyze together."""
    modules: list[ModuleSource] = Field(default_factory=list)
    session_id: str = LOCAL_SESSION_ID


@router.post("/analyze", response_model=VerificationAnalysis)
async def analyze(request: AnalyzeModulesRequest):
    """Analyze modules locally and aggregate recommendations."""
    return analyze_modules(request.modules, session_id=request.session_id)


@router.post("/coverage")
async def coverage_report(analysis: VerificationAnalysis):
    """Render a markdown coverage report for an analysis."""
    report = generate_coverage_report(analysis)
    return {"session_id": analysis.session_id, "report": report}
