"""
Risk API routes - keyword risk table and source classification.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ...levels.registry import get_level_registry
from ...risks.classifier import analyze_risk_level, extract_risks, match_categories
from ...risks.registry import get_risk_registry
from ...risks.schemas import RiskCategory, RiskMatch, RiskPattern

router = APIRouter(prefix="/risks", tags=["risks"])


class RiskAnalysisRequest(BaseModel):
    """Source text to classify."""
    code: str = Field(..., description="Source code or prose")


class RiskAnalysisResponse(BaseModel):
    level: int
    level_name: str
    description: str
    tools: list[str] = Field(default_factory=list)
    matches: list[RiskMatch] = Field(default_factory=list)
    risks: list[str] = Field(default_factory=list)


@router.get("/categories", response_model=list[RiskPattern])
async def list_categories():
    """List the risk pattern table."""
    return get_risk_registry().list_all()


@router.get("/stats")
async def get_risk_stats():
    """Get risk registry statistics."""
    return get_risk_registry().get_stats()


@router.get("/categories/{category}", response_model=RiskPattern)
async def get_category(category: str):
    """Get one category's keywords and contributed level."""
    try:
        risk_category = RiskCategory(category)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Risk category '{category}' not found")

    pattern = get_risk_registry().get(risk_category)
    if not pattern:
        raise HTTPException(status_code=404, detail=f"Risk category '{category}' not defined")
    return pattern


@router.post("/analyze", response_model=RiskAnalysisResponse)
async def analyze(request: RiskAnalysisRequest):
    """Recommend a verification level for source text."""
    level = analyze_risk_level(request.code)
    level_registry = get_level_registry()
    return RiskAnalysisResponse(
        level=level.value,
        level_name=level.label,
        description=level_registry.describe(level),
        tools=level_registry.tools(level),
        matches=match_categories(request.code),
        risks=extract_risks(request.code),
    )
