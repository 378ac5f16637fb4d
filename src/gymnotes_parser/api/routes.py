"""
Parse endpoints

POST /parse/line for the single-entry input screen and POST /parse/plan for
the text-import onboarding flow. Inputs that cannot be parsed still return
200 with success=false and suggestions; they are not client errors.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from gymnotes_parser.catalog import ExerciseCatalog
from gymnotes_parser.fallback import build_default_fallback
from gymnotes_parser.models import LineParseResult, PlanParseResult
from gymnotes_parser.parsers.line_parser import LineParser
from gymnotes_parser.parsers.plan_parser import PlanParser

logger = logging.getLogger(__name__)

router = APIRouter()

_catalog = ExerciseCatalog.load_default()
line_parser = LineParser(catalog=_catalog, fallback=build_default_fallback())
# Plan import stays on the regex path; the fallback only serves single entries
plan_parser = PlanParser(line_parser=LineParser(catalog=_catalog))


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------

class ParseLineRequest(BaseModel):
    """Request model for POST /parse/line"""
    text: str = Field(..., max_length=1000, description="One workout entry, e.g. '3x10 bench press @60kg'")
    previous_exercise: Optional[str] = Field(
        default=None, max_length=200, description="Last logged exercise, for bare '3x8 @60kg' input"
    )


class ParsePlanRequest(BaseModel):
    """Request model for POST /parse/plan"""
    text: str = Field(..., max_length=50000, description="Pasted multi-line workout plan")


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/parse/line", response_model=LineParseResult)
def parse_line_endpoint(request: ParseLineRequest) -> LineParseResult:
    result = line_parser.parse_entry(request.text, previous_exercise=request.previous_exercise)
    if not result.success:
        logger.info("Line could not be parsed, returning suggestions")
    return result


@router.post("/parse/plan", response_model=PlanParseResult)
def parse_plan_endpoint(request: ParsePlanRequest) -> PlanParseResult:
    result = plan_parser.parse_plan_text(request.text)
    if result.success and result.plan:
        logger.info(
            f"Parsed plan '{result.plan.name}' with {len(result.plan.days)} days "
            f"and {result.plan.exercise_count} exercises"
        )
    return result


@router.get("/exercises", response_model=List[str])
def list_exercises(category: Optional[str] = Query(default=None)) -> List[str]:
    if category:
        return _catalog.by_category(category)
    return _catalog.all_exercises()


@router.get("/exercises/categories", response_model=List[str])
def list_categories() -> List[str]:
    return sorted(_catalog.categories())
