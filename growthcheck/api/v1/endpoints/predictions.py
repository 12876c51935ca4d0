"""Adult height prediction: Tanner range plus progress and narrative."""

from fastapi import APIRouter, Query

from growthcheck.core.constants import (
    FATHER_HEIGHT_MAX_CM,
    FATHER_HEIGHT_MIN_CM,
    MOTHER_HEIGHT_MAX_CM,
    MOTHER_HEIGHT_MIN_CM,
)
from growthcheck.core.enums import Sex
from growthcheck.schemas.growth import GrowthInput, GrowthReportRead, HeightRangeRead
from growthcheck.services.growth_narrative import build_report
from growthcheck.services.height_prediction import predict_range

router = APIRouter()


@router.post("", response_model=GrowthReportRead)
async def create_prediction(data: GrowthInput):
    """
    Full report for one submission: predicted range, progress %, explanation
    paragraphs, genetic note and age note. Nothing is stored.
    """
    return GrowthReportRead.model_validate(build_report(data))


@router.get("/range", response_model=HeightRangeRead)
async def predicted_range(
    father_height: float = Query(..., ge=FATHER_HEIGHT_MIN_CM, le=FATHER_HEIGHT_MAX_CM),
    mother_height: float = Query(..., ge=MOTHER_HEIGHT_MIN_CM, le=MOTHER_HEIGHT_MAX_CM),
    sex: Sex = Query(...),
):
    """Predicted adult height range only (pure logic, no current height needed)."""
    return HeightRangeRead.model_validate(predict_range(father_height, mother_height, sex))
