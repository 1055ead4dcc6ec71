from pydantic import BaseModel

from models.schemas.matching import MatchBreakdown


class MatchResponse(BaseModel):
    score: int = 0
    breakdown: MatchBreakdown = MatchBreakdown()
