from app.matching.engine import generate_matches, MatchingResult
from app.matching.errors import UnreachableCaseError
from app.matching.scoring import MatchScore, ScoreBreakdown

__all__ = [
    "generate_matches",
    "MatchingResult",
    "UnreachableCaseError",
    "MatchScore",
    "ScoreBreakdown",
]
