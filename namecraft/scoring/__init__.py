from .scorer import (
    NameScorer,
    ScoreBreakdown,
    ScoringProfile,
    STARTUP_SCORING,
    PRODUCT_SCORING,
)

__all__ = ['NameScorer', 'ScoreBreakdown', 'ScoringProfile', 'STARTUP_SCORING', 'PRODUCT_SCORING']
