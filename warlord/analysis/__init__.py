from warlord.engine.feedback import generate_feedback
from .letters import LetterAnalysis, letter_analysis
from .positions import PositionAnalysis, position_analysis
from .summary import ConstraintSummary, ExactMark, DisplacedMark, constraint_summary
from .pool import PoolStats, pool_entropy, solution_pool_stats

__all__ = [
    "generate_feedback",
    "LetterAnalysis", "letter_analysis",
    "PositionAnalysis", "position_analysis",
    "ConstraintSummary", "ExactMark", "DisplacedMark", "constraint_summary",
    "PoolStats", "pool_entropy", "solution_pool_stats",
]
