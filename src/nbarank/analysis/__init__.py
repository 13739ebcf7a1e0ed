"""Analysis pipeline tying aggregation, ranking and reports together."""

from .service import AnalysisResult, run_analysis

__all__ = ["AnalysisResult", "run_analysis"]
