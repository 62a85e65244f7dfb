from .coverage import SOLUTION_BONUS, coverage_counts, score_word, score_and_sort, top_suggestions

__all__ = ["SOLUTION_BONUS", "coverage_counts", "score_word", "score_and_sort", "top_suggestions"]
