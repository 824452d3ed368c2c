# src/rankboard/services/__init__.py
"""Aggregation and anti-abuse services for the Rankboard application."""

from .comments import CommentSort, list_comments, post_comment
from .facemash import pick_comparison_pair, record_comparison
from .ratings import submit_rating
from .stats import Totals, totals
from .subjects import (
    SubjectSort,
    create_subject,
    get_subject,
    list_subjects,
    record_view,
    top_ranked,
    worst_ranked,
)
from .votes import vote_comment

__all__ = [
    "CommentSort", "list_comments", "post_comment",
    "pick_comparison_pair", "record_comparison",
    "submit_rating",
    "Totals", "totals",
    "SubjectSort", "create_subject", "get_subject", "list_subjects", "record_view",
    "top_ranked", "worst_ranked",
    "vote_comment",
]
