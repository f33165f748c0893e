"""
Commitment views module.

All views are exported from this module to maintain backward compatibility.
"""
from .member_views import (
    TierLadderView, CommitmentStatusView, TaskRewardPreviewView,
    TaskCommitView, CommitmentHistoryView
)
from .admin_views import TierValidateView, TierUpdateView, TierWarningsView

__all__ = [
    'TierLadderView',
    'CommitmentStatusView',
    'TaskRewardPreviewView',
    'TaskCommitView',
    'CommitmentHistoryView',
    'TierValidateView',
    'TierUpdateView',
    'TierWarningsView',
]
