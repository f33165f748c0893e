"""
Commitment models module.

All models are exported from this module to maintain backward compatibility.
"""
from .tier import StatusTier
from .task import EarningTask
from .status import MemberCommitment
from .commitment_log import CommitmentLog

__all__ = [
    'StatusTier',
    'EarningTask',
    'MemberCommitment',
    'CommitmentLog',
]
