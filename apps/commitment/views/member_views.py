"""
Member-facing commitment views.
"""
import logging

from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response
from ..models import EarningTask, StatusTier
from ..serializers import (
    CommitRequestSerializer, CommitmentLogListSerializer, EarningTaskSerializer,
    LevelUpSerializer, RewardBreakdownSerializer, TierProgressSerializer,
    TierValueSerializer
)
from ..services import CommitmentService

logger = logging.getLogger(__name__)


class TierLadderView(APIView):
    """Get the active status tier ladder"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = TierValueSerializer(StatusTier.get_active_ladder(), many=True)
        return success_response(serializer.data)


class CommitmentStatusView(APIView):
    """Get the member's committed total and tier progress"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        _, progress = CommitmentService.get_member_progress(request.user)
        return success_response(TierProgressSerializer(progress).data)


class TaskRewardPreviewView(APIView):
    """Preview short and long lock rewards for a task"""
    permission_classes = [IsAuthenticated]

    def get(self, request, task_id):
        try:
            task = EarningTask.objects.get(id=task_id, is_active=True)
        except EarningTask.DoesNotExist:
            return error_response('Task not found', status_code=404)

        options = CommitmentService.preview_task_rewards(request.user, task)
        return success_response({
            'task': EarningTaskSerializer(task).data,
            'options': {
                name: RewardBreakdownSerializer(breakdown).data
                for name, breakdown in options.items()
            }
        })


class TaskCommitView(APIView):
    """Confirm a lock choice for a task"""
    permission_classes = [IsAuthenticated]

    def post(self, request, task_id):
        serializer = CommitRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Validation error', errors=serializer.errors)

        try:
            task = EarningTask.objects.get(id=task_id)
        except EarningTask.DoesNotExist:
            return error_response('Task not found', status_code=404)

        try:
            log, breakdown, level_up = CommitmentService.commit_task_reward(
                request.user, task, serializer.validated_data['lock_days']
            )
        except ValueError as e:
            return error_response(str(e))

        return success_response({
            'commitment_id': log.id,
            'unlocks_at': log.unlocks_at,
            'cumulative_committed': log.committed_after,
            'reward': RewardBreakdownSerializer(breakdown).data,
            'level_up': LevelUpSerializer(level_up).data,
        }, message='Commitment confirmed', status_code=201)


class CommitmentHistoryView(APIView):
    """Get the member's commitment history"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        logs = CommitmentService.get_commitment_history(request.user)
        serializer = CommitmentLogListSerializer(logs, many=True)
        return success_response(serializer.data)
