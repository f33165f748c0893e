from django.urls import path
from . import views

app_name = 'commitment'

urlpatterns = [
    path('tiers/', views.TierLadderView.as_view(), name='tier-ladder'),
    path('status/', views.CommitmentStatusView.as_view(), name='commitment-status'),
    path('history/', views.CommitmentHistoryView.as_view(), name='commitment-history'),
    path('tasks/<int:task_id>/preview/', views.TaskRewardPreviewView.as_view(), name='task-preview'),
    path('tasks/<int:task_id>/commit/', views.TaskCommitView.as_view(), name='task-commit'),

    # Admin tier configuration
    path('admin/tiers/validate/', views.TierValidateView.as_view(), name='tier-validate'),
    path('admin/tiers/warnings/', views.TierWarningsView.as_view(), name='tier-warnings'),
    path('admin/tiers/<str:tier_key>/', views.TierUpdateView.as_view(), name='tier-update'),
]
