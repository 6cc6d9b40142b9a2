# ============================================
# tracker/urls.py
# ============================================
from django.urls import path
from tracker.views.requirement_view import (
    RequirementListCreateView,
    RequirementDetailView,
    RequirementHistoryView,
    RequirementExportView,
)
from tracker.views.comment_view import CommentListCreateView
from tracker.views.member_view import (
    MemberListCreateView,
    MemberDetailView,
    MemberSuggestView,
)
from tracker.views.dashboard_view import DashboardView

app_name = 'tracker'

urlpatterns = [
    # Dashboard
    path('dashboard/', DashboardView.as_view(), name='dashboard'),

    # Requirements
    path('requirements/', RequirementListCreateView.as_view(), name='requirement-list-create'),
    path('requirements/export/', RequirementExportView.as_view(), name='requirement-export'),
    path('requirements/<uuid:requirement_id>/', RequirementDetailView.as_view(), name='requirement-detail'),
    path('requirements/<uuid:requirement_id>/history/', RequirementHistoryView.as_view(), name='requirement-history'),

    # Comments
    path('requirements/<uuid:requirement_id>/comments/', CommentListCreateView.as_view(), name='comment-list-create'),

    # Members
    path('members/', MemberListCreateView.as_view(), name='member-list-create'),
    path('members/suggest/', MemberSuggestView.as_view(), name='member-suggest'),
    path('members/<uuid:member_id>/', MemberDetailView.as_view(), name='member-detail'),
]
