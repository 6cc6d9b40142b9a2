from django.contrib import admin

from .models import Member, ProjectStageHistory, Requirement, RequirementComment


class StageHistoryInline(admin.TabularInline):
    model = ProjectStageHistory
    extra = 0
    can_delete = False
    readonly_fields = ("stage", "changed_at")

    def has_add_permission(self, request, obj=None):
        return False


class CommentInline(admin.TabularInline):
    model = RequirementComment
    extra = 0
    readonly_fields = ("author_name", "content", "created_at")


@admin.register(Requirement)
class RequirementAdmin(admin.ModelAdmin):
    list_display = ("title", "stage", "priority", "assignee", "due_date", "updated_at")
    list_filter = ("stage", "priority")
    search_fields = ("title", "assignee")
    readonly_fields = ("created_at", "updated_at")
    inlines = [StageHistoryInline, CommentInline]

    def get_readonly_fields(self, request, obj=None):
        # stage edits go through the API so transitions land in history
        if obj is not None:
            return ("stage",) + self.readonly_fields
        return self.readonly_fields


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "department", "role", "created_at")
    search_fields = ("name", "email")
