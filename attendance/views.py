# attendance/views.py
from django.views.generic import TemplateView

from core.mixins import RoleRequiredMixin
from core.permissions import ATTENDANCE_DENIED_MESSAGE, ATTENDANCE_ROLES
from .forms import AttendanceFilterForm
from .services import AttendanceFilters, build_attendance_grid


class AttendanceGridView(RoleRequiredMixin, TemplateView):
    template_name = "attendance/attendance_grid.html"
    allowed_roles = ATTENDANCE_ROLES
    denied_message = ATTENDANCE_DENIED_MESSAGE

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        filters = AttendanceFilters.from_query(self.request.GET)
        grid = build_attendance_grid(filters)

        ctx["filters"] = filters
        ctx["filter_form"] = AttendanceFilterForm(initial={
            "month": filters.month,
            "technologyId": filters.technology_id,
        })
        ctx["grid"] = grid
        return ctx
