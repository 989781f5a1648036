# mixins.py
from django.contrib.auth.mixins import LoginRequiredMixin
from django.shortcuts import render

from .permissions import check_role


class RoleRequiredMixin(LoginRequiredMixin):
    """
    Restrict access to users with specific roles.
    Example usage in view:
        allowed_roles = ["admin", "teacher"]

    Anonymous users are sent to the login page. Authenticated users whose
    role is not allowed get the denial template with a 403 and the view
    body never runs.
    """
    allowed_roles = []
    denied_message = "Access denied. You don't have permission to view this page."
    denied_template_name = "core/access_denied.html"

    def dispatch(self, request, *args, **kwargs):
        if not request.user.is_authenticated:
            return self.handle_no_permission()

        self.access = check_role(request.user, self.allowed_roles, self.denied_message)
        if not self.access:
            return self.render_denied(self.access)
        return super().dispatch(request, *args, **kwargs)

    def render_denied(self, decision):
        return render(
            self.request,
            self.denied_template_name,
            {"reason": decision.reason},
            status=403,
        )
