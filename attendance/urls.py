# attendance/urls.py
from django.urls import path
from .api import mark_attendance
from .views import AttendanceGridView

app_name = "attendance"

urlpatterns = [
    path("", AttendanceGridView.as_view(), name="grid"),
    path("api/mark/", mark_attendance, name="mark"),
]
