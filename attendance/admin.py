from django.contrib import admin
from .models import Attendance


@admin.register(Attendance)
class AttendanceAdmin(admin.ModelAdmin):
    list_display = ('student', 'date', 'present', 'updated_at')
    list_filter = ('present', 'date', 'student__technology')
    search_fields = ('student__id', 'student__name', 'student__surname')
    date_hierarchy = 'date'
