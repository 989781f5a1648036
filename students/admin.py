from django.contrib import admin
from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'surname', 'technology')
    list_filter = ('technology__semester', 'technology')
    search_fields = ('id', 'name', 'surname')
