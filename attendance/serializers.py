from rest_framework import serializers

from students.models import Student


class AttendanceMarkSerializer(serializers.Serializer):
    student_id = serializers.PrimaryKeyRelatedField(queryset=Student.objects.all())
    date = serializers.DateField(input_formats=["%Y-%m-%d", "iso-8601"])
    present = serializers.BooleanField()
