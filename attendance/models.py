from django.db import models


class Attendance(models.Model):
    student = models.ForeignKey(
        "students.Student",
        on_delete=models.CASCADE,
        related_name="attendance_records",
    )
    date = models.DateField()
    present = models.BooleanField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["student", "date"], name="unique_attendance_per_student_day"),
        ]
        ordering = ["-date", "student"]

    def __str__(self):
        return f"{self.student} ({'present' if self.present else 'absent'}) on {self.date}"
