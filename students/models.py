from django.db import models


class StudentQuerySet(models.QuerySet):
    def in_technology(self, technology_id):
        return self.filter(technology_id=technology_id).order_by("name")


class Student(models.Model):
    # Identifiers come from the enrolment system, not from this database.
    id = models.CharField(max_length=64, primary_key=True)
    name = models.CharField(max_length=100)
    surname = models.CharField(max_length=100)
    technology = models.ForeignKey(
        "technologies.Technology",
        related_name="students",
        on_delete=models.PROTECT,
    )

    objects = StudentQuerySet.as_manager()

    class Meta:
        db_table = "students_student"
        ordering = ["name"]

    def __str__(self):
        return self.full_name

    @property
    def full_name(self):
        return f"{self.name} {self.surname}"
