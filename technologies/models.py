# technologies/models.py
from django.db import models


class Semester(models.Model):
    name = models.CharField(max_length=100, unique=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class TechnologyQuerySet(models.QuerySet):
    def for_selector(self):
        """Technologies with their semester, ordered for the filter dropdown."""
        return self.select_related("semester").order_by("name")


class Technology(models.Model):
    """A course/cohort that groups students and belongs to a semester."""
    name = models.CharField(max_length=100)
    semester = models.ForeignKey(
        "Semester",
        on_delete=models.CASCADE,
        related_name="technologies",
    )

    objects = TechnologyQuerySet.as_manager()

    class Meta:
        unique_together = ("semester", "name")
        ordering = ["name"]
        verbose_name_plural = "technologies"

    def __str__(self):
        return f"{self.name} ({self.semester.name})"
