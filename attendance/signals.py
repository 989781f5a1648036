# attendance/signals.py
import logging

from django.db.models.signals import pre_save, post_save
from django.dispatch import receiver

from .models import Attendance

logger = logging.getLogger(__name__)


def _label(present):
    if present is None:
        return "unset"
    return "present" if present else "absent"


@receiver(pre_save, sender=Attendance)
def _cache_old_present(sender, instance, **kwargs):
    """Cache previous value so the post_save log shows the real transition."""
    if instance.pk:
        instance._old_present = (
            Attendance.objects.filter(pk=instance.pk).values_list("present", flat=True).first()
        )
    else:
        instance._old_present = None


@receiver(post_save, sender=Attendance)
def log_attendance_change(sender, instance, created, **kwargs):
    old_present = getattr(instance, "_old_present", None)
    if not created and old_present == instance.present:
        logger.debug(
            "Attendance unchanged | %s | %s | %s",
            instance.student_id, instance.date, _label(instance.present),
        )
        return

    logger.info(
        "Attendance %s | %s | %s | %s -> %s",
        "created" if created else "updated",
        instance.student_id,
        instance.date,
        _label(old_present),
        _label(instance.present),
    )
