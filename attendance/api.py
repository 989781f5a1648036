import logging

from django.db import DatabaseError
from django.template.loader import render_to_string
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from core.permissions import IsAdminOrTeacher
from .cells import AttendanceCell
from .serializers import AttendanceMarkSerializer
from .services import upsert_attendance

logger = logging.getLogger(__name__)


@api_view(["POST"])
@permission_classes([IsAdminOrTeacher])
def mark_attendance(request):
    """Upsert one (student, date) mark and return the re-rendered cell."""
    serializer = AttendanceMarkSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    student = serializer.validated_data["student_id"]
    day = serializer.validated_data["date"]
    present = serializer.validated_data["present"]

    try:
        record, created = upsert_attendance(student.pk, day, present)
    except DatabaseError:
        logger.exception("Failed to update attendance for %s on %s", student.pk, day)
        return Response({"ok": False}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    cell = AttendanceCell(student_id=record.student_id, date=record.date).mark(record.present)
    html = render_to_string(
        "attendance/partials/attendance_cell.html",
        {"cell": cell},
    )
    return Response({
        "ok": True,
        "created": created,
        "present": record.present,
        "html": html,
    })
