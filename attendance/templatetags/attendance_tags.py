from django import template

register = template.Library()


@register.inclusion_tag("attendance/partials/attendance_cell.html")
def attendance_cell(cell):
    return {"cell": cell}
