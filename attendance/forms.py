# attendance/forms.py
from django import forms


class AttendanceFilterForm(forms.Form):
    """
    Query-string filters of the attendance grid.

    Field names match the query parameters (``month``, ``technologyId``).
    A field that fails to clean is simply left out of ``cleaned_data`` and
    the caller falls back to its default.
    """
    month = forms.DateField(
        required=False,
        input_formats=["%Y-%m"],
        widget=forms.DateInput(format="%Y-%m", attrs={"type": "month"}),
    )
    # Upper bound matches the BigAutoField primary key of Technology.
    technologyId = forms.IntegerField(required=False, min_value=1, max_value=2**63 - 1)
