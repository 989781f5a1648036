from django import forms
from django.contrib.auth.forms import AuthenticationForm

INPUT_CLASSES = (
    "w-full px-3 py-2 border border-neutral-300 rounded-lg "
    "focus:ring-2 focus:ring-primary-500 focus:border-primary-500 "
    "text-neutral-900 placeholder-neutral-400 text-sm"
)


class CustomLoginForm(AuthenticationForm):
    username = forms.CharField(
        widget=forms.TextInput(
            attrs={"placeholder": "Enter your username", "class": INPUT_CLASSES}
        )
    )
    password = forms.CharField(
        widget=forms.PasswordInput(
            attrs={"placeholder": "Enter your password", "class": INPUT_CLASSES}
        )
    )
