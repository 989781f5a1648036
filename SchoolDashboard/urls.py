from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', RedirectView.as_view(pattern_name="attendance:grid", permanent=False)),
    path('accounts/', include('accounts.urls')),
    path('attendance/', include('attendance.urls')),
]
