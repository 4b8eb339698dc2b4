from django.urls import path
from . import views

app_name = 'settings'

urlpatterns = [
    # GET /api/settings/ - Merged settings; PUT/PATCH merge keys
    path('', views.app_settings_view, name='app-settings'),
]
