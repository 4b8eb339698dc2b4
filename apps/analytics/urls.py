from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    path('dashboard/', views.dashboard, name='dashboard'),
    path('metrics/', views.metrics, name='metrics'),
    path('forecast/', views.forecast, name='forecast'),
    path('expenses-by-type/', views.expenses_by_type, name='expenses-by-type'),
]
