from django.urls import path
from . import views

app_name = 'pncp'

urlpatterns = [
    # GET /api/pncp-catalog/catalogs/ - Public catalogs
    path('catalogs/', views.pncp_catalogs, name='catalogs'),
    # GET /api/pncp-catalog/search/   - Search materials/services
    path('search/', views.pncp_search, name='search'),
]
