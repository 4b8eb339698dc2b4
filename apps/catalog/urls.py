from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'catalog'

router = DefaultRouter()
router.register(r'', views.CatalogItemViewSet, basename='catalog-item')

urlpatterns = [
    # GET    /api/catalog-items/        - List catalog items
    # POST   /api/catalog-items/        - Create catalog item
    # GET    /api/catalog-items/{id}/   - Get catalog item
    # PUT    /api/catalog-items/{id}/   - Update catalog item
    # PATCH  /api/catalog-items/{id}/   - Partial update
    # DELETE /api/catalog-items/{id}/   - Delete catalog item
    path('', include(router.urls)),
]
