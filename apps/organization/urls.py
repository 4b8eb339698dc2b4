from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'entities'

router = DefaultRouter()
router.register(r'', views.EntityViewSet, basename='entity')

urlpatterns = [
    # GET    /api/entities/        - List entities (zero or one)
    # POST   /api/entities/        - Register the entity (409 if one exists)
    # GET    /api/entities/{id}/   - Get entity
    # PUT    /api/entities/{id}/   - Update entity
    # PATCH  /api/entities/{id}/   - Partial update
    # DELETE /api/entities/{id}/   - Delete entity
    path('', include(router.urls)),
]
