from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'categories'

router = DefaultRouter()
router.register(r'', views.CategoryViewSet, basename='category')

urlpatterns = [
    # GET    /api/categories/        - List categories
    # POST   /api/categories/        - Create category
    # GET    /api/categories/{id}/   - Get category
    # PUT    /api/categories/{id}/   - Update category
    # PATCH  /api/categories/{id}/   - Partial update
    # DELETE /api/categories/{id}/   - Delete category
    path('', include(router.urls)),
]
