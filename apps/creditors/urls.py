from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'creditors'

router = DefaultRouter()
router.register(r'', views.CreditorViewSet, basename='creditor')

urlpatterns = [
    # GET    /api/creditors/        - List creditors
    # POST   /api/creditors/        - Create creditor
    # GET    /api/creditors/{id}/   - Get creditor
    # PUT    /api/creditors/{id}/   - Update creditor
    # PATCH  /api/creditors/{id}/   - Partial update
    # DELETE /api/creditors/{id}/   - Delete creditor
    path('', include(router.urls)),
]
