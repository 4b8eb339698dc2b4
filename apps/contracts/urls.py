from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'contracts'

router = DefaultRouter()
router.register(r'', views.ContractViewSet, basename='contract')

urlpatterns = [
    # Contract ViewSet routes
    # GET    /api/contracts/              - List contracts
    # POST   /api/contracts/              - Create contract with items
    # GET    /api/contracts/{id}/         - Get contract with item balances
    # PUT    /api/contracts/{id}/         - Replace contract and item list
    # PATCH  /api/contracts/{id}/         - Partial update
    # DELETE /api/contracts/{id}/         - Delete contract

    # Balance and alerts
    # GET    /api/contracts/alerts/                              - Deadline and balance alerts
    # GET    /api/contracts/{id}/balance/                        - Item balances and rollups
    # PATCH  /api/contracts/{id}/items/{item_id}/consumed/       - Set consumed quantity
    # POST   /api/contracts/{id}/items/{item_id}/consumption/    - Consume or reverse
    path('', include(router.urls)),
]
