from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/               - List expenses (projected status)
    # POST   /api/expenses/               - Create expense (+ consumed_items)
    # GET    /api/expenses/{id}/          - Get expense
    # PUT    /api/expenses/{id}/          - Update expense
    # PATCH  /api/expenses/{id}/          - Partial update
    # DELETE /api/expenses/{id}/          - Delete expense
    # GET    /api/expenses/export/xlsx/   - Spreadsheet export
    # GET    /api/expenses/export/pdf/    - PDF report
    path('', include(router.urls)),
]
