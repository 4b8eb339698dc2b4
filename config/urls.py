"""
URL configuration for the SGFI project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/4.2/topics/http/urls/
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/creditors/', include('apps.creditors.urls')),
    path('api/expenses/', include('apps.expenses.urls')),
    path('api/categories/', include('apps.expenses.category_urls')),
    path('api/contracts/', include('apps.contracts.urls')),
    path('api/catalog-items/', include('apps.catalog.urls')),
    path('api/pncp-catalog/', include('apps.catalog.pncp_urls')),
    path('api/entities/', include('apps.organization.urls')),
    path('api/settings/', include('apps.organization.settings_urls')),
    path('api/analytics/', include('apps.analytics.urls')),
]

# Static files (development only)
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
