from django.contrib import admin
from .models import CatalogItem


@admin.register(CatalogItem)
class CatalogItemAdmin(admin.ModelAdmin):
    list_display = ['description', 'category', 'unit', 'unit_price', 'pncp_catalog']
    list_filter = ['pncp_catalog', 'category']
    search_fields = ['description', 'specification', 'keyword1', 'keyword2', 'keyword3', 'keyword4']
    readonly_fields = ['id', 'created_at']

    fieldsets = (
        ('Item', {
            'fields': ('id', 'description', 'category', 'unit', 'unit_price', 'specification')
        }),
        ('Public catalog', {
            'fields': ('pncp_catalog', 'pncp_classification', 'pncp_subclassification'),
        }),
        ('Keywords', {
            'fields': ('keyword1', 'keyword2', 'keyword3', 'keyword4', 'notes'),
            'classes': ('collapse',),
        }),
    )
