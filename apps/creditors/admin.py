from django.contrib import admin
from .models import Creditor


@admin.register(Creditor)
class CreditorAdmin(admin.ModelAdmin):
    list_display = ['name', 'document_number', 'contact', 'city', 'uf']
    list_filter = ['uf']
    search_fields = ['name', 'document_number', 'email']
    ordering = ['name']
    readonly_fields = ['id', 'created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name', 'document_number', 'contact', 'email')
        }),
        ('Address', {
            'fields': ('cep', 'street', 'neighborhood', 'city', 'uf'),
        }),
        ('Timestamps', {
            'fields': ('created_at',),
            'classes': ('collapse',),
        }),
    )
