from django.contrib import admin

from .models import Client


@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = [
        'client_name',
        'father_name',
        'mobile_number',
        'id_proof_type',
        'get_masked_id',
        'created_at',
    ]
    list_filter = ['id_proof_type', 'created_at']
    search_fields = ['client_name', 'father_name', 'mobile_number']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']

    fieldsets = [
        ('Client', {
            'fields': ('client_name', 'father_name', 'mobile_number')
        }),
        ('ID proof', {
            'fields': ('id_proof_type', 'id_proof_number'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    ]

    @admin.display(description='ID number')
    def get_masked_id(self, obj):
        return obj.get_masked_id_proof_number()
