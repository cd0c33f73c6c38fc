from django.contrib import admin
from .models import Profile


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = [
        'user',
        'full_name',
        'get_email',
        'role',
        'get_is_active',
        'created_at',
    ]

    list_display_links = ['user', 'full_name']

    list_filter = ['role', 'user__is_active']

    search_fields = [
        'user__username',
        'user__email',
        'full_name',
    ]

    readonly_fields = ['created_at', 'updated_at']
    ordering = ['-created_at']

    @admin.display(description='Email')
    def get_email(self, obj):
        return obj.user.email

    @admin.display(description='Active', boolean=True)
    def get_is_active(self, obj):
        return obj.user.is_active
