from django.contrib import admin
from django.utils.html import format_html

from apps.core.choices import PaymentStatus
from .models import Payment, Expense


class InsertOnlyAdminMixin:
    """Payments and expenses are never edited after they are recorded"""

    def has_change_permission(self, request, obj=None):
        return obj is None and super().has_change_permission(request, obj)

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Payment)
class PaymentAdmin(InsertOnlyAdminMixin, admin.ModelAdmin):
    list_display = [
        'booking_date',
        'client',
        'service_type',
        'payment_mode',
        'get_amount_display',
        'gst_rate',
        'gst_amount',
        'total_amount',
        'get_status_colored',
    ]

    date_hierarchy = 'booking_date'

    list_filter = ['service_type', 'payment_mode', 'payment_status']

    search_fields = ['client__client_name', 'client__mobile_number', 'transaction_id']

    readonly_fields = ['gst_rate', 'gst_amount', 'total_amount', 'created_at', 'updated_at']

    autocomplete_fields = ['client']

    @admin.display(description='Amount', ordering='amount')
    def get_amount_display(self, obj):
        return f"₹{obj.amount:,.2f}"

    @admin.display(description='Status', ordering='payment_status')
    def get_status_colored(self, obj):
        colors = {
            PaymentStatus.ADVANCE.value: 'blue',
            PaymentStatus.PENDING.value: 'orange',
            PaymentStatus.COMPLETED.value: 'green',
        }
        color = colors.get(obj.payment_status, 'black')
        return format_html('<span style="color:{}; font-weight:bold;">{}</span>', color, obj.get_payment_status_display())


@admin.register(Expense)
class ExpenseAdmin(InsertOnlyAdminMixin, admin.ModelAdmin):
    list_display = ['expense_date', 'category', 'description', 'get_amount_display', 'payment_method']
    date_hierarchy = 'expense_date'
    list_filter = ['category', 'payment_method']
    search_fields = ['description', 'notes']
    readonly_fields = ['created_at', 'updated_at']

    @admin.display(description='Amount', ordering='amount')
    def get_amount_display(self, obj):
        return f"₹{obj.amount:,.2f}"
