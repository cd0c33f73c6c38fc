from django import forms
from django.utils import timezone

from apps.core.choices import EXPENSE_CATEGORY_CHOICES, ServiceType
from apps.tax.utils import get_gst_rate_display
from .models import Payment, Expense


class BootstrapFormMixin:
    """Adds form-control / form-select to every widget"""

    def _apply_widget_classes(self):
        for field in self.fields.values():
            css = 'form-select' if isinstance(field.widget, forms.Select) else 'form-control'
            if isinstance(field.widget, forms.CheckboxInput):
                css = 'form-check-input'
            existing_classes = field.widget.attrs.get('class', '')
            field.widget.attrs['class'] = f'{existing_classes} {css}'.strip()


class PaymentForm(BootstrapFormMixin, forms.ModelForm):
    """Payment half of the master entry page (GST is filled in by the model)"""

    class Meta:
        model = Payment
        fields = [
            'service_type', 'payment_mode', 'received_bank_name', 'transaction_id',
            'amount', 'payment_status', 'booking_date',
        ]
        widgets = {
            'booking_date': forms.DateInput(attrs={'type': 'date'}),
            'amount': forms.NumberInput(attrs={'step': '0.01', 'placeholder': 'Enter amount'}),
            'received_bank_name': forms.TextInput(attrs={'placeholder': 'Enter bank name (if applicable)'}),
            'transaction_id': forms.TextInput(attrs={'placeholder': 'Enter transaction ID'}),
        }
        labels = {
            'service_type': 'Service Type',
            'payment_mode': 'Payment Mode',
            'received_bank_name': 'Received Bank Name',
            'transaction_id': 'Transaction ID',
            'amount': 'Amount',
            'payment_status': 'Payment Status',
            'booking_date': 'Booking Date',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['service_type'].choices = [('', 'Select service type')] + [
            (value, get_gst_rate_display(value)) for value in ServiceType.values
        ]
        self.fields['booking_date'].initial = timezone.localdate
        self._apply_widget_classes()

    def clean_amount(self):
        amount = self.cleaned_data.get('amount')
        if not amount:
            raise forms.ValidationError('Amount must be greater than zero.')
        return amount

    def clean_received_bank_name(self):
        return self.cleaned_data.get('received_bank_name') or None

    def clean_transaction_id(self):
        return self.cleaned_data.get('transaction_id') or None


class ExpenseForm(BootstrapFormMixin, forms.ModelForm):
    """Expense entry"""

    category = forms.ChoiceField(
        label='Expense Category',
        choices=[('', 'Select expense category')] + EXPENSE_CATEGORY_CHOICES,
    )

    class Meta:
        model = Expense
        fields = ['expense_date', 'category', 'description', 'amount', 'payment_method', 'notes']
        widgets = {
            'expense_date': forms.DateInput(attrs={'type': 'date'}),
            'amount': forms.NumberInput(attrs={'step': '0.01', 'placeholder': 'Enter amount'}),
            'description': forms.TextInput(attrs={'placeholder': 'Brief description of the expense'}),
            'notes': forms.Textarea(attrs={'rows': 3, 'placeholder': 'Additional notes (optional)'}),
        }
        labels = {
            'expense_date': 'Date',
            'description': 'Description',
            'amount': 'Amount',
            'payment_method': 'Payment Method',
            'notes': 'Notes',
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['expense_date'].initial = timezone.localdate
        self._apply_widget_classes()

    def clean_amount(self):
        amount = self.cleaned_data.get('amount')
        if not amount:
            raise forms.ValidationError('Amount must be greater than zero.')
        return amount

    def clean_notes(self):
        return self.cleaned_data.get('notes') or None
