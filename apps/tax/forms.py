"""
GST preview form
"""
from decimal import Decimal

from django import forms

from apps.core.choices import ServiceType
from .utils import get_gst_rate_display


class GSTPreviewForm(forms.Form):
    """Amount + service type, as typed into the master entry page"""

    amount = forms.DecimalField(
        label='Amount (₹)',
        min_value=Decimal('0'),
        max_digits=12,
        decimal_places=2,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01'}),
    )

    service_type = forms.ChoiceField(
        label='Service Type',
        widget=forms.Select(attrs={'class': 'form-select'}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['service_type'].choices = [
            (value, get_gst_rate_display(value)) for value in ServiceType.values
        ]
