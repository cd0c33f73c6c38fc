"""
GST calculation utilities

The rate depends only on the service type. Payments store the rate they
were created with, so changing this table never touches existing rows.
"""
from decimal import Decimal, InvalidOperation, Overflow
from typing import Dict

from django.core.exceptions import ValidationError

from apps.core.choices import ServiceType


# GST rate table (percent)
GST_RATES = {
    ServiceType.SELF_DRIVE.value: Decimal('18'),
    ServiceType.TAXI.value: Decimal('5'),
    ServiceType.TOUR.value: Decimal('5'),
}


def get_gst_rate(service_type) -> Decimal:
    """
    Rate for a service type in percent.

    Unknown service types are treated as untaxed and get 0.
    """
    if service_type not in ServiceType.values:
        return Decimal('0')
    return GST_RATES[str(service_type)]


def get_gst_rate_display(service_type) -> str:
    """'Self Drive (18% GST)'"""
    rate = get_gst_rate(service_type)
    return f"{ServiceType(service_type).label} ({rate:.0f}% GST)"


def calculate_gst(amount, service_type) -> Dict[str, Decimal]:
    """
    Apply GST to a base amount

    Args:
        amount: base amount (non-negative, anything Decimal(str(x)) accepts)
        service_type: ServiceType value

    Returns:
        {
            'rate': rate in percent,
            'gst_amount': amount * rate / 100,
            'total': amount + gst_amount
        }

    No rounding is applied; amounts stay exact Decimals.
    """
    try:
        amount = Decimal(str(amount))
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError({'amount': f'Amount is not a number: {amount!r}'})

    if not amount.is_finite():
        raise ValidationError({'amount': f'Amount is not a number: {amount!r}'})
    if amount < 0:
        raise ValidationError({'amount': 'Amount cannot be negative'})

    rate = get_gst_rate(service_type)
    try:
        gst_amount = amount * rate / Decimal('100')
        total = amount + gst_amount
    except (Overflow, InvalidOperation):
        raise ValidationError({'amount': f'Amount is out of range: {amount!r}'})

    return {
        'rate': rate,
        'gst_amount': gst_amount,
        'total': total,
    }
