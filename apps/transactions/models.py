from decimal import Decimal
import logging

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from apps.clients.models import Client
from apps.core.choices import PaymentMethod, PaymentMode, PaymentStatus, ServiceType
from apps.core.models import TimeStampedModel
from apps.tax.utils import calculate_gst

logger = logging.getLogger(__name__)


class Payment(TimeStampedModel):
    """Client payment (GST fixed at creation time)"""

    client = models.ForeignKey(Client, on_delete=models.PROTECT, related_name='payments')

    service_type = models.CharField(max_length=20, choices=ServiceType.choices, db_index=True)
    payment_mode = models.CharField(max_length=20, choices=PaymentMode.choices)
    received_bank_name = models.CharField(max_length=100, blank=True, null=True)
    transaction_id = models.CharField(max_length=100, blank=True, null=True)

    amount = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal('0'))])
    payment_status = models.CharField(
        max_length=20, choices=PaymentStatus.choices, default=PaymentStatus.PENDING, db_index=True
    )
    booking_date = models.DateField(default=timezone.localdate, db_index=True)

    # amount has 2 decimal places and rates are whole percents -> 4 places is exact
    gst_rate = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal('0'))
    gst_amount = models.DecimalField(max_digits=16, decimal_places=4, default=Decimal('0'))
    total_amount = models.DecimalField(max_digits=16, decimal_places=4, default=Decimal('0'))

    class Meta:
        db_table = 'payments'
        ordering = ['-booking_date', '-created_at']
        indexes = [
            models.Index(fields=['service_type', 'booking_date'], name='payments_service_date_idx'),
            models.Index(fields=['payment_status', 'booking_date'], name='payments_status_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gte=0), name='payment_amount_non_negative'),
            models.CheckConstraint(condition=models.Q(gst_amount__gte=0), name='payment_gst_non_negative'),
        ]

    def __str__(self):
        return f"{self.get_service_type_display()} ₹{self.amount:,.2f} ({self.booking_date})"

    def apply_gst(self):
        """Fill gst_rate / gst_amount / total_amount from the current rate table"""
        result = calculate_gst(self.amount, self.service_type)
        self.gst_rate = result['rate']
        self.gst_amount = result['gst_amount']
        self.total_amount = result['total']

    def clean(self):
        if self.amount is None:
            return
        # rate is locked in on insert; later rate changes never touch stored rows
        if self._state.adding:
            self.apply_gst()

        errors = {}
        if self.gst_amount != self.amount * self.gst_rate / Decimal('100'):
            errors['gst_amount'] = 'GST amount must equal amount × GST rate / 100'
        if self.total_amount != self.amount + self.gst_amount:
            errors['total_amount'] = 'Total amount must equal amount + GST amount'
        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)
        logger.debug(f"Payment saved: id={self.pk}, total={self.total_amount}")


class Expense(TimeStampedModel):
    """Business expense"""

    expense_date = models.DateField(default=timezone.localdate, db_index=True)
    # free text; the entry form offers EXPENSE_CATEGORY_CHOICES
    category = models.CharField(max_length=50, db_index=True)
    description = models.CharField(max_length=200)
    amount = models.DecimalField(max_digits=12, decimal_places=2, validators=[MinValueValidator(Decimal('0'))])
    payment_method = models.CharField(max_length=20, choices=PaymentMethod.choices)
    notes = models.TextField(blank=True, null=True)
    is_demo = models.BooleanField(default=False, editable=False)

    class Meta:
        db_table = 'expenses'
        ordering = ['-expense_date', '-created_at']
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gte=0), name='expense_amount_non_negative'),
        ]

    def __str__(self):
        return f"{self.category} ₹{self.amount:,.2f} ({self.expense_date})"

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)
