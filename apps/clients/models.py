"""
Client records

One row per client entered on the master entry page. Rows are
insert-only; payments hang off them through Payment.client.
"""
from django.core.validators import RegexValidator
from django.db import models

from apps.core.choices import IdProofType
from apps.core.models import TimeStampedModel


MOBILE_VALIDATOR = RegexValidator(
    regex=r'^\d{10}$',
    message='Enter a 10-digit mobile number'
)


class Client(TimeStampedModel):
    """Travel client"""

    client_name = models.CharField(max_length=100, db_index=True)
    father_name = models.CharField(max_length=100, blank=True)
    mobile_number = models.CharField(max_length=10, validators=[MOBILE_VALIDATOR], db_index=True)
    id_proof_type = models.CharField(max_length=20, choices=IdProofType.choices, blank=True)
    id_proof_number = models.CharField(max_length=50, blank=True)
    # rows created by seed_demo_data; never set from a form
    is_demo = models.BooleanField(default=False, editable=False)

    class Meta:
        db_table = 'clients'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.client_name} ({self.mobile_number})"

    def get_masked_id_proof_number(self):
        """Masked ID number for list pages (last 4 digits visible)"""
        if not self.id_proof_number:
            return '-'

        value = self.id_proof_number
        if len(value) <= 4:
            return '*' * len(value)

        return '*' * (len(value) - 4) + value[-4:]
