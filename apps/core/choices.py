"""
Closed-set choices shared by every app.

Each set matches an enum column of the hosted database, so the values
must not be renamed.
"""
from django.db import models


class IdProofType(models.TextChoices):
    AADHAR = 'aadhar', 'Aadhar Card'
    PAN = 'pan', 'PAN Card'
    LICENSE = 'license', 'Driving License'
    PASSPORT = 'passport', 'Passport'
    VOTER_ID = 'voter_id', 'Voter ID'


class ServiceType(models.TextChoices):
    SELF_DRIVE = 'self_drive', 'Self Drive'
    TAXI = 'taxi', 'Taxi Service'
    TOUR = 'tour', 'Tour Package'


class PaymentMode(models.TextChoices):
    """How a client paid us"""
    UPI = 'upi', 'UPI'
    CASH = 'cash', 'Cash'
    BANK_TRANSFER = 'bank_transfer', 'Bank Transfer'


class PaymentStatus(models.TextChoices):
    ADVANCE = 'advance', 'Advance'
    PENDING = 'pending', 'Pending'
    COMPLETED = 'completed', 'Completed'


class PaymentMethod(models.TextChoices):
    """How we paid an expense"""
    CASH = 'cash', 'Cash'
    UPI = 'upi', 'UPI'
    BANK = 'bank', 'Bank Transfer'


# Suggested expense categories (the column itself is free text)
EXPENSE_CATEGORY_CHOICES = [
    ('fuel', 'Fuel'),
    ('maintenance', 'Vehicle Maintenance'),
    ('insurance', 'Insurance'),
    ('office_rent', 'Office Rent'),
    ('utilities', 'Utilities'),
    ('marketing', 'Marketing'),
    ('staff_salary', 'Staff Salary'),
    ('food_accommodation', 'Food & Accommodation'),
    ('permits_licenses', 'Permits & Licenses'),
    ('office_supplies', 'Office Supplies'),
    ('other', 'Other'),
]
