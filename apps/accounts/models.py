"""
Staff profile

Extends Django's User with the display name and role shown in the
header of every page.
"""
from django.contrib.auth.models import User
from django.db import models

from apps.core.models import TimeStampedModel


class Profile(TimeStampedModel):
    """Staff profile (Django User extension)"""

    ROLE_CHOICES = [
        ('admin', 'Administrator'),
        ('staff', 'Staff'),
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')
    full_name = models.CharField(max_length=100, blank=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default='staff')

    class Meta:
        db_table = 'profiles'

    def __str__(self):
        return f"{self.user.username} profile"

    def get_display_name(self):
        return self.full_name or self.user.get_full_name() or self.user.username
