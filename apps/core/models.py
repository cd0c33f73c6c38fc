"""
Common abstract models

- TimeStampedModel: tracks created/updated time automatically
"""

from django.db import models


class TimeStampedModel(models.Model):
    """Tracks creation and modification time"""

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
