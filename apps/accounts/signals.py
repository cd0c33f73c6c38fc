"""
User-Profile signals

    1. User created -> Profile created
    2. User saved   -> Profile saved
"""

from django.db.models.signals import post_save
from django.dispatch import receiver
from django.contrib.auth.models import User
from .models import Profile


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    """
    Create a Profile when a User is created

    Example:
        user = User.objects.create_user(username='staff')
        -> Profile.objects.create(user=user, full_name=user.get_full_name())
    """
    if created:
        Profile.objects.create(user=instance, full_name=instance.get_full_name())


@receiver(post_save, sender=User)
def save_user_profile(sender, instance, created, **kwargs):
    """Save the Profile along with its User (updates only)"""
    if not created and hasattr(instance, 'profile'):
        instance.profile.save()
