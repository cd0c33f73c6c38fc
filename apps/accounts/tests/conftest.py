"""
Shared fixtures for the accounts app tests
"""
import pytest
from django.contrib.auth.models import User


@pytest.fixture
def test_user(db):
    """Staff user"""
    return User.objects.create_user(
        username='staff', password='password123', first_name='Ravi', last_name='Kumar'
    )


@pytest.fixture
def auth_client(client, test_user):
    """Logged-in client"""
    client.login(username='staff', password='password123')
    return client
