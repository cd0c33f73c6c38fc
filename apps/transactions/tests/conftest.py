"""
Shared fixtures for the transactions app tests
"""
import pytest
from datetime import date
from decimal import Decimal

from django.contrib.auth.models import User

from apps.clients.models import Client
from apps.transactions.models import Expense, Payment


@pytest.fixture
def test_user(db):
    """Staff user"""
    return User.objects.create_user(username='tester', password='pass')


@pytest.fixture
def auth_client(client, test_user):
    """Logged-in client"""
    client.login(username='tester', password='pass')
    return client


@pytest.fixture
def travel_client(db):
    """Client row (named so it does not clash with the pytest-django client)"""
    return Client.objects.create(
        client_name='Rahul Sharma',
        father_name='Suresh Sharma',
        mobile_number='9876543210',
        id_proof_type='aadhar',
        id_proof_number='123456789012',
    )


@pytest.fixture
def payment(travel_client):
    """Self drive payment of 1000 (18% GST)"""
    payment = Payment(
        client=travel_client,
        service_type='self_drive',
        payment_mode='upi',
        received_bank_name='HDFC Bank',
        transaction_id='UPI123',
        amount=Decimal('1000.00'),
        payment_status='completed',
        booking_date=date(2024, 3, 15),
    )
    payment.save()
    return payment


@pytest.fixture
def expense(db):
    expense = Expense(
        expense_date=date(2024, 3, 10),
        category='fuel',
        description='Diesel',
        amount=Decimal('300.00'),
        payment_method='cash',
    )
    expense.save()
    return expense


@pytest.fixture
def master_entry_data():
    """Valid POST body for the master entry page"""
    return {
        'client-client_name': 'Priya Nair',
        'client-father_name': 'Mohan Nair',
        'client-mobile_number': '9123456780',
        'client-id_proof_type': 'pan',
        'client-id_proof_number': 'ABCDE1234F',
        'payment-service_type': 'taxi',
        'payment-payment_mode': 'cash',
        'payment-received_bank_name': '',
        'payment-transaction_id': '',
        'payment-amount': '2000',
        'payment-payment_status': 'pending',
        'payment-booking_date': '2024-03-20',
    }
