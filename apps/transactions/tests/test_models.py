import pytest
from datetime import date
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db.models import ProtectedError

from apps.transactions.models import Expense, Payment


@pytest.mark.django_db
class TestPayment:

    def test_gst_applied_on_save(self, payment):
        payment.refresh_from_db()

        assert payment.gst_rate == Decimal('18')
        assert payment.gst_amount == Decimal('180')
        assert payment.total_amount == Decimal('1180')

    @pytest.mark.parametrize("service_type,amount,gst_amount,total", [
        ('taxi', Decimal('2000'), Decimal('100'), Decimal('2100')),
        ('tour', Decimal('999.99'), Decimal('49.9995'), Decimal('1049.9895')),
        ('self_drive', Decimal('0.01'), Decimal('0.0018'), Decimal('0.0118')),
    ])
    def test_gst_stored_exactly(self, travel_client, service_type, amount, gst_amount, total):
        payment = Payment(
            client=travel_client, service_type=service_type, payment_mode='cash', amount=amount,
        )
        payment.save()
        payment.refresh_from_db()

        assert payment.gst_amount == gst_amount
        assert payment.total_amount == total

    def test_gst_overrides_submitted_values(self, travel_client):
        """gst fields are always derived, never taken from the caller"""
        payment = Payment(
            client=travel_client, service_type='taxi', payment_mode='cash',
            amount=Decimal('2000'), gst_amount=Decimal('999'), total_amount=Decimal('1'),
        )
        payment.save()

        assert payment.gst_amount == Decimal('100')
        assert payment.total_amount == Decimal('2100')

    def test_rate_locked_after_insert(self, payment):
        """Editing an existing row never recomputes GST"""
        payment.refresh_from_db()
        payment.amount = Decimal('2000')

        with pytest.raises(ValidationError) as exc_info:
            payment.save()
        assert 'gst_amount' in exc_info.value.message_dict

    def test_negative_amount_rejected(self, travel_client):
        payment = Payment(
            client=travel_client, service_type='taxi', payment_mode='cash', amount=Decimal('-5'),
        )
        with pytest.raises(ValidationError) as exc_info:
            payment.save()
        assert 'amount' in exc_info.value.message_dict
        assert Payment.objects.count() == 0

    def test_unknown_service_type_rejected(self, travel_client):
        payment = Payment(
            client=travel_client, service_type='bus', payment_mode='cash', amount=Decimal('100'),
        )
        with pytest.raises(ValidationError) as exc_info:
            payment.save()
        assert 'service_type' in exc_info.value.message_dict

    def test_defaults(self, travel_client):
        payment = Payment(client=travel_client, service_type='tour', payment_mode='upi', amount=Decimal('100'))
        payment.save()

        assert payment.payment_status == 'pending'
        assert payment.booking_date is not None
        assert payment.received_bank_name is None

    def test_client_is_protected(self, payment, travel_client):
        with pytest.raises(ProtectedError):
            travel_client.delete()

    def test_related_name(self, payment, travel_client):
        assert list(travel_client.payments.all()) == [payment]


@pytest.mark.django_db
class TestExpense:

    def test_create(self, expense):
        expense.refresh_from_db()
        assert expense.amount == Decimal('300.00')
        assert expense.notes is None
        assert str(expense) == 'fuel ₹300.00 (2024-03-10)'

    def test_negative_amount_rejected(self):
        expense = Expense(
            expense_date=date(2024, 3, 1), category='fuel', description='Diesel',
            amount=Decimal('-1'), payment_method='cash',
        )
        with pytest.raises(ValidationError):
            expense.save()

    def test_payment_method_must_be_known(self):
        expense = Expense(
            expense_date=date(2024, 3, 1), category='fuel', description='Diesel',
            amount=Decimal('10'), payment_method='cheque',
        )
        with pytest.raises(ValidationError) as exc_info:
            expense.save()
        assert 'payment_method' in exc_info.value.message_dict
