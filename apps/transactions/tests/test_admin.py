import pytest
from django.contrib.admin.sites import AdminSite
from django.test import RequestFactory

from apps.transactions.admin import ExpenseAdmin, PaymentAdmin
from apps.transactions.models import Expense, Payment


@pytest.fixture
def superuser_request(django_user_model):
    user = django_user_model.objects.create_superuser(username='admin', password='pass', email='a@example.com')
    request = RequestFactory().get('/')
    request.user = user
    return request


@pytest.mark.django_db
class TestInsertOnlyAdmin:

    def test_payment_can_be_added_not_changed(self, superuser_request, payment):
        admin = PaymentAdmin(Payment, AdminSite())

        assert admin.has_add_permission(superuser_request)
        assert admin.has_change_permission(superuser_request) is True
        assert admin.has_change_permission(superuser_request, payment) is False
        assert admin.has_delete_permission(superuser_request, payment) is False

    def test_expense_cannot_be_deleted(self, superuser_request, expense):
        admin = ExpenseAdmin(Expense, AdminSite())
        assert admin.has_delete_permission(superuser_request, expense) is False

    def test_display_helpers(self, payment):
        admin = PaymentAdmin(Payment, AdminSite())

        assert admin.get_amount_display(payment) == '₹1,000.00'
        assert 'green' in admin.get_status_colored(payment)
