"""
Data store gateway

The dashboard and entry pages only talk to the database through this
class. Reads return plain dict rows, so the aggregation code never depends
on the ORM.

    DataStore.fetch_clients(head=False) -> (rows, count)
    DataStore.fetch_payments()          -> [row, ...]
    DataStore.fetch_expenses(fields)    -> [row, ...]
    DataStore.insert_client(fields)     -> Client
    DataStore.insert_payment(fields)    -> Payment
    DataStore.insert_expense(fields)    -> Expense

Database failures become FetchError (reads) or StoreError (writes).
ValidationError from the models is passed through unchanged.
Nothing here retries.
"""
import logging

from django.db import DatabaseError

from apps.clients.models import Client
from apps.transactions.models import Expense, Payment
from .exceptions import FetchError, StoreError

logger = logging.getLogger(__name__)


CLIENT_FIELDS = (
    'id', 'client_name', 'father_name', 'mobile_number',
    'id_proof_type', 'id_proof_number', 'created_at',
)

PAYMENT_FIELDS = (
    'id', 'client_id', 'service_type', 'payment_mode', 'received_bank_name',
    'transaction_id', 'amount', 'payment_status', 'booking_date',
    'gst_rate', 'gst_amount', 'total_amount', 'created_at',
)

DEFAULT_EXPENSE_FIELDS = ('amount', 'expense_date')


class DataStore:
    """Thin wrapper around the ORM for the three business tables"""

    def fetch_clients(self, head=False):
        """
        Client rows and their count

        Args:
            head: only count, return no rows

        Returns:
            (rows, count)
        """
        try:
            if head:
                return [], Client.objects.count()
            rows = list(Client.objects.values(*CLIENT_FIELDS))
        except DatabaseError as e:
            logger.error(f"Client fetch failed: {e}")
            raise FetchError('Could not load clients') from e
        return rows, len(rows)

    def fetch_payments(self):
        try:
            return list(Payment.objects.values(*PAYMENT_FIELDS))
        except DatabaseError as e:
            logger.error(f"Payment fetch failed: {e}")
            raise FetchError('Could not load payments') from e

    def fetch_expenses(self, fields=DEFAULT_EXPENSE_FIELDS):
        """Partial expense rows (amount + expense_date unless asked otherwise)"""
        try:
            return list(Expense.objects.values(*fields))
        except DatabaseError as e:
            logger.error(f"Expense fetch failed: {e}")
            raise FetchError('Could not load expenses') from e

    def insert_client(self, fields):
        client = Client(**fields)
        client.full_clean()
        try:
            client.save()
        except DatabaseError as e:
            logger.error(f"Client insert failed: {e}")
            raise StoreError('Failed to save client data') from e
        logger.info(f"Client created: id={client.pk}, name={client.client_name}")
        return client

    def insert_payment(self, fields):
        payment = Payment(**fields)
        try:
            # Payment.save() runs full_clean() and fills in GST
            payment.save()
        except DatabaseError as e:
            logger.error(f"Payment insert failed: {e}")
            raise StoreError('Failed to save payment data') from e
        logger.info(
            f"Payment created: id={payment.pk}, client={payment.client_id}, "
            f"service={payment.service_type}, amount={payment.amount}, gst={payment.gst_amount}"
        )
        return payment

    def insert_expense(self, fields):
        expense = Expense(**fields)
        try:
            expense.save()
        except DatabaseError as e:
            logger.error(f"Expense insert failed: {e}")
            raise StoreError('Failed to save expense') from e
        logger.info(f"Expense created: id={expense.pk}, category={expense.category}, amount={expense.amount}")
        return expense
