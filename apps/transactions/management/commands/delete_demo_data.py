from django.core.management.base import BaseCommand
from django.db import transaction as db_transaction

from apps.clients.models import Client
from apps.transactions.models import Expense, Payment


class Command(BaseCommand):
    help = 'Delete the rows created by seed_demo_data'

    @db_transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Deleting demo data...")

        demo_clients = Client.objects.filter(is_demo=True)

        # payments protect their client, so they go first
        count, _ = Payment.objects.filter(client__in=demo_clients).delete()
        self.stdout.write(f"- Payments deleted: {count}")

        count, _ = demo_clients.delete()
        self.stdout.write(f"- Clients deleted: {count}")

        count, _ = Expense.objects.filter(is_demo=True).delete()
        self.stdout.write(f"- Expenses deleted: {count}")

        self.stdout.write(self.style.SUCCESS("Demo data deleted."))
