import random
from datetime import date
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand
from django.db import transaction as db_transaction
from django.utils import timezone

from apps.clients.models import Client
from apps.core.choices import (
    EXPENSE_CATEGORY_CHOICES, IdProofType, PaymentMethod, PaymentMode, PaymentStatus, ServiceType,
)
from apps.dashboard.utils import month_window
from apps.transactions.models import Expense, Payment

User = get_user_model()


class Command(BaseCommand):
    help = 'Create demo clients, payments and expenses for the trailing months'

    FIRST_NAMES = ['Aarav', 'Vivaan', 'Aditya', 'Diya', 'Ananya', 'Ishaan', 'Kavya', 'Rohan', 'Meera', 'Arjun']
    LAST_NAMES = ['Sharma', 'Verma', 'Iyer', 'Nair', 'Patel', 'Reddy', 'Gupta', 'Menon']
    BANKS = ['HDFC Bank', 'ICICI Bank', 'State Bank of India', 'Axis Bank']

    # (min, max) base amount in rupees per service
    AMOUNT_RANGES = {
        ServiceType.SELF_DRIVE.value: (1500, 12000),
        ServiceType.TAXI.value: (500, 6000),
        ServiceType.TOUR.value: (8000, 60000),
    }

    def add_arguments(self, parser):
        parser.add_argument('--username', type=str, default='demo', help='staff user to create')
        parser.add_argument('--months', type=int, default=6, help='number of trailing months')
        parser.add_argument('--payments-per-month', type=int, default=20, help='payments per month')

    @db_transaction.atomic
    def handle(self, *args, **options):
        username = options['username']
        months = options['months']
        per_month = options['payments_per_month']

        self.stdout.write(f"=== Seeding {months} months of demo data ===")

        user, created = User.objects.get_or_create(
            username=username,
            defaults={'email': f'{username}@example.com', 'is_staff': True},
        )
        if created:
            user.set_password('demo1234')
            user.save()
            self.stdout.write(f"- Created user '{username}' (password: demo1234)")

        today = timezone.localdate()
        payments_created = 0
        expenses_created = 0

        for year, month in month_window(today, months):
            last_day = today.day if (year, month) == (today.year, today.month) else 28
            self.stdout.write(f"{year}-{month:02d} ...")

            for _ in range(per_month):
                client = self._create_client()
                service_type = random.choice(ServiceType.values)
                low, high = self.AMOUNT_RANGES[service_type]
                payment_mode = random.choice(PaymentMode.values)
                online = payment_mode != PaymentMode.CASH

                # Payment.save() runs full_clean() and fills in GST
                Payment(
                    client=client,
                    service_type=service_type,
                    payment_mode=payment_mode,
                    received_bank_name=random.choice(self.BANKS) if online else None,
                    transaction_id=f"TXN{random.randint(10 ** 9, 10 ** 10 - 1)}" if online else None,
                    amount=Decimal(random.randint(low, high)),
                    payment_status=random.choice(PaymentStatus.values),
                    booking_date=date(year, month, random.randint(1, last_day)),
                ).save()
                payments_created += 1

            for _ in range(max(per_month // 4, 1)):
                category, label = random.choice(EXPENSE_CATEGORY_CHOICES)
                Expense(
                    expense_date=date(year, month, random.randint(1, last_day)),
                    category=category,
                    description=f"{label} ({month:02d}/{year})",
                    amount=Decimal(random.randint(5, 400)) * 100,
                    payment_method=random.choice(PaymentMethod.values),
                    is_demo=True,
                ).save()
                expenses_created += 1

        self.stdout.write(self.style.SUCCESS(
            f"Done: {payments_created} payments, {expenses_created} expenses"
        ))

    def _create_client(self):
        client = Client(
            client_name=f"{random.choice(self.FIRST_NAMES)} {random.choice(self.LAST_NAMES)}",
            father_name=f"{random.choice(self.FIRST_NAMES)} {random.choice(self.LAST_NAMES)}",
            mobile_number=f"9{random.randint(10 ** 8, 10 ** 9 - 1)}",
            id_proof_type=random.choice(IdProofType.values),
            id_proof_number=str(random.randint(10 ** 11, 10 ** 12 - 1)),
            is_demo=True,
        )
        client.full_clean()
        client.save()
        return client
