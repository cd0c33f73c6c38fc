from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('clients', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Expense',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('expense_date', models.DateField(db_index=True, default=django.utils.timezone.localdate)),
                ('category', models.CharField(db_index=True, max_length=50)),
                ('description', models.CharField(max_length=200)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('payment_method', models.CharField(choices=[('cash', 'Cash'), ('upi', 'UPI'), ('bank', 'Bank Transfer')], max_length=20)),
                ('notes', models.TextField(blank=True, null=True)),
            ],
            options={
                'db_table': 'expenses',
                'ordering': ['-expense_date', '-created_at'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount__gte', 0)), name='expense_amount_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('service_type', models.CharField(choices=[('self_drive', 'Self Drive'), ('taxi', 'Taxi Service'), ('tour', 'Tour Package')], db_index=True, max_length=20)),
                ('payment_mode', models.CharField(choices=[('upi', 'UPI'), ('cash', 'Cash'), ('bank_transfer', 'Bank Transfer')], max_length=20)),
                ('received_bank_name', models.CharField(blank=True, max_length=100, null=True)),
                ('transaction_id', models.CharField(blank=True, max_length=100, null=True)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('payment_status', models.CharField(choices=[('advance', 'Advance'), ('pending', 'Pending'), ('completed', 'Completed')], db_index=True, default='pending', max_length=20)),
                ('booking_date', models.DateField(db_index=True, default=django.utils.timezone.localdate)),
                ('gst_rate', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=5)),
                ('gst_amount', models.DecimalField(decimal_places=4, default=Decimal('0'), max_digits=16)),
                ('total_amount', models.DecimalField(decimal_places=4, default=Decimal('0'), max_digits=16)),
                ('client', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='clients.client')),
            ],
            options={
                'db_table': 'payments',
                'ordering': ['-booking_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['service_type', 'booking_date'], name='payments_service_date_idx'),
                    models.Index(fields=['payment_status', 'booking_date'], name='payments_status_date_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount__gte', 0)), name='payment_amount_non_negative'),
                    models.CheckConstraint(condition=models.Q(('gst_amount__gte', 0)), name='payment_gst_non_negative'),
                ],
            },
        ),
    ]
