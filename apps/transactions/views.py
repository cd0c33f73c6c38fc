import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.db import transaction as db_transaction
from django.shortcuts import render, redirect

from apps.clients.forms import ClientForm
from apps.core.exceptions import StoreError
from apps.core.store import DataStore
from apps.tax.utils import calculate_gst
from .forms import PaymentForm, ExpenseForm

logger = logging.getLogger(__name__)


# ============================================================
# Master entry (client + payment)
# ============================================================

@login_required
def master_entry(request):
    """
    New client and payment in one step

    - Client and payment are saved in one DB transaction
    - GST is computed from the service type when the payment is saved
    """
    gst_details = None

    if request.method == 'POST':
        client_form = ClientForm(request.POST, prefix='client')
        payment_form = PaymentForm(request.POST, prefix='payment')

        if client_form.is_valid() and payment_form.is_valid():
            store = DataStore()
            stage = 'client'
            try:
                with db_transaction.atomic():
                    client = store.insert_client(client_form.cleaned_data)
                    stage = 'payment'
                    store.insert_payment({**payment_form.cleaned_data, 'client': client})
            except (StoreError, ValidationError) as e:
                logger.error(f"Master entry failed at {stage}: {e}")
                messages.error(request, f'Failed to save {stage} data')
            else:
                messages.success(request, 'Client and payment data saved successfully.')
                return redirect('transactions:master_entry')
        else:
            messages.error(request, 'Please fill in all required fields')

        if payment_form.is_valid():
            gst_details = calculate_gst(
                payment_form.cleaned_data['amount'],
                payment_form.cleaned_data['service_type'],
            )
    else:
        client_form = ClientForm(prefix='client')
        payment_form = PaymentForm(prefix='payment')

    context = {
        'client_form': client_form,
        'payment_form': payment_form,
        'gst_details': gst_details,
    }
    return render(request, 'transactions/master_entry.html', context)


# ============================================================
# Expense
# ============================================================

@login_required
def expense_create(request):
    """Add an expense"""
    if request.method == 'POST':
        form = ExpenseForm(request.POST)
        if form.is_valid():
            try:
                DataStore().insert_expense(form.cleaned_data)
            except (StoreError, ValidationError) as e:
                logger.error(f"Expense entry failed: {e}")
                messages.error(request, 'Failed to save expense')
            else:
                messages.success(request, 'Expense added successfully.')
                return redirect('transactions:expense_create')
        else:
            messages.error(request, 'Please fill in all required fields')
    else:
        form = ExpenseForm()

    return render(request, 'transactions/expense_form.html', {'form': form})
