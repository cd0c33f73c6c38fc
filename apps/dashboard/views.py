"""
Dashboard views
"""
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import HttpResponse, JsonResponse
from django.shortcuts import render
from django.utils import timezone

from apps.core.exceptions import FetchError
from apps.core.store import DataStore
from .utils import AmountPolicy, build_dashboard, export_dashboard_to_excel

logger = logging.getLogger(__name__)


def load_dashboard(today, store=None):
    """
    Fetch everything the dashboard needs and aggregate it.

    FetchError from the store propagates; nothing is aggregated then.
    """
    store = store or DataStore()

    _, client_count = store.fetch_clients(head=True)
    payments = store.fetch_payments()
    expenses = store.fetch_expenses()

    dashboard = build_dashboard(
        payments,
        expenses,
        client_count,
        today=today,
        months=settings.DASHBOARD_MONTHS,
        policy=AmountPolicy.from_setting(settings.DASHBOARD_AMOUNT_POLICY),
    )

    logger.info(
        f"Dashboard built: payments={len(payments)}, expenses={len(expenses)}, "
        f"revenue={dashboard['stats']['total_revenue']}"
    )
    return dashboard


@login_required
def index(request):
    """
    Dashboard

    - Key statistics (clients, revenue, pending, GST)
    - Revenue per service type
    - Revenue vs expenses for the trailing months
    - Financial summary (net profit)
    """
    today = timezone.localdate()
    context = {'today': today, 'has_data': False}

    try:
        dashboard = load_dashboard(today)
    except FetchError as e:
        messages.error(request, f'Could not load dashboard data: {e}')
        return render(request, 'dashboard/index.html', context)
    except ValidationError as e:
        logger.error(f"Dashboard data is invalid: {e}")
        messages.error(request, 'Dashboard data contains invalid records.')
        return render(request, 'dashboard/index.html', context)

    context.update(dashboard)
    context['has_data'] = True
    return render(request, 'dashboard/index.html', context)


@login_required
def dashboard_data(request):
    """Dashboard record as JSON (for the charts)"""
    today = timezone.localdate()

    try:
        dashboard = load_dashboard(today)
    except FetchError as e:
        return JsonResponse({'error': str(e)}, status=503)
    except ValidationError as e:
        logger.error(f"Dashboard data is invalid: {e}")
        return JsonResponse({'error': 'invalid records', 'details': e.message_dict}, status=422)

    return JsonResponse({'date': today, **dashboard})


@login_required
def dashboard_export(request):
    """Dashboard as an Excel workbook"""
    today = timezone.localdate()

    try:
        dashboard = load_dashboard(today)
    except FetchError as e:
        logger.error(f"Dashboard export failed: {e}")
        return HttpResponse('Dashboard data is not available right now.', status=503)
    except ValidationError as e:
        logger.error(f"Dashboard data is invalid: {e}")
        return HttpResponse('Dashboard data contains invalid records.', status=422)

    excel_file = export_dashboard_to_excel(dashboard, today)

    filename = f"dashboard_{today:%Y%m%d}.xlsx"
    response = HttpResponse(
        excel_file.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response
