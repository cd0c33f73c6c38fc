"""
Dashboard aggregation

build_dashboard() turns raw payment / expense rows into the numbers shown
on the dashboard:

    stats              totals (revenue, GST, pending, expenses, net profit)
    service_breakdown  revenue per service type
    monthly_trend      trailing N months of revenue / expenses / net

Revenue always means the base amount (GST excluded). Rows may be dicts
(DataStore output) or model instances. Nothing here reads the clock;
the caller passes `today`.
"""
import calendar
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, Overflow
from enum import Enum
from io import BytesIO
from typing import Dict, List, Tuple

import openpyxl
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from apps.core.choices import PaymentStatus, ServiceType


class AmountPolicy(Enum):
    """
    What to do with a malformed row

    LENIENT: missing / non-numeric / out-of-range amounts count as 0,
             unreadable dates keep the row out of the monthly series only,
             unknown statuses and service types are ignored.
    STRICT:  the first bad row fails the whole batch with ValidationError
             keyed by the offending field.
    """
    LENIENT = 'lenient'
    STRICT = 'strict'

    @classmethod
    def from_setting(cls, value):
        """'Strict ' -> STRICT; an unknown value is a configuration error"""
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ImproperlyConfigured(
                f"DASHBOARD_AMOUNT_POLICY must be 'lenient' or 'strict', got {value!r}"
            )


ZERO = Decimal('0')

# amounts must stay this many orders of magnitude below the Decimal limit
SUM_HEADROOM = 18


def _get(row, field):
    if isinstance(row, dict):
        return row.get(field)
    return getattr(row, field, None)


def to_decimal(value):
    """
    Exact Decimal for an amount, or None when it is not a number.

    Goes through str() so floats do not drag binary noise in.
    """
    if value is None or isinstance(value, bool) or str(value).strip() == '':
        return None

    try:
        decimal_value = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        return None

    if not decimal_value.is_finite():
        return None

    try:
        # too close to the Decimal context limit to be summed, e.g. 1e1000000
        decimal_value.scaleb(SUM_HEADROOM)
    except (Overflow, InvalidOperation):
        return None
    return decimal_value


def to_date(value):
    """date for a date / datetime / ISO string, or None"""
    if value is None:
        return None
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    try:
        parsed = parse_datetime(text)
        if parsed is not None:
            return to_date(parsed)
        return parse_date(text)
    except ValueError:
        # well formed but impossible, e.g. 2024-02-30
        return None


class _RowReader:
    """Reads fields off rows according to the policy"""

    def __init__(self, kind, policy):
        self.kind = kind
        self.policy = policy

    def _fail(self, index, field, value, reason):
        raise ValidationError({
            field: f"{self.kind} row {index}: {field} {reason} ({value!r})"
        })

    def amount(self, row, index, field='amount'):
        value = _get(row, field)
        amount = to_decimal(value)
        if amount is None:
            if self.policy is AmountPolicy.STRICT:
                self._fail(index, field, value, 'is missing or not a number')
            return ZERO
        return amount

    def date(self, row, index, field):
        value = _get(row, field)
        parsed = to_date(value)
        if parsed is None and self.policy is AmountPolicy.STRICT:
            self._fail(index, field, value, 'is missing or not a date')
        return parsed

    def choice(self, row, index, field, allowed):
        """The value when it is one of `allowed`, else None (lenient)"""
        value = _get(row, field)
        if value in allowed:
            return value
        if self.policy is AmountPolicy.STRICT:
            self._fail(index, field, value, f"must be one of {', '.join(allowed)}")
        return None


def month_window(today, months=6) -> List[Tuple[int, int]]:
    """
    (year, month) pairs for the trailing window, oldest first.

    month_window(date(2024, 2, 10), 3) -> [(2023, 12), (2024, 1), (2024, 2)]
    """
    if months < 1:
        raise ValueError('months must be at least 1')

    base = today.year * 12 + (today.month - 1)
    window = []
    for offset in range(months - 1, -1, -1):
        year, month_index = divmod(base - offset, 12)
        window.append((year, month_index + 1))
    return window


def build_dashboard(
    payments,
    expenses,
    client_count=0,
    *,
    today: date,
    months: int = 6,
    policy: AmountPolicy = AmountPolicy.LENIENT,
) -> Dict:
    """
    Aggregate payments and expenses for the dashboard

    Args:
        payments: rows with amount, gst_amount, payment_status,
                  service_type, booking_date
        expenses: rows with amount, expense_date
        client_count: number of client rows
        today: reference day that anchors the monthly series
        months: length of the monthly series
        policy: AmountPolicy for malformed rows

    Returns:
        {
            'stats': {...},
            'service_breakdown': [{'key', 'name', 'value'}, ...],
            'monthly_trend': [{'label', 'year', 'month', 'revenue', 'expenses', 'net'}, ...]
        }

    Raises:
        ValidationError: policy is STRICT and a row is malformed
    """
    window = month_window(today, months)
    buckets = {key: {'revenue': ZERO, 'expenses': ZERO} for key in window}

    service_revenue = {value: ZERO for value in ServiceType.values}
    total_revenue = ZERO
    gst_collected = ZERO
    pending_payments = ZERO

    reader = _RowReader('payment', policy)
    for index, payment in enumerate(payments):
        amount = reader.amount(payment, index)
        gst_collected += reader.amount(payment, index, field='gst_amount')
        status = reader.choice(payment, index, 'payment_status', PaymentStatus.values)
        service = reader.choice(payment, index, 'service_type', ServiceType.values)
        booked_on = reader.date(payment, index, 'booking_date')

        total_revenue += amount
        if status == PaymentStatus.PENDING:
            pending_payments += amount
        if service in service_revenue:
            service_revenue[service] += amount
        if booked_on is not None:
            bucket = buckets.get((booked_on.year, booked_on.month))
            if bucket is not None:
                bucket['revenue'] += amount

    total_expenses = ZERO

    reader = _RowReader('expense', policy)
    for index, expense in enumerate(expenses):
        amount = reader.amount(expense, index)
        spent_on = reader.date(expense, index, 'expense_date')

        total_expenses += amount
        if spent_on is not None:
            bucket = buckets.get((spent_on.year, spent_on.month))
            if bucket is not None:
                bucket['expenses'] += amount

    monthly_trend = []
    for year, month in window:
        bucket = buckets[(year, month)]
        monthly_trend.append({
            'label': calendar.month_abbr[month],
            'year': year,
            'month': month,
            'revenue': bucket['revenue'],
            'expenses': bucket['expenses'],
            'net': bucket['revenue'] - bucket['expenses'],
        })

    service_breakdown = [
        {'key': value, 'name': label, 'value': service_revenue[value]}
        for value, label in ServiceType.choices
    ]

    stats = {
        'total_clients': client_count or 0,
        'total_revenue': total_revenue,
        'pending_payments': pending_payments,
        'gst_collected': gst_collected,
        'self_drive_revenue': service_revenue[ServiceType.SELF_DRIVE.value],
        'taxi_revenue': service_revenue[ServiceType.TAXI.value],
        'tour_revenue': service_revenue[ServiceType.TOUR.value],
        'total_expenses': total_expenses,
        'net_profit': total_revenue - total_expenses,
    }

    return {
        'stats': stats,
        'service_breakdown': service_breakdown,
        'monthly_trend': monthly_trend,
    }


def export_dashboard_to_excel(dashboard, today):
    """
    Dashboard as a two-sheet workbook (Summary, Monthly)

    Decimals are written as floats for Excel.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Summary"

    stats = dashboard['stats']
    ws.append(['Metric', 'Value'])
    ws.append(['Report date', today.isoformat()])
    ws.append(['Total Clients', stats['total_clients']])
    ws.append(['Total Revenue', float(stats['total_revenue'])])
    ws.append(['Pending Payments', float(stats['pending_payments'])])
    ws.append(['GST Collected', float(stats['gst_collected'])])
    ws.append(['Total Expenses', float(stats['total_expenses'])])
    ws.append(['Net Profit', float(stats['net_profit'])])
    for entry in dashboard['service_breakdown']:
        ws.append([f"{entry['name']} Revenue", float(entry['value'])])

    ws = wb.create_sheet("Monthly")
    ws.append(['Month', 'Year', 'Revenue', 'Expenses', 'Net'])
    for entry in dashboard['monthly_trend']:
        ws.append([
            entry['label'],
            entry['year'],
            float(entry['revenue']),
            float(entry['expenses']),
            float(entry['net']),
        ])

    output = BytesIO()
    wb.save(output)
    output.seek(0)
    return output
