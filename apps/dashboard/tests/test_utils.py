"""
Dashboard aggregation tests

- build_dashboard() totals, per-service revenue, monthly series
- AmountPolicy lenient / strict
- month_window() anchoring
"""
import pytest
from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal

from django.core.exceptions import ImproperlyConfigured, ValidationError

from apps.dashboard.utils import (
    AmountPolicy,
    build_dashboard,
    export_dashboard_to_excel,
    month_window,
    to_date,
    to_decimal,
)


TODAY = date(2024, 5, 20)


def _payment(amount, service_type='tour', status='completed', booking_date='2024-03-15', gst_amount=None):
    return {
        'amount': amount,
        'gst_amount': gst_amount if gst_amount is not None else Decimal('0'),
        'service_type': service_type,
        'payment_status': status,
        'booking_date': booking_date,
    }


def _expense(amount, expense_date='2024-03-01'):
    return {'amount': amount, 'expense_date': expense_date}


class TestMonthWindow:

    def test_six_months_oldest_first(self):
        assert month_window(TODAY) == [
            (2023, 12), (2024, 1), (2024, 2), (2024, 3), (2024, 4), (2024, 5),
        ]

    def test_crosses_year_boundary(self):
        assert month_window(date(2024, 2, 10), 3) == [(2023, 12), (2024, 1), (2024, 2)]

    def test_single_month(self):
        assert month_window(date(2024, 1, 31), 1) == [(2024, 1)]

    def test_months_must_be_positive(self):
        with pytest.raises(ValueError):
            month_window(TODAY, 0)


class TestConversions:

    @pytest.mark.parametrize("value,expected", [
        (Decimal('10.50'), Decimal('10.50')),
        (100, Decimal('100')),
        (0.1, Decimal('0.1')),
        (' 42 ', Decimal('42')),
        ('abc', None),
        ('', None),
        (None, None),
        (True, None),
        ('NaN', None),
        ('Infinity', None),
        ('1e1000000', None),
        ('9E+999990', None),
    ])
    def test_to_decimal(self, value, expected):
        assert to_decimal(value) == expected

    @pytest.mark.parametrize("value,expected", [
        (date(2024, 3, 15), date(2024, 3, 15)),
        ('2024-03-15', date(2024, 3, 15)),
        ('2024-03-15T10:30:00', date(2024, 3, 15)),
        ('2024-02-30', None),
        ('not a date', None),
        (None, None),
    ])
    def test_to_date(self, value, expected):
        assert to_date(value) == expected

    def test_aware_datetime_uses_local_date(self, settings):
        """18:30 UTC is already the next day in Asia/Kolkata"""
        settings.TIME_ZONE = 'Asia/Kolkata'
        value = datetime(2024, 3, 31, 18, 30, tzinfo=dt_timezone.utc)
        assert to_date(value) == date(2024, 4, 1)


class TestBuildDashboard:

    def test_single_payment_and_expense(self):
        dashboard = build_dashboard(
            [_payment(100, service_type='tour', status='pending', booking_date='2024-03-15')],
            [_expense(40, '2024-03-01')],
            today=TODAY,
        )
        stats = dashboard['stats']

        assert stats['total_revenue'] == Decimal('100')
        assert stats['total_expenses'] == Decimal('40')
        assert stats['pending_payments'] == Decimal('100')
        assert stats['tour_revenue'] == Decimal('100')
        assert stats['net_profit'] == Decimal('60')

        march = next(entry for entry in dashboard['monthly_trend'] if (entry['year'], entry['month']) == (2024, 3))
        assert march['label'] == 'Mar'
        assert march['revenue'] == Decimal('100')
        assert march['expenses'] == Decimal('40')
        assert march['net'] == Decimal('60')

    def test_empty(self):
        dashboard = build_dashboard([], [], today=TODAY)
        stats = dashboard['stats']

        assert stats['total_clients'] == 0
        assert all(value == 0 for value in stats.values())
        assert len(dashboard['monthly_trend']) == 6
        for entry in dashboard['monthly_trend']:
            assert entry['revenue'] == entry['expenses'] == entry['net'] == Decimal('0')
        assert [entry['value'] for entry in dashboard['service_breakdown']] == [Decimal('0')] * 3

    def test_client_count_passed_through(self):
        assert build_dashboard([], [], 7, today=TODAY)['stats']['total_clients'] == 7

    def test_service_revenue_sums_to_total(self):
        payments = [
            _payment(Decimal('1000'), 'self_drive'),
            _payment(Decimal('2000'), 'taxi'),
            _payment(Decimal('500.50'), 'tour'),
            _payment(Decimal('250'), 'taxi'),
        ]
        stats = build_dashboard(payments, [], today=TODAY)['stats']

        assert stats['self_drive_revenue'] == Decimal('1000')
        assert stats['taxi_revenue'] == Decimal('2250')
        assert stats['tour_revenue'] == Decimal('500.50')
        assert (
            stats['self_drive_revenue'] + stats['taxi_revenue'] + stats['tour_revenue']
            == stats['total_revenue']
        )

    def test_pending_only_counts_pending(self):
        payments = [
            _payment(100, status='pending'),
            _payment(200, status='advance'),
            _payment(300, status='completed'),
        ]
        assert build_dashboard(payments, [], today=TODAY)['stats']['pending_payments'] == Decimal('100')

    def test_gst_collected(self):
        payments = [
            _payment(Decimal('1000'), 'self_drive', gst_amount=Decimal('180')),
            _payment(Decimal('2000'), 'taxi', gst_amount=Decimal('100')),
        ]
        stats = build_dashboard(payments, [], today=TODAY)['stats']

        assert stats['gst_collected'] == Decimal('280')
        # revenue excludes GST
        assert stats['total_revenue'] == Decimal('3000')

    def test_monthly_series_shape(self):
        trend = build_dashboard([], [], today=TODAY)['monthly_trend']

        assert [entry['label'] for entry in trend] == ['Dec', 'Jan', 'Feb', 'Mar', 'Apr', 'May']
        assert [entry['year'] for entry in trend] == [2023, 2024, 2024, 2024, 2024, 2024]

    def test_months_setting(self):
        trend = build_dashboard([], [], today=TODAY, months=12)['monthly_trend']
        assert len(trend) == 12
        assert (trend[0]['year'], trend[0]['month']) == (2023, 6)

    def test_rows_outside_window_count_in_totals_only(self):
        payments = [_payment(100, booking_date='2023-01-10'), _payment(50, booking_date='2024-05-01')]
        expenses = [_expense(30, '2022-12-31')]
        dashboard = build_dashboard(payments, expenses, today=TODAY)

        assert dashboard['stats']['total_revenue'] == Decimal('150')
        assert dashboard['stats']['total_expenses'] == Decimal('30')
        assert sum(entry['revenue'] for entry in dashboard['monthly_trend']) == Decimal('50')
        assert sum(entry['expenses'] for entry in dashboard['monthly_trend']) == Decimal('0')

    def test_future_rows_outside_window(self):
        dashboard = build_dashboard([_payment(100, booking_date='2024-06-01')], [], today=TODAY)
        assert sum(entry['revenue'] for entry in dashboard['monthly_trend']) == Decimal('0')

    def test_idempotent(self):
        payments = [_payment(100, 'taxi', 'pending'), _payment(Decimal('12.34'), 'self_drive')]
        expenses = [_expense(40)]

        first = build_dashboard(payments, expenses, 3, today=TODAY)
        second = build_dashboard(payments, expenses, 3, today=TODAY)
        assert first == second

    def test_accepts_model_like_rows(self):
        class Row:
            amount = Decimal('75')
            gst_amount = Decimal('3.75')
            service_type = 'taxi'
            payment_status = 'pending'
            booking_date = date(2024, 5, 2)

        stats = build_dashboard([Row()], [], today=TODAY)['stats']
        assert stats['taxi_revenue'] == Decimal('75')
        assert stats['gst_collected'] == Decimal('3.75')

    def test_float_amounts_stay_exact(self):
        payments = [_payment(0.1), _payment(0.2)]
        assert build_dashboard(payments, [], today=TODAY)['stats']['total_revenue'] == Decimal('0.3')


class TestLenientPolicy:

    def test_bad_amounts_count_as_zero(self):
        payments = [_payment('abc'), _payment(None), _payment(100)]
        expenses = [_expense(''), _expense(40)]
        stats = build_dashboard(payments, expenses, today=TODAY)['stats']

        assert stats['total_revenue'] == Decimal('100')
        assert stats['total_expenses'] == Decimal('40')

    def test_bad_date_skips_monthly_series_only(self):
        dashboard = build_dashboard([_payment(100, booking_date='garbage')], [], today=TODAY)

        assert dashboard['stats']['total_revenue'] == Decimal('100')
        assert sum(entry['revenue'] for entry in dashboard['monthly_trend']) == Decimal('0')

    def test_unknown_service_type_counts_in_total_only(self):
        stats = build_dashboard([_payment(100, service_type='bus')], [], today=TODAY)['stats']

        assert stats['total_revenue'] == Decimal('100')
        assert stats['self_drive_revenue'] + stats['taxi_revenue'] + stats['tour_revenue'] == Decimal('0')

    @pytest.mark.parametrize("service_type", [['tour'], {'key': 'tour'}, 7])
    def test_non_string_service_type(self, service_type):
        stats = build_dashboard([_payment(100, service_type=service_type)], [], today=TODAY)['stats']

        assert stats['total_revenue'] == Decimal('100')
        assert stats['tour_revenue'] == Decimal('0')

    @pytest.mark.parametrize("status", [['pending'], {'status': 'pending'}, None])
    def test_non_string_payment_status(self, status):
        stats = build_dashboard([_payment(100, status=status)], [], today=TODAY)['stats']

        assert stats['total_revenue'] == Decimal('100')
        assert stats['pending_payments'] == Decimal('0')

    def test_out_of_range_amount_counts_as_zero(self):
        payments = [_payment('1e1000000'), _payment(100, gst_amount='-9e999999')]
        expenses = [_expense('9E+999990'), _expense(40)]
        stats = build_dashboard(payments, expenses, today=TODAY)['stats']

        assert stats['total_revenue'] == Decimal('100')
        assert stats['gst_collected'] == Decimal('0')
        assert stats['total_expenses'] == Decimal('40')


class TestStrictPolicy:

    @pytest.mark.parametrize("row,field", [
        (_payment('abc'), 'amount'),
        (_payment(100, booking_date='garbage'), 'booking_date'),
        (_payment(100, service_type='bus'), 'service_type'),
        (_payment(100, status='refunded'), 'payment_status'),
    ])
    def test_bad_payment_row_raises(self, row, field):
        with pytest.raises(ValidationError) as exc_info:
            build_dashboard([_payment(10), row], [], today=TODAY, policy=AmountPolicy.STRICT)

        assert field in exc_info.value.message_dict
        assert 'payment row 1' in exc_info.value.message_dict[field][0]

    def test_bad_expense_row_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            build_dashboard([], [_expense(None)], today=TODAY, policy=AmountPolicy.STRICT)

        assert 'expense row 0' in exc_info.value.message_dict['amount'][0]

    def test_out_of_range_amount_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            build_dashboard([_payment('1e1000000')], [], today=TODAY, policy=AmountPolicy.STRICT)

        assert 'payment row 0' in exc_info.value.message_dict['amount'][0]

    def test_unhashable_service_type_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            build_dashboard([_payment(100, service_type=['tour'])], [], today=TODAY, policy=AmountPolicy.STRICT)

        assert 'service_type' in exc_info.value.message_dict

    def test_clean_rows_pass(self):
        dashboard = build_dashboard(
            [_payment(100, status='pending')], [_expense(40)], today=TODAY, policy=AmountPolicy.STRICT,
        )
        assert dashboard['stats']['net_profit'] == Decimal('60')


class TestExportDashboardToExcel:

    def test_workbook(self):
        import openpyxl

        dashboard = build_dashboard(
            [_payment(100, status='pending')], [_expense(40)], 2, today=TODAY,
        )
        wb = openpyxl.load_workbook(export_dashboard_to_excel(dashboard, TODAY))

        assert wb.sheetnames == ['Summary', 'Monthly']

        summary = {row[0]: row[1] for row in wb['Summary'].iter_rows(min_row=2, values_only=True)}
        assert summary['Report date'] == '2024-05-20'
        assert summary['Total Clients'] == 2
        assert summary['Total Revenue'] == 100
        assert summary['Net Profit'] == 60
        assert summary['Tour Package Revenue'] == 100

        monthly = list(wb['Monthly'].iter_rows(min_row=2, values_only=True))
        assert len(monthly) == 6
        assert monthly[3] == ('Mar', 2024, 100, 40, 60)


class TestAmountPolicyFromSetting:

    @pytest.mark.parametrize("value,expected", [
        ('lenient', AmountPolicy.LENIENT),
        ('strict', AmountPolicy.STRICT),
        ('STRICT', AmountPolicy.STRICT),
        (' Strict \n', AmountPolicy.STRICT),
    ])
    def test_normalised(self, value, expected):
        assert AmountPolicy.from_setting(value) is expected

    @pytest.mark.parametrize("value", ['', 'strictest', None])
    def test_unknown_value(self, value):
        with pytest.raises(ImproperlyConfigured):
            AmountPolicy.from_setting(value)
