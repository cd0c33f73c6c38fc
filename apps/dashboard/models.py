"""
The dashboard app has no models of its own.
It aggregates Client, Payment and Expense rows fetched through
apps.core.store.DataStore.

Main features:
- Totals: revenue, pending payments, GST collected, expenses, net profit
- Revenue per service type
- Trailing monthly revenue vs expenses

All numbers are computed in apps.dashboard.utils on every request.
"""

# No models needed
