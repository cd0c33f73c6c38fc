# tax/models.py
"""
The tax app has no models of its own.
Payment stores gst_rate, gst_amount and total_amount computed by
apps.tax.utils.calculate_gst at creation time.
"""

# No models needed
