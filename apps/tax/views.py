"""
GST preview view
"""
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse

from .forms import GSTPreviewForm
from .utils import calculate_gst


@login_required
def gst_preview(request):
    """
    GST breakdown for the master entry page

    GET ?amount=1000&service_type=self_drive
    -> {"rate": "18", "gst_amount": "180", "total": "1180"}
    """
    form = GSTPreviewForm(request.GET)
    if not form.is_valid():
        return JsonResponse({'errors': form.errors}, status=400)

    result = calculate_gst(
        form.cleaned_data['amount'],
        form.cleaned_data['service_type'],
    )

    return JsonResponse({key: str(value) for key, value in result.items()})
