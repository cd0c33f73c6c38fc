from django.urls import path
from . import views

app_name = 'tax'

urlpatterns = [
    # GST preview (master entry)
    path('gst-preview/', views.gst_preview, name='gst_preview'),
]
