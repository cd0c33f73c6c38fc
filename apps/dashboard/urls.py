from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    path('', views.index, name='index'),
    path('dashboard/data/', views.dashboard_data, name='data'),
    path('dashboard/export/', views.dashboard_export, name='export'),
]
