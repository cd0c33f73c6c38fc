from django.urls import path
from . import views

app_name = 'transactions'

urlpatterns = [
    # Client + payment
    path('master-entry/', views.master_entry, name='master_entry'),

    # Expense
    path('expenses/add/', views.expense_create, name='expense_create'),
]
