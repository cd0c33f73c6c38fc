import logging

from django.contrib.auth.views import (
    LoginView as DjangoLoginView,
    LogoutView as DjangoLogoutView,
)
from django.http import HttpResponseRedirect
from django.urls import reverse_lazy

from .forms import StaffLoginForm
from .session import start_session, end_session

logger = logging.getLogger(__name__)


class UserLoginView(DjangoLoginView):
    """Staff login (session expiry depends on "remember me")"""
    template_name = "accounts/login.html"
    authentication_form = StaffLoginForm
    redirect_authenticated_user = True
    next_page = reverse_lazy("dashboard:index")

    def form_valid(self, form):
        start_session(self.request, form.get_user(), form.cleaned_data.get('remember_me'))
        return HttpResponseRedirect(self.get_success_url())

    def form_invalid(self, form):
        logger.warning(f"Failed login for username={form.data.get('username', '')!r}")
        return super().form_invalid(form)


class UserLogoutView(DjangoLogoutView):
    """Staff logout"""
    next_page = reverse_lazy("accounts:login")

    def post(self, request, *args, **kwargs):
        end_session(request)
        return HttpResponseRedirect(self.get_success_url())
