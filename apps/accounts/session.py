"""
Login session lifetime

The session lives on request.session (Django's session framework), so
every view gets it from the request it is handling.

    remember_me=False -> 24 hours
    remember_me=True  -> 30 days
"""
import logging
from datetime import timedelta

from django.contrib.auth import login, logout

logger = logging.getLogger(__name__)

SESSION_MAX_AGE = int(timedelta(hours=24).total_seconds())
REMEMBER_ME_MAX_AGE = int(timedelta(days=30).total_seconds())


def session_max_age(remember_me):
    return REMEMBER_ME_MAX_AGE if remember_me else SESSION_MAX_AGE


def start_session(request, user, remember_me=False):
    """Log the user in and set the session expiry"""
    login(request, user)
    request.session['remember_me'] = bool(remember_me)
    request.session.set_expiry(session_max_age(remember_me))
    logger.info(f"Login: {user.username} (remember_me={bool(remember_me)})")


def end_session(request):
    """Log out and drop the session data"""
    username = request.user.get_username() if request.user.is_authenticated else None
    logout(request)
    if username:
        logger.info(f"Logout: {username}")
