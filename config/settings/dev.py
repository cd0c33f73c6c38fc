from .base import *

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '0.0.0.0', 'testserver']

INTERNAL_IPS = [
    '127.0.0.1',
]

# print emails to the console in development
EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'

# development logging (verbose)
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'DEBUG',
    },
    'loggers': {
        'django.db.backends': {
            'handlers': ['console'],
            'level': 'INFO',  # DEBUG to see SQL
        },
    },
}
