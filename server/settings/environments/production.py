"""Overrides for production deployments."""

from server.settings.components import config

DEBUG = False

# No fallback in production
SECRET_KEY = config('DJANGO_SECRET_KEY')

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
