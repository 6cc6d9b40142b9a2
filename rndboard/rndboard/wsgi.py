"""
WSGI config for the rndboard project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'rndboard.settings')

application = get_wsgi_application()
