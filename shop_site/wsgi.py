"""
WSGI config for the shop_site project.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

from shop_site.logging import configure_logging

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "shop_site.settings")

configure_logging()

application = get_wsgi_application()
