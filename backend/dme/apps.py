from django.apps import AppConfig


class DmeConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'dme'
    verbose_name = 'DME note extraction'
