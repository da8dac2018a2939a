from django.apps import AppConfig


class DjangoTripsConfig(AppConfig):
    name = "django_trips"
    verbose_name = "Trips"
    default_auto_field = "django.db.models.BigAutoField"
