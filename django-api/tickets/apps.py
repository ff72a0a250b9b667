from django.apps import AppConfig
from django.conf import settings


class TicketsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "tickets"

    def ready(self) -> None:
        if settings.DEPLOYMENT_ENVIRONMENT == "production":
            from tickets.services.factory import resolve_signing_secret

            resolve_signing_secret()
