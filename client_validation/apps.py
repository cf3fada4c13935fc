from django.apps import AppConfig


class ClientValidationConfig(AppConfig):
    name = "client_validation"
    verbose_name = "Client Validation"

    def ready(self):
        from . import checks  # noqa
        from .view_models import autodiscover_view_models

        autodiscover_view_models()
