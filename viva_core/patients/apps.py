from django.apps import AppConfig
from django.db.backends.signals import connection_created


class PatientsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "viva_core.patients"
    label = "patients"

    def ready(self):
        from viva_core.patients.selectors import register_sqlite_functions

        connection_created.connect(register_sqlite_functions, dispatch_uid="viva_core.patients.sqlite_functions")
