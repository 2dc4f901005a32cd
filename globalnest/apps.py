from django.apps import AppConfig


class GlobalNestConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "globalnest"
    verbose_name = "GlobalNest"

    def ready(self) -> None:
        from . import signals  # noqa: F401
