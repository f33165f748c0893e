from django.apps import AppConfig


class CommitmentConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.commitment'
    verbose_name = 'Commitment'

    def ready(self):
        import apps.commitment.signals
