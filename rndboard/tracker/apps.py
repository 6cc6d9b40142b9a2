from django.apps import AppConfig
from django.conf import settings


class TrackerConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tracker'
    verbose_name = 'R&D Tracker (Requirements • Members • Stage history)'

    backend = None

    def ready(self):
        # The backend client is owned by the process, built once here and
        # handed to services explicitly.
        from tracker.repositories.backend import TrackerBackend

        self.backend = TrackerBackend.connect(
            using=getattr(settings, 'TRACKER_DB_ALIAS', 'default')
        )
