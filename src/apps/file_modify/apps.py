from django.apps import AppConfig


class FileModifyConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.apps.file_modify'
    label = 'file_modify'
    verbose_name = "File Modify"

    def ready(self):
        # Registers the pre_save receiver on files.File.
        from src.apps.file_modify import signals  # noqa: F401
