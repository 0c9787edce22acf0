"""
Upload hook registration.

Runs the File Modify steps on every new files.File, after its content is
in storage and before the row is inserted.
"""

from django.db.models.signals import pre_save
from django.dispatch import receiver

from src.apps.file_modify import services
from src.apps.files.models import File


@receiver(pre_save, sender=File, dispatch_uid="file_modify_before_save_file")
def before_save_file(sender, instance: File, raw: bool = False, **kwargs):
    if raw:
        # Fixture loading.
        return
    services.before_save_file(file=instance, insert=instance._state.adding)
