from django.contrib import admin
from src.apps.files.models import File

@admin.register(File)
class FileAdmin(admin.ModelAdmin):
    list_display = ("original_file_name", "file_name", "file_type", "file_size", "item_id", "upload_finished_at")
    list_filter = ("file_type",)
    search_fields = ("original_file_name", "file_name", "item_id")
    readonly_fields = ("file", "file_name", "file_type", "file_size", "upload_finished_at", "created_at", "updated_at")
