from django import forms
from django.contrib import admin
from django.shortcuts import redirect

from src.apps.file_modify import services
from src.apps.file_modify.models import OPTION_FIELDS, FileModifyOptions
from src.common.exceptions import ValidationError


class FileModifyOptionsForm(forms.ModelForm):
    class Meta:
        model = FileModifyOptions
        fields = OPTION_FIELDS

    def clean_backup_path(self):
        try:
            return services.normalize_backup_path(self.cleaned_data.get("backup_path"))
        except ValidationError as e:
            raise forms.ValidationError(e.message)

    def clean_convert_append(self):
        try:
            return services.validate_convert_append(self.cleaned_data.get("convert_append"))
        except ValidationError as e:
            raise forms.ValidationError(e.message)


@admin.register(FileModifyOptions)
class FileModifyOptionsAdmin(admin.ModelAdmin):
    form = FileModifyOptionsForm
    readonly_fields = ("updated_at",)

    fieldsets = (
        ("Backup", {"fields": ("backup_path",)}),
        ("Conversion", {"fields": ("skip_filesize", "convert_append")}),
        ("Preprocess", {"fields": ("preprocess", "preprocess_parameters")}),
        ("Rename", {"fields": ("rename",)}),
        ("Timestamps", {"fields": ("updated_at",)}),
    )

    def changelist_view(self, request, extra_context=None):
        # Single row: go straight to its form.
        options = FileModifyOptions.load()
        return redirect("admin:file_modify_filemodifyoptions_change", options.pk)

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
