from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="FileModifyOptions",
            fields=[
                ("id", models.PositiveSmallIntegerField(editable=False, primary_key=True, serialize=False)),
                ("backup_path", models.CharField(blank=True, default="", help_text="Directory where originals are copied before any change. Empty disables backups.", max_length=1024)),
                ("skip_filesize", models.PositiveBigIntegerField(default=0, help_text="Files larger than this many bytes are not converted nor preprocessed. 0 = no limit.")),
                ("convert_append", models.CharField(blank=True, default="", help_text='Arguments given to ImageMagick "convert", e.g. "-resize 1600x1600 -quality 85". Empty disables conversion.', max_length=1024)),
                ("preprocess", models.BooleanField(default=False, help_text="Run the preprocess command on each upload.")),
                ("preprocess_parameters", models.TextField(blank=True, default="", help_text='Parameters of the preprocess command. Watermark: "<image path>, <gravity>, <offset>, <dissolve %>".')),
                ("rename", models.BooleanField(default=False, help_text="Rename stored files with the rename command. Needs FILES_KEEP_ORIGINAL_NAME.")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "file_modify_options",
                "verbose_name": "File Modify options",
                "verbose_name_plural": "File Modify options",
            },
        ),
    ]
