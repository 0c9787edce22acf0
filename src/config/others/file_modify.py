"""
File Modify configuration.

Only process-level settings live here. The user-editable options
(backup path, convert arguments, ...) are stored in the database and
edited from the admin; the FILE_MODIFY_* env values only seed them.

PATH_TO_CONVERT            — directory holding ImageMagick's binaries.
FILE_MODIFY_CONVERT_TIMEOUT — seconds before an ImageMagick call is killed.
FILE_MODIFY_PREPROCESSOR   — dotted path to the preprocess callable.
FILE_MODIFY_RENAMER        — dotted path to the rename callable.
"""

from src.config.env import env

PATH_TO_CONVERT = env.PATH_TO_CONVERT

FILE_MODIFY_CONVERT_TIMEOUT = env.FILE_MODIFY_CONVERT_TIMEOUT

FILE_MODIFY_PREPROCESSOR = "src.apps.file_modify.preprocess.watermark"
FILE_MODIFY_RENAMER = "src.apps.file_modify.rename.slugify_filename"
