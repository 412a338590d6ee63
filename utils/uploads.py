"""
utils/uploads.py
---------------------------------
Disk storage for uploaded files.

Files are checked against an extension allow-list, streamed to a
temporary name while their size is counted, and only renamed into
place once they are known to fit. Any failure removes the partial file.
"""

import logging
import os
import uuid

from werkzeug.utils import secure_filename

from utils.errors import ValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class StoredFile:

    def __init__(self, original_name, stored_name, disk_path, public_path, size):
        self.original_name = original_name
        self.stored_name = stored_name
        self.disk_path = disk_path
        self.public_path = public_path
        self.size = size

    def remove(self):
        remove_file(self.disk_path)


def file_extension(filename):
    return os.path.splitext(filename or "")[1].lower()


def remove_file(path):
    try:
        os.remove(path)
    except FileNotFoundError:
        pass


def save_upload(file_storage, upload_root, subfolder, field_name, allowed_extensions, max_bytes):
    """
    Persist `file_storage` under <upload_root>/<subfolder>/ and return a StoredFile.
    Raises ValidationError for a disallowed extension or an oversized file.
    """
    original_name = file_storage.filename or ""
    extension = file_extension(original_name)
    if extension not in allowed_extensions:
        logger.warning("Rejected upload %r: extension not allowed", original_name)
        allowed = ", ".join(ext.lstrip(".").upper() for ext in allowed_extensions)
        raise ValidationError(f"Invalid file type. Only {allowed} files are allowed.")

    target_dir = os.path.join(upload_root, subfolder)
    os.makedirs(target_dir, exist_ok=True)

    stored_name = secure_filename(f"{field_name}-{uuid.uuid4().hex}{extension}")
    disk_path = os.path.join(target_dir, stored_name)
    partial_path = disk_path + ".part"

    size = 0
    try:
        with open(partial_path, "wb") as out:
            while True:
                chunk = file_storage.stream.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    logger.warning("Rejected upload %r: larger than %d bytes", original_name, max_bytes)
                    raise ValidationError(
                        f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB."
                    )
                out.write(chunk)
        os.replace(partial_path, disk_path)
    except BaseException:
        remove_file(partial_path)
        raise

    public_path = f"/uploads/{subfolder}/{stored_name}"
    return StoredFile(original_name, stored_name, disk_path, public_path, size)
