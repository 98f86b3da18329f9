# catalog_admin/utils/images.py
import io
import os
import re
import time
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from PIL import Image, UnidentifiedImageError


@dataclass
class ImageUpload:
    """An uploaded file already read into memory (filename / declared MIME type / bytes)."""
    filename: str
    content_type: Optional[str]
    data: bytes

    @property
    def is_image(self) -> bool:
        return bool(self.content_type) and self.content_type.lower().startswith("image/")


def _ensure_dir(path: Path):
    path.mkdir(parents=True, exist_ok=True)

def _safe_ext(filename: str) -> str:
    _, ext = os.path.splitext(filename or "")
    return ext.lower()

def _detect_ext(data: bytes) -> str:
    # only used when the client sent a name without an extension
    try:
        im = Image.open(io.BytesIO(data))
    except (UnidentifiedImageError, OSError):
        return ""
    if not im.format:
        return ""
    fmt = im.format.lower()
    return ".jpg" if fmt == "jpeg" else f".{fmt}"

def slugify(name: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", (name or "").lower()).strip("-")
    return slug or "product"

def make_stored_filename(product_name: str, upload: ImageUpload) -> str:
    """
    <slug>-<epoch millis>-<random hex><ext>. The random suffix keeps two products
    with the same name created in the same millisecond apart.
    """
    ext = _safe_ext(upload.filename) or _detect_ext(upload.data)
    token = f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"
    return f"{slugify(product_name)}-{token}{ext}"

def save_image(upload: ImageUpload, filename: str, base_dir: str) -> Path:
    """Write the upload under base_dir/filename, creating base_dir if needed."""
    upload_dir = Path(base_dir)
    _ensure_dir(upload_dir)
    path = upload_dir / filename
    with open(path, "wb") as f:
        f.write(upload.data)
    return path

def delete_image(base_dir: str, filename: str) -> bool:
    path = Path(base_dir) / filename
    if not path.exists():
        return False
    path.unlink()
    return True
