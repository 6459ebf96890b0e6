# imagefilter/utils/paths.py
import os
import uuid

def ensure_dirs(*paths: str):
    for path in paths:
        os.makedirs(path, exist_ok=True)

def artifact_path(tmp_dir: str) -> str:
    """Unique output path for one filtered image."""
    return os.path.join(os.path.abspath(tmp_dir), f"filtered.{uuid.uuid4().hex}.jpg")
