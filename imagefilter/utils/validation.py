from typing import Optional

from imagefilter.errors import ImageUrlMissing, UnsupportedImageFormat

IMAGE_EXTENSIONS = frozenset({"bmp", "gif", "jpeg", "jpg", "png", "tiff"})

def is_valid_image_url(url: str) -> bool:
    """True when the text after the last '.' is a supported image extension (any case)."""
    if "." not in url:
        return False
    ext = url.rsplit(".", 1)[1]
    return ext.lower() in IMAGE_EXTENSIONS

def parse_image_url(raw: Optional[str]) -> str:
    if not raw:
        raise ImageUrlMissing()
    if not is_valid_image_url(raw):
        raise UnsupportedImageFormat()
    return raw
