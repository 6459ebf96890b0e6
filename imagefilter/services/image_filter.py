import asyncio
import io
import os
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

import cv2
import numpy as np
import requests
from PIL import Image

from imagefilter.config import Settings
from imagefilter.errors import ImageFilterError
from imagefilter.utils.paths import artifact_path, ensure_dirs


def download_image(url: str, timeout: float, max_bytes: int) -> bytes:
    """Fetch url into memory. timeout bounds the connect, each read and the whole transfer."""
    deadline = time.monotonic() + timeout
    r = requests.get(url, timeout=timeout, stream=True)
    try:
        r.raise_for_status()
        buf = io.BytesIO()
        for chunk in r.iter_content(chunk_size=64 * 1024):
            if time.monotonic() > deadline:
                raise ImageFilterError(f"download took longer than {timeout} seconds")
            buf.write(chunk)
            if buf.tell() > max_bytes:
                raise ImageFilterError(f"image is larger than {max_bytes} bytes")
        return buf.getvalue()
    finally:
        r.close()


def apply_filter(raw: bytes, out_path: str, size: int = 256, quality: int = 60) -> str:
    """Resize to size x size, convert to greyscale and save as JPEG."""
    try:
        image = Image.open(io.BytesIO(raw)).convert("RGB")
    except Exception as e:
        raise ImageFilterError(f"cannot decode image: {e}") from e

    cv_image = cv2.cvtColor(np.array(image), cv2.COLOR_RGB2BGR)
    resized = cv2.resize(cv_image, (size, size), interpolation=cv2.INTER_AREA)
    grey = cv2.cvtColor(resized, cv2.COLOR_BGR2GRAY)

    Image.fromarray(grey).save(out_path, format="JPEG", quality=quality)
    return out_path


def filter_image_from_url(url: str, tmp_dir: str, timeout: float = 20.0,
                          max_bytes: int = 20 * 1024 * 1024, size: int = 256, quality: int = 60) -> str:
    """Download the image at url, filter it and return the local path of the result."""
    raw = download_image(url, timeout, max_bytes)
    ensure_dirs(tmp_dir)
    out_path = artifact_path(tmp_dir)
    try:
        return apply_filter(raw, out_path, size=size, quality=quality)
    except Exception:
        delete_local_files([out_path])
        raise


def delete_local_files(paths: Iterable[str]) -> None:
    for path in paths:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            print(f"[cleanup] Failed to delete {path}: {e}")


class FilterService:
    """Runs the blocking download/filter work on a bounded thread pool."""
    def __init__(self, settings: Settings):
        self.settings = settings
        workers = max(1, settings.FILTER_MAX_CONCURRENCY)
        self.executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="filter")
        self.semaphore = asyncio.Semaphore(workers)

    def _filter_sync(self, url: str) -> str:
        s = self.settings
        return filter_image_from_url(
            url,
            s.TMP_DIR,
            timeout=s.FETCH_TIMEOUT,
            max_bytes=s.MAX_DOWNLOAD_BYTES,
            size=s.FILTER_SIZE,
            quality=s.FILTER_QUALITY,
        )

    async def filter(self, url: str) -> str:
        async with self.semaphore:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(self.executor, self._filter_sync, url)

    async def cleanup(self, *paths: str) -> None:
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, delete_local_files, paths)

    def shutdown(self):
        self.executor.shutdown(wait=False)
