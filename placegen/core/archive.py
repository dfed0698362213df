"""ZIP packaging of generated images."""

import io
import logging
import zipfile
from pathlib import Path
from typing import Iterable, Union

from .errors import ArchiveError
from .models import GeneratedImage

logger = logging.getLogger(__name__)


def build_archive(items: Iterable[GeneratedImage]) -> bytes:
    """Pack every item into a single ZIP archive held in memory.

    Args:
        items: Generated images, written in iteration order

    Returns:
        Archive bytes

    Raises:
        ArchiveError: If two items share a name or the archive cannot be written
    """
    buf = io.BytesIO()
    seen = set()
    count = 0

    try:
        with zipfile.ZipFile(buf, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
            for item in items:
                if item.name in seen:
                    raise ArchiveError(f"Duplicate entry name: {item.name}")
                seen.add(item.name)

                info = zipfile.ZipInfo(item.name, date_time=item.created_at.timetuple()[:6])
                info.compress_type = zipfile.ZIP_DEFLATED
                zf.writestr(info, item.data)
                count += 1
    except (zipfile.LargeZipFile, OSError, ValueError) as e:
        raise ArchiveError(f"Failed to build archive: {e}")

    data = buf.getvalue()
    logger.info(f"Built archive with {count} entries ({len(data)} bytes)")
    return data


def write_archive(items: Iterable[GeneratedImage], path: Union[str, Path]) -> Path:
    """Build the archive and save it to ``path``."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = build_archive(items)
    with open(path, 'wb') as f:
        f.write(data)

    logger.info(f"Archive saved to: {path}")
    return path
