"""
Image Thumbnailer

Writes width-bounded image variants next to an original using Pillow.
"""

import logging
from typing import Iterable, List

from PIL import Image

from ..domain.processing import Thumbnailer

logger = logging.getLogger(__name__)

THUMBNAIL_WIDTHS = (500, 250, 100)


class ImageThumbnailer(Thumbnailer):
    """Creates `<path>_<width>` variants preserving aspect ratio."""

    def __init__(self, widths: Iterable[int] = THUMBNAIL_WIDTHS):
        self.widths = tuple(widths)

    def generate(self, source_path: str) -> List[str]:
        """
        Generate one variant per configured width.

        Args:
            source_path: Concrete path of the original image

        Returns:
            Paths of the written variants

        Raises:
            OSError: If the source cannot be read or is not an image
        """
        written = []
        with Image.open(source_path) as original:
            image_format = original.format or "PNG"
            for width in self.widths:
                height = max(1, round(original.height * width / original.width))
                variant = original.resize((width, height), Image.Resampling.LANCZOS)
                target = f"{source_path}_{width}"
                variant.save(target, format=image_format)
                written.append(target)
                logger.debug(f"Wrote {width}px variant {target}")
        return written
