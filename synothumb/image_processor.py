"""
ImageProcessor - Pillow-backed decode, resize and encode operations.
"""

import logging
import os
from typing import Optional, Tuple

from PIL import Image, ImageOps

# Sources are decoded at reduced scale, so full-size pixel counts above
# Pillow's decompression-bomb threshold are expected.
Image.MAX_IMAGE_PIXELS = None


class ImageProcessor:
    """
    Image operations used by the thumbnail generator.

    Any object with the same probe_dimensions, decode, resize and write
    methods can be substituted, which is how the tests count decodes or
    inject failures.
    """

    def __init__(
        self,
        quality: int = 85,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize image processor.

        Args:
            quality: JPEG quality for written thumbnails (default: 85)
            logger: Optional logger instance
        """
        self.quality = quality
        self.logger = logger or logging.getLogger(__name__)

    def probe_dimensions(self, path: str) -> Tuple[int, int]:
        """Read (width, height) from the image header without decoding pixels."""
        with Image.open(path) as img:
            return img.size

    def decode(self, path: str, reduction: int = 1) -> Image.Image:
        """
        Decode an image, letting the JPEG decoder scale it down.

        The pixels are rotated per the EXIF orientation tag; callers take
        orientation from probe_dimensions, which reports the stored size.

        Args:
            path: Source image path
            reduction: Decode-time scale divisor (1, 2, 4 or 8)

        Returns:
            RGB image, roughly (width / reduction, height / reduction)
        """
        img = Image.open(path)
        try:
            if reduction > 1:
                width, height = img.size
                img.draft(None, (width // reduction, height // reduction))
            img.load()
        except Exception:
            img.close()
            raise
        img = ImageOps.exif_transpose(img)
        return self._convert_color_mode(img)

    def resize(self, img: Image.Image, box: Tuple[int, int]) -> Image.Image:
        """Resize to exactly box; aspect ratio is not preserved."""
        return img.resize(box, Image.Resampling.BILINEAR)

    def write(self, img: Image.Image, output_path: str) -> None:
        """
        Encode as JPEG and replace output_path atomically.

        The image is written to a sibling .part file first, so readers
        see either the old thumbnail or the complete new one.
        """
        temp_path = f"{output_path}.part"
        try:
            img.save(temp_path, format='JPEG', quality=self.quality)
            os.replace(temp_path, output_path)
        except Exception as e:
            self.logger.debug(f"Write of {output_path} failed: {e}")
            if os.path.exists(temp_path):
                os.remove(temp_path)
            raise

    def resize_and_write(
        self,
        img: Image.Image,
        box: Tuple[int, int],
        output_path: str
    ) -> None:
        """
        Resize to box and write in one step.

        ThumbnailGenerator calls resize and write separately so a failure
        can be tagged with its stage.
        """
        self.write(self.resize(img, box), output_path)

    def _convert_color_mode(self, img: Image.Image) -> Image.Image:
        """Convert image to RGB for JPEG output."""
        if img.mode != 'RGB':
            return img.convert('RGB')
        return img
