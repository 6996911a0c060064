"""Vertical page stitching.

Pages are stacked top-to-bottom, left-aligned, on an opaque white canvas
that is as wide as the widest page and as tall as all pages together.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from paperfiler.imaging.exceptions import StitchError
from paperfiler.processor.models import CompositeImage, PageImage

BACKGROUND = (255, 255, 255)


@dataclass(frozen=True)
class StitchLayout:
    width: int
    height: int
    offsets: list[int]


def compute_layout(sizes: Sequence[tuple[int, int]]) -> StitchLayout:
    """Compute canvas size and top offsets for (width, height) pairs in order."""
    if not sizes:
        raise StitchError("Cannot stitch an empty page list")
    offsets: list[int] = []
    top = 0
    for _, height in sizes:
        offsets.append(top)
        top += height
    return StitchLayout(
        width=max(width for width, _ in sizes),
        height=top,
        offsets=offsets,
    )


class ImageStitcher:
    """Composites page images into one tall JPEG using Pillow."""

    def __init__(self, jpeg_quality: int = 90) -> None:
        self._jpeg_quality = jpeg_quality

    def stitch(self, pages: Sequence[PageImage], output_path: Path) -> CompositeImage:
        """Stack pages in page-number order and write the composite.

        Raises:
            StitchError: if any page cannot be read or the result cannot be written.
        """
        ordered = sorted(pages, key=lambda p: p.index)
        try:
            images = [self._load(page.path) for page in ordered]
            layout = compute_layout([img.size for img in images])
            canvas = Image.new("RGB", (layout.width, layout.height), BACKGROUND)
            for img, top in zip(images, layout.offsets):
                canvas.paste(img, (0, top))
            output_path.parent.mkdir(parents=True, exist_ok=True)
            canvas.save(output_path, format="JPEG", quality=self._jpeg_quality)
        except StitchError:
            raise
        except (OSError, UnidentifiedImageError, ValueError) as exc:
            raise StitchError(f"Failed to stitch {output_path.name}: {exc}") from exc
        return CompositeImage(
            path=output_path,
            width=layout.width,
            height=layout.height,
            offsets=layout.offsets,
        )

    @staticmethod
    def _load(path: Path) -> Image.Image:
        with Image.open(path) as img:
            return img.convert("RGB")
