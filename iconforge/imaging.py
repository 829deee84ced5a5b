"""Load the reference image, resize it and write the icon set."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from PIL import Image

from iconforge.errors import DirectoryError, FormatError, LoadError, WriteError
from iconforge.platforms import icon_filename

MIN_REFERENCE_SIZE = 1024


@dataclass(frozen=True)
class IconResult:
    size: int
    path: Path
    error: WriteError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def load_reference(source: Path) -> Image.Image:
    """Decode ``source`` and check it is square and at least 1024x1024.

    Raises LoadError when the file cannot be read or decoded, and FormatError
    when it is too small or not square, in that order.
    """
    try:
        with Image.open(source) as image:
            image.load()
    except FileNotFoundError as exc:
        raise LoadError(f"Reference icon not found: {source}") from exc
    except (OSError, Image.DecompressionBombError) as exc:
        raise LoadError(f"Unable to load the reference icon {source}: {exc}") from exc

    width, height = image.size
    if width < MIN_REFERENCE_SIZE or height < MIN_REFERENCE_SIZE:
        raise FormatError(
            f"The reference icon must be at least {MIN_REFERENCE_SIZE}x{MIN_REFERENCE_SIZE} pixels "
            f"(got {width}x{height})."
        )
    if width != height:
        raise FormatError(
            f"The reference icon must be square (got {width}x{height})."
        )
    if image.mode not in ("RGB", "RGBA"):
        image = image.convert("RGBA")
    return image


def resize_icon(image: Image.Image, size: int) -> Image.Image:
    if size < 1:
        raise ValueError(f"Icon size must be positive, got {size}")
    return image.resize((size, size), Image.Resampling.LANCZOS)


def encode_png(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def ensure_directory(out_dir: Path) -> Path:
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryError(f"Unable to create output directory {out_dir}: {exc}") from exc
    return out_dir


def write_icons(image: Image.Image, name: str, sizes: tuple[int, ...], root: Path) -> Iterator[IconResult]:
    """Write one PNG per size into ``root/name``, yielding a result as each file lands.

    A size whose file cannot be written is yielded with its WriteError and
    the remaining sizes are still processed. Existing files are overwritten.
    The directory is created on the first iteration.
    """
    out_dir = ensure_directory(root / name)

    for size in sizes:
        out_path = out_dir / icon_filename(name, size)
        data = encode_png(resize_icon(image, size))
        try:
            out_path.write_bytes(data)
        except OSError as exc:
            error = WriteError(f"Unable to save resized icon at {out_path}: {exc}")
            yield IconResult(size, out_path, error)
            continue
        yield IconResult(size, out_path)
