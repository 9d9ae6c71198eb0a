"""Total variation of a grayscale image read from a BMP file."""

from __future__ import annotations

import sys

import numpy as np

from simlab.bmp import BmpFormatError, read_bmp_grayscale


def rgb_to_gray(r: float, g: float, b: float) -> float:
    """Luminosity of an RGB colour."""
    return 0.299 * r + 0.587 * g + 0.114 * b


def total_variation(image, h: float = 1.0) -> float:
    """Sum of the L2 norms of forward differences, scaled by image size.

    Differences along x are divided by the width and along y by the height;
    the last row and column contribute no terms. ``h`` is accepted as the
    finite-difference step but does not change the result.
    """
    data = np.asarray(image, dtype=float)
    if data.ndim != 2:
        raise ValueError("image must be two-dimensional")
    height, width = data.shape
    if height < 2 or width < 2:
        return 0.0
    base = data[:-1, :-1]
    dx = (data[:-1, 1:] - base) / width
    dy = (data[1:, :-1] - base) / height
    return float(np.sqrt(dx * dx + dy * dy).sum())


def main(argv=None) -> int:
    """Print the total variation of the BMP image named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: total_variation <image.bmp>", file=sys.stderr)
        return 1
    try:
        image = read_bmp_grayscale(args[0])
    except OSError:
        print("Error opening file", file=sys.stderr)
        return 1
    except BmpFormatError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"Total Variation: {total_variation(image, 1.0):f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())