"""Lossy compression of RGB images through their YCbCr planes."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from simlab.bmp import BmpFormatError, read_bmp, write_bmp
from simlab.color import RGB, image_to_planes, planes_to_image
from simlab.fourier import box_lowpass, smooth_lowpass
from simlab.wavelet import CompressionStats, wavelet_compress


def compress_fourier(pixels: Sequence[Sequence[RGB]], cutoff: float = 100) -> list[list[RGB]]:
    """Smooth low-pass each plane; chroma keeps half the luma cutoff."""
    y, cb, cr = image_to_planes(pixels)
    chroma_cutoff = cutoff // 2
    return planes_to_image(
        smooth_lowpass(y, cutoff),
        smooth_lowpass(cb, chroma_cutoff),
        smooth_lowpass(cr, chroma_cutoff),
    )


def compress_fourier_naive(pixels: Sequence[Sequence[RGB]], rate: int) -> list[list[RGB]]:
    """Box low-pass each plane; chroma keeps a quarter of the luma cutoff."""
    y, cb, cr = image_to_planes(pixels)
    chroma_rate = int(rate / 4)
    return planes_to_image(
        box_lowpass(y, rate),
        box_lowpass(cb, chroma_rate),
        box_lowpass(cr, chroma_rate),
    )


def compress_wavelet(
    pixels: Sequence[Sequence[RGB]], levels: int = 3, threshold: float = 0.5
) -> tuple[list[list[RGB]], tuple[CompressionStats, CompressionStats, CompressionStats]]:
    """Haar-threshold each plane; returns the image and the statistics per plane."""
    planes = image_to_planes(pixels)
    results = [wavelet_compress(plane, levels, threshold) for plane in planes]
    image = planes_to_image(*(plane for plane, _ in results))
    stats = tuple(stat for _, stat in results)
    return image, stats  # type: ignore[return-value]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compress", description="Compress a 24-bit BMP image and write the result."
    )
    parser.add_argument("input", help="BMP file to read")
    parser.add_argument("rate", type=int, help="compression rate")
    parser.add_argument("output", nargs="?", help="BMP file to write")
    parser.add_argument(
        "-m",
        "--method",
        choices=("wavelet", "fourier", "naive"),
        default="wavelet",
        help="compression method (default: wavelet)",
    )
    parser.add_argument("-l", "--levels", type=int, default=3, help="wavelet levels")
    return parser


def main(argv=None) -> int:
    """Compress the named BMP image and write it beside the original."""
    args_list = sys.argv[1:] if argv is None else list(argv)
    try:
        args = _parser().parse_args(args_list)
    except SystemExit as exit_:
        return 1 if exit_.code else 0

    try:
        pixels = read_bmp(args.input)
    except (OSError, BmpFormatError) as error:
        print(f"Error: {error}", file=sys.stderr)
        print(f"Error: Failed to read BMP file {args.input}", file=sys.stderr)
        return 1

    if args.method == "wavelet":
        try:
            image, stats = compress_wavelet(pixels, args.levels, args.rate / 100.0)
        except ValueError as error:
            print(f"Error: {error}", file=sys.stderr)
            return 1
        for stat in stats:
            print(stat)
    elif args.method == "fourier":
        image = compress_fourier(pixels, args.rate)
    else:
        image = compress_fourier_naive(pixels, args.rate)

    output = args.output
    if output is None:
        source = Path(args.input)
        output = source.with_name(f"{source.stem}_compressed.bmp")
    write_bmp(output, image)
    return 0


if __name__ == "__main__":
    sys.exit(main())