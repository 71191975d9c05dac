# renderer/ppm.py
from typing import Callable, Iterable, Optional, TextIO

import numpy as np

from renderer.quantize import quantize

MAX_COLOR = 255

# A color function receives (column, row) and returns an (r, g, b) triple
# with channels in [0, 1], e.g. a Vector3.
ColorFn = Callable[[int, int], Iterable[float]]
ProgressFn = Callable[[], None]


class PPMImage:
    """
    Writes images in the plain (ASCII) PPM format:

        P3
        <width> <height>
        <max_color>

        <r> <g> <b>
        ...

    The image does not know where colors come from. It asks a color function
    for every pixel, row by row from the top, and serializes the result once
    all pixels are done.
    """
    def __init__(self, width: int, height: int, max_color: int = MAX_COLOR):
        if width < 1 or height < 1:
            raise ValueError(f"Image dimensions must be at least 1x1, got {width}x{height}")
        if not 1 <= max_color <= 65535:
            raise ValueError(f"max_color must be in [1, 65535], got {max_color}")
        self.width = int(width)
        self.height = int(height)
        self.max_color = int(max_color)

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def header(self) -> str:
        return f"P3\n{self.width} {self.height}\n{self.max_color}\n"

    def render_fn(self, f: ColorFn, progress: Optional[ProgressFn] = None) -> np.ndarray:
        """
        Evaluates f once per pixel in row-major order and returns the float
        framebuffer of shape (height, width, 3). progress, if given, is called
        after each pixel.
        """
        framebuffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        for y in range(self.height):
            for x in range(self.width):
                framebuffer[y, x] = tuple(f(x, y))
                if progress is not None:
                    progress()
        return framebuffer

    def encode(self, framebuffer: np.ndarray) -> str:
        """
        Serializes a float framebuffer to PPM text.
        """
        if framebuffer.shape != (self.height, self.width, 3):
            raise ValueError(
                f"Framebuffer shape {framebuffer.shape} does not match "
                f"image {self.width}x{self.height}"
            )
        channels = quantize(framebuffer, self.max_color).reshape(-1, 3).tolist()
        body = "\n".join(f"{r} {g} {b}" for r, g, b in channels)
        return f"{self.header()}\n{body}\n"

    def write(self, stream: TextIO, f: ColorFn, progress: Optional[ProgressFn] = None):
        """
        Renders every pixel, then writes the whole image to stream in a
        single call.
        """
        content = self.encode(self.render_fn(f, progress))
        stream.write(content)

    def write_fn(self, filename, f: ColorFn, progress: Optional[ProgressFn] = None):
        """
        Renders every pixel and writes the image to filename. The file is
        only opened once the content is complete; OSError from the file
        system propagates to the caller.
        """
        content = self.encode(self.render_fn(f, progress))
        with open(filename, "w", encoding="ascii", newline="\n") as fh:
            fh.write(content)
