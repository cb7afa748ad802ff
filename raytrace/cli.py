"""Command-line front end: read a scene, render it, time it and save a BMP."""

from __future__ import annotations

import os
import re
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from .imageio import write_bmp
from .render import render
from .scene import SceneError, load_scene
from .vectors import MAX_HEIGHT, MAX_WIDTH

DEFAULT_INPUT = "../Scenes/cornell.txt"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Timer:
    """Wall-clock timer that starts on creation and can be used as a context manager."""

    def __init__(self) -> None:
        self._started = 0.0
        self._elapsed = 0.0
        self.start()

    def start(self) -> None:
        """Record the start time."""
        self._started = time.perf_counter()
        self._elapsed = 0.0

    def stop(self) -> None:
        """Record the time taken since the last start."""
        self._elapsed = time.perf_counter() - self._started

    @property
    def seconds(self) -> float:
        return self._elapsed

    @property
    def milliseconds(self) -> int:
        return int(self._elapsed * 1000)

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()


@dataclass
class _Options:
    width: int = 500
    height: int = 300
    samples: int = 1
    runs: int = 1
    threads: int = 1
    colourise: bool = False
    block_size: int = -1
    input_path: str = DEFAULT_INPUT
    output_path: str | None = None
    unknown: list[str] = field(default_factory=list)


def _to_int(text: str) -> int:
    """Leading integer of the text, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def parse_args(argv: Sequence[str]) -> _Options:
    """Read the command-line options (without the program name).

    Unrecognised arguments are collected in ``unknown``; a flag missing its
    value raises ValueError.
    """
    options = _Options()
    args = iter(argv)

    def value(flag: str) -> str:
        try:
            return next(args)
        except StopIteration:
            raise ValueError(f"missing value for {flag}") from None

    for arg in args:
        if arg == "-size":
            options.width = _to_int(value(arg))
            options.height = _to_int(value(arg))
        elif arg == "-samples":
            options.samples = _to_int(value(arg))
        elif arg == "-input":
            options.input_path = value(arg)
        elif arg == "-output":
            options.output_path = value(arg)
        elif arg == "-runs":
            options.runs = _to_int(value(arg))
        elif arg == "-threads":
            options.threads = _to_int(value(arg))
        elif arg == "-colourise":
            options.colourise = True
        elif arg == "-blockSize":
            options.block_size = _to_int(value(arg))
        else:
            options.unknown.append(arg)
    return options


def default_output_name(input_path: str, width: int, height: int, samples: int,
                        program: str) -> str:
    """Output file name built from the scene name, image size and program name."""
    scene_name = input_path.rpartition("/")[2]
    program_name = program.rpartition("\\")[2]
    return f"../Outputs/{scene_name}_{width}x{height}x{samples}_{program_name}.bmp"


def _validate(options: _Options) -> str | None:
    if options.width <= 0 or options.height <= 0:
        return "image size must be positive"
    if options.width * options.height > MAX_WIDTH * MAX_HEIGHT:
        return f"image larger than {MAX_WIDTH}x{MAX_HEIGHT}"
    if options.samples < 1:
        return "samples must be at least 1"
    if options.runs < 1:
        return "runs must be at least 1"
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Render a scene file to a BMP image, reporting the average render time."""
    if argv is None:
        argv = sys.argv[1:]
    program = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "raytrace"

    try:
        options = parse_args(argv)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2
    for arg in options.unknown:
        print(f"unknown argument: {arg}", file=sys.stderr)

    problem = _validate(options)
    if problem is not None:
        print(problem, file=sys.stderr)
        return 2

    output_path = options.output_path or default_output_name(
        options.input_path, options.width, options.height, options.samples, program
    )

    try:
        scene = load_scene(options.input_path)
    except SceneError as exc:
        print(exc, file=sys.stderr)
        print("Failure when reading the Scene file.", file=sys.stderr)
        return 1

    total_ms = 0
    pixels: list[int] = []
    for _ in range(options.runs):
        with Timer() as timer:
            pixels = render(scene, options.width, options.height, options.samples)
        total_ms += timer.milliseconds

    print(f"average time taken ({options.runs} run(s)): {total_ms // options.runs}ms")

    try:
        write_bmp(output_path, pixels, options.width, options.height, options.width)
    except OSError as exc:
        print(f"cannot write {output_path}: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())