"""
braille_map command line.

Render images as Unicode braille art.

Usage:
  python -m braille_map INPUT [--out PATH | --outdir DIR] --width W --height H
      --exposure E --style [normal|contrast|edge|smooth|brightness]
      --theme [light|dark] --invert --format [text|json] --jobs J --debug

Styles:
  normal     : Floyd-Steinberg error diffusion.
  contrast   : Atkinson diffusion (partial error, punchier blacks and whites).
  edge       : Sierra Lite diffusion.
  smooth     : Jarvis-Judice-Ninke diffusion.
  brightness : no diffusion, plain threshold on perceptual brightness.

Input:
  Any Pillow-readable image, or a folder of them. Transparent areas render as white.

Output:
  A single INPUT without --out prints the art to stdout (logs go to stderr).
  Folder mode writes <stem>_braille.txt / .json next to each image or into --outdir.
"""

from __future__ import annotations

import argparse
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .constants import (
    DEFAULT_EXPOSURE,
    DEFAULT_STYLE,
    DEFAULT_THEME,
    IMAGE_SUFFIXES,
    STYLES,
    THEMES,
)
from .image_io import is_image_file, load_image_rgba
from .options import build_render_config
from .output import serialize, write_output
from .render import render
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_seconds_compact,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    log_to_stderr,
    print_banner,
    print_config_line,
    warn,
)

# CLI args


def parse_cli_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments for braille rendering.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        out: optional output file (single image only)
        outdir: optional Path for outputs
        width / height: optional character columns / rows
        exposure: 0..100, higher means brighter
        style, theme: names
        invert: bool
        format: "text" | "json"
        jobs: files rendered in parallel (folder mode)
        debug: bool for timing and size details
    """
    parser = argparse.ArgumentParser(
        prog="braille_map",
        description="Render image(s) as Unicode braille art.",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--out", type=Path, default=None, help="Output file (single image only)"
    )
    parser.add_argument(
        "--outdir", type=Path, default=None, help="Output directory (optional)"
    )
    parser.add_argument(
        "--width", type=int, default=None, help="Characters per row (default 50)"
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Rows. Omit to keep the image aspect ratio.",
    )
    parser.add_argument(
        "--exposure",
        type=float,
        default=DEFAULT_EXPOSURE,
        help="0..100, higher renders brighter.",
    )
    parser.add_argument("--style", choices=list(STYLES), default=DEFAULT_STYLE)
    parser.add_argument("--theme", choices=list(THEMES), default=DEFAULT_THEME)
    parser.add_argument("--invert", action="store_true", help="Flip every dot")
    parser.add_argument(
        "--format", choices=["text", "json"], default="text", help="Output format"
    )
    parser.add_argument(
        "--jobs", type=int, default=1, help="Files rendered in parallel"
    )
    parser.add_argument("--debug", action="store_true", help="Timing and size details")
    return parser.parse_args(argv)


# Per-file processing


@dataclass
class FileResult:
    src: Path
    rows: List[str] = field(default_factory=list)
    out_path: Optional[Path] = None
    size: str = ""
    seconds: float = 0.0
    failure: Optional[str] = None


def _output_path(src: Path, outdir: Optional[Path], fmt: str) -> Path:
    suffix = ".json" if fmt == "json" else ".txt"
    name = f"{src.stem}_braille{suffix}"
    return (outdir / name) if outdir else src.with_name(name)


def _render_file(
    src_path: Path, out_path: Optional[Path], args: argparse.Namespace
) -> FileResult:
    """
    Process a single image end-to-end:
      load -> validate options -> render -> optional save.
    Validation and decoding problems are returned as `failure`, not raised.
    """
    t_start = time.perf_counter()
    result = FileResult(src=src_path, out_path=out_path)
    try:
        source = load_image_rgba(src_path)
        config = build_render_config(
            source.bounds(),
            width=args.width,
            height=args.height,
            exposure=args.exposure,
            style=args.style,
            theme=args.theme,
            invert=args.invert,
        )
        result.rows = render(source, config)
        src_w, src_h = source.bounds()
        result.size = f"{src_w}x{src_h} -> {config.width}x{config.height}"
        if out_path is not None:
            write_output(out_path, result.rows, args.format)
    except (ValueError, OSError) as e:
        result.failure = str(e)
    result.seconds = time.perf_counter() - t_start
    return result


def _report(result: FileResult, debug: bool) -> None:
    print_banner(result.src.name)
    if result.failure is not None:
        error(f"{result.src.name}: {result.failure}")
        return
    if result.out_path is not None:
        log(f"Wrote {result.out_path.name} | {result.size}")
    if debug:
        debug_log(
            key_value_pairs_to_string(
                [("Rows", len(result.rows)), ("Time", format_seconds_compact(result.seconds))]
            )
        )
    else:
        log(f"Total time {format_total_duration_compact(result.seconds)}")


def _list_images(folder: Path) -> List[Path]:
    """
    Images in `folder`, sorted by name. Known suffixes are taken as-is (a bad
    one is reported when rendered); anything else is opened with Pillow and
    skipped with a warning when it does not decode.
    """
    files: List[Path] = []
    for p in sorted(folder.iterdir(), key=lambda p: p.name.lower()):
        if not p.is_file() or p.stem.endswith("_braille"):
            continue
        if p.suffix.lower() in IMAGE_SUFFIXES or is_image_file(p):
            files.append(p)
        else:
            warn(f"skipped {p.name} (not an image)")
    return files


# Entry point


def main(argv: Optional[List[str]] = None) -> None:
    """
    CLI entry point.

    Handles a single file or a folder. In folder mode supports --jobs
    parallelism while keeping report output in file order.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    src = args.src
    to_stdout = src.is_file() and args.out is None and args.outdir is None
    log_to_stderr(to_stdout)

    if args.debug:
        print_config_line(
            "run",
            [
                ("Width", args.width or "auto"),
                ("Height", args.height or "auto"),
                ("Exposure", args.exposure),
                ("Style", args.style),
                ("Theme", args.theme),
                ("Invert", args.invert),
                ("Format", args.format),
                ("Jobs", args.jobs),
            ],
            debug=True,
        )

    if not src.exists():
        error(f"not found: {src}")
        sys.exit(2)

    if src.is_file():
        out_path = args.out
        if out_path is None and args.outdir is not None:
            out_path = _output_path(src, args.outdir, args.format)
        if out_path is not None:
            out_path.parent.mkdir(parents=True, exist_ok=True)
        result = _render_file(src, out_path, args)
        if result.failure is not None:
            error(result.failure)
            sys.exit(2)
        if to_stdout:
            sys.stdout.write(serialize(result.rows, args.format))
            sys.stdout.flush()
            if args.debug:
                _report(result, debug=True)
        else:
            _report(result, args.debug)
        return

    if args.out is not None:
        error("--out takes a single image; use --outdir for folders")
        sys.exit(2)
    if args.outdir is not None:
        args.outdir.mkdir(parents=True, exist_ok=True)

    files = _list_images(src)
    if args.debug:
        debug_log(key_value_pairs_to_string([("Images", len(files)), ("Jobs", args.jobs)]))

    targets = [(p, _output_path(p, args.outdir, args.format)) for p in files]
    if args.jobs <= 1:
        results = []
        for p, dst in targets:
            res = _render_file(p, dst, args)
            _report(res, args.debug)
            results.append(res)
    else:
        # Each render stays single-threaded; only whole files run side by side.
        with ThreadPoolExecutor(max_workers=args.jobs) as ex:
            futures = [ex.submit(_render_file, p, dst, args) for p, dst in targets]
            results = [f.result() for f in futures]
        for res in results:
            _report(res, args.debug)

    if any(r.failure is not None for r in results):
        sys.exit(1)


if __name__ == "__main__":
    main()
