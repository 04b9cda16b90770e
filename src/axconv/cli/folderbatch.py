from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from axconv.cli.settings import add_settings_args
from axconv.core import TypeChangeError, get_domain
from axconv.io import ARCHIVE_EXT, IMAGE_EXTS, read_dataset, write_dataset
from axconv.typechange import STRATEGIES, change_type

INPUT_EXTS = IMAGE_EXTS + (ARCHIVE_EXT,)


def _path(p: str | Path) -> Path:
    return Path(p).expanduser().resolve()


def find_inputs(root: Path, pattern: Optional[str] = None, recursive: bool = False) -> List[Path]:
    if not root.exists():
        return []
    glob = pattern or "*"
    found = root.rglob(glob) if recursive else root.glob(glob)
    return sorted(p for p in found if p.is_file() and p.suffix.lower() in INPUT_EXTS)


def process_folder(
    input_dir: Path,
    output_dir: Path,
    to: str,
    *,
    out_format: str = "npz",
    pattern: Optional[str] = None,
    recursive: bool = False,
    strategy: str = "vectorized",
    jobs: int = 1,
    progress: bool = True,
) -> tuple[int, int]:
    """
    Convert every dataset under ``input_dir`` to ``to``.

    Files that fail are reported and skipped. Output keeps the relative
    layout of the input tree.

    Returns
    -------
    (converted, failed) : tuple of int
    """
    files = find_inputs(input_dir, pattern, recursive)
    if not files:
        print(f"[batch] No inputs found in {input_dir}")
        return 0, 0

    print(f"[batch] {len(files)} files from {input_dir} -> {to}")
    ok = failed = 0
    for src_path in tqdm(files, desc="change type", unit="file", disable=not progress):
        rel = src_path.relative_to(input_dir)
        suffix = src_path.suffix if out_format == "keep" else f".{out_format}"
        out_path = output_dir / rel.with_name(f"{rel.stem}__{to}{suffix}")
        try:
            ds = read_dataset(src_path)
            out = change_type(ds, to, strategy=strategy, jobs=jobs)
            write_dataset(out_path, out)
        except (OSError, ValueError, KeyError) as exc:
            # TypeChangeError is a ValueError
            tqdm.write(f"[error] {rel}: {exc}")
            failed += 1
            continue
        ok += 1
    return ok, failed


def _add_folderbatch_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input_dir", help="Directory with images or .npz archives.")
    parser.add_argument("output_dir", help="Directory for converted outputs.")
    parser.add_argument(
        "--to",
        required=True,
        help="Target representation (see `axconv domains`).",
    )
    parser.add_argument(
        "--format",
        dest="out_format",
        choices=["npz", "png", "tif", "keep"],
        default="npz",
        help="Output format (keep = same extension as the input).",
    )
    parser.add_argument(
        "--pattern",
        default=None,
        help="Optional glob pattern (e.g. '*.png').",
    )
    parser.add_argument(
        "--recursive",
        action="store_true",
        help="Search for inputs recursively.",
    )
    parser.add_argument(
        "--strategy",
        choices=list(STRATEGIES),
        default="vectorized",
        help="Whole-buffer numpy conversion or explicit point walk.",
    )
    parser.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Worker threads for the point walk.",
    )
    parser.add_argument(
        "--no-progress",
        dest="progress",
        action="store_false",
        help="Disable the progress bar.",
    )


def _cmd_folderbatch(args: argparse.Namespace) -> int:
    input_dir = _path(args.input_dir)
    output_dir = _path(args.output_dir)

    try:
        get_domain(args.to)
    except TypeChangeError as exc:
        raise SystemExit(f"[error] {exc}")
    if args.jobs < 1:
        raise SystemExit("--jobs must be positive")

    print(f"[config] input_dir={input_dir}")
    print(f"[config] output_dir={output_dir}")
    print(f"[config] to={args.to} format={args.out_format} strategy={args.strategy}")

    ok, failed = process_folder(
        input_dir,
        output_dir,
        args.to,
        out_format=args.out_format,
        pattern=args.pattern,
        recursive=args.recursive,
        strategy=args.strategy,
        jobs=args.jobs,
        progress=args.progress,
    )
    print(f"[done] {ok} converted, {failed} failed.")
    return 0 if failed == 0 else 1


def register_folderbatch_subcommand(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "folderbatch",
        help="Convert every image/archive in a folder.",
    )
    add_settings_args(p)
    _add_folderbatch_args(p)
    p.set_defaults(func=_cmd_folderbatch)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folderbatch",
        description="Batch pixel type conversion for a folder.",
    )
    _add_folderbatch_args(parser)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    return _cmd_folderbatch(args)


if __name__ == "__main__":
    raise SystemExit(main())
