from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from axconv import __version__
from axconv.assign import GAMMA_MAX, GAMMA_MIN, gamma_data_values
from axconv.cli.folderbatch import register_folderbatch_subcommand
from axconv.cli.settings import (
    add_settings_args,
    apply_settings,
    collect_settings,
    find_subparser,
    first_positional,
    load_settings,
    save_settings,
    select_settings,
    split_settings_args,
)
from axconv.core import DOMAINS, Dataset, TypeChangeError
from axconv.io import read_dataset, write_dataset
from axconv.typechange import STRATEGIES, change_type


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _path(p: str | Path) -> Path:
    return Path(p).expanduser().resolve()


def describe(ds: Dataset) -> str:
    axes = ", ".join(
        f"{a.tag}={a.extent}" + ("" if a.scale == 1.0 else f"@{a.scale:g}")
        for a in ds.axes
    )
    flags = f"composite={ds.composite_channel_count}"
    if ds.is_color_composite:
        flags += " color"
    if ds.rgb_merged:
        flags += " rgb-merged"
    return f"{ds.name or '<unnamed>'}: {ds.domain.name} [{axes}] {flags}"


def _load(path: Path) -> Dataset:
    try:
        return read_dataset(path)
    except (OSError, TypeChangeError, KeyError) as exc:
        raise SystemExit(f"Could not read {path}: {exc}")


def _save(path: Path, ds: Dataset) -> None:
    try:
        write_dataset(path, ds)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Could not write {path}: {exc}")


# ---------------------------------------------------------------------------
# Subcommand implementations
# ---------------------------------------------------------------------------

def _cmd_convert(args: argparse.Namespace) -> int:
    in_path = _path(args.in_path)
    out_path = _path(args.out_path)

    src = _load(in_path)
    print(f"[convert] {describe(src)}")
    try:
        out = change_type(src, args.to, strategy=args.strategy, jobs=args.jobs)
    except TypeChangeError as exc:
        raise SystemExit(f"[error] {exc}")
    _save(out_path, out)
    print(f"[convert] {describe(out)} -> {out_path}")
    return 0


def _cmd_gamma(args: argparse.Namespace) -> int:
    in_path = _path(args.in_path)
    out_path = _path(args.out_path)

    src = _load(in_path)
    try:
        out = gamma_data_values(src, args.value)
    except ValueError as exc:
        raise SystemExit(f"[error] {exc}")
    _save(out_path, out)
    print(f"[gamma] {args.value:g} applied to {describe(src)} -> {out_path}")
    return 0


def _cmd_info(args: argparse.Namespace) -> int:
    print(describe(_load(_path(args.in_path))))
    return 0


def _cmd_domains(args: argparse.Namespace) -> int:
    for name, d in DOMAINS.items():
        kind = "real" if d.real else ("signed" if d.signed else "unsigned")
        print(f"{name:>8}  {d.bits:>2} bit {kind:<8} [{d.min:g}, {d.max:g}]  ({d.dtype})")
    return 0


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def add_conversion_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--to",
        required=True,
        help=f"Target representation ({', '.join(DOMAINS)}).",
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


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="axconv",
        description="Change pixel type of images and N-d sample archives.",
    )
    add_settings_args(parser)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---- convert ----
    p_conv = subparsers.add_parser(
        "convert",
        help="Convert one dataset to another representation.",
    )
    add_settings_args(p_conv)
    p_conv.add_argument("--in", dest="in_path", required=True, help="Input image or .npz.")
    p_conv.add_argument("--out", dest="out_path", required=True, help="Output image or .npz.")
    add_conversion_args(p_conv)
    p_conv.set_defaults(func=_cmd_convert)

    # ---- gamma ----
    p_gamma = subparsers.add_parser(
        "gamma",
        help="Apply gamma to sample values, keeping the representation.",
    )
    add_settings_args(p_gamma)
    p_gamma.add_argument("--in", dest="in_path", required=True, help="Input image or .npz.")
    p_gamma.add_argument("--out", dest="out_path", required=True, help="Output image or .npz.")
    p_gamma.add_argument(
        "--value",
        type=float,
        required=True,
        help=f"Gamma constant in [{GAMMA_MIN}, {GAMMA_MAX}].",
    )
    p_gamma.set_defaults(func=_cmd_gamma)

    # ---- info ----
    p_info = subparsers.add_parser("info", help="Print axes and representation.")
    p_info.add_argument("--in", dest="in_path", required=True, help="Input image or .npz.")
    p_info.set_defaults(func=_cmd_info)

    # ---- domains ----
    p_dom = subparsers.add_parser("domains", help="List known representations.")
    p_dom.set_defaults(func=_cmd_domains)

    # ---- folderbatch ----
    register_folderbatch_subcommand(subparsers)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    raw_argv = list(argv) if argv is not None else sys.argv[1:]
    cleaned_argv, settings_path, save_path = split_settings_args(raw_argv)
    command = first_positional(cleaned_argv)

    if settings_path:
        settings = select_settings(load_settings(Path(settings_path)), command)
        apply_settings(find_subparser(parser, command) or parser, settings)

    args = parser.parse_args(cleaned_argv)

    if save_path:
        target = find_subparser(parser, args.command) or parser
        exclude = {"settings_path", "save_settings_path"}
        save_settings(
            Path(save_path),
            collect_settings(args, target, exclude=exclude),
            command=args.command,
        )

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
