# src/axconv/cli/image_demo.py
"""Command-line demo: convert one image to several representations.
Usage:
    python -m axconv.cli.image_demo INPUT_PATH OUTPUT_DIR [--to DOMAIN ...] [--strategy walk]
Saves results to OUTPUT_DIR/<input stem>__<domain>.npz (plus a .png preview
for 2-D uint8 results).
"""
import os

import click

from axconv.core import DOMAINS, TypeChangeError
from axconv.io import read_dataset, write_dataset
from axconv.typechange import STRATEGIES, change_type


@click.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_dir")
@click.option("--to", "targets", multiple=True, default=("uint8", "uint16", "float32", "bit"),
              type=click.Choice(list(DOMAINS)), show_default=True)
@click.option("--strategy", default="vectorized", type=click.Choice(list(STRATEGIES)), show_default=True)
def main(input_path, output_dir, targets, strategy):

    src = read_dataset(input_path)
    click.echo(f"Loaded {src.name}: {src.domain.name} {src.axes.tags} {src.shape}"
               + (" (color composite)" if src.is_color_composite else ""))

    os.makedirs(output_dir, exist_ok=True)
    base = os.path.splitext(os.path.basename(input_path))[0]

    for target in targets:
        try:
            out = change_type(src, target, strategy=strategy)
        except TypeChangeError as exc:
            click.echo(f"  {target}: failed ({exc})", err=True)
            continue

        out_path = os.path.join(output_dir, f"{base}__{target}.npz")
        write_dataset(out_path, out)
        click.echo(f"  {target}: {out.axes.tags} {out.shape} "
                   f"range [{out.samples.min()}, {out.samples.max()}] → {out_path}")

        if out.ndim == 2 and out.domain.name == "uint8":
            preview = os.path.join(output_dir, f"{base}__{target}.png")
            write_dataset(preview, out)
            click.echo(f"  {target}: preview → {preview}")

    click.echo(f"All results stored in: {output_dir}")


if __name__ == "__main__":
    main()
