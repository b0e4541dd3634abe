"""
Wallpaper Render Example

Renders a single wallpaper to a PNG file using the same parameters the HTTP
endpoint accepts, e.g.

    python wallpaper_example.py --model iphone_se --style squares --lang en
"""

import argparse

from yearwall.date_utils import utc_now, year_progress
from yearwall.logger import log, set_silent_mode
from yearwall.params import PARAM_NAMES, parse_params
from yearwall.wallpaper import render_wallpaper


def build_parser():
    parser = argparse.ArgumentParser(description="Render a year wallpaper PNG")
    for name in PARAM_NAMES:
        parser.add_argument(
            f"--{name.replace('_', '-')}", dest=name, help=f"Wallpaper '{name}' parameter"
        )
    parser.add_argument(
        "--output", "-o", default="wallpaper.png",
        help="Output PNG path (default: wallpaper.png)",
    )
    parser.add_argument("--silent", action="store_true", help="Suppress log output")
    return parser


def main(argv=None):
    """Render one wallpaper and save it"""
    args = build_parser().parse_args(argv)
    set_silent_mode(args.silent)

    query = {name: getattr(args, name) for name in PARAM_NAMES}
    params = parse_params(query)

    now = utc_now()
    image = render_wallpaper(params, now)
    image.save(args.output, format="PNG")

    progress = year_progress(params.timezone, now)
    log(f"Saved {image.size[0]}x{image.size[1]} wallpaper to {args.output}")
    log(
        f"Day {progress.day_of_year} of {progress.days_in_year}: "
        f"{progress.days_left} days ({progress.percent_left}%) left"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
