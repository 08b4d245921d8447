import argparse
import logging
import sys

from hexwalk import (
    area,
    axial_to_offset,
    generate_world,
    is_connected,
    pixel_to_axial,
    render_ascii,
    wrap,
)
from hexwalk.config import DEFAULT_HEX_SIZE, DEFAULT_RADIUS, WALK_FILL_FRACTION


def cmd_generate(args):
    world = generate_world(args.radius, rng=args.seed, fraction=args.fraction)
    print(world.summary())
    print(f"connected={is_connected(world)}")
    if args.ascii:
        print(render_ascii(world))

def cmd_wrap(args):
    q, r = wrap((args.q, args.r), args.radius)
    print(f"({args.q},{args.r}) -> ({q},{r}) in radius {args.radius} "
          f"({area(args.radius)} cells)")

def cmd_pick(args):
    q, r = pixel_to_axial((args.x, args.y), args.size)
    col, row = axial_to_offset(q, r)
    print(f"pixel ({args.x},{args.y}) -> axial ({q},{r}) offset ({col},{row})")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Hex region folding and random-walk worlds")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_gen = sub.add_parser("generate", help="Carve a world with a random walk")
    ap_gen.add_argument("--radius", type=int, default=DEFAULT_RADIUS)
    ap_gen.add_argument("--seed", type=int, help="RNG seed for the walk")
    ap_gen.add_argument("--fraction", type=float, default=WALK_FILL_FRACTION,
                        help="Share of region cells to open")
    ap_gen.add_argument("--ascii", action="store_true", help="Print a text preview")
    ap_gen.set_defaults(func=cmd_generate)

    ap_wrap = sub.add_parser("wrap", help="Fold an axial coordinate into the region")
    ap_wrap.add_argument("--radius", type=int, default=DEFAULT_RADIUS)
    ap_wrap.add_argument("q", type=int)
    ap_wrap.add_argument("r", type=int)
    ap_wrap.set_defaults(func=cmd_wrap)

    ap_pick = sub.add_parser("pick", help="Find the hex under a pixel")
    ap_pick.add_argument("--size", type=float, default=DEFAULT_HEX_SIZE)
    ap_pick.add_argument("x", type=float)
    ap_pick.add_argument("y", type=float)
    ap_pick.set_defaults(func=cmd_pick)
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
