import argparse
import logging
import sys
from typing import Dict, List, Optional, Sequence

from trisolve import GeometryError, Triangle
from trisolve.names import opposite_side_name

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _parse_assignments(values: Optional[List[str]]) -> Dict[str, float]:
    sides: Dict[str, float] = {}
    for item in values or []:
        token, sep, raw = item.partition("=")
        if not sep or not token.strip():
            raise argparse.ArgumentTypeError(f"expected SIDE=LENGTH, got {item!r}")
        try:
            sides[token.strip()] = float(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"length for {token.strip()!r} is not a number: {raw!r}") from None
    return sides


def _build(args: argparse.Namespace) -> Triangle:
    if args.theorem == "sss":
        return Triangle.from_sss(args.a, args.b, args.c, args.name)
    if args.theorem == "sas":
        return Triangle.from_sas(args.b, args.angle_a, args.c, args.name)
    if args.theorem == "asa":
        return Triangle.from_asa(args.angle_b, args.a, args.angle_c, args.name)
    if args.theorem == "aas":
        return Triangle.from_aas(args.angle_a, args.angle_b, args.a, args.name)
    return Triangle.from_hl(args.hypotenuse, args.leg, args.name)


def _report(triangle: Triangle) -> None:
    print("Coordinates:")
    for name, (x, y) in triangle.coords.items():
        print(f"  {name}: ({x:.6f}, {y:.6f})")
    print("Sides:")
    for name in triangle.names:
        side = opposite_side_name(name)
        print(f"  {side}: {triangle.side_length(side):.6f}")
    print("Angles:")
    for name in triangle.names:
        print(f"  {name}: {triangle.angle(name):.6f}")


def _make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trisolve", description="Construct and edit triangles")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--name", default="ABC", help="Triangle name, e.g. ABC or A'B'C' (default: ABC)")
    common.add_argument(
        "--set",
        action="append",
        metavar="SIDE=LENGTH",
        help="Side length to apply after construction; repeat for up to three sides",
    )

    sub = parser.add_subparsers(dest="theorem", required=True)

    sss = sub.add_parser("sss", parents=[common], help="three sides a, b, c")
    sss.add_argument("a", type=float)
    sss.add_argument("b", type=float)
    sss.add_argument("c", type=float)

    sas = sub.add_parser("sas", parents=[common], help="sides b, c and the angle at A")
    sas.add_argument("b", type=float)
    sas.add_argument("angle_a", type=float)
    sas.add_argument("c", type=float)

    asa = sub.add_parser("asa", parents=[common], help="side a and the angles at B and C")
    asa.add_argument("angle_b", type=float)
    asa.add_argument("a", type=float)
    asa.add_argument("angle_c", type=float)

    aas = sub.add_parser("aas", parents=[common], help="angles at A and B and side a")
    aas.add_argument("angle_a", type=float)
    aas.add_argument("angle_b", type=float)
    aas.add_argument("a", type=float)

    hl = sub.add_parser("hl", parents=[common], help="right angle at B: hypotenuse b and leg a")
    hl.add_argument("hypotenuse", type=float)
    hl.add_argument("leg", type=float)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _make_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        sides = _parse_assignments(args.set)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    try:
        triangle = _build(args)
        logger.info("Constructed %r", triangle)
        if sides:
            triangle.set_side_length(sides)
            logger.info("Applied side lengths %s", sides)
    except GeometryError as exc:
        print(f"error: {exc.kind}: {exc}", file=sys.stderr)
        raise SystemExit(2)

    _report(triangle)


if __name__ == "__main__":
    main(sys.argv[1:])
