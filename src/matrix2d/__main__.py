import argparse
import logging
import sys
from logging import Formatter, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from . import __version__
from .core.constants import DEFAULT_PRECISION
from .core.errors import MatrixError
from .core.matrix import Matrix

__all__ = ["main"]

FORMATS: List[str] = ["text", "csv", "json", "css", "css3d"]

logger = logging.getLogger()


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="matrix2d", description="Inspect 2D affine transformation matrices.")
    parser.add_argument('values', metavar="<value>", type=float, nargs=6, help="matrix coefficients a b c d e f")
    parser.add_argument('--invert', action='store_true', help="invert matrix before output")
    parser.add_argument('--decompose', choices=["qr", "lu"], help="print decomposition of matrix")
    parser.add_argument('--apply', metavar=("X", "Y"), type=float, nargs=2, action='append', default=[], help="print transformed point")
    parser.add_argument('--format', choices=FORMATS, default="text", help="output format of matrix (default: text)")
    parser.add_argument('--precision', metavar="<n>", type=non_negative_int, default=DEFAULT_PRECISION, help=f"decimals for text output (default: {DEFAULT_PRECISION})")
    parser.add_argument('--debug', action='store_true', help="show debug messages")
    parser.add_argument('--logfile', metavar="<file>", help="write to custom logfile")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def add_stream_handler(logger: logging.Logger) -> None:
    formatter = Formatter(
        "%(asctime)s::%(name)s::%(levelname)s::%(message)s",
        "%Y-%m-%dT%H:%M:%S"
    )
    handler = StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def add_rotating_file_handle(logger: logging.Logger, filename: str) -> None:
    file_formatter = logging.Formatter(
        fmt='%(asctime)s:%(name)s:%(levelname)s:%(message)s',
        datefmt='%Y-%m-%dT%H:%M:%S'
    )
    file_handler = RotatingFileHandler(
        filename=filename,
        maxBytes=10485760,
        backupCount=10
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)


def configure_logger(logger: logging.Logger, debug: bool = False, filename: Optional[str] = None) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    add_stream_handler(logger)

    if filename:
        add_rotating_file_handle(logger, filename)


def format_matrix(matrix: Matrix, output_format: str, precision: int) -> str:
    if output_format == "csv":
        return matrix.to_csv().rstrip()
    if output_format == "json":
        return matrix.to_json()
    if output_format == "css":
        return matrix.to_css()
    if output_format == "css3d":
        return matrix.to_css3d()
    return matrix.to_string(precision)


def run(args: argparse.Namespace) -> None:
    matrix = Matrix(*args.values)
    logger.debug("Matrix: %r", matrix)

    if args.invert:
        matrix = matrix.inverse()
        logger.debug("Inverse: %r", matrix)

    print(format_matrix(matrix, args.format, args.precision))

    if args.decompose:
        p = args.precision
        result = matrix.decompose(use_lu=args.decompose == "lu")
        print(f"translate={result.translate.x:.{p}f},{result.translate.y:.{p}f}")
        print(f"rotation={result.rotation:.{p}f}")
        print(f"scale={result.scale.x:.{p}f},{result.scale.y:.{p}f}")
        print(f"skew={result.skew.x:.{p}f},{result.skew.y:.{p}f}")

    for x, y in args.apply:
        point = matrix.apply_to_point(x, y)
        print(f"{point.x:.{args.precision}f} {point.y:.{args.precision}f}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    configure_logger(logger, debug=args.debug, filename=args.logfile)

    try:
        run(args)
    except MatrixError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
