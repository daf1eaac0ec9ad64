#!/usr/bin/env python3
"""Command-line parsing for Orbits."""

import argparse
from typing import Optional, Sequence

from .constants import APP_NAME, APP_VERSION, DEFAULT_NUM_PLANETS, DEFAULT_SPAWN_RATE, DEFAULT_TRAIL_LENGTH
from .data_models import OrbitConfig
from .utils import try_float, try_int


def positive_int(text: str) -> int:
    value = try_int(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def non_negative_int(text: str) -> int:
    value = try_int(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def non_negative_float(text: str) -> float:
    value = try_float(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def seed_int(text: str) -> int:
    value = try_int(text)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Planets orbiting a central body, leaving fading trails.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}",
    )
    parser.add_argument(
        "-f",
        "--fullscreen",
        action="store_true",
        help="Run fullscreen at the desktop resolution.",
    )
    parser.add_argument(
        "-n",
        "--num_planets",
        type=positive_int,
        default=DEFAULT_NUM_PLANETS,
        metavar="N",
        help=f"Number of orbiting planets (default: {DEFAULT_NUM_PLANETS}).",
    )
    parser.add_argument(
        "-l",
        "--trail_length",
        type=non_negative_int,
        default=DEFAULT_TRAIL_LENGTH,
        metavar="N",
        help=f"Trail length in frames of history, 0 disables trails (default: {DEFAULT_TRAIL_LENGTH}).",
    )
    parser.add_argument(
        "-r",
        "--spawn_rate",
        type=non_negative_float,
        default=DEFAULT_SPAWN_RATE,
        metavar="RATE",
        help=f"Satellites launched per second, 0 disables them (default: {DEFAULT_SPAWN_RATE}).",
    )
    parser.add_argument(
        "-p",
        "--panel",
        action="store_true",
        help="Open a stats panel listing every planet.",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=seed_int,
        default=None,
        help="Seed for planet colours.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output.",
    )
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> OrbitConfig:
    """Parse arguments into a frozen config; exits with status 2 on bad input."""
    args = build_parser().parse_args(argv)
    return OrbitConfig(
        num_planets=args.num_planets,
        trail_length=args.trail_length,
        spawn_rate=args.spawn_rate,
        fullscreen=args.fullscreen,
        show_panel=args.panel,
        seed=args.seed,
        verbose=args.verbose,
    )
