"""Dump the seeded render corpus so rendering changes can be diffed by hand."""

from __future__ import annotations

import argparse

from srcdiag.testing import write_render_corpus


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description=__doc__)
    ap.add_argument("root", nargs="?", default="tests/fixtures/render_corpus", help="Output root directory")
    ap.add_argument("-s", "--seed", type=int, default=1)
    ap.add_argument("-n", "--count", type=int, default=200)
    args = ap.parse_args(argv)

    print(write_render_corpus(args.root, seed=args.seed, count=args.count))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
