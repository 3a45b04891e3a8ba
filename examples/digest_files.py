#!/usr/bin/env python3
"""Basic blockdigest example.

Streams each file named on the command line through a digest engine and
prints ``<hexdigest>  <path>`` lines, like ``md5sum``.

    python examples/digest_files.py --algorithm md4 archive.tar notes.txt
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the parent directory to the path so we can import blockdigest
sys.path.insert(0, str(Path(__file__).parent.parent))

from blockdigest import Algorithm, get_config, hash_stream


def digest_path(path: Path, algorithm: str) -> str:
    """Digest one file, or stdin for ``-``."""
    if str(path) == "-":
        return hash_stream(sys.stdin.buffer, algorithm).hex()
    with path.open("rb") as stream:
        return hash_stream(stream, algorithm).hex()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--algorithm",
        "-a",
        default=get_config().engine.default_algorithm.value,
        choices=[a.value for a in Algorithm],
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("paths", nargs="*", type=Path, default=[Path("-")])
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    status = 0
    for path in args.paths:
        try:
            print(f"{digest_path(path, args.algorithm)}  {path}")
        except OSError as exc:
            print(f"{path}: {exc.strerror}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
