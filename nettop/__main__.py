"""Entry point: ``python -m nettop`` or the ``nettop`` console script."""

from __future__ import annotations

import argparse
import logging
import sys

from nettop.base import NetTop

logger = logging.getLogger("nettop")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="nettop",
        description="Live per-interface network throughput, busiest first.",
        epilog="Keys: q quit, +/- refresh rate, i show/hide virtual interfaces.",
    )
    parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        NetTop().run()
    except KeyboardInterrupt:
        pass
    except Exception:
        # the terminal session has already been restored at this point
        logger.exception("nettop failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
