# main.py
import logging
import sys

from core.command_loop import run


def configure_logging() -> None:
    # stderr only; stdout carries the prompt/answer protocol
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    configure_logging()
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
