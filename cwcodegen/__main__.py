"""Entry point for ``python -m cwcodegen``: generates the Trade clients."""

from .runner import run
from .trade import trade_config


def main() -> None:
    run(trade_config())


if __name__ == "__main__":
    main()
