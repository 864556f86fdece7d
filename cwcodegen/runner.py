"""
Runner Module

Provides the run() function used by the generation scripts: sets up logging,
awaits the generator and prints the confirmation line.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from .config import CodegenConfig
from .generator import StrPath, codegen

logger = logging.getLogger(__name__)

DONE_MESSAGE = "✨ all done!"


def setup_logging(level: int = logging.INFO) -> None:
    """Configure logging for cwcodegen."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(
    config: CodegenConfig,
    cwd: Optional[StrPath] = None,
    debug: bool = False,
) -> None:
    """
    Generate TypeScript clients for a configuration.

    Errors from the generator are not caught here; they end the process
    with a traceback and a non-zero exit status.

    Args:
        config: The generation configuration.
        cwd: Directory the generator runs in. Relative paths in the
             configuration are resolved against it.
        debug: Enable debug logging (includes the generator's own output).

    Example:
        from cwcodegen import run, trade_config

        if __name__ == "__main__":
            run(trade_config())
    """
    setup_logging(logging.DEBUG if debug else logging.INFO)

    asyncio.run(codegen(config, cwd=cwd))

    print(DONE_MESSAGE)
