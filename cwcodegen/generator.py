"""
Generator Module

Drives the external @cosmwasm/ts-codegen library. The configuration is
serialized to JSON and piped into a short Node.js bootstrap that calls the
library's default export and waits for it to finish.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from typing import Optional, Union

from .config import CodegenConfig
from .errors import GeneratorInvocationError, GeneratorNotFoundError

logger = logging.getLogger(__name__)

GENERATOR_PACKAGE = "@cosmwasm/ts-codegen"

# Reads the config from stdin, resolves the generator from the working
# directory's node_modules and exits 1 with the stack on rejection.
NODE_BOOTSTRAP = """
const chunks = [];
process.stdin.on("data", (chunk) => chunks.push(chunk));
process.stdin.on("end", () => {
    const config = JSON.parse(Buffer.concat(chunks).toString("utf8"));
    Promise.resolve()
        .then(() => {
            const mod = require("%s");
            const codegen = mod.default || mod;
            return codegen(config);
        })
        .catch((err) => {
            console.error(err && err.stack ? err.stack : String(err));
            process.exit(1);
        });
});
""" % GENERATOR_PACKAGE

StrPath = Union[str, os.PathLike]


async def codegen(
    config: CodegenConfig,
    *,
    cwd: Optional[StrPath] = None,
    node: str = "node",
) -> None:
    """
    Run the code generator with the given configuration.

    Args:
        config: The generation configuration.
        cwd: Working directory for the generator. Relative schema and output
             paths are resolved against it. Defaults to the current directory.
        node: The Node.js executable.

    Raises:
        GeneratorNotFoundError: If the Node.js executable cannot be found.
        GeneratorInvocationError: If the generator fails or cannot start.
    """
    payload = json.dumps(config.to_payload()).encode("utf-8")
    names = ", ".join(c.name for c in config.contracts)
    logger.info(f"Generating TypeScript for {names} -> {config.out_path}")
    logger.debug(f"Generator payload: {payload.decode('utf-8')}")

    try:
        proc = await asyncio.create_subprocess_exec(
            node,
            "-e",
            NODE_BOOTSTRAP,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=cwd,
        )
    except FileNotFoundError as e:
        if (
            cwd is not None
            and e.filename is not None
            and os.fspath(e.filename) == os.fspath(cwd)
        ):
            raise GeneratorInvocationError(
                f"Generator working directory does not exist: {e.filename}"
            ) from e
        raise GeneratorNotFoundError(node) from e
    except OSError as e:
        raise GeneratorInvocationError(f"Failed to start generator: {e}") from e

    stdout, stderr = await proc.communicate(input=payload)

    output = stdout.decode("utf-8", errors="replace").strip()
    if output:
        logger.debug(f"Generator output:\n{output}")

    if proc.returncode != 0:
        raise GeneratorInvocationError(
            f"{GENERATOR_PACKAGE} exited with status {proc.returncode}",
            returncode=proc.returncode,
            stderr=stderr.decode("utf-8", errors="replace"),
        )

    logger.debug(f"Generated TypeScript written to {config.out_path}")


def generate(
    config: CodegenConfig,
    *,
    cwd: Optional[StrPath] = None,
    node: str = "node",
) -> None:
    """Blocking wrapper around codegen()."""
    asyncio.run(codegen(config, cwd=cwd, node=node))
