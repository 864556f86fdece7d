"""
cwcodegen - TypeScript clients for CosmWasm contracts

A thin driver around @cosmwasm/ts-codegen: describe the contracts and the
features to generate, and the generator writes types, clients, React-Query
hooks and message composers from the contract schema files.

Example usage:

    # codegen.py
    from cwcodegen import CodegenConfig, ContractSource, run

    config = CodegenConfig(
        contracts=[ContractSource(name="Trade", dir="../schema")],
        out_path="./types/",
    )

    if __name__ == "__main__":
        run(config)

From async code, await the generator directly:

    from cwcodegen import codegen

    await codegen(config, cwd="ts")
"""

__version__ = "0.1.0"

from .config import (
    CodegenConfig,
    CodegenOptions,
    ContractSource,
    BundleOptions,
    TypesOptions,
    ClientOptions,
    ReactQueryOptions,
    RecoilOptions,
    MessageComposerOptions,
    MessageBuilderOptions,
)
from .generator import codegen, generate
from .runner import run
from .trade import trade_config
from .errors import (
    CodegenError,
    GeneratorNotFoundError,
    GeneratorInvocationError,
)

__all__ = [
    # Version
    "__version__",

    # Core
    "codegen",
    "generate",
    "run",

    # Configuration
    "CodegenConfig",
    "CodegenOptions",
    "ContractSource",
    "BundleOptions",
    "TypesOptions",
    "ClientOptions",
    "ReactQueryOptions",
    "RecoilOptions",
    "MessageComposerOptions",
    "MessageBuilderOptions",
    "trade_config",

    # Errors
    "CodegenError",
    "GeneratorNotFoundError",
    "GeneratorInvocationError",
]
