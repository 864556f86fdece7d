"""
Trade Contract Configuration

Generation settings for the cw721-trade contract clients. Paths are relative
to the ts/ directory the generator runs in.
"""

from __future__ import annotations

from .config import (
    BundleOptions,
    ClientOptions,
    CodegenConfig,
    CodegenOptions,
    ContractSource,
    MessageComposerOptions,
    ReactQueryOptions,
    RecoilOptions,
    TypesOptions,
)

CONTRACT_NAME = "Trade"
SCHEMA_DIR = "../schema"
OUT_PATH = "./types/"


def trade_config() -> CodegenConfig:
    """Build the configuration for the Trade contract."""
    return CodegenConfig(
        contracts=[ContractSource(name=CONTRACT_NAME, dir=SCHEMA_DIR)],
        out_path=OUT_PATH,
        options=CodegenOptions(
            bundle=BundleOptions(enabled=False),
            types=TypesOptions(enabled=True),
            client=ClientOptions(enabled=True),
            react_query=ReactQueryOptions(
                enabled=True,
                optional_client=True,
                version="v4",
                mutations=True,
                query_keys=True,
            ),
            recoil=RecoilOptions(enabled=False),
            message_composer=MessageComposerOptions(enabled=True),
        ),
    )
