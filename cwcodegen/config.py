"""
Configuration Module

Typed models for the configuration handed to the TypeScript code generator.
Attribute names are snake_case; the payload uses the generator's camelCase keys.
"""

from __future__ import annotations

import os
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Kept as the text it was configured with; the generator resolves it
# against its own working directory.
PathText = Annotated[
    str,
    BeforeValidator(lambda v: os.fspath(v) if isinstance(v, os.PathLike) else v),
    Field(min_length=1),
]


class _Model(BaseModel):
    """Base for all configuration models: frozen, strict about keys."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ContractSource(_Model):
    """A contract whose schema files the generator reads."""

    name: str = Field(min_length=1)
    dir: PathText


class BundleOptions(_Model):
    enabled: bool = True
    scope: Optional[str] = None
    bundle_file: Optional[str] = None


class TypesOptions(_Model):
    enabled: bool = True
    alias_execute_msg: Optional[bool] = None


class ClientOptions(_Model):
    enabled: bool = True
    exec_extends_query: Optional[bool] = None


class ReactQueryOptions(_Model):
    """React-Query hook generation settings."""

    enabled: bool = False
    optional_client: bool = False
    version: Literal["v3", "v4", "v5"] = "v4"
    mutations: bool = False
    query_keys: bool = False
    query_factory: Optional[bool] = None


class RecoilOptions(_Model):
    enabled: bool = False


class MessageComposerOptions(_Model):
    enabled: bool = False


class MessageBuilderOptions(_Model):
    enabled: bool = False


class CodegenOptions(_Model):
    """Feature toggles, grouped the way the generator groups them."""

    bundle: BundleOptions = BundleOptions()
    types: TypesOptions = TypesOptions()
    client: ClientOptions = ClientOptions()
    react_query: ReactQueryOptions = ReactQueryOptions()
    recoil: RecoilOptions = RecoilOptions()
    message_composer: MessageComposerOptions = MessageComposerOptions()
    message_builder: Optional[MessageBuilderOptions] = None


class CodegenConfig(_Model):
    """
    The complete generator configuration.

    Built once and never mutated; `contracts` is kept as a tuple so the
    ordering is fixed along with everything else.

    Example:
        config = CodegenConfig(
            contracts=[ContractSource(name="Trade", dir="../schema")],
            out_path="./types/",
        )
    """

    contracts: tuple[ContractSource, ...] = Field(min_length=1)
    out_path: PathText
    options: CodegenOptions = CodegenOptions()

    def to_payload(self) -> dict[str, Any]:
        """
        Convert to the JSON-compatible dict the generator expects.

        Optional settings that were never set are left out so the
        generator falls back to its own defaults.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
