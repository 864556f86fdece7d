"""
Errors Module

Exceptions raised while driving the external code generator.
"""

from __future__ import annotations

from typing import Any, Optional


class CodegenError(Exception):
    """Base class for all cwcodegen errors."""

    code = "CODEGEN_ERROR"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, e.g. for structured log output."""
        result: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details is not None:
            result["details"] = self.details
        return result


class GeneratorNotFoundError(CodegenError):
    """The Node.js executable used to run the generator is missing."""

    code = "GENERATOR_NOT_FOUND"

    def __init__(self, executable: str):
        super().__init__(
            f"Node.js executable '{executable}' not found. "
            f"Install Node.js and @cosmwasm/ts-codegen to generate clients.",
            details={"executable": executable},
        )
        self.executable = executable


class GeneratorInvocationError(CodegenError):
    """The generator could not be started or exited with a failure."""

    code = "GENERATOR_FAILED"

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        details = {"returncode": returncode, "stderr": stderr}
        if stderr:
            message = f"{message}\n{stderr.rstrip()}"
        super().__init__(message, details=details)
        self.returncode = returncode
        self.stderr = stderr
