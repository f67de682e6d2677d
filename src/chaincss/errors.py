"""Error hierarchy for the chaincss compiler."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chaincss.model.diagnostic import Diagnostic


class ChainCSSError(Exception):
    """Base error for all chaincss errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InputError(ChainCSSError):
    """The input document has a bad extension or cannot be read."""


class ScriptExecutionError(ChainCSSError):
    """An embedded script block failed to parse or raised while running."""

    def __init__(
        self,
        message: str,
        *,
        segment_index: int | None = None,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.segment_index = segment_index
        self.line = line


class StyleCompileError(ChainCSSError):
    """Style blocks could not be serialized to CSS."""


class SyntaxValidationError(ChainCSSError):
    """The assembled CSS failed the syntactic sanity checks."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"CSS validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


class PrefixingError(ChainCSSError):
    """A prefixing strategy failed. Always recovered by the prefixer engine."""


class TargetQueryError(PrefixingError):
    """A browser-target query could not be understood."""


class MinificationError(ChainCSSError):
    """The minifier reported errors; no output is written."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            f"CSS minification failed with {len(self.errors)} error(s): "
            + "; ".join(self.errors)
        )


class DocumentImportError(ChainCSSError):
    """A script's ``get()`` could not load the referenced document."""


class OutputError(ChainCSSError):
    """The compiled CSS or its source map could not be written."""
