"""chaincss -- compile .jcss documents (CSS with embedded builder scripts) to CSS."""

__version__ = "0.1.0"

from chaincss.config import CompilerConfig, PrefixConfig, PrefixerMode  # noqa: E402
from chaincss.errors import ChainCSSError  # noqa: E402
from chaincss.pipeline import Pipeline, process_file  # noqa: E402

__all__ = [
    "__version__",
    "ChainCSSError",
    "CompilerConfig",
    "Pipeline",
    "PrefixConfig",
    "PrefixerMode",
    "process_file",
]
