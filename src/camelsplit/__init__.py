"""camelsplit - split "CamelCase" identifiers into words."""

from camelsplit.tokenizer import split

try:
    from importlib.metadata import version

    __version__ = version("camelsplit")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development

__all__ = ["split", "__version__"]
