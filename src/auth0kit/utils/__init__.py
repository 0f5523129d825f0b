"""Utilities shared by the auth0kit clients and CLI."""

from .logging_utils import get_logger, setup_logging
from .url_utils import build_path, build_url, clean_params, encode_path_segment

__all__ = [
    "build_path",
    "build_url",
    "clean_params",
    "encode_path_segment",
    "get_logger",
    "setup_logging",
]
