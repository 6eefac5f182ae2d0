"""Utility modules for configuration, logging, errors and image handling."""

from .config import get_config, load_config, reset_config
from .logger import (
    get_logger,
    log_execution_time,
    set_log_level,
    log_exception,
)
from .image_utils import (
    encode_file,
    resize_data_uri,
    strip_data_uri_header,
    decode_data_uri,
    data_uri_mime_type,
    image_width,
)

__all__ = [
    # Configuration
    "get_config",
    "load_config",
    "reset_config",
    # Logging
    "get_logger",
    "log_execution_time",
    "set_log_level",
    "log_exception",
    # Image handling
    "encode_file",
    "resize_data_uri",
    "strip_data_uri_header",
    "decode_data_uri",
    "data_uri_mime_type",
    "image_width",
]
