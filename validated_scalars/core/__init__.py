# Core module exports
from .config import settings, get_settings
from .logging import (
    configure_logging,
    get_logger,
    scalars_logger,
)
