# Core module exports
from formcheck.core.config import Settings, get_settings, load_control_kinds
from formcheck.core.logging import (
    configure_logging,
    get_logger,
    walker_logger,
    engine_logger,
    binder_logger,
    controls_logger,
)
