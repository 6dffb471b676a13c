import os
from pathlib import Path


def get_log_dir() -> Path:
    """Return the log folder from CLINBEAR_LOG_DIR, defaulting to ./logs."""
    return Path(os.path.expanduser(os.getenv("CLINBEAR_LOG_DIR", "logs")))


def get_keep_unannotated() -> bool:
    """
    Return whether variants without a ClinVar match are written unchanged.

    Reads CLINBEAR_KEEP_UNANNOTATED; unset or unrecognised values keep the
    default of dropping them.
    """
    env_value = os.getenv("CLINBEAR_KEEP_UNANNOTATED")
    if env_value is None:
        return False
    return env_value.strip().lower() in {"1", "true", "yes", "on"}
