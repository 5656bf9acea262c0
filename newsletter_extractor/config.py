import os

# Defaults, overridable through the environment
DEFAULT_NEWSLETTERS_DIR = "newsletter"
DEFAULT_LOG_LEVEL = "INFO"


def newsletters_dir() -> str:
    """Directory scanned for newsletter PDFs when none is given."""
    return os.path.abspath(os.getenv("NEWSLETTERS_DIR", DEFAULT_NEWSLETTERS_DIR))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
