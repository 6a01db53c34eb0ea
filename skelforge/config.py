import logging
import os

from dotenv import load_dotenv

from .dom.scanner import DEFAULT_MAX_DEPTH, DEFAULT_MAX_NODES, DEFAULT_MAX_TIME_MS, ScanBudget

load_dotenv()


def _env_int(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning("Ignoring %s=%r: not an integer", name, value)
        return default


def _env_bool(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class SkelforgeConfig:
    """
    Central configuration object.

    Explicit arguments win; anything left as None falls back to the
    SKELFORGE_* environment variables (a .env file is honoured), then to
    the built-in defaults.
    """

    def __init__(
        self,
        max_nodes=None,
        max_time_ms=None,
        max_depth=None,
        keep_space=None,
        rules_file=None,
        log_level=None,
    ):
        self.max_nodes = max_nodes if max_nodes is not None else _env_int("SKELFORGE_MAX_NODES", DEFAULT_MAX_NODES)
        self.max_time_ms = (
            max_time_ms if max_time_ms is not None else _env_int("SKELFORGE_MAX_TIME_MS", DEFAULT_MAX_TIME_MS)
        )
        self.max_depth = max_depth if max_depth is not None else _env_int("SKELFORGE_MAX_DEPTH", DEFAULT_MAX_DEPTH)
        self.keep_space = keep_space if keep_space is not None else _env_bool("SKELFORGE_KEEP_SPACE")
        self.rules_file = rules_file or os.getenv("SKELFORGE_RULES_FILE") or None
        self.log_level = (log_level or os.getenv("SKELFORGE_LOG_LEVEL") or "WARNING").upper()

    def scan_budget(self) -> ScanBudget:
        return ScanBudget(max_nodes=self.max_nodes, max_time_ms=self.max_time_ms)


def configure_logging(level="WARNING"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
