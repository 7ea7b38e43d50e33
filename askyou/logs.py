import logging

from askyou.config import get_settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """basicConfig is a no-op once handlers exist, so Streamlit reruns are safe."""
    lvl = (level or get_settings().LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger("askyou").setLevel(lvl)
