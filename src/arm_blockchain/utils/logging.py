from __future__ import annotations
import logging
import logging.config
from pathlib import Path
from typing import Optional
import yaml

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(config_path: Optional[str] = "configs/logging.yaml", level: int = logging.INFO) -> None:
    """Setup logging configuration from a YAML dictConfig file."""
    path = Path(config_path) if config_path else None
    if path is None or not path.exists():
        # Safe fallback
        logging.basicConfig(level=level, format=DEFAULT_FORMAT)
        return

    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    logging.config.dictConfig(cfg)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the arm_blockchain namespace."""
    if not name.startswith("arm_blockchain"):
        name = f"arm_blockchain.{name}"
    return logging.getLogger(name)
