import logging
import sys
from typing import TextIO


class ContextFormatter(logging.Formatter):
    """Custom formatter that handles optional entity and variant fields."""
    def format(self, record):
        # Add default values for entity and variant if not present
        if not hasattr(record, 'entity'):
            record.entity = '-'
        if not hasattr(record, 'variant'):
            record.variant = '-'
        return super().format(record)


def configure_logging(level: str = "INFO", stream: TextIO = sys.stdout) -> None:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [entity=%(entity)s variant=%(variant)s] - %(message)s"
    ))
    logging.basicConfig(
        level=level.upper(),
        handlers=[handler],
    )
