"""
Logging utilities for tracking calculator usage across the site.
"""

import logging

logger = logging.getLogger(__name__)


def log_calculation(calculator, source):
    """
    Log a successful calculation.

    Only the calculator and the surface are recorded, never the inputs.

    Args:
        calculator (Calculator): The calculator that ran
        source (str): Where the request came from ('web', 'api' or 'cli')
    """
    logger.info(
        "Calculation: %s (category=%s, source=%s)",
        calculator.slug, calculator.category, source,
    )
