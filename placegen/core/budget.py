"""Memory budget check applied before a generation run starts."""

import logging
from dataclasses import dataclass
from typing import Optional

import psutil

from .config import MAX_BATCH_BYTES, GenerationOptions
from .sizing import max_dimensions
from ..utils.formatter import format_file_size

logger = logging.getLogger(__name__)

# Bytes per pixel of the RGB drawing surface
SURFACE_BYTES_PER_PIXEL = 3


def estimate_footprint(options: GenerationOptions) -> int:
    """Estimate the bytes held in memory once a run completes.

    Each unit is counted at the larger of its raw surface size and its
    padded output size.
    """
    width, height = max_dimensions(options)
    per_image = max(options.target_size, width * height * SURFACE_BYTES_PER_PIXEL)
    return options.count * per_image


@dataclass
class BudgetCheck:
    """Outcome of a budget check."""
    allowed: bool
    estimate: int
    ceiling: int
    message: Optional[str] = None


class ResourceBudget:
    """Reject batches whose estimated footprint exceeds a ceiling.

    Args:
        ceiling: Fixed upper bound in bytes
        use_system_memory: Also cap the ceiling at half the available memory
    """

    def __init__(self, ceiling: int = MAX_BATCH_BYTES, use_system_memory: bool = True):
        self.ceiling = ceiling
        self.use_system_memory = use_system_memory

    def effective_ceiling(self) -> int:
        if not self.use_system_memory:
            return self.ceiling

        try:
            available = psutil.virtual_memory().available
        except (OSError, RuntimeError) as e:
            logger.warning(f"Failed to get memory usage: {e}")
            return self.ceiling

        return min(self.ceiling, available // 2)

    def check(self, options: GenerationOptions) -> BudgetCheck:
        """Check whether a run with these options fits the budget.

        Args:
            options: Run options

        Returns:
            BudgetCheck; ``message`` explains a rejection
        """
        estimate = estimate_footprint(options)
        ceiling = self.effective_ceiling()

        if estimate > ceiling:
            message = (
                f"Requested batch needs about {format_file_size(estimate)}, "
                f"over the {format_file_size(ceiling)} limit. "
                f"Reduce the image count, size or target size."
            )
            logger.warning(message)
            return BudgetCheck(False, estimate, ceiling, message)

        logger.debug(f"Budget check passed: {estimate} of {ceiling} bytes")
        return BudgetCheck(True, estimate, ceiling)
