"""Generation pipeline and run orchestration."""

import logging
import time
from typing import Callable, Optional

from .budget import ResourceBudget
from .config import PROGRESS_STEPS, GenerationOptions
from .errors import SessionBusyError
from .exif import fabricate_metadata, inject_metadata
from .inflator import inflate
from .models import GeneratedImage
from .providers import RandomDataProvider, SeededProvider
from .renderer import encode_image, render_image
from .session import GenerationSession, RunReport, RunState
from .sizing import pick_size
from ..utils.logger import ErrorCollector, ProgressLogger

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, int], None]


def progress_step(done: int, total: int, steps: int = PROGRESS_STEPS) -> int:
    """Map a completion fraction onto a coarse step index in [0, steps]."""
    if total <= 0:
        return steps
    return min(steps, (done * steps) // total)


class ImageGenerator:
    """Produce placeholder images into a session.

    Args:
        provider: Source of random values (default: SeededProvider())
        budget: Resource budget applied before each run
    """

    def __init__(self,
                 provider: Optional[RandomDataProvider] = None,
                 budget: Optional[ResourceBudget] = None):
        self.provider = provider or SeededProvider()
        self.budget = budget or ResourceBudget()

    def generate_one(self, index: int, options: GenerationOptions) -> GeneratedImage:
        """Run the pipeline for a single unit.

        Args:
            index: 1-based position used in the generated name
            options: Run options

        Returns:
            Generated image
        """
        width, height = pick_size(options.random_size, options.width, options.height, self.provider)
        short_id = self.provider.short_id()

        img = render_image(width, height, short_id, options.background, self.provider)
        data = encode_image(img, options.format)

        metadata = None
        if options.embeds_metadata:
            metadata = fabricate_metadata(self.provider)
            data = inject_metadata(data, metadata, options.format)

        data = inflate(data, options.target_size)

        return GeneratedImage(
            index=index,
            short_id=short_id,
            width=width,
            height=height,
            format=options.format,
            data=data,
            metadata=metadata,
        )

    def run(self,
            session: GenerationSession,
            options: GenerationOptions,
            progress_callback: Optional[ProgressCallback] = None) -> RunReport:
        """Generate ``options.count`` images sequentially into ``session``.

        A run that fails the budget check is rejected without touching the
        session. Otherwise previous results are cleared, each unit is
        generated in order and the cancellation token is checked after every
        unit; a cancelled run keeps what it produced. A unit that raises is
        logged, counted and skipped.

        Args:
            session: Session receiving the results
            options: Run options
            progress_callback: Called as (completed, total, step) after each unit

        Returns:
            RunReport describing the outcome

        Raises:
            InvalidOptionsError: If the options fail validation
            SessionBusyError: If the session is already running
        """
        if session.is_running:
            raise SessionBusyError("A generation run is already in progress")

        options.validate()

        check = self.budget.check(options)
        if not check.allowed:
            report = RunReport(
                state=session.state,
                requested=options.count,
                rejected=True,
                warning=check.message,
            )
            session.last_report = report
            return report

        session.clear()
        session.token.reset()
        session.state = RunState.RUNNING

        total = options.count
        errors = ErrorCollector()
        progress = ProgressLogger(total, "Generating images")
        started = time.monotonic()
        logger.info(f"Starting run: {options.to_dict()}")

        try:
            for index in range(1, total + 1):
                try:
                    item = self.generate_one(index, options)
                except Exception as e:
                    errors.add_error(f"image {index}", e)
                else:
                    session.append(item)
                    logger.debug(f"Generated {item.name} ({item.size} bytes)")

                progress.update()
                if progress_callback:
                    # Completed counts held items; the step follows units attempted
                    progress_callback(len(session), total, progress_step(index, total))

                if session.token.cancelled and index < total:
                    logger.info(f"Run cancelled after {index} of {total} images")
                    session.state = RunState.CANCELLED
                    break
            else:
                session.state = RunState.COMPLETED
        except BaseException:
            # Interrupted mid-unit; keep the partial results
            session.state = RunState.CANCELLED
            raise

        if session.state is RunState.COMPLETED:
            progress.complete()
        errors.log_summary()

        report = RunReport(
            state=session.state,
            requested=total,
            completed=len(session),
            failed=errors.get_error_count(),
            errors=errors.get_errors(),
            elapsed=time.monotonic() - started,
        )
        session.last_report = report
        return report
