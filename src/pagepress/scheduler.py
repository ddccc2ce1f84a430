"""Scheduled publishing.

Uses APScheduler 4 AsyncScheduler to run the publish sequence on a cron
schedule (``SCHEDULE_CRON``, hourly by default, evaluated in
``SCHEDULE_TIMEZONE``). A failed run is logged and recorded by the scheduler;
the next run fires as usual.
"""

import logging

from apscheduler import AsyncScheduler
from apscheduler.triggers.cron import CronTrigger

from .config import Settings, settings
from .services import run_once

logger = logging.getLogger(__name__)

SCHEDULE_ID = "publish-pages"


async def publish_job(config: Settings | None = None) -> None:
    """Scheduled job: publish both pages once."""
    logger.info("Running scheduled publish...")
    try:
        report = await run_once(config or settings)
    except Exception:
        logger.exception("Scheduled publish failed")
        raise
    logger.info("Scheduled publish finished: %s", ", ".join(report.paths))


class PublishScheduler:
    """Registers ``publish_job`` with an AsyncScheduler for a given config."""

    def __init__(self, config: Settings | None = None) -> None:
        self.config = config or settings

    @property
    def trigger(self) -> CronTrigger:
        return CronTrigger.from_crontab(
            self.config.schedule_cron, timezone=self.config.schedule_tzinfo
        )

    async def run(self) -> None:
        """Register the publish schedule and block until stopped."""
        async with AsyncScheduler() as scheduler:
            await scheduler.add_schedule(
                publish_job,
                self.trigger,
                id=SCHEDULE_ID,
                kwargs={"config": self.config},
            )
            logger.info("Registered: %s (%s)", SCHEDULE_ID, self.config.schedule_cron)
            await scheduler.run_until_stopped()
