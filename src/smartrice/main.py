"""
Main entry point for the SmartRice comparison library.

Orchestrates the recommended-versus-actual comparison workflow.
"""

import json
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .core import Config, DateUtils, setup_logger, LoggerContext, constants
from .api import SmartRiceAPI
from .models import ComparisonResult, ComparisonSummary, LogKind
from .processing import ComparisonProcessor
from .algorithms import CroppingCalendar, categorize_daily_rainfall, field_advice
from .services import DataFetcher, ComparisonWriter


class SmartRiceApp:
    """Main application for harvest and planting comparisons."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(log_file=self.config.log_file, log_level=self.config.log_level)
        self.logger.info("=" * 60)
        self.logger.info("SmartRice Harvest Comparison")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        # Set in initialize_components
        self.api_client: Optional[SmartRiceAPI] = None
        self.data_fetcher: Optional[DataFetcher] = None
        self.processor: Optional[ComparisonProcessor] = None
        self.writer: Optional[ComparisonWriter] = None
        self.calendar = CroppingCalendar(self.logger)
        self.date_utils = DateUtils(self.logger)

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")

        if self.config.source == "api":
            self.api_client = SmartRiceAPI(
                base_url=self.config.api_base_url,
                api_key=self.config.api_key,
                access_token=self.config.access_token,
                timeout=self.config.api_timeout,
                max_retries=self.config.api_max_retries,
                verify_ssl=self.config.api_verify_ssl,
                logger=self.logger
            )
            self.data_fetcher = DataFetcher(api_client=self.api_client, logger=self.logger)
            self.writer = ComparisonWriter(api_client=self.api_client, logger=self.logger)
        else:
            self.data_fetcher = DataFetcher(
                files={
                    "harvest_logs": self.config.harvest_logs_file,
                    "planting_logs": self.config.planting_logs_file,
                    "rainfall": self.config.rainfall_file,
                    "recommendations": self.config.recommendations_file,
                },
                logger=self.logger
            )

        self.processor = ComparisonProcessor(
            duplicate_policy=self.config.duplicate_policy,
            logger=self.logger
        )

        self.logger.info("All components initialized successfully")

    def run(
        self,
        kind: LogKind = LogKind.HARVEST,
        write: bool = False
    ) -> Tuple[List[ComparisonResult], ComparisonSummary]:
        """
        Compare logged events against their recommendations.

        Args:
            kind: Harvest or planting logs
            write: Store the results in the harvest_comparisons table

        Returns:
            Tuple of (results, summary)
        """
        try:
            self.initialize_components()

            if not all([self.data_fetcher, self.processor]):
                raise RuntimeError("Components not properly initialized")

            # Both lists are fully loaded before any comparison runs
            with LoggerContext(self.logger, f"{kind.value} log fetch", unit="logs") as ctx:
                logs = self.data_fetcher.fetch_logs(kind)
                ctx.count(len(logs))
            with LoggerContext(self.logger, "rainfall fetch", unit="observations") as ctx:
                observations = self.data_fetcher.fetch_rainfall()
                ctx.count(len(observations))

            with LoggerContext(self.logger, "comparison", unit="results") as ctx:
                results, summary = self.processor.compare(logs, observations)
                ctx.count(len(results))

            status = {"written": 0, "skipped": 0}
            if write:
                if self.writer is None:
                    raise RuntimeError("Writing comparisons requires the 'api' source")
                with LoggerContext(self.logger, "comparison write", unit="rows") as ctx:
                    status = self.writer.write_results(results)
                    ctx.count(status["written"])

            self._log_summary(summary, status)
            return results, summary

        except Exception as e:
            self.logger.error(f"Application error: {e}", exc_info=True)
            raise

        finally:
            if self.api_client:
                self.api_client.close()

    def advise(self, reference_time: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Field advice for today based on the latest rainfall observation.

        Args:
            reference_time: Reference time (defaults to now)

        Returns:
            Dictionary with date, season, phase, rainfall, category and advice
        """
        try:
            self.initialize_components()

            today = self.date_utils.today(self.config.timezone, reference_time)
            since = self.date_utils.window_start(
                constants.ADVISORY_WINDOW_DAYS, self.config.timezone, reference_time
            )
            season, phase = self.calendar.season_and_phase(today)

            observations = self.data_fetcher.fetch_rainfall(since=since)
            latest = max(observations, key=lambda o: o.date, default=None)
            rainfall = latest.amount_mm if latest else 0.0

            advice = field_advice(phase, rainfall)
            self.logger.info(f"{today}: {season.value} season, {phase.value} phase, {rainfall:.1f} mm")
            self.logger.info(f"Advice ({advice.level}): {advice.text}")

            return {
                "date": DateUtils.to_date_string(today),
                "season": season.value,
                "phase": phase.value,
                "rainfall_mm": rainfall,
                "rainfall_category": categorize_daily_rainfall(rainfall),
                "advice": advice.text,
                "level": advice.level,
            }

        finally:
            if self.api_client:
                self.api_client.close()

    def _log_summary(self, summary: ComparisonSummary, status: Dict[str, int]) -> None:
        if self.writer is not None:
            self.writer.log_write_summary(status, summary)
            return

        self.logger.info(
            f"Total: {summary.total_count}, "
            f"average timing difference: {summary.average_absolute_timing_difference} days, "
            f"high rainfall impact: {summary.high_impact_count}, "
            f"unavailable: {summary.unavailable_count}"
        )


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="SmartRice harvest and planting comparison"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in LogKind],
        default=LogKind.HARVEST.value,
        help="Which logs to compare. Default: harvest"
    )
    parser.add_argument(
        "--write",
        action="store_true",
        help="Store results in the harvest_comparisons table"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write results as JSON to this file"
    )
    parser.add_argument(
        "--advice",
        action="store_true",
        help="Print today's field advice instead of running comparisons"
    )

    args = parser.parse_args()

    try:
        app = SmartRiceApp(config_file=args.config)
        if args.advice:
            print(json.dumps(app.advise(), indent=2))
            return

        results, _ = app.run(kind=LogKind(args.kind), write=args.write)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                json.dump([result.to_dict() for result in results], f, indent=2)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
