"""
Rice cropping calendar.

Maps calendar dates to the wet/dry season and the crop phase within it, and
provides the standard stage timeline for each season along with the
logged events placed on it.

Season windows:
    Wet season: March 16 - September 15
    Dry season: September 16 - March 15
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..core import DateUtils
from ..models import AgriculturalLog, LogKind

MonthDay = Tuple[int, int]


class Season(str, Enum):
    WET = "Wet"
    DRY = "Dry"
    TRANSITION = "Transition"


class Phase(str, Enum):
    LAND_PREPARATION = "Land Preparation"
    PLANTING = "Planting"
    GROWTH = "Growth"
    FLOWERING = "Flowering"
    HARVEST = "Harvest"
    POST_HARVEST = "Post-Harvest"
    PLANNING = "Planning"


# (season, phase, first day, last day); bounds are inclusive (month, day) pairs
PHASE_WINDOWS: List[Tuple[Season, Phase, MonthDay, MonthDay]] = [
    (Season.WET, Phase.LAND_PREPARATION, (3, 16), (4, 15)),
    (Season.WET, Phase.PLANTING, (4, 16), (4, 30)),
    (Season.WET, Phase.GROWTH, (5, 1), (6, 30)),
    (Season.WET, Phase.FLOWERING, (7, 1), (8, 15)),
    (Season.WET, Phase.HARVEST, (8, 16), (9, 15)),
    (Season.DRY, Phase.LAND_PREPARATION, (9, 16), (10, 15)),
    (Season.DRY, Phase.PLANTING, (10, 16), (10, 31)),
    (Season.DRY, Phase.GROWTH, (11, 1), (12, 31)),
    (Season.DRY, Phase.FLOWERING, (1, 1), (2, 15)),
    (Season.DRY, Phase.HARVEST, (2, 16), (3, 15)),
]

# Standard crop cycle timeline: (label, month, day, stage number)
WET_SEASON_STAGES = [
    ("Land Prep Start", 3, 16, 1),
    ("Land Prep End", 4, 15, 1),
    ("Planting Start", 4, 1, 2),
    ("Planting End", 4, 30, 2),
    ("Growth Start", 5, 1, 3),
    ("Growth End", 6, 30, 3),
    ("Flowering Start", 7, 1, 4),
    ("Flowering End", 8, 8, 4),
    ("Harvest Start", 8, 16, 5),
    ("Harvest End", 9, 15, 5),
    ("Post-Harvest", 9, 30, 6),
]

DRY_SEASON_STAGES = [
    ("Land Prep Start", 9, 16, 1),
    ("Land Prep End", 10, 15, 1),
    ("Planting Start", 10, 1, 2),
    ("Planting End", 10, 30, 2),
    ("Growth Start", 11, 1, 3),
    ("Growth End", 12, 31, 3),
    ("Flowering Start", 1, 1, 4),
    ("Flowering End", 2, 8, 4),
    ("Harvest Start", 2, 16, 5),
    ("Harvest End", 3, 15, 5),
    ("Post-Harvest", 3, 31, 6),
]

# Stage numbers used when plotting logged events against the cycle
PLANTING_STAGE = 2
HARVEST_STAGE = 5


@dataclass(frozen=True)
class CycleStage:
    """Point on the standard crop cycle timeline."""

    label: str
    date: date
    stage: int


class CroppingCalendar:
    """Season and phase lookup for the rice cropping calendar."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def season_and_phase(day: date) -> Tuple[Season, Phase]:
        """
        Get the season and crop phase for a date.

        Args:
            day: Calendar date

        Returns:
            Tuple of (season, phase)
        """
        key = (day.month, day.day)
        for season, phase, first, last in PHASE_WINDOWS:
            if first <= key <= last:
                return season, phase
        return Season.TRANSITION, Phase.PLANNING

    def standard_cycle(self, season: Season, year: int) -> List[CycleStage]:
        """
        Standard stage timeline for a season starting in ``year``.

        Dry season stages from January onwards fall in the following year.

        Args:
            season: Wet or dry season
            year: Year the season starts in

        Returns:
            List of CycleStage in timeline order
        """
        if season is Season.WET:
            stages = WET_SEASON_STAGES
        elif season is Season.DRY:
            stages = DRY_SEASON_STAGES
        else:
            raise ValueError(f"No standard cycle for season: {season.value}")

        cycle = []
        for label, month, day_of_month, stage in stages:
            stage_year = year + 1 if season is Season.DRY and month < 9 else year
            cycle.append(CycleStage(label=label, date=date(stage_year, month, day_of_month), stage=stage))

        self.logger.debug(f"{season.value} season cycle for {year}: {len(cycle)} stages")
        return cycle

    def logged_events(self, logs: Iterable[AgriculturalLog]) -> List[CycleStage]:
        """
        Place logged planting and harvest dates on the stage axis.

        Planting logs sit at the planting stage and harvest logs at the harvest
        stage, so they can be drawn over ``standard_cycle``. Logs whose actual
        date cannot be parsed are skipped.

        Args:
            logs: Planting and/or harvest logs

        Returns:
            List of CycleStage in input order
        """
        events = []
        for log in logs:
            try:
                day = DateUtils.parse_date(log.actual_date)
            except ValueError as e:
                self.logger.warning(f"Not plotting {log.kind.value} log {log.id}: {e}")
                continue

            if log.kind is LogKind.PLANTING:
                events.append(CycleStage(label="Your Planting Date", date=day, stage=PLANTING_STAGE))
            else:
                events.append(CycleStage(label="Your Harvest Date", date=day, stage=HARVEST_STAGE))
        return events
