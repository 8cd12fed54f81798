"""Browsable views of the network: stations, schedules and fares."""

from .fares import FareDisplay, FareTable
from .schedules import ScheduleBoard, ScheduleDisplay
from .stations import StationDirectory, StationSummary, StationViewState

__all__ = [
    "FareDisplay",
    "FareTable",
    "ScheduleBoard",
    "ScheduleDisplay",
    "StationDirectory",
    "StationSummary",
    "StationViewState",
]
