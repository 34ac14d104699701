"""Pipeline utilities for fetching, classifying and writing snapshots."""

from .base import PipelineResult, Writer
from .injuries import InjurySyncPipeline
from .weather import WeatherSyncPipeline
from .writers import JsonFileWriter, NullWriter

__all__ = [
    "InjurySyncPipeline",
    "JsonFileWriter",
    "NullWriter",
    "PipelineResult",
    "WeatherSyncPipeline",
    "Writer",
]
