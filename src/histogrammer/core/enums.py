"""Enumerations for Histogrammer core types."""

from enum import Enum, IntEnum


class ErrorCode(str, Enum):
    """Application error codes for structured error responses."""

    E400_INVALID_ARGUMENT = "E400_INVALID_ARGUMENT"
    E400_INVALID_LAYOUT = "E400_INVALID_LAYOUT"
    E404_FILE_NOT_FOUND = "E404_FILE_NOT_FOUND"
    E500_INTERNAL = "E500_INTERNAL"


class ExitCode(IntEnum):
    """Process exit statuses returned by the command-line interface."""

    OK = 0
    FAILURE = 1


class PipelinePhase(str, Enum):
    """Processing pipeline phases for tracking and timing."""

    ARGUMENT_PARSING = "argument_parsing"
    FILE_READING = "file_reading"
    BINNING = "binning"
    RENDERING = "rendering"
