"""Error handling and exception definitions for Histogrammer."""

from .enums import ErrorCode, PipelinePhase
from .models import MAX_LAYOUT_VALUE, ErrorDetail, ErrorResponse


class HistogrammerError(Exception):
    """Base exception for all Histogrammer errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        details: list[ErrorDetail] | None = None,
        hint: str | None = None,
        phase: PipelinePhase | None = None,
    ):
        """Initialize Histogrammer error.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            details: Optional detailed error information
            hint: Optional correction hint for the user
            phase: Optional pipeline phase where error occurred
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or []
        self.hint = hint
        self.phase = phase

    def to_error_response(self) -> ErrorResponse:
        """Convert exception to ErrorResponse model.

        Returns:
            ErrorResponse model instance
        """
        return ErrorResponse(
            code=self.code.value,
            message=self.message,
            details=self.details if self.details else None,
            hint=self.hint,
            phase=self.phase.value if self.phase else None,
        )


class InvalidArgumentError(HistogrammerError):
    """Raised when the command line is malformed or a flag carries a bad value."""

    def __init__(
        self,
        flag: str | None,
        value: str | None = None,
        message: str | None = None,
        reason: str | None = None,
    ):
        """Initialize invalid argument error."""
        if message is None:
            message = f"Invalid argument for flag {flag}" if flag else "Invalid arguments"

        details = None
        if value is not None:
            details = [
                ErrorDetail(
                    field=flag,
                    reason=reason or f"'{value}' is not a positive integer",
                    suggestion=f"Pass a positive integer after {flag}",
                )
            ]

        super().__init__(
            message=message,
            code=ErrorCode.E400_INVALID_ARGUMENT,
            details=details,
            hint="Arguments must be positive integers",
            phase=PipelinePhase.ARGUMENT_PARSING,
        )
        self.flag = flag


class InvalidLayoutError(HistogrammerError):
    """Raised when the row count or tick stride is out of range."""

    def __init__(
        self,
        row_count: int,
        tick_stride: int,
        phase: PipelinePhase = PipelinePhase.RENDERING,
    ):
        """Initialize invalid layout error."""
        details = []
        if row_count <= 0:
            details.append(ErrorDetail(field="row_count", reason=f"row_count must be positive, got {row_count}"))
        if tick_stride <= 0:
            details.append(ErrorDetail(field="tick_stride", reason=f"tick_stride must be positive, got {tick_stride}"))
        if row_count > MAX_LAYOUT_VALUE:
            details.append(
                ErrorDetail(
                    field="row_count",
                    reason=f"row_count must be at most {MAX_LAYOUT_VALUE}, got {row_count}",
                ),
            )
        if tick_stride > MAX_LAYOUT_VALUE:
            details.append(
                ErrorDetail(
                    field="tick_stride",
                    reason=f"tick_stride must be at most {MAX_LAYOUT_VALUE}, got {tick_stride}",
                ),
            )

        super().__init__(
            message=f"Invalid chart layout (row_count={row_count}, tick_stride={tick_stride})",
            code=ErrorCode.E400_INVALID_LAYOUT,
            details=details,
            hint=f"Row count and tick stride must both be between 1 and {MAX_LAYOUT_VALUE}",
            phase=phase,
        )
        self.row_count = row_count
        self.tick_stride = tick_stride


class InputFileError(HistogrammerError):
    """Raised when the input file cannot be opened or read."""

    def __init__(
        self,
        path: str,
        reason: str | None = None,
    ):
        """Initialize input file error."""
        super().__init__(
            message=f'File "{path}" not found',
            code=ErrorCode.E404_FILE_NOT_FOUND,
            details=[ErrorDetail(field="input_file", reason=reason)] if reason else None,
            hint="Check that the path points to a readable text file",
            phase=PipelinePhase.FILE_READING,
        )
        self.path = path


class SystemError(HistogrammerError):
    """Raised for internal system errors."""

    def __init__(
        self,
        message: str = "An internal error occurred",
        phase: PipelinePhase | None = None,
    ):
        """Initialize system error."""
        super().__init__(
            message=message,
            code=ErrorCode.E500_INTERNAL,
            hint="This is an unexpected error. Please report it with the input that triggered it.",
            phase=phase,
        )
