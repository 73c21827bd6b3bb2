"""Logging utilities for meshtype."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class MeshingStats:
    """Statistics from one generate call."""

    characters: int = 0
    glyphs_skipped: int = 0
    contours: int = 0
    windings_corrected: int = 0
    caps: int = 0
    caps_failed: int = 0
    triangles: int = 0
    failures: dict[str, int] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def failure_count(self) -> int:
        return sum(self.failures.values())


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("meshtype")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class MeshingLogger:
    """Logger for one TextMesher: per-glyph failures and run statistics.

    Per-glyph failures are logged at most once per failure kind (the
    exception class name) for the lifetime of the logger, so a text full of
    missing glyphs does not flood the log. Every failure is still counted in
    the statistics of the current run.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("meshtype")
        self._reported_kinds: set[str] = set()
        self._stats = MeshingStats()

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return self._logger

    def start_run(self, text: str, start_time: float | None = None) -> MeshingStats:
        """Reset statistics for a new generate call."""
        self._stats = MeshingStats(start_time=start_time)
        self._logger.debug("Generating text mesh", text=text, length=len(text))
        return self._stats

    def log_character(self, character: str, contour_count: int, corrected: int) -> None:
        """Log a laid out character."""
        self._logger.debug(
            "Character laid out",
            character=character,
            contours=contour_count,
            corrected=corrected,
        )
        self._stats.characters += 1
        self._stats.contours += contour_count
        if corrected:
            self._stats.windings_corrected += corrected
            self._logger.debug(
                "Contour winding corrected",
                character=character,
                corrected=corrected,
            )

    def log_glyph_failure(self, character: str, error: Exception) -> None:
        """Record a per-glyph failure, logging the first one of each kind."""
        kind = type(error).__name__
        self._stats.failures[kind] = self._stats.failures.get(kind, 0) + 1
        self._stats.characters += 1
        self._stats.glyphs_skipped += 1

        if kind in self._reported_kinds:
            return
        self._reported_kinds.add(kind)
        self._logger.error(
            "Glyph skipped",
            character=character,
            error=str(error),
            error_type=kind,
        )

    def log_cap_failure(self, character: str, error: Exception) -> None:
        """Record a cap that could not be tessellated."""
        kind = type(error).__name__
        self._stats.failures[kind] = self._stats.failures.get(kind, 0) + 1
        self._stats.caps_failed += 1

        if kind in self._reported_kinds:
            return
        self._reported_kinds.add(kind)
        self._logger.error(
            "Cap skipped",
            character=character,
            error=str(error),
            error_type=kind,
        )

    def log_run_complete(self, caps: int, triangles: int, end_time: float | None = None) -> None:
        """Log a successful generate call."""
        self._stats.caps = caps
        self._stats.triangles = triangles
        self._stats.end_time = end_time
        self._logger.info(
            "Text mesh generated",
            characters=self._stats.characters,
            contours=self._stats.contours,
            caps=caps,
            triangles=triangles,
            skipped=self._stats.glyphs_skipped,
        )

    def log_run_failed(self, reason: str, end_time: float | None = None) -> None:
        """Log a generate call that produced no mesh."""
        self._stats.end_time = end_time
        self._logger.error("Text mesh not generated", reason=reason)

    @property
    def stats(self) -> MeshingStats:
        """Get statistics of the current run."""
        return self._stats
