"""
Reporter - Human-readable summary of a generation run.
"""

import sys
from typing import Optional, TextIO

from .generation_stats import GenerationStats


class Reporter:
    """
    Prints the outcome of a generation run.
    """

    def __init__(self, output: Optional[TextIO] = None):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
        """
        self.output = output or sys.stdout

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    def _format_duration(self, seconds: float) -> str:
        """Format duration as human-readable string."""
        if seconds < 60:
            return f"{seconds:.1f} seconds"
        elif seconds < 3600:
            return f"{seconds / 60:.1f} minutes"
        else:
            return f"{seconds / 3600:.1f} hours"

    def report_summary(self, stats: GenerationStats) -> None:
        """Print totals, then every failed file with its stage."""
        self._print("=" * 60)
        self._print("THUMBNAIL GENERATION SUMMARY")
        self._print("=" * 60)
        self._print(f"  Files:       {stats.total_to_process:,}")
        self._print(f"  Generated:   {stats.generated:,} ({stats.thumbnails_written:,} thumbnails)")
        self._print(f"  Skipped:     {stats.skipped:,}")
        self._print(f"  Errors:      {stats.errors:,}")
        if stats.cancelled:
            self._print(f"  Cancelled:   {stats.cancelled:,}")
        self._print(f"  Time:        {self._format_duration(stats.elapsed_seconds)}")
        self._print(f"  Rate:        {stats.rate_per_minute:.1f}/min")

        if stats.error_details:
            self._print()
            self._print("FAILED FILES")
            self._print("-" * 60)
            for failure in sorted(stats.error_details, key=lambda f: f.source):
                self._print(f"  {failure}")
