"""Configuration classes for the errlist command."""

from dataclasses import dataclass


@dataclass
class ScanConfig:
    """Configuration for the ``scan`` and ``demo`` commands."""

    # Number of numbered files the demo works with
    demo_file_count: int = 10

    # The demo creates every n-th file so the rest fail to open
    demo_create_step: int = 2

    # Exit status when at least one failure was collected
    failure_exit_code: int = 1

    # Upper bound on individually listed failures (0 lists everything)
    max_list_entries: int = 100

    def max_listed(self, count: int) -> int:
        """Return how many of count failures should be listed one by one."""
        if self.max_list_entries <= 0:
            return count
        return max(0, min(count, self.max_list_entries))


# Global configuration instance
SCAN_CONFIG = ScanConfig()
