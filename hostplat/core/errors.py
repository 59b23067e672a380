"""Exit codes for the hostplat CLI.

Platform detection itself never fails; these codes only describe what went
wrong around it (unreadable or invalid config files).
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success
    - 2: Environment error (invalid config content)
    - 5: I/O error (config file missing or unreadable)
    """

    OK = 0
    ENV_ERROR = 2
    IO_ERROR = 5
