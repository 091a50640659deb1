"""
Policy Module Configuration

What callers do with an aborted outcome.
"""

from dataclasses import dataclass
from typing import Literal
from .base import ModuleConfig


@dataclass(frozen=True)
class PolicyConfig(ModuleConfig):
    """
    Policy configuration.

    exit_on_abort: enact() terminates the process (SystemExit) on abort;
        otherwise it raises FaultAbort
    exit_code: Exit status used on abort
    diagnostic_stream: Where the abort diagnostic is written (stderr/none)
    """

    exit_on_abort: bool = True
    exit_code: int = 1
    diagnostic_stream: Literal["stderr", "none"] = "stderr"

    @classmethod
    def default(cls) -> "PolicyConfig":
        """Default policy configuration"""
        return cls(exit_on_abort=True, exit_code=1, diagnostic_stream="stderr")

    @classmethod
    def embedded(cls) -> "PolicyConfig":
        """For hosts that must not exit: abort raises FaultAbort, nothing is printed"""
        return cls(exit_on_abort=False, exit_code=1, diagnostic_stream="none")
