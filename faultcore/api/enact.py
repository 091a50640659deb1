# faultcore/api/enact.py
"""
Acting on a HandlingOutcome - the caller side of classify()
"""

from __future__ import annotations

from typing import Any, Optional
import logging
import sys

from ..config import PolicyConfig, load_config
from ..core.errors import FaultAbort, FaultCoreError, codes
from ..core.policy.outcome import FaultState, HandlingOutcome

logger = logging.getLogger(__name__)


def enact(outcome: HandlingOutcome, policy: Optional[PolicyConfig] = None) -> Any:
    """
    Act on a classified fault.

    - RECOVERED: return the recovered value
    - PROPAGATED: re-raise the handler's exception
    - ABORTED: log and print the diagnostic, then terminate the process
      (SystemExit with policy.exit_code), or raise FaultAbort when
      policy.exit_on_abort is false

    Args:
        outcome: Outcome returned by classify()
        policy: Policy configuration (loaded configuration if None)

    Example:
        >>> value = enact(classify(fault))
    """
    if outcome.outcome == FaultState.RECOVERED:
        return outcome.value

    if outcome.outcome == FaultState.PROPAGATED:
        if isinstance(outcome.cause, BaseException):
            raise outcome.cause
        raise FaultCoreError(
            message=outcome.diagnostic or f"Fault '{outcome.kind}' propagated",
            error_code=codes.INTERNAL_ERROR,
            details=outcome.to_dict(),
        )

    if policy is None:
        policy = load_config().policy

    diagnostic = outcome.diagnostic or f"fault {outcome.kind} aborted"
    logger.critical(diagnostic, extra={"fault": outcome.to_dict()})
    if policy.diagnostic_stream == "stderr":
        print(f"faultcore: {diagnostic}", file=sys.stderr)

    if policy.exit_on_abort:
        sys.exit(policy.exit_code)
    raise FaultAbort(outcome)


__all__ = ["enact"]
