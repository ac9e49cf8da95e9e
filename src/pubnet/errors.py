"""Fault records for subscribers that raised during a publish."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict

from .subscription import UNSET


class SubscriberFault(BaseModel):
    """One subscriber (or follower) that raised while being notified."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    subscription_id: int
    callback: str
    error: BaseException
    key: Any = UNSET

    def describe(self) -> str:
        where = f" key={self.key!r}" if self.key is not UNSET else ""
        return f"#{self.subscription_id} {self.callback}{where}: {type(self.error).__name__}: {self.error}"


class PublishError(Exception):
    """Raised after a publish completed delivery but one or more subscribers failed.

    Every subscriber was still called; `faults` lists each failure in
    delivery order. The first failure is chained as ``__cause__``.
    """

    def __init__(self, faults: List[SubscriberFault]):
        self.faults = list(faults)
        lines = "; ".join(f.describe() for f in self.faults)
        super().__init__(f"{len(self.faults)} subscriber(s) failed: {lines}")
        if self.faults:
            self.__cause__ = self.faults[0].error

    @property
    def errors(self) -> List[BaseException]:
        return [f.error for f in self.faults]
