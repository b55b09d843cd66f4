"""
Base use case classes.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from shared.domain import DomainEvent, SubmissionInProgressError

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Result wrapper for use cases."""
    success: bool
    data: Optional[OutputDTO] = None
    events: List[DomainEvent] = field(default_factory=list)

    @classmethod
    def ok(cls, data: OutputDTO, events: List[DomainEvent] = None) -> 'UseCaseResult[OutputDTO]':
        """Create a successful result."""
        return cls(success=True, data=data, events=list(events or []))


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass


class SingleFlightMixin:
    """
    Busy flag for use cases that submit to the backend.

    Only one submission may be in flight at a time; a second call while the
    first is outstanding is refused instead of queued.
    """
    _busy: bool = False

    @property
    def is_busy(self) -> bool:
        return self._busy

    def _begin(self, operation: str) -> None:
        if self._busy:
            raise SubmissionInProgressError(operation)
        self._busy = True

    def _end(self) -> None:
        self._busy = False
