"""Data-layer result value object.

Produced by the data-execution closure an operation hands to the response
pipeline, consumed exactly once by the pipeline.

Usage:
    async def load_item() -> DataResult[Item]:
        item = await repository.find(item_id)
        if item is None:
            return DataResult(status=DataStatus.INVALID)
        return DataResult(status=DataStatus.SUCCESS, value=item)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from resteasy.domain.enums.data_status import DataStatus

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class DataResult(Generic[T]):
    """Status plus optional payload returned by a data closure.

    Attributes:
        status: DataStatus, or any other value a data layer reports. Values
            outside DataStatus are mapped to Not Implemented by the pipeline.
        value: Payload, None when the call produced nothing.
    """

    status: DataStatus | str
    value: T | None = None

    @property
    def has_value(self) -> bool:
        """True when the result carries a payload."""
        return self.value is not None
