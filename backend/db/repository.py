"""Storage protocol for shifts; the engine never depends on how it is implemented."""

from typing import Protocol

from compliance.types import Shift


class ShiftRepository(Protocol):
    """Protocol defining the datastore the compliance checks read from."""

    async def fetch_shifts(self, schedule_id: str) -> list[Shift]:
        """
        Fetch every shift belonging to a schedule.

        Args:
            schedule_id: Identifier of the (draft) schedule

        Returns:
            All shifts of the schedule, assigned or not, in any order
        """
        ...
