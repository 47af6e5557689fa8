"""Port for obtaining the list of hosts to poll."""
from abc import ABC, abstractmethod
from typing import List

from ..entities import HostAddress


class IHostListRepository(ABC):
    """Source of host identifiers."""

    @abstractmethod
    def load(self) -> List[HostAddress]:
        """Return hosts in input order, duplicates and blanks included.

        Raises:
            HostListError: the source cannot be read.
        """
        pass
