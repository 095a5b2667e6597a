"""
Enum-driven branch dispatch.

A service declares a closed enum of branches, binds one handler per member,
and routes each request through ``_determine_strategy``. The handler table
must cover the whole enum, so a branch added to the enum without a handler
fails when the service is constructed rather than on the first request that
needs it.

Used by:
- GroupComposer (GroupBranch: nested, block, explicit fields, inferred)

Example:
    class Branch(Enum):
        FAST = "fast"
        SLOW = "slow"

    class Sorter(EnumDispatchService[Branch]):
        def __init__(self):
            super().__init__()
            self._register_handlers({
                Branch.FAST: self._sort_small,
                Branch.SLOW: self._sort_large,
            })

        def _determine_strategy(self, request) -> Branch:
            return Branch.FAST if len(request) < 16 else Branch.SLOW
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Mapping, TypeVar
import logging

logger = logging.getLogger(__name__)

BranchEnum = TypeVar("BranchEnum", bound=Enum)
Handler = Callable[[Any], Any]


class EnumDispatchService(ABC, Generic[BranchEnum]):
    """Routes a request object to the handler bound to its branch."""

    def __init__(self):
        self._handlers: Dict[BranchEnum, Handler] = {}

    def _register_handlers(self, handlers: Mapping[BranchEnum, Handler]) -> None:
        """
        Bind the handler table.

        Raises:
            ValueError: If the table is empty or leaves enum members unhandled
        """
        if not handlers:
            raise ValueError(f"{type(self).__name__}: handler table cannot be empty")

        branch_enum = type(next(iter(handlers)))
        missing = [member for member in branch_enum if member not in handlers]
        if missing:
            raise ValueError(
                f"{type(self).__name__}: no handler for {[member.name for member in missing]}"
            )
        self._handlers = dict(handlers)
        logger.debug(f"{type(self).__name__}: bound {len(self._handlers)} {branch_enum.__name__} handlers")

    @abstractmethod
    def _determine_strategy(self, request: Any) -> BranchEnum:
        """Pick the branch for ``request``."""

    def dispatch(self, request: Any) -> Any:
        """Run the handler of the branch chosen for ``request``."""
        branch = self._determine_strategy(request)
        logger.debug(f"{type(self).__name__}: dispatching to {branch.name}")
        return self._handlers[branch](request)

    def registered_branches(self) -> List[BranchEnum]:
        return list(self._handlers)
