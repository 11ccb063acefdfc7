import logging
import secrets
from collections import OrderedDict
from typing import Optional, Tuple

from application.view_state import TaskView

logger = logging.getLogger(__name__)


class ViewRegistry:
    """Maps a view cookie to the TaskView it owns.

    A view gets a fresh empty store the first time it is shown and loses it,
    with all its tasks, when closed or evicted as least recently used.
    """

    def __init__(self, max_views: int = 1000):
        if max_views < 1:
            raise ValueError(f"max_views must be at least 1, got {max_views}")
        self.max_views = max_views
        self._views: "OrderedDict[str, TaskView]" = OrderedDict()

    def __len__(self) -> int:
        return len(self._views)

    def __contains__(self, view_id: object) -> bool:
        return view_id in self._views

    def get(self, view_id: Optional[str]) -> Optional[TaskView]:
        if not view_id or view_id not in self._views:
            return None
        self._views.move_to_end(view_id)
        return self._views[view_id]

    def get_or_create(self, view_id: Optional[str]) -> Tuple[str, TaskView]:
        view = self.get(view_id)
        if view is not None:
            return view_id, view
        view_id = secrets.token_urlsafe(16)
        view = TaskView()
        self._views[view_id] = view
        logger.info(f"Created task view {view_id[:6]}... ({len(self._views)} open)")
        while len(self._views) > self.max_views:
            evicted, _ = self._views.popitem(last=False)
            logger.info(f"Evicted task view {evicted[:6]}...")
        return view_id, view

    def discard(self, view_id: Optional[str]) -> bool:
        if not view_id or self._views.pop(view_id, None) is None:
            return False
        logger.info(f"Closed task view {view_id[:6]}...")
        return True
