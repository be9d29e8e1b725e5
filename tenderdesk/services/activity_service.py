"""Activity audit trail: side-effect writes and the recent-activity read model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from tenderdesk.models import Activity, ActivityType, User
from tenderdesk.services.base_service import BaseService


@dataclass(frozen=True)
class ActivityFeedItem:
    id: int
    tender_id: int | None
    activity_type: ActivityType
    description: str
    user_id: int
    timestamp: datetime
    user_name: str | None


class ActivityService(BaseService):
    """Activity rows are append-only; there is no update or delete path."""

    def record(
        self,
        activity_type: ActivityType,
        description: str,
        actor_id: int | None,
        tender_id: int | None = None,
    ) -> Activity:
        """Stage an activity row in the caller's transaction (no commit)."""
        activity = Activity(
            activity_type=activity_type,
            description=description,
            user_id=self.resolve_actor(actor_id),
            tender_id=tender_id,
        )
        self.db.add(activity)
        return activity

    def _feed_query(self):
        return (
            self.db.query(Activity, User.name)
            .outerjoin(User, Activity.user_id == User.id)
            .order_by(Activity.timestamp.desc(), Activity.id.desc())
        )

    @staticmethod
    def _to_item(activity: Activity, user_name: str | None) -> ActivityFeedItem:
        return ActivityFeedItem(
            id=activity.id,
            tender_id=activity.tender_id,
            activity_type=activity.activity_type,
            description=activity.description,
            user_id=activity.user_id,
            timestamp=activity.timestamp,
            user_name=user_name,
        )

    def recent(self, limit: int | None = None) -> list[ActivityFeedItem]:
        """Newest-first activities with the acting user's display name."""
        limit = limit or self.settings.ACTIVITY_FEED_DEFAULT_LIMIT
        rows = self._feed_query().limit(limit).all()
        return [self._to_item(activity, user_name) for activity, user_name in rows]

    def for_tender(self, tender_id: int, limit: int = 20) -> list[ActivityFeedItem]:
        rows = self._feed_query().filter(Activity.tender_id == tender_id).limit(limit).all()
        return [self._to_item(activity, user_name) for activity, user_name in rows]

    def for_user(self, user_id: int, limit: int = 10) -> list[ActivityFeedItem]:
        rows = self._feed_query().filter(Activity.user_id == user_id).limit(limit).all()
        return [self._to_item(activity, user_name) for activity, user_name in rows]
