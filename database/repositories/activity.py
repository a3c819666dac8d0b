import logging
from typing import List, Optional, Dict, Any
from sqlalchemy import select, delete

from database.models import Activity, Availability, Resource
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ActivityRepository(BaseRepository):
    """Activities, weekly availability and resources: the per-user profile details."""

    def get_activities_by_user(self, user_id: int) -> List[Activity]:
        stmt = select(Activity).where(Activity.user_id == user_id).order_by(Activity.id)
        return self.db.execute(stmt).scalars().all()

    def get_activity(self, activity_id: int) -> Optional[Activity]:
        return self.db.get(Activity, activity_id)

    def create_activity(self, user_id: int, name: str, category: str, **fields: Any) -> Activity:
        activity = Activity(user_id=user_id, name=name, category=category, **fields)
        self.db.add(activity)
        self.flush()
        return activity

    def set_activity_active(self, activity_id: int, is_active: bool) -> Optional[Activity]:
        activity = self.get_activity(activity_id)
        if not activity:
            return None
        activity.is_active = is_active
        self.flush()
        return activity

    def get_availability_by_user(self, user_id: int) -> List[Availability]:
        stmt = select(Availability).where(Availability.user_id == user_id).order_by(Availability.id)
        return self.db.execute(stmt).scalars().all()

    def set_availability(self, user_id: int, slots: List[Dict[str, Any]]) -> List[Availability]:
        """
        Replace a user's availability wholesale.

        Deletes every existing row for the user, then inserts the new set, in
        the caller's transaction. An empty list clears the grid.
        """
        self.db.execute(delete(Availability).where(Availability.user_id == user_id))

        rows = [
            Availability(
                user_id=user_id,
                day_of_week=slot['day_of_week'],
                time_slot=slot['time_slot'],
                is_available=slot.get('is_available', True)
            )
            for slot in slots
        ]
        self.db.add_all(rows)
        self.flush()

        logger.debug(f"Replaced availability for user {user_id} with {len(rows)} slots")
        return rows

    def get_resources_by_user(self, user_id: int) -> Optional[Resource]:
        stmt = select(Resource).where(Resource.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def set_resources(self, user_id: int, **fields: Any) -> Resource:
        """Upsert the single Resource row for a user."""
        resource = self.get_resources_by_user(user_id)
        if resource:
            for key, value in fields.items():
                setattr(resource, key, value)
        else:
            resource = Resource(user_id=user_id, **fields)
            self.db.add(resource)
        self.flush()
        return resource
