import logging
from typing import List, Optional, Dict, Any
from sqlalchemy import select

from database.models import User
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository):
    def get_user(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_all_users(self) -> List[User]:
        stmt = select(User).order_by(User.id)
        return self.db.execute(stmt).scalars().all()

    def get_quiz_completed_users(self, exclude_user_id: Optional[int] = None) -> List[User]:
        stmt = select(User).where(User.quiz_completed.is_(True))
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        stmt = stmt.order_by(User.id)
        return self.db.execute(stmt).scalars().all()

    def create_user(self, username: str, email: str, name: str, **fields: Any) -> User:
        user = User(username=username, email=email, name=name, **fields)
        self.db.add(user)
        self.flush()
        return user

    def update_personality(
        self,
        user_id: int,
        personality_type: str,
        personality_description: str,
        personality_traits: Dict[str, Any]
    ) -> Optional[User]:
        """Store quiz results and mark the user quiz-completed."""
        user = self.get_user(user_id)
        if not user:
            return None

        user.personality_type = personality_type
        user.personality_description = personality_description
        user.personality_traits = personality_traits
        user.quiz_completed = True
        self.flush()

        logger.info(f"Stored personality '{personality_type}' for user {user_id}")
        return user
