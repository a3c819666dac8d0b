import logging
from typing import List, Dict
from sqlalchemy import select

from database.models import PersonalityQuestion, UserAnswer
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PersonalityRepository(BaseRepository):
    def get_all_questions(self) -> List[PersonalityQuestion]:
        stmt = select(PersonalityQuestion).order_by(PersonalityQuestion.id)
        return self.db.execute(stmt).scalars().all()

    def save_user_answer(self, user_id: int, question_id: int, selected_option: int) -> UserAnswer:
        answer = UserAnswer(user_id=user_id, question_id=question_id, selected_option=selected_option)
        self.db.add(answer)
        self.flush()
        return answer

    def get_user_answers(self, user_id: int) -> List[UserAnswer]:
        stmt = select(UserAnswer).where(UserAnswer.user_id == user_id).order_by(UserAnswer.id)
        return self.db.execute(stmt).scalars().all()

    def get_latest_answers(self, user_id: int) -> Dict[int, int]:
        """question_id -> selected option, the most recent answer winning."""
        return {a.question_id: a.selected_option for a in self.get_user_answers(user_id)}
