"""
Recommendation endpoints: ranked programs for a client and trainer feedback.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from fitcoach.api.dependencies import get_current_user
from fitcoach.core.config import settings
from fitcoach.core.exceptions import NotFoundError
from fitcoach.db.repositories.recommendation_log import RecommendationLogRepository
from fitcoach.db.session import get_db
from fitcoach.engine.feedback import record_recommendation_feedback
from fitcoach.engine.ranking import generate_recommendations
from fitcoach.models.user import User
from fitcoach.schemas.recommendation import RecommendationFeedback, RecommendationResult
from fitcoach.services import engine_options
from fitcoach.services.access import get_trainer_client

router = APIRouter()


@router.get("/{client_id}", summary="Rank workout programs for a client.", response_model=RecommendationResult, )
def get_recommendations(client_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    get_trainer_client(db, user, client_id)
    return generate_recommendations(db, client_id, vocabulary=engine_options.goal_vocabulary(),
                                    stats_config=engine_options.stats_config(),
                                    limit=settings.RECOMMENDATION_LIMIT, )


@router.get("/{client_id}/history", summary="Recommendation audit log of a client.")
def get_recommendation_history(client_id: int, db: Session = Depends(get_db),
                               user: User = Depends(get_current_user), ):
    get_trainer_client(db, user, client_id)
    return RecommendationLogRepository(db).get_all_by_client(client_id)


@router.post("/{client_id}/feedback", summary="Record trainer feedback on the latest recommendation.",
             status_code=status.HTTP_204_NO_CONTENT, )
def post_feedback(client_id: int, data: RecommendationFeedback, db: Session = Depends(get_db),
                  user: User = Depends(get_current_user), ):
    get_trainer_client(db, user, client_id)
    entry = record_recommendation_feedback(db, client_id, data.selected_program_id, data.feedback)
    if entry is None:
        raise NotFoundError("recommendation_log", "No pending recommendation", {"client_id": client_id})
