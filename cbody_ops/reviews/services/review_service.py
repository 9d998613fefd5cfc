"""
Review Service

Handles:
    - Review counters
    - Review list (status, rating, search)
    - Approve / Reject (only from pending)
    - Minimum user level update
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import or_, func

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.review import OrderReview
from ...models.order import Order
from ...models.girl import Girl
from ...models.user_profile import UserProfile

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now, format_datetime, parse_paging, paginate

logger = logging.getLogger(__name__)





class ReviewService:

    def get_stats(self) -> dict:
        counts = dict(
            db.session.query(OrderReview.status, func.count(OrderReview.id))
            .group_by(OrderReview.status)
            .all()
        )

        stats = {status: counts.get(status, 0) for status in constants.REVIEW_STATUSES}
        stats["total"] = sum(counts.values())

        return stats



    def list_reviews(self, args) -> dict:
        """
        Fetch review list, newest first

        Args:
            args: status, rating, search (order number, therapist, customer), page, limit
        """

        page, limit = parse_paging(args)

        query = (
            OrderReview.query
            .join(Order, Order.id == OrderReview.order_id)
            .join(Girl, Girl.id == OrderReview.girl_id)
            .join(UserProfile, UserProfile.id == OrderReview.user_id)
        )

        status = args.get("status")
        if status:
            if status not in constants.REVIEW_STATUSES:
                raise ValidationException(messages.ERROR['INVALID_REVIEW_STATUS'])
            query = query.filter(OrderReview.status == status)

        rating = args.get("rating")
        if rating:
            try:
                rating = int(rating)
            except (TypeError, ValueError):
                rating = None

            if rating not in constants.REVIEW_RATINGS:
                raise ValidationException(messages.ERROR['INVALID_RATING'])
            query = query.filter(OrderReview.rating == rating)

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Order.order_number.ilike(pattern),
                    Girl.name.ilike(pattern),
                    UserProfile.display_name.ilike(pattern),
                    UserProfile.username.ilike(pattern),
                    OrderReview.comment.ilike(pattern)
                )
            )

        reviews, meta = paginate(query.order_by(OrderReview.created_at.desc(), OrderReview.id), page, limit)

        return {
            "reviews": [self.serialize(review) for review in reviews],
            "pagination": meta
        }



    def _get_review(self, review_id: str) -> OrderReview:
        review = OrderReview.query.filter_by(id = review_id).first()

        if not review:
            raise NotFoundException(messages.ERROR['REVIEW_NOT_FOUND'])

        return review


    def _get_pending(self, review_id: str) -> OrderReview:
        review = self._get_review(review_id)

        if review.status != "pending":
            raise ServiceException(
                error_code = "REVIEW_NOT_PENDING",
                message = messages.ERROR['REVIEW_NOT_PENDING'].format(review.status),
                status_code = 409
            )

        return review


    def _commit(self, review: OrderReview):
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "REVIEW_UPDATE_FAILED",
                message = messages.ERROR['REVIEW_UPDATE_FAILED'],
                details = str(errors)
            )

        return self.serialize(review)



    def approve(self, operator, review_id: str) -> dict:
        review = self._get_pending(review_id)

        review.status = "approved"
        review.reject_reason = None
        review.reviewed_by = operator.id
        review.reviewed_at = utc_now()

        data = self._commit(review)
        logger.info("✅ Review %s approved by %s", review.id, operator.id)

        return {"review": data, "message": messages.SUCCESS['REVIEW_APPROVED']}



    def reject(self, operator, review_id: str, reason: str) -> dict:
        review = self._get_pending(review_id)

        review.status = "rejected"
        review.reject_reason = reason
        review.reviewed_by = operator.id
        review.reviewed_at = utc_now()

        data = self._commit(review)
        logger.info("🚫 Review %s rejected by %s", review.id, operator.id)

        return {"review": data, "message": messages.SUCCESS['REVIEW_REJECTED']}



    def update_level(self, review_id: str, min_user_level: int) -> dict:
        review = self._get_review(review_id)
        review.min_user_level = min_user_level

        return {"review": self._commit(review), "message": messages.SUCCESS['REVIEW_UPDATED']}



    @staticmethod
    def serialize(review: OrderReview) -> dict:
        order = review.order
        girl = review.girl
        user = review.user

        return {
            "id": review.id,
            "order_id": review.order_id,
            "order_number": order.order_number if order else None,
            "rating": review.rating,
            "comment": review.comment,
            "min_user_level": review.min_user_level,
            "status": review.status,
            "reject_reason": review.reject_reason,
            "reviewed_by": review.reviewed_by,
            "reviewed_at": format_datetime(review.reviewed_at),
            "girl": {
                "id": girl.id,
                "girl_number": girl.girl_number,
                "name": girl.name
            } if girl else None,
            "user": {
                "id": user.id,
                "username": user.username,
                "display_name": user.display_name
            } if user else None,
            "created_at": format_datetime(review.created_at)
        }
