"""
Review Controller
"""

# Services
from .services.review_service import ReviewService





class ReviewController:

    def get_stats(self) -> dict:
        return ReviewService().get_stats()


    def list_reviews(self, args) -> dict:
        return ReviewService().list_reviews(args)


    def approve(self, operator, review_id: str) -> dict:
        return ReviewService().approve(operator, review_id)


    def reject(self, operator, review_id: str, reason: str) -> dict:
        return ReviewService().reject(operator, review_id, reason)


    def update_level(self, review_id: str, min_user_level: int) -> dict:
        return ReviewService().update_level(review_id, min_user_level)
