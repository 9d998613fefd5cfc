"""
Models: OrderReview, Report
Tables: order_reviews, reports

Customer reviews awaiting moderation, and complaints raised by customers or
therapists.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class OrderReview(db.Model):
    """ A customer's rating of a completed order... """

    # Table Name
    __tablename__ = "order_reviews"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    order_id = db.Column(db.String(36), db.ForeignKey("orders.id"), nullable = False, unique = True)

    user_id = db.Column(db.String(36), db.ForeignKey("user_profiles.id"), nullable = False)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, index = True)

    rating = db.Column(db.Integer, nullable = False)

    comment = db.Column(db.Text, nullable = True)

    min_user_level = db.Column(db.Integer, nullable = False, default = 0)

    status = db.Column(db.String(20), nullable = False, default = "pending", index = True)

    reject_reason = db.Column(db.Text, nullable = True)

    reviewed_by = db.Column(db.String(36), nullable = True)

    reviewed_at = db.Column(db.DateTime(timezone = True), nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    order = db.relationship("Order", lazy = "joined")
    user = db.relationship("UserProfile", lazy = "joined")
    girl = db.relationship("Girl", lazy = "joined")

    def __repr__(self):
        return f"<OrderReview {self.order_id} {self.rating}>"





class Report(db.Model):
    """ A complaint about a customer or therapist... """

    # Table Name
    __tablename__ = "reports"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    reporter_id = db.Column(db.String(36), nullable = False)

    reporter_role = db.Column(db.String(20), nullable = False, doc = "customer | girl")

    target_id = db.Column(db.String(36), nullable = False)

    target_role = db.Column(db.String(20), nullable = False)

    order_id = db.Column(db.String(36), db.ForeignKey("orders.id"), nullable = True)

    report_type = db.Column(db.String(50), nullable = False)

    description = db.Column(db.Text, nullable = True)

    screenshot_urls = db.Column(db.JSON, nullable = False, default = list)

    status = db.Column(db.String(20), nullable = False, default = "pending", index = True)

    admin_notes = db.Column(db.Text, nullable = True)

    resolved_by = db.Column(db.String(36), nullable = True)

    resolved_at = db.Column(db.DateTime(timezone = True), nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    def __repr__(self):
        return f"<Report {self.report_type} {self.status}>"
