"""
Model: Order
Table: orders

A booking. Service name, duration and price are snapshotted at booking
time so later catalogue edits never change an existing order.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class Order(db.Model):
    """ A customer booking... """

    # Table Name
    __tablename__ = "orders"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    order_number = db.Column(db.String(32), nullable = False, unique = True, index = True)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, index = True)

    user_id = db.Column(db.String(36), db.ForeignKey("user_profiles.id"), nullable = False, index = True)

    service_id = db.Column(db.Integer, db.ForeignKey("services.id"), nullable = True)

    service_duration_id = db.Column(db.Integer, db.ForeignKey("service_durations.id"), nullable = True)

    service_name = db.Column(db.JSON, nullable = False, default = dict, doc = "Localised service title snapshot.")

    service_duration = db.Column(db.Integer, nullable = False, doc = "Minutes.")

    service_price = db.Column(db.Numeric(10, 2), nullable = False)

    address_snapshot = db.Column(
        db.JSON,
        nullable = True,
        doc = "Delivery address; contact name/phone under contact.n / contact.p."
    )

    currency = db.Column(db.String(3), nullable = False, default = "THB")

    service_fee = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    travel_fee = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    extra_fee = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    discount_amount = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    total_amount = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    pricing_snapshot = db.Column(db.JSON, nullable = True)

    status = db.Column(
        db.String(20),
        nullable = False,
        default = "pending",
        index = True,
        doc = "pending | confirmed | en_route | arrived | in_service | completed | cancelled"
    )

    scheduled_start_at = db.Column(db.DateTime(timezone = True), nullable = True)

    completed_at = db.Column(db.DateTime(timezone = True), nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now, index = True)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    girl = db.relationship("Girl", lazy = "joined")
    user = db.relationship("UserProfile", lazy = "joined")

    def __repr__(self):
        return f"<Order {self.order_number} {self.status}>"
