"""
Models: Category, Service, ServiceDuration, GirlService, GirlServiceDuration
Tables: categories, services, service_durations, admin_girl_services,
        girl_service_durations

Service catalogue: a service has priced durations, and a therapist is bound
to the services she is qualified to deliver. A binding can narrow the
durations she offers through girl_service_durations.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import utc_now





class Category(db.Model):
    """ Service / therapist category... """

    # Table Name
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    code = db.Column(db.String(50), nullable = False, unique = True)

    name = db.Column(db.JSON, nullable = False, default = dict, doc = "Localised names keyed by language.")

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    sort_order = db.Column(db.Integer, nullable = False, default = 999)

    def __repr__(self):
        return f"<Category {self.code}>"





class Service(db.Model):
    """ A bookable service... """

    # Table Name
    __tablename__ = "services"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    code = db.Column(db.String(50), nullable = False, unique = True)

    category_id = db.Column(db.Integer, db.ForeignKey("categories.id"), nullable = True, index = True)

    title = db.Column(db.JSON, nullable = False, default = dict, doc = "Localised titles keyed by language.")

    description = db.Column(db.JSON, nullable = True)

    badge = db.Column(db.String(20), nullable = True, doc = "TOP_PICK | HOT | NEW")

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    is_visible_to_thai = db.Column(db.Boolean, nullable = False, default = True)

    is_visible_to_english = db.Column(db.Boolean, nullable = False, default = True)

    min_user_level = db.Column(db.Integer, nullable = False, default = 0)

    total_sales = db.Column(db.Integer, nullable = False, default = 0)

    sort_order = db.Column(db.Integer, nullable = False, default = 0)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    category = db.relationship("Category", lazy = "joined")
    durations = db.relationship("ServiceDuration", back_populates = "service", lazy = "select")

    def __repr__(self):
        return f"<Service {self.code}>"





class ServiceDuration(db.Model):
    """ A priced duration of a service... """

    # Table Name
    __tablename__ = "service_durations"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    service_id = db.Column(db.Integer, db.ForeignKey("services.id"), nullable = False, index = True)

    duration_minutes = db.Column(db.Integer, nullable = False)

    default_price = db.Column(db.Numeric(10, 2), nullable = False)

    min_price = db.Column(db.Numeric(10, 2), nullable = True)

    max_price = db.Column(db.Numeric(10, 2), nullable = True)

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    service = db.relationship("Service", back_populates = "durations", lazy = "joined")

    __table_args__ = (
        db.UniqueConstraint("service_id", "duration_minutes", name = "uq_service_durations_service_minutes"),
    )

    def __repr__(self):
        return f"<ServiceDuration {self.service_id} {self.duration_minutes}min>"





class GirlService(db.Model):
    """ Therapist to service binding... """

    # Table Name
    __tablename__ = "admin_girl_services"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, index = True)

    service_id = db.Column(db.Integer, db.ForeignKey("services.id"), nullable = False)

    admin_id = db.Column(db.String(36), nullable = True, doc = "Admin who last bound or unbound.")

    is_qualified = db.Column(db.Boolean, nullable = False, default = True)

    notes = db.Column(db.Text, nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    __table_args__ = (
        db.UniqueConstraint("girl_id", "service_id", name = "uq_admin_girl_services_girl_service"),
    )

    def __repr__(self):
        return f"<GirlService {self.girl_id} {self.service_id}>"





class GirlServiceDuration(db.Model):
    """ A duration a bound therapist offers... """

    # Table Name
    __tablename__ = "girl_service_durations"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    admin_girl_service_id = db.Column(
        db.Integer,
        db.ForeignKey("admin_girl_services.id"),
        nullable = False,
        index = True
    )

    service_duration_id = db.Column(db.Integer, db.ForeignKey("service_durations.id"), nullable = False)

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    def __repr__(self):
        return f"<GirlServiceDuration {self.admin_girl_service_id} {self.service_duration_id}>"
