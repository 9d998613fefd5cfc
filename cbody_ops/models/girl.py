"""
Models: City, Girl, GirlStatus, GirlWorkSession (+ girl_categories link)
Tables: cities, girls, girl_categories, girls_status, girl_work_sessions

Therapists ("girls" in the data model), their live status and their online
sessions.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class City(db.Model):
    """ Service city... """

    # Table Name
    __tablename__ = "cities"

    id = db.Column(db.Integer, primary_key = True, autoincrement = True)

    code = db.Column(db.String(20), nullable = False, unique = True)

    name = db.Column(db.JSON, nullable = False, default = dict, doc = "Localised names keyed by language.")

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    sort_order = db.Column(db.Integer, nullable = False, default = 999)

    def __repr__(self):
        return f"<City {self.code}>"





girl_categories = db.Table(
    "girl_categories",
    db.Column("girl_id", db.String(36), db.ForeignKey("girls.id"), primary_key = True),
    db.Column("category_id", db.Integer, db.ForeignKey("categories.id"), primary_key = True)
)





class Girl(db.Model):
    """ A therapist... """

    # Table Name
    __tablename__ = "girls"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    user_id = db.Column(db.String(36), nullable = True, doc = "Auth user backing the therapist app login.")

    girl_number = db.Column(db.Integer, nullable = False, unique = True, index = True)

    name = db.Column(db.String(100), nullable = False)

    username = db.Column(db.String(100), nullable = True)

    avatar_url = db.Column(db.Text, nullable = True)

    city_id = db.Column(db.Integer, db.ForeignKey("cities.id"), nullable = True, index = True)

    profile = db.Column(db.JSON, nullable = True, doc = "Localised bio keyed by language.")

    tags = db.Column(db.JSON, nullable = True)

    birth_date = db.Column(db.Date, nullable = True)

    height = db.Column(db.Integer, nullable = True)

    weight = db.Column(db.Integer, nullable = True)

    measurements = db.Column(db.String(15), nullable = True)

    gender = db.Column(db.Integer, nullable = False, default = 0, doc = "0 female, 1 male")

    languages = db.Column(db.JSON, nullable = True)

    badge = db.Column(db.String(20), nullable = True, doc = "new | hot | top_rated")

    rating = db.Column(db.Numeric(3, 2), nullable = False, default = 0)

    total_sales = db.Column(db.Integer, nullable = False, default = 0)

    max_travel_distance = db.Column(db.Integer, nullable = False, default = 10, doc = "Kilometres.")

    trust_score = db.Column(db.Integer, nullable = False, default = 80)

    is_visible_to_thai = db.Column(db.Boolean, nullable = False, default = True)

    is_verified = db.Column(db.Boolean, nullable = False, default = False)

    is_blocked = db.Column(db.Boolean, nullable = False, default = False)

    sort_order = db.Column(db.Integer, nullable = False, default = 999)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    city = db.relationship("City", lazy = "joined")
    categories = db.relationship("Category", secondary = girl_categories, lazy = "select")
    live_status = db.relationship("GirlStatus", uselist = False, lazy = "joined", back_populates = "girl")

    def __repr__(self):
        return f"<Girl #{self.girl_number} {self.name}>"





class GirlStatus(db.Model):
    """ Live availability of a therapist... """

    # Table Name
    __tablename__ = "girls_status"

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), primary_key = True)

    status = db.Column(db.String(20), nullable = False, default = "offline", doc = "available | busy | offline")

    current_lat = db.Column(db.Float, nullable = True)

    current_lng = db.Column(db.Float, nullable = True)

    next_available_time = db.Column(db.DateTime(timezone = True), nullable = True)

    cooldown_until_at = db.Column(db.DateTime(timezone = True), nullable = True)

    last_online_at = db.Column(db.DateTime(timezone = True), nullable = True)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    girl = db.relationship("Girl", back_populates = "live_status")

    def __repr__(self):
        return f"<GirlStatus {self.girl_id} {self.status}>"





class GirlWorkSession(db.Model):
    """ An online period; ended_at is null while the therapist is still online... """

    # Table Name
    __tablename__ = "girl_work_sessions"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, index = True)

    started_at = db.Column(db.DateTime(timezone = True), nullable = False)

    ended_at = db.Column(db.DateTime(timezone = True), nullable = True)

    def __repr__(self):
        return f"<GirlWorkSession {self.girl_id} {self.started_at}>"
