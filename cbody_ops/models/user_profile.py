"""
Models: UserProfile, UserLoginEvent
Tables: user_profiles, user_login_events

Customer accounts and their login history.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class UserProfile(db.Model):
    """ A customer... """

    # Table Name
    __tablename__ = "user_profiles"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    display_name = db.Column(db.String(50), nullable = True)

    username = db.Column(db.String(50), nullable = True, index = True)

    avatar_url = db.Column(db.Text, nullable = True)

    country_code = db.Column(db.String(5), nullable = True)

    language_code = db.Column(db.String(5), nullable = False, default = "en", doc = "en | zh | th")

    timezone = db.Column(db.String(50), nullable = True)

    level = db.Column(db.Integer, nullable = False, default = 1)

    credit_score = db.Column(db.Integer, nullable = False, default = 100)

    is_banned = db.Column(db.Boolean, nullable = False, default = False)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    def __repr__(self):
        return f"<UserProfile {self.username}>"





class UserLoginEvent(db.Model):
    """ One successful customer login... """

    # Table Name
    __tablename__ = "user_login_events"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    user_id = db.Column(db.String(36), db.ForeignKey("user_profiles.id"), nullable = False, index = True)

    ip_address = db.Column(db.String(64), nullable = True)

    device_info = db.Column(db.Text, nullable = True)

    logged_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    def __repr__(self):
        return f"<UserLoginEvent {self.user_id} {self.logged_at}>"
