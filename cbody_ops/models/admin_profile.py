"""
Model: AdminProfile
Table: admin_profiles

Back office staff account. The id is the auth provider's user id; the role
drives every permission check.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import utc_now





class AdminProfile(db.Model):
    """ A back office admin... """

    # Table Name
    __tablename__ = "admin_profiles"

    id = db.Column(db.String(36), primary_key = True, doc = "Auth provider user id.")

    display_name = db.Column(db.String(100), nullable = False)

    role = db.Column(
        db.String(20),
        nullable = False,
        doc = "superadmin | admin | finance | support"
    )

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    def __repr__(self):
        return f"<AdminProfile {self.display_name} ({self.role})>"
