"""
Model: AppConfig
Table: app_configs

Versioned runtime settings addressed by namespace, key and scope.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class AppConfig(db.Model):
    """ A runtime setting... """

    # Table Name
    __tablename__ = "app_configs"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    namespace = db.Column(db.String(50), nullable = False)

    config_key = db.Column(db.String(100), nullable = False)

    scope = db.Column(db.String(20), nullable = False, default = "app")

    scope_id = db.Column(db.String(50), nullable = False)

    value_json = db.Column(db.JSON, nullable = False, default = dict)

    description = db.Column(db.Text, nullable = True)

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    version = db.Column(db.Integer, nullable = False, default = 1)

    updated_by = db.Column(db.String(36), nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    __table_args__ = (
        db.UniqueConstraint("namespace", "config_key", "scope", "scope_id", name = "uq_app_configs_address"),
    )

    def __repr__(self):
        return f"<AppConfig {self.namespace}.{self.config_key}>"
