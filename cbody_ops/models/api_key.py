"""
Models: ApiKey, ApiRequestLog
Tables: api_keys, api_request_logs

Partner API credentials (only the SHA-256 hash is stored) and the request
log of the partner endpoint.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class ApiKey(db.Model):
    """ Partner credential... """

    # Table Name
    __tablename__ = "api_keys"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    name = db.Column(db.String(100), nullable = False)

    key_hash = db.Column(db.String(64), nullable = False, unique = True, index = True)

    key_prefix = db.Column(db.String(16), nullable = True, doc = "First characters, for display only.")

    is_active = db.Column(db.Boolean, nullable = False, default = True)

    rate_limit_per_minute = db.Column(db.Integer, nullable = True)

    rate_limit_per_hour = db.Column(db.Integer, nullable = True)

    last_used_at = db.Column(db.DateTime(timezone = True), nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    def __repr__(self):
        return f"<ApiKey {self.name}>"





class ApiRequestLog(db.Model):
    """ One served partner request... """

    # Table Name
    __tablename__ = "api_request_logs"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    api_key_id = db.Column(db.String(36), db.ForeignKey("api_keys.id"), nullable = True, index = True)

    endpoint = db.Column(db.String(200), nullable = False)

    method = db.Column(db.String(10), nullable = False)

    status_code = db.Column(db.Integer, nullable = False)

    ip_address = db.Column(db.String(64), nullable = True)

    user_agent = db.Column(db.Text, nullable = True)

    response_time_ms = db.Column(db.Integer, nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    def __repr__(self):
        return f"<ApiRequestLog {self.method} {self.endpoint} {self.status_code}>"
