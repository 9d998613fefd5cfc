"""
Models: AdminOperationLog, AuditLog
Tables: admin_operation_logs, audit_logs

Two audit trails: admin/customer account operations, and data cleanup
actions performed on chats.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class AdminOperationLog(db.Model):
    """ Who changed which account, and how... """

    # Table Name
    __tablename__ = "admin_operation_logs"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    operator_id = db.Column(db.String(36), db.ForeignKey("admin_profiles.id"), nullable = False, index = True)

    target_admin_id = db.Column(
        db.String(36),
        nullable = True,
        doc = "Admin profile or customer id the operation touched."
    )

    operation_type = db.Column(db.String(50), nullable = False)

    operation_details = db.Column(db.JSON, nullable = False, default = dict)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now, index = True)

    def __repr__(self):
        return f"<AdminOperationLog {self.operation_type}>"





class AuditLog(db.Model):
    """ Generic action log (chat cleanup)... """

    # Table Name
    __tablename__ = "audit_logs"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    admin_id = db.Column(db.String(36), nullable = False, index = True)

    action = db.Column(db.String(50), nullable = False)

    target_type = db.Column(db.String(50), nullable = False)

    target_id = db.Column(db.String(36), nullable = True)

    payload = db.Column(db.JSON, nullable = False, default = dict)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    def __repr__(self):
        return f"<AuditLog {self.action} {self.target_type}>"
