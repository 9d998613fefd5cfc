"""
Audit Trail Writers

Audit rows are written after the audited change is committed. A failed
audit write is logged and does not undo or fail the operation.
"""

# Python Packages
import logging

# Database
from ..config.database import db

# Models
from ..models.audit import AdminOperationLog, AuditLog

# Helpers
from .helpers import utc_now

logger = logging.getLogger(__name__)





def record_admin_operation(operator_id: str, target_id: str, operation_type: str, details: dict = None) -> bool:
    """
    Append to admin_operation_logs

    Returns:
        bool: True when the row was written
    """

    payload = dict(details or {})
    payload.setdefault("timestamp", utc_now().isoformat())

    try:
        db.session.add(AdminOperationLog(
            operator_id = operator_id,
            target_admin_id = target_id,
            operation_type = operation_type,
            operation_details = payload
        ))
        db.session.commit()
        return True

    except Exception as e:
        db.session.rollback()
        logger.error("❌ Audit write failed (%s on %s): %s", operation_type, target_id, e)
        return False



def record_audit_log(admin_id: str, action: str, target_type: str, target_id: str = None, payload: dict = None) -> bool:
    """
    Append to audit_logs

    Returns:
        bool: True when the row was written
    """

    try:
        db.session.add(AuditLog(
            admin_id = admin_id,
            action = action,
            target_type = target_type,
            target_id = target_id,
            payload = payload or {}
        ))
        db.session.commit()
        return True

    except Exception as e:
        db.session.rollback()
        logger.error("❌ Audit write failed (%s %s): %s", action, target_type, e)
        return False
