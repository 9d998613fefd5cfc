"""
Report Service

Handles:
    - Report counters
    - Report list and detail
    - Resolve (only from pending)

Reporter and target ids point at user_profiles for customers and at
girls for therapists, so parties are resolved per role.
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import or_, func

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.review import Report
from ...models.girl import Girl
from ...models.user_profile import UserProfile
from ...models.order import Order

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now, format_datetime, parse_paging, paginate

logger = logging.getLogger(__name__)





class ReportService:

    def get_stats(self) -> dict:
        by_status = dict(
            db.session.query(Report.status, func.count(Report.id)).group_by(Report.status).all()
        )
        by_role = dict(
            db.session.query(Report.reporter_role, func.count(Report.id)).group_by(Report.reporter_role).all()
        )

        return {
            "pending": by_status.get("pending", 0),
            "resolved": by_status.get("resolved", 0),
            "total": sum(by_status.values()),
            "by_reporter_role": {role: by_role.get(role, 0) for role in constants.REPORTER_ROLES}
        }



    def list_reports(self, args) -> dict:
        """
        Fetch report list, pending first then newest

        Args:
            args: status, reporter_role, search (type, description), page, limit
        """

        page, limit = parse_paging(args)
        query = Report.query

        status = args.get("status")
        if status:
            if status not in constants.REPORT_STATUSES:
                raise ValidationException(messages.ERROR['INVALID_REPORT_STATUS'])
            query = query.filter(Report.status == status)

        reporter_role = args.get("reporter_role")
        if reporter_role:
            if reporter_role not in constants.REPORTER_ROLES:
                raise ValidationException(messages.ERROR['INVALID_REPORTER_ROLE'])
            query = query.filter(Report.reporter_role == reporter_role)

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Report.report_type.ilike(pattern),
                    Report.description.ilike(pattern)
                )
            )

        reports, meta = paginate(query.order_by(Report.created_at.desc(), Report.id), page, limit)
        parties = self._parties(reports)

        return {
            "reports": [self.serialize(report, parties) for report in reports],
            "pagination": meta
        }



    def get_report(self, report_id: str) -> dict:
        report = self._get_report(report_id)

        data = self.serialize(report, self._parties([report]))

        order = Order.query.filter_by(id = report.order_id).first() if report.order_id else None
        data["order"] = {
            "id": order.id,
            "order_number": order.order_number,
            "status": order.status
        } if order else None

        return data



    def resolve(self, operator, report_id: str, admin_notes: str = None) -> dict:
        report = self._get_report(report_id)

        if report.status != "pending":
            raise ServiceException(
                error_code = "REPORT_NOT_PENDING",
                message = messages.ERROR['REPORT_NOT_PENDING'],
                status_code = 409
            )

        try:
            report.status = "resolved"
            report.admin_notes = admin_notes
            report.resolved_by = operator.id
            report.resolved_at = utc_now()
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "REPORT_UPDATE_FAILED",
                message = messages.ERROR['REPORT_UPDATE_FAILED'],
                details = str(errors)
            )

        logger.info("📋 Report %s resolved by %s", report.id, operator.id)

        return {
            "report": self.serialize(report, self._parties([report])),
            "message": messages.SUCCESS['REPORT_RESOLVED']
        }



    def _get_report(self, report_id: str) -> Report:
        report = Report.query.filter_by(id = report_id).first()

        if not report:
            raise NotFoundException(messages.ERROR['REPORT_NOT_FOUND'])

        return report



    def _parties(self, reports: list) -> dict:
        """ {(role, id): {...}} for every reporter and target... """

        user_ids, girl_ids = set(), set()
        for report in reports:
            for role, party_id in ((report.reporter_role, report.reporter_id), (report.target_role, report.target_id)):
                (girl_ids if role == "girl" else user_ids).add(party_id)

        parties = {}

        for user in UserProfile.query.filter(UserProfile.id.in_(user_ids)).all():
            parties[("customer", user.id)] = {
                "id": user.id,
                "name": user.display_name or user.username,
                "avatar_url": user.avatar_url
            }

        for girl in Girl.query.filter(Girl.id.in_(girl_ids)).all():
            parties[("girl", girl.id)] = {
                "id": girl.id,
                "name": girl.name,
                "girl_number": girl.girl_number,
                "avatar_url": girl.avatar_url
            }

        return parties



    @staticmethod
    def serialize(report: Report, parties: dict = None) -> dict:
        parties = parties or {}

        return {
            "id": report.id,
            "reporter_id": report.reporter_id,
            "reporter_role": report.reporter_role,
            "reporter": parties.get((report.reporter_role, report.reporter_id)),
            "target_id": report.target_id,
            "target_role": report.target_role,
            "target": parties.get((report.target_role, report.target_id)),
            "order_id": report.order_id,
            "report_type": report.report_type,
            "description": report.description,
            "screenshot_urls": report.screenshot_urls or [],
            "status": report.status,
            "admin_notes": report.admin_notes,
            "resolved_by": report.resolved_by,
            "resolved_at": format_datetime(report.resolved_at),
            "created_at": format_datetime(report.created_at)
        }
