"""
Media Query Service

Handles:
    - Media list with filters, search, sort and paging
    - Moderation counters
    - Signed URLs for private media
"""

# SQLAlchemy
from sqlalchemy import func, or_

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl_media import GirlMedia
from ...models.girl import Girl

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, parse_datetime, parse_paging, paginate


SORT_COLUMNS = {
    "created_at": GirlMedia.created_at,
    "reviewed_at": GirlMedia.reviewed_at,
    "sort_order": GirlMedia.sort_order
}





class MediaQueryService:

    def list_media(self, args) -> dict:
        """
        Fetch media list

        Args:
            args: status, girl_id, kind, min_user_level, start_date, end_date,
                  search, sort_by, sort_order, page, limit
        """

        page, limit = parse_paging(args)
        query = GirlMedia.query.join(Girl, Girl.id == GirlMedia.girl_id)

        status = args.get("status")
        if status:
            if status not in constants.MEDIA_STATUSES:
                raise ValidationException(messages.ERROR['INVALID_MEDIA_STATUS'])
            query = query.filter(GirlMedia.status == status)

        if args.get("girl_id"):
            query = query.filter(GirlMedia.girl_id == args.get("girl_id"))

        if args.get("kind"):
            query = query.filter(GirlMedia.kind == args.get("kind"))

        if args.get("min_user_level") not in (None, ""):
            try:
                query = query.filter(GirlMedia.min_user_level == int(args.get("min_user_level")))
            except ValueError:
                raise ValidationException(
                    messages.ERROR['INVALID_RANGE'].format("min_user_level", constants.MIN_USER_LEVEL, constants.MAX_USER_LEVEL)
                )

        try:
            start_date = parse_datetime(args.get("start_date"))
            end_date = parse_datetime(args.get("end_date"))
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_DATE'])

        if start_date:
            query = query.filter(GirlMedia.created_at >= start_date)
        if end_date:
            query = query.filter(GirlMedia.created_at <= end_date)

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            if search.isdigit():
                query = query.filter(Girl.girl_number == int(search))
            else:
                query = query.filter(or_(Girl.name.ilike(f"%{search}%"), Girl.username.ilike(f"%{search}%")))

        column = SORT_COLUMNS.get(args.get("sort_by"), GirlMedia.created_at)
        column = column.asc() if args.get("sort_order") == "asc" else column.desc()

        items, meta = paginate(query.order_by(column, GirlMedia.id), page, limit)

        return {
            "media": [self.serialize(item) for item in items],
            "pagination": meta
        }



    def get_stats(self) -> dict:
        counts = dict(
            db.session.query(GirlMedia.status, func.count(GirlMedia.id))
            .group_by(GirlMedia.status)
            .all()
        )

        return {
            "pending": counts.get("pending", 0),
            "approved": counts.get("approved", 0),
            "rejected": counts.get("rejected", 0),
            "total": sum(counts.values())
        }



    def create_signed_url(self, key: str, bucket: str, expires_in: int) -> dict:
        url = factory.get_storage_client().create_signed_url(bucket, key, expires_in)

        return {
            "signed_url": url,
            "bucket": bucket,
            "key": key,
            "expires_in": expires_in
        }



    @staticmethod
    def serialize(media: GirlMedia) -> dict:
        girl = media.girl

        return {
            "id": media.id,
            "girl_id": media.girl_id,
            "girl_number": girl.girl_number if girl else None,
            "girl_name": girl.name if girl else None,
            "kind": media.kind,
            "provider": media.provider,
            "storage_key": media.storage_key,
            "thumb_key": media.thumb_key,
            "bucket": constants.BUCKET_GIRLS_MEDIA if media.status == "approved" else constants.BUCKET_TMP_UPLOADS,
            "meta": media.meta,
            "min_user_level": media.min_user_level,
            "sort_order": media.sort_order,
            "status": media.status,
            "reviewed_by": media.reviewed_by,
            "reviewed_at": format_datetime(media.reviewed_at),
            "reject_reason": media.reject_reason,
            "created_at": format_datetime(media.created_at)
        }
