"""
Manage Media Service

Handles:
    - Reject (single and batch)
    - Delete (row first, then files or hosted video)
    - Reorder, level update, restore
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl_media import GirlMedia

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import AppException, ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now

# Serializer
from .media_query_service import MediaQueryService
from .approve_media_service import is_hosted_video, hosted_video_uid, live_photo_keys

logger = logging.getLogger(__name__)





class ManageMediaService:

    def _get_media(self, media_id: str) -> GirlMedia:
        media = GirlMedia.query.filter_by(id = media_id).first()

        if not media:
            raise NotFoundException(messages.ERROR['MEDIA_NOT_FOUND'])

        return media


    def _commit(self, error_code: str):
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = error_code,
                message = messages.ERROR['MEDIA_UPDATE_FAILED'],
                details = str(errors)
            )



    def reject(self, operator, media_id: str, reason: str) -> dict:
        """
        Reject a media item; its files stay in tmp-uploads
        """

        media = self._get_media(media_id)

        if media.status == "rejected":
            raise ServiceException(
                error_code = "MEDIA_ALREADY_REJECTED",
                message = messages.ERROR['MEDIA_ALREADY_REJECTED'],
                status_code = 409
            )

        media.status = "rejected"
        media.reject_reason = reason.strip()
        media.reviewed_by = operator.id
        media.reviewed_at = utc_now()
        self._commit("MEDIA_REJECT_FAILED")

        return {
            "media": MediaQueryService.serialize(media),
            "message": messages.SUCCESS['MEDIA_REJECTED']
        }



    def batch_reject(self, operator, media_ids: list, reason: str) -> dict:
        succeeded, failed = [], []

        for media_id in media_ids:
            try:
                self.reject(operator, media_id, reason)
                succeeded.append(media_id)

            except AppException as error:
                failed.append({"id": media_id, "error": error.message})

        message = messages.SUCCESS['BATCH_DONE'].format(len(succeeded))
        if failed:
            message = messages.SUCCESS['BATCH_PARTIAL'].format(len(succeeded), len(failed))

        return {"succeeded": succeeded, "failed": failed, "message": message}



    def delete(self, media_id: str) -> dict:
        """
        Delete the row, then its files

        File or video-host failures after the row is gone are logged only.
        """

        media = self._get_media(media_id)

        bucket = constants.BUCKET_GIRLS_MEDIA if media.status == "approved" else constants.BUCKET_TMP_UPLOADS
        keys = [media.storage_key, media.thumb_key, *live_photo_keys(media)]
        hosted_uid = hosted_video_uid(media) if is_hosted_video(media) else None

        db.session.delete(media)
        self._commit("MEDIA_DELETE_FAILED")

        files_removed = True
        if hosted_uid:
            files_removed = factory.get_stream_client().delete_video(hosted_uid)

        else:
            keys = sorted({key for key in keys if key})
            try:
                factory.get_storage_client().delete_files(bucket, keys)
            except AppException as error:
                files_removed = False
                logger.error("❌ Media %s deleted but files remain in %s: %s", media_id, bucket, error.details)

        return {
            "id": media_id,
            "files_removed": files_removed,
            "message": messages.SUCCESS['MEDIA_DELETED']
        }



    def reorder(self, girl_id: str, items: list) -> dict:
        """
        Set sort_order for media of one therapist
        """

        ids = [item["id"] for item in items]
        media_by_id = {
            media.id: media
            for media in GirlMedia.query.filter(GirlMedia.id.in_(ids), GirlMedia.girl_id == girl_id).all()
        }

        missing = [media_id for media_id in ids if media_id not in media_by_id]
        if missing:
            raise ValidationException(
                message = messages.ERROR['MEDIA_NOT_OWNED'],
                details = ", ".join(missing)
            )

        for item in items:
            media_by_id[item["id"]].sort_order = item["sort_order"]

        self._commit("MEDIA_REORDER_FAILED")

        return {"girl_id": girl_id, "updated": len(items), "message": messages.SUCCESS['MEDIA_REORDERED']}



    def update_level(self, media_id: str, min_user_level: int) -> dict:
        media = self._get_media(media_id)

        if media.status != "approved":
            raise ServiceException(
                error_code = "MEDIA_NOT_APPROVED",
                message = messages.ERROR['MEDIA_NOT_APPROVED']
            )

        media.min_user_level = min_user_level
        self._commit("MEDIA_UPDATE_FAILED")

        return {
            "media": MediaQueryService.serialize(media),
            "message": messages.SUCCESS['MEDIA_UPDATED']
        }



    def restore(self, media_id: str) -> dict:
        """
        Rejected -> pending
        """

        media = self._get_media(media_id)

        if media.status != "rejected":
            raise ServiceException(
                error_code = "MEDIA_NOT_REJECTED",
                message = messages.ERROR['MEDIA_NOT_REJECTED']
            )

        media.status = "pending"
        media.reject_reason = None
        media.reviewed_by = None
        media.reviewed_at = None
        self._commit("MEDIA_RESTORE_FAILED")

        return {
            "media": MediaQueryService.serialize(media),
            "message": messages.SUCCESS['MEDIA_RESTORED']
        }
