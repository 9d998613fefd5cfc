"""
Approve Media Service

Handles:
    - Approve one item (cap check, file promotion, status change)
    - Batch approve with per-item results

Promotion copies files from tmp-uploads to girls-media under
<girl_id>/<media_id>_<suffix>. Hosted videos have no files to move.
Sources leave tmp-uploads only once the row is committed; any failure
before that removes what was already copied to girls-media.
"""

# Python Packages
import logging
import mimetypes
import posixpath

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.girl_media import GirlMedia

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import AppException, ServiceException, NotFoundException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now

# Serializer
from .media_query_service import MediaQueryService

logger = logging.getLogger(__name__)





def is_hosted_video(media: GirlMedia) -> bool:
    return media.provider == "cloudflare" or bool((media.meta or {}).get("cloudflare", {}).get("uid"))



def hosted_video_uid(media: GirlMedia):
    """ Video host uid; rows without meta.cloudflare.uid keep it in storage_key... """

    return (media.meta or {}).get("cloudflare", {}).get("uid") or media.storage_key



def live_photo_keys(media: GirlMedia) -> tuple:
    """ (image_key, video_key) of a live photo, from meta.live... """

    live = (media.meta or {}).get("live") or {}
    return live.get("image_key"), live.get("video_key")





class Promotion:
    """
    Files copied to girls-media for one approval

    Tracks copied targets (removed again on failure) and consumed sources
    (removed from tmp-uploads after the commit).
    """

    def __init__(self, storage):
        self.storage = storage
        self.targets = []
        self.sources = []


    def copy(self, source_key: str, target_key: str):
        body = self.storage.download(constants.BUCKET_TMP_UPLOADS, source_key)
        content_type = mimetypes.guess_type(target_key)[0]

        self.storage.upload(constants.BUCKET_GIRLS_MEDIA, target_key, body, content_type)

        self.targets.append(target_key)
        self.sources.append(source_key)


    def discard(self):
        if not self.targets:
            return

        try:
            self.storage.delete_files(constants.BUCKET_GIRLS_MEDIA, self.targets)
        except AppException as error:
            logger.error("❌ Could not roll back %s: %s", self.targets, error.details or error.message)


    def release_sources(self):
        if not self.sources:
            return

        try:
            self.storage.delete_files(constants.BUCKET_TMP_UPLOADS, self.sources)
        except AppException as error:
            logger.warning("⚠️ Could not remove %s from tmp-uploads: %s", self.sources, error.details or error.message)





class ApproveMediaService:

    def __init__(self):
        self._storage = None


    @property
    def storage(self):
        if self._storage is None:
            self._storage = factory.get_storage_client()
        return self._storage



    def approve(self, operator, media_id: str, min_user_level: int = 0) -> dict:
        """
        Approve a media item

        Args:
            operator (AdminProfile)
            media_id (str)
            min_user_level (int): customer level needed to see it (0-10)

        Returns:
            dict
        """

        media = GirlMedia.query.filter_by(id = media_id).first()

        if not media:
            raise NotFoundException(messages.ERROR['MEDIA_NOT_FOUND'])

        if media.status == "approved":
            raise ServiceException(
                error_code = "MEDIA_ALREADY_APPROVED",
                message = messages.ERROR['MEDIA_ALREADY_APPROVED'],
                status_code = 409
            )

        self._check_cap(media)

        meta = dict(media.meta or {})
        promotion = Promotion(self.storage)

        try:
            if is_hosted_video(media):
                cloudflare = dict(meta.get("cloudflare") or {})
                cloudflare["uid"] = hosted_video_uid(media)
                cloudflare["ready"] = True
                meta["cloudflare"] = cloudflare
                storage_key, thumb_key = media.storage_key, media.thumb_key

            elif media.kind == "live_photo":
                storage_key, thumb_key = self._promote_live_photo(media, meta, promotion)

            else:
                storage_key, thumb_key = self._promote_file(media, promotion)

        except AppException:
            promotion.discard()
            raise

        try:
            media.storage_key = storage_key
            media.thumb_key = thumb_key
            media.meta = meta
            media.min_user_level = min_user_level
            media.status = "approved"
            media.reject_reason = None
            media.reviewed_by = operator.id
            media.reviewed_at = utc_now()
            db.session.commit()

        except Exception as errors:
            db.session.rollback()
            promotion.discard()

            raise ServiceException(
                error_code = "MEDIA_APPROVE_FAILED",
                message = messages.ERROR['MEDIA_APPROVE_FAILED'],
                details = str(errors)
            )

        promotion.release_sources()

        logger.info("✅ Media %s approved (girl %s)", media.id, media.girl_id)

        return {
            "media": MediaQueryService.serialize(media),
            "message": messages.SUCCESS['MEDIA_APPROVED']
        }



    def batch_approve(self, operator, media_ids: list, min_user_level: int = 0) -> dict:
        """
        Approve several items; one failure does not stop the rest
        """

        succeeded, failed = [], []

        for media_id in media_ids:
            try:
                self.approve(operator, media_id, min_user_level)
                succeeded.append(media_id)

            except AppException as error:
                failed.append({"id": media_id, "error": error.message})

        message = messages.SUCCESS['BATCH_DONE'].format(len(succeeded))
        if failed:
            message = messages.SUCCESS['BATCH_PARTIAL'].format(len(succeeded), len(failed))

        return {"succeeded": succeeded, "failed": failed, "message": message}



    def _check_cap(self, media: GirlMedia):
        """ At most MEDIA_MAX_PER_GIRL pending + approved items per therapist... """

        count = GirlMedia.query.filter(
            GirlMedia.girl_id == media.girl_id,
            GirlMedia.status.in_(("pending", "approved")),
            GirlMedia.id != media.id
        ).count()

        if count >= constants.MEDIA_MAX_PER_GIRL:
            raise ServiceException(
                error_code = "MEDIA_LIMIT_REACHED",
                message = messages.ERROR['MEDIA_LIMIT_REACHED'].format(constants.MEDIA_MAX_PER_GIRL)
            )



    def _promote_file(self, media: GirlMedia, promotion: Promotion):
        if not media.storage_key:
            raise ServiceException(
                error_code = "MEDIA_FILE_MISSING",
                message = messages.ERROR['MEDIA_FILE_MISSING']
            )

        ext = posixpath.splitext(media.storage_key)[1].lstrip(".").lower() or "bin"
        storage_key = f"{media.girl_id}/{media.id}_{media.kind}.{ext}"
        promotion.copy(media.storage_key, storage_key)

        # Thumbnail is optional: on failure the old key stays
        thumb_key = media.thumb_key
        if media.thumb_key:
            target = f"{media.girl_id}/{media.id}_thumb.jpg"
            try:
                promotion.copy(media.thumb_key, target)
                thumb_key = target
            except AppException as error:
                logger.warning("⚠️ Thumbnail of media %s not promoted: %s", media.id, error.details or error.message)

        return storage_key, thumb_key



    def _promote_live_photo(self, media: GirlMedia, meta: dict, promotion: Promotion):
        image_source, video_source = live_photo_keys(media)

        if not image_source or not video_source:
            raise ServiceException(
                error_code = "MEDIA_FILE_MISSING",
                message = messages.ERROR['MEDIA_LIVE_PHOTO_INCOMPLETE']
            )

        image_key = f"{media.girl_id}/{media.id}_image.jpg"
        video_key = f"{media.girl_id}/{media.id}_video.mov"

        promotion.copy(image_source, image_key)
        promotion.copy(video_source, video_key)

        meta["live"] = {**(meta.get("live") or {}), "image_key": image_key, "video_key": video_key}

        return video_key, image_key
