"""
Chat Cleanup Service

Handles:
    - Cleanup counters
    - Delete one thread with its images
    - Purge messages past retention
    - Delete invalid threads in batches

An invalid thread is a customer/therapist thread older than
CHAT_INVALID_THREAD_DAYS with no completed order between the two.
Every cleanup action is written to audit_logs.
"""

# Python Packages
import logging
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import and_, exists

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.chat import ChatThread, ChatMessage, ChatReceipt
from ...models.order import Order

# Vendors
from ...vendors import factory

# Exceptions
from ...util.exceptions import AppException, ServiceException, NotFoundException

# App Messages
from ...util import messages

# Audit
from ...util.audit import record_audit_log

# Helpers
from ...util.helpers import utc_now

logger = logging.getLogger(__name__)





class ChatCleanupService:

    def __init__(self):
        self._storage = None


    @property
    def storage(self):
        if self._storage is None:
            self._storage = factory.get_storage_client()
        return self._storage



    def _invalid_threads_query(self, now):
        cutoff = now - timedelta(days = constants.CHAT_INVALID_THREAD_DAYS)

        completed_order = exists().where(
            and_(
                Order.user_id == ChatThread.customer_id,
                Order.girl_id == ChatThread.girl_id,
                Order.status == "completed"
            )
        )

        return ChatThread.query.filter(
            ChatThread.thread_type == "c2g",
            ChatThread.created_at < cutoff,
            ~completed_order
        )


    def _old_messages_query(self, now):
        cutoff = now - timedelta(days = constants.CHAT_MESSAGE_RETENTION_DAYS)
        return ChatMessage.query.filter(ChatMessage.created_at < cutoff)



    def get_stats(self) -> dict:
        now = utc_now()
        old_messages = self._old_messages_query(now)

        return {
            "invalid_threads": self._invalid_threads_query(now).count(),
            "old_messages": old_messages.count(),
            "old_images": old_messages.filter(ChatMessage.content_type == "image").count(),
            "message_retention_days": constants.CHAT_MESSAGE_RETENTION_DAYS,
            "invalid_thread_days": constants.CHAT_INVALID_THREAD_DAYS
        }



    def _remove_thread_files(self, thread_id: str) -> int:
        try:
            return self.storage.delete_folder(constants.BUCKET_CHAT_IMAGES, f"{thread_id}/")

        except AppException as error:
            logger.error("❌ Chat images of %s not removed: %s", thread_id, error.details or error.message)
            return 0


    def _delete_threads(self, thread_ids: list) -> int:
        """ Rows only; callers handle files and commit... """

        messages_deleted = ChatMessage.query.filter(
            ChatMessage.thread_id.in_(thread_ids)
        ).delete(synchronize_session = False)

        ChatReceipt.query.filter(ChatReceipt.thread_id.in_(thread_ids)).delete(synchronize_session = False)
        ChatThread.query.filter(ChatThread.id.in_(thread_ids)).delete(synchronize_session = False)

        return messages_deleted



    def delete_thread(self, operator, thread_id: str) -> dict:
        """
        Delete a thread, its messages, receipts and images
        """

        thread = ChatThread.query.filter_by(id = thread_id).first()
        if not thread:
            raise NotFoundException(messages.ERROR['THREAD_NOT_FOUND'])

        files_deleted = self._remove_thread_files(thread_id)

        try:
            messages_deleted = self._delete_threads([thread_id])
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "THREAD_DELETE_FAILED",
                message = messages.ERROR['THREAD_DELETE_FAILED'],
                details = str(errors)
            )

        record_audit_log(
            admin_id = operator.id,
            action = "delete_chat_thread",
            target_type = "chat_thread",
            target_id = thread_id,
            payload = {"messages_deleted": messages_deleted, "files_deleted": files_deleted}
        )

        return {
            "thread_id": thread_id,
            "messages_deleted": messages_deleted,
            "files_deleted": files_deleted,
            "message": messages.SUCCESS['THREAD_DELETED']
        }



    def cleanup_old_messages(self, operator) -> dict:
        """
        Delete messages past retention, and the images they carried
        """

        now = utc_now()
        old_messages = self._old_messages_query(now)

        image_keys = [
            key for (key,) in old_messages
            .filter(ChatMessage.content_type == "image", ChatMessage.attachment_url.isnot(None))
            .with_entities(ChatMessage.attachment_url)
            .all()
        ]

        files_deleted = 0
        if image_keys:
            try:
                # delete_objects takes at most 1000 keys per call
                for start in range(0, len(image_keys), 1000):
                    batch = image_keys[start:start + 1000]
                    self.storage.delete_files(constants.BUCKET_CHAT_IMAGES, batch)
                    files_deleted += len(batch)

            except AppException as error:
                logger.error("❌ Old chat images not fully removed: %s", error.details or error.message)

        try:
            messages_deleted = old_messages.delete(synchronize_session = False)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CHAT_CLEANUP_FAILED",
                message = messages.ERROR['CHAT_CLEANUP_FAILED'],
                details = str(errors)
            )

        logger.info("🧹 Purged %s chat messages older than %s days", messages_deleted, constants.CHAT_MESSAGE_RETENTION_DAYS)

        record_audit_log(
            admin_id = operator.id,
            action = "cleanup_old_messages",
            target_type = "chat_messages",
            payload = {
                "messages_deleted": messages_deleted,
                "files_deleted": files_deleted,
                "retention_days": constants.CHAT_MESSAGE_RETENTION_DAYS
            }
        )

        return {
            "messages_deleted": messages_deleted,
            "files_deleted": files_deleted,
            "message": messages.SUCCESS['CHAT_CLEANUP_DONE']
        }



    def cleanup_invalid_threads(self, operator) -> dict:
        """
        Delete up to CHAT_CLEANUP_BATCH_SIZE invalid threads

        Returns:
            dict: deleted count and how many invalid threads remain
        """

        now = utc_now()

        thread_ids = [
            thread_id for (thread_id,) in self._invalid_threads_query(now)
            .order_by(ChatThread.created_at)
            .with_entities(ChatThread.id)
            .limit(constants.CHAT_CLEANUP_BATCH_SIZE)
            .all()
        ]

        if not thread_ids:
            return {"threads_deleted": 0, "messages_deleted": 0, "remaining": 0, "message": messages.SUCCESS['NOTHING_TO_CLEAN']}

        files_deleted = sum(self._remove_thread_files(thread_id) for thread_id in thread_ids)

        try:
            messages_deleted = self._delete_threads(thread_ids)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "CHAT_CLEANUP_FAILED",
                message = messages.ERROR['CHAT_CLEANUP_FAILED'],
                details = str(errors)
            )

        remaining = self._invalid_threads_query(now).count()

        record_audit_log(
            admin_id = operator.id,
            action = "cleanup_invalid_threads",
            target_type = "chat_threads",
            payload = {
                "thread_ids": thread_ids,
                "messages_deleted": messages_deleted,
                "files_deleted": files_deleted
            }
        )

        return {
            "threads_deleted": len(thread_ids),
            "messages_deleted": messages_deleted,
            "files_deleted": files_deleted,
            "remaining": remaining,
            "message": messages.SUCCESS['CHAT_CLEANUP_DONE']
        }
