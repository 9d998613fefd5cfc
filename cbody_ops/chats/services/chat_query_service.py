"""
Chat Query Service

Handles:
    - Chat counters
    - Thread list with participants and unread counts
    - Thread messages with sender info
    - Lock / unlock
"""

# Python Packages
from datetime import timedelta

# SQLAlchemy
from sqlalchemy import or_
from sqlalchemy.orm import aliased

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.chat import ChatThread, ChatMessage, ChatReceipt
from ...models.user_profile import UserProfile
from ...models.girl import Girl
from ...models.admin_profile import AdminProfile

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import utc_now, today_start_utc, format_datetime, as_utc, parse_bool, parse_paging, paginate





class ChatQueryService:

    def get_stats(self) -> dict:
        now = utc_now()

        return {
            "active": ChatThread.query.filter(
                ChatThread.last_message_at >= now - timedelta(hours = constants.CHAT_ACTIVE_HOURS)
            ).count(),
            "today_new": ChatThread.query.filter(ChatThread.created_at >= today_start_utc(now)).count(),
            "locked": ChatThread.query.filter(ChatThread.is_locked.is_(True)).count(),
            "total": ChatThread.query.count()
        }



    def list_threads(self, args) -> dict:
        """
        Fetch thread list, latest activity first

        Args:
            args: thread_type, only_active, has_order, search, page, limit
        """

        page, limit = parse_paging(args)

        customer = aliased(UserProfile)
        girl = aliased(Girl)
        support = aliased(AdminProfile)

        query = (
            ChatThread.query
            .outerjoin(customer, customer.id == ChatThread.customer_id)
            .outerjoin(girl, girl.id == ChatThread.girl_id)
            .outerjoin(support, support.id == ChatThread.support_id)
        )

        thread_type = args.get("thread_type")
        if thread_type:
            if thread_type not in constants.CHAT_THREAD_TYPES:
                raise ValidationException(messages.ERROR['INVALID_THREAD_TYPE'])
            query = query.filter(ChatThread.thread_type == thread_type)

        if parse_bool(args.get("only_active")):
            query = query.filter(
                ChatThread.last_message_at >= utc_now() - timedelta(hours = constants.CHAT_ACTIVE_HOURS)
            )

        has_order = parse_bool(args.get("has_order"))
        if has_order is True:
            query = query.filter(ChatThread.order_id.isnot(None))
        elif has_order is False:
            query = query.filter(ChatThread.order_id.is_(None))

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    customer.display_name.ilike(pattern),
                    customer.username.ilike(pattern),
                    girl.name.ilike(pattern),
                    girl.username.ilike(pattern),
                    support.display_name.ilike(pattern)
                )
            )

        threads, meta = paginate(
            query.order_by(ChatThread.last_message_at.desc().nullslast(), ChatThread.created_at.desc()),
            page,
            limit
        )

        return {
            "threads": [self.serialize_thread(thread) for thread in threads],
            "pagination": meta
        }



    def _unread(self, thread: ChatThread, participant_id: str) -> int:
        if not participant_id:
            return 0

        receipt = ChatReceipt.query.filter_by(thread_id = thread.id, user_id = participant_id).first()

        query = ChatMessage.query.filter(
            ChatMessage.thread_id == thread.id,
            ChatMessage.sender_id != participant_id
        )

        if receipt and receipt.last_read_at:
            query = query.filter(ChatMessage.created_at > receipt.last_read_at)

        return query.count()



    def get_messages(self, thread_id: str, args) -> dict:
        """
        Messages of a thread, newest first
        """

        thread = ChatThread.query.filter_by(id = thread_id).first()
        if not thread:
            raise NotFoundException(messages.ERROR['THREAD_NOT_FOUND'])

        page, limit = parse_paging(args, default_limit = 50)

        items, meta = paginate(
            ChatMessage.query
            .filter(ChatMessage.thread_id == thread_id)
            .order_by(ChatMessage.created_at.desc(), ChatMessage.id),
            page,
            limit
        )

        senders = self._senders(items)

        return {
            "thread": self.serialize_thread(thread),
            "messages": [
                {
                    "id": message.id,
                    "sender_id": message.sender_id,
                    "sender_role": message.sender_role,
                    "sender": senders.get((message.sender_role, message.sender_id)),
                    "content_type": message.content_type,
                    "text_content": message.text_content,
                    "attachment_url": message.attachment_url,
                    "created_at": format_datetime(message.created_at)
                }
                for message in items
            ],
            "pagination": meta
        }



    def _senders(self, items: list) -> dict:
        ids = {}
        for message in items:
            ids.setdefault(message.sender_role, set()).add(message.sender_id)

        senders = {}

        for user in UserProfile.query.filter(UserProfile.id.in_(ids.get("customer", set()))).all():
            senders[("customer", user.id)] = {"name": user.display_name or user.username, "avatar_url": user.avatar_url}

        girl_ids = ids.get("girl", set())
        for girl in Girl.query.filter(or_(Girl.id.in_(girl_ids), Girl.user_id.in_(girl_ids))).all():
            info = {"name": girl.name, "girl_number": girl.girl_number, "avatar_url": girl.avatar_url}
            senders[("girl", girl.id)] = info
            if girl.user_id:
                senders[("girl", girl.user_id)] = info

        for admin in AdminProfile.query.filter(AdminProfile.id.in_(ids.get("support", set()))).all():
            senders[("support", admin.id)] = {"name": admin.display_name, "avatar_url": None}

        return senders



    def toggle_lock(self, thread_id: str) -> dict:
        thread = ChatThread.query.filter_by(id = thread_id).first()
        if not thread:
            raise NotFoundException(messages.ERROR['THREAD_NOT_FOUND'])

        try:
            thread.is_locked = not thread.is_locked
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "THREAD_UPDATE_FAILED",
                message = messages.ERROR['THREAD_UPDATE_FAILED'],
                details = str(errors)
            )

        return {
            "id": thread.id,
            "is_locked": thread.is_locked,
            "message": messages.SUCCESS['THREAD_LOCKED' if thread.is_locked else 'THREAD_UNLOCKED']
        }



    def serialize_thread(self, thread: ChatThread) -> dict:
        customer = thread.customer
        girl = thread.girl
        support = thread.support

        girl_participant = girl.user_id or girl.id if girl else None

        return {
            "id": thread.id,
            "thread_type": thread.thread_type,
            "order_id": thread.order_id,
            "is_locked": thread.is_locked,
            "last_message_text": thread.last_message_text,
            "last_message_at": format_datetime(thread.last_message_at),
            "is_active": bool(
                thread.last_message_at
                and as_utc(thread.last_message_at) >= utc_now() - timedelta(hours = constants.CHAT_ACTIVE_HOURS)
            ),
            "customer": {
                "id": customer.id,
                "name": customer.display_name or customer.username,
                "avatar_url": customer.avatar_url,
                "unread": self._unread(thread, customer.id)
            } if customer else None,
            "girl": {
                "id": girl.id,
                "girl_number": girl.girl_number,
                "name": girl.name,
                "avatar_url": girl.avatar_url,
                "unread": self._unread(thread, girl_participant)
            } if girl else None,
            "support": {
                "id": support.id,
                "name": support.display_name,
                "unread": self._unread(thread, support.id)
            } if support else None,
            "created_at": format_datetime(thread.created_at)
        }
