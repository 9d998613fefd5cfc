"""Integration tests for chat oversight and cleanup."""

from datetime import datetime, timedelta, timezone

import pytest

from cbody_ops.base import constants
from cbody_ops.config.database import db
from cbody_ops.models import AuditLog, ChatMessage, ChatReceipt, ChatThread


pytestmark = pytest.mark.integration

IMAGES = constants.BUCKET_CHAT_IMAGES


def ago(**delta):
    return datetime.now(timezone.utc) - timedelta(**delta)


def thread(seed, customer=None, girl=None, **fields):
    fields.setdefault("thread_type", "c2g")
    return seed.add(ChatThread(
        customer_id=customer.id if customer else None,
        girl_id=girl.id if girl else None,
        **fields
    ))


def message(seed, chat, sender_id, sender_role, **fields):
    fields.setdefault("text_content", "hello")
    return seed.add(ChatMessage(thread_id=chat.id, sender_id=sender_id, sender_role=sender_role, **fields))


class TestOversight:

    def test_threads_with_unread_counts(self, client, headers, seed):
        customer, girl = seed.user(display_name="Anna"), seed.girl()
        chat = thread(seed, customer, girl, last_message_at=ago(minutes=1))

        message(seed, chat, customer.id, "customer", created_at=ago(minutes=30))
        message(seed, chat, girl.id, "girl", created_at=ago(minutes=20))
        message(seed, chat, girl.id, "girl", created_at=ago(minutes=1))
        seed.add(ChatReceipt(thread_id=chat.id, user_id=customer.id, last_read_at=ago(minutes=10)))

        data = client.get("/chats/threads", headers=headers("support")).get_json()["data"]

        item = data["threads"][0]
        assert item["customer"]["name"] == "Anna"
        assert item["customer"]["unread"] == 1
        assert item["girl"]["unread"] == 1
        assert item["is_active"] is True

    def test_filters(self, client, headers, seed):
        customer, girl = seed.user(), seed.girl()
        order = seed.order(girl, customer)
        with_order = thread(seed, customer, girl, order_id=order.id)
        thread(seed, customer, thread_type="s2c")

        c2g = client.get("/chats/threads?thread_type=c2g", headers=headers()).get_json()["data"]
        ordered = client.get("/chats/threads?has_order=true", headers=headers()).get_json()["data"]
        bad = client.get("/chats/threads?thread_type=group", headers=headers())

        assert [item["id"] for item in c2g["threads"]] == [with_order.id]
        assert [item["id"] for item in ordered["threads"]] == [with_order.id]
        assert bad.status_code == 400

    def test_stats(self, client, headers, seed):
        customer, girl = seed.user(), seed.girl()
        thread(seed, customer, girl, last_message_at=ago(hours=1))
        thread(seed, customer, girl, last_message_at=ago(days=3), created_at=ago(days=3), is_locked=True)

        data = client.get("/chats/stats", headers=headers("finance")).get_json()["data"]

        assert data["active"] == 1
        assert data["locked"] == 1
        assert data["total"] == 2

    def test_messages_newest_first_with_senders(self, client, headers, seed):
        customer, girl = seed.user(display_name="Anna"), seed.girl(name="Mali")
        chat = thread(seed, customer, girl)
        message(seed, chat, customer.id, "customer", text_content="first", created_at=ago(minutes=5))
        message(seed, chat, girl.id, "girl", text_content="second", created_at=ago(minutes=1))

        data = client.get(f"/chats/threads/{chat.id}/messages", headers=headers()).get_json()["data"]

        assert [item["text_content"] for item in data["messages"]] == ["second", "first"]
        assert data["messages"][0]["sender"]["name"] == "Mali"
        assert data["messages"][1]["sender"]["name"] == "Anna"

    def test_toggle_lock(self, client, headers, seed):
        chat = thread(seed, seed.user(), seed.girl())

        locked = client.post(f"/chats/threads/{chat.id}/toggle-lock", headers=headers("support")).get_json()["data"]
        unlocked = client.post(f"/chats/threads/{chat.id}/toggle-lock", headers=headers("support")).get_json()["data"]
        forbidden = client.post(f"/chats/threads/{chat.id}/toggle-lock", headers=headers("finance"))

        assert locked["is_locked"] is True
        assert unlocked["is_locked"] is False
        assert forbidden.status_code == 403

    def test_unknown_thread(self, client, headers):
        assert client.get("/chats/threads/nope/messages", headers=headers()).status_code == 404


class TestCleanup:

    def test_delete_thread_removes_rows_and_images(self, client, headers, seed, storage):
        customer = seed.user()
        chat = thread(seed, customer, seed.girl())
        message(seed, chat, customer.id, "customer")
        seed.add(ChatReceipt(thread_id=chat.id, user_id=customer.id))
        storage.put(IMAGES, f"{chat.id}/a.jpg")
        storage.put(IMAGES, "other/b.jpg")
        chat_id = chat.id

        response = client.delete(f"/chats/threads/{chat_id}", headers=headers())

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["messages_deleted"] == 1
        assert data["files_deleted"] == 1
        assert storage.keys(IMAGES) == ["other/b.jpg"]
        assert ChatThread.query.count() == 0
        assert ChatReceipt.query.count() == 0
        assert AuditLog.query.filter_by(action="delete_chat_thread", target_id=chat_id).count() == 1

    def test_delete_thread_is_superadmin_only(self, client, headers, seed):
        chat = thread(seed, seed.user(), seed.girl())

        assert client.delete(f"/chats/threads/{chat.id}", headers=headers("admin")).status_code == 403

    def test_purge_old_messages(self, client, headers, seed, storage):
        customer = seed.user()
        chat = thread(seed, customer, seed.girl())
        message(seed, chat, customer.id, "customer", created_at=ago(days=100))
        message(seed, chat, customer.id, "customer", content_type="image",
                attachment_url=f"{chat.id}/old.jpg", created_at=ago(days=95))
        keep = message(seed, chat, customer.id, "customer", created_at=ago(days=1))
        storage.put(IMAGES, f"{chat.id}/old.jpg")
        storage.put(IMAGES, f"{chat.id}/recent.jpg")
        chat_id, keep_id = chat.id, keep.id

        stats = client.get("/chats/cleanup/stats", headers=headers()).get_json()["data"]
        result = client.post("/chats/cleanup/old-messages", headers=headers()).get_json()["data"]

        assert stats["old_messages"] == 2
        assert stats["old_images"] == 1
        assert result["messages_deleted"] == 2
        assert result["files_deleted"] == 1
        assert storage.keys(IMAGES) == [f"{chat_id}/recent.jpg"]
        assert [row.id for row in ChatMessage.query.all()] == [keep_id]
        assert AuditLog.query.filter_by(action="cleanup_old_messages").count() == 1

    def test_invalid_threads(self, client, headers, seed, storage):
        customer, girl, regular = seed.user(), seed.girl(), seed.girl()
        seed.order(regular, customer, status="completed")

        stale = thread(seed, customer, girl, created_at=ago(days=40))
        thread(seed, customer, regular, created_at=ago(days=40))
        thread(seed, customer, girl, created_at=ago(days=5))
        thread(seed, customer, thread_type="s2c", created_at=ago(days=40))
        message(seed, stale, customer.id, "customer")
        storage.put(IMAGES, f"{stale.id}/x.jpg")
        stale_id = stale.id

        stats = client.get("/chats/cleanup/stats", headers=headers()).get_json()["data"]
        result = client.post("/chats/cleanup/invalid-threads", headers=headers()).get_json()["data"]
        again = client.post("/chats/cleanup/invalid-threads", headers=headers()).get_json()["data"]

        assert stats["invalid_threads"] == 1
        assert result["threads_deleted"] == 1
        assert result["messages_deleted"] == 1
        assert result["files_deleted"] == 1
        assert result["remaining"] == 0
        assert again["threads_deleted"] == 0
        db.session.expire_all()
        assert db.session.get(ChatThread, stale_id) is None
        assert ChatThread.query.count() == 3

        log = AuditLog.query.filter_by(action="cleanup_invalid_threads").one()
        assert log.payload["thread_ids"] == [stale_id]
