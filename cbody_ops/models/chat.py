"""
Models: ChatThread, ChatMessage, ChatReceipt
Tables: chat_threads, chat_messages, chat_receipts

Chat threads between customers (c), therapists (g) and support (s).
Receipts hold each participant's last read message.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class ChatThread(db.Model):
    """ A conversation... """

    # Table Name
    __tablename__ = "chat_threads"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    thread_type = db.Column(db.String(10), nullable = False, doc = "c2g | s2c | s2g")

    customer_id = db.Column(db.String(36), db.ForeignKey("user_profiles.id"), nullable = True, index = True)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = True, index = True)

    support_id = db.Column(db.String(36), db.ForeignKey("admin_profiles.id"), nullable = True)

    order_id = db.Column(db.String(36), db.ForeignKey("orders.id"), nullable = True)

    is_locked = db.Column(db.Boolean, nullable = False, default = False)

    last_message_text = db.Column(db.Text, nullable = True)

    last_message_at = db.Column(db.DateTime(timezone = True), nullable = True, index = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    customer = db.relationship("UserProfile", lazy = "joined")
    girl = db.relationship("Girl", lazy = "joined")
    support = db.relationship("AdminProfile", lazy = "joined")

    def __repr__(self):
        return f"<ChatThread {self.id} {self.thread_type}>"





class ChatMessage(db.Model):
    """ A chat message; image messages keep their chat-images object key in attachment_url... """

    # Table Name
    __tablename__ = "chat_messages"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    thread_id = db.Column(db.String(36), db.ForeignKey("chat_threads.id"), nullable = False, index = True)

    sender_id = db.Column(db.String(36), nullable = False)

    sender_role = db.Column(db.String(20), nullable = False, doc = "customer | girl | support")

    content_type = db.Column(db.String(20), nullable = False, default = "text", doc = "text | image | system")

    text_content = db.Column(db.Text, nullable = True)

    attachment_url = db.Column(db.Text, nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now, index = True)

    def __repr__(self):
        return f"<ChatMessage {self.id} {self.content_type}>"





class ChatReceipt(db.Model):
    """ Last message a participant has read in a thread... """

    # Table Name
    __tablename__ = "chat_receipts"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    thread_id = db.Column(db.String(36), db.ForeignKey("chat_threads.id"), nullable = False, index = True)

    user_id = db.Column(db.String(36), nullable = False)

    last_read_at = db.Column(db.DateTime(timezone = True), nullable = True)

    __table_args__ = (
        db.UniqueConstraint("thread_id", "user_id", name = "uq_chat_receipts_thread_user"),
    )

    def __repr__(self):
        return f"<ChatReceipt {self.thread_id} {self.user_id}>"
