"""
Models Package
Registers all SQLAlchemy ORM models so they are discoverable by Flask-SQLAlchemy.

The tables themselves are owned by the hosted database; these classes mirror
the columns the back office reads and writes.
"""

from .admin_profile import AdminProfile
from .audit import AdminOperationLog, AuditLog
from .user_profile import UserProfile, UserLoginEvent
from .girl import City, Girl, GirlStatus, GirlWorkSession, girl_categories
from .service import Category, Service, ServiceDuration, GirlService, GirlServiceDuration
from .order import Order
from .settlement import OrderSettlement, GirlSettlementAccount, SettlementTransaction
from .girl_media import GirlMedia
from .chat import ChatThread, ChatMessage, ChatReceipt
from .review import OrderReview, Report
from .app_config import AppConfig
from .api_key import ApiKey, ApiRequestLog

__all__ = [
    "AdminProfile",
    "AdminOperationLog",
    "AuditLog",
    "UserProfile",
    "UserLoginEvent",
    "City",
    "Girl",
    "GirlStatus",
    "GirlWorkSession",
    "girl_categories",
    "Category",
    "Service",
    "ServiceDuration",
    "GirlService",
    "GirlServiceDuration",
    "Order",
    "OrderSettlement",
    "GirlSettlementAccount",
    "SettlementTransaction",
    "GirlMedia",
    "ChatThread",
    "ChatMessage",
    "ChatReceipt",
    "OrderReview",
    "Report",
    "AppConfig",
    "ApiKey",
    "ApiRequestLog",
]
