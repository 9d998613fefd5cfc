"""
Order Payment Service

Handles:
    - Payment page data of one order (order, settlement, money movements)

The database function get_order_payment_page_data builds the page in one
round trip. When it is missing or fails, the page is assembled from the
order, its settlement and its settlement transactions.
"""

# Python Packages
import json
import logging

# SQLAlchemy
from sqlalchemy import text

# Database
from ...config.database import db

# Models
from ...models.order import Order
from ...models.settlement import OrderSettlement, SettlementTransaction

# Exceptions
from ...util.exceptions import NotFoundException

# App Messages
from ...util import messages

# Serializers
from ...orders.services.list_order_service import ListOrderService
from .settlement_query_service import SettlementQueryService
from .transaction_service import TransactionService

logger = logging.getLogger(__name__)





class OrderPaymentService:

    def get_payment_data(self, order_id: str) -> dict:
        data = self._from_rpc(order_id)

        if data is None:
            data = self._from_queries(order_id)

        return data



    def _from_rpc(self, order_id: str):
        try:
            value = db.session.execute(
                text("SELECT get_order_payment_page_data(:p_order_id)"),
                {"p_order_id": order_id}
            ).scalar()

        except Exception as e:
            db.session.rollback()
            logger.warning("⚠️ get_order_payment_page_data unavailable, assembling directly: %s", e)
            return None

        if isinstance(value, str):
            value = json.loads(value)

        if not isinstance(value, dict):
            return None

        if not value.get("ok"):
            raise NotFoundException(value.get("error") or messages.ERROR['ORDER_NOT_FOUND'])

        value.pop("ok", None)
        return value



    def _from_queries(self, order_id: str) -> dict:
        order = Order.query.filter_by(id = order_id).first()

        if not order:
            raise NotFoundException(messages.ERROR['ORDER_NOT_FOUND'])

        settlement = OrderSettlement.query.filter_by(order_id = order.id).first()

        transactions = (
            SettlementTransaction.query
            .filter(SettlementTransaction.order_id == order.id)
            .order_by(SettlementTransaction.created_at.desc())
            .all()
        )

        return {
            "order": ListOrderService.serialize(order),
            "settlement": SettlementQueryService.serialize(settlement) if settlement else None,
            "transactions": [TransactionService.serialize(item) for item in transactions]
        }
