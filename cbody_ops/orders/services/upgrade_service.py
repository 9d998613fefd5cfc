"""
Order Upgrade Service

Handles:
    - Listing the service durations an order can be upgraded to
    - Upgrading an order to a pricier service duration

An upgrade moves the price difference onto the order's service fee and
total, snapshots the new service on the order, appends the change to
pricing_snapshot["upgrades"], and recomputes the order's settlement while
that settlement is still pending.
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import and_

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.order import Order
from ...models.service import Service, ServiceDuration, GirlService
from ...models.settlement import OrderSettlement

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import to_decimal, to_float, utc_now

# Settlement rules
from ...finance.services.settlement_calculator import recalculate_settlement
from ...finance.services.settlement_query_service import SettlementQueryService

logger = logging.getLogger(__name__)





class UpgradeService:

    def _get_order(self, order_id: str) -> Order:
        order = Order.query.filter_by(id = order_id).first()

        if not order:
            raise NotFoundException(messages.ERROR['ORDER_NOT_FOUND'])

        return order



    def _options(self, order: Order) -> list:
        """
        Active durations of active services priced above the current service

        Returns:
            list[dict]: every candidate, with is_qualified for the order's therapist
        """

        current_price = to_decimal(order.service_price)

        query = (
            db.session.query(ServiceDuration, Service, GirlService)
            .join(Service, Service.id == ServiceDuration.service_id)
            .outerjoin(
                GirlService,
                and_(GirlService.service_id == Service.id, GirlService.girl_id == order.girl_id)
            )
            .filter(
                Service.is_active.is_(True),
                ServiceDuration.is_active.is_(True),
                ServiceDuration.default_price > current_price
            )
        )

        if order.service_duration_id is not None:
            query = query.filter(ServiceDuration.id != order.service_duration_id)

        options = []
        for duration, service, binding in query.all():
            price = to_decimal(duration.default_price)

            # Numeric comparison in SQL can be lossy on some backends
            if price <= current_price:
                continue

            options.append({
                "service_id": service.id,
                "service_duration_id": duration.id,
                "service_name": service.title,
                "duration_minutes": duration.duration_minutes,
                "price": price,
                "price_diff": to_decimal(price - current_price),
                "is_active": duration.is_active and service.is_active,
                "is_qualified": bool(binding and binding.is_qualified)
            })

        options.sort(key = lambda option: (option["price"], option["duration_minutes"], option["service_duration_id"]))
        return options



    def get_upgradable_services(self, order_id: str) -> dict:
        """
        Options the order's therapist is qualified to deliver
        """

        order = self._get_order(order_id)

        options = [option for option in self._options(order) if option["is_qualified"]] \
            if order.status in constants.ORDER_UPGRADABLE_STATUSES else []

        return {
            "order_id": order.id,
            "current": {
                "service_id": order.service_id,
                "service_duration_id": order.service_duration_id,
                "service_name": order.service_name,
                "duration_minutes": order.service_duration,
                "price": to_float(order.service_price)
            },
            "options": [
                dict(option, price = to_float(option["price"]), price_diff = to_float(option["price_diff"]))
                for option in options
            ]
        }



    def upgrade_service(self, operator, order_id: str, service_duration_id: int) -> dict:
        """
        Upgrade an order to another service duration

        Args:
            operator (AdminProfile): admin performing the upgrade
            order_id (str)
            service_duration_id (int): target duration, must be an upgradable option

        Returns:
            dict: old/new amounts, price diff and recomputed settlement
        """

        order = self._get_order(order_id)

        if order.status not in constants.ORDER_UPGRADABLE_STATUSES:
            raise ServiceException(
                error_code = "ORDER_NOT_UPGRADABLE",
                message = messages.ERROR['ORDER_NOT_UPGRADABLE'].format(order.status),
                status_code = 409
            )

        settlement = OrderSettlement.query.filter_by(order_id = order.id).first()

        if settlement and settlement.settlement_status != "pending":
            raise ServiceException(
                error_code = "SETTLEMENT_LOCKED",
                message = messages.ERROR['SETTLEMENT_LOCKED'],
                status_code = 409
            )

        target = next(
            (
                option for option in self._options(order)
                if option["service_duration_id"] == service_duration_id and option["is_qualified"]
            ),
            None
        )

        if not target:
            raise ServiceException(
                error_code = "INVALID_UPGRADE_TARGET",
                message = messages.ERROR['INVALID_UPGRADE_TARGET']
            )

        old_price = to_decimal(order.service_price)
        old_total = to_decimal(order.total_amount)
        price_diff = to_decimal(target["price"] - old_price)

        try:
            upgrade_entry = {
                "from": {
                    "service_id": order.service_id,
                    "service_duration_id": order.service_duration_id,
                    "duration_minutes": order.service_duration,
                    "price": str(old_price)
                },
                "to": {
                    "service_id": target["service_id"],
                    "service_duration_id": target["service_duration_id"],
                    "duration_minutes": target["duration_minutes"],
                    "price": str(target["price"])
                },
                "price_diff": str(price_diff),
                "operator_id": operator.id,
                "at": utc_now().isoformat()
            }

            # JSON columns only persist on reassignment
            pricing_snapshot = dict(order.pricing_snapshot or {})
            pricing_snapshot["upgrades"] = list(pricing_snapshot.get("upgrades") or []) + [upgrade_entry]

            order.service_id = target["service_id"]
            order.service_duration_id = target["service_duration_id"]
            order.service_name = target["service_name"]
            order.service_duration = target["duration_minutes"]
            order.service_price = target["price"]
            order.service_fee = to_decimal(to_decimal(order.service_fee) + price_diff)
            order.total_amount = to_decimal(old_total + price_diff)
            order.pricing_snapshot = pricing_snapshot

            if settlement:
                recalculate_settlement(settlement, service_fee = order.service_fee)

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "ORDER_UPGRADE_FAILED",
                message = messages.ERROR['ORDER_UPGRADE_FAILED'],
                details = str(errors)
            )

        logger.info(
            "⬆️ Order %s upgraded to duration %s (+%s) by %s",
            order.order_number, service_duration_id, price_diff, operator.id
        )

        return {
            "order_id": order.id,
            "order_number": order.order_number,
            "old_service_price": to_float(old_price),
            "new_service_price": to_float(order.service_price),
            "price_diff": to_float(price_diff),
            "old_total_amount": to_float(old_total),
            "new_total_amount": to_float(order.total_amount),
            "service_fee": to_float(order.service_fee),
            "settlement": SettlementQueryService.serialize(settlement) if settlement else None,
            "message": messages.SUCCESS['ORDER_UPGRADED']
        }
