"""
Order Controller

Handles:
    - Orchestration between handler and order services
"""

# Services
from .services.list_order_service import ListOrderService
from .services.order_stats_service import OrderStatsService
from .services.upgrade_service import UpgradeService





class OrderController:

    def list_orders(self, args) -> dict:
        return ListOrderService().list_orders(args)


    def get_order(self, order_id: str) -> dict:
        return ListOrderService().get_order(order_id)


    def list_monitoring(self, args) -> dict:
        return ListOrderService().list_monitoring(args)


    def get_stats(self) -> dict:
        return OrderStatsService().get_stats()


    def get_upgradable_services(self, order_id: str) -> dict:
        return UpgradeService().get_upgradable_services(order_id)


    def upgrade_service(self, operator, order_id: str, args: dict) -> dict:
        """
        Upgrade order service

        Args:
            operator (AdminProfile)
            order_id (str)
            args (dict): {"service_duration_id": int}

        Returns:
            dict
        """

        return UpgradeService().upgrade_service(operator, order_id, args["service_duration_id"])
