"""
File: Order Routes

Handles:
    - Order List, Detail, Stats, Monitoring
    - Upgrade Options and Service Upgrade
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.upgrade_request import UpgradeRequest

# Validations
from .validations.upgrade_validation import UpgradeValidation

# Controller
from .controller import OrderController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
order_namespace = Namespace('orders', description = 'Order Management APIs')





@order_namespace.route('/')
class Orders(Resource):

    @order_namespace.doc(params = {
        "search": "Order number",
        "status": "Order status",
        "start_date": "Created from (ISO)",
        "end_date": "Created to (ISO)",
        "sort_by": "created_at | scheduled_start_at | total_amount",
        "sort_order": "asc | desc",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        List orders
        """

        require_admin()
        return success(OrderController().list_orders(request.args))



@order_namespace.route('/stats')
class OrderStats(Resource):

    @handle_errors
    def get(self):
        """
        Order counters
        """

        require_admin()
        return success(OrderController().get_stats())



@order_namespace.route('/monitoring')
class OrderMonitoring(Resource):

    @order_namespace.doc(params = {
        "time_range": "today | 3days | 7days | custom",
        "start_date": "Custom range start (ISO)",
        "end_date": "Custom range end (ISO)",
        "status": "Order status (repeatable)",
        "only_abnormal": "Only pending orders past 10 minutes",
        "search": "Order number, therapist, contact or customer",
        "page": "Page number",
        "limit": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Order monitoring list
        """

        require_admin()
        return success(OrderController().list_monitoring(request.args))



@order_namespace.route('/<string:order_id>')
class OrderItem(Resource):

    @handle_errors
    def get(self, order_id):
        """
        Order detail
        """

        require_admin()
        return success(OrderController().get_order(order_id))



@order_namespace.route('/<string:order_id>/upgradable-services')
class OrderUpgradeOptions(Resource):

    @handle_errors
    def get(self, order_id):
        """
        Services this order can be upgraded to
        """

        require_admin(constants.SUPPORT_ROLES)
        return success(OrderController().get_upgradable_services(order_id))



@order_namespace.route('/<string:order_id>/upgrade')
class OrderUpgrade(Resource):

    @UpgradeRequest.apply(order_namespace)
    @handle_errors
    def post(self, order_id):
        """
        Upgrade order service and re-price its settlement
        """

        operator = require_admin(constants.SUPPORT_ROLES)

        # Args
        args = UpgradeRequest.get_data()

        # Validations
        UpgradeValidation().validate(args)

        return success(OrderController().upgrade_service(operator, order_id, args))
