"""
File: Finance Routes

Handles:
    - Finance Stats, Day Stats, Pending Items
    - Settlement Accounts and Deposits
    - Order Settlements (payment info, settle, reject)
    - Settlement Transactions (stats, approve, reject)
    - Bank Account and Order Payment Data lookups

All routes need superadmin, admin or finance.
"""

# Flask Packages
from flask import request
from flask_restx import Namespace, Resource

# Constants
from ..base import constants

# Request
from .requests.finance_request import DepositRequest, PaymentUpdateRequest, RejectRequest

# Validations
from .validations.finance_validation import DepositValidation, PaymentUpdateValidation, RejectReasonValidation

# Controller
from .controller import FinanceController

# Auth
from ..util.auth import require_admin

# Responses
from ..util.responses import success, handle_errors

# Namespaces
finance_namespace = Namespace('finance', description = 'Finance Settlement APIs')





@finance_namespace.route('/stats')
class FinanceStats(Resource):

    @handle_errors
    def get(self):
        """
        Pending settlements by finance day
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_stats())



@finance_namespace.route('/day-stats')
class FinanceDayStats(Resource):

    @finance_namespace.doc(params = {"start": "Window start (ISO)", "end": "Window end (ISO)"})
    @handle_errors
    def get(self):
        """
        Settlement totals for a window (default: current finance day)
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_day_stats(request.args.get("start"), request.args.get("end")))



@finance_namespace.route('/pending-items')
class FinancePendingItems(Resource):

    @handle_errors
    def get(self):
        """
        Latest pending transactions and settlements
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_pending_items())



@finance_namespace.route('/accounts')
class SettlementAccounts(Resource):

    @finance_namespace.doc(params = {
        "search": "Therapist number or name",
        "city_id": "City id",
        "balance_status": "negative | positive | zero",
        "balance_min": "Minimum balance",
        "balance_max": "Maximum balance",
        "page": "Page number",
        "page_size": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Settlement accounts, lowest balance first
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().list_accounts(request.args))



@finance_namespace.route('/accounts/<string:girl_id>')
class SettlementAccountItem(Resource):

    @handle_errors
    def get(self, girl_id):
        """
        Settlement account of a therapist
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_account(girl_id))



@finance_namespace.route('/accounts/<string:girl_id>/bank-account')
class SettlementAccountBank(Resource):

    @handle_errors
    def get(self, girl_id):
        """
        Payout bank details
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_bank_account(girl_id))



@finance_namespace.route('/accounts/<string:girl_id>/deposit')
class SettlementAccountDeposit(Resource):

    @DepositRequest.apply(finance_namespace)
    @handle_errors
    def put(self, girl_id):
        """
        Update deposit
        """

        require_admin(constants.FINANCE_ROLES)
        amount = DepositValidation().validate(DepositRequest.get_data())

        return success(FinanceController().update_deposit(girl_id, amount))



@finance_namespace.route('/settlements')
class Settlements(Resource):

    @finance_namespace.doc(params = {
        "girl_id": "Therapist id",
        "status": "pending | settled | rejected",
        "platform_collected": "collected | not_collected",
        "start_date": "Created from (ISO)",
        "end_date": "Created to (ISO)",
        "search": "Therapist number or name, order number",
        "sort_by": "girl_name | created_at | service_fee | platform_should_get",
        "sort_order": "asc | desc",
        "page": "Page number",
        "page_size": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Order settlements
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().list_settlements(request.args))



@finance_namespace.route('/settlements/<string:settlement_id>')
class SettlementItem(Resource):

    @handle_errors
    def get(self, settlement_id):
        """
        Settlement detail
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_settlement(settlement_id))


    @PaymentUpdateRequest.apply(finance_namespace)
    @handle_errors
    def patch(self, settlement_id):
        """
        Update payment info
        """

        operator = require_admin(constants.FINANCE_ROLES)
        updates = PaymentUpdateValidation().validate(PaymentUpdateRequest.get_data())

        return success(FinanceController().update_payment(operator, settlement_id, updates))



@finance_namespace.route('/settlements/<string:settlement_id>/settle')
class SettlementSettle(Resource):

    @handle_errors
    def post(self, settlement_id):
        """
        Mark settled
        """

        operator = require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().mark_settled(operator, settlement_id))



@finance_namespace.route('/settlements/<string:settlement_id>/reject')
class SettlementReject(Resource):

    @RejectRequest.apply(finance_namespace)
    @handle_errors
    def post(self, settlement_id):
        """
        Reject settlement
        """

        operator = require_admin(constants.FINANCE_ROLES)
        reason = RejectRequest.get_data().get("reason")

        RejectReasonValidation().validate(reason)

        return success(FinanceController().reject_settlement(operator, settlement_id, reason))



@finance_namespace.route('/transactions')
class Transactions(Resource):

    @finance_namespace.doc(params = {
        "girl_id": "Therapist id",
        "transaction_type": "deposit | payment | withdrawal | adjustment",
        "approval_status": "pending | approved | rejected",
        "start_date": "Created from (ISO)",
        "end_date": "Created to (ISO)",
        "page": "Page number",
        "page_size": "Page size (max 100)"
    })
    @handle_errors
    def get(self):
        """
        Settlement transactions
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().list_transactions(request.args))



@finance_namespace.route('/transactions/stats')
class TransactionStats(Resource):

    @handle_errors
    def get(self):
        """
        Pending and today's approved transactions
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_transaction_stats())



@finance_namespace.route('/transactions/<string:transaction_id>/approve')
class TransactionApprove(Resource):

    @handle_errors
    def post(self, transaction_id):
        """
        Approve transaction and move the balance
        """

        operator = require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().approve_transaction(operator, transaction_id))



@finance_namespace.route('/transactions/<string:transaction_id>/reject')
class TransactionReject(Resource):

    @RejectRequest.apply(finance_namespace)
    @handle_errors
    def post(self, transaction_id):
        """
        Reject transaction
        """

        operator = require_admin(constants.FINANCE_ROLES)
        reason = RejectRequest.get_data().get("reason")

        RejectReasonValidation().validate(reason)

        return success(FinanceController().reject_transaction(operator, transaction_id, reason))



@finance_namespace.route('/orders/<string:order_id>/payment-data')
class OrderPaymentData(Resource):

    @handle_errors
    def get(self, order_id):
        """
        Order, settlement and transactions for the payment page
        """

        require_admin(constants.FINANCE_ROLES)
        return success(FinanceController().get_order_payment_data(order_id))
