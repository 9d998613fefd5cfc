"""
Finance Controller

Handles:
    - Orchestration between handler and finance services
"""

# Services
from .services.finance_stats_service import FinanceStatsService
from .services.account_service import AccountService
from .services.settlement_query_service import SettlementQueryService
from .services.settlement_service import SettlementService
from .services.transaction_service import TransactionService
from .services.order_payment_service import OrderPaymentService





class FinanceController:

    # Stats
    def get_stats(self) -> dict:
        return FinanceStatsService().get_stats()


    def get_transaction_stats(self) -> dict:
        return FinanceStatsService().get_transaction_stats()


    def get_day_stats(self, start = None, end = None) -> dict:
        return FinanceStatsService().get_day_stats(start, end)


    def get_pending_items(self) -> dict:
        return FinanceStatsService().get_pending_items()


    # Accounts
    def list_accounts(self, args) -> dict:
        return AccountService().list_accounts(args)


    def get_account(self, girl_id: str) -> dict:
        return AccountService().get_account(girl_id)


    def get_bank_account(self, girl_id: str) -> dict:
        return AccountService().get_bank_account(girl_id)


    def update_deposit(self, girl_id: str, amount) -> dict:
        return AccountService().update_deposit(girl_id, amount)


    # Settlements
    def list_settlements(self, args) -> dict:
        return SettlementQueryService().list_settlements(args)


    def get_settlement(self, settlement_id: str) -> dict:
        return SettlementQueryService().get_settlement(settlement_id)


    def update_payment(self, operator, settlement_id: str, updates: dict) -> dict:
        return SettlementService().update_payment(operator, settlement_id, updates)


    def mark_settled(self, operator, settlement_id: str) -> dict:
        return SettlementService().mark_settled(operator, settlement_id)


    def reject_settlement(self, operator, settlement_id: str, reason: str) -> dict:
        return SettlementService().reject(operator, settlement_id, reason)


    # Transactions
    def list_transactions(self, args) -> dict:
        return TransactionService().list_transactions(args)


    def approve_transaction(self, operator, transaction_id: str) -> dict:
        return TransactionService().approve(operator, transaction_id)


    def reject_transaction(self, operator, transaction_id: str, reason: str) -> dict:
        return TransactionService().reject(operator, transaction_id, reason)


    # Orders
    def get_order_payment_data(self, order_id: str) -> dict:
        return OrderPaymentService().get_payment_data(order_id)
