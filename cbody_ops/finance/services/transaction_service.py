"""
Settlement Transaction Service

Handles:
    - Transaction list
    - Approve (moves the therapist balance)
    - Reject
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Constants
from ...base import constants

# Models
from ...models.settlement import SettlementTransaction, GirlSettlementAccount

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, parse_datetime, parse_paging, paginate, to_decimal, to_float, utc_now

logger = logging.getLogger(__name__)





class TransactionService:

    def list_transactions(self, args) -> dict:
        """
        Fetch transactions, newest first

        Args:
            args: girl_id, transaction_type, approval_status, start_date, end_date, page, page_size
        """

        page, limit = parse_paging(args, limit_key = "page_size")
        query = SettlementTransaction.query

        if args.get("girl_id"):
            query = query.filter(SettlementTransaction.girl_id == args.get("girl_id"))

        transaction_type = args.get("transaction_type")
        if transaction_type:
            if transaction_type not in constants.TRANSACTION_TYPES:
                raise ValidationException(messages.ERROR['INVALID_TRANSACTION_TYPE'])
            query = query.filter(SettlementTransaction.transaction_type == transaction_type)

        approval_status = args.get("approval_status")
        if approval_status:
            if approval_status not in constants.TRANSACTION_APPROVAL_STATUSES:
                raise ValidationException(messages.ERROR['INVALID_APPROVAL_STATUS'])
            query = query.filter(SettlementTransaction.approval_status == approval_status)

        try:
            start_date = parse_datetime(args.get("start_date"))
            end_date = parse_datetime(args.get("end_date"))
        except ValueError:
            raise ValidationException(messages.ERROR['INVALID_DATE'])

        if start_date:
            query = query.filter(SettlementTransaction.created_at >= start_date)
        if end_date:
            query = query.filter(SettlementTransaction.created_at <= end_date)

        transactions, meta = paginate(
            query.order_by(SettlementTransaction.created_at.desc(), SettlementTransaction.id),
            page,
            limit
        )

        return {
            "transactions": [self.serialize(transaction) for transaction in transactions],
            "pagination": meta
        }



    def _get_pending(self, transaction_id: str) -> SettlementTransaction:
        transaction = SettlementTransaction.query.filter_by(id = transaction_id).first()

        if not transaction:
            raise NotFoundException(messages.ERROR['TRANSACTION_NOT_FOUND'])

        if transaction.approval_status != "pending":
            raise ServiceException(
                error_code = "TRANSACTION_NOT_PENDING",
                message = messages.ERROR['TRANSACTION_NOT_PENDING'],
                status_code = 409
            )

        return transaction



    def approve(self, operator, transaction_id: str) -> dict:
        """
        Approve a pending transaction and apply it to the balance

        to_platform subtracts the amount from the balance, to_girl adds it.
        A therapist without a settlement account has no balance to move.
        """

        transaction = self._get_pending(transaction_id)

        try:
            account = GirlSettlementAccount.query.filter_by(girl_id = transaction.girl_id).first()

            if account:
                amount = to_decimal(transaction.amount)
                balance = to_decimal(account.balance)

                if transaction.direction == "to_platform":
                    account.balance = to_decimal(balance - amount)
                else:
                    account.balance = to_decimal(balance + amount)

            transaction.approval_status = "approved"
            transaction.approved_at = utc_now()
            transaction.operator_id = operator.id

            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TRANSACTION_APPROVE_FAILED",
                message = messages.ERROR['TRANSACTION_APPROVE_FAILED'],
                details = str(errors)
            )

        balance = to_float(account.balance) if account else None

        logger.info(
            "💰 Transaction %s approved: %s %s, balance now %s",
            transaction.id, transaction.direction, transaction.amount, balance
        )

        return {
            "transaction": self.serialize(transaction),
            "balance": balance,
            "message": messages.SUCCESS['TRANSACTION_APPROVED']
        }



    def reject(self, operator, transaction_id: str, reason: str) -> dict:
        transaction = self._get_pending(transaction_id)

        try:
            transaction.approval_status = "rejected"
            transaction.reject_reason = reason.strip()
            transaction.approved_at = utc_now()
            transaction.operator_id = operator.id
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "TRANSACTION_REJECT_FAILED",
                message = messages.ERROR['TRANSACTION_REJECT_FAILED'],
                details = str(errors)
            )

        return {
            "transaction": self.serialize(transaction),
            "message": messages.SUCCESS['TRANSACTION_REJECTED']
        }



    @staticmethod
    def serialize(transaction: SettlementTransaction) -> dict:
        girl = transaction.girl

        return {
            "id": transaction.id,
            "girl_id": transaction.girl_id,
            "girl_number": girl.girl_number if girl else None,
            "girl_name": girl.name if girl else None,
            "order_id": transaction.order_id,
            "transaction_type": transaction.transaction_type,
            "direction": transaction.direction,
            "amount": to_float(transaction.amount),
            "payment_method": transaction.payment_method,
            "payment_proof_url": transaction.payment_proof_url,
            "notes": transaction.notes,
            "approval_status": transaction.approval_status,
            "approved_at": format_datetime(transaction.approved_at),
            "operator_id": transaction.operator_id,
            "reject_reason": transaction.reject_reason,
            "created_at": format_datetime(transaction.created_at)
        }
