"""
Settlement Account Service

Handles:
    - Therapist settlement account list and detail
    - Deposit update
    - Bank account lookup
"""

# SQLAlchemy
from sqlalchemy import or_

# Database
from ...config.database import db

# Models
from ...models.settlement import GirlSettlementAccount
from ...models.girl import Girl

# Exceptions
from ...util.exceptions import ServiceException, NotFoundException, ValidationException

# App Messages
from ...util import messages

# Helpers
from ...util.helpers import format_datetime, parse_paging, paginate, to_decimal, to_float





class AccountService:

    def list_accounts(self, args) -> dict:
        """
        Fetch settlement accounts, lowest balance first

        Args:
            args: search, city_id, balance_status (negative | positive | zero),
                  balance_min, balance_max, page, page_size
        """

        page, limit = parse_paging(args, limit_key = "page_size")

        query = GirlSettlementAccount.query.join(Girl, Girl.id == GirlSettlementAccount.girl_id)

        # 🔎 Apply Search Filter
        search = (args.get("search") or "").strip()
        if search:
            if search.isdigit():
                query = query.filter(Girl.girl_number == int(search))
            else:
                query = query.filter(or_(Girl.name.ilike(f"%{search}%"), Girl.username.ilike(f"%{search}%")))

        if args.get("city_id"):
            query = query.filter(Girl.city_id == int(args.get("city_id")))

        balance_status = args.get("balance_status")
        if balance_status == "negative":
            query = query.filter(GirlSettlementAccount.balance < 0)
        elif balance_status == "positive":
            query = query.filter(GirlSettlementAccount.balance > 0)
        elif balance_status == "zero":
            query = query.filter(GirlSettlementAccount.balance == 0)

        try:
            if args.get("balance_min") not in (None, ""):
                query = query.filter(GirlSettlementAccount.balance >= to_decimal(args.get("balance_min")))
            if args.get("balance_max") not in (None, ""):
                query = query.filter(GirlSettlementAccount.balance <= to_decimal(args.get("balance_max")))
        except ArithmeticError:
            raise ValidationException(messages.ERROR['INVALID_AMOUNT'].format("balance"))

        accounts, meta = paginate(
            query.order_by(GirlSettlementAccount.balance.asc(), Girl.girl_number),
            page,
            limit
        )

        return {
            "accounts": [self.serialize(account) for account in accounts],
            "pagination": meta
        }



    def get_account(self, girl_id: str) -> dict:
        account = GirlSettlementAccount.query.filter_by(girl_id = girl_id).first()

        if not account:
            raise NotFoundException(messages.ERROR['ACCOUNT_NOT_FOUND'])

        return self.serialize(account)



    def get_bank_account(self, girl_id: str) -> dict:
        """
        Payout bank details of a therapist
        """

        account = GirlSettlementAccount.query.filter_by(girl_id = girl_id).first()

        if not account:
            raise NotFoundException(messages.ERROR['ACCOUNT_NOT_FOUND'])

        return {
            "girl_id": account.girl_id,
            "bank_account_name": account.bank_account_name,
            "bank_account_number": account.bank_account_number,
            "bank_name": account.bank_name,
            "bank_branch": account.bank_branch,
            "bank_meta": account.bank_meta
        }



    def update_deposit(self, girl_id: str, deposit_amount) -> dict:
        """
        Set the therapist's deposit
        """

        account = GirlSettlementAccount.query.filter_by(girl_id = girl_id).first()

        if not account:
            raise NotFoundException(messages.ERROR['ACCOUNT_NOT_FOUND'])

        try:
            account.deposit_amount = to_decimal(deposit_amount)
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "DEPOSIT_UPDATE_FAILED",
                message = messages.ERROR['DEPOSIT_UPDATE_FAILED'],
                details = str(errors)
            )

        return {
            "account": self.serialize(account),
            "message": messages.SUCCESS['DEPOSIT_UPDATED']
        }



    @staticmethod
    def serialize(account: GirlSettlementAccount) -> dict:
        girl = account.girl

        return {
            "id": account.id,
            "girl_id": account.girl_id,
            "girl_number": girl.girl_number if girl else None,
            "girl_name": girl.name if girl else None,
            "avatar_url": girl.avatar_url if girl else None,
            "city_id": girl.city_id if girl else None,
            "deposit_amount": to_float(account.deposit_amount),
            "balance": to_float(account.balance),
            "frozen_balance_thb": to_float(account.frozen_balance_thb),
            "platform_collected_rmb_balance": to_float(account.platform_collected_rmb_balance),
            "frozen_rmb_balance": to_float(account.frozen_rmb_balance),
            "currency": account.currency,
            "bank_account_name": account.bank_account_name,
            "bank_account_number": account.bank_account_number,
            "bank_name": account.bank_name,
            "bank_branch": account.bank_branch,
            "updated_at": format_datetime(account.updated_at)
        }
