"""
Models: OrderSettlement, GirlSettlementAccount, SettlementTransaction
Tables: order_settlements, girl_settlement_accounts, settlement_transactions

Per-order reconciliation between platform commission and what the customer
paid the platform, the therapist's running balance, and the money movements
that change it.
"""

# Database
from ..config.database import db

# Helpers
from ..util.helpers import new_uuid, utc_now





class OrderSettlement(db.Model):
    """
    One row per order.

    settlement_amount = customer_paid_to_platform - platform_should_get;
    negative means the therapist owes the platform.
    """

    # Table Name
    __tablename__ = "order_settlements"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    order_id = db.Column(db.String(36), db.ForeignKey("orders.id"), nullable = False, unique = True)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, index = True)

    service_fee = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    extra_fee = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    service_commission_rate = db.Column(db.Numeric(5, 4), nullable = False, default = 0, doc = "Fraction, 0.30 = 30%.")

    extra_commission_rate = db.Column(db.Numeric(5, 4), nullable = False, default = 0)

    platform_should_get = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    customer_paid_to_platform = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    settlement_amount = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    actual_paid_amount = db.Column(db.Numeric(10, 2), nullable = True)

    payment_content_type = db.Column(db.String(20), nullable = True, doc = "deposit | full_amount | tip | other")

    payment_method = db.Column(db.String(30), nullable = True)

    payment_notes = db.Column(db.Text, nullable = True)

    notes = db.Column(db.Text, nullable = True)

    settlement_status = db.Column(db.String(20), nullable = False, default = "pending", index = True)

    reject_reason = db.Column(db.Text, nullable = True)

    settled_at = db.Column(db.DateTime(timezone = True), nullable = True)

    operator_id = db.Column(db.String(36), nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now, index = True)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    order = db.relationship("Order", lazy = "joined")
    girl = db.relationship("Girl", lazy = "joined")

    def __repr__(self):
        return f"<OrderSettlement {self.order_id} {self.settlement_status}>"





class GirlSettlementAccount(db.Model):
    """ Running balance of a therapist against the platform... """

    # Table Name
    __tablename__ = "girl_settlement_accounts"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, unique = True)

    deposit_amount = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    balance = db.Column(db.Numeric(10, 2), nullable = False, default = 0, doc = "Negative means the therapist owes.")

    frozen_balance_thb = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    platform_collected_rmb_balance = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    frozen_rmb_balance = db.Column(db.Numeric(10, 2), nullable = False, default = 0)

    currency = db.Column(db.String(3), nullable = False, default = "THB")

    bank_account_name = db.Column(db.String(100), nullable = True)

    bank_account_number = db.Column(db.String(50), nullable = True)

    bank_name = db.Column(db.String(100), nullable = True)

    bank_branch = db.Column(db.String(100), nullable = True)

    bank_meta = db.Column(db.JSON, nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    girl = db.relationship("Girl", lazy = "joined")

    def __repr__(self):
        return f"<GirlSettlementAccount {self.girl_id} {self.balance}>"





class SettlementTransaction(db.Model):
    """ Money movement between a therapist and the platform... """

    # Table Name
    __tablename__ = "settlement_transactions"

    id = db.Column(db.String(36), primary_key = True, default = new_uuid)

    girl_id = db.Column(db.String(36), db.ForeignKey("girls.id"), nullable = False, index = True)

    order_id = db.Column(db.String(36), db.ForeignKey("orders.id"), nullable = True)

    transaction_type = db.Column(db.String(20), nullable = False, doc = "deposit | payment | withdrawal | adjustment")

    direction = db.Column(db.String(20), nullable = False, doc = "to_platform | to_girl")

    amount = db.Column(db.Numeric(10, 2), nullable = False)

    payment_method = db.Column(db.String(30), nullable = True)

    payment_proof_url = db.Column(db.Text, nullable = True)

    notes = db.Column(db.Text, nullable = True)

    approval_status = db.Column(db.String(20), nullable = False, default = "pending", index = True)

    approved_at = db.Column(db.DateTime(timezone = True), nullable = True)

    operator_id = db.Column(db.String(36), nullable = True)

    reject_reason = db.Column(db.Text, nullable = True)

    created_at = db.Column(db.DateTime(timezone = True), nullable = False, default = utc_now, index = True)

    updated_at = db.Column(
        db.DateTime(timezone = True),
        nullable = False,
        default = utc_now,
        onupdate = utc_now
    )

    girl = db.relationship("Girl", lazy = "joined")

    def __repr__(self):
        return f"<SettlementTransaction {self.transaction_type} {self.amount} {self.approval_status}>"
