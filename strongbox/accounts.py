"""
Account Management Module

Defines the account products (plain, savings, checking, trust), the shared
balance rules they are built from, and helpers to open and combine accounts.
Deposit and withdraw never raise for business-rule failures; they return a
TransactionResult that carries the failure reason.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Type
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .currency import Amount, ZERO, to_decimal, percent_of, format_money, format_rate
from .logging_config import get_logger, log_action


logger = get_logger("strongbox.accounts")

COMBINED_ACCOUNT_NAME = "Combined Account"

CHECKING_WITHDRAWAL_FEE = Decimal('1.50')

TRUST_MAX_WITHDRAWALS_PER_YEAR = 3
TRUST_WITHDRAWAL_CAP = Decimal('0.20')     # Fraction of current balance
TRUST_BONUS_THRESHOLD = Decimal('5000')
TRUST_DEPOSIT_BONUS = Decimal('50')


class AccountKind(Enum):
    """Account product types"""
    ACCOUNT = "account"
    SAVINGS = "savings"
    CHECKING = "checking"
    TRUST = "trust"


class FailureReason(Enum):
    """Why a deposit or withdrawal was refused"""
    INVALID_AMOUNT = "invalid_amount"                        # Deposit of zero or less
    INSUFFICIENT_FUNDS = "insufficient_funds"                # Would overdraw (fee included)
    CAP_EXCEEDED = "cap_exceeded"                            # Trust: more than 20% of balance
    MAX_WITHDRAWALS_REACHED = "max_withdrawals_reached"      # Trust: yearly count used up


@dataclass(frozen=True)
class TransactionResult:
    """
    Outcome of a single deposit or withdrawal.
    Truthy exactly when the operation succeeded.
    """
    success: bool
    amount: Decimal
    reason: Optional[FailureReason] = None
    fee: Decimal = ZERO

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def ok(cls, amount: Decimal, fee: Decimal = ZERO) -> 'TransactionResult':
        return cls(success=True, amount=amount, fee=fee)

    @classmethod
    def failed(cls, reason: FailureReason, amount: Decimal) -> 'TransactionResult':
        return cls(success=False, amount=amount, reason=reason)


def credit(account: 'Account', amount: Amount) -> TransactionResult:
    """Base deposit rule: add amount if it is positive"""
    value = to_decimal(amount)
    if value > ZERO:
        account.balance += value
        return TransactionResult.ok(value)
    return TransactionResult.failed(FailureReason.INVALID_AMOUNT, value)


def debit(account: 'Account', amount: Amount) -> TransactionResult:
    """
    Base withdraw rule: subtract amount if the balance stays non-negative.
    The sign of amount is not checked.
    """
    value = to_decimal(amount)
    if account.balance - value >= ZERO:
        account.balance -= value
        return TransactionResult.ok(value)
    return TransactionResult.failed(FailureReason.INSUFFICIENT_FUNDS, value)


def credit_with_interest(account: 'SavingsAccount', amount: Amount) -> TransactionResult:
    """
    Base deposit followed by interest on the new balance.
    No interest is applied when the deposit is refused.
    """
    result = credit(account, amount)
    if result:
        account.balance += percent_of(account.balance, account.interest_rate)
    return result


def _record(account: 'Account', action: str, result: TransactionResult) -> TransactionResult:
    outcome = "ok" if result else result.reason.value
    log_action(
        logger, "debug", f"{action} {result.amount}: {outcome}",
        account=account.name, action=action, outcome=outcome,
        extra={"kind": account.kind.value, "balance": str(account.balance)}
    )
    return result


@dataclass
class Account:
    """
    Plain account holding a name and a balance
    """
    name: str = "Unnamed Account"
    balance: Decimal = ZERO

    kind: ClassVar[AccountKind] = AccountKind.ACCOUNT

    def __post_init__(self):
        self.balance = to_decimal(self.balance)

    def deposit(self, amount: Amount) -> TransactionResult:
        return _record(self, "deposit", credit(self, amount))

    def withdraw(self, amount: Amount) -> TransactionResult:
        return _record(self, "withdraw", debit(self, amount))

    def describe(self) -> str:
        return f"{self.name}: {format_money(self.balance)}"

    def __str__(self) -> str:
        return self.describe()


@dataclass
class SavingsAccount(Account):
    """
    Account that accrues interest on every successful deposit.
    interest_rate is a percentage (5 means 5%).
    """
    name: str = "Unnamed Savings Account"
    interest_rate: Decimal = ZERO

    kind: ClassVar[AccountKind] = AccountKind.SAVINGS

    def __post_init__(self):
        super().__post_init__()
        self.interest_rate = to_decimal(self.interest_rate)
        if self.interest_rate < ZERO:
            raise ValueError("Interest rate must not be negative")

    def deposit(self, amount: Amount) -> TransactionResult:
        return _record(self, "deposit", credit_with_interest(self, amount))

    def describe(self) -> str:
        return (
            f"{self.name} (Savings): {format_money(self.balance)} "
            f"at {format_rate(self.interest_rate)}% interest"
        )


@dataclass
class CheckingAccount(Account):
    """
    Account that charges a flat fee on every withdrawal
    """
    name: str = "Unnamed Checking Account"

    kind: ClassVar[AccountKind] = AccountKind.CHECKING
    fee_per_withdrawal: ClassVar[Decimal] = CHECKING_WITHDRAWAL_FEE

    def withdraw(self, amount: Amount) -> TransactionResult:
        value = to_decimal(amount)
        total = value + self.fee_per_withdrawal
        if self.balance - total >= ZERO:
            self.balance -= total
            result = TransactionResult.ok(value, fee=self.fee_per_withdrawal)
        else:
            result = TransactionResult.failed(FailureReason.INSUFFICIENT_FUNDS, value)
        return _record(self, "withdraw", result)

    def describe(self) -> str:
        return f"{self.name} (Checking): {format_money(self.balance)}"


@dataclass
class TrustAccount(SavingsAccount):
    """
    Savings account with a deposit bonus and restricted withdrawals.

    Deposits of 5000 or more earn a flat 50 bonus after interest. At most
    three withdrawals are admitted over the account's lifetime, each no
    larger than 20% of the current balance.
    """
    name: str = "Unnamed Trust Account"
    withdrawals_this_year: int = 0

    kind: ClassVar[AccountKind] = AccountKind.TRUST
    max_withdrawals_per_year: ClassVar[int] = TRUST_MAX_WITHDRAWALS_PER_YEAR

    def __post_init__(self):
        super().__post_init__()
        if self.withdrawals_this_year < 0:
            raise ValueError("Withdrawal count must not be negative")

    @property
    def withdrawals_remaining(self) -> int:
        return max(self.max_withdrawals_per_year - self.withdrawals_this_year, 0)

    def deposit(self, amount: Amount) -> TransactionResult:
        result = credit_with_interest(self, amount)
        if result and result.amount >= TRUST_BONUS_THRESHOLD:
            self.balance += TRUST_DEPOSIT_BONUS
        return _record(self, "deposit", result)

    def withdraw(self, amount: Amount) -> TransactionResult:
        value = to_decimal(amount)

        if self.withdrawals_this_year >= self.max_withdrawals_per_year:
            result = TransactionResult.failed(FailureReason.MAX_WITHDRAWALS_REACHED, value)
        elif value > self.balance * TRUST_WITHDRAWAL_CAP:
            result = TransactionResult.failed(FailureReason.CAP_EXCEEDED, value)
        else:
            # Counted before the balance check; the cap keeps debit from failing today
            self.withdrawals_this_year += 1
            result = debit(self, value)

        return _record(self, "withdraw", result)

    def describe(self) -> str:
        return (
            f"{self.name} (Trust): {format_money(self.balance)} "
            f"with {format_rate(self.interest_rate)}% interest"
        )


ACCOUNT_CLASSES: Dict[AccountKind, Type[Account]] = {
    AccountKind.ACCOUNT: Account,
    AccountKind.SAVINGS: SavingsAccount,
    AccountKind.CHECKING: CheckingAccount,
    AccountKind.TRUST: TrustAccount,
}


def combine(first: Account, second: Account) -> Account:
    """
    Create a plain Account holding the sum of two balances.
    Neither input is modified and subtype fields are dropped.
    """
    return Account(name=COMBINED_ACCOUNT_NAME, balance=first.balance + second.balance)


class AccountOptions(BaseModel):
    """Recognized options for opening an account"""
    model_config = ConfigDict(extra="forbid")

    name: str = "Unnamed Account"
    balance: Decimal = Field(default=Decimal('0.0'))
    interest_rate: Decimal = Field(default=Decimal('0.0'), ge=0)

    @field_validator("balance", "interest_rate", mode="before")
    @classmethod
    def coerce_amount(cls, value):
        return to_decimal(value)


def open_account(kind, **options) -> Account:
    """
    Open an account of the given kind

    Args:
        kind: AccountKind or its value ("account", "savings", "checking", "trust")
        **options: name, balance, interest_rate (see AccountOptions)

    Returns:
        The new account. Without a name, the product's default name is used.

    Raises:
        ValueError: Unknown kind, or interest_rate given for a kind without interest
        pydantic.ValidationError: Unrecognized option or invalid value
    """
    kind = AccountKind(kind)
    opts = AccountOptions(**options)
    account_class = ACCOUNT_CLASSES[kind]

    kwargs = {"balance": opts.balance}
    if "name" in opts.model_fields_set:
        kwargs["name"] = opts.name

    if issubclass(account_class, SavingsAccount):
        kwargs["interest_rate"] = opts.interest_rate
    elif "interest_rate" in opts.model_fields_set:
        raise ValueError(f"{kind.value} accounts do not carry an interest rate")

    account = account_class(**kwargs)
    log_action(
        logger, "debug", f"Opened {kind.value} account",
        account=account.name, action="open_account",
        extra={"balance": str(account.balance)}
    )
    return account
