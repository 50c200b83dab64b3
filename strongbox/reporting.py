"""
Reporting Module

Renders accounts and batch outcomes as plain text lines for a human reader.
Business logic only returns results; everything printed comes from here.
"""

import sys
from typing import Optional, TextIO

from .accounts import Account, FailureReason, TransactionResult
from .config import get_config
from .currency import format_amount


FAILURE_TEXT = {
    FailureReason.INVALID_AMOUNT: "Cannot deposit: Amount must be positive.",
    FailureReason.INSUFFICIENT_FUNDS: "Cannot withdraw: Insufficient funds.",
    FailureReason.CAP_EXCEEDED: "Cannot withdraw: Withdrawal amount exceeds 20% of the balance.",
    FailureReason.MAX_WITHDRAWALS_REACHED: "Cannot withdraw: Max withdrawals reached for the year.",
}

# Reasons announced on their own line before the "Failed Withdrawal" line
EXPLAINED_REASONS = (FailureReason.CAP_EXCEEDED, FailureReason.MAX_WITHDRAWALS_REACHED)


def failure_reason_text(reason: FailureReason) -> str:
    """Human-readable text for a failure reason"""
    return FAILURE_TEXT[reason]


class AccountReporter:
    """
    Writes account reports line by line to a text stream
    """

    def __init__(self, stream: Optional[TextIO] = None, width: Optional[int] = None):
        self.stream = stream
        self.width = width if width is not None else get_config().report_width

    def write(self, line: str = "") -> None:
        # Resolve stdout at write time so redirected/captured stdout is honoured
        print(line, file=self.stream or sys.stdout)

    def section(self, title: str) -> None:
        self.write()
        self.write(f"=== {title} ".ljust(self.width, "="))

    def account_line(self, account: Account) -> None:
        self.write(account.describe())

    def deposit_line(self, account: Account, result: TransactionResult) -> None:
        amount = format_amount(result.amount)
        if result:
            self.write(f"Deposited {amount} to {account.describe()}")
        else:
            self.write(f"Failed Deposit of {amount} to {account.describe()}")

    def withdrawal_line(self, account: Account, result: TransactionResult) -> None:
        amount = format_amount(result.amount)
        if result:
            self.write(f"Withdrew {amount} from {account.describe()}")
            return
        if result.reason in EXPLAINED_REASONS:
            self.write(failure_reason_text(result.reason))
        self.write(f"Failed Withdrawal of {amount} from {account.describe()}")

    def combined_line(self, account: Account) -> None:
        self.write(f"Combined Account: {account.describe()}")
