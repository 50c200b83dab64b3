"""
Batch Operations Module

Applies display, deposit and withdraw across a sequence of accounts. Each
account uses its own product rules; a failure on one account never stops
the rest of the batch.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .accounts import Account, TransactionResult
from .currency import Amount
from .logging_config import get_logger, log_action
from .reporting import AccountReporter


logger = get_logger("strongbox.batch")


@dataclass(frozen=True)
class BatchOutcome:
    """Result of one account's operation within a batch"""
    account: Account
    result: TransactionResult

    @property
    def success(self) -> bool:
        return self.result.success


def summarize(outcomes: Sequence[BatchOutcome]) -> Dict[str, int]:
    """Count succeeded and failed operations in a batch"""
    succeeded = sum(1 for outcome in outcomes if outcome.success)
    return {"succeeded": succeeded, "failed": len(outcomes) - succeeded}


def display_all(accounts: Sequence[Account], reporter: Optional[AccountReporter] = None) -> None:
    """Write every account's description under an "Accounts" header"""
    reporter = reporter or AccountReporter()
    reporter.section("Accounts")
    for account in accounts:
        reporter.account_line(account)


def deposit_all(accounts: Sequence[Account], amount: Amount,
                reporter: Optional[AccountReporter] = None) -> List[BatchOutcome]:
    """
    Deposit the same amount into each account, in order

    Args:
        accounts: Accounts of any product type
        amount: Amount to deposit into each account
        reporter: Where per-account lines are written (stdout by default)

    Returns:
        One BatchOutcome per account, in input order
    """
    reporter = reporter or AccountReporter()
    reporter.section("Depositing to Accounts")

    outcomes = []
    for account in accounts:
        result = account.deposit(amount)
        reporter.deposit_line(account, result)
        outcomes.append(BatchOutcome(account, result))

    _log_batch("deposit_all", amount, outcomes)
    return outcomes


def withdraw_all(accounts: Sequence[Account], amount: Amount,
                 reporter: Optional[AccountReporter] = None) -> List[BatchOutcome]:
    """
    Withdraw the same amount from each account, in order

    Returns:
        One BatchOutcome per account, in input order
    """
    reporter = reporter or AccountReporter()
    reporter.section("Withdrawing from Accounts")

    outcomes = []
    for account in accounts:
        result = account.withdraw(amount)
        reporter.withdrawal_line(account, result)
        outcomes.append(BatchOutcome(account, result))

    _log_batch("withdraw_all", amount, outcomes)
    return outcomes


def _log_batch(action: str, amount: Amount, outcomes: List[BatchOutcome]) -> None:
    counts = summarize(outcomes)
    log_action(
        logger, "info",
        f"{action} {amount}: {counts['succeeded']} succeeded, {counts['failed']} failed",
        action=action, extra={"amount": str(amount), **counts}
    )
