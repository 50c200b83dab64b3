"""
Demo Driver

Builds sample accounts for each product and runs them through the batch
operations, printing the report to stdout.

Run with: python -m strongbox
"""

from typing import Dict, List, Optional

from .accounts import Account, AccountKind, combine, open_account
from .batch import deposit_all, display_all, withdraw_all
from .config import get_config
from .logging_config import setup_logging
from .reporting import AccountReporter


def build_sample_accounts() -> Dict[AccountKind, List[Account]]:
    """Sample data: four accounts per product"""
    return {
        AccountKind.ACCOUNT: [
            open_account(AccountKind.ACCOUNT),
            open_account(AccountKind.ACCOUNT, name="Larry"),
            open_account(AccountKind.ACCOUNT, name="Moe", balance=2000),
            open_account(AccountKind.ACCOUNT, name="Curly", balance=5000),
        ],
        AccountKind.SAVINGS: [
            open_account(AccountKind.SAVINGS),
            open_account(AccountKind.SAVINGS, name="Superman"),
            open_account(AccountKind.SAVINGS, name="Batman", balance=2000),
            open_account(AccountKind.SAVINGS, name="Wonderwoman", balance=5000, interest_rate=5.0),
        ],
        AccountKind.CHECKING: [
            open_account(AccountKind.CHECKING),
            open_account(AccountKind.CHECKING, name="Larry2"),
            open_account(AccountKind.CHECKING, name="Moe2", balance=2000),
            open_account(AccountKind.CHECKING, name="Curly2", balance=5000),
        ],
        AccountKind.TRUST: [
            open_account(AccountKind.TRUST),
            open_account(AccountKind.TRUST, name="Superman2"),
            open_account(AccountKind.TRUST, name="Batman2", balance=2000),
            open_account(AccountKind.TRUST, name="Wonderwoman2", balance=5000, interest_rate=5.0),
        ],
    }


def run_demo(reporter: Optional[AccountReporter] = None) -> Dict[AccountKind, List[Account]]:
    """Run the sample batches and return the accounts in their final state"""
    reporter = reporter or AccountReporter()
    groups = build_sample_accounts()

    accounts = groups[AccountKind.ACCOUNT]
    display_all(accounts, reporter)
    deposit_all(accounts, 1000, reporter)
    withdraw_all(accounts, 2000, reporter)

    savings = groups[AccountKind.SAVINGS]
    display_all(savings, reporter)
    deposit_all(savings, 1000, reporter)
    withdraw_all(savings, 2000, reporter)

    checking = groups[AccountKind.CHECKING]
    display_all(checking, reporter)
    deposit_all(checking, 1000, reporter)
    withdraw_all(checking, 2000, reporter)
    withdraw_all(checking, 2000, reporter)

    trust = groups[AccountKind.TRUST]
    display_all(trust, reporter)
    deposit_all(trust, 1000, reporter)
    deposit_all(trust, 6000, reporter)
    withdraw_all(trust, 2000, reporter)
    withdraw_all(trust, 3000, reporter)
    withdraw_all(trust, 500, reporter)

    reporter.write()
    reporter.combined_line(combine(accounts[0], accounts[1]))

    return groups


def main() -> None:
    """Configure logging from the environment and run the demo"""
    settings = get_config()
    setup_logging(settings.log_level, settings.log_format, settings.log_file)
    run_demo()
