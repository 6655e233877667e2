# Finance management: transaction processors and accounts

from datetime import datetime
from decimal import Decimal
from typing import NamedTuple

from utils.helpers import format_currency, to_decimal


class Transaction(NamedTuple):
    """
    Represents a single money movement. Transactions never change once made.
    """
    id: int
    date: datetime
    amount: Decimal
    category: str


class TransactionProcessor:
    label = "Generic"

    def process(self, transaction: Transaction) -> str:
        message = f"{self.label} of {format_currency(transaction.amount)} for '{transaction.category}'"
        print(message)
        return message


class BankTransferProcessor(TransactionProcessor):
    label = "Bank transfer"


class MobileMoneyProcessor(TransactionProcessor):
    label = "Mobile money transfer"


class CryptoWalletProcessor(TransactionProcessor):
    label = "Crypto wallet transfer"


class Account:
    def __init__(self, account_number: str, initial_balance):
        self.account_number = account_number
        self._balance = to_decimal(initial_balance)

    @property
    def balance(self) -> Decimal:
        return self._balance

    def apply_transaction(self, transaction: Transaction) -> bool:
        self._balance -= to_decimal(transaction.amount)
        print(f"Transaction applied. New balance: {format_currency(self._balance)}")
        return True


class SavingsAccount(Account):
    """
    An account that refuses to go below zero.
    """
    def apply_transaction(self, transaction: Transaction) -> bool:
        if to_decimal(transaction.amount) > self._balance:
            print("Insufficient funds.")
            return False
        return super().apply_transaction(transaction)


class FinanceApp:
    def __init__(self):
        self._transactions = []
        self.account = SavingsAccount("SA-001", Decimal("1000"))

    @property
    def transactions(self):
        return list(self._transactions)

    def run(self, now=None):
        now = now or datetime.now()
        t1 = Transaction(1, now, Decimal("120.50"), "Groceries")
        t2 = Transaction(2, now, Decimal("200"), "Utilities")
        t3 = Transaction(3, now, Decimal("150"), "Entertainment")

        MobileMoneyProcessor().process(t1)
        BankTransferProcessor().process(t2)
        CryptoWalletProcessor().process(t3)

        for transaction in (t1, t2, t3):
            self.account.apply_transaction(transaction)
        self._transactions.extend([t1, t2, t3])

        print("Transaction history:")
        for transaction in self._transactions:
            print(f"Transaction ID: {transaction.id}, Date: {transaction.date:%m/%d/%Y %H:%M}, "
                  f"Amount: {format_currency(transaction.amount)}, Category: {transaction.category}")


if __name__ == "__main__":
    FinanceApp().run()
