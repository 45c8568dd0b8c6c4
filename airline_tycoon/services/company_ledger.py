"""
Company ledger: cash balance, lifetime totals and daily financial history.
"""

import logging
from typing import Optional

from ..models.company import CompanyModel, FinancialRecordModel
from ..models.game import day_index

logger = logging.getLogger(__name__)

STARTING_CASH = 10_000_000
HISTORY_DAYS = 30


class CompanyLedger:
    """
    Owns the company record and its running accumulators.

    Revenue and expenses are accumulated per simulated day; when the day
    index advances, the completed day is pushed into a capped history
    (oldest records evicted first).
    """

    def __init__(
        self,
        name: str = "",
        starting_cash: float = STARTING_CASH,
        history_days: int = HISTORY_DAYS,
    ):
        """
        Initialize the ledger.

        Args:
            name: Company name
            starting_cash: Opening cash balance
            history_days: Maximum number of daily records retained
        """
        self.company = CompanyModel(name=name, cash=starting_cash)
        self.history_days = history_days
        self._daily_revenue = 0.0
        self._daily_expenses = 0.0
        self._last_snapshot_day: Optional[int] = None

    @property
    def cash(self) -> float:
        return self.company.cash

    @property
    def revenue_today(self) -> float:
        return self._daily_revenue

    @property
    def expenses_today(self) -> float:
        return self._daily_expenses

    @property
    def profit_today(self) -> float:
        return self._daily_revenue - self._daily_expenses

    @property
    def net_worth(self) -> float:
        return self.company.cash

    def set_name(self, name: str) -> None:
        self.company.name = name

    def can_afford(self, amount: float) -> bool:
        return self.company.cash >= amount

    def add_expense(self, amount: float) -> None:
        """Lower cash and raise lifetime and daily expenses. No floor on cash."""
        self.company.cash -= amount
        self.company.total_expenses += amount
        self._daily_expenses += amount

    # Purchases and operating costs are booked identically
    deduct_cash = add_expense

    def add_revenue(self, amount: float) -> None:
        self.company.cash += amount
        self.company.total_revenue += amount
        self._daily_revenue += amount

    def process_tick(self, total_minutes: float) -> Optional[FinancialRecordModel]:
        """
        Roll up the completed day when the simulated day index advances.

        The first call only primes the day marker.

        Args:
            total_minutes: Current simulated time

        Returns:
            Optional[FinancialRecordModel]: The record pushed this tick, if any
        """
        current_day = day_index(total_minutes)
        if self._last_snapshot_day is None:
            self._last_snapshot_day = current_day
            return None

        if current_day <= self._last_snapshot_day:
            return None

        record = FinancialRecordModel(
            date=self._last_snapshot_day,
            revenue=self._daily_revenue,
            expenses=self._daily_expenses,
            profit=self._daily_revenue - self._daily_expenses,
        )
        history = self.company.financial_history
        history.append(record)
        if len(history) > self.history_days:
            del history[:len(history) - self.history_days]

        logger.info(
            f"Day {record.date + 1} closed: revenue={record.revenue:.0f} "
            f"expenses={record.expenses:.0f} profit={record.profit:.0f}"
        )

        self._daily_revenue = 0.0
        self._daily_expenses = 0.0
        self._last_snapshot_day = current_day
        return record
