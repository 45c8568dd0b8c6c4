"""
Airline Tycoon: tick-driven airline economy simulation

Simulates an airline operator over accelerated game time:
1. Airports provide daily passenger demand
2. An owned fleet flies scheduled and recurring routes
3. Tickets sell at operator-set prices through a price-elasticity model
4. A company ledger tracks cash flow and daily financial history

The engine is an in-process library; the Typer CLI in ``airline_tycoon.main``
is a thin demo runner on top of it.
"""

__version__ = "0.1.0"
