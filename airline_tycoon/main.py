"""
Command-line demo runner for the airline tycoon engine.

Commands:
- airports: list airports ranked by demand, optionally filtered by a search term
- planes: show the aircraft catalog
- quote: distance, block time and fair prices for a route
- simulate: buy a plane, schedule a daily round trip and fast-forward the game
"""

import logging
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table
from tqdm import tqdm

from airline_tycoon.models import GameSpeed, SeatClass, SPEED_MULTIPLIERS, MINUTES_PER_DAY, TicketPricingModel
from airline_tycoon.services import Simulation
from airline_tycoon.utils.config import get_config
from airline_tycoon.utils.format import format_currency, format_duration, format_game_time

app = typer.Typer(help="Airline Tycoon - tick-driven airline economy simulation")
console = Console()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Airline Tycoon simulation engine."""
    config = get_config()
    configure_logging("DEBUG" if verbose or config.debug else config.log_level)


@app.command()
def airports(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter by code, name or city"),
    limit: int = typer.Option(10, "--limit", "-n", help="Maximum rows to show"),
):
    """List airports ranked by total daily demand."""
    simulation = Simulation.create()
    ranked = simulation.airports.sorted_by_demand()
    if search:
        matches = {a.code for a in simulation.airports.search(search)}
        ranked = [a for a in ranked if a.code in matches]

    table = Table(title="Airports by Demand", box=box.ROUNDED)
    table.add_column("Code", style="cyan bold")
    table.add_column("Name")
    table.add_column("City")
    table.add_column("Business", justify="right")
    table.add_column("Leisure", justify="right")
    table.add_column("First", justify="right")
    table.add_column("Landing Fee", justify="right", style="yellow")

    for airport in ranked[:limit]:
        table.add_row(
            airport.code,
            airport.name,
            airport.city,
            f"{airport.demand.business:,}",
            f"{airport.demand.leisure:,}",
            f"{airport.demand.first_class:,}",
            format_currency(airport.landing_fee),
        )

    console.print(table)
    if not ranked:
        console.print(f"[yellow]No airports match '{search}'[/yellow]")


@app.command()
def planes():
    """Show the aircraft catalog."""
    simulation = Simulation.create()
    table = Table(title="Aircraft Catalog", box=box.ROUNDED)
    table.add_column("ID", style="cyan bold")
    table.add_column("Aircraft")
    table.add_column("Range (nm)", justify="right")
    table.add_column("Speed (kt)", justify="right")
    table.add_column("Seats Y/J/F", justify="right")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Cost/nm", justify="right", style="yellow")

    for model in simulation.fleet.list_models():
        seats = model.default_seats
        table.add_row(
            model.id,
            model.display_name,
            f"{model.range:,}",
            str(model.speed),
            f"{seats.economy}/{seats.business}/{seats.first_class}",
            format_currency(model.purchase_price),
            f"{model.operating_cost_per_nm:.2f}",
        )
    console.print(table)


@app.command()
def quote(
    origin: str = typer.Argument(..., help="Departure airport code"),
    destination: str = typer.Argument(..., help="Arrival airport code"),
    speed: int = typer.Option(450, "--speed", min=1, help="Cruise speed in knots"),
):
    """Distance, block time and fair prices for a route."""
    simulation = Simulation.create()
    origin, destination = origin.upper(), destination.upper()
    for code in (origin, destination):
        if code not in simulation.airports:
            console.print(f"[red]Error: Unknown airport code '{code}'[/red]")
            raise typer.Exit(1)

    distance = simulation.airports.distance_nm(origin, destination)
    duration = simulation.airports.duration_minutes(origin, destination, speed)
    prices = simulation.bookings.quote(origin, destination)

    table = Table(title=f"{origin} → {destination}", box=box.ROUNDED, show_header=False)
    table.add_column("Metric", style="cyan bold")
    table.add_column("Value", justify="right")
    table.add_row("Distance", f"{distance:,.0f} nm")
    table.add_row("Block time", format_duration(duration))
    for seat_class, price in prices.items():
        table.add_row(f"Fair {seat_class.value.replace('_', ' ')}", format_currency(price))
    console.print(table)


@app.command()
def simulate(
    days: int = typer.Option(7, "--days", "-d", min=1, help="Simulated days to run"),
    model_id: str = typer.Option("e175", "--model", "-m", help="Aircraft model to buy"),
    origin: str = typer.Option("JFK", "--from", help="Hub airport"),
    destination: str = typer.Option("BOS", "--to", help="Destination airport"),
    markup: float = typer.Option(1.0, "--markup", help="Fare multiplier applied to fair prices"),
    speed: str = typer.Option("fast", "--speed", help="Clock speed: slow, normal or fast"),
):
    """Run a headless demo: one plane flying a daily round trip."""
    try:
        game_speed = GameSpeed[speed.upper()]
    except KeyError:
        console.print(f"[red]Error: Unknown speed '{speed}'. Use slow, normal or fast[/red]")
        raise typer.Exit(1)
    if game_speed == GameSpeed.PAUSED:
        console.print("[red]Error: Cannot fast-forward a paused clock[/red]")
        raise typer.Exit(1)

    simulation = Simulation.create()
    origin, destination = origin.upper(), destination.upper()
    company = simulation.company

    console.print()
    console.print(Panel.fit(
        f"[bold cyan]{company.company.name.upper()}[/bold cyan]\n"
        f"[yellow]{origin} ⇄ {destination} for {days} days at {game_speed.name.lower()} speed[/yellow]",
        border_style="cyan",
        box=box.DOUBLE,
    ))

    plane = simulation.fleet.purchase(model_id, "N100TY", origin)
    if plane is None:
        console.print(f"[red]❌ Could not purchase '{model_id}' (unknown model or insufficient cash)[/red]")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] Purchased {model_id} {plane.registration}, cash now {format_currency(company.cash)}")

    outbound = simulation.bookings.quote(origin, destination)
    inbound = simulation.bookings.quote(destination, origin)
    simulation.flights.create_schedule(
        "TY100", origin, destination, plane.id, 8 * 60, range(7),
        TicketPricingModel(**{c.value: outbound[c] * markup for c in SeatClass}),
    )
    simulation.flights.create_schedule(
        "TY101", destination, origin, plane.id, 16 * 60, range(7),
        TicketPricingModel(**{c.value: inbound[c] * markup for c in SeatClass}),
    )
    console.print("[green]✓[/green] Scheduled daily TY100/TY101 round trip\n")

    simulation.clock.set_speed(game_speed)
    steps = int(days * MINUTES_PER_DAY / SPEED_MULTIPLIERS[game_speed])
    for _ in tqdm(range(steps), desc="Simulating", unit="tick"):
        simulation.clock.tick()

    console.print(f"\n[bold]Clock:[/bold] {format_game_time(simulation.clock.total_minutes)}")
    _print_fleet(simulation)
    _print_flights(simulation)
    _print_history(simulation)
    console.print(
        f"\n[bold]Cash:[/bold] {format_currency(company.cash)}   "
        f"[bold]Revenue:[/bold] {format_currency(company.company.total_revenue)}   "
        f"[bold]Expenses:[/bold] {format_currency(company.company.total_expenses)}"
    )


def _print_fleet(simulation: Simulation) -> None:
    table = Table(title="Fleet", box=box.ROUNDED)
    table.add_column("Registration", style="cyan bold")
    table.add_column("Aircraft")
    table.add_column("Location")
    table.add_column("Status")
    table.add_column("Hours", justify="right")

    for plane in simulation.fleet.list_fleet():
        model = simulation.fleet.model_for_plane(plane.id)
        table.add_row(
            plane.registration,
            model.display_name if model else plane.model_id,
            plane.current_airport_code,
            plane.status.value,
            f"{plane.total_flight_hours:.1f}",
        )
    console.print(table)


def _print_flights(simulation: Simulation) -> None:
    table = Table(title="Flights", box=box.ROUNDED)
    table.add_column("Flight", style="cyan bold")
    table.add_column("Route")
    table.add_column("Departs")
    table.add_column("Status")
    table.add_column("Pax Y/J/F", justify="right")
    table.add_column("Revenue", justify="right", style="green")
    table.add_column("Cost", justify="right", style="red")

    for flight in sorted(simulation.flights.list_flights(), key=lambda f: f.departure_time):
        pax = flight.passengers
        table.add_row(
            flight.flight_number,
            f"{flight.departure_airport_code}→{flight.arrival_airport_code}",
            format_game_time(flight.departure_time),
            flight.status.value,
            f"{pax.economy}/{pax.business}/{pax.first_class}",
            format_currency(flight.revenue),
            format_currency(flight.cost),
        )
    console.print(table)


def _print_history(simulation: Simulation) -> None:
    table = Table(title="Daily Financials", box=box.ROUNDED)
    table.add_column("Day", style="cyan bold", justify="right")
    table.add_column("Revenue", justify="right", style="green")
    table.add_column("Expenses", justify="right", style="red")
    table.add_column("Profit", justify="right")

    for record in simulation.company.company.financial_history:
        style = "green" if record.profit >= 0 else "red"
        table.add_row(
            str(record.date + 1),
            format_currency(record.revenue),
            format_currency(record.expenses),
            f"[{style}]{format_currency(record.profit)}[/{style}]",
        )
    console.print(table)


if __name__ == "__main__":
    app()
