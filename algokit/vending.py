"""Juice vending machines: a cash register, dispensers and menus."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_CASH = 500
DEFAULT_ITEMS = 50
DEFAULT_COST = 500
FALLBACK_COST = 50


class SoldOutError(Exception):
    """Raised when the chosen item is no longer available."""


class InvalidChoiceError(ValueError):
    """Raised when a menu number does not exist."""


class InsufficientPaymentError(Exception):
    """Raised when the money deposited does not cover the price."""


class CashRegister:
    """Holds the cash taken in by a machine."""

    def __init__(self, cash_on_hand: int = DEFAULT_CASH) -> None:
        # Never start empty: the machine may have to give change.
        self.cash_on_hand = cash_on_hand if cash_on_hand >= 0 else DEFAULT_CASH

    def accept(self, amount: int) -> None:
        """Add a customer's payment to the register."""
        self.cash_on_hand += amount


class Dispenser:
    """A stock of one product sold at a fixed cost in cents."""

    def __init__(self, items: int = DEFAULT_ITEMS, cost: int = DEFAULT_COST) -> None:
        self.items = items if items >= 0 else DEFAULT_ITEMS
        self.cost = cost if cost >= 0 else FALLBACK_COST

    def make_sale(self) -> None:
        """Take one item out of stock, if any is left."""
        if self.items > 0:
            self.items -= 1


def sell_product(
    dispenser: Dispenser, register: CashRegister, payments: Iterable[int]
) -> int:
    """Sell one item, taking at most two payments; return the amount accepted.

    The first payment is topped up once by the second if it falls short.
    If the total still does not cover the cost, nothing is kept.
    """
    if dispenser.items <= 0:
        raise SoldOutError("The item is not available anymore!")
    amounts = iter(payments)
    amount = next(amounts, None)
    if amount is None:
        raise InsufficientPaymentError("no money was deposited")
    if amount < dispenser.cost:
        extra = next(amounts, None)
        if extra is not None:
            amount += extra
    if amount < dispenser.cost:
        raise InsufficientPaymentError(
            "The money paid is not enough! Collect what you deposited."
        )
    register.accept(amount)
    dispenser.make_sale()
    return amount


def _collect(price: float, deposits: Iterable[float]) -> float:
    total = 0.0
    for deposit in deposits:
        total += deposit
        if total >= price:
            return total
    raise InsufficientPaymentError(
        f"You need to deposit {price - total} more to buy the item."
    )


class SingleItemMachine:
    """A machine selling one product at a single price."""

    def __init__(self, cost: float = 100.0, count: int = 100) -> None:
        self.cost = cost
        self.count = count

    def purchase(self, deposits: Iterable[float]) -> float:
        """Take deposits until the price is met; return the change."""
        if self.count <= 0:
            raise SoldOutError("Item sold out!")
        total = _collect(self.cost, deposits)
        self.count -= 1
        return total - self.cost


@dataclass(frozen=True)
class MenuItem:
    """One line of the menu."""

    choice: int
    name: str
    price: float
    quantity: int


class JuiceMachine:
    """A machine with a numbered menu of juices, each with its own stock."""

    def __init__(self) -> None:
        self.items: dict[int, tuple[str, float]] = {
            1: ("Apple Juice", 2.55),
            2: ("Orange Juice", 3.50),
            3: ("Mango lassi", 4.50),
            4: ("Fruit punch", 5.50),
        }
        self.quantities: dict[int, int] = {choice: 100 for choice in self.items}

    def menu(self) -> list[MenuItem]:
        """Return the menu in order of choice number."""
        return [
            MenuItem(choice, name, price, self.quantities[choice])
            for choice, (name, price) in sorted(self.items.items())
        ]

    def render_menu(self) -> str:
        """Show one menu line per item with its price and stock."""
        return "\n".join(
            f"{item.choice}:{item.name} ${item.price:.2f}  Quantity:{item.quantity}"
            for item in self.menu()
        )

    def purchase(self, choice: int, deposits: Iterable[float]) -> float:
        """Buy item ``choice``, taking deposits until paid; return the change."""
        if choice not in self.items:
            raise InvalidChoiceError(f"Invalid choice {choice}!")
        if self.quantities[choice] == 0:
            raise SoldOutError("Item is sold out!")
        price = self.items[choice][1]
        total = _collect(price, deposits)
        self.quantities[choice] -= 1
        return total - price