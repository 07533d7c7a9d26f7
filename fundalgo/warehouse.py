"""Warehouse inventory of products with category-specific storage fees."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

SECONDS_PER_DAY = 86400.0
CATEGORIES = ("PerishableProduct", "ElectronicProduct", "BuildingMaterial")


def _now(now: Optional[float]) -> float:
    return time.time() if now is None else now


@dataclass
class Product:
    """A stored item; its storage fee is its price."""

    label: str
    product_id: int
    weight: float
    price: float
    expiration_days: int

    def storage_fee(self, now: Optional[float] = None) -> float:
        return self.price

    def describe(self) -> str:
        return (
            f"Label: {self.label}\nID: {self.product_id}\nWeight: {self.weight:g}"
            f"\nPrice: {self.price:g}$\nExpiration Days: {self.expiration_days}\n"
        )

    def category(self) -> str:
        return "Product"


@dataclass
class PerishableProduct(Product):
    """Product with an expiration timestamp (seconds since the epoch)."""

    expiration_date: float

    def days_until_expiration(self, now: Optional[float] = None) -> float:
        return (self.expiration_date - _now(now)) / SECONDS_PER_DAY

    def storage_fee(self, now: Optional[float] = None) -> float:
        """Price plus 5% per day left before expiry."""
        days = max(self.days_until_expiration(now), 0.0)
        return self.price * (1 + 0.05 * days)

    def describe(self) -> str:
        return super().describe() + f"Expiration Date: {time.ctime(self.expiration_date)}\n"

    def category(self) -> str:
        return "PerishableProduct"


@dataclass
class ElectronicProduct(Product):
    """Product with a warranty in days and a power rating in watts."""

    warranty_period: int
    power_rating: float

    def describe(self) -> str:
        return (
            super().describe()
            + f"Warranty Period: {self.warranty_period} days\n"
            + f"Power Rating: {self.power_rating:g} W\n"
        )

    def category(self) -> str:
        return "ElectronicProduct"


@dataclass
class BuildingMaterial(Product):
    """Product whose fee grows by half its price per flammability level."""

    flammability: int

    def storage_fee(self, now: Optional[float] = None) -> float:
        return self.price * (1 + 0.5 * self.flammability)

    def describe(self) -> str:
        return super().describe() + f"Flammability Level: {self.flammability}\n"

    def category(self) -> str:
        return "BuildingMaterial"


class Warehouse:
    """Ordered collection of products addressed by their IDs."""

    def __init__(self) -> None:
        self.products: list[Product] = []

    def add_product(self, product: Product) -> None:
        self.products.append(product)

    def find_product_by_id(self, product_id: int) -> Optional[Product]:
        """First product with ``product_id``, or None."""
        return next((p for p in self.products if p.product_id == product_id), None)

    def delete_product(self, product_id: int) -> bool:
        """Remove products with ``product_id``; True if any were removed."""
        kept = [p for p in self.products if p.product_id != product_id]
        removed = len(kept) != len(self.products)
        self.products = kept
        return removed

    def find_products_by_category(self, category: str) -> list[Product]:
        return [p for p in self.products if p.category() == category]

    def calculate_storage_price(self, now: Optional[float] = None) -> float:
        moment = _now(now)
        return sum(p.storage_fee(moment) for p in self.products)

    def expiring_products(self, days: int, now: Optional[float] = None) -> list[Product]:
        """Perishable products expiring within ``days`` days, expired ones included."""
        moment = _now(now)
        return [
            p
            for p in self.products
            if isinstance(p, PerishableProduct) and p.days_until_expiration(moment) <= days
        ]

    def display_inventory(self) -> str:
        """Listing of every known category and its products."""
        parts = []
        for category in CATEGORIES:
            parts.append(f"List of all {category} types:\n\n")
            for product in self.find_products_by_category(category):
                parts.append(product.describe() + "\n")
            parts.append("\n\n")
        return "".join(parts)

    def __iadd__(self, product: Product) -> Warehouse:
        self.add_product(product)
        return self

    def __isub__(self, product_id: int) -> Warehouse:
        self.delete_product(product_id)
        return self

    def __getitem__(self, product_id: int) -> Product:
        product = self.find_product_by_id(product_id)
        if product is None:
            raise KeyError(product_id)
        return product

    def __len__(self) -> int:
        return len(self.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __str__(self) -> str:
        return (
            f"Total Products: {len(self)}\n"
            f"Total Storage Cost: {self.calculate_storage_price():g}$\n\n"
            + self.display_inventory()
        )


def _show(warehouse: Warehouse, product_id: int) -> None:
    try:
        print(warehouse[product_id].describe(), end="")
    except KeyError:
        print("Product not found.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    now = time.time()
    day = SECONDS_PER_DAY
    warehouse = Warehouse()
    warehouse += PerishableProduct("Milk", 101, 1.0, 2.5, 5, now + 5 * day)
    warehouse += ElectronicProduct("Laptop", 201, 2.5, 1200.0, 30, 365, 60.0)
    warehouse += BuildingMaterial("Paint", 301, 5.0, 50.0, 0, 2)
    warehouse += PerishableProduct("Bread", 102, 0.5, 1.5, 3, now + 3 * day)
    warehouse += PerishableProduct("Old Bread", 103, 0.4, 1.0, -2, now - 2 * day)
    warehouse += ElectronicProduct("LED Bulb", 202, 0.1, 5.0, 1000, 730, 10.0)
    warehouse += ElectronicProduct("USB Cable", 203, 0.05, 2.0, 365, 0, 0.5)
    warehouse += BuildingMaterial("Wood Plank", 302, 10.0, 30.0, 0, 1)
    warehouse += BuildingMaterial("Gas Canister", 303, 2.0, 50.0, 0, 5)

    print("Initial Inventory:")
    print(warehouse, end="")

    print("Expiring products within 4 days:")
    for product in warehouse.expiring_products(4):
        print(product.describe())

    print("Deleting product with ID 101 (Milk)")
    warehouse -= 101
    print(warehouse, end="")

    print("Accessing product with ID 202 (LED Bulb)")
    _show(warehouse, 202)
    print("Accessing product with ID 999 (Non-existent)")
    _show(warehouse, 999)
    return 0


if __name__ == "__main__":
    sys.exit(main())