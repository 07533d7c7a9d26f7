import time

import pytest

from fundalgo.warehouse import (
    BuildingMaterial,
    ElectronicProduct,
    PerishableProduct,
    Product,
    Warehouse,
    main,
)

DAY = 86400


def _stock(now=0.0):
    wh = Warehouse()
    wh += PerishableProduct("Milk", 101, 1.0, 2.5, 5, now + 3 * DAY)
    wh += ElectronicProduct("Laptop", 201, 2.5, 1200.0, 30, 365, 60.0)
    wh += BuildingMaterial("Paint", 301, 5.0, 50.0, 0, 2)
    wh += PerishableProduct("Cheese", 102, 0.5, 4.0, 10, now + 10 * DAY)
    wh += PerishableProduct("Old Bread", 103, 0.4, 1.0, -2, now - 2 * DAY)
    return wh


def test_product_describe():
    product = Product("Milk", 101, 1.0, 2.5, 5)
    assert product.describe() == (
        "Label: Milk\nID: 101\nWeight: 1\nPrice: 2.5$\nExpiration Days: 5\n"
    )


def test_categories():
    wh = _stock()
    assert [p.category() for p in wh] == [
        "PerishableProduct",
        "ElectronicProduct",
        "BuildingMaterial",
        "PerishableProduct",
        "PerishableProduct",
    ]
    assert Product("x", 1, 1.0, 1.0, 0).category() == "Product"


def test_plain_and_electronic_fee_is_price():
    assert Product("x", 1, 1.0, 7.5, 0).storage_fee() == 7.5
    assert ElectronicProduct("Laptop", 2, 2.5, 1200.0, 30, 365, 60.0).storage_fee() == 1200.0


def test_building_material_fee():
    assert BuildingMaterial("Paint", 301, 5.0, 50.0, 0, 2).storage_fee() == 100.0
    assert BuildingMaterial("Plank", 302, 10.0, 30.0, 0, 0).storage_fee() == 30.0


def test_perishable_fee_grows_with_remaining_days():
    expired = PerishableProduct("Old", 1, 1.0, 3.0, 0, -DAY)
    soon = PerishableProduct("Soon", 2, 1.0, 3.0, 0, DAY)
    later = PerishableProduct("Later", 3, 1.0, 3.0, 0, 5 * DAY)
    assert expired.storage_fee(now=0) == 3.0
    assert 3.0 < soon.storage_fee(now=0) < later.storage_fee(now=0)


def test_perishable_describe_shows_date():
    product = PerishableProduct("Milk", 101, 1.0, 2.5, 5, 1_000_000)
    assert product.describe().endswith(f"Expiration Date: {time.ctime(1_000_000)}\n")


def test_electronic_describe_lines():
    product = ElectronicProduct("Laptop", 201, 2.5, 1200.0, 30, 365, 60.0)
    assert product.describe().endswith("Warranty Period: 365 days\nPower Rating: 60 W\n")


def test_find_and_getitem():
    wh = _stock()
    assert wh.find_product_by_id(201).label == "Laptop"
    assert wh.find_product_by_id(999) is None
    assert wh[301].label == "Paint"
    with pytest.raises(KeyError):
        wh[999]


def test_delete_product():
    wh = _stock()
    assert wh.delete_product(101) is True
    assert wh.delete_product(101) is False
    assert len(wh) == 4
    assert wh.find_product_by_id(101) is None


def test_isub_removes():
    wh = _stock()
    wh -= 201
    assert len(wh) == 4
    assert wh.find_product_by_id(201) is None


def test_find_by_category_keeps_order():
    wh = _stock()
    labels = [p.label for p in wh.find_products_by_category("PerishableProduct")]
    assert labels == ["Milk", "Cheese", "Old Bread"]
    assert wh.find_products_by_category("Unknown") == []


def test_storage_price_is_sum_of_fees():
    wh = _stock()
    assert wh.calculate_storage_price(now=0) == pytest.approx(
        sum(p.storage_fee(0) for p in wh)
    )
    assert Warehouse().calculate_storage_price(now=0) == 0


def test_expiring_products():
    wh = _stock()
    labels = [p.label for p in wh.expiring_products(4, now=0)]
    assert labels == ["Milk", "Old Bread"]
    assert len(wh.expiring_products(20, now=0)) == 3


def test_display_inventory_orders_categories():
    text = _stock().display_inventory()
    perishable = text.index("List of all PerishableProduct types:")
    electronic = text.index("List of all ElectronicProduct types:")
    building = text.index("List of all BuildingMaterial types:")
    assert perishable < electronic < building
    assert text.index("Label: Laptop") > electronic


def test_str_header():
    wh = _stock()
    assert str(wh).startswith(f"Total Products: {len(wh)}\nTotal Storage Cost: ")


def test_main_runs(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Deleting product with ID 101 (Milk)" in out
    assert "Label: LED Bulb" in out
    assert out.rstrip().endswith("Product not found.")