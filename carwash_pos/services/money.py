from decimal import Decimal, ROUND_HALF_UP

# Guaraní has no minor unit.
GUARANI = Decimal("1")


def to_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def money(value) -> Decimal:
    return to_decimal(value).quantize(GUARANI, rounding=ROUND_HALF_UP)


def line_subtotal(unit_price, quantity: int) -> Decimal:
    return money(to_decimal(unit_price) * quantity)


def compute_tax(subtotal, rate: Decimal, exempt: bool) -> Decimal:
    if exempt:
        return money(0)
    return money(to_decimal(subtotal) * rate)


def format_guarani(value) -> str:
    return f"Gs. {money(value):,.0f}".replace(",", ".")
