def format_amount(amount: float) -> str:
    """Render an amount at full precision: ``120`` for whole values, else the shortest exact repr."""
    value = float(amount)
    if value.is_integer():
        return str(int(value))
    return repr(value)
