"""Worked answers to the variables, functions and if exercises."""

_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}


def calculate_price_of_apples(apples: int) -> int:
    """Two per apple, or one per apple for orders above forty."""
    if apples <= 0:
        return 0
    if apples <= 40:
        return apples * 2
    return apples


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def bigger(a: int, b: int) -> int:
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def animal_habitat(animal: str) -> str:
    return _HABITATS.get(animal, "Unknown")