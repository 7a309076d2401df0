import math

from securetally.errors import NoInverseExists


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, modulus)


def mod_inverse(a: int, modulus: int) -> int:
    """Return x such that a*x = 1 (mod modulus)."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    try:
        return pow(a, -1, modulus)
    except ValueError as exc:
        raise NoInverseExists(f"gcd({a}, {modulus}) != 1") from exc


def l_function(x: int, n: int) -> int:
    # n divides x - 1 for every u = c^lambda mod n^2 with c in (Z/n^2Z)*
    return (x - 1) // n


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // math.gcd(a, b)
