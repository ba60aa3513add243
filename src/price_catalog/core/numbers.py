"""
Aritmética decimal exacta.

Arquitectura: Modular Monolith
Capa: Core (Shared Kernel)
Responsabilidad: Convertir entradas a Decimal y redondear HALF_UP sin pasar por float.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from fractions import Fraction

# === Guía de Organización ===
# ✅ EXACTITUD: Decimal y Fraction, nunca float para dinero.
# ❌ SIN REGLAS DE NEGOCIO: Nada de "precio mínimo" aquí.


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convierte un valor numérico a Decimal finito.

    Los float se convierten por su repr más corto (14.999 -> Decimal("14.999")),
    no por su valor binario exacto.

    Raises:
        ValueError: Si el valor no representa un número finito.
    """
    if isinstance(value, bool):
        raise ValueError(f"Valor booleano no es un número: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"No es un número decimal válido: {value!r}") from e
    else:
        raise ValueError(f"Tipo no numérico: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"El número debe ser finito: {value!r}")
    return result


def round_half_up(value: Decimal, places: int = 2) -> Decimal:
    """
    Escala a `places` decimales; los empates se alejan del cero.
    La precisión del contexto se amplía para que importes grandes no fallen.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(f"1E-{places}"), rounding=ROUND_HALF_UP)


def _fraction_half_up(value: Fraction, places: int) -> Decimal:
    scaled = value * 10**places
    units = int(abs(scaled) + Fraction(1, 2))
    if scaled < 0:
        units = -units
    # Construcción desde texto: exacta, sin redondeo del contexto
    return Decimal(f"{units}E-{places}")


def mean_half_up(values: Iterable[Decimal], places: int = 2) -> Decimal:
    """
    Media aritmética exacta con un único redondeo final HALF_UP.

    La división se hace en Fraction para que el redondeo no dependa de la
    precisión del contexto decimal.

    Raises:
        ValueError: Si no hay valores.
    """
    total = Fraction(0)
    count = 0
    for value in values:
        total += Fraction(value)
        count += 1

    if count == 0:
        raise ValueError("No se puede promediar una secuencia vacía.")

    return _fraction_half_up(total / count, places)
