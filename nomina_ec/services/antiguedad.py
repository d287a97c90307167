from __future__ import annotations

from datetime import date
from typing import Optional

from ..models import Empleado
from .parametros import ParametrosNomina, get_parametros


def calcular_antiguedad_dias(
    fecha_ingreso: date,
    fecha_salida: Optional[date] = None,
    hoy: Optional[date] = None,
) -> int:
    """Días completos entre el ingreso y la salida (o hoy). Nunca negativo."""
    fin = fecha_salida or hoy or date.today()
    return max(0, (fin - fecha_ingreso).days)


def tiene_derecho_fondo_reserva(
    empleado: Empleado,
    hoy: Optional[date] = None,
    parametros: Optional[ParametrosNomina] = None,
) -> bool:
    p = parametros or get_parametros()
    dias = calcular_antiguedad_dias(empleado.fecha_ingreso, empleado.fecha_salida, hoy)
    return dias >= p.dias_fondo_reserva


def calcular_dias_acumulados(empleado: Empleado, hoy: Optional[date] = None) -> int:
    """Suma de periodos laborales cerrados + periodo actual (si está activo).

    Periodos históricos sin fecha de salida no se cuentan: el periodo abierto
    es el de `fecha_ingreso` del empleado.
    """
    hoy = hoy or date.today()
    total = 0
    for periodo in empleado.historico_laboral:
        if periodo.fecha_salida:
            total += max(0, (periodo.fecha_salida - periodo.fecha_ingreso).days)

    if empleado.activo and not empleado.fecha_salida:
        total += max(0, (hoy - empleado.fecha_ingreso).days)

    return max(0, total)


def cumple_fondo_reserva_acumulado(
    empleado: Empleado,
    hoy: Optional[date] = None,
    parametros: Optional[ParametrosNomina] = None,
) -> bool:
    p = parametros or get_parametros()
    return calcular_dias_acumulados(empleado, hoy) >= p.dias_fondo_reserva


def dias_faltantes_fondo_reserva(
    empleado: Empleado,
    hoy: Optional[date] = None,
    parametros: Optional[ParametrosNomina] = None,
) -> int:
    p = parametros or get_parametros()
    return max(0, p.dias_fondo_reserva - calcular_dias_acumulados(empleado, hoy))
