from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional

from ..models import Empleado, RolPagosRow
from .calculo_rol import calcular_rol_pagos, crear_rol_pagos_inicial
from .parametros import ParametrosNomina

COLUMNAS_TOTALES: List[str] = [
    "sueldo_nominal",
    "sueldo_ganado",
    "valor_horas_50",
    "valor_horas_100",
    "bonificacion",
    "viaticos",
    "decimo_tercero_mensualizado",
    "decimo_cuarto_mensualizado",
    "total_ganado",
    "prestamos_empleado",
    "anticipo_sueldo",
    "aporte_945",
    "aporte_personal_manual",
    "otros_descuentos",
    "prestamos_iess",
    "total_descuentos",
    "subtotal",
    "valor_fondo_reserva",
    "deposito_iess",
    "neto_recibir",
]


def empleados_activos(empleados: Iterable[Empleado]) -> List[Empleado]:
    return [e for e in empleados if e.activo]


def hay_decimos(empleados: Iterable[Empleado]) -> bool:
    return any(e.mensualiza_decimos for e in empleados_activos(empleados))


def sincronizar_roles(
    empleados: Iterable[Empleado],
    roles: Mapping[str, RolPagosRow],
    dias_mes: Optional[int] = None,
    salario_basico_unificado: Optional[float] = None,
    hoy: Optional[date] = None,
    parametros: Optional[ParametrosNomina] = None,
) -> Dict[str, RolPagosRow]:
    """Un rol por empleado activo: recalcula los existentes con los datos
    actuales del empleado, crea los nuevos y descarta los de empleados
    inactivos o eliminados."""
    out: Dict[str, RolPagosRow] = {}
    for e in empleados_activos(empleados):
        row = roles.get(e.id)
        if row is None:
            row = crear_rol_pagos_inicial(e, dias_mes, salario_basico_unificado, hoy, parametros)
        else:
            row = calcular_rol_pagos(e, row, e.mensualiza_decimos, hoy, parametros)
        out[e.id] = row
    return out


def calcular_totales(
    empleados: Iterable[Empleado],
    roles: Mapping[str, RolPagosRow],
) -> Dict[str, float]:
    totales = {c: 0.0 for c in COLUMNAS_TOTALES}
    for e in empleados_activos(empleados):
        row = roles.get(e.id)
        if row is None:
            continue
        for c in COLUMNAS_TOTALES:
            totales[c] += getattr(row, c)
    return totales
