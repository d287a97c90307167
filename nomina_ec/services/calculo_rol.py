"""Cálculo del rol de pagos mensual (Ecuador).

Orden de cálculo (cada paso usa los anteriores, NO alterar):

 1. Valor día            = Sueldo Nominal / 30
 2. Sueldo Ganado        = Sueldo Nominal - Valor día x Días No Trabajados
                           + Valor día x Días Permiso Médico x 0,75
 3. Horas extras         = (Sueldo Nominal / 240) x 1,5 | x 2 por cada hora
 4. Décimo Tercero       = (Sueldo Ganado + Horas 50% + Horas 100% + Bonificación) / 12
 5. Décimo Cuarto        = (SBU / 12 / 30) x (Días mes - Días No Trabajados)
 6. Total Ingresos       = Sueldo Ganado + Horas 50% + Horas 100%
 7. Total Ganado         = Total Ingresos + Bonificación + Viáticos (+ décimos si se mensualizan)
 8. Aporte 9,45%         = (Sueldo Ganado + Horas 50% + Horas 100% + Bonificación) x 0,0945
 9. Total Descuentos     = Préstamo Empleado + Anticipo + Aporte 9,45% + Otros + Préstamo IESS
10. Subtotal             = Total Ganado - Total Descuentos
11. Fondo de Reserva     = manual, 0 si no tiene derecho por antigüedad
12. Depósito IESS        = Sueldo Ganado x 0,1115 (informativo)
13. Neto a Recibir       = max(0, Subtotal + Fondo de Reserva)

El Aporte Personal manual no entra en Total Descuentos.
Los importes no se redondean aquí.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..models import Empleado, RolPagosRow
from .antiguedad import tiene_derecho_fondo_reserva
from .parametros import ParametrosNomina, get_parametros

logger = logging.getLogger(__name__)


def calcular_rol_pagos(
    empleado: Empleado,
    row: RolPagosRow,
    incluir_decimos: Optional[bool] = None,
    hoy: Optional[date] = None,
    parametros: Optional[ParametrosNomina] = None,
) -> RolPagosRow:
    """Devuelve una copia de `row` con todos los campos calculados.

    `incluir_decimos` por defecto toma `empleado.mensualiza_decimos`. Sin
    décimos, el 13ro/14to se reportan en 0 y quedan fuera del Total Ganado;
    el resto de campos es idéntico en ambos casos.
    """
    p = parametros or get_parametros()
    if incluir_decimos is None:
        incluir_decimos = empleado.mensualiza_decimos

    sueldo_nominal = row.sueldo_nominal

    # 1-2. Sueldo ganado
    valor_dia = sueldo_nominal / p.dias_base
    descuento_dias_no_trabajados = valor_dia * row.dias_no_trabajados
    descuento_permiso_medico = valor_dia * row.dias_permiso_medico
    reconocimiento_permiso_medico = descuento_permiso_medico * p.reconocimiento_permiso_medico

    sueldo_ganado = max(
        0.0,
        sueldo_nominal - descuento_dias_no_trabajados + reconocimiento_permiso_medico,
    )
    dias_trabajados = max(0, row.dias_mes - row.dias_no_trabajados - row.dias_permiso_medico)

    # 3. Horas extras
    valor_hora_ordinaria = sueldo_nominal / p.horas_mes
    valor_hora_50 = valor_hora_ordinaria * p.recargo_horas_50
    valor_hora_100 = valor_hora_ordinaria * p.recargo_horas_100
    pago_horas_50 = row.horas_50 * valor_hora_50
    pago_horas_100 = row.horas_100 * valor_hora_100

    base_aportable = sueldo_ganado + pago_horas_50 + pago_horas_100 + row.bonificacion

    # 4-5. Décimos mensualizados
    decimo_tercero = base_aportable / 12
    # El 14to solo descuenta días no trabajados, no permisos médicos
    dias_decimo_cuarto = max(0, row.dias_mes - row.dias_no_trabajados)
    decimo_cuarto = (p.sbu / 12 / p.dias_base) * dias_decimo_cuarto

    # 6-7. Totales de ingresos
    total_ingresos = sueldo_ganado + pago_horas_50 + pago_horas_100
    total_ganado = total_ingresos + row.bonificacion + row.viaticos
    if incluir_decimos:
        total_ganado += decimo_tercero + decimo_cuarto
    else:
        decimo_tercero = 0.0
        decimo_cuarto = 0.0

    # 8-9. Descuentos
    aporte_945 = base_aportable * p.tasa_aporte_personal
    total_descuentos = (
        row.prestamos_empleado
        + row.anticipo_sueldo
        + aporte_945
        + row.otros_descuentos
        + row.prestamos_iess
    )

    # 10. Subtotal
    subtotal = total_ganado - total_descuentos

    # 11. Fondo de reserva
    valor_fondo_reserva = row.valor_fondo_reserva
    if not tiene_derecho_fondo_reserva(empleado, hoy, p):
        valor_fondo_reserva = 0.0

    # 12. Aporte patronal (informativo)
    deposito_iess = sueldo_ganado * p.tasa_aporte_patronal

    # 13. Neto
    neto_recibir = max(0.0, subtotal + valor_fondo_reserva)

    logger.debug(
        "Rol recalculado empleado=%s decimos=%s neto=%s",
        row.empleado_id, incluir_decimos, neto_recibir,
    )

    return row.model_copy(update={
        "valor_dia": valor_dia,
        "descuento_dias_no_trabajados": descuento_dias_no_trabajados,
        "descuento_permiso_medico": descuento_permiso_medico,
        "dias_trabajados": dias_trabajados,
        "sueldo_ganado": sueldo_ganado,
        "valor_hora_ordinaria": valor_hora_ordinaria,
        "valor_horas_50": pago_horas_50,
        "valor_horas_100": pago_horas_100,
        "decimo_tercero_mensualizado": decimo_tercero,
        "decimo_cuarto_mensualizado": decimo_cuarto,
        "total_ingresos": total_ingresos,
        "total_ganado": total_ganado,
        "aporte_945": aporte_945,
        "total_descuentos": total_descuentos,
        "subtotal": subtotal,
        "valor_fondo_reserva": valor_fondo_reserva,
        "deposito_iess": deposito_iess,
        "neto_recibir": neto_recibir,
    })


def crear_rol_pagos_inicial(
    empleado: Empleado,
    dias_mes: Optional[int] = None,
    salario_basico_unificado: Optional[float] = None,
    hoy: Optional[date] = None,
    parametros: Optional[ParametrosNomina] = None,
) -> RolPagosRow:
    """Rol en cero para un empleado, ya pasado por el cálculo."""
    p = parametros or get_parametros()
    row = RolPagosRow(
        empleado_id=empleado.id,
        dias_mes=dias_mes if dias_mes is not None else p.dias_mes,
        sueldo_nominal=empleado.sueldo_nominal,
        salario_basico_unificado=(
            salario_basico_unificado if salario_basico_unificado is not None else p.sbu
        ),
    )
    return calcular_rol_pagos(empleado, row, empleado.mensualiza_decimos, hoy, p)
