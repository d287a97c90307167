from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional, Union

from ..models import CampoManual, Empleado, ResultadoEdicion, RolPagosRow
from .antiguedad import tiene_derecho_fondo_reserva
from .calculo_rol import calcular_rol_pagos
from .parametros import ParametrosNomina, get_parametros

logger = logging.getLogger(__name__)


class CampoNoEditable(ValueError):
    """El campo es calculado o no existe en el rol."""


def campo_manual(campo: Union[CampoManual, str]) -> CampoManual:
    if isinstance(campo, CampoManual):
        return campo
    try:
        return CampoManual(campo)
    except ValueError:
        logger.warning("Campo %s es calculado y no debe ser editable", campo)
        raise CampoNoEditable(f"Campo {campo} es calculado y no debe ser editable") from None


def aplicar_edicion(
    empleado: Empleado,
    row: RolPagosRow,
    campo: Union[CampoManual, str],
    valor: float,
    hoy: Optional[date] = None,
    parametros: Optional[ParametrosNomina] = None,
) -> ResultadoEdicion:
    """Aplica una edición manual al rol y lo recalcula.

    La edición del Fondo de Reserva sin derecho por antigüedad se ignora y el
    rol vuelve sin cambios, igual que un valor NaN o infinito. Los valores
    negativos se llevan a 0.
    """
    p = parametros or get_parametros()
    campo = campo_manual(campo)

    if campo is CampoManual.VALOR_FONDO_RESERVA and not tiene_derecho_fondo_reserva(empleado, hoy, p):
        motivo = (
            f"Empleado no tiene derecho a Fondo de Reserva "
            f"(antigüedad < {p.dias_fondo_reserva} días)"
        )
        logger.warning("%s: empleado=%s", motivo, empleado.id)
        return ResultadoEdicion(aplicado=False, motivo=motivo, rol=row)

    valor = float(valor or 0)
    if not math.isfinite(valor):
        motivo = f"Valor no numérico en {campo.value}: {valor}"
        logger.warning("%s: empleado=%s", motivo, empleado.id)
        return ResultadoEdicion(aplicado=False, motivo=motivo, rol=row)

    if valor < 0:
        logger.warning("Valor negativo en %s (%s) llevado a 0: empleado=%s", campo.value, valor, empleado.id)
        valor = 0.0

    actualizado = row.model_copy(update={campo.value: valor})
    recalculado = calcular_rol_pagos(empleado, actualizado, empleado.mensualiza_decimos, hoy, p)
    return ResultadoEdicion(aplicado=True, rol=recalculado)
