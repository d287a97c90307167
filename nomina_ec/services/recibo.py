from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from ..models import Empleado, RolPagosRow


def round2(x: float) -> float:
    """Redondeo a 2 decimales (half up) para importes."""
    return float(Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _add(items: List[Dict[str, Any]], concepto: str, valor: float) -> None:
    items.append({"concepto": concepto, "valor": round2(valor)})


def generar_recibo(empleado: Empleado, rol: RolPagosRow) -> Dict[str, Any]:
    """Contenido del rol individual (ingresos, descuentos, neto) ya redondeado."""
    ingresos: List[Dict[str, Any]] = []
    _add(ingresos, "Sueldo Ganado", rol.sueldo_ganado)
    _add(ingresos, "Horas Extras 50%", rol.valor_horas_50)
    _add(ingresos, "Horas Extras 100%", rol.valor_horas_100)
    _add(ingresos, "Bonificación", rol.bonificacion)
    _add(ingresos, "Viáticos", rol.viaticos)
    _add(ingresos, "Décimo Tercero Mensualizado", rol.decimo_tercero_mensualizado)
    _add(ingresos, "Décimo Cuarto Mensualizado", rol.decimo_cuarto_mensualizado)
    _add(ingresos, "Fondo de Reserva", rol.valor_fondo_reserva)

    descuentos: List[Dict[str, Any]] = []
    _add(descuentos, "Préstamo al Empleado", rol.prestamos_empleado)
    _add(descuentos, "Anticipo Sueldo", rol.anticipo_sueldo)
    _add(descuentos, "Aporte 9.45%", rol.aporte_945)
    _add(descuentos, "Aporte Personal", rol.aporte_personal_manual)
    _add(descuentos, "Otros Descuentos", rol.otros_descuentos)
    _add(descuentos, "Préstamo IESS", rol.prestamos_iess)

    return {
        "empleado": {
            "id": empleado.id,
            "nombre_completo": empleado.nombre_completo,
            "cargo": empleado.cargo,
            "cedula": empleado.cedula,
        },
        "dias_trabajados": rol.dias_trabajados,
        "sueldo_nominal": round2(rol.sueldo_nominal),
        "ingresos": ingresos,
        "descuentos": descuentos,
        "totales": {
            "total_ingresos": round2(rol.total_ganado),
            "total_descuentos": round2(rol.total_descuentos),
            "neto": round2(rol.neto_recibir),
        },
        "informativo": {
            "deposito_iess": round2(rol.deposito_iess),
        },
    }
