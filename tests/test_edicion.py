from __future__ import annotations

import logging

import pytest

from nomina_ec.models import CampoManual
from nomina_ec.services.calculo_rol import crear_rol_pagos_inicial
from nomina_ec.services.edicion import CampoNoEditable, aplicar_edicion, campo_manual


def test_edicion_recalcula(empleado_nuevo, hoy):
    rol = crear_rol_pagos_inicial(empleado_nuevo, 30, hoy=hoy)
    res = aplicar_edicion(empleado_nuevo, rol, CampoManual.DIAS_NO_TRABAJADOS, 5, hoy=hoy)
    assert res.aplicado
    assert res.rol.dias_no_trabajados == 5
    assert res.rol.sueldo_ganado == pytest.approx(470 - 470 / 30 * 5)


def test_edicion_conserva_campos_previos(empleado_nuevo, hoy):
    rol = crear_rol_pagos_inicial(empleado_nuevo, 30, hoy=hoy)
    rol = aplicar_edicion(empleado_nuevo, rol, "horas_50", 4, hoy=hoy).rol
    rol = aplicar_edicion(empleado_nuevo, rol, "bonificacion", 20, hoy=hoy).rol
    assert rol.horas_50 == 4
    assert rol.bonificacion == 20
    assert rol.valor_horas_50 == pytest.approx(470 / 240 * 1.5 * 4)


def test_valor_negativo_se_lleva_a_cero(empleado_nuevo, hoy, caplog):
    rol = crear_rol_pagos_inicial(empleado_nuevo, 30, hoy=hoy)
    with caplog.at_level(logging.WARNING, logger="nomina_ec.services.edicion"):
        res = aplicar_edicion(empleado_nuevo, rol, CampoManual.ANTICIPO_SUELDO, -50, hoy=hoy)
    assert res.aplicado
    assert res.rol.anticipo_sueldo == 0
    assert "negativo" in caplog.text


def test_fondo_reserva_sin_derecho_se_ignora(empleado_nuevo, hoy, caplog):
    rol = crear_rol_pagos_inicial(empleado_nuevo, 30, hoy=hoy)
    with caplog.at_level(logging.WARNING, logger="nomina_ec.services.edicion"):
        res = aplicar_edicion(empleado_nuevo, rol, CampoManual.VALOR_FONDO_RESERVA, 39.15, hoy=hoy)
    assert not res.aplicado
    assert "Fondo de Reserva" in res.motivo
    assert res.rol == rol
    assert "no tiene derecho" in caplog.text


def test_fondo_reserva_con_derecho(empleado_antiguo, hoy):
    rol = crear_rol_pagos_inicial(empleado_antiguo, 30, hoy=hoy)
    res = aplicar_edicion(empleado_antiguo, rol, CampoManual.VALOR_FONDO_RESERVA, 66.64, hoy=hoy)
    assert res.aplicado
    assert res.rol.valor_fondo_reserva == 66.64
    assert res.rol.neto_recibir == pytest.approx(res.rol.subtotal + 66.64)


@pytest.mark.parametrize("campo", ["sueldo_ganado", "neto_recibir", "total_descuentos", "no_existe"])
def test_campo_calculado_no_editable(empleado_nuevo, hoy, campo):
    rol = crear_rol_pagos_inicial(empleado_nuevo, 30, hoy=hoy)
    with pytest.raises(CampoNoEditable):
        aplicar_edicion(empleado_nuevo, rol, campo, 100, hoy=hoy)


def test_campo_manual_acepta_enum_y_texto():
    assert campo_manual(CampoManual.HORAS_100) is CampoManual.HORAS_100
    assert campo_manual("viaticos") is CampoManual.VIATICOS


@pytest.mark.parametrize("valor", [float("nan"), float("inf"), float("-inf")])
def test_valor_no_finito_se_ignora(empleado_nuevo, hoy, valor, caplog):
    rol = crear_rol_pagos_inicial(empleado_nuevo, 30, hoy=hoy)
    with caplog.at_level(logging.WARNING, logger="nomina_ec.services.edicion"):
        res = aplicar_edicion(empleado_nuevo, rol, CampoManual.OTROS_DESCUENTOS, valor, hoy=hoy)
    assert not res.aplicado
    assert "otros_descuentos" in res.motivo
    assert res.rol == rol
    assert res.rol.neto_recibir == pytest.approx(425.585)
