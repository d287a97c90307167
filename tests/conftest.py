from __future__ import annotations

from datetime import date, timedelta

import pytest

from nomina_ec.models import Empleado
from nomina_ec.services.parametros import ParametrosNomina

HOY = date(2026, 10, 19)


@pytest.fixture
def hoy():
    return HOY


@pytest.fixture
def parametros():
    return ParametrosNomina()


@pytest.fixture
def empleado_nuevo():
    # Ingresó este mes: sin derecho a fondo de reserva
    return Empleado(id="e1", nombre_completo="Ana Torres", fecha_ingreso=HOY - timedelta(days=10), sueldo_nominal=470)


@pytest.fixture
def empleado_antiguo():
    return Empleado(
        id="e2",
        nombre_completo="Luis Paredes",
        fecha_ingreso=date(2020, 1, 15),
        sueldo_nominal=800,
        mensualiza_decimos=True,
        gana_fondo_reserva=True,
    )
