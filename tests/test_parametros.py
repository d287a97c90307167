from __future__ import annotations

import pytest
from pydantic import ValidationError

from nomina_ec.services.parametros import ParametrosNomina, get_parametros, parametros_desde_entorno


def test_defaults_are_statutory_values():
    p = ParametrosNomina()
    assert p.sbu == 470
    assert p.tasa_aporte_personal == 0.0945
    assert p.tasa_aporte_patronal == 0.1115
    assert p.horas_mes == 240
    assert p.dias_fondo_reserva == 365


def test_env_overrides():
    p = parametros_desde_entorno({"NOMINA_SBU": "482", "NOMINA_DIAS_FONDO_RESERVA": " 360 "})
    assert p.sbu == 482
    assert p.dias_fondo_reserva == 360
    assert p.tasa_aporte_personal == 0.0945


def test_empty_env_values_are_ignored():
    assert parametros_desde_entorno({"NOMINA_SBU": ""}).sbu == 470


def test_invalid_env_value_raises():
    with pytest.raises(ValidationError):
        parametros_desde_entorno({"NOMINA_TASA_APORTE_PERSONAL": "nueve"})


def test_get_parametros_is_cached():
    assert get_parametros() is get_parametros()
