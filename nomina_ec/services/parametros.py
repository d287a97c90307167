from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Dict

from pydantic import BaseModel, Field


class ParametrosNomina(BaseModel):
    """Constantes legales usadas por el motor (valores vigentes por defecto)."""

    # Salario Básico Unificado (décimo cuarto)
    sbu: float = Field(default=470.0, ge=0)
    # Divisor del valor día: siempre 30, sin importar los días del mes
    dias_base: float = Field(default=30.0, gt=0)
    dias_mes: int = Field(default=30, gt=0)
    # Jornada mensual de 240 horas (8h x 30 días)
    horas_mes: float = Field(default=240.0, gt=0)
    recargo_horas_50: float = 1.5
    recargo_horas_100: float = 2.0
    # Permiso médico: se reconoce el 75% del día descontado
    reconocimiento_permiso_medico: float = 0.75
    # IESS
    tasa_aporte_personal: float = Field(default=0.0945, ge=0)
    tasa_aporte_patronal: float = Field(default=0.1115, ge=0)
    # Antigüedad mínima para Fondo de Reserva
    dias_fondo_reserva: int = Field(default=365, ge=0)


_ENV = {
    "NOMINA_SBU": "sbu",
    "NOMINA_DIAS_MES": "dias_mes",
    "NOMINA_TASA_APORTE_PERSONAL": "tasa_aporte_personal",
    "NOMINA_TASA_APORTE_PATRONAL": "tasa_aporte_patronal",
    "NOMINA_DIAS_FONDO_RESERVA": "dias_fondo_reserva",
}


def parametros_desde_entorno(env: Dict[str, str] | None = None) -> ParametrosNomina:
    env = os.environ if env is None else env
    valores: Dict[str, Any] = {}
    for var, campo in _ENV.items():
        v = env.get(var)
        if v not in (None, ""):
            valores[campo] = v.strip()
    return ParametrosNomina(**valores)


@lru_cache(maxsize=1)
def get_parametros() -> ParametrosNomina:
    return parametros_desde_entorno()
