from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field

# Entradas manuales: no negativas y finitas
Entrada = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class PeriodoLaboral(BaseModel):
    fecha_ingreso: date
    fecha_salida: Optional[date] = None


class CambioSueldo(BaseModel):
    fecha: date
    sueldo_anterior: float
    sueldo_nuevo: float
    motivo: Optional[str] = None


class Empleado(BaseModel):
    id: str
    nombre_completo: str = ""
    cargo: str = ""
    cedula: str = ""
    activo: bool = True

    fecha_ingreso: date
    fecha_salida: Optional[date] = None
    sueldo_nominal: float = Field(default=0, ge=0)

    # Décimos mensualizados (se suman al rol en lugar de pagarse aparte)
    mensualiza_decimos: bool = False
    # Informativo: el derecho se calcula por antigüedad
    gana_fondo_reserva: bool = False

    historico_laboral: List[PeriodoLaboral] = Field(default_factory=list)
    historico_sueldos: List[CambioSueldo] = Field(default_factory=list)


class RolPagosRow(BaseModel):
    empleado_id: str
    dias_mes: int = 30
    sueldo_nominal: float = 0
    # Informativo: el décimo cuarto usa el SBU de ParametrosNomina
    salario_basico_unificado: float = 470

    # --- Entradas manuales ---
    dias_no_trabajados: Entrada = 0
    dias_permiso_medico: Entrada = 0
    horas_50: Entrada = 0
    horas_100: Entrada = 0
    bonificacion: Entrada = 0
    viaticos: Entrada = 0
    prestamos_empleado: Entrada = 0
    anticipo_sueldo: Entrada = 0
    aporte_personal_manual: Entrada = 0  # informativo, fuera de total_descuentos
    otros_descuentos: Entrada = 0
    prestamos_iess: Entrada = 0
    valor_fondo_reserva: Entrada = 0  # manual, solo con derecho a fondo de reserva

    # --- Calculados ---
    valor_dia: float = 0
    descuento_dias_no_trabajados: float = 0
    descuento_permiso_medico: float = 0  # solo desglose
    dias_trabajados: float = 0
    sueldo_ganado: float = 0
    valor_hora_ordinaria: float = 0
    valor_horas_50: float = 0  # pago, no valor unitario
    valor_horas_100: float = 0
    decimo_tercero_mensualizado: float = 0
    decimo_cuarto_mensualizado: float = 0
    total_ingresos: float = 0
    total_ganado: float = 0
    aporte_945: float = 0
    total_descuentos: float = 0
    subtotal: float = 0
    deposito_iess: float = 0  # aporte patronal, no afecta el neto
    neto_recibir: float = 0


class CampoManual(str, Enum):
    """Campos del rol que el usuario puede editar."""

    DIAS_NO_TRABAJADOS = "dias_no_trabajados"
    DIAS_PERMISO_MEDICO = "dias_permiso_medico"
    HORAS_50 = "horas_50"
    HORAS_100 = "horas_100"
    BONIFICACION = "bonificacion"
    VIATICOS = "viaticos"
    PRESTAMOS_EMPLEADO = "prestamos_empleado"
    ANTICIPO_SUELDO = "anticipo_sueldo"
    APORTE_PERSONAL_MANUAL = "aporte_personal_manual"
    OTROS_DESCUENTOS = "otros_descuentos"
    PRESTAMOS_IESS = "prestamos_iess"
    VALOR_FONDO_RESERVA = "valor_fondo_reserva"


class ResultadoEdicion(BaseModel):
    aplicado: bool
    motivo: Optional[str] = None
    rol: RolPagosRow
