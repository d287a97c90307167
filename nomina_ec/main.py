from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from nomina_ec.models import CampoManual, Empleado, ResultadoEdicion, RolPagosRow
from nomina_ec.services.antiguedad import (
    calcular_antiguedad_dias,
    tiene_derecho_fondo_reserva,
)
from nomina_ec.services.calculo_rol import calcular_rol_pagos, crear_rol_pagos_inicial
from nomina_ec.services.edicion import CampoNoEditable, aplicar_edicion
from nomina_ec.services.parametros import get_parametros
from nomina_ec.services.periodo import calcular_totales
from nomina_ec.services.recibo import generar_recibo

app = FastAPI(title="Motor Nómina Ecuador")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# Models
# -----------------------------
class AntiguedadIn(BaseModel):
    fecha_ingreso: date
    fecha_salida: Optional[date] = None
    hoy: Optional[date] = None


class RolInicialIn(BaseModel):
    empleado: Empleado
    dias_mes: Optional[int] = Field(default=None, gt=0)
    salario_basico_unificado: Optional[float] = None
    hoy: Optional[date] = None


class RolIn(BaseModel):
    empleado: Empleado
    rol: RolPagosRow
    incluir_decimos: Optional[bool] = None
    hoy: Optional[date] = None


class EdicionIn(BaseModel):
    empleado: Empleado
    rol: RolPagosRow
    campo: CampoManual
    valor: float = 0
    hoy: Optional[date] = None


class TotalesIn(BaseModel):
    empleados: List[Empleado]
    roles: Dict[str, RolPagosRow]


# -----------------------------
# Endpoints
# -----------------------------
@app.get("/api/parametros")
def api_parametros():
    return get_parametros()


@app.post("/api/antiguedad")
def api_antiguedad(inp: AntiguedadIn) -> Dict[str, Any]:
    p = get_parametros()
    emp = Empleado(id="-", fecha_ingreso=inp.fecha_ingreso, fecha_salida=inp.fecha_salida)
    dias = calcular_antiguedad_dias(inp.fecha_ingreso, inp.fecha_salida, inp.hoy)
    return {
        "dias": dias,
        "fondo_reserva": tiene_derecho_fondo_reserva(emp, inp.hoy, p),
        "dias_faltantes": max(0, p.dias_fondo_reserva - dias),
    }


@app.post("/api/rol/inicial", response_model=RolPagosRow)
def api_rol_inicial(inp: RolInicialIn):
    return crear_rol_pagos_inicial(inp.empleado, inp.dias_mes, inp.salario_basico_unificado, inp.hoy)


@app.post("/api/rol/calcular", response_model=RolPagosRow)
def api_rol_calcular(inp: RolIn):
    return calcular_rol_pagos(inp.empleado, inp.rol, inp.incluir_decimos, inp.hoy)


@app.post("/api/rol/editar", response_model=ResultadoEdicion)
def api_rol_editar(inp: EdicionIn):
    try:
        return aplicar_edicion(inp.empleado, inp.rol, inp.campo, inp.valor, inp.hoy)
    except CampoNoEditable as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/api/rol/recibo")
def api_rol_recibo(inp: RolIn) -> Dict[str, Any]:
    return generar_recibo(inp.empleado, inp.rol)


@app.post("/api/rol/totales")
def api_rol_totales(inp: TotalesIn) -> Dict[str, float]:
    return calcular_totales(inp.empleados, inp.roles)
