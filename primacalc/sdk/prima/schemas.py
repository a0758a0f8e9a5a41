"""Pydantic schemas for fiscal rules and calculation results.

Fiscal rules validate the tax_rules/*.yaml files and give typed access to
the UVT value, exempt-income limits and the withholding table. Rule schemas
use extra='forbid' so typos in a rules file fail loudly.
"""

from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WithholdingBracket(BaseModel):
    """Single withholding table row, bounds expressed in UVT."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    min_uvt: float = Field(..., ge=0, description="Exclusive lower bound")
    max_uvt: float = Field(default=float("inf"), description="Inclusive upper bound (inf if unbounded)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")
    fixed_fee_uvt: float = Field(default=0, ge=0, description="Fixed tax added on top, in UVT")

    @field_validator("max_uvt", mode="before")
    @classmethod
    def _null_is_unbounded(cls, value):
        return float("inf") if value is None else value

    def contains(self, base_uvt: float) -> bool:
        """True if base_uvt falls in (min_uvt, max_uvt]."""
        return self.min_uvt < base_uvt <= self.max_uvt


class FiscalYearRules(BaseModel):
    """Tax parameters for one fiscal year.

    The withholding table is kept in declared order. Lookups take the first
    row that contains the taxable base, so rows must not be re-sorted.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(..., ge=1900)
    uvt_value: float = Field(..., gt=0, description="Currency value of one UVT")
    exempt_rate: float = Field(default=0.25, ge=0, le=1, description="Exempt share of the gross bonus")
    exempt_limit_uvt: float = Field(..., ge=0, description="Annual exempt income cap in UVT")
    withholding_threshold_uvt: float = Field(..., ge=0, description="No withholding at or below this base")
    withholding_table: Tuple[WithholdingBracket, ...] = Field(..., min_length=1)

    @property
    def exempt_limit(self) -> float:
        """Exempt income cap converted to currency."""
        return self.exempt_limit_uvt * self.uvt_value


# Spanish output keys for to_dict(labels="es")
SPANISH_LABELS = {
    "employee_name": "empleado",
    "period_label": "periodo_calculo",
    "base_salary": "salario_base_prima",
    "worked_days": "dias_trabajados_semestre",
    "gross_bonus": "prima_bruta",
    "exempt_income": "renta_exenta_25_por_ciento",
    "taxable_base": "base_gravable_impuesto",
    "withholding_tax": "impuesto_retenido",
    "net_bonus": "prima_neta",
}


class CalculationResult(BaseModel):
    """Prima calculation output for one employee and semester.

    Currency amounts are rounded to cents except withholding_tax, which is
    a whole currency unit.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    employee_name: str
    period_label: str
    base_salary: float
    worked_days: int
    gross_bonus: float
    exempt_income: float
    taxable_base: float
    withholding_tax: int
    net_bonus: float

    def to_dict(self, labels: str = "en") -> Dict[str, object]:
        """Serialize to a plain dict.

        Args:
            labels: 'en' for field names, 'es' for the Spanish output keys
        """
        data = self.model_dump()
        if labels == "es":
            return {SPANISH_LABELS[key]: value for key, value in data.items()}
        return data
