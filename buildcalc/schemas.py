from pydantic import BaseModel, Field
from typing import Optional, List, Union

from .models import UnitSystem


class CountryDefaultsOut(BaseModel):
    waste: dict[str, float]
    paint: dict
    flooring: dict
    tile: dict
    drywall: dict
    wallpaper: dict
    roofing: dict
    brick: dict
    insulation: Optional[dict] = None
    plaster: Optional[dict] = None


class Country(BaseModel):
    country_code: str
    name: str
    name_localized: str
    unit_system: UnitSystem
    currency: str
    defaults: CountryDefaultsOut


class CalculateRequest(BaseModel):
    country_code: Optional[str] = None
    unit_system: Optional[UnitSystem] = None
    inputs: dict[str, Union[bool, float, str, None]] = {}
    # Fraction, e.g. 0.08. Clamped to the configured range.
    waste_factor: Optional[float] = None
    preset: Optional[str] = None
    locale: str = "en"


class PackInfo(BaseModel):
    type: str
    count: float
    unit: str


class ResultRow(BaseModel):
    id: str
    label: str
    si_value: float
    si_unit: str
    user_value: float
    user_unit: str
    display: str
    pack: Optional[PackInfo] = None


class CalculateResponse(BaseModel):
    slug: str
    formula_key: str
    country_code: str
    unit_system: UnitSystem
    waste_factor: float
    inputs: dict
    result: dict[str, float]
    rows: List[ResultRow] = []
    headline: dict
    share_query: str


class FormField(BaseModel):
    id: str
    kind: str
    label: str
    unit: str = ""
    value: Union[bool, float, str, None] = None
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    options: Optional[list[dict]] = None
    help: Optional[str] = None


class FormState(BaseModel):
    slug: str
    country_code: str
    unit_system: UnitSystem
    waste_factor: float
    values: dict
    fields: List[FormField] = []
    completion: dict = Field(default_factory=dict)
