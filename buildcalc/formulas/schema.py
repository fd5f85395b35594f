"""
Typed schema for calculator metadata.

Pure data shared by the engine's callers: which fields a calculator shows,
their defaults per unit system, and how each result is labelled and united.
Field ids must match the keys each formula reads.
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel

from ..models import FormulaKey

FieldKind = Literal["number", "select", "toggle"]

UnitKind = Literal[
    "length", "width", "height", "thickness", "diameter",
    "area", "volume", "angle", "count", "coverage", "percent",
]

FieldValue = Union[bool, float, str]


class LocalizedString(BaseModel):
    en: str
    ru: str

    def pick(self, locale: str) -> str:
        return self.ru if locale == "ru" else self.en


class FieldOption(BaseModel):
    value: str
    label: LocalizedString


class InputField(BaseModel):
    id: str
    kind: FieldKind
    label: LocalizedString
    description: Optional[LocalizedString] = None
    unit_kind: Optional[UnitKind] = None
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    default_metric: Optional[FieldValue] = None
    default_imperial: Optional[FieldValue] = None
    options: Optional[list[FieldOption]] = None
    # Shown only when the "mode" field equals this value
    group: Optional[str] = None

    def default_for(self, unit_system) -> Optional[FieldValue]:
        if unit_system == "imperial" or getattr(unit_system, "value", None) == "imperial":
            return self.default_imperial
        return self.default_metric


class ResultLabel(BaseModel):
    id: str
    label: LocalizedString
    si_unit: str
    metric_unit: Optional[str] = None
    imperial_unit: Optional[str] = None

    def unit_for(self, unit_system) -> str:
        if unit_system == "imperial" or getattr(unit_system, "value", None) == "imperial":
            return self.imperial_unit or self.si_unit
        return self.metric_unit or self.si_unit


class Faq(BaseModel):
    question: LocalizedString
    answer: LocalizedString


class ParagraphSection(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    body: str


class ListSection(BaseModel):
    type: Literal["list"] = "list"
    items: list[str]


GuideSection = Union[ParagraphSection, ListSection]


class Guide(BaseModel):
    intro: LocalizedString
    sections: list[GuideSection] = []


class CalculatorDefinition(BaseModel):
    slug: str
    category: FormulaKey
    rating: float
    title: LocalizedString
    description: LocalizedString
    formula_key: FormulaKey
    inputs: list[InputField]
    how_it_works: LocalizedString
    faq: list[Faq] = []
    guide: Optional[Guide] = None
    waste_key: str
    result_labels: list[ResultLabel]

    def field(self, field_id: str) -> Optional[InputField]:
        for field in self.inputs:
            if field.id == field_id:
                return field
        return None
