"""
Calculator Runner — the caller side of the engine.

Builds a calculator's form state the way the UI does it: field values
pre-filled from the share link, then the country profile, then the field
defaults; presets; waste clamping; projection of SI results to display
units; and the shareable query string.

The engine itself never sees any of this. It only gets the final inputs,
unit system, country defaults and waste factor.
"""

import logging
from typing import Optional
from urllib.parse import parse_qs, urlencode

from .calculators.base import to_number
from .calculators.engine import run_calculation
from .config import settings
from .countries import CountryProfile
from .formatting import format_number, format_percent
from .formulas.schema import CalculatorDefinition, LocalizedString
from .models import parse_unit_system
from .units import (
    coverage_to_user,
    get_unit_label,
    meters_to_user_length,
    project_to_user_units,
    sqm_to_user_area,
    unit_kind_for_si_unit,
)

logger = logging.getLogger(__name__)

PRESETS = {
    "eco": {
        "label": LocalizedString(en="Economy", ru="Эконом"),
        "description": LocalizedString(
            en="Reduces defaults by 15% with lower waste.",
            ru="Уменьшает значения на 15% и снижает запас.",
        ),
        "multiplier": 0.85,
        "waste_adjustment": -0.02,
    },
    "standard": {
        "label": LocalizedString(en="Standard", ru="Типовой"),
        "description": LocalizedString(
            en="Balanced values for most projects.",
            ru="Сбалансированные параметры для большинства проектов.",
        ),
        "multiplier": 1.0,
        "waste_adjustment": 0.0,
    },
    "premium": {
        "label": LocalizedString(en="Premium", ru="Премиум"),
        "description": LocalizedString(
            en="Boosts coverage with extra 15% reserves.",
            ru="Увеличивает объём и добавляет 15% запаса.",
        ),
        "multiplier": 1.15,
        "waste_adjustment": 0.03,
    },
}

# Result keys that count purchasable packs, in display priority order
PACK_RESULT_KEYS = ["packs", "bundles", "rolls", "sheets"]

PACK_UNIT_LABELS = {
    "packs": LocalizedString(en="packs", ru="пачек"),
    "bundles": LocalizedString(en="bundles", ru="пачек"),
    "rolls": LocalizedString(en="rolls", ru="рулонов"),
    "sheets": LocalizedString(en="sheets", ru="листов"),
}


def clamp_waste(waste: float) -> float:
    """Keep a waste fraction inside the configured slider range."""
    return min(settings.WASTE_MAX, max(settings.WASTE_MIN, waste))


def parse_query(query) -> dict:
    """Accept a raw query string or a mapping; return {key: str}."""
    if not query:
        return {}
    if isinstance(query, str):
        parsed = parse_qs(query.lstrip("?"), keep_blank_values=True)
        return {key: values[-1] for key, values in parsed.items()}
    result = {}
    for key, value in query.items():
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = value[-1]
        if isinstance(value, str):
            result[key] = value
    return result


def _query_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class CalculatorRunner:
    """Form state and result presentation for one calculator under one country profile."""

    def __init__(self, definition: CalculatorDefinition, profile: CountryProfile,
                 unit_system=None, query=None):
        self.definition = definition
        self.profile = profile
        self.unit_system = (
            parse_unit_system(unit_system, profile.unit_system)
            if unit_system is not None else profile.unit_system
        )
        self.query = parse_query(query)

    @property
    def defaults(self):
        return self.profile.defaults

    @property
    def base_waste(self) -> float:
        return self.defaults.waste_for(self.definition.waste_key)

    def country_default(self, field_id: str) -> Optional[float]:
        """Country-specific pre-fill for a field, in the active unit system."""
        d = self.defaults

        def area(sqm):
            return sqm_to_user_area(sqm, self.unit_system)

        def length(meters):
            return meters_to_user_length(meters, self.unit_system)

        if field_id == "coverage":
            return coverage_to_user(d.paint.coverage_sqm_per_liter, self.unit_system)
        if field_id == "packCoverage":
            return area(d.flooring.pack_coverage_sqm)
        if field_id == "bundleCoverage":
            return area(d.roofing.bundle_coverage_sqm)
        if field_id == "sheetArea":
            return area(d.drywall.sheet_area_sqm)
        if field_id == "rollLength":
            return length(d.wallpaper.roll_length_meters)
        if field_id == "rollWidth":
            return length(d.wallpaper.roll_width_meters)
        if field_id == "allowance":
            return length(d.wallpaper.allowance_meters)
        if field_id == "bricksPerSqm":
            return d.brick.bricks_per_sqm
        if field_id == "mortarPerSqm":
            return d.brick.mortar_per_sqm
        return None

    def initial_values(self) -> dict:
        """Share-link value -> country default -> field default, per field."""
        values = {}
        for field in self.definition.inputs:
            query_value = self.query.get(field.id)
            if query_value is not None:
                values[field.id] = query_value == "true" if field.kind == "toggle" else query_value
                continue

            override = self.country_default(field.id)
            if override is not None:
                values[field.id] = override
                continue

            default = field.default_for(self.unit_system)
            if field.kind == "toggle":
                values[field.id] = bool(default) if default is not None else False
            else:
                values[field.id] = default if default is not None else ""
        return values

    def initial_waste(self) -> float:
        """Waste from the share link (a percent), else the country's waste for this calculator."""
        raw = self.query.get("waste")
        if raw is not None:
            percent = to_number(raw, fallback=None)
            if percent is not None:
                return clamp_waste(percent / 100)
            logger.debug("Ignoring unparsable waste %r in share query", raw)
        return clamp_waste(self.base_waste)

    def visible_inputs(self, values: dict) -> list:
        """Fields without a group, plus fields whose group matches the selected mode."""
        mode = values.get("mode")
        return [field for field in self.definition.inputs if not field.group or field.group == mode]

    def engine_inputs(self, values: dict) -> dict:
        """Normalize form values for the engine: numbers, option strings, booleans."""
        inputs = {}
        for field in self.definition.inputs:
            current = values.get(field.id)
            if field.kind == "number":
                # Unparsable -> None so the formula falls back to its default
                inputs[field.id] = to_number(current, fallback=None)
            elif field.kind == "toggle":
                if isinstance(current, str):
                    inputs[field.id] = current.strip().lower() == "true"
                else:
                    inputs[field.id] = bool(current)
            else:
                inputs[field.id] = current if current is not None else ""
        return inputs

    def run(self, values: Optional[dict] = None, waste: Optional[float] = None) -> dict:
        """Calculate with the given form values and waste (both default to initial state)."""
        if values is None:
            values = self.initial_values()
        if waste is None:
            waste = self.initial_waste()
        return run_calculation(
            formula_key=self.definition.formula_key,
            inputs=self.engine_inputs(values),
            unit_system=self.unit_system,
            defaults=self.defaults,
            waste_factor=waste,
            strict=settings.STRICT_FORMULA_KEYS,
        )

    def pack_info(self, result: dict, locale: str = "en") -> Optional[dict]:
        for key in PACK_RESULT_KEYS:
            if key in result:
                return {
                    "type": key,
                    "count": result[key],
                    "unit": PACK_UNIT_LABELS[key].pick(locale),
                }
        return None

    def result_rows(self, result: dict, locale: str = "en") -> list[dict]:
        """
        One display row per result label.

        Returns:
            [{id, label, si_value, si_unit, user_value, user_unit, display, pack}]
            Missing result keys show as 0. Pack info rides on area/volume rows.
        """
        pack = self.pack_info(result, locale)
        rows = []
        for label in self.definition.result_labels:
            si_value = result.get(label.id, 0)
            user_value = project_to_user_units(
                si_value, self.unit_system, unit_kind_for_si_unit(label.si_unit),
            )
            user_unit = label.unit_for(self.unit_system)
            rows.append({
                "id": label.id,
                "label": label.label.pick(locale),
                "si_value": si_value,
                "si_unit": label.si_unit,
                "user_value": user_value,
                "user_unit": user_unit,
                "display": f"{format_number(user_value)} {user_unit}",
                "pack": pack if label.id in ("area", "volume") else None,
            })
        return rows

    def headline(self, rows: list[dict], waste: float) -> dict:
        """Main result with and without overage, for the summary card."""
        if not rows:
            return {"with_waste": 0.0, "base": 0.0, "waste": format_percent(waste)}
        with_waste = rows[0]["user_value"]
        return {
            "with_waste": with_waste,
            "base": with_waste / (1 + waste),
            "waste": format_percent(waste),
        }

    def apply_preset(self, preset_id: str, values: dict) -> tuple[dict, float]:
        """
        Scale numeric fields and adjust waste by a preset.

        Returns (new_values, new_waste). "standard" resets to initial values.
        Raises ValueError for unknown presets.
        """
        if preset_id not in PRESETS:
            raise ValueError(f"Unknown preset: {preset_id}. Available: {list(PRESETS.keys())}")
        preset = PRESETS[preset_id]
        waste = clamp_waste(self.base_waste + preset["waste_adjustment"])

        initial = self.initial_values()
        if preset["multiplier"] == 1:
            return initial, waste

        scaled = dict(values)
        for field in self.definition.inputs:
            if field.kind != "number":
                continue
            fallback = to_number(initial.get(field.id), 0.0)
            baseline = to_number(values.get(field.id), fallback)
            scaled[field.id] = round(baseline * preset["multiplier"], 2)
        return scaled, waste

    def completion(self, values: dict) -> dict:
        """How many visible fields hold a usable value."""
        visible = self.visible_inputs(values)
        completed = 0
        for field in visible:
            current = values.get(field.id)
            if field.kind == "number":
                if to_number(current, fallback=None) is not None:
                    completed += 1
            elif field.kind == "select":
                if current:
                    completed += 1
            else:
                completed += 1
        total = len(visible)
        return {
            "completed": completed,
            "total": total,
            "ratio": completed / total if total else 0.0,
        }

    def form_fields(self, values: dict, locale: str = "en") -> list[dict]:
        """Visible fields with localized labels, unit labels and current values."""
        fields = []
        for field in self.visible_inputs(values):
            unit = get_unit_label(self.unit_system, field.unit_kind)
            fields.append({
                "id": field.id,
                "kind": field.kind,
                "label": field.label.pick(locale),
                "unit": unit,
                "value": values.get(field.id),
                "min": field.min,
                "max": field.max,
                "step": field.step,
                "options": [
                    {"value": option.value, "label": option.label.pick(locale)}
                    for option in field.options
                ] if field.options else None,
                "help": field.description.pick(locale) if field.description else None,
            })
        return fields

    def share_query(self, values: dict, waste: float) -> str:
        """Query string that restores this form: non-empty values plus waste as a percent."""
        params = [
            (key, _query_value(value))
            for key, value in values.items()
            if value is not None and value != ""
        ]
        params.append(("waste", f"{waste * 100:.2f}"))
        return urlencode(params)
