"""
Calculator definitions — one per FormulaKey.

Defaults are given for both unit systems: metric values in m / m², imperial
values in ft / ft². Fields the country profile pre-fills (coverage, pack and
sheet sizes, roll dimensions, brick rates) still carry a default here for
callers that have no profile.
"""

from .schema import (
    CalculatorDefinition,
    Faq,
    FieldOption,
    Guide,
    InputField,
    ListSection,
    LocalizedString,
    ParagraphSection,
    ResultLabel,
)


def _t(en: str, ru: str) -> LocalizedString:
    return LocalizedString(en=en, ru=ru)


def _number(field_id, en, ru, unit_kind, metric, imperial, *, group=None,
            min=0, max=None, step=0.01, description=None) -> InputField:
    return InputField(
        id=field_id,
        kind="number",
        label=_t(en, ru),
        description=description,
        unit_kind=unit_kind,
        min=min,
        max=max,
        step=step,
        default_metric=metric,
        default_imperial=imperial,
        group=group,
    )


def _result(result_id, en, ru, si_unit, metric_unit=None, imperial_unit=None) -> ResultLabel:
    return ResultLabel(
        id=result_id,
        label=_t(en, ru),
        si_unit=si_unit,
        metric_unit=metric_unit,
        imperial_unit=imperial_unit,
    )


def _faq(question: LocalizedString, answer: LocalizedString) -> Faq:
    return Faq(question=question, answer=answer)


CONCRETE = CalculatorDefinition(
    slug="concrete",
    category="concrete",
    rating=4.9,
    title=_t("Concrete Calculator", "Калькулятор бетона"),
    description=_t(
        "Volume of concrete for slabs, footings and round columns, with overage.",
        "Объём бетона для плит, фундаментов и круглых колонн с учётом запаса.",
    ),
    formula_key="concrete",
    inputs=[
        InputField(
            id="mode",
            kind="select",
            label=_t("Shape", "Форма"),
            default_metric="slab",
            default_imperial="slab",
            options=[
                FieldOption(value="slab", label=_t("Slab", "Плита")),
                FieldOption(value="cylinder", label=_t("Column", "Колонна")),
            ],
        ),
        _number("length", "Length", "Длина", "length", 6, 20, group="slab"),
        _number("width", "Width", "Ширина", "width", 4, 13, group="slab"),
        _number("thickness", "Thickness", "Толщина", "thickness", 0.15, 0.5, group="slab"),
        _number("diameter", "Diameter", "Диаметр", "diameter", 0.4, 1.3, group="cylinder"),
        _number("height", "Height", "Высота", "height", 3, 10, group="cylinder"),
    ],
    how_it_works=_t(
        "Slab volume is length × width × thickness; a column is π × (d/2)² × height. "
        "The waste factor is added on top so you never order short.",
        "Объём плиты — длина × ширина × толщина; колонны — π × (d/2)² × высота. "
        "Сверху добавляется запас, чтобы бетона хватило.",
    ),
    faq=[
        _faq(
            _t("How much extra concrete should I order?",
               "Сколько бетона заказывать с запасом?"),
            _t("Most crews add 5-10% for spillage, uneven subgrade and form bulge.",
               "Обычно добавляют 5-10% на потери, неровное основание и распор опалубки."),
        ),
        _faq(
            _t("Why are imperial results in cubic yards?",
               "Почему в имперской системе кубические ярды?"),
            _t("Ready-mix suppliers in the US and Canada sell concrete by the cubic yard.",
               "В США и Канаде товарный бетон продаётся кубическими ярдами."),
        ),
    ],
    guide=Guide(
        intro=_t(
            "Measure the pour, pick a shape and check the overage before you call the plant.",
            "Измерьте опалубку, выберите форму и проверьте запас перед заказом.",
        ),
        sections=[
            ParagraphSection(body="Measure inside the formwork, not the outside of the boards."),
            ListSection(items=[
                "Slabs: 100-150 mm for walkways, 150-200 mm for driveways.",
                "Columns: measure the tube's inside diameter.",
                "Round the order up to the supplier's minimum increment.",
            ]),
        ],
    ),
    waste_key="concrete",
    result_labels=[
        _result("volume", "Concrete volume", "Объём бетона", "m³", "m³", "yd³"),
    ],
)

PAINT = CalculatorDefinition(
    slug="paint",
    category="paint",
    rating=4.8,
    title=_t("Paint Calculator", "Калькулятор краски"),
    description=_t(
        "Liters or gallons of wall paint from room perimeter, height and coats.",
        "Литры краски для стен по периметру, высоте и числу слоёв.",
    ),
    formula_key="paint",
    inputs=[
        _number("perimeter", "Room perimeter", "Периметр комнаты", "length", 28, 92),
        _number("height", "Wall height", "Высота стен", "height", 2.7, 9),
        _number("openings", "Doors and windows", "Двери и окна", "area", 4, 43,
                description=_t("Total area not painted.", "Общая площадь, которая не красится.")),
        _number("coats", "Coats", "Слоёв", "count", 2, 2, min=1, max=5, step=1),
        _number("coverage", "Coverage", "Расход", "coverage", 10, 400,
                description=_t("From the paint can label.", "Указан на банке краски.")),
    ],
    how_it_works=_t(
        "Net wall area is perimeter × height minus openings. Liters = area × coats ÷ coverage, "
        "with the overage applied to the area.",
        "Чистая площадь стен — периметр × высота минус проёмы. Литры = площадь × слои ÷ расход, "
        "запас добавляется к площади.",
    ),
    faq=[
        _faq(
            _t("Do I need two coats?", "Нужны ли два слоя?"),
            _t("Two coats give even color on most walls; dark-to-light changes may need three.",
               "Два слоя дают ровный цвет; при смене тёмного на светлый может понадобиться три."),
        ),
    ],
    waste_key="paint",
    result_labels=[
        _result("area", "Paintable area", "Площадь окраски", "m²", "m²", "ft²"),
        _result("volume", "Paint needed", "Нужно краски", "L", "L", "gal"),
    ],
)

FLOORING = CalculatorDefinition(
    slug="flooring",
    category="flooring",
    rating=4.7,
    title=_t("Flooring Calculator", "Калькулятор напольного покрытия"),
    description=_t(
        "Laminate, vinyl or engineered boards — area and whole packs to buy.",
        "Ламинат, винил или паркетная доска — площадь и число упаковок.",
    ),
    formula_key="flooring",
    inputs=[
        _number("length", "Room length", "Длина комнаты", "length", 5, 16),
        _number("width", "Room width", "Ширина комнаты", "width", 4, 13),
        _number("packCoverage", "Pack coverage", "Площадь в упаковке", "area", 2.2, 24),
    ],
    how_it_works=_t(
        "Floor area plus overage, divided by the area one pack covers and rounded up.",
        "Площадь пола с запасом делится на площадь упаковки и округляется вверх.",
    ),
    faq=[
        _faq(
            _t("Why round packs up?", "Почему упаковки округляются вверх?"),
            _t("Stores sell whole packs, and a short order stalls the job.",
               "Упаковки продаются целиком, а нехватка остановит работу."),
        ),
    ],
    waste_key="flooring",
    result_labels=[
        _result("area", "Floor area with overage", "Площадь с запасом", "m²", "m²", "ft²"),
        _result("packs", "Packs", "Упаковок", "packs"),
    ],
)

TILE = CalculatorDefinition(
    slug="tile",
    category="tile",
    rating=4.8,
    title=_t("Tile Calculator", "Калькулятор плитки"),
    description=_t(
        "Tiles for floors and walls, including extra cuts for diagonal layouts.",
        "Плитка для пола и стен с учётом подрезки при диагональной укладке.",
    ),
    formula_key="tile",
    inputs=[
        _number("length", "Surface length", "Длина поверхности", "length", 5, 16),
        _number("width", "Surface width", "Ширина поверхности", "width", 3, 10),
        _number("tileLength", "Tile length", "Длина плитки", "length", 0.6, 2),
        _number("tileWidth", "Tile width", "Ширина плитки", "width", 0.3, 1),
        InputField(
            id="diagonal",
            kind="toggle",
            label=_t("Diagonal layout", "Диагональная укладка"),
            description=_t(
                "Uses the regional diagonal cutting waste instead of the slider value.",
                "Использует региональный запас на диагональную подрезку вместо ползунка.",
            ),
            default_metric=False,
            default_imperial=False,
        ),
    ],
    how_it_works=_t(
        "Surface area plus overage divided by one tile's area, rounded up. "
        "Diagonal layouts replace the overage with the regional diagonal waste.",
        "Площадь с запасом делится на площадь плитки и округляется вверх. "
        "При диагональной укладке запас заменяется региональным значением.",
    ),
    faq=[
        _faq(
            _t("How much extra tile for a diagonal pattern?",
               "Сколько плитки добавить при диагональной укладке?"),
            _t("Typically 12-15%, because every edge tile is cut.",
               "Обычно 12-15%, так как режется каждая крайняя плитка."),
        ),
    ],
    waste_key="tile",
    result_labels=[
        _result("area", "Area with overage", "Площадь с запасом", "m²", "m²", "ft²"),
        _result("tiles", "Tiles", "Плиток", "pcs"),
    ],
)

ROOFING = CalculatorDefinition(
    slug="roofing",
    category="roofing",
    rating=4.6,
    title=_t("Roofing Calculator", "Калькулятор кровли"),
    description=_t(
        "Sloped roof area from the building footprint and pitch, and shingle bundles.",
        "Площадь ската по размерам дома и уклону, число пачек черепицы.",
    ),
    formula_key="roofing",
    inputs=[
        _number("length", "Footprint length", "Длина дома", "length", 10, 33),
        _number("width", "Footprint width", "Ширина дома", "width", 8, 26),
        _number("angle", "Roof pitch", "Уклон кровли", "angle", 28, 26, max=75, step=1),
        _number("bundleCoverage", "Bundle coverage", "Площадь пачки", "area", 3.1, 33),
    ],
    how_it_works=_t(
        "Footprint area ÷ cos(pitch) gives the sloped area; steep pitches are capped so the "
        "estimate stays finite. Bundles are the area with overage divided by bundle coverage.",
        "Площадь дома ÷ cos(уклона) даёт площадь скатов; для крутых уклонов знаменатель "
        "ограничен. Пачки — площадь с запасом, делённая на покрытие пачки.",
    ),
    faq=[
        _faq(
            _t("What pitch should I enter?", "Какой уклон вводить?"),
            _t("The angle between the roof plane and horizontal, in degrees.",
               "Угол между скатом и горизонталью в градусах."),
        ),
    ],
    waste_key="roofing",
    result_labels=[
        _result("area", "Roof area with overage", "Площадь кровли с запасом", "m²", "m²", "ft²"),
        _result("bundles", "Bundles", "Пачек", "bundles"),
    ],
)

DRYWALL = CalculatorDefinition(
    slug="drywall",
    category="drywall",
    rating=4.6,
    title=_t("Drywall Calculator", "Калькулятор гипсокартона"),
    description=_t(
        "Sheets of drywall for a room's walls, net of doors and windows.",
        "Листы гипсокартона для стен комнаты за вычетом проёмов.",
    ),
    formula_key="drywall",
    inputs=[
        _number("perimeter", "Room perimeter", "Периметр комнаты", "length", 20, 66),
        _number("height", "Wall height", "Высота стен", "height", 2.8, 9),
        _number("openings", "Doors and windows", "Двери и окна", "area", 4, 43),
        _number("sheetArea", "Sheet area", "Площадь листа", "area", 2.88, 32),
    ],
    how_it_works=_t(
        "Net wall area plus overage, divided by one sheet's area and rounded up.",
        "Чистая площадь стен с запасом делится на площадь листа и округляется вверх.",
    ),
    faq=[
        _faq(
            _t("What if openings exceed the wall area?", "Что если проёмы больше площади стен?"),
            _t("The area is reported as zero — it never goes negative.",
               "Площадь будет равна нулю — она не бывает отрицательной."),
        ),
    ],
    waste_key="drywall",
    result_labels=[
        _result("area", "Wall area with overage", "Площадь стен с запасом", "m²", "m²", "ft²"),
        _result("sheets", "Sheets", "Листов", "sheets"),
    ],
)

WALLPAPER = CalculatorDefinition(
    slug="wallpaper",
    category="wallpaper",
    rating=4.5,
    title=_t("Wallpaper Calculator", "Калькулятор обоев"),
    description=_t(
        "Strips and rolls of wallpaper, accounting for pattern repeat allowance.",
        "Полосы и рулоны обоев с учётом подгонки рисунка.",
    ),
    formula_key="wallpaper",
    inputs=[
        _number("perimeter", "Room perimeter", "Периметр комнаты", "length", 25, 82),
        _number("height", "Wall height", "Высота стен", "height", 2.6, 8.5),
        _number("allowance", "Pattern allowance", "Припуск на рисунок", "length", 0.1, 0.33),
        _number("rollLength", "Roll length", "Длина рулона", "length", 10.05, 33),
        _number("rollWidth", "Roll width", "Ширина рулона", "width", 0.53, 1.75),
    ],
    how_it_works=_t(
        "Each roll yields whole strips of wall height plus allowance. Strips around the room "
        "are perimeter ÷ roll width with overage; rolls are strips ÷ strips per roll, rounded up.",
        "Из рулона выходит целое число полос высотой стены плюс припуск. Полос по периметру — "
        "периметр ÷ ширина рулона с запасом; рулоны — полосы ÷ полос в рулоне, вверх.",
    ),
    faq=[
        _faq(
            _t("Why do leftover pieces not count?", "Почему обрезки не учитываются?"),
            _t("Offcuts shorter than a full strip can't be hung without a visible seam.",
               "Обрезки короче полосы нельзя поклеить без заметного стыка."),
        ),
    ],
    waste_key="wallpaper",
    result_labels=[
        _result("strips", "Strips", "Полос", "strips"),
        _result("rolls", "Rolls", "Рулонов", "rolls"),
    ],
)

BRICK = CalculatorDefinition(
    slug="brick",
    category="brick",
    rating=4.7,
    title=_t("Brick Calculator", "Калькулятор кирпича"),
    description=_t(
        "Bricks and mortar volume for a wall of a given area.",
        "Кирпич и объём раствора для стены заданной площади.",
    ),
    formula_key="brick",
    inputs=[
        _number("wallArea", "Wall area", "Площадь стены", "area", 40, 430),
        _number("bricksPerSqm", "Bricks per m²", "Кирпичей на м²", "count", 50, 50, step=1),
        _number("mortarPerSqm", "Mortar per m² (m³)", "Раствор на м² (м³)", "count", 0.035, 0.035,
                step=0.001),
    ],
    how_it_works=_t(
        "Wall area × bricks per m² and wall area × mortar per m², both with overage.",
        "Площадь × кирпичей на м² и площадь × раствора на м², оба с запасом.",
    ),
    faq=[
        _faq(
            _t("Does this include the mortar joint?", "Учитывается ли шов?"),
            _t("Yes — bricks per m² already assume a standard 10 mm joint.",
               "Да — расход на м² уже учитывает стандартный шов 10 мм."),
        ),
    ],
    waste_key="brick",
    result_labels=[
        _result("bricks", "Bricks", "Кирпичей", "pcs"),
        _result("mortar", "Mortar", "Раствор", "m³", "m³", "yd³"),
    ],
)

INSULATION = CalculatorDefinition(
    slug="insulation",
    category="insulation",
    rating=4.5,
    title=_t("Insulation Calculator", "Калькулятор утеплителя"),
    description=_t(
        "Insulation volume and rolls for walls, floors and attics.",
        "Объём утеплителя и число рулонов для стен, полов и мансард.",
    ),
    formula_key="insulation",
    inputs=[
        _number("area", "Area to insulate", "Площадь утепления", "area", 50, 540),
        _number("thickness", "Thickness", "Толщина", "thickness", 0.1, 0.33),
        _number("rollArea", "Roll area", "Площадь рулона", "area", 10, 108),
    ],
    how_it_works=_t(
        "Volume is area × thickness with overage; rolls are the area with overage divided by "
        "roll area, rounded up.",
        "Объём — площадь × толщина с запасом; рулоны — площадь с запасом ÷ площадь рулона, вверх.",
    ),
    faq=[
        _faq(
            _t("Should I stack two layers?", "Укладывать ли в два слоя?"),
            _t("Two staggered layers cut thermal bridging; enter the combined thickness.",
               "Два слоя вразбежку уменьшают мостики холода; вводите общую толщину."),
        ),
    ],
    waste_key="insulation",
    result_labels=[
        _result("volume", "Insulation volume", "Объём утеплителя", "m³", "m³", "yd³"),
        _result("rolls", "Rolls", "Рулонов", "rolls"),
    ],
)

PLASTER = CalculatorDefinition(
    slug="plaster",
    category="plaster",
    rating=4.4,
    title=_t("Plaster Calculator", "Калькулятор штукатурки"),
    description=_t(
        "Plaster volume and bags for a wall or ceiling at a given thickness.",
        "Объём штукатурки и число мешков для стены или потолка заданной толщины.",
    ),
    formula_key="plaster",
    inputs=[
        _number("area", "Surface area", "Площадь поверхности", "area", 40, 430),
        _number("thickness", "Layer thickness", "Толщина слоя", "thickness", 0.01, 0.033,
                step=0.001),
        _number("coveragePerBag", "Volume per bag (m³)", "Объём из мешка (м³)", "count", 0.1, 0.1,
                step=0.001),
    ],
    how_it_works=_t(
        "Volume is area × thickness with overage; bags are volume ÷ volume per bag, rounded up.",
        "Объём — площадь × толщина с запасом; мешки — объём ÷ объём из мешка, вверх.",
    ),
    faq=[
        _faq(
            _t("How thick should plaster be?", "Какой толщины должна быть штукатурка?"),
            _t("Skim coats are 2-5 mm; leveling coats on brick are 10-20 mm.",
               "Финишный слой 2-5 мм; выравнивающий по кирпичу 10-20 мм."),
        ),
    ],
    waste_key="plaster",
    result_labels=[
        _result("volume", "Plaster volume", "Объём штукатурки", "m³", "m³", "yd³"),
        _result("bags", "Bags", "Мешков", "bags"),
        _result("area", "Surface area", "Площадь", "m²", "m²", "ft²"),
    ],
)

SCREED = CalculatorDefinition(
    slug="screed",
    category="screed",
    rating=4.5,
    title=_t("Floor Screed Calculator", "Калькулятор стяжки"),
    description=_t(
        "Screed volume split into cement and sand by mix ratio.",
        "Объём стяжки с разделением на цемент и песок по пропорции.",
    ),
    formula_key="screed",
    inputs=[
        _number("area", "Floor area", "Площадь пола", "area", 30, 320),
        _number("thickness", "Screed thickness", "Толщина стяжки", "thickness", 0.05, 0.16),
        _number("cementRatio", "Cement parts", "Частей цемента", "count", 1, 1, step=0.1),
        _number("sandRatio", "Sand parts", "Частей песка", "count", 3, 3, step=0.1),
    ],
    how_it_works=_t(
        "Volume with overage is split by cement:sand parts. Cement is weighed at 1500 kg/m³ "
        "and bought in 50 kg bags.",
        "Объём с запасом делится по частям цемент:песок. Цемент — 1500 кг/м³, мешки по 50 кг.",
    ),
    faq=[
        _faq(
            _t("What mix ratio is typical?", "Какая пропорция обычна?"),
            _t("1:3 cement to sand for floor screeds; 1:4 for thicker bases.",
               "1:3 цемента к песку для стяжки; 1:4 для толстых оснований."),
        ),
    ],
    waste_key="screed",
    result_labels=[
        _result("volume", "Screed volume", "Объём стяжки", "m³", "m³", "yd³"),
        _result("cementWeight", "Cement", "Цемент", "kg"),
        _result("cementBags", "Cement bags (50 kg)", "Мешков цемента (50 кг)", "bags"),
        _result("sandVolume", "Sand", "Песок", "m³", "m³", "yd³"),
    ],
)

ELECTRICAL = CalculatorDefinition(
    slug="electrical",
    category="electrical",
    rating=4.4,
    title=_t("Electrical Wiring Calculator", "Калькулятор электропроводки"),
    description=_t(
        "Cable length and conduit runs for sockets and switches in a room.",
        "Длина кабеля и гофры для розеток и выключателей в комнате.",
    ),
    formula_key="electrical",
    inputs=[
        _number("perimeter", "Room perimeter", "Периметр помещения", "length", 40, 130),
        _number("height", "Wall height", "Высота стен", "height", 2.7, 9),
        _number("sockets", "Sockets", "Розеток", "count", 10, 10, step=1),
        _number("switches", "Switches", "Выключателей", "count", 5, 5, step=1),
    ],
    how_it_works=_t(
        "One vertical drop per socket and switch plus horizontal runs at 1.5 × perimeter, "
        "with overage. Conduit is counted in 3 m lengths.",
        "Один вертикальный спуск на каждую точку плюс горизонталь 1,5 × периметр, с запасом. "
        "Гофра считается отрезками по 3 м.",
    ),
    faq=[
        _faq(
            _t("Why 1.5 × the perimeter?", "Почему 1,5 × периметр?"),
            _t("Cable rarely runs straight; the multiplier covers corners and junction boxes.",
               "Кабель редко идёт прямо; множитель покрывает углы и распаечные коробки."),
        ),
    ],
    waste_key="electrical",
    result_labels=[
        _result("cableLength", "Cable length", "Длина кабеля", "m", "m", "ft"),
        _result("sockets", "Sockets", "Розеток", "pcs"),
        _result("switches", "Switches", "Выключателей", "pcs"),
        _result("conduits", "Conduit lengths (3 m)", "Отрезков гофры (3 м)", "pcs"),
    ],
)

CALCULATOR_DEFINITIONS: list[CalculatorDefinition] = [
    CONCRETE,
    PAINT,
    FLOORING,
    TILE,
    ROOFING,
    DRYWALL,
    WALLPAPER,
    BRICK,
    INSULATION,
    PLASTER,
    SCREED,
    ELECTRICAL,
]
