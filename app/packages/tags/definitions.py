"""Tag taxonomy: the static catalog of calculator tags.

Tags are organized into three groups:
- domain: WHAT area a calculator belongs to (finance, math, ...)
- topic: WHAT EXACTLY it is about (mortgage, concrete, bmi, ...)
- intent: WHY a visitor uses it (calculator, converter, planner, ...)

Tag ids are stable, lowercase, hyphenated and safe for URLs and query
filters. Labels are display strings keyed by locale code.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from infrastructure.i18n.models import DEFAULT_LOCALE, Locale, locale_code


class TagGroup(str, Enum):
    """Logical group of a tag."""

    DOMAIN = "domain"
    TOPIC = "topic"
    INTENT = "intent"


GROUP_ORDER: Dict[TagGroup, int] = {
    TagGroup.DOMAIN: 0,
    TagGroup.TOPIC: 1,
    TagGroup.INTENT: 2,
}


@dataclass(frozen=True)
class TagDefinition:
    """One tag of the catalog.

    Attributes:
        id: Unique tag identifier (e.g. "compound-interest").
        label: Display label per locale code.
        group: Domain, topic or intent.
    """

    id: str
    label: Mapping[str, str]
    group: TagGroup

    def label_for(self, locale: Locale | str = DEFAULT_LOCALE) -> str:
        """Label for a locale, falling back to the default locale, then the id."""
        return (
            self.label.get(locale_code(locale))
            or self.label.get(DEFAULT_LOCALE.value)
            or self.id
        )


def _tag(tag_id: str, group: TagGroup, en: str, ru: str, es: str, tr: str, hi: str) -> TagDefinition:
    return TagDefinition(
        id=tag_id,
        label=MappingProxyType({"en": en, "ru": ru, "es": es, "tr": tr, "hi": hi}),
        group=group,
    )


DOMAIN_TAGS: Sequence[TagDefinition] = (
    _tag("math", TagGroup.DOMAIN, "Math", "Математика", "Matemáticas", "Matematik", "गणित"),
    _tag("finance", TagGroup.DOMAIN, "Finance", "Финансы", "Finanzas", "Finans", "वित्त"),
    _tag("construction", TagGroup.DOMAIN, "Construction", "Строительство", "Construcción", "İnşaat", "निर्माण"),
    _tag("auto", TagGroup.DOMAIN, "Auto", "Автомобили", "Auto", "Otomobil", "ऑटो"),
    _tag("health", TagGroup.DOMAIN, "Health", "Здоровье", "Salud", "Sağlık", "स्वास्थ्य"),
    _tag("life", TagGroup.DOMAIN, "Life", "Жизнь", "Vida", "Yaşam", "जीवन"),
    _tag("tools", TagGroup.DOMAIN, "Tools", "Инструменты", "Herramientas", "Araçlar", "उपकरण"),
    _tag("compatibility", TagGroup.DOMAIN, "Compatibility", "Совместимость", "Compatibilidad", "Uyumluluk", "अनुकूलता"),
    _tag("statistics", TagGroup.DOMAIN, "Statistics", "Статистика", "Estadísticas", "İstatistik", "सांख्यिकी"),
)

TOPIC_TAGS: Sequence[TagDefinition] = (
    # Finance
    _tag("loan", TagGroup.TOPIC, "Loan", "Кредит", "Préstamo", "Kredi", "ऋण"),
    _tag("mortgage", TagGroup.TOPIC, "Mortgage", "Ипотека", "Hipoteca", "Mortgage", "बंधक"),
    _tag("auto-loan", TagGroup.TOPIC, "Auto Loan", "Автокредит", "Préstamo de Auto", "Araç Kredisi", "ऑटो लोन"),
    _tag("investment", TagGroup.TOPIC, "Investment", "Инвестиции", "Inversión", "Yatırım", "निवेश"),
    _tag("savings", TagGroup.TOPIC, "Savings", "Накопления", "Ahorros", "Tasarruf", "बचत"),
    _tag("interest", TagGroup.TOPIC, "Interest", "Процент", "Interés", "Faiz", "ब्याज"),
    _tag("compound-interest", TagGroup.TOPIC, "Compound Interest", "Сложный процент", "Interés Compuesto", "Bileşik Faiz", "चक्रवृद्धि ब्याज"),
    _tag("roi", TagGroup.TOPIC, "ROI", "ROI", "ROI", "ROI", "ROI"),
    _tag("tax", TagGroup.TOPIC, "Tax", "Налог", "Impuesto", "Vergi", "कर"),
    _tag("retirement", TagGroup.TOPIC, "Retirement", "Пенсия", "Jubilación", "Emeklilik", "सेवानिवृत्ति"),
    _tag("salary", TagGroup.TOPIC, "Salary", "Зарплата", "Salario", "Maaş", "वेतन"),
    _tag("net-worth", TagGroup.TOPIC, "Net Worth", "Чистые активы", "Patrimonio Neto", "Net Değer", "कुल संपत्ति"),
    _tag("emergency-fund", TagGroup.TOPIC, "Emergency Fund", "Резервный фонд", "Fondo de Emergencia", "Acil Durum Fonu", "आपातकालीन निधि"),
    # Math
    _tag("percent", TagGroup.TOPIC, "Percent", "Процент", "Porcentaje", "Yüzde", "प्रतिशत"),
    _tag("area", TagGroup.TOPIC, "Area", "Площадь", "Área", "Alan", "क्षेत्र"),
    _tag("volume", TagGroup.TOPIC, "Volume", "Объём", "Volumen", "Hacim", "आयतन"),
    _tag("equation", TagGroup.TOPIC, "Equation", "Уравнение", "Ecuación", "Denklem", "समीकरण"),
    _tag("quadratic", TagGroup.TOPIC, "Quadratic", "Квадратное", "Cuadrático", "İkinci Dereceden", "द्विघात"),
    _tag("probability", TagGroup.TOPIC, "Probability", "Вероятность", "Probabilidad", "Olasılık", "संभावना"),
    _tag("pythagorean", TagGroup.TOPIC, "Pythagorean", "Пифагор", "Pitagórico", "Pisagor", "पाइथागोरस"),
    # Construction
    _tag("paint", TagGroup.TOPIC, "Paint", "Краска", "Pintura", "Boya", "पेंट"),
    _tag("primer", TagGroup.TOPIC, "Primer", "Грунтовка", "Imprimación", "Astar", "प्राइमर"),
    _tag("putty", TagGroup.TOPIC, "Putty", "Шпаклёвка", "Masilla", "Macun", "पुट्टी"),
    _tag("tile", TagGroup.TOPIC, "Tile", "Плитка", "Azulejo", "Karo", "टाइल"),
    _tag("laminate", TagGroup.TOPIC, "Laminate", "Ламинат", "Laminado", "Laminat", "लैमिनेट"),
    _tag("concrete", TagGroup.TOPIC, "Concrete", "Бетон", "Hormigón", "Beton", "कंक्रीट"),
    _tag("bricks", TagGroup.TOPIC, "Bricks", "Кирпич", "Ladrillos", "Tuğla", "ईंटें"),
    _tag("insulation", TagGroup.TOPIC, "Insulation", "Утеплитель", "Aislamiento", "Yalıtım", "इन्सुलेशन"),
    _tag("foundation", TagGroup.TOPIC, "Foundation", "Фундамент", "Fundación", "Temel", "नींव"),
    _tag("rebar", TagGroup.TOPIC, "Rebar", "Арматура", "Refuerzo", "Donatı", "रिबार"),
    _tag("stairs", TagGroup.TOPIC, "Stairs", "Лестница", "Escaleras", "Merdiven", "सीढ़ियां"),
    _tag("pipes", TagGroup.TOPIC, "Pipes", "Трубы", "Tuberías", "Borular", "पाइप"),
    _tag("electrical", TagGroup.TOPIC, "Electrical", "Электрика", "Eléctrico", "Elektrik", "विद्युत"),
    # Health
    _tag("bmi", TagGroup.TOPIC, "BMI", "ИМТ", "IMC", "VKİ", "BMI"),
    _tag("calories", TagGroup.TOPIC, "Calories", "Калории", "Calorías", "Kalori", "कैलोरी"),
    _tag("pregnancy", TagGroup.TOPIC, "Pregnancy", "Беременность", "Embarazo", "Hamilelik", "गर्भावस्था"),
    _tag("due-date", TagGroup.TOPIC, "Due Date", "Дата родов", "Fecha de Parto", "Doğum Tarihi", "नियत तारीख"),
    _tag("body-fat", TagGroup.TOPIC, "Body Fat", "Жировая масса", "Grasa Corporal", "Vücut Yağı", "शरीर की चर्बी"),
    _tag("heart-rate", TagGroup.TOPIC, "Heart Rate", "Пульс", "Frecuencia Cardíaca", "Kalp Atışı", "हृदय गति"),
    # Auto
    _tag("fuel", TagGroup.TOPIC, "Fuel", "Топливо", "Combustible", "Yakıt", "ईंधन"),
    _tag("fuel-consumption", TagGroup.TOPIC, "Fuel Consumption", "Расход топлива", "Consumo de Combustible", "Yakıt Tüketimi", "ईंधन खपत"),
    _tag("car-loan", TagGroup.TOPIC, "Car Loan", "Автокредит", "Préstamo de Auto", "Araç Kredisi", "कार लोन"),
    _tag("car-tax", TagGroup.TOPIC, "Car Tax", "Налог на авто", "Impuesto de Auto", "Araç Vergisi", "कार कर"),
    _tag("depreciation", TagGroup.TOPIC, "Depreciation", "Амортизация", "Depreciación", "Amortisman", "मूल्यह्रास"),
    _tag("maintenance", TagGroup.TOPIC, "Maintenance", "Обслуживание", "Mantenimiento", "Bakım", "रखरखाव"),
    # Tools / utilities
    _tag("temperature", TagGroup.TOPIC, "Temperature", "Температура", "Temperatura", "Sıcaklık", "तापमान"),
    _tag("speed", TagGroup.TOPIC, "Speed", "Скорость", "Velocidad", "Hız", "गति"),
    _tag("length", TagGroup.TOPIC, "Length", "Длина", "Longitud", "Uzunluk", "लंबाई"),
    _tag("weight", TagGroup.TOPIC, "Weight", "Вес", "Peso", "Ağırlık", "वजन"),
    _tag("time", TagGroup.TOPIC, "Time", "Время", "Tiempo", "Zaman", "समय"),
    _tag("date", TagGroup.TOPIC, "Date", "Дата", "Fecha", "Tarih", "तारीख"),
    _tag("random", TagGroup.TOPIC, "Random", "Случайный", "Aleatorio", "Rastgele", "यादृच्छिक"),
    _tag("password", TagGroup.TOPIC, "Password", "Пароль", "Contraseña", "Şifre", "पासवर्ड"),
    _tag("qr", TagGroup.TOPIC, "QR Code", "QR-код", "Código QR", "QR Kod", "QR कोड"),
    _tag("crypto", TagGroup.TOPIC, "Crypto", "Криптовалюта", "Cripto", "Kripto", "क्रिप्टो"),
    _tag("number-to-words", TagGroup.TOPIC, "Number to Words", "Число прописью", "Número a Palabras", "Sayıyı Kelimeye", "संख्या को शब्दों में"),
    _tag("roman-numerals", TagGroup.TOPIC, "Roman Numerals", "Римские цифры", "Números Romanos", "Roma Rakamları", "रोमन अंक"),
)

# "converter" and "generator" are intents only; ids are unique across groups.
INTENT_TAGS: Sequence[TagDefinition] = (
    _tag("calculator", TagGroup.INTENT, "Calculator", "Калькулятор", "Calculadora", "Hesap Makinesi", "कैलकुलेटर"),
    _tag("converter", TagGroup.INTENT, "Converter", "Конвертер", "Convertidor", "Dönüştürücü", "कनवर्टर"),
    _tag("estimator", TagGroup.INTENT, "Estimator", "Оценщик", "Estimador", "Tahminci", "अनुमानक"),
    _tag("planner", TagGroup.INTENT, "Planner", "Планировщик", "Planificador", "Planlayıcı", "योजनाकार"),
    _tag("checker", TagGroup.INTENT, "Checker", "Проверка", "Verificador", "Kontrolcü", "चेकर"),
    _tag("generator", TagGroup.INTENT, "Generator", "Генератор", "Generador", "Jeneratör", "जनरेटर"),
    _tag("educational", TagGroup.INTENT, "Educational", "Образовательный", "Educativo", "Eğitici", "शैक्षिक"),
)

TAG_DEFINITIONS: Sequence[TagDefinition] = (*DOMAIN_TAGS, *TOPIC_TAGS, *INTENT_TAGS)

# Several categories may share one domain tag.
CATEGORY_TO_DOMAIN: Mapping[str, str] = MappingProxyType(
    {
        "finance": "finance",
        "math": "math",
        "construction": "construction",
        "auto": "auto",
        "health": "health",
        "everyday": "life",
        "business": "finance",
        "engineering": "construction",
        "tools": "tools",
        "compatibility": "compatibility",
        "statistics": "statistics",
    }
)


@dataclass(frozen=True)
class TagValidationResult:
    """Outcome of validating tag ids against the catalog."""

    valid: bool
    invalid: List[str] = field(default_factory=list)


class TagCatalog:
    """Read-only catalog of tag definitions with lookup helpers.

    Attributes:
        definitions: All definitions, in catalog order.
    """

    def __init__(
        self,
        definitions: Iterable[TagDefinition] = TAG_DEFINITIONS,
        category_to_domain: Mapping[str, str] = CATEGORY_TO_DOMAIN,
    ):
        self.definitions: tuple[TagDefinition, ...] = tuple(definitions)
        self._by_id: Dict[str, TagDefinition] = {}
        for definition in self.definitions:
            if definition.id in self._by_id:
                raise ValueError(f"Duplicate tag id in catalog: {definition.id}")
            self._by_id[definition.id] = definition
        self.category_to_domain = MappingProxyType(dict(category_to_domain))

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self._by_id)

    def __contains__(self, tag_id: object) -> bool:
        return tag_id in self._by_id

    def __len__(self) -> int:
        return len(self.definitions)

    def get_definition(self, tag_id: str) -> Optional[TagDefinition]:
        """Get tag definition by id, or None if unknown."""
        return self._by_id.get(tag_id)

    def get_label(self, tag_id: str, locale: Locale | str = DEFAULT_LOCALE) -> str:
        """Get a tag label for a locale.

        Falls back to the default locale's label, then to the raw id when
        the tag is not in the catalog.
        """
        definition = self.get_definition(tag_id)
        if definition is None:
            return tag_id
        return definition.label_for(locale)

    def get_by_group(self, group: TagGroup | str) -> List[TagDefinition]:
        """All definitions of a group, in catalog order."""
        group = TagGroup(group)
        return [d for d in self.definitions if d.group == group]

    def group_of(self, tag_id: str) -> Optional[TagGroup]:
        definition = self.get_definition(tag_id)
        return definition.group if definition else None

    def domain_tag_for_category(self, category: str) -> Optional[str]:
        """Domain tag id for a calculator category, or None if unmapped."""
        return self.category_to_domain.get(category)

    def validate(self, tag_ids: Iterable[str]) -> TagValidationResult:
        """Check tag ids against the catalog.

        Returns:
            TagValidationResult with valid=True iff every id is known, and
            the unknown ids in input order.
        """
        invalid = [tag_id for tag_id in tag_ids if tag_id not in self._by_id]
        return TagValidationResult(valid=not invalid, invalid=invalid)
