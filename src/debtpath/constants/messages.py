"""
User-facing strings for projection labels and strategy recommendations.
English is the default; Spanish matches the wording households saw in the dashboard.
"""

DEFAULT_LOCALE = "en"

MESSAGES = {
    "en": {
        "today": "Today",
        "month": "Month {n}",
        "high_interest": (
            'Your debt "{name}" has a very high interest rate ({rate:g}%). '
            "Attacking it first will save you the most money."
        ),
        "small_balance": (
            'You have a small debt "{name}" ({balance}). '
            "Eliminating it fast will give you immediate motivation."
        ),
        "math_default": (
            "Mathematically, paying the debt with the highest interest first "
            "always saves the most money over time."
        ),
    },
    "es": {
        "today": "Hoy",
        "month": "Mes {n}",
        "high_interest": (
            'Tu deuda "{name}" tiene un interés muy alto ({rate:g}%). '
            "Atacarla primero te ahorrará mucho dinero."
        ),
        "small_balance": (
            'Tienes una deuda pequeña "{name}" ({balance}). '
            "Eliminarla rápido te dará motivación inmediata."
        ),
        "math_default": (
            "Matemáticamente, pagar la deuda con mayor interés siempre ahorra "
            "más dinero a largo plazo."
        ),
    },
}


def message(key: str, locale: str | None = None, **params) -> str:
    """Return the localized message for ``key``; unknown locales fall back to English."""

    catalog = MESSAGES.get((locale or DEFAULT_LOCALE).lower(), MESSAGES[DEFAULT_LOCALE])
    return catalog[key].format(**params)
