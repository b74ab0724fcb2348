"""ABOUTME: Practical guidance derived from normalized current conditions."""

from typing import List

from .models import CurrentConditions

ADVICE_COLD_SEVERE = "🧥 Freezing temperatures: dress warmly and wear a heavy coat"
ADVICE_COLD_MILD = "🧥 Chilly out: a jacket is recommended"
ADVICE_HOT_MILD = "☀️ Warm weather: light clothing recommended"
ADVICE_HOT_SEVERE = "🌞 Hot weather: avoid heat exposure and drink plenty of water"
ADVICE_HUMID = "💧 High humidity: it may feel muggy"
ADVICE_DRY = "🏜️ Low humidity: stay hydrated and moisturize"
ADVICE_WINDY = "💨 Strong winds: take care when outdoors"
ADVICE_RAIN = "🌧️ Rain expected: bring an umbrella"
ADVICE_SNOW = "❄️ Snow expected: keep warm and watch for icy footing"
ADVICE_FOG = "🌫️ Foggy: drive with caution"
GOOD_CONDITIONS_ADVICE = "Conditions are good for outdoor activity"

HIGH_HUMIDITY_PCT = 80
LOW_HUMIDITY_PCT = 30
HIGH_WIND_KPH = 30

# Drizzle and freezing drizzle also call for an umbrella
RAIN_KEYWORDS = ("rain", "drizzle")


def advise(conditions: CurrentConditions) -> List[str]:
    """Return every advisory that applies, in rule order.

    Rules are independent; temperature bands partition the scale so at most
    one temperature advisory fires.
    """
    advice = []
    temperature = conditions.temperature_c

    if temperature < 0:
        advice.append(ADVICE_COLD_SEVERE)
    elif temperature < 10:
        advice.append(ADVICE_COLD_MILD)
    elif temperature > 30:
        advice.append(ADVICE_HOT_SEVERE)
    elif temperature > 25:
        advice.append(ADVICE_HOT_MILD)

    if conditions.humidity_pct > HIGH_HUMIDITY_PCT:
        advice.append(ADVICE_HUMID)
    elif conditions.humidity_pct < LOW_HUMIDITY_PCT:
        advice.append(ADVICE_DRY)

    if conditions.wind_speed_kph > HIGH_WIND_KPH:
        advice.append(ADVICE_WINDY)

    description = conditions.description.lower()
    if any(keyword in description for keyword in RAIN_KEYWORDS):
        advice.append(ADVICE_RAIN)
    if "snow" in description:
        advice.append(ADVICE_SNOW)
    if "fog" in description:
        advice.append(ADVICE_FOG)

    return advice


def advice_text(conditions: CurrentConditions) -> str:
    """Newline-joined advisories, or the good-conditions message when none apply."""
    advice = advise(conditions)
    return "\n".join(advice) if advice else GOOD_CONDITIONS_ADVICE
