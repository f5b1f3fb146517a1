"""Built-in colour themes and condition backgrounds."""

from weatherview.config.schema import ThemeConfig

DEFAULT_THEMES: list[ThemeConfig] = [
    ThemeConfig(
        name="Classic",
        gradient="linear-gradient(135deg, #89f7fe 0%, #66a6ff 100%)",
    ),
    ThemeConfig(
        name="Ocean",
        gradient="linear-gradient(135deg, #43cea2 0%, #185a9d 100%)",
    ),
    ThemeConfig(
        name="Sunset",
        gradient="linear-gradient(135deg, #ff9966 0%, #ff5e62 100%)",
    ),
    ThemeConfig(
        name="Aurora",
        gradient="linear-gradient(135deg, #7f7fd5 0%, #86a8e7 50%, #91eac9 100%)",
    ),
    ThemeConfig(
        name="Night",
        gradient="linear-gradient(135deg, #232526 0%, #414345 100%)",
    ),
]

DARK_BACKGROUND = "linear-gradient(135deg, #232526 0%, #414345 100%)"
FALLBACK_BACKGROUND = "linear-gradient(135deg, #89f7fe 0%, #66a6ff 100%)"

# Keyed by the provider's condition category ("main")
CONDITION_BACKGROUNDS: dict[str, str] = {
    "Clear": "linear-gradient(135deg, #56ccf2 0%, #2f80ed 100%)",
    "Clouds": "linear-gradient(135deg, #bdc3c7 0%, #2c3e50 100%)",
    "Rain": "linear-gradient(135deg, #4e54c8 0%, #8f94fb 100%)",
    "Thunderstorm": DARK_BACKGROUND,
    "Snow": "linear-gradient(135deg, #e0eafc 0%, #cfdef3 100%)",
}
