"""Static app manifest surfaced to the mobile runtime.

The manifest mirrors the Expo config document: app identity, platform
settings, bundled plugins and an ``extra`` block carrying the secrets the
runtime reads at launch. Secrets come from :class:`Settings` and default to
empty strings.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sunnomad.core.config import Settings, get_settings

BRAND_COLOR = "#FF8F00"  # SunNomad orange/gold
BUNDLE_ID = "com.sunnomad.app"
LOCATION_PERMISSION_TEXT = "Allow SunNomad to use your location to find sunny destinations."


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Splash(_CamelModel):
    image: str = "./assets/splash.png"
    resize_mode: Literal["contain", "cover", "native"] = "contain"
    background_color: str = BRAND_COLOR


class IosConfig(_CamelModel):
    supports_tablet: bool = True
    bundle_identifier: str = BUNDLE_ID
    icon: str = "./assets/icon.png"


class AdaptiveIcon(_CamelModel):
    foreground_image: str = "./assets/adaptive-icon.png"
    background_color: str = BRAND_COLOR


class AndroidConfig(_CamelModel):
    adaptive_icon: AdaptiveIcon = Field(default_factory=AdaptiveIcon)
    package: str = BUNDLE_ID
    permissions: list[str] = Field(
        default_factory=lambda: ["ACCESS_FINE_LOCATION", "ACCESS_COARSE_LOCATION"]
    )


class RuntimeExtra(_CamelModel):
    """Values exposed to the app through ``Constants.expoConfig.extra``."""

    open_weather_api_key: str = ""
    weatherbit_api_key: str = ""
    supabase_url: str = ""
    supabase_anon_key: str = ""

    def masked(self) -> "RuntimeExtra":
        """Return a copy with every non-empty secret replaced by ``***``."""
        values = {
            name: ("***" if value else "")
            for name, value in self.model_dump().items()
        }
        # URL 은 비밀값이 아님
        values["supabase_url"] = self.supabase_url
        return RuntimeExtra(**values)


def _default_plugins() -> list[Any]:
    return [
        ["expo-location", {"locationAlwaysAndWhenInUsePermission": LOCATION_PERMISSION_TEXT}],
        "expo-localization",
    ]


class AppManifest(_CamelModel):
    name: str = "SunNomad"
    slug: str = "sunnomad"
    version: str = "1.0.0"
    orientation: Literal["portrait", "landscape", "default"] = "portrait"
    user_interface_style: Literal["light", "dark", "automatic"] = "light"
    icon: str = "./assets/icon.png"
    splash: Splash = Field(default_factory=Splash)
    asset_bundle_patterns: list[str] = Field(default_factory=lambda: ["**/*"])
    ios: IosConfig = Field(default_factory=IosConfig)
    android: AndroidConfig = Field(default_factory=AndroidConfig)
    web: dict[str, Any] = Field(default_factory=dict)
    plugins: list[Any] = Field(default_factory=_default_plugins)
    extra: RuntimeExtra = Field(default_factory=RuntimeExtra)

    def to_expo_dict(self, mask_secrets: bool = False) -> dict[str, Any]:
        """Return the manifest as the camelCase ``{"expo": {...}}`` document."""
        manifest = self
        if mask_secrets:
            manifest = self.model_copy(update={"extra": self.extra.masked()})
        return {"expo": manifest.model_dump(by_alias=True)}


def build_app_manifest(settings: Settings | None = None) -> AppManifest:
    """Build the manifest, pulling runtime secrets from settings."""
    settings = settings or get_settings()
    extra = RuntimeExtra(
        open_weather_api_key=settings.openweathermap_api_key or "",
        weatherbit_api_key=settings.weatherbit_api_key or "",
        supabase_url=settings.supabase_url or "",
        supabase_anon_key=settings.supabase_anon_key or "",
    )
    return AppManifest(extra=extra)
