"""
Device profiles: the hardware and software description a session presents.

``DeviceProfile`` is the interface the protocol layer depends on.
``DeviceProperties`` implements it from Android build properties, the same
``key=value`` ``.properties`` dumps the store app reports during checkin.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from playstore_api.models import proto
from playstore_api.transport.legacy import parse_key_value

CHECKIN_VERSION = 3


class DeviceProfile(Protocol):
    sdk_version: int

    def build_checkin_request(self) -> Any: ...

    def device_configuration(self) -> Any: ...

    def user_agent(self) -> str: ...


class DeviceProperties(BaseModel):
    """DeviceProfile backed by build properties.

    Defaults describe a Nexus 5X on Android 8.1; load real dumps with
    ``from_properties`` / ``from_file``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    fingerprint: str = Field(
        "google/bullhead/bullhead:8.1.0/OPM7.181205.001/5080180:user/release-keys",
        alias="Build.FINGERPRINT",
    )
    hardware: str = Field("bullhead", alias="Build.HARDWARE")
    brand: str = Field("google", alias="Build.BRAND")
    radio: str = Field("M8994F-2.6.42.5.03", alias="Build.RADIO")
    bootloader: str = Field("BHZ32c", alias="Build.BOOTLOADER")
    device: str = Field("bullhead", alias="Build.DEVICE")
    sdk_version: int = Field(27, alias="Build.VERSION.SDK_INT")
    release: str = Field("8.1.0", alias="Build.VERSION.RELEASE")
    model: str = Field("Nexus 5X", alias="Build.MODEL")
    manufacturer: str = Field("LGE", alias="Build.MANUFACTURER")
    product: str = Field("bullhead", alias="Build.PRODUCT")
    build_id: str = Field("OPM7.181205.001", alias="Build.ID")
    client: str = Field("android-google", alias="Client")
    gsf_version: int = Field(12685052, alias="GSF.version")
    vending_version: int = Field(81031200, alias="Vending.version")
    vending_version_string: str = Field("10.3.12-all [0] [PR] 198814133", alias="Vending.versionString")
    cell_operator: str = Field("310260", alias="CellOperator")
    sim_operator: str = Field("310260", alias="SimOperator")
    roaming: str = Field("mobile-notroaming", alias="Roaming")
    time_zone: str = Field("America/New_York", alias="TimeZone")
    locale: str = Field("en_US", alias="Locale")

    touch_screen: int = Field(3, alias="TouchScreen")
    keyboard: int = Field(1, alias="Keyboard")
    navigation: int = Field(1, alias="Navigation")
    screen_layout: int = Field(2, alias="ScreenLayout")
    has_hard_keyboard: bool = Field(False, alias="HasHardKeyboard")
    has_five_way_navigation: bool = Field(False, alias="HasFiveWayNavigation")
    screen_density: int = Field(420, alias="Screen.Density")
    screen_width: int = Field(1080, alias="Screen.Width")
    screen_height: int = Field(1794, alias="Screen.Height")
    gl_version: int = Field(196610, alias="GL.Version")
    platforms: list[str] = Field(default_factory=lambda: ["arm64-v8a", "armeabi-v7a", "armeabi"], alias="Platforms")
    shared_libraries: list[str] = Field(
        default_factory=lambda: ["android.test.runner", "com.android.future.usb.accessory", "org.apache.http.legacy"],
        alias="SharedLibraries",
    )
    features: list[str] = Field(
        default_factory=lambda: [
            "android.hardware.bluetooth", "android.hardware.camera", "android.hardware.location.gps",
            "android.hardware.screen.portrait", "android.hardware.touchscreen", "android.hardware.wifi",
        ],
        alias="Features",
    )
    locales: list[str] = Field(default_factory=lambda: ["en", "en_US", "en_GB", "de_DE", "fr_FR"], alias="Locales")
    gl_extensions: list[str] = Field(
        default_factory=lambda: ["GL_OES_EGL_image", "GL_OES_compressed_ETC1_RGB8_texture", "GL_OES_texture_npot"],
        alias="GL.Extensions",
    )

    @field_validator(
        "platforms", "shared_libraries", "features", "locales", "gl_extensions", mode="before",
    )
    @classmethod
    def _split_list(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @classmethod
    def from_properties(cls, text: str) -> "DeviceProperties":
        values = {
            key.strip(): value.strip()
            for key, value in parse_key_value(text).items()
            if not key.lstrip().startswith(("#", "!"))
        }
        return cls.model_validate(values)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DeviceProperties":
        return cls.from_properties(Path(path).read_text(encoding="utf-8"))

    def user_agent(self) -> str:
        return (
            f"Android-Finsky/{self.vending_version_string} ("
            f"api=3,versionCode={self.vending_version},sdk={self.sdk_version},"
            f"device={self.device},hardware={self.hardware},product={self.product},"
            f"platformVersionRelease={self.release},model={self.model},buildId={self.build_id},"
            f"isWideScreen=0,supportedAbis={';'.join(self.platforms)})"
        )

    def device_configuration(self) -> Any:
        return proto.DeviceConfigurationProto(
            touchScreen=self.touch_screen,
            keyboard=self.keyboard,
            navigation=self.navigation,
            screenLayout=self.screen_layout,
            hasHardKeyboard=self.has_hard_keyboard,
            hasFiveWayNavigation=self.has_five_way_navigation,
            screenDensity=self.screen_density,
            glEsVersion=self.gl_version,
            systemSharedLibrary=self.shared_libraries,
            systemAvailableFeature=self.features,
            nativePlatform=self.platforms,
            screenWidth=self.screen_width,
            screenHeight=self.screen_height,
            systemSupportedLocale=self.locales,
            glExtension=self.gl_extensions,
        )

    def build_checkin_request(self) -> Any:
        build = proto.AndroidBuildProto(
            id=self.fingerprint,
            product=self.hardware,
            carrier=self.brand,
            radio=self.radio,
            bootloader=self.bootloader,
            device=self.device,
            sdkVersion=self.sdk_version,
            model=self.model,
            manufacturer=self.manufacturer,
            buildProduct=self.product,
            client=self.client,
            otaInstalled=False,
            timestamp=int(time.time()),
            googleServices=self.gsf_version,
        )
        return proto.AndroidCheckinRequest(
            id=0,
            checkin=proto.AndroidCheckinProto(
                build=build,
                lastCheckinMsec=0,
                cellOperator=self.cell_operator,
                simOperator=self.sim_operator,
                roaming=self.roaming,
                userNumber=0,
            ),
            locale=self.locale,
            timeZone=self.time_zone,
            version=CHECKIN_VERSION,
            deviceConfiguration=self.device_configuration(),
            fragment=0,
        )
