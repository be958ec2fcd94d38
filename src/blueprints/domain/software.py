"""Software product family and the factories that create it.

Family pairings:
    - windows: WindowsOS + ExcelApplication
    - linux: LinuxOS + WordApplication
    - unsupported: UnsupportedOS + UnsupportedApplication (fallback)

Adding a family means adding one factory and its two products; nothing
else changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from blueprints.contracts.factory import (
        Application,
        OperatingSystem,
        SoftwareFactory,
    )


class SoftwareFamily(str, Enum):
    """Family variants with a registered factory."""

    WINDOWS = "windows"
    LINUX = "linux"


UNSUPPORTED_FAMILY = "unsupported"


class WindowsOS:
    family = SoftwareFamily.WINDOWS.value
    label = "Windows"

    def run(self) -> str:
        return "Running Windows OS"


class LinuxOS:
    family = SoftwareFamily.LINUX.value
    label = "Linux"

    def run(self) -> str:
        return "Running Linux OS"


class ExcelApplication:
    family = SoftwareFamily.WINDOWS.value
    label = "Excel"

    def open(self) -> str:
        return "Opening Excel Application"


class WordApplication:
    family = SoftwareFamily.LINUX.value
    label = "Word"

    def open(self) -> str:
        return "Opening Word Application"


class UnsupportedOS:
    """Refusal operating system for the lenient fallback family."""

    family = UNSUPPORTED_FAMILY
    label = "Unsupported"

    def run(self) -> str:
        return "Sorry, no operating system is permitted!"


class UnsupportedApplication:
    """Refusal application for the lenient fallback family."""

    family = UNSUPPORTED_FAMILY
    label = "Unsupported"

    def open(self) -> str:
        return "Sorry, no application is permitted!"


@dataclass(frozen=True)
class SoftwareBundle:
    """One operating system and one application from a single factory.

    Attributes:
        operating_system: The created operating system.
        application: The created application.
    """

    operating_system: "OperatingSystem"
    application: "Application"

    @property
    def family(self) -> str:
        """Family label of the operating system."""
        return self.operating_system.family

    @property
    def is_consistent(self) -> bool:
        """Check that both products come from the same family variant."""
        return self.operating_system.family == self.application.family


class SoftwareFactoryBase(ABC):
    """Shared behaviour for concrete software factories.

    Subclasses set ``family`` and implement the two creation methods.
    Factories hold no state, so one instance can serve any number of
    callers.
    """

    family: str

    @abstractmethod
    def create_operating_system(self) -> "OperatingSystem":
        """Create the family's operating system."""

    @abstractmethod
    def create_application(self) -> "Application":
        """Create the family's application."""

    def create_bundle(self) -> SoftwareBundle:
        """Create both products of the family in one call."""
        return SoftwareBundle(
            operating_system=self.create_operating_system(),
            application=self.create_application(),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(family={self.family!r})"


class WindowsFactory(SoftwareFactoryBase):
    family = SoftwareFamily.WINDOWS.value

    def create_operating_system(self) -> "OperatingSystem":
        return WindowsOS()

    def create_application(self) -> "Application":
        return ExcelApplication()


class LinuxFactory(SoftwareFactoryBase):
    family = SoftwareFamily.LINUX.value

    def create_operating_system(self) -> "OperatingSystem":
        return LinuxOS()

    def create_application(self) -> "Application":
        return WordApplication()


class UnsupportedSoftwareFactory(SoftwareFactoryBase):
    """Fallback factory whose products refuse to do anything."""

    family = UNSUPPORTED_FAMILY

    def create_operating_system(self) -> "OperatingSystem":
        return UnsupportedOS()

    def create_application(self) -> "Application":
        return UnsupportedApplication()


def boot(factory: "SoftwareFactory") -> list[str]:
    """Run the family's operating system and open its application.

    Args:
        factory: Any software factory.

    Returns:
        The run line followed by the open line.
    """
    return [
        factory.create_operating_system().run(),
        factory.create_application().open(),
    ]


__all__ = [
    "ExcelApplication",
    "LinuxFactory",
    "LinuxOS",
    "SoftwareBundle",
    "SoftwareFactoryBase",
    "SoftwareFamily",
    "UNSUPPORTED_FAMILY",
    "UnsupportedApplication",
    "UnsupportedOS",
    "UnsupportedSoftwareFactory",
    "WindowsFactory",
    "WindowsOS",
    "WordApplication",
    "boot",
]
