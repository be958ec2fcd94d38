"""Tests for the software family factories."""

from __future__ import annotations

import pytest

from blueprints.application import (
    LookupPolicy,
    create_software_factory,
    software_factory_registry,
)
from blueprints.contracts import Application, OperatingSystem, SoftwareFactory
from blueprints.domain.exceptions import UnknownKeyError, UnknownVariantError
from blueprints.domain.software import (
    UNSUPPORTED_FAMILY,
    LinuxFactory,
    SoftwareFactoryBase,
    SoftwareFamily,
    UnsupportedSoftwareFactory,
    WindowsFactory,
    boot,
)


class MacOS:
    family = "mac"
    label = "macOS"

    def run(self) -> str:
        return "Running macOS"


class PagesApplication:
    family = "mac"
    label = "Pages"

    def open(self) -> str:
        return "Opening Pages Application"


class MacFactory(SoftwareFactoryBase):
    family = "mac"

    def create_operating_system(self) -> MacOS:
        return MacOS()

    def create_application(self) -> PagesApplication:
        return PagesApplication()


class HalfFactory(SoftwareFactoryBase):
    family = "half"

    def create_operating_system(self) -> MacOS:
        return MacOS()


class TestFamilyConsistency:
    """Every factory yields products from its own family."""

    @pytest.mark.parametrize("family", list(SoftwareFamily))
    def test_products_share_factory_family(self, family: SoftwareFamily) -> None:
        factory = create_software_factory(family)

        assert factory.create_operating_system().family == factory.family
        assert factory.create_application().family == factory.family

    @pytest.mark.parametrize("family", list(SoftwareFamily))
    def test_bundle_is_consistent(self, family: SoftwareFamily) -> None:
        bundle = create_software_factory(family).create_bundle()

        assert bundle.is_consistent
        assert bundle.family == family.value

    def test_windows_pairing(self) -> None:
        bundle = WindowsFactory().create_bundle()

        assert bundle.operating_system.label == "Windows"
        assert bundle.application.label == "Excel"

    def test_linux_pairing(self) -> None:
        bundle = LinuxFactory().create_bundle()

        assert bundle.operating_system.label == "Linux"
        assert bundle.application.label == "Word"

    def test_products_satisfy_protocols(self) -> None:
        factory = WindowsFactory()

        assert isinstance(factory, SoftwareFactory)
        assert isinstance(factory.create_operating_system(), OperatingSystem)
        assert isinstance(factory.create_application(), Application)

    def test_each_call_returns_a_new_product(self) -> None:
        factory = LinuxFactory()
        assert factory.create_application() is not factory.create_application()


class TestFactoryBase:
    """A factory must implement every product kind of the family."""

    def test_base_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            SoftwareFactoryBase()  # type: ignore[abstract]

    def test_partial_family_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError, match="create_application"):
            HalfFactory()  # type: ignore[abstract]

    def test_partial_family_rejected_at_lookup(self) -> None:
        registry = software_factory_registry().with_entry("half", HalfFactory)

        with pytest.raises(TypeError):
            create_software_factory("half", registry)


class TestBoot:
    """Tests for the boot helper."""

    def test_windows_lines(self) -> None:
        assert boot(WindowsFactory()) == [
            "Running Windows OS",
            "Opening Excel Application",
        ]

    def test_linux_lines(self) -> None:
        assert boot(LinuxFactory()) == [
            "Running Linux OS",
            "Opening Word Application",
        ]


class TestVariantLookup:
    """Tests for strict and lenient variant lookup."""

    def test_strict_unknown_variant_raises(self) -> None:
        with pytest.raises(UnknownVariantError) as exc_info:
            create_software_factory("solaris")

        assert isinstance(exc_info.value, UnknownKeyError)
        assert exc_info.value.available == ["linux", "windows"]

    def test_lenient_unknown_variant_returns_refusal_family(self) -> None:
        registry = software_factory_registry(LookupPolicy.LENIENT)
        factory = create_software_factory("solaris", registry)

        assert isinstance(factory, UnsupportedSoftwareFactory)
        bundle = factory.create_bundle()
        assert bundle.is_consistent
        assert bundle.family == UNSUPPORTED_FAMILY
        assert "Sorry" in bundle.operating_system.run()
        assert "Sorry" in bundle.application.open()

    def test_lookup_by_string(self) -> None:
        assert isinstance(create_software_factory("windows"), WindowsFactory)


class TestExtensibility:
    """Adding a family needs only a new factory and its products."""

    def test_new_family_through_with_entry(self) -> None:
        registry = software_factory_registry().with_entry("mac", MacFactory)

        factory = create_software_factory("mac", registry)

        assert boot(factory) == ["Running macOS", "Opening Pages Application"]
        assert factory.create_bundle().is_consistent
        assert isinstance(create_software_factory("windows", registry), WindowsFactory)

    def test_default_registry_is_untouched(self) -> None:
        software_factory_registry().with_entry("mac", MacFactory)

        with pytest.raises(UnknownVariantError):
            create_software_factory("mac")

    def test_repr_names_family(self) -> None:
        assert repr(LinuxFactory()) == "LinuxFactory(family='linux')"
