"""Tests de la hiérarchie d'exceptions."""

from pathlib import Path

import pytest

from invoicr.errors import (
    EInvoiceError,
    EInvoiceValidationError,
    EInvoiceWriteError,
    NoFormatAvailableError,
)


class TestHierarchy:
    """Toutes les erreurs héritent de EInvoiceError."""

    @pytest.mark.parametrize(
        "error_cls",
        [NoFormatAvailableError, EInvoiceValidationError, EInvoiceWriteError],
    )
    def test_subclass(self, error_cls: type) -> None:
        assert issubclass(error_cls, EInvoiceError)

    def test_catch_with_base(self) -> None:
        with pytest.raises(EInvoiceError):
            raise NoFormatAvailableError("aucun format", country="XX")


class TestAttributes:
    """Les erreurs portent un détail structuré."""

    def test_no_format_available(self) -> None:
        err = NoFormatAvailableError("msg", country="XX", requested_format="ubl")
        assert err.country == "XX"
        assert err.requested_format == "ubl"
        assert str(err) == "msg"

    def test_validation_error(self) -> None:
        err = EInvoiceValidationError("msg", errors=["a", "b"], warnings=["w"])
        assert err.errors == ["a", "b"]
        assert err.warnings == ["w"]

    def test_validation_error_defaults(self) -> None:
        err = EInvoiceValidationError("msg")
        assert err.errors == []
        assert err.warnings == []

    def test_write_error(self) -> None:
        err = EInvoiceWriteError("msg", path=Path("/tmp/x.xml"))
        assert err.path == Path("/tmp/x.xml")
