"""Tests de la CLI invoicr-einvoice (codes de sortie et sorties)."""

from pathlib import Path

import pytest

from invoicr.cli import main
from invoicr.generators import facturx as facturx_module
from invoicr.models import InvoiceContext


@pytest.fixture
def context_file(sample_context: InvoiceContext, tmp_path: Path) -> Path:
    path = tmp_path / "context.json"
    path.write_text(sample_context.model_dump_json(), encoding="utf-8")
    return path


@pytest.fixture
def broken_context_file(sample_context: InvoiceContext, tmp_path: Path) -> Path:
    provider = sample_context.provider.model_copy(update={"vat_id": None})
    ctx = sample_context.model_copy(update={"provider": provider})
    path = tmp_path / "broken.json"
    path.write_text(ctx.model_dump_json(), encoding="utf-8")
    return path


class TestListing:
    """Sous-commandes formats et countries."""

    def test_formats_for_country(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["formats", "--country", "de"]) == 0
        out = capsys.readouterr().out
        assert "DE (Germany)" in out
        assert "xrechnung" in out
        assert "zugferd" in out

    def test_formats_unknown_country(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["formats", "--country", "XX"]) == 1
        assert "XX" in capsys.readouterr().err

    def test_all_formats(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["formats"]) == 0
        out = capsys.readouterr().out
        assert "US (United States)" in out
        assert "gst-einvoice" in out

    def test_countries(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["countries"]) == 0
        out = capsys.readouterr().out
        assert "Europe:" in out
        assert "DE  Germany" in out
        assert "North America:" in out


class TestValidate:
    def test_valid(
        self, context_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(
            [
                "validate",
                str(context_file),
                "--provider-country",
                "DE",
                "--client-country",
                "DE",
            ]
        )
        assert code == 0
        assert "xrechnung: OK" in capsys.readouterr().out

    def test_invalid(
        self, broken_context_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(
            [
                "validate",
                str(broken_context_file),
                "--provider-country",
                "DE",
                "--client-country",
                "DE",
            ]
        )
        assert code == 1
        assert "Provider VAT ID is required for XRechnung" in capsys.readouterr().err

    def test_malformed_context(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"provider": {}}', encoding="utf-8")
        code = main(
            ["validate", str(path), "--provider-country", "DE", "--client-country", "DE"]
        )
        assert code == 1
        assert "invalide" in capsys.readouterr().err


class TestGenerate:
    def _args(self, context: Path, output_dir: Path, *extra: str) -> list[str]:
        return [
            "generate",
            str(context),
            "--provider-country",
            "DE",
            "--client-country",
            "DE",
            "--output-dir",
            str(output_dir),
            *extra,
        ]

    def test_writes_file(
        self,
        context_file: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        assert main(self._args(context_file, out_dir)) == 0
        written = out_dir / "Rechnung_2024-042_Dezember_2024_xrechnung.xml"
        assert written.exists()
        assert str(written) in capsys.readouterr().out

    def test_format_option(self, context_file: Path, tmp_path: Path) -> None:
        assert main(self._args(context_file, tmp_path, "--format", "zugferd")) == 0
        assert (tmp_path / "Rechnung_2024-042_Dezember_2024_zugferd.pdf").exists()

    def test_validation_failure(
        self,
        broken_context_file: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        assert main(self._args(broken_context_file, out_dir)) == 1
        assert "Provider VAT ID is required" in capsys.readouterr().err
        assert list(out_dir.iterdir()) == []

    def test_skip_validation(
        self,
        broken_context_file: Path,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(self._args(broken_context_file, tmp_path, "--skip-validation"))
        assert code == 0
        assert "error: Provider VAT ID" in capsys.readouterr().err

    def test_unknown_provider_country(
        self, context_file: Path, tmp_path: Path
    ) -> None:
        args = self._args(context_file, tmp_path)
        args[args.index("--provider-country") + 1] = "XX"
        assert main(args) == 1

    def test_missing_output_dir(self, context_file: Path, tmp_path: Path) -> None:
        assert main(self._args(context_file, tmp_path / "absent")) == 1

    def test_pdf_embedding(
        self,
        context_file: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setattr(
            facturx_module,
            "generate_from_binary",
            lambda pdf, xml, **kwargs: b"%PDF-embedded",
        )
        source = tmp_path / "source.pdf"
        source.write_bytes(b"%PDF-1.4")
        out_dir = tmp_path / "out"
        out_dir.mkdir()
        args = self._args(
            context_file, out_dir, "--format", "zugferd", "--pdf", str(source)
        )
        assert main(args) == 0
        written = out_dir / "Rechnung_2024-042_Dezember_2024_zugferd.pdf"
        assert written.read_bytes() == b"%PDF-embedded"


class TestUsage:
    """Erreurs d'utilisation : code 2 (argparse)."""

    def test_no_command(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_unknown_format(self, context_file: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(
                [
                    "validate",
                    str(context_file),
                    "--provider-country",
                    "DE",
                    "--client-country",
                    "DE",
                    "--format",
                    "nope",
                ]
            )
        assert exc_info.value.code == 2
