"""
CLI tests — argument parsing, validation errors and the printed report.
"""
import sys
from unittest import mock
import pytest
from shelfsort.cli import CLIApplication, main
from shelfsort.core.models import SortField, ZeroViewsPolicy
from shelfsort.commands import SortCommand


def run_cli(argv):
    with mock.patch.object(sys, 'argv', ['shelfsort'] + argv):
        app = CLIApplication()
        app.run()
    return app


def item_ids(output):
    return [int(line.split(":")[1]) for line in output.splitlines() if line.startswith("    id:")]


# =============================================================================
# 1. ARGUMENT PARSING
# =============================================================================
class TestArgumentParsing:
    """Test CLI argument parsing with argparse."""

    def test_defaults(self):
        args = CLIApplication.parse_args([])
        assert args.input is None
        assert args.sort == "price"
        assert args.desc is False
        assert args.zero_views == "infinite"
        assert args.quiet is False
        assert args.verbose is False

    def test_short_and_long_flags(self):
        long_form = CLIApplication.parse_args(['--input', 'p.json', '--sort', 'sales-count', '--desc'])
        short_form = CLIApplication.parse_args(['-i', 'p.json', '-s', 'sales-count', '-d'])
        assert vars(long_form) == vars(short_form)

    def test_invalid_sort_choice_exits(self):
        with pytest.raises(SystemExit) as exc_info:
            CLIApplication.parse_args(['--sort', 'weight'])
        assert exc_info.value.code == 2

    def test_create_params_from_aliases(self):
        app = CLIApplication()
        args = CLIApplication.parse_args(['-s', 'spv', '-d', '--zero-views', 'lowest'])
        params = app.create_params(args)
        assert params.sort_by is SortField.SALES_PER_VIEW
        assert params.descending is True
        assert params.zero_views is ZeroViewsPolicy.LOWEST


# =============================================================================
# 2. VALIDATION
# =============================================================================
class TestArgumentValidation:
    def test_desc_with_created_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(['--sort', 'created', '--desc'])
        assert exc_info.value.code == 1
        assert "--desc cannot be used with --sort created" in capsys.readouterr().err

    def test_quiet_and_verbose_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(['-q', '-v'])
        assert exc_info.value.code == 1

    def test_missing_input_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_cli(['-i', str(tmp_path / "nope.json")])
        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_zero_views_warning_for_other_fields(self, capsys):
        run_cli(['--sort', 'price', '--zero-views', 'raise'])
        assert "--zero-views only affects" in capsys.readouterr().err


# =============================================================================
# 3. OUTPUT
# =============================================================================
class TestOutput:
    """Sorted report printed for the sample catalog and for JSON input."""

    @pytest.mark.parametrize("argv, expected", [
        (['--sort', 'price', '--desc'], [2, 1, 3]),
        (['--sort', 'sales-count', '--desc'], [3, 2, 1]),
        (['--sort', 'sales-per-view'], [1, 3, 2]),
        (['--sort', 'created'], [2, 3, 1]),
    ])
    def test_sample_catalog_orders(self, argv, expected, capsys):
        run_cli(argv)
        assert item_ids(capsys.readouterr().out) == expected

    def test_json_input(self, products_json, capsys):
        run_cli(['-i', str(products_json), '-s', 'price'])
        assert item_ids(capsys.readouterr().out) == [3, 1, 2]

    def test_header_line_unless_quiet(self, capsys):
        run_cli(['--sort', 'price', '--desc'])
        out = capsys.readouterr().out
        assert out.startswith("Sorted 3 products by Price (descending)")

        run_cli(['--sort', 'price', '--quiet'])
        out = capsys.readouterr().out
        assert out.startswith("Item 1:")

    def test_report_ends_with_separator(self, capsys):
        run_cli([])
        assert capsys.readouterr().out.rstrip("\n").endswith("-" * 31)

    def test_verbose_reports_timing(self, capsys):
        run_cli(['-v'])
        assert "Completed in" in capsys.readouterr().out

    def test_verbose_sample_notice_goes_to_log(self, capsys, caplog):
        """Stdout starts with the report header; the sample-catalog notice is a debug log record."""
        with caplog.at_level("DEBUG", logger="shelfsort"):
            run_cli(['-v', '--sort', 'price', '--desc'])
        out = capsys.readouterr().out
        assert out.startswith("Sorted 3 products by Price (descending)")
        assert "No input file given" not in out
        assert "No input file given, using built-in sample catalog" in caplog.text

    def test_sort_error_exits_with_message(self, tmp_path, capsys):
        path = tmp_path / "bad_dates.json"
        path.write_text(
            '[{"id": 1, "name": "A", "price": 1, "created": "2020-01-01", "sales_count": 0, "views_count": 1},'
            ' {"id": 2, "name": "B", "price": 2, "created": "someday", "sales_count": 0, "views_count": 1}]',
            encoding="utf-8"
        )
        with pytest.raises(SystemExit) as exc_info:
            run_cli(['-i', str(path), '-s', 'created'])
        assert exc_info.value.code == 1
        assert "Sorting failed" in capsys.readouterr().err

    def test_load_error_exits_with_message(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            run_cli(['-i', str(path)])
        assert exc_info.value.code == 1
        assert "Failed to load products" in capsys.readouterr().err


# =============================================================================
# 4. ENTRY POINT
# =============================================================================
class TestMain:
    def test_keyboard_interrupt_exits_130(self):
        with mock.patch.object(sys, 'argv', ['shelfsort']):
            with mock.patch.object(SortCommand, 'execute', side_effect=KeyboardInterrupt):
                with pytest.raises(SystemExit) as exc_info:
                    main()
        assert exc_info.value.code == 130

    def test_unexpected_error_exits_1(self, monkeypatch, capsys):
        monkeypatch.delenv("DEBUG", raising=False)
        with mock.patch.object(sys, 'argv', ['shelfsort']):
            with mock.patch.object(SortCommand, 'execute', side_effect=RuntimeError("boom")):
                with pytest.raises(SystemExit) as exc_info:
                    main()
        assert exc_info.value.code == 1
        assert "Unexpected error: boom" in capsys.readouterr().err

    def test_debug_env_reraises(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "1")
        with mock.patch.object(sys, 'argv', ['shelfsort']):
            with mock.patch.object(SortCommand, 'execute', side_effect=RuntimeError("boom")):
                with pytest.raises(RuntimeError, match="boom"):
                    main()
