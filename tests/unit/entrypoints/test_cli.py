import logging
from collections.abc import Iterator
from decimal import Decimal

import pytest

from order_pipeline.config import Settings, get_settings
from order_pipeline.entrypoints.cli import build_demo_order, build_parser, main, run


@pytest.fixture
def settings() -> Settings:
    return Settings(ORDER_SOURCE_LATENCY_SECONDS=0)


@pytest.fixture
def no_latency(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ORDER_PIPELINE_ORDER_SOURCE_LATENCY_SECONDS", "0")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestBuildDemoOrder:
    def test_demo_order_has_whitespace_region(self) -> None:
        order = build_demo_order()

        assert order.order_id == "DBG-1001"
        assert order.customer is not None
        assert order.customer.billing_address is not None
        assert order.customer.billing_address.region == " "

    def test_order_id_override(self) -> None:
        assert build_demo_order("A-100X").order_id == "A-100X"


class TestBuildParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])

        assert args.order_id == "DBG-1001"
        assert args.collect_all is False
        assert args.log_level is None


class TestRun:
    def test_accepted_demo_order(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = run("DBG-1001", collect_all=False, settings=settings)

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Ada Lovelace — Seattle 98101" in out
        assert "demo order tax: 9.08" in out
        assert "Orders at or above 100.00 in source: 2" in out
        assert "Submission accepted." in out

    def test_rejected_order_id(
        self, settings: Settings, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = run("A-100X", collect_all=False, settings=settings)

        out = capsys.readouterr().out
        assert exit_code == 1
        assert "Submission failed: External gateway rejected the order." in out

    def test_configured_tax_rate(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        settings = Settings(TAX_RATE=Decimal("0.10"), ORDER_SOURCE_LATENCY_SECONDS=0)

        run("DBG-1001", collect_all=False, settings=settings)

        assert "demo order tax: 11.00" in capsys.readouterr().out


class TestMain:
    def test_main_returns_exit_code(
        self, no_latency: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--order-id", "a-200x", "--log-level", "WARNING"]) == 1
        assert "Submission failed" in capsys.readouterr().out
