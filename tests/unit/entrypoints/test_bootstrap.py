import json
import logging
from decimal import Decimal

import pytest

from gateway_core.domain.entities import Transaction
from gateway_core.entrypoints import build_cancel_use_case, build_charge_use_case, setup_logging
from gateway_core.infrastructure.iyzipay_gateway import IyzipayPaymentGateway
from gateway_core.infrastructure.settings import GatewaySettings
from gateway_core.infrastructure.stub_gateway import StubPaymentGateway


@pytest.fixture
def settings() -> GatewaySettings:
    return GatewaySettings(
        _env_file=None,
        api_key="key",
        secret_key="secret",
        client_ip="192.168.1.10",
        log_level="WARNING",
    )


class TestBootstrap:
    def test_charge_use_case_defaults_to_iyzipay(self, settings) -> None:
        use_case = build_charge_use_case(settings)

        assert isinstance(use_case._gateway, IyzipayPaymentGateway)

    def test_charge_use_case_runs_end_to_end(
        self, settings, payable, credit_card, attributes
    ) -> None:
        gateway = StubPaymentGateway()

        build_charge_use_case(settings, gateway=gateway).execute(payable, credit_card, attributes)

        assert gateway.charges[0].price == Decimal("100")

    def test_cancel_use_case_uses_configured_client_ip(self, settings) -> None:
        gateway = StubPaymentGateway()

        build_cancel_use_case(settings, gateway=gateway).execute(Transaction(processor_key="pk1"))

        assert gateway.cancels[0].ip == "192.168.1.10"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestSetupLogging:
    def test_applies_configured_log_level(self, settings, restore_root_logger) -> None:
        setup_logging(settings)

        assert logging.getLogger().level == logging.WARNING

    def test_emits_json_at_configured_level(self, settings, restore_root_logger, capsys) -> None:
        setup_logging(settings, service_name="checkout")
        logger = logging.getLogger("gateway_core.application")

        logger.info("suppressed")
        logger.warning("charge rejected")

        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        record = json.loads(lines[0])
        assert record["message"] == "charge rejected"
        assert record["service_name"] == "checkout"
