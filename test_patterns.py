"""
Tests for the SOLID, creational, structural and behavioral lab collaborators.
"""

import pytest
from pydantic import TypeAdapter, ValidationError

from tmps_labs.behavioral import client as behavioral_client
from tmps_labs.behavioral.observer import EmailNotifier, Order
from tmps_labs.behavioral.strategy import Courier, DeliveryContext, DeliveryStrategy, Drone
from tmps_labs.core.config_manager import ConfigManager, Settings
from tmps_labs.core.exceptions import DeliveryStrategyNotSetError
from tmps_labs.creational import client as creational_client
from tmps_labs.creational.builder import BouquetBuilder
from tmps_labs.creational.factory import CardPayment, CashPayment, get_payment_method, pay
from tmps_labs.domain.bouquet import BasicBouquet
from tmps_labs.domain.money import format_amount
from tmps_labs.solid.dip import EmailSender, MessageSender, Notification, SMSSender
from tmps_labs.solid.ocp import Circle, Shape, Square, area, print_area
from tmps_labs.solid.srp import Report
from tmps_labs.structural import client as structural_client
from tmps_labs.structural.adapter import LegacyPaymentAdapter, LegacyPaymentGateway, to_cents
from tmps_labs.structural.decorator import DecoratedBouquet, Extra
from tmps_labs.structural.facade import OrderService


@pytest.fixture
def config_manager():
    return ConfigManager(Settings(config_value="Bloomify Default Config"))


# ----------------------------------------------------------------------
# SOLID
# ----------------------------------------------------------------------
def test_report_display(capsys):
    Report(title="Lab 1 - SOLID", text="Understanding SRP").display()
    assert capsys.readouterr().out == "=== Lab 1 - SOLID ===\nUnderstanding SRP\n"


def test_shape_areas(capsys):
    assert area(Circle(radius=3)) == pytest.approx(28.26)
    assert area(Square(side=4)) == 16

    print_area(Circle(radius=1))
    assert capsys.readouterr().out == "Area: 3.14\n"


def test_shape_union_dispatches_on_kind():
    shape = TypeAdapter(Shape).validate_python({"kind": "square", "side": 2})
    assert isinstance(shape, Square)

    with pytest.raises(ValidationError):
        TypeAdapter(Shape).validate_python({"kind": "triangle", "side": 2})


def test_notification_uses_injected_sender(capsys):
    Notification(sender=EmailSender()).alert()
    Notification(sender=SMSSender()).alert()

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "📧 Sending email: System alert triggered!",
        "📱 Sending SMS: System alert triggered!",
    ]


def test_message_sender_parses_from_kind():
    sender = TypeAdapter(MessageSender).validate_python({"kind": "sms"})
    assert isinstance(sender, SMSSender)


# ----------------------------------------------------------------------
# Creational
# ----------------------------------------------------------------------
def test_builder_builds_bouquet():
    bouquet = BouquetBuilder().set_name("Spring Mix").add_flower("Rose").add_flower("Tulip").build()

    assert bouquet.name == "Spring Mix"
    assert bouquet.flowers == ["Rose", "Tulip"]


def test_builder_results_do_not_share_flowers():
    builder = BouquetBuilder().set_name("Mix").add_flower("Rose")
    first = builder.build()
    builder.add_flower("Tulip")
    second = builder.build()

    assert first.flowers == ["Rose"], "Later add_flower calls leaked into an earlier bouquet"
    assert second.flowers == ["Rose", "Tulip"]


def test_payment_factory_selection():
    assert isinstance(get_payment_method("card"), CardPayment)
    assert isinstance(get_payment_method("cash"), CashPayment)
    assert isinstance(get_payment_method("crypto"), CashPayment), "Unknown methods fall back to cash"


def test_pay_prints_method_and_amount(capsys):
    pay(CardPayment(), 120)
    pay(CashPayment(), 12.5)
    assert capsys.readouterr().out == "Paid with card: 120\nPaid with cash: 12.5\n"


@pytest.mark.parametrize(
    "amount, text",
    [(120, "120"), (350.0, "350"), (383.5, "383.5"), (12345.67, "12345.67"), (1234567.5, "1234567.5")],
)
def test_format_amount_keeps_every_digit(amount, text):
    assert format_amount(amount) == text


def test_pay_prints_large_amounts_in_full(capsys):
    pay(CardPayment(), 1234567.5)
    assert capsys.readouterr().out == "Paid with card: 1234567.5\n"


def test_order_facade_prints_full_price(capsys):
    class RecordingProvider:
        def pay(self, amount):
            pass

    OrderService(RecordingProvider()).place_order(BasicBouquet(name="Big", base_price=12345.67), "Ana")
    assert "Price: 12345.67" in capsys.readouterr().out


def test_creational_lab_uses_passed_config(capsys):
    creational_client.run(ConfigManager(Settings(config_value="Injected")))

    out = capsys.readouterr().out
    assert "Config value: Injected" in out
    assert "Bouquet: Spring Mix ['Rose', 'Tulip']" in out
    assert "Paid with card: 120" in out


# ----------------------------------------------------------------------
# Structural
# ----------------------------------------------------------------------
@pytest.mark.parametrize(
    "amount, cents",
    [(383.5, 38350), (0.005, 1), (1.234, 123), (-2.5, -250), (0, 0)],
)
def test_to_cents_rounds_half_away_from_zero(amount, cents):
    assert to_cents(amount) == cents


def test_adapter_charges_cents(capsys):
    LegacyPaymentAdapter(LegacyPaymentGateway("M-1")).pay(12.34)
    assert capsys.readouterr().out == "[LegacyPayment] Charging 1234 cents via merchant M-1\n"


def test_decorator_steps_apply_in_order():
    base = BasicBouquet(name="Romantic Roses", base_price=350)
    decorated = DecoratedBouquet(base=base, extras=[Extra.RIBBON, Extra.CARD, Extra.VASE])

    assert decorated.description() == "Romantic Roses, with ribbon, with card, with vase"
    assert decorated.price() == pytest.approx(383.5)


def test_decorator_without_extras_is_base():
    base = BasicBouquet(name="Plain", base_price=10)
    decorated = DecoratedBouquet(base=base)

    assert decorated.description() == base.description()
    assert decorated.price() == base.price()


def test_with_extra_returns_new_value():
    plain = DecoratedBouquet(base=BasicBouquet(name="Tulips", base_price=100))
    with_vase = plain.with_extra(Extra.VASE)

    assert plain.extras == []
    assert with_vase.description() == "Tulips, with vase"
    assert with_vase.price() == 125


def test_order_facade_prints_and_pays(capsys):
    paid = []

    class RecordingProvider:
        def pay(self, amount):
            paid.append(amount)

    bouquet = DecoratedBouquet(base=BasicBouquet(name="Romantic Roses", base_price=350), extras=[Extra.CARD])
    OrderService(RecordingProvider()).place_order(bouquet, "Ana")

    assert paid == [355]
    assert capsys.readouterr().out.splitlines() == [
        "=== ORDER ===",
        "Customer: Ana",
        "Bouquet: Romantic Roses, with card",
        "Price: 355",
        "Order completed.",
    ]


def test_order_facade_propagates_payment_failure(capsys):
    class FailingProvider:
        def pay(self, amount):
            raise RuntimeError("declined")

    with pytest.raises(RuntimeError):
        OrderService(FailingProvider()).place_order(BasicBouquet(name="Lily", base_price=5), "Ana")

    assert "Order completed." not in capsys.readouterr().out


def test_structural_lab_output(capsys, config_manager):
    structural_client.run(config_manager)

    out = capsys.readouterr().out
    assert "Customer: Popescu Sabina" in out
    assert "Bouquet: Romantic Roses, with ribbon, with card, with vase" in out
    assert "Price: 383.5" in out
    assert "[LegacyPayment] Charging 38350 cents via merchant BLOOMIFY-123" in out
    assert out.rstrip().endswith("Done.")


# ----------------------------------------------------------------------
# Behavioral
# ----------------------------------------------------------------------
def test_order_notifies_observers_in_attach_order(capsys):
    order = Order()
    order.attach(EmailNotifier())
    order.attach(EmailNotifier())

    order.set_status("Packed")

    assert order.status == "Packed"
    assert capsys.readouterr().out.splitlines() == [
        "📧 Email: order status changed to Packed",
        "📧 Email: order status changed to Packed",
    ]


def test_order_without_observers_is_silent(capsys):
    order = Order()
    order.set_status("Shipped")
    assert capsys.readouterr().out == ""


def test_strategy_can_be_swapped(capsys):
    ctx = DeliveryContext()
    ctx.set_strategy(Courier())
    ctx.execute(7)
    ctx.set_strategy(Drone())
    ctx.execute(8)

    assert capsys.readouterr().out == "Courier delivers 7\nDrone delivers 8\n"


def test_strategy_required_before_execute():
    with pytest.raises(DeliveryStrategyNotSetError):
        DeliveryContext().execute(1)


def test_delivery_strategy_parses_from_kind():
    strategy = TypeAdapter(DeliveryStrategy).validate_python({"kind": "drone"})
    assert isinstance(strategy, Drone)


def test_behavioral_lab_output(capsys, config_manager):
    behavioral_client.run(config_manager)

    assert capsys.readouterr().out.splitlines() == [
        "📧 Email: order status changed to Packed",
        "Drone delivers 1",
        "After add: ['Rose']",
        "After undo: []",
    ]
