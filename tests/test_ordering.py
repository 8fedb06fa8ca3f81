"""Unit tests for component orders, validation and the order registry."""

import pytest

from colorbits.exceptions import MalformedOrderError, UnknownOrderError
from colorbits.models import Color, Component
from colorbits.ordering import (
    ORDERS,
    ComponentOrder,
    FixedOrder,
    OrderBGR,
    OrderBRG,
    OrderGBR,
    OrderGRB,
    OrderRBG,
    OrderRGB,
    get_order,
    list_orders,
    register_order,
    validate_order,
)
from colorbits.sequence import ColorBitSequence

R, G, B = Component.RED, Component.GREEN, Component.BLUE


class Cycling(ComponentOrder):
    """Never returns None."""

    @classmethod
    def first(cls):
        return R

    @classmethod
    def next(cls, current):
        return {R: G, G: B, B: R}[current]


class SkipsBlue(ComponentOrder):
    """Stops after two channels."""

    @classmethod
    def first(cls):
        return G

    @classmethod
    def next(cls, current):
        return R if current is G else None


class NotAComponent(ComponentOrder):
    @classmethod
    def first(cls):
        return "red"

    @classmethod
    def next(cls, current):
        return None


class EmptyFixed(FixedOrder):
    components = ()


@pytest.fixture
def clean_registry():
    """Restore the order registry after a test registers extra orders."""
    saved = dict(ORDERS)
    yield
    ORDERS.clear()
    ORDERS.update(saved)


@pytest.mark.unit
class TestBuiltinOrders:
    """Test the six built-in orders."""

    @pytest.mark.parametrize(
        "order, expected",
        [
            (OrderRGB, (R, G, B)),
            (OrderRBG, (R, B, G)),
            (OrderGRB, (G, R, B)),
            (OrderGBR, (G, B, R)),
            (OrderBRG, (B, R, G)),
            (OrderBGR, (B, G, R)),
        ],
    )
    def test_visiting_order(self, order, expected):
        """Test first/next walk the channels in the named order."""
        assert order.first() is expected[0]
        assert order.next(expected[0]) is expected[1]
        assert order.next(expected[1]) is expected[2]
        assert order.next(expected[2]) is None

    def test_names(self):
        """Test fixed orders are named by their channel letters."""
        assert OrderGRB.name() == "GRB"
        assert OrderBGR.name() == "BGR"

    def test_channel_placement_in_bits(self):
        """Test each order puts the right byte in each 8-bit slot."""
        color = Color(red=0xF0, green=0x0F, blue=0x3C)
        expected = {"R": 0xF0, "G": 0x0F, "B": 0x3C}

        for name, order in list_orders().items():
            bits = list(ColorBitSequence(color, order))
            for slot, letter in enumerate(name):
                chunk = bits[slot * 8:(slot + 1) * 8]
                value = int("".join("1" if b else "0" for b in chunk), 2)
                assert value == expected[letter], f"{name} slot {slot}"


@pytest.mark.unit
class TestValidateOrder:
    """Test up-front policy checking."""

    def test_builtin_orders_are_valid(self):
        """Test every built-in order passes validation."""
        for order in (OrderRGB, OrderRBG, OrderGRB, OrderGBR, OrderBRG, OrderBGR):
            assert len(validate_order(order)) == 3

    def test_returns_visiting_order(self):
        """Test validate_order returns the components it walked."""
        assert validate_order(OrderGRB) == (G, R, B)

    def test_cycling_order_rejected(self):
        """Test a cycle is caught instead of looping forever."""
        with pytest.raises(MalformedOrderError) as exc_info:
            validate_order(Cycling)

        assert "twice" in exc_info.value.user_message
        assert exc_info.value.visited == [R, G, B]

    def test_short_order_rejected(self):
        """Test an order that skips a channel is rejected."""
        with pytest.raises(MalformedOrderError) as exc_info:
            validate_order(SkipsBlue)

        assert "blue" in exc_info.value.reason
        assert exc_info.value.visited == [G, R]

    def test_non_component_rejected(self):
        """Test returning something other than a Component is rejected."""
        with pytest.raises(MalformedOrderError):
            validate_order(NotAComponent)

    def test_empty_fixed_order_rejected(self):
        """Test errors raised by the policy itself become MalformedOrderError."""
        with pytest.raises(MalformedOrderError) as exc_info:
            validate_order(EmptyFixed)

        assert isinstance(exc_info.value.__cause__, IndexError)

    def test_malformed_order_has_recovery_hint(self):
        """Test the error explains the contract."""
        with pytest.raises(MalformedOrderError) as exc_info:
            validate_order(SkipsBlue)

        assert "exactly once" in exc_info.value.recovery_hint


@pytest.mark.unit
class TestOrderRegistry:
    """Test order lookup and registration."""

    def test_builtins_registered(self):
        """Test the six built-in orders are available by name."""
        assert sorted(list_orders()) == ["BGR", "BRG", "GBR", "GRB", "RBG", "RGB"]

    def test_lookup_case_insensitive(self):
        """Test lookups ignore case."""
        assert get_order("grb") is OrderGRB
        assert get_order("Rgb") is OrderRGB

    def test_unknown_order(self):
        """Test unknown names raise UnknownOrderError with the available names."""
        with pytest.raises(UnknownOrderError) as exc_info:
            get_order("XYZ")

        assert exc_info.value.name == "XYZ"
        assert "GRB" in exc_info.value.recovery_hint

    def test_register_custom_order(self, clean_registry):
        """Test a valid custom order can be registered and looked up."""

        class Reversed(FixedOrder):
            components = (B, G, R)

        register_order("reversed", Reversed)
        assert get_order("REVERSED") is Reversed

    def test_register_rejects_malformed(self, clean_registry):
        """Test registration validates the policy by default."""
        with pytest.raises(MalformedOrderError):
            register_order("cycle", Cycling)

        assert "CYCLE" not in list_orders()

    def test_register_without_validation(self, clean_registry):
        """Test validation can be skipped explicitly."""
        register_order("short", SkipsBlue, validate=False)
        assert get_order("short") is SkipsBlue

    def test_list_orders_returns_copy(self):
        """Test callers cannot modify the registry through list_orders()."""
        orders = list_orders()
        orders.clear()
        assert len(list_orders()) == 6
