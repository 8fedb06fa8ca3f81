"""Unit tests for Pydantic models and enums."""

import pytest
from pydantic import ValidationError

from colorbits.colors import COLORS
from colorbits.models import AppConfig, Color, Component
from colorbits.ordering import OrderRGB
from colorbits.sequence import ColorBitSequence


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = Color(red=100, green=50, blue=25)
        assert color.red == 100
        assert color.green == 50
        assert color.blue == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValueError):
            Color(red=256, green=0, blue=0)

        with pytest.raises(ValueError):
            Color(red=0, green=-1, blue=0)

    @pytest.mark.unit
    def test_color_is_frozen(self):
        """Test colors cannot be changed after creation."""
        color = Color(red=1, green=2, blue=3)
        with pytest.raises(ValidationError):
            color.red = 10

    @pytest.mark.unit
    def test_color_is_hashable(self):
        """Test equal colors hash the same."""
        assert len({Color(red=1, green=2, blue=3), Color.from_rgb(1, 2, 3)}) == 1

    @pytest.mark.unit
    def test_from_rgb(self):
        """Test positional constructor."""
        assert Color.from_rgb(10, 20, 30) == Color(red=10, green=20, blue=30)

    @pytest.mark.unit
    def test_preset_color_off(self):
        """Test off color factory method."""
        assert Color.off() == Color(red=0, green=0, blue=0)

    @pytest.mark.unit
    def test_to_rgb_tuple(self):
        """Test RGB tuple conversion."""
        assert Color(red=10, green=20, blue=30).to_rgb_tuple() == (10, 20, 30)

    @pytest.mark.unit
    def test_to_hex(self):
        """Test CSS hex conversion."""
        assert Color(red=255, green=128, blue=0).to_hex() == "#FF8000"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["#FF8000", "ff8000", "#ff8000"])
    def test_from_hex(self, text):
        """Test hex parsing with and without '#', any case."""
        assert Color.from_hex(text) == Color(red=255, green=128, blue=0)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        ["", "#FFF", "FF80001", "GG0000", "#12345", "+1+2+3", " 1 2 3", "#-0-0-0", "１２３４５６", "##FF8000"],
    )
    def test_from_hex_invalid(self, text):
        """Test malformed hex strings raise ValueError."""
        with pytest.raises(ValueError):
            Color.from_hex(text)

    @pytest.mark.unit
    def test_into_bits(self):
        """Test into_bits builds a sequence with the given order."""
        sequence = COLORS.RED.into_bits(OrderRGB)
        assert isinstance(sequence, ColorBitSequence)
        assert list(sequence) == [True] * 8 + [False] * 16

    @pytest.mark.unit
    def test_into_bits_grb(self):
        """Test the green-red-blue shortcut."""
        pink = Color(red=255, green=0b1010_1010, blue=0b1110_0001)
        bits = list(pink.into_bits_grb())

        assert bits[:8] == [True, False] * 4
        assert bits[8:16] == [True] * 8
        assert bits[16:] == [True, True, True, False, False, False, False, True]


class TestComponent:
    """Test Component enum."""

    @pytest.mark.unit
    def test_select_from(self):
        """Test each component picks its own channel."""
        color = Color(red=1, green=2, blue=3)
        assert Component.RED.select_from(color) == 1
        assert Component.GREEN.select_from(color) == 2
        assert Component.BLUE.select_from(color) == 3

    @pytest.mark.unit
    def test_letters(self):
        """Test single-letter names."""
        assert [c.letter for c in Component] == ["R", "G", "B"]

    @pytest.mark.unit
    def test_from_letter(self):
        """Test lookup by letter is case-insensitive."""
        assert Component.from_letter("g") is Component.GREEN
        assert Component.from_letter("B") is Component.BLUE

    @pytest.mark.unit
    def test_from_letter_unknown(self):
        """Test unknown letters raise ValueError."""
        with pytest.raises(ValueError):
            Component.from_letter("x")


class TestNamedColors:
    """Test COLORS constants."""

    @pytest.mark.unit
    def test_get_by_name(self):
        """Test case-insensitive lookup with '-' or '_'."""
        assert COLORS.get("orange") == COLORS.ORANGE
        assert COLORS.get("Warm-White") == COLORS.WARM_WHITE
        assert COLORS.get("grey_dark") == COLORS.GREY_DARK

    @pytest.mark.unit
    def test_get_unknown(self):
        """Test unknown names return None."""
        assert COLORS.get("chartreuse") is None
        assert COLORS.get("names") is None

    @pytest.mark.unit
    def test_names(self):
        """Test names() lists constants only."""
        names = COLORS.names()
        assert "red" in names
        assert "warm_white" in names
        assert "get" not in names
        assert names == sorted(names)


class TestAppConfig:
    """Test AppConfig model."""

    @pytest.mark.unit
    def test_defaults(self):
        """Test default configuration values."""
        config = AppConfig()
        assert config.default_order == "GRB"
        assert config.output_format == "bits"
        assert config.group_channels is True
        assert config.high_symbol == "H"
        assert config.low_symbol == "L"

    @pytest.mark.unit
    def test_default_order_normalized(self):
        """Test order names are stored upper-case."""
        assert AppConfig(default_order="rgb").default_order == "RGB"

    @pytest.mark.unit
    def test_unknown_default_order_rejected(self):
        """Test unregistered order names fail validation."""
        with pytest.raises(ValidationError):
            AppConfig(default_order="XYZ")

    @pytest.mark.unit
    def test_invalid_output_format_rejected(self):
        """Test output_format only accepts known formats."""
        with pytest.raises(ValidationError):
            AppConfig(output_format="hex")

    @pytest.mark.unit
    def test_symbols_must_be_single_characters(self):
        """Test level symbols are exactly one character."""
        with pytest.raises(ValidationError):
            AppConfig(high_symbol="HI")
        with pytest.raises(ValidationError):
            AppConfig(low_symbol="")

    @pytest.mark.unit
    def test_save_and_load(self, config_path):
        """Test saving and loading config."""
        config = AppConfig(default_order="RGB", output_format="levels", group_channels=False)
        config.save(config_path)

        loaded = AppConfig.load_or_default(config_path)
        assert loaded == config

    @pytest.mark.unit
    def test_load_missing_returns_default(self, config_path):
        """Test a missing file gives defaults without creating it."""
        config = AppConfig.load_or_default(config_path)
        assert config == AppConfig()
        assert not config_path.exists()
