from studio_actions.enums import TimerMode
from studio_actions import specs

from studio_app.errors import BadSpecValue

from delfick_project.norms import Meta, sb
from unittest import mock
import pytest


@pytest.fixture()
def meta():
    return Meta.empty()


class TestSafeRead:
    def test_it_returns_the_value_if_the_key_is_present(self):
        assert specs.safe_read({"a": 1}, "a", 2) == 1

    def test_it_returns_the_value_even_if_it_is_falsy(self):
        assert specs.safe_read({"a": None}, "a", 2) is None
        assert specs.safe_read({"a": ""}, "a", "default") == ""

    def test_it_returns_the_default_if_the_key_is_missing(self):
        default = mock.Mock(name="default")
        assert specs.safe_read({"b": 1}, "a", default) is default


class TestTextSpec:
    def test_it_allows_strings(self, meta):
        assert specs.text_spec().normalise(meta, " stuff ") == " stuff "

    @pytest.mark.parametrize("val", [None, 1, True, [], {}])
    def test_it_complains_about_other_values(self, meta, val):
        with pytest.raises(BadSpecValue):
            specs.text_spec().normalise(meta, val)


class TestFlagSpec:
    def test_it_allows_booleans(self, meta):
        assert specs.flag_spec().normalise(meta, True) is True
        assert specs.flag_spec().normalise(meta, False) is False

    @pytest.mark.parametrize("val", [None, 0, 1, "true", []])
    def test_it_complains_about_other_values(self, meta, val):
        with pytest.raises(BadSpecValue):
            specs.flag_spec().normalise(meta, val)


class TestIntegralSpec:
    def test_it_allows_integers(self, meta):
        assert specs.integral_spec().normalise(meta, -3) == -3

    def test_it_allows_whole_number_floats(self, meta):
        val = specs.integral_spec().normalise(meta, 20.0)
        assert val == 20
        assert type(val) is int

    @pytest.mark.parametrize("val", [True, False, 2.5, "2", None])
    def test_it_complains_about_other_values(self, meta, val):
        with pytest.raises(BadSpecValue):
            specs.integral_spec().normalise(meta, val)


class TestTimerModeSpec:
    def test_it_converts_integers(self, meta):
        assert specs.timer_mode_spec().normalise(meta, 2) is TimerMode.START_ON_TRIGGER

    def test_it_passes_through_timer_modes(self, meta):
        assert specs.timer_mode_spec().normalise(meta, TimerMode.AUTO_START) is TimerMode.AUTO_START

    def test_it_gives_OFF_for_unknown_integers(self, meta):
        assert specs.timer_mode_spec().normalise(meta, 42) is TimerMode.OFF

    @pytest.mark.parametrize("val", [True, "1", None])
    def test_it_complains_about_non_integers(self, meta, val):
        with pytest.raises(BadSpecValue):
            specs.timer_mode_spec().normalise(meta, val)


class TestLenient:
    def test_it_returns_the_default_when_empty(self, meta):
        default = mock.Mock(name="default")
        spec = mock.Mock(name="spec")
        assert specs.lenient(spec, default).normalise(meta, sb.NotSpecified) is default
        spec.normalise.assert_not_called()

    def test_it_uses_the_spec(self, meta):
        normalised = mock.Mock(name="normalised")
        spec = mock.Mock(name="spec")
        spec.normalise.return_value = normalised

        val = mock.Mock(name="val")
        assert specs.lenient(spec, "default").normalise(meta, val) is normalised
        spec.normalise.assert_called_once_with(meta, val)

    def test_it_returns_the_default_if_the_spec_complains(self, meta):
        spec = mock.Mock(name="spec")
        spec.normalise.side_effect = BadSpecValue("nope")
        assert specs.lenient(spec, "default", name="thing").normalise(meta, 1) == "default"

    def test_it_does_not_hide_other_errors(self, meta):
        spec = mock.Mock(name="spec")
        spec.normalise.side_effect = ValueError("bad")
        with pytest.raises(ValueError):
            specs.lenient(spec, "default").normalise(meta, 1)


class TestReadField:
    def test_it_reads_present_values(self):
        assert specs.read_field({"a": "b"}, "a", specs.text_spec(), "") == "b"

    def test_it_uses_the_default_for_missing_values(self):
        assert specs.read_field({}, "a", specs.integral_spec(), 100) == 100

    def test_it_uses_the_default_for_wrong_types(self):
        assert specs.read_field({"a": "b"}, "a", specs.flag_spec(), False) is False
