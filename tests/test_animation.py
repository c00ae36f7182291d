"""Tests for LightColorAnimation."""

import random
from unittest.mock import MagicMock

import pytest

from flicker.animation import AnimationConfig, LightColorAnimation
from flicker.color import Color
from flicker.light import Light
from flicker.waveforms import ColorChannel, WaveFunction


def make_animation(rng=None, **overrides):
    """Sawtooth at 1 Hz: the wave value equals t for 0 <= t < 1."""
    settings = dict(wave_function=WaveFunction.sawtooth, frequency=1.0)
    settings.update(overrides)
    return LightColorAnimation(AnimationConfig(**settings), rng=rng or random.Random(0))


class TestAnimationConfig:
    """Tests for AnimationConfig defaults."""

    def test_defaults(self):
        """Should use the documented defaults."""
        config = AnimationConfig()
        assert config.color_channel is ColorChannel.all
        assert config.wave_function is WaveFunction.sinus
        assert config.offset == 0.0
        assert config.amplitude == 1.0
        assert config.phase == 0.0
        assert config.frequency == 0.5
        assert config.affects_intensity is True
        assert config.intermittent is False
        assert config.smallest_nonwave_interval == 1.0
        assert config.largest_nonwave_interval == 5.0
        assert config.smallest_wave_interval == 0.1
        assert config.largest_wave_interval == 1.0

    def test_unvalidated_ranges(self):
        """Should accept out-of-order interval bounds and negative values."""
        config = AnimationConfig(smallest_wave_interval=5.0, largest_wave_interval=1.0, frequency=-2.0)
        assert config.smallest_wave_interval == 5.0
        assert config.frequency == -2.0


class TestInitialization:
    """Tests for capturing original values."""

    def test_advance_before_initialize(self, warm_light):
        """Should raise when no baseline was captured."""
        animation = make_animation()
        with pytest.raises(RuntimeError):
            animation.advance(0.02, 0.5, warm_light)

    def test_initialize_only_once(self):
        """Should refuse a second capture."""
        animation = make_animation()
        animation.initialize(Color(1.0, 1.0, 1.0), 1.0)
        with pytest.raises(RuntimeError):
            animation.initialize(Color(0.5, 0.5, 0.5), 0.5)

    def test_attach_captures_light(self, warm_light):
        """Should capture the light's current values."""
        animation = make_animation()
        animation.attach(warm_light)
        assert animation.state.original_color == Color(1.0, 0.5, 0.25, 1.0)
        assert animation.state.original_intensity == 2.0


class TestApplier:
    """Tests for per-frame color/intensity updates."""

    def test_all_channels_scaled(self, warm_light):
        """Should scale intensity and all four color components."""
        animation = make_animation()
        animation.attach(warm_light)

        color, intensity = animation.advance(0.02, 0.5, warm_light)

        assert intensity == 1.0
        assert color == Color(0.5, 0.25, 0.125, 0.5)
        assert warm_light.color == color
        assert warm_light.intensity == intensity

    def test_not_cumulative(self, warm_light):
        """Should compute from the baseline, not the previous frame."""
        animation = make_animation()
        animation.attach(warm_light)

        first = animation.advance(0.02, 0.5, warm_light)
        second = animation.advance(0.02, 0.5, warm_light)

        assert first == second

    @pytest.mark.parametrize("kind", [
        WaveFunction.sinus,
        WaveFunction.triangle,
        WaveFunction.square,
        WaveFunction.sawtooth,
        WaveFunction.inverted_saw,
    ])
    def test_same_time_same_output(self, warm_light, kind):
        """Should be idempotent for deterministic waves."""
        animation = make_animation(wave_function=kind, frequency=0.7, phase=0.1)
        animation.attach(warm_light)

        results = [animation.advance(0.02, 1.234, warm_light) for _ in range(5)]

        assert all(r == results[0] for r in results)

    def test_intensity_untouched_when_disabled(self, warm_light):
        """Should leave intensity alone when affects_intensity is false."""
        animation = make_animation(affects_intensity=False)
        animation.attach(warm_light)

        _, intensity = animation.advance(0.02, 0.5, warm_light)

        assert intensity == 2.0

    def test_red_channel_isolation(self, warm_light):
        """Should only change red."""
        animation = make_animation(color_channel=ColorChannel.red, affects_intensity=False)
        animation.attach(warm_light)

        color, _ = animation.advance(0.02, 0.5, warm_light)

        assert color == Color(0.5, 0.5, 0.25, 1.0)

    def test_green_channel_isolation(self, warm_light):
        """Should only change green."""
        animation = make_animation(color_channel=ColorChannel.green, affects_intensity=False)
        animation.attach(warm_light)

        color, _ = animation.advance(0.02, 0.5, warm_light)

        assert color == Color(1.0, 0.25, 0.25, 1.0)

    def test_blue_channel_isolation(self, warm_light):
        """Should only change blue."""
        animation = make_animation(color_channel=ColorChannel.blue, affects_intensity=False)
        animation.attach(warm_light)

        color, _ = animation.advance(0.02, 0.5, warm_light)

        assert color == Color(1.0, 0.5, 0.125, 1.0)

    def test_external_changes_pass_through(self, warm_light):
        """Should keep externally written values of untargeted channels."""
        animation = make_animation(color_channel=ColorChannel.green, affects_intensity=False)
        animation.attach(warm_light)
        warm_light.color = Color(0.9, 0.8, 0.7, 0.6)

        color, _ = animation.advance(0.02, 0.5, warm_light)

        # Green uses the original 0.5, not the external 0.8
        assert color == Color(0.9, 0.25, 0.7, 0.6)

    def test_noise_draws_separately(self, warm_light):
        """Should evaluate the wave separately for intensity and color."""
        rng = MagicMock()
        rng.random.side_effect = [0.25, 0.75]
        animation = make_animation(rng=rng, wave_function=WaveFunction.noise)
        animation.attach(warm_light)

        color, intensity = animation.advance(0.02, 0.0, warm_light)

        assert rng.random.call_count == 2
        assert intensity == pytest.approx(1.0)  # 2.0 * 0.5
        assert color == Color(-0.5, -0.25, -0.125, -0.5)

    def test_amplitude_offset_scaling(self, warm_light):
        """Should multiply originals by y * amplitude + offset."""
        animation = make_animation(wave_function=WaveFunction.square, amplitude=0.25, offset=0.5)
        animation.attach(warm_light)

        _, intensity = animation.advance(0.02, 0.1, warm_light)
        assert intensity == 1.5  # 2.0 * 0.75

        _, intensity = animation.advance(0.02, 0.6, warm_light)
        assert intensity == 0.5  # 2.0 * 0.25


class TestIntermittentAnimation:
    """Tests for the intermittent mode."""

    def test_idle_frame_skips_mutation(self, warm_light):
        """Should not touch the light while idle."""
        animation = make_animation(intermittent=True)
        animation.attach(warm_light)

        # Zero delta keeps the controller idle
        color, intensity = animation.advance(0.0, 0.5, warm_light)

        assert color == Color(1.0, 0.5, 0.25, 1.0)
        assert intensity == 2.0

    def test_active_frame_applies_wave(self, warm_light):
        """Should animate on the first frame with positive delta."""
        animation = make_animation(intermittent=True)
        animation.attach(warm_light)

        _, intensity = animation.advance(0.02, 0.2, warm_light)

        assert animation.intermittency.is_in_interval is True
        assert intensity == pytest.approx(0.4)

    def test_restores_originals_when_going_idle(self, warm_light):
        """Should write the captured values back on active -> idle."""
        animation = make_animation(
            intermittent=True,
            smallest_wave_interval=0.05,
            largest_wave_interval=0.05,
            smallest_nonwave_interval=10.0,
            largest_nonwave_interval=10.0,
        )
        animation.attach(warm_light)

        animation.advance(0.02, 0.2, warm_light)
        assert warm_light.intensity == pytest.approx(0.4)

        color, intensity = animation.advance(0.1, 0.3, warm_light)

        assert animation.intermittency.is_in_interval is False
        assert color == Color(1.0, 0.5, 0.25, 1.0)
        assert intensity == 2.0
        assert warm_light.color == Color(1.0, 0.5, 0.25, 1.0)

    def test_steady_interval_keeps_originals(self, warm_light):
        """Should leave the restored values alone during the steady interval."""
        animation = make_animation(
            intermittent=True,
            smallest_wave_interval=0.05,
            largest_wave_interval=0.05,
            smallest_nonwave_interval=10.0,
            largest_nonwave_interval=10.0,
        )
        animation.attach(warm_light)
        animation.advance(0.02, 0.2, warm_light)
        animation.advance(0.1, 0.3, warm_light)

        for i in range(10):
            color, intensity = animation.advance(0.1, 0.4 + i * 0.1, warm_light)
            assert intensity == 2.0

    def test_disabled_controller_is_inert(self, warm_light):
        """Should not advance the timer when intermittent is off."""
        animation = make_animation()
        animation.attach(warm_light)

        animation.advance(0.5, 0.5, warm_light)

        assert animation.intermittency.time_since_last_interval == 0.0
        assert animation.intermittency.is_in_interval is False

    def test_independent_instances(self):
        """Should keep state per light."""
        first_light = Light(Color(1.0, 1.0, 1.0), 1.0)
        second_light = Light(Color(1.0, 1.0, 1.0), 4.0)
        first = make_animation()
        second = make_animation()
        first.attach(first_light)
        second.attach(second_light)

        first.advance(0.02, 0.5, first_light)
        second.advance(0.02, 0.5, second_light)

        assert first_light.intensity == 0.5
        assert second_light.intensity == 2.0
