"""Tests for threshold-based hit classification."""

import numpy as np
import pytest

from loopscribe.core import (
    Band,
    BandEnergies,
    ClassifierThresholds,
    EnergyProfile,
    Instrument,
)
from loopscribe.processing import HitClassifier


def _bands(low, mid, high):
    """Build profiles from (rms, peak) pairs per step."""
    def profile(band, steps):
        rms = np.array([s[0] for s in steps], dtype=float)
        peak = np.array([s[1] for s in steps], dtype=float)
        return EnergyProfile(band=band, rms=rms, peak=peak)

    return BandEnergies(
        low=profile(Band.LOW, low),
        mid=profile(Band.MID, mid),
        high=profile(Band.HIGH, high),
    )


@pytest.fixture
def classifier():
    return HitClassifier()


class TestKickRule:

    def test_strong_low_end(self, classifier):
        """Strong low-band energy should be a kick."""
        bands = _bands([(0.5, 0.9)], [(0.0, 0.0)], [(0.1, 0.2)])
        assert list(classifier.kicks(bands)) == [True]

    def test_needs_peak(self, classifier):
        """Low-band RMS without a strong peak should not be a kick."""
        bands = _bands([(0.5, 0.3)], [(0.0, 0.0)], [(0.0, 0.0)])
        assert list(classifier.kicks(bands)) == [False]

    def test_needs_dominance_over_highs(self, classifier):
        """Low end that doesn't dominate the highs should not be a kick."""
        bands = _bands([(0.3, 0.9)], [(0.0, 0.0)], [(0.2, 0.5)])
        assert list(classifier.kicks(bands)) == [False]


class TestSnareRule:

    def test_mid_punch(self, classifier):
        """Mid-band energy with a clear peak should be a snare."""
        bands = _bands([(0.1, 0.2)], [(0.5, 0.8)], [(0.0, 0.0)])
        assert list(classifier.snares(bands)) == [True]

    def test_blocked_by_low_end(self, classifier):
        """Mid energy under a loud low end should not be a snare."""
        bands = _bands([(0.4, 0.9)], [(0.5, 0.8)], [(0.0, 0.0)])
        assert list(classifier.snares(bands)) == [False]

    def test_needs_peak(self, classifier):
        """Mid-band RMS without a strong peak should not be a snare."""
        bands = _bands([(0.0, 0.0)], [(0.5, 0.25)], [(0.0, 0.0)])
        assert list(classifier.snares(bands)) == [False]


class TestHiHatRule:

    def test_pure_highs(self, classifier):
        """High-band energy alone should be a hi-hat."""
        bands = _bands([(0.0, 0.0)], [(0.1, 0.1)], [(0.3, 0.6)])
        assert list(classifier.hihats(bands)) == [True]

    def test_blocked_by_mids(self, classifier):
        """High energy with loud mids should not be a hi-hat."""
        bands = _bands([(0.0, 0.0)], [(0.2, 0.3)], [(0.3, 0.6)])
        assert list(classifier.hihats(bands)) == [False]

    def test_blocked_by_lows(self, classifier):
        """High energy with loud lows should not be a hi-hat."""
        bands = _bands([(0.2, 0.3)], [(0.0, 0.0)], [(0.3, 0.6)])
        assert list(classifier.hihats(bands)) == [False]

    def test_quiet_highs_ignored(self, classifier):
        """High-band energy below threshold should be ignored."""
        bands = _bands([(0.0, 0.0)], [(0.0, 0.0)], [(0.05, 0.6)])
        assert list(classifier.hihats(bands)) == [False]


class TestClassify:

    def test_instruments_fire_independently(self, classifier):
        """Different instruments on different steps should all be detected."""
        # Step 0: kick + snare together, step 1: nothing, step 2: hi-hat
        bands = _bands(
            [(0.35, 0.9), (0.0, 0.0), (0.0, 0.0)],
            [(0.5, 0.8), (0.0, 0.0), (0.1, 0.1)],
            [(0.1, 0.2), (0.0, 0.0), (0.3, 0.6)],
        )
        hits = classifier.classify(bands)

        assert hits.kick.instrument is Instrument.KICK
        assert hits.kick.hits == (True, False, False)
        assert hits.snare.hits == (True, False, False)
        assert hits.hihat.hits == (False, False, True)
        assert hits.kick.steps == (0,)
        assert hits.hihat.count == 1

    def test_silence_gives_no_hits(self, classifier):
        """Silent profiles should give no hits at all."""
        zeros = [(0.0, 0.0)] * 16
        hits = classifier.classify(_bands(zeros, zeros, zeros))
        for sequence in hits:
            assert len(sequence) == 16
            assert sequence.count == 0

    def test_mismatched_lengths(self, classifier):
        """Profiles of different lengths should be rejected."""
        with pytest.raises(ValueError):
            classifier.classify(_bands([(0.0, 0.0)] * 2, [(0.0, 0.0)], [(0.0, 0.0)]))

    def test_custom_thresholds(self):
        """Thresholds should be configurable."""
        classifier = HitClassifier(ClassifierThresholds(hihat_rms=0.01, hihat_peak=0.01))
        bands = _bands([(0.0, 0.0)], [(0.0, 0.0)], [(0.02, 0.02)])
        assert classifier.classify(bands).hihat.hits == (True,)
