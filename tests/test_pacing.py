"""Test pacing delays."""

import pytest
from unittest.mock import Mock

from ansidemo.pacing import Pacer


def test_pause_scales_delay():
    sleep = Mock()
    Pacer(0.5, sleep=sleep).pause(2.0)
    sleep.assert_called_once_with(1.0)


def test_zero_scale_skips_sleep():
    sleep = Mock()
    Pacer(0, sleep=sleep).pause(2.0)
    sleep.assert_not_called()


def test_negative_scale_rejected():
    with pytest.raises(ValueError):
        Pacer(-1)
