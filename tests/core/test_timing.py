"""
Tests for Timer and timed().
"""

import pytest

from pyposterior.core.compute import Timer, timed
from pyposterior.distributions import Gamma


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('replicates'):
                sum(range(1000))
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'replicates'}
        assert result['replicates'] <= result['total_seconds']

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed(self):
        with timed() as timer:
            Gamma(2, 1).draw(100, 0)
        assert timer.result()['total_seconds'] >= 0.0

