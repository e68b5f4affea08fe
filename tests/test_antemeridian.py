"""
Tests for the antemeridian crossing search

Run with:
    python -m pytest tests/test_antemeridian.py -v
"""

import unittest
from unittest import mock

from tletrack.antemeridian import (
    NO_CROSSING_FOUND,
    crosses_antemeridian,
    get_cached_last_antemeridian_crossing_time_ms,
    get_last_antemeridian_crossing_time_ms,
)
from tletrack.cache import TLECache, get_cache_sizes
from tletrack.propagation import get_lng_lat
from tletrack.sugar import get_average_orbit_time_ms

ISS_TLE = """ISS (ZARYA)
1 25544U 98067A   17206.51418347  .00001345  00000-0  27503-4 0  9993
2 25544  51.6396 207.2711 0006223  72.3525  71.7719 15.54224686 67715"""

ABS3_TLE = """ABS-3
1 24901U 97042A   17279.07057876  .00000084  00000-0  00000+0 0  9995
2 24901   5.0867  62.6208 0007858 138.4124 258.4388  0.99995119 73683"""

REFERENCE_TIME_MS = 1501039265000


class TestCrossesAntemeridian(unittest.TestCase):

    def test_straddling_antemeridian(self):
        self.assertTrue(crosses_antemeridian(179.5, -179.5))
        self.assertTrue(crosses_antemeridian(-179.9, 179.9))

    def test_straddling_prime_meridian(self):
        self.assertFalse(crosses_antemeridian(0.5, -0.5))
        self.assertFalse(crosses_antemeridian(-99.0, 80.0))

    def test_same_hemisphere(self):
        self.assertFalse(crosses_antemeridian(170.0, 179.0))
        self.assertFalse(crosses_antemeridian(-170.0, -179.0))

    def test_missing_longitude(self):
        self.assertFalse(crosses_antemeridian(None, -179.5))
        self.assertFalse(crosses_antemeridian(179.5, None))

    def test_threshold_is_configurable(self):
        with mock.patch("tletrack.config.ANTEMERIDIAN_THRESHOLD_DEG", 50):
            self.assertTrue(crosses_antemeridian(-99.0, 80.0))


class TestCrossingSearch(unittest.TestCase):
    """Test the bisection search against a low earth orbit and a geosynchronous one."""

    def setUp(self):
        self.cache = TLECache()

    def test_iss_crossing(self):
        crossing_ms = get_last_antemeridian_crossing_time_ms(
            ISS_TLE, REFERENCE_TIME_MS, self.cache
        )
        orbit_ms = get_average_orbit_time_ms(ISS_TLE)

        self.assertGreater(REFERENCE_TIME_MS - crossing_ms, 0)
        self.assertLessEqual(REFERENCE_TIME_MS - crossing_ms, orbit_ms)

        lng, _ = get_lng_lat(ISS_TLE, crossing_ms, self.cache)
        lng_before, _ = get_lng_lat(ISS_TLE, crossing_ms - 1000, self.cache)
        self.assertGreater(abs(lng), 179)
        self.assertTrue(crosses_antemeridian(lng_before, lng))

    def test_crossing_is_cached(self):
        crossing_ms = get_last_antemeridian_crossing_time_ms(
            ISS_TLE, REFERENCE_TIME_MS, self.cache
        )
        self.assertEqual(get_cache_sizes(self.cache)[1], 1)

        # Any reference time later in the same orbit resolves from the cache
        later_ms = crossing_ms + 60000
        self.assertEqual(
            get_cached_last_antemeridian_crossing_time_ms(ISS_TLE, later_ms, self.cache),
            crossing_ms,
        )
        self.assertEqual(
            get_last_antemeridian_crossing_time_ms(ISS_TLE, later_ms, self.cache),
            crossing_ms,
        )

    def test_nothing_cached(self):
        self.assertIsNone(
            get_cached_last_antemeridian_crossing_time_ms(ISS_TLE, REFERENCE_TIME_MS, self.cache)
        )

    def test_previous_orbit_is_appended(self):
        crossing_ms = get_last_antemeridian_crossing_time_ms(
            ISS_TLE, REFERENCE_TIME_MS, self.cache
        )
        previous_ms = get_last_antemeridian_crossing_time_ms(
            ISS_TLE, crossing_ms - 60000, self.cache
        )
        self.assertLess(previous_ms, crossing_ms)
        self.assertEqual(len(self.cache.antemeridian_crossings[parse_lines(ISS_TLE)]), 2)

    def test_geosynchronous_never_crosses(self):
        with self.assertLogs("tletrack.antemeridian", level="WARNING") as logs:
            result = get_last_antemeridian_crossing_time_ms(
                ABS3_TLE, REFERENCE_TIME_MS, self.cache
            )
        self.assertEqual(result, NO_CROSSING_FOUND)
        self.assertEqual(result, -1)
        self.assertIn("No antemeridian crossing found", logs.output[0])

    def test_geosynchronous_sentinel_is_cached(self):
        get_last_antemeridian_crossing_time_ms(ABS3_TLE, REFERENCE_TIME_MS, self.cache)
        self.assertEqual(
            get_cached_last_antemeridian_crossing_time_ms(ABS3_TLE, 0, self.cache),
            NO_CROSSING_FOUND,
        )


def parse_lines(tle):
    return tuple(line.strip() for line in tle.splitlines()[1:])


if __name__ == "__main__":
    unittest.main()
