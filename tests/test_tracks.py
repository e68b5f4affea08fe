"""
Tests for orbit track and ground track builders

Run with:
    python -m pytest tests/test_tracks.py -v
"""

import unittest

from pydantic import ValidationError

from tletrack.antemeridian import crosses_antemeridian
from tletrack.cache import TLECache, get_cache_sizes
from tletrack.exceptions import PropagationError
from tletrack.sugar import get_average_orbit_time_ms
from tletrack.tracks import (
    get_ground_tracks,
    get_ground_tracks_sync,
    get_orbit_track,
    get_orbit_track_sync,
    iter_orbit_positions,
)

ISS_TLE = [
    "ISS (ZARYA)",
    "1 25544U 98067A   17206.51418347  .00001345  00000-0  27503-4 0  9993",
    "2 25544  51.6396 207.2711 0006223  72.3525  71.7719 15.54224686 67715",
]

ABS3_TLE = """ABS-3
1 24901U 97042A   17279.07057876  .00000084  00000-0  00000+0 0  9995
2 24901   5.0867  62.6208 0007858 138.4124 258.4388  0.99995119 73683"""

FLOCK_TLE = [
    "FLOCK 1B-28",
    "1 40423U 98067FP  15219.24788283  .05567779  12028-4  14293-2 0  9997",
    "2 40423  51.6133 170.3484 0007348 241.2767 118.7501 16.27910103 34192",
]

START_TIME_MS = 1501039265000


class TestOrbitTrackSync(unittest.TestCase):

    def setUp(self):
        self.cache = TLECache()

    def test_iss_orbit_track(self):
        coords = get_orbit_track_sync(ISS_TLE, START_TIME_MS, cache=self.cache)
        self.assertAlmostEqual(len(coords), 4595, delta=5)

    def test_track_is_bounded_by_orbit_period(self):
        step_ms = 1000
        coords = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=step_ms, cache=self.cache)
        self.assertGreater(len(coords), 0)
        self.assertLessEqual(len(coords), get_average_orbit_time_ms(ISS_TLE) // step_ms + 1)

    def test_track_never_crosses_antemeridian(self):
        coords = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=10000, cache=self.cache)
        for (lng1, _), (lng2, _) in zip(coords, coords[1:]):
            self.assertFalse(crosses_antemeridian(lng1, lng2))

    def test_lat_lng_format(self):
        lng_lat = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=60000, cache=self.cache)
        lat_lng = get_orbit_track_sync(
            ISS_TLE, START_TIME_MS, step_ms=60000, lng_lat_format=False, cache=self.cache
        )
        self.assertEqual([(lat, lng) for lng, lat in lng_lat], lat_lng)

    def test_geosynchronous_stops_at_time_ceiling(self):
        coords = get_orbit_track_sync(ABS3_TLE, START_TIME_MS, cache=self.cache)
        self.assertEqual(len(coords), 6001)

    def test_memoized(self):
        first = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=60000, cache=self.cache)
        second = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=60000, cache=self.cache)
        self.assertIs(first, second)
        self.assertEqual(get_cache_sizes(self.cache)[2], 1)

    def test_fractional_start_times_are_cached_apart(self):
        first = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=60000, cache=self.cache)
        second = get_orbit_track_sync(
            ISS_TLE, START_TIME_MS + 0.3, step_ms=60000, cache=self.cache
        )
        self.assertIsNot(first, second)
        self.assertEqual(get_cache_sizes(self.cache)[2], 2)

    def test_cache_is_transparent(self):
        first = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=60000, cache=self.cache)
        self.cache.clear()
        second = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=60000, cache=self.cache)
        self.assertEqual(first, second)

    def test_decayed_satellite(self):
        with self.assertRaises(PropagationError):
            get_orbit_track_sync(FLOCK_TLE, START_TIME_MS, cache=self.cache)

    def test_invalid_options(self):
        with self.assertRaises(ValidationError):
            get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=0, cache=self.cache)
        with self.assertRaises(ValidationError):
            get_orbit_track_sync(ISS_TLE, START_TIME_MS, max_time_ms=-1, cache=self.cache)


class TestOrbitPositions(unittest.TestCase):

    def setUp(self):
        self.cache = TLECache()

    def test_samples_are_timestamped(self):
        samples = list(iter_orbit_positions(ISS_TLE, START_TIME_MS, 60000, 600000, self.cache))
        self.assertEqual(samples[0].timestamp_ms, START_TIME_MS)
        self.assertEqual(samples[1].timestamp_ms - samples[0].timestamp_ms, 60000)

    def test_restartable(self):
        first = list(iter_orbit_positions(ISS_TLE, START_TIME_MS, 60000, 600000, self.cache))
        second = list(iter_orbit_positions(ISS_TLE, START_TIME_MS, 60000, 600000, self.cache))
        self.assertEqual(first, second)

    def test_time_ceiling(self):
        samples = list(iter_orbit_positions(ABS3_TLE, START_TIME_MS, 60000, 600000, self.cache))
        self.assertEqual(len(samples), 11)
        self.assertEqual(samples[-1].timestamp_ms - START_TIME_MS, 600000)


class TestGroundTracksSync(unittest.TestCase):

    def setUp(self):
        self.cache = TLECache()

    def test_three_orbits(self):
        tracks = get_ground_tracks_sync(ISS_TLE, START_TIME_MS, step_ms=10000, cache=self.cache)
        self.assertEqual(len(tracks), 3)

        # The ground track drifts west each revolution, so crossings are a little
        # more than one period apart
        max_points = int(get_average_orbit_time_ms(ISS_TLE) * 1.1) // 10000
        for track in tracks:
            self.assertGreater(len(track), 0)
            self.assertLessEqual(len(track), max_points)

        # Each orbit begins at the antemeridian
        for track in tracks:
            self.assertGreater(abs(track[0][0]), 170)

    def test_orbits_are_consecutive(self):
        tracks = get_ground_tracks_sync(ISS_TLE, START_TIME_MS, step_ms=10000, cache=self.cache)
        crossings = sorted(self.cache.antemeridian_crossings[tuple(ISS_TLE[1:])])
        self.assertEqual(len(crossings), 3)

        orbit_ms = get_average_orbit_time_ms(ISS_TLE)
        for earlier, later in zip(crossings, crossings[1:]):
            self.assertAlmostEqual(later - earlier, orbit_ms, delta=orbit_ms * 0.1)
        self.assertEqual(len(tracks), 3)

    def test_memoized(self):
        first = get_ground_tracks_sync(ISS_TLE, START_TIME_MS, step_ms=30000, cache=self.cache)
        second = get_ground_tracks_sync(ISS_TLE, START_TIME_MS, step_ms=30000, cache=self.cache)
        self.assertIs(first, second)
        self.assertEqual(get_cache_sizes(self.cache)[3], 1)

    def test_geosynchronous_single_track(self):
        tracks = get_ground_tracks_sync(ABS3_TLE, START_TIME_MS, cache=self.cache)
        self.assertEqual(len(tracks), 1)
        self.assertEqual(len(tracks[0]), 361)


class TestAsyncTracks(unittest.IsolatedAsyncioTestCase):
    """Test that the coroutine builders match the synchronous ones."""

    async def test_orbit_track_matches_sync(self):
        coords = await get_orbit_track(
            ISS_TLE, START_TIME_MS, step_ms=10000, job_chunk_size=50, cache=TLECache()
        )
        expected = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=10000, cache=TLECache())
        self.assertEqual(coords, expected)

    async def test_orbit_track_shares_cache(self):
        cache = TLECache()
        expected = get_orbit_track_sync(ISS_TLE, START_TIME_MS, step_ms=10000, cache=cache)
        coords = await get_orbit_track(ISS_TLE, START_TIME_MS, step_ms=10000, cache=cache)
        self.assertIs(coords, expected)

    async def test_orbit_track_with_sleep(self):
        coords = await get_orbit_track(
            ISS_TLE,
            START_TIME_MS,
            step_ms=60000,
            sleep_ms=1,
            job_chunk_size=10,
            cache=TLECache(),
        )
        self.assertGreater(len(coords), 10)

    async def test_ground_tracks_match_sync(self):
        tracks = await get_ground_tracks(
            ISS_TLE, START_TIME_MS, step_ms=10000, job_chunk_size=100, cache=TLECache()
        )
        expected = get_ground_tracks_sync(ISS_TLE, START_TIME_MS, step_ms=10000, cache=TLECache())
        self.assertEqual(tracks, expected)

    async def test_geosynchronous_ground_track(self):
        tracks = await get_ground_tracks(ABS3_TLE, START_TIME_MS, cache=TLECache())
        self.assertEqual(len(tracks), 1)
        self.assertEqual(len(tracks[0]), 361)

    async def test_invalid_chunk_size(self):
        with self.assertRaises(ValidationError):
            await get_orbit_track(ISS_TLE, START_TIME_MS, job_chunk_size=0, cache=TLECache())


if __name__ == "__main__":
    unittest.main()
