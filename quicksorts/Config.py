MAX_SAMPLE_TIME_MS = 2000
SAMPLE_SEED = 0x5EED

DEFAULT_MAX_N = 8
STATISTICS_NS = list(range(2, 10)) + list(range(10, 100, 10)) + list(range(100, 1001, 100))
