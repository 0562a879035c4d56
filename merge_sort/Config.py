from pathlib import Path

MAX_SAMPLE_TIME_MS = 2000
SAMPLE_SEED = 0

RESULT_PATH = Path("logs/statistics.csv")
STATISTICS_NS = list(range(1, 10)) + list(range(10, 100, 10)) + list(range(100, 1001, 100))

EXAMPLE_LIST = [234234, 9, 4, 5, 99, 1, -3, 0, -1]
